import re

from conftest import API, create_category, create_product


def _create_client(client, headers, **overrides):
    payload = {
        "company_name": "Blue Water Charters",
        "yacht_name": "Sea Breeze",
        "contact_person": "Alex Morgan",
        "email": "alex@bluewater.io",
    }
    payload.update(overrides)
    response = client.post(f"{API}/clients", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _create_order(client, headers):
    category = create_category(client, headers)
    wine = create_product(client, headers, category["id"], sku="WINE")
    water = create_product(client, headers, category["id"], sku="WATER")
    customer = _create_client(client, headers)

    response = client.post(
        f"{API}/orders",
        json={
            "client_id": customer["id"],
            "delivery_address": "Port Vauban, Antibes",
            "items": [
                {"product_id": wine["id"], "quantity": 3, "unit_price": "25.50"},
                {"product_id": water["id"], "quantity": 10, "unit_price": "1.20"},
            ],
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_order_totals_are_computed(client, auth_headers):
    order = _create_order(client, auth_headers)

    assert order["status"] == "DRAFT"
    assert order["total_amount"] == 88.5
    assert sorted(item["subtotal"] for item in order["items"]) == [12.0, 76.5]
    assert order["yacht_name"] == "Sea Breeze"
    assert order["created_by"] == "user-123"
    assert re.fullmatch(r"ORD-\d{8}-[0-9A-F]{6}", order["order_number"])


def test_duplicate_products_are_rejected(client, auth_headers):
    category = create_category(client, auth_headers)
    product = create_product(client, auth_headers, category["id"])
    customer = _create_client(client, auth_headers)
    item = {"product_id": product["id"], "quantity": 1, "unit_price": "5"}

    response = client.post(
        f"{API}/orders",
        json={"client_id": customer["id"], "delivery_address": "Dock 4", "items": [item, item]},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_status_change_stamps_timestamp(client, auth_headers):
    order = _create_order(client, auth_headers)
    assert order["confirmed_at"] is None

    response = client.patch(
        f"{API}/orders/{order['id']}/status",
        json={"status": "CONFIRMED"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "CONFIRMED"
    assert response.json()["confirmed_at"] is not None
    assert response.json()["shipped_at"] is None


def test_delivered_order_is_final(client, auth_headers):
    order = _create_order(client, auth_headers)
    client.patch(
        f"{API}/orders/{order['id']}/status",
        json={"status": "DELIVERED"},
        headers=auth_headers,
    )

    response = client.patch(
        f"{API}/orders/{order['id']}/status",
        json={"status": "CANCELLED"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_filter_by_status(client, auth_headers):
    order = _create_order(client, auth_headers)

    drafts = client.get(f"{API}/orders", params={"status": "DRAFT"}, headers=auth_headers).json()
    shipped = client.get(f"{API}/orders", params={"status": "SHIPPED"}, headers=auth_headers).json()

    assert [item["id"] for item in drafts] == [order["id"]]
    assert shipped == []


def test_client_email_is_validated(client, auth_headers):
    response = client.post(
        f"{API}/clients",
        json={"company_name": "X", "contact_person": "Y", "email": "not-an-email"},
        headers=auth_headers,
    )

    assert response.status_code == 422
