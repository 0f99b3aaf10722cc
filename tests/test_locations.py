from conftest import API, create_category, create_location, create_product


def test_paginated_list_filters(client, auth_headers):
    create_location(client, auth_headers, "Antibes Warehouse", address="Port Vauban")
    create_location(client, auth_headers, "Nice Depot", type="SUPPLIER")
    create_location(client, auth_headers, "Old Shed", is_active=False)

    by_search = client.get(f"{API}/locations", params={"search": "vauban"}, headers=auth_headers).json()
    by_type = client.get(f"{API}/locations", params={"type": "SUPPLIER"}, headers=auth_headers).json()
    inactive = client.get(f"{API}/locations", params={"is_active": False}, headers=auth_headers).json()

    assert [item["name"] for item in by_search["data"]] == ["Antibes Warehouse"]
    assert [item["name"] for item in by_type["data"]] == ["Nice Depot"]
    assert [item["name"] for item in inactive["data"]] == ["Old Shed"]


def test_paginated_list_meta_and_sorting(client, auth_headers):
    for name in ["Charlie", "Alpha", "Bravo"]:
        create_location(client, auth_headers, name)

    response = client.get(
        f"{API}/locations",
        params={"limit": 2, "sort_by": "name", "sort_order": "DESC"},
        headers=auth_headers,
    )

    body = response.json()
    assert [item["name"] for item in body["data"]] == ["Charlie", "Bravo"]
    assert body["meta"]["total"] == 3
    assert body["meta"]["has_next"] is True


def test_list_all(client, auth_headers):
    create_location(client, auth_headers, "Bravo")
    create_location(client, auth_headers, "Alpha")

    response = client.get(f"{API}/locations/all", headers=auth_headers)

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Alpha", "Bravo"]


def test_update_location(client, auth_headers):
    location = create_location(client, auth_headers, "Dock")

    response = client.put(
        f"{API}/locations/{location['id']}",
        json={"type": "IN_TRANSIT", "phone": "+377 99 99 99 99", "name": None},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "IN_TRANSIT"
    assert body["phone"] == "+377 99 99 99 99"
    assert body["name"] == "Dock"


def test_invalid_type_is_rejected(client, auth_headers):
    response = client.post(
        f"{API}/locations",
        json={"name": "Somewhere", "type": "SPACESHIP"},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_delete_cascades_to_areas_and_inventory(client, auth_headers):
    location = create_location(client, auth_headers)
    category = create_category(client, auth_headers)
    product = create_product(client, auth_headers, category["id"])
    area = client.post(
        f"{API}/areas",
        json={"location_id": location["id"], "name": "Zone A"},
        headers=auth_headers,
    ).json()
    inventory = client.post(
        f"{API}/inventory",
        json={"product_id": product["id"], "location_id": location["id"], "quantity": 4},
        headers=auth_headers,
    ).json()

    response = client.delete(f"{API}/locations/{location['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get(f"{API}/locations/{location['id']}", headers=auth_headers).status_code == 404
    assert client.get(f"{API}/areas/{area['id']}", headers=auth_headers).status_code == 404
    assert client.get(f"{API}/inventory/{inventory['id']}", headers=auth_headers).status_code == 404
    assert client.get(f"{API}/products/{product['id']}", headers=auth_headers).status_code == 200


def test_missing_location(client, auth_headers):
    response = client.put(
        f"{API}/locations/00000000-0000-0000-0000-000000000006",
        json={"name": "Ghost"},
        headers=auth_headers,
    )

    assert response.status_code == 404
