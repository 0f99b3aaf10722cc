from uuid import uuid4

from conftest import API, create_category, create_product


def test_create_and_get_product(client, auth_headers):
    category = create_category(client, auth_headers)
    product = create_product(
        client,
        auth_headers,
        category["id"],
        sku="WINE-001",
        standard_cost="10.00",
        standard_price="15.50",
        dimensions_cm="10x20x5.5",
    )

    assert product["created_by"] == "user-123"
    assert product["standard_price"] == 15.5

    response = client.get(f"{API}/products/{product['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["sku"] == "WINE-001"


def test_price_below_cost_is_rejected(client, auth_headers):
    category = create_category(client, auth_headers)

    response = client.post(
        f"{API}/products",
        json={
            "sku": "X-1",
            "name": "Cheap",
            "category_id": category["id"],
            "standard_cost": "20",
            "standard_price": "10",
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Standard price must be greater than or equal to standard cost"


def test_update_checks_merged_price(client, auth_headers):
    category = create_category(client, auth_headers)
    product = create_product(
        client, auth_headers, category["id"], standard_cost="10", standard_price="12"
    )

    response = client.put(
        f"{API}/products/{product['id']}",
        json={"standard_price": "5"},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_duplicate_sku(client, auth_headers):
    category = create_category(client, auth_headers)
    create_product(client, auth_headers, category["id"], sku="DUP")

    response = client.post(
        f"{API}/products",
        json={"sku": "DUP", "name": "Again", "category_id": category["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "A product with this SKU already exists"


def test_invalid_dimensions(client, auth_headers):
    category = create_category(client, auth_headers)

    response = client.post(
        f"{API}/products",
        json={"sku": "D-1", "name": "Box", "category_id": category["id"], "dimensions_cm": "10 by 20"},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_paginated_list(client, auth_headers):
    category = create_category(client, auth_headers)
    for index in range(5):
        create_product(client, auth_headers, category["id"], sku=f"P-{index}", name=f"Item {index}")

    response = client.get(
        f"{API}/products",
        params={"page": 2, "limit": 2, "sort_by": "sku", "sort_order": "ASC"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["sku"] for item in body["data"]] == ["P-2", "P-3"]
    assert body["meta"] == {
        "page": 2,
        "limit": 2,
        "total": 5,
        "total_pages": 3,
        "has_next": True,
        "has_previous": True,
    }


def test_search_matches_name_and_sku(client, auth_headers):
    category = create_category(client, auth_headers)
    create_product(client, auth_headers, category["id"], sku="CHAMP-01", name="Champagne")
    create_product(client, auth_headers, category["id"], sku="OLIVE-01", name="Olive Oil")

    response = client.get(f"{API}/products", params={"search": "olive"}, headers=auth_headers)

    assert [item["sku"] for item in response.json()["data"]] == ["OLIVE-01"]


def test_limit_above_maximum_is_rejected(client, auth_headers):
    response = client.get(f"{API}/products", params={"limit": 101}, headers=auth_headers)

    assert response.status_code == 422


def test_products_by_category_tree(client, auth_headers):
    drinks = create_category(client, auth_headers, "Drinks")
    wine = create_category(client, auth_headers, "Wine", parent_id=drinks["id"])
    red = create_category(client, auth_headers, "Red", parent_id=wine["id"])
    food = create_category(client, auth_headers, "Food")

    create_product(client, auth_headers, drinks["id"], sku="D-1")
    create_product(client, auth_headers, red["id"], sku="R-1")
    create_product(client, auth_headers, food["id"], sku="F-1")

    direct = client.get(f"{API}/products/category/{drinks['id']}", headers=auth_headers)
    tree = client.get(f"{API}/products/category/{drinks['id']}/tree", headers=auth_headers)

    assert [item["sku"] for item in direct.json()] == ["D-1"]
    assert sorted(item["sku"] for item in tree.json()) == ["D-1", "R-1"]


def test_bulk_create_reports_each_item(client, auth_headers):
    category = create_category(client, auth_headers)
    create_product(client, auth_headers, category["id"], sku="EXISTING")

    response = client.post(
        f"{API}/products/bulk",
        json={
            "products": [
                {"sku": "NEW-1", "name": "New 1", "category_id": category["id"]},
                {"sku": "TWICE", "name": "Twice A", "category_id": category["id"]},
                {"sku": "TWICE", "name": "Twice B", "category_id": category["id"]},
                {"sku": "EXISTING", "name": "Existing", "category_id": category["id"]},
            ]
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success_count"] == 1
    assert body["failure_count"] == 3
    assert body["failures"] == [
        {"sku": "TWICE", "error": "Duplicate SKU in request"},
        {"sku": "TWICE", "error": "Duplicate SKU in request"},
        {"sku": "EXISTING", "error": "A product with this SKU already exists"},
    ]


def test_bulk_create_missing_category_fails_everything(client, auth_headers):
    category = create_category(client, auth_headers)
    missing = str(uuid4())

    response = client.post(
        f"{API}/products/bulk",
        json={
            "products": [
                {"sku": "A", "name": "A", "category_id": category["id"]},
                {"sku": "B", "name": "B", "category_id": missing},
            ]
        },
        headers=auth_headers,
    )

    body = response.json()
    assert body["success_count"] == 0
    assert body["failure_count"] == 2
    assert {failure["error"] for failure in body["failures"]} == {f"Category {missing} not found"}


def test_bulk_status_and_delete(client, auth_headers):
    category = create_category(client, auth_headers)
    first = create_product(client, auth_headers, category["id"], sku="S-1")
    second = create_product(client, auth_headers, category["id"], sku="S-2")
    missing = str(uuid4())

    status_response = client.patch(
        f"{API}/products/bulk/status",
        json={"ids": [first["id"], missing, second["id"]], "is_active": False},
        headers=auth_headers,
    )
    body = status_response.json()
    assert body["success_count"] == 2
    assert body["succeeded"] == [first["id"], second["id"]]
    assert body["failures"] == [{"id": missing, "error": "Product not found"}]

    fetched = client.get(f"{API}/products/{first['id']}", headers=auth_headers).json()
    assert fetched["is_active"] is False

    delete_response = client.post(
        f"{API}/products/bulk/delete",
        json={"ids": [first["id"], missing]},
        headers=auth_headers,
    )
    body = delete_response.json()
    assert body["success_count"] == 1
    assert body["failure_count"] == 1
    assert client.get(f"{API}/products/{first['id']}", headers=auth_headers).status_code == 404


def test_bulk_create_rejects_empty_batch(client, auth_headers):
    response = client.post(f"{API}/products/bulk", json={"products": []}, headers=auth_headers)

    assert response.status_code == 422


def test_photos_are_ordered(client, auth_headers):
    category = create_category(client, auth_headers)
    product = create_product(client, auth_headers, category["id"])

    for url in ["https://img/1.jpg", "https://img/2.jpg"]:
        response = client.post(
            f"{API}/products/{product['id']}/photos",
            json={"url": url},
            headers=auth_headers,
        )
        assert response.status_code == 201

    photos = client.get(f"{API}/products/{product['id']}/photos", headers=auth_headers).json()
    assert [(photo["url"], photo["display_order"]) for photo in photos] == [
        ("https://img/1.jpg", 0),
        ("https://img/2.jpg", 1),
    ]

    response = client.delete(
        f"{API}/products/{product['id']}/photos/{photos[0]['id']}",
        headers=auth_headers,
    )
    assert response.status_code == 204


def test_bulk_status_with_repeated_ids(client, auth_headers):
    category = create_category(client, auth_headers)
    first = create_product(client, auth_headers, category["id"], sku="R-1")
    second = create_product(client, auth_headers, category["id"], sku="R-2")

    response = client.patch(
        f"{API}/products/bulk/status",
        json={"ids": [first["id"], first["id"], second["id"]], "is_active": False},
        headers=auth_headers,
    )

    body = response.json()
    assert body["success_count"] == 2
    assert body["succeeded"] == [first["id"], second["id"]]
    assert body["failure_count"] == 0

    history = client.get(
        f"{API}/audit-logs/entity/product/{second['id']}",
        headers=auth_headers,
    ).json()
    assert "STATUS_CHANGE" in [entry["action"] for entry in history]


def test_bulk_delete_with_repeated_ids(client, auth_headers):
    category = create_category(client, auth_headers)
    first = create_product(client, auth_headers, category["id"], sku="D-1")
    second = create_product(client, auth_headers, category["id"], sku="D-2")

    response = client.post(
        f"{API}/products/bulk/delete",
        json={"ids": [first["id"], first["id"], second["id"]]},
        headers=auth_headers,
    )

    body = response.json()
    assert body["success_count"] == 2
    assert body["succeeded"] == [first["id"], second["id"]]
    assert client.get(f"{API}/products/{second['id']}", headers=auth_headers).status_code == 404

    history = client.get(
        f"{API}/audit-logs/entity/product/{second['id']}",
        headers=auth_headers,
    ).json()
    assert "DELETE" in [entry["action"] for entry in history]


def test_update_ignores_null_for_required_fields(client, auth_headers):
    category = create_category(client, auth_headers)
    product = create_product(client, auth_headers, category["id"], name="Sparkling Water")

    response = client.put(
        f"{API}/products/{product['id']}",
        json={"name": None, "is_active": None, "notes": None},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Sparkling Water"
    assert response.json()["is_active"] is True


def test_unknown_supplier_is_rejected(client, auth_headers):
    category = create_category(client, auth_headers)
    product = create_product(client, auth_headers, category["id"], sku="SUP-1")

    create_response = client.post(
        f"{API}/products",
        json={
            "sku": "SUP-2",
            "name": "Olive Oil",
            "category_id": category["id"],
            "primary_supplier_id": str(uuid4()),
        },
        headers=auth_headers,
    )
    update_response = client.put(
        f"{API}/products/{product['id']}",
        json={"primary_supplier_id": str(uuid4())},
        headers=auth_headers,
    )

    assert create_response.status_code == 400
    assert create_response.json()["detail"] == "Supplier not found"
    assert update_response.status_code == 400
    assert update_response.json()["detail"] == "Supplier not found"


def test_bulk_create_unknown_supplier(client, auth_headers):
    category = create_category(client, auth_headers)

    response = client.post(
        f"{API}/products/bulk",
        json={
            "products": [
                {"sku": "OK-1", "name": "Ok", "category_id": category["id"]},
                {
                    "sku": "BAD-1",
                    "name": "Bad",
                    "category_id": category["id"],
                    "primary_supplier_id": str(uuid4()),
                },
            ]
        },
        headers=auth_headers,
    )

    body = response.json()
    assert body["success_count"] == 1
    assert body["failures"] == [{"sku": "BAD-1", "error": "Supplier not found"}]
