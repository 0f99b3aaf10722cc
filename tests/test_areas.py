from conftest import API, create_location


def _create_area(client, headers, location_id, name, parent_id=None):
    payload = {"location_id": location_id, "name": name}
    if parent_id:
        payload["parent_id"] = parent_id
    return client.post(f"{API}/areas", json=payload, headers=headers)


def test_hierarchy_for_location(client, auth_headers):
    location = create_location(client, auth_headers)
    zone = _create_area(client, auth_headers, location["id"], "Zone A").json()
    _create_area(client, auth_headers, location["id"], "Shelf 1", parent_id=zone["id"])

    response = client.get(
        f"{API}/areas",
        params={"location_id": location["id"], "include_children": True},
        headers=auth_headers,
    )

    assert response.status_code == 200
    tree = response.json()
    assert len(tree) == 1
    assert tree[0]["name"] == "Zone A"
    assert [child["name"] for child in tree[0]["children"]] == ["Shelf 1"]


def test_include_children_requires_location(client, auth_headers):
    response = client.get(f"{API}/areas", params={"include_children": True}, headers=auth_headers)

    assert response.status_code == 400


def test_parent_from_other_location(client, auth_headers):
    first = create_location(client, auth_headers, "First")
    second = create_location(client, auth_headers, "Second")
    parent = _create_area(client, auth_headers, first["id"], "Zone").json()

    response = _create_area(client, auth_headers, second["id"], "Shelf", parent_id=parent["id"])

    assert response.status_code == 400
    assert response.json()["detail"] == "Parent area must belong to the same location"


def test_missing_location(client, auth_headers):
    response = _create_area(
        client, auth_headers, "00000000-0000-0000-0000-000000000004", "Zone"
    )

    assert response.status_code == 400


def test_reparent_under_child_is_rejected(client, auth_headers):
    location = create_location(client, auth_headers)
    zone = _create_area(client, auth_headers, location["id"], "Zone").json()
    shelf = _create_area(client, auth_headers, location["id"], "Shelf", parent_id=zone["id"]).json()

    response = client.put(
        f"{API}/areas/{zone['id']}",
        json={"parent_id": shelf["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot set parent: would create circular reference"


def test_children_and_delete(client, auth_headers):
    location = create_location(client, auth_headers)
    zone = _create_area(client, auth_headers, location["id"], "Zone").json()
    _create_area(client, auth_headers, location["id"], "Bin", parent_id=zone["id"])

    children = client.get(f"{API}/areas/{zone['id']}/children", headers=auth_headers).json()
    assert [child["name"] for child in children] == ["Bin"]

    response = client.delete(f"{API}/areas/{zone['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"{API}/areas/{zone['id']}", headers=auth_headers).status_code == 404
