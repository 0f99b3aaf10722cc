from conftest import API


def _create_client(client, headers, company_name="Blue Water Charters", **overrides):
    payload = {
        "company_name": company_name,
        "contact_person": "Alex Morgan",
        "email": "alex@bluewater.io",
    }
    payload.update(overrides)
    response = client.post(f"{API}/clients", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_defaults_to_active(client, auth_headers):
    customer = _create_client(client, auth_headers, credit_limit="5000.00")

    assert customer["account_status"] == "ACTIVE"
    assert customer["credit_limit"] == 5000.0


def test_filter_by_account_status(client, auth_headers):
    _create_client(client, auth_headers, "Active Co")
    _create_client(client, auth_headers, "Paused Co", account_status="SUSPENDED")

    response = client.get(
        f"{API}/clients",
        params={"account_status": "SUSPENDED"},
        headers=auth_headers,
    )

    assert [item["company_name"] for item in response.json()] == ["Paused Co"]


def test_search_matches_yacht_name(client, auth_headers):
    _create_client(client, auth_headers, "Blue Water Charters", yacht_name="Sea Breeze")
    _create_client(client, auth_headers, "Harbour Holdings", yacht_name="Northern Star")

    response = client.get(f"{API}/clients", params={"search": "breeze"}, headers=auth_headers)

    assert [item["company_name"] for item in response.json()] == ["Blue Water Charters"]


def test_update_client(client, auth_headers):
    customer = _create_client(client, auth_headers)

    response = client.put(
        f"{API}/clients/{customer['id']}",
        json={"account_status": "INACTIVE", "payment_terms": "Net 30", "email": None},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["account_status"] == "INACTIVE"
    assert body["payment_terms"] == "Net 30"
    assert body["email"] == "alex@bluewater.io"

    history = client.get(
        f"{API}/audit-logs/entity/client/{customer['id']}",
        headers=auth_headers,
    ).json()
    assert "STATUS_CHANGE" in [entry["action"] for entry in history]


def test_delete_client(client, auth_headers):
    customer = _create_client(client, auth_headers)

    response = client.delete(f"{API}/clients/{customer['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get(f"{API}/clients/{customer['id']}", headers=auth_headers).status_code == 404


def test_missing_client(client, auth_headers):
    response = client.delete(
        f"{API}/clients/00000000-0000-0000-0000-000000000007",
        headers=auth_headers,
    )

    assert response.status_code == 404
