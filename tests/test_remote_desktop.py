from librestock.remote_desktop.url_utils import INVALID_SAVED_URL_MESSAGE, INVALID_URL_FORM_MESSAGE

COOKIE = "rbi_server_url"


def test_form_is_shown_without_saved_url(client):
    response = client.get("/remote-desktop", follow_redirects=False)

    assert response.status_code == 200
    assert 'name="server_url"' in response.text


def test_saved_url_redirects(client):
    client.cookies.set(COOKIE, "http://server:8080")

    response = client.get("/remote-desktop", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "http://server:8080"


def test_invalid_saved_url_is_cleared(client):
    client.cookies.set(COOKIE, "ftp://files")

    response = client.get("/remote-desktop", follow_redirects=False)

    assert response.status_code == 200
    assert INVALID_SAVED_URL_MESSAGE in response.text
    assert COOKIE in response.headers["set-cookie"]


def test_submit_saves_normalized_url(client):
    response = client.post(
        "/remote-desktop",
        data={"server_url": "  Server.Local:8080/login "},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "http://server.local:8080"
    assert f"{COOKIE}=" in response.headers["set-cookie"]


def test_submit_invalid_url(client):
    response = client.post(
        "/remote-desktop",
        data={"server_url": "not a url"},
        follow_redirects=False,
    )

    assert response.status_code == 400
    assert INVALID_URL_FORM_MESSAGE in response.text
    assert "set-cookie" not in response.headers


def test_clear_redirects_back_to_form(client):
    response = client.post("/remote-desktop/clear", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/remote-desktop"
    assert COOKIE in response.headers["set-cookie"]
