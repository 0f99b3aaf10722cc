from librestock.services.branding import DEFAULT_BRANDING, POWERED_BY, BrandingService
from librestock.schemas.branding import BrandingUpdate

from conftest import API


def test_get_without_row_returns_defaults(db_session):
    branding = BrandingService(db_session).get()

    assert branding.app_name == "LibreStock"
    assert branding.tagline == DEFAULT_BRANDING["tagline"]
    assert branding.primary_color == "#3b82f6"
    assert branding.logo_url is None
    assert branding.powered_by.model_dump() == POWERED_BY
    assert branding.updated_at is not None


def test_get_without_row_does_not_write(db_session):
    from librestock.models.branding import BrandingSettings

    BrandingService(db_session).get()

    assert db_session.query(BrandingSettings).count() == 0


def test_update_merges_only_provided_fields(db_session):
    service = BrandingService(db_session)

    service.update(BrandingUpdate(app_name="Yacht Stores", tagline="Provisioning"), "user-1")
    branding = service.update(BrandingUpdate(primary_color="#112233"), "user-2")

    assert branding.app_name == "Yacht Stores"
    assert branding.tagline == "Provisioning"
    assert branding.primary_color == "#112233"
    assert branding.powered_by.name == "LibreStock"


def test_update_keeps_single_row(db_session):
    from librestock.models.branding import BrandingSettings

    service = BrandingService(db_session)
    service.update(BrandingUpdate(app_name="One"), "user-1")
    service.update(BrandingUpdate(app_name="Two"), "user-1")

    rows = db_session.query(BrandingSettings).all()
    assert len(rows) == 1
    assert rows[0].id == 1
    assert rows[0].updated_by == "user-1"


def test_get_branding_is_public(client):
    response = client.get(f"{API}/branding")

    assert response.status_code == 200
    body = response.json()
    assert body["app_name"] == "LibreStock"
    assert body["powered_by"] == POWERED_BY


def test_put_branding_requires_auth(client):
    response = client.put(f"{API}/branding", json={"app_name": "X"})

    assert response.status_code == 401


def test_put_branding_validates_color(client, auth_headers):
    response = client.put(
        f"{API}/branding",
        json={"primary_color": "blue"},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_put_branding_updates(client, auth_headers):
    response = client.put(
        f"{API}/branding",
        json={"app_name": "Riviera Supply", "logo_url": "https://cdn.example.com/logo.png"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["app_name"] == "Riviera Supply"
    assert body["logo_url"] == "https://cdn.example.com/logo.png"
    assert body["primary_color"] == "#3b82f6"
    assert body["powered_by"] == POWERED_BY
