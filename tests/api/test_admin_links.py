"""
Tests for the admin links API.

Authentication runs for real against signed tokens; storage is in memory.
"""

from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from linkpage.api import deps
from linkpage.api.auth_utils import create_access_token, token_for_owner
from linkpage.api.routes import admin_links
from linkpage.components.links import LinkService


@pytest.fixture
def service(link_repo) -> LinkService:
    return LinkService(link_repo)


@pytest.fixture
def app(service, link_repo) -> FastAPI:
    app = FastAPI()
    app.include_router(admin_links.router, prefix="/api/admin")
    app.dependency_overrides[deps.get_link_service] = lambda: service
    app.dependency_overrides[deps.get_link_repo] = lambda: link_repo
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers(owner) -> dict[str, str]:
    token = token_for_owner(owner)
    return {"Authorization": f"Bearer {token}"}


def create(client, headers, title, url="https://example.com", **extra):
    response = client.post(
        "/api/admin/links", json={"title": title, "url": url, **extra}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


# --- Authentication ---


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("get", "/api/admin/links"),
        ("post", "/api/admin/links"),
        ("get", f"/api/admin/links/{uuid4()}"),
        ("put", f"/api/admin/links/{uuid4()}"),
        ("delete", f"/api/admin/links/{uuid4()}"),
        ("post", "/api/admin/links/reorder"),
    ],
)
def test_requires_auth(client, method, path):
    response = client.request(method, path, json={})

    assert response.status_code == 401


def test_rejects_bad_token(client):
    response = client.get("/api/admin/links", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_token_without_uuid_subject_is_rejected(client):
    token = create_access_token({"sub": "alice"})

    response = client.get("/api/admin/links", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_cookie_token_is_accepted(client, owner):
    token = create_access_token({"sub": str(owner.id)})

    response = client.get("/api/admin/links", headers={"Cookie": f"access_token=Bearer {token}"})

    assert response.status_code == 200


# --- CRUD ---


def test_create_and_list(client, auth_headers):
    first = create(client, auth_headers, "Shop", "shop.example.com", icon="website")
    create(client, auth_headers, "Blog")

    response = client.get("/api/admin/links", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [item["title"] for item in data["items"]] == ["Shop", "Blog"]
    assert first["url"] == "https://shop.example.com"
    assert first["position"] == 0
    assert first["clicks"] == 0
    assert first["icon_style"] == "filled"


def test_create_validation_errors(client, auth_headers):
    response = client.post(
        "/api/admin/links",
        json={"title": "", "url": "ftp://files.example.com"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    codes = {err["code"] for err in response.json()["detail"]}
    assert codes == {"title_required", "url_invalid_scheme"}


def test_get_update_delete(client, auth_headers):
    link = create(client, auth_headers, "Shop")

    fetched = client.get(f"/api/admin/links/{link['id']}", headers=auth_headers)
    updated = client.put(
        f"/api/admin/links/{link['id']}",
        json={"title": "Store", "description": "Deals"},
        headers=auth_headers,
    )
    deleted = client.delete(f"/api/admin/links/{link['id']}", headers=auth_headers)
    missing = client.get(f"/api/admin/links/{link['id']}", headers=auth_headers)

    assert fetched.json()["title"] == "Shop"
    assert updated.json()["title"] == "Store"
    assert updated.json()["description"] == "Deals"
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_update_missing_link_is_404(client, auth_headers):
    response = client.put(
        f"/api/admin/links/{uuid4()}", json={"title": "Store"}, headers=auth_headers
    )

    assert response.status_code == 404


def test_other_owner_cannot_see_link(client, auth_headers, other_owner):
    link = create(client, auth_headers, "Shop")
    token = create_access_token({"sub": str(other_owner.id)})

    response = client.get(
        f"/api/admin/links/{link['id']}", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 404


def test_toggle_flips_or_sets(client, auth_headers):
    link = create(client, auth_headers, "Shop")

    flipped = client.post(f"/api/admin/links/{link['id']}/toggle", headers=auth_headers)
    forced = client.post(
        f"/api/admin/links/{link['id']}/toggle", json={"is_active": False}, headers=auth_headers
    )

    assert flipped.json()["is_active"] is False
    assert forced.json()["is_active"] is False


# --- Reorder ---


def test_reorder_moves_and_reindexes(client, auth_headers):
    a = create(client, auth_headers, "A")
    b = create(client, auth_headers, "B")
    c = create(client, auth_headers, "C")

    response = client.post(
        "/api/admin/links/reorder",
        json={"item_id": c["id"], "from_index": 2, "to_index": 0},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["order"] == [c["id"], a["id"], b["id"]]
    listing = client.get("/api/admin/links", headers=auth_headers).json()
    assert [(i["title"], i["position"]) for i in listing["items"]] == [
        ("C", 0),
        ("A", 1),
        ("B", 2),
    ]


def test_reorder_replay_writes_nothing(client, auth_headers):
    a = create(client, auth_headers, "A")
    create(client, auth_headers, "B")
    body = {"item_id": a["id"], "from_index": 0, "to_index": 1}

    client.post("/api/admin/links/reorder", json=body, headers=auth_headers)
    replay = client.post("/api/admin/links/reorder", json=body, headers=auth_headers)

    assert replay.status_code == 200
    assert replay.json()["writes"] == 0


def test_reorder_out_of_range_is_400(client, auth_headers):
    a = create(client, auth_headers, "A")

    response = client.post(
        "/api/admin/links/reorder",
        json={"item_id": a["id"], "from_index": 0, "to_index": 5},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"][0]["code"] == "invalid_index"


def test_reorder_unknown_item_is_404(client, auth_headers):
    create(client, auth_headers, "A")

    response = client.post(
        "/api/admin/links/reorder",
        json={"item_id": str(uuid4()), "from_index": 0, "to_index": 0},
        headers=auth_headers,
    )

    assert response.status_code == 404
