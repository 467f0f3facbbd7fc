import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(tmp_path, monkeypatch):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        f"""
# Data directory for the database and logs
data_dir = "{tmp_path.as_posix()}"

[media]
base_url = "https://cdn.example.com"

[editor]
repair_alert_threshold = 1

[[pages]]
slug = "home"
title = "Home"

[[pages]]
slug = "pricing"
title = "Pricing"
""",
        encoding="utf-8",
    )

    monkeypatch.setenv("CONFIG_FILE", str(config_file))
    monkeypatch.setenv("SECTIONCMS_DB_PATH", str(tmp_path / "sectioncms.db"))

    from sectioncms.api import create_app

    app = create_app()
    with TestClient(app) as client:
        yield client


def _page_id(client: TestClient, slug: str) -> int:
    pages = client.get("/api/v1/pages").json()["pages"]
    return next(page["id"] for page in pages if page["slug"] == slug)


def _controls(groups):
    return {control["key"]: control for group in groups for control in group["controls"]}


def _open_hero(client: TestClient) -> str:
    response = client.post(
        "/api/v1/sessions",
        json={"section_type": "hero", "page_id": _page_id(client, "home")},
    )
    assert response.status_code == 200
    return response.json()["session_id"]


def test_list_pages(client: TestClient):
    response = client.get("/api/v1/pages")
    assert response.status_code == 200
    assert [page["slug"] for page in response.json()["pages"]] == ["home", "pricing"]


def test_open_new_section(client: TestClient):
    response = client.post(
        "/api/v1/sessions",
        json={"section_type": "gallery", "page_id": _page_id(client, "home"), "order_index": 2},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["content_id"] is None
    assert data["read_only"] is False
    assert data["form"]["type_id"] == "gallery"
    assert data["form"]["order_index"] == 2
    assert [group["id"] for group in data["form"]["groups"]][0] == "content"


def test_open_unknown_type(client: TestClient):
    response = client.post("/api/v1/sessions", json={"section_type": "nope"})
    assert response.status_code == 404


def test_open_requires_type_or_section(client: TestClient):
    response = client.post("/api/v1/sessions", json={})
    assert response.status_code == 400


def test_open_missing_section(client: TestClient):
    response = client.post("/api/v1/sessions", json={"section_id": 999})
    assert response.status_code == 404


def test_edit_submit_and_reopen(client: TestClient):
    session_id = _open_hero(client)

    response = client.post(
        f"/api/v1/sessions/{session_id}/set",
        json={"path": ["title"], "value": "Find your match"},
    )
    assert response.status_code == 200
    assert response.json()["result"]["value"] == "Find your match"

    response = client.post(
        f"/api/v1/sessions/{session_id}/splice",
        json={"path": ["stats"], "index": 0, "count": 0, "items": [{"text": "a"}, {"text": "b"}]},
    )
    assert response.status_code == 200
    stats = _controls(response.json()["form"]["groups"])["stats"]
    assert [item["label"] for item in stats["items"]] == ["Item 1", "Item 2"]

    response = client.post(
        f"/api/v1/sessions/{session_id}/move",
        json={"path": ["stats"], "source": 1, "target": 0},
    )
    assert response.status_code == 200
    assert [item["text"] for item in response.json()["result"]["value"]] == ["b", "a"]

    response = client.post(
        f"/api/v1/sessions/{session_id}/placement",
        json={"published": True, "order_index": "3"},
    )
    assert response.status_code == 200

    response = client.post(f"/api/v1/sessions/{session_id}/submit", json={})
    assert response.status_code == 200
    content_id = response.json()["content_id"]
    assert content_id is not None

    response = client.post("/api/v1/sessions", json={"section_id": content_id})
    assert response.status_code == 200
    form = response.json()["form"]
    assert form["published"] is True
    assert form["order_index"] == 3
    assert _controls(form["groups"])["title"]["value"] == "Find your match"


def test_rejected_mutation(client: TestClient):
    session_id = _open_hero(client)

    response = client.post(
        f"/api/v1/sessions/{session_id}/set",
        json={"path": ["stats"], "value": "x"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["result"]["ok"] is False
    assert data["result"]["message"]
    assert data["form"]["type_id"] == "hero"


def test_toggle_group(client: TestClient):
    session_id = _open_hero(client)

    response = client.post(
        f"/api/v1/sessions/{session_id}/toggle",
        json={"path": [], "group": "advanced"},
    )

    assert response.status_code == 200
    groups = {group["id"]: group for group in response.json()["form"]["groups"]}
    assert groups["advanced"]["collapsed"] is False


def test_submit_without_page(client: TestClient):
    response = client.post("/api/v1/sessions", json={"section_type": "hero"})
    session_id = response.json()["session_id"]

    response = client.post(f"/api/v1/sessions/{session_id}/submit", json={})

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["errors"] == [{"loc": "page_id", "msg": "Field required"}]


def test_submit_to_missing_page(client: TestClient):
    response = client.post("/api/v1/sessions", json={"section_type": "hero"})
    session_id = response.json()["session_id"]

    response = client.post(f"/api/v1/sessions/{session_id}/submit", json={"page_id": 999})

    assert response.status_code == 502
    assert "999" in response.json()["error"]


def test_stored_section_of_unknown_type_is_read_only(client: TestClient):
    from sectioncms.db import save_section

    section_id = save_section(_page_id(client, "home"), "retired-banner", {"headline": "Old"})

    response = client.post("/api/v1/sessions", json={"section_id": section_id})

    assert response.status_code == 200
    data = response.json()
    assert data["read_only"] is True
    assert data["form"]["fallback"] is not None
    assert data["form"]["diagnostics"][0]["kind"] == "unknown_contract"


def test_stored_legacy_data_is_repaired(client: TestClient):
    from sectioncms.db import save_section

    section_id = save_section(
        _page_id(client, "home"), "gallery", {"images": "not-an-array", "title": 7}
    )

    response = client.post("/api/v1/sessions", json={"section_id": section_id})

    form = response.json()["form"]
    assert form["repair_warning"] is True
    assert _controls(form["groups"])["images"]["items"] == []


def test_cancel_session(client: TestClient):
    session_id = _open_hero(client)

    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 404


def test_get_session_form(client: TestClient):
    session_id = _open_hero(client)
    response = client.get(f"/api/v1/sessions/{session_id}")
    assert response.status_code == 200
    assert response.json()["form"]["label"] == "Hero Section"
