"""Tests for gallery endpoints."""

from fastapi.testclient import TestClient

from photoflow.domain.sessions import ACCESS_CODE_LENGTH

SESSION_PAYLOAD = {
    "name": "Engagement shoot",
    "client_name": "Clara",
    "client_email": "clara@photoclient.com",
    "session_date": "2024-12-15T14:30:00Z",
    "max_album_selections": 1,
}


def _create_session(client: TestClient, headers: dict[str, str]) -> dict:
    response = client.post(
        "/api/gallery/sessions", json=SESSION_PAYLOAD, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def _upload(
    client: TestClient, headers: dict[str, str], session_id: int, *names: str
) -> list[dict]:
    response = client.post(
        f"/api/gallery/sessions/{session_id}/photos",
        json={"photos": [{"filename": name} for name in names]},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["photos"]


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_photographer_routes_require_token(client: TestClient) -> None:
    missing = client.get("/api/gallery/dashboard")
    invalid = client.get(
        "/api/gallery/dashboard", headers={"Authorization": "Bearer nope"}
    )

    assert missing.status_code == 401
    assert missing.json() == {
        "error": "Access token required",
        "code": "TOKEN_REQUIRED",
    }
    assert invalid.status_code == 403
    assert invalid.json()["code"] == "TOKEN_INVALID"


def test_create_session_returns_access_code(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    data = _create_session(client, auth_headers)

    assert len(data["access_code"]) == 6
    assert data["share_url"] == f"/gallery/{data['access_code']}"
    assert data["session"]["status"] == "active"
    assert data["session"]["settings"]["max_album_selections"] == 1


def test_create_session_validates_payload(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/gallery/sessions",
        json={**SESSION_PAYLOAD, "client_email": "not-an-email"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["details"]


def test_zero_selection_cap_is_rejected(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/gallery/sessions",
        json={**SESSION_PAYLOAD, "max_album_selections": 0},
        headers=auth_headers,
    )

    assert response.status_code == 400


def test_client_gallery_and_selection_flow(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    session = _create_session(client, auth_headers)
    code = session["access_code"]
    photos = _upload(
        client, auth_headers, session["session"]["id"], "DSC_1.NEF", "DSC_2.NEF"
    )

    gallery = client.get(f"/api/gallery/session/{code.lower()}")
    selected = client.post(
        f"/api/gallery/session/{code}/select",
        json={"photo_id": photos[0]["id"], "selection_type": "album", "selected": True},
    )
    capped = client.post(
        f"/api/gallery/session/{code}/select",
        json={"photo_id": photos[1]["id"], "selection_type": "album", "selected": True},
    )

    assert gallery.status_code == 200
    assert gallery.json()["total_photos"] == 2
    assert gallery.json()["instructions"]["max_album"] == 1
    assert "client_email" not in gallery.json()["session"]
    assert selected.status_code == 200
    assert selected.json()["photo"]["selected_for_album"] is True
    assert selected.json()["session_stats"]["pending"] == 1
    assert capped.status_code == 400
    assert capped.json()["code"] == "SELECTION_LIMIT_REACHED"


def test_select_rejects_unknown_selection_type(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    session = _create_session(client, auth_headers)
    photos = _upload(client, auth_headers, session["session"]["id"], "a.jpg")

    response = client.post(
        f"/api/gallery/session/{session['access_code']}/select",
        json={"photo_id": photos[0]["id"], "selection_type": "print", "selected": True},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_access_code_must_have_six_characters(client: TestClient) -> None:
    response = client.get("/api/gallery/session/ABC")

    assert response.status_code == 400


def test_unknown_gallery_is_not_found(client: TestClient) -> None:
    response = client.get("/api/gallery/session/ZZZZZZ")

    assert response.status_code == 404
    assert response.json()["code"] == "GALLERY_NOT_FOUND"


def test_stats_and_export(client: TestClient, auth_headers: dict[str, str]) -> None:
    session = _create_session(client, auth_headers)
    session_id = session["session"]["id"]
    photos = _upload(client, auth_headers, session_id, "A.NEF", "B.CR2")
    client.post(
        f"/api/gallery/session/{session['access_code']}/select",
        json={
            "photo_id": photos[1]["id"],
            "selection_type": "general",
            "selected": True,
        },
    )

    stats = client.get(
        f"/api/gallery/sessions/{session_id}/stats", headers=auth_headers
    )
    export = client.get(
        f"/api/gallery/sessions/{session_id}/export", headers=auth_headers
    )

    assert stats.json()["stats"]["selected_by_client"] == 1
    assert stats.json()["lightroom_filters"]["client"] == "B"
    assert export.json()["filters"]["all_selected"] == ["B"]
    assert export.json()["lightroom_text"]["album"] == ""


def test_foreign_session_is_hidden(
    client: TestClient,
    auth_headers: dict[str, str],
    other_auth_headers: dict[str, str],
) -> None:
    session = _create_session(client, auth_headers)
    session_id = session["session"]["id"]

    response = client.get(
        f"/api/gallery/sessions/{session_id}/stats", headers=other_auth_headers
    )

    assert response.status_code == 404
    assert response.json()["code"] == "SESSION_NOT_FOUND"


def test_dashboard_and_listing(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    session = _create_session(client, auth_headers)
    _upload(client, auth_headers, session["session"]["id"], "a.jpg", "b.jpg")

    dashboard = client.get("/api/gallery/dashboard", headers=auth_headers)
    listing = client.get("/api/gallery/sessions", headers=auth_headers)

    assert dashboard.json()["photographer"]["name"] == "Ana Studio"
    assert dashboard.json()["stats"]["total_photos"] == 2
    assert dashboard.json()["recent_sessions"][0]["photo_stats"]["pending"] == 2
    assert listing.json()["total"] == 1


def test_archive_blocks_selection(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    session = _create_session(client, auth_headers)
    session_id = session["session"]["id"]
    photos = _upload(client, auth_headers, session_id, "a.jpg")

    archived = client.post(
        f"/api/gallery/sessions/{session_id}/archive", headers=auth_headers
    )
    again = client.post(
        f"/api/gallery/sessions/{session_id}/archive", headers=auth_headers
    )
    select = client.post(
        f"/api/gallery/session/{session['access_code']}/select",
        json={"photo_id": photos[0]["id"], "selection_type": "album", "selected": True},
    )

    assert archived.json()["session"]["status"] == "archived"
    assert again.status_code == 409
    assert again.json()["code"] == "INVALID_STATUS_TRANSITION"
    assert select.status_code == 409
    assert select.json()["code"] == "SESSION_NOT_ACTIVE"


def test_access_code_length_is_enforced(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    code = _create_session(client, auth_headers)["access_code"]

    too_long = client.get(f"/api/gallery/session/{code}X")
    too_short = client.get(f"/api/gallery/session/{code[:-1]}")

    assert len(code) == ACCESS_CODE_LENGTH
    assert too_long.status_code == 400
    assert too_long.json()["code"] == "VALIDATION_ERROR"
    assert too_short.status_code == 400
    assert too_short.json()["code"] == "VALIDATION_ERROR"
