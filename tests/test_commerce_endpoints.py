"""Tests for package, order and payment endpoints."""

from fastapi.testclient import TestClient

from photoflow.containers import AppContainer
from tests.conftest import make_session


def _create_package(
    client: TestClient, headers: dict[str, str], price: float, type: str = "digital"
) -> dict:
    response = client.post(
        "/api/commerce/packages",
        json={"name": f"Package {price}", "type": type, "price": price},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["package"]


def test_package_crud(client: TestClient, auth_headers: dict[str, str]) -> None:
    package = _create_package(client, auth_headers, 99.9)

    listed = client.get("/api/commerce/packages", headers=auth_headers)
    deleted = client.delete(
        f"/api/commerce/packages/{package['id']}", headers=auth_headers
    )
    after = client.get("/api/commerce/packages", headers=auth_headers)

    assert [item["id"] for item in listed.json()["packages"]] == [package["id"]]
    assert deleted.json()["package"]["active"] is False
    assert after.json()["packages"] == []


def test_negative_price_is_rejected(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/commerce/packages",
        json={"name": "Bad", "type": "digital", "price": -5},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_client_order_and_payment_flow(
    client: TestClient, container: AppContainer, auth_headers: dict[str, str]
) -> None:
    session = make_session(container.session_service)
    hundred = _create_package(client, auth_headers, 100)
    fifty = _create_package(client, auth_headers, 50, type="extra_photo")

    packages = client.get(f"/api/commerce/session/{session.access_code}/packages")
    created = client.post(
        f"/api/commerce/session/{session.access_code}/order",
        json={
            "order_type": "selection",
            "items": [
                {"package_id": hundred["id"]},
                {"package_id": fifty["id"], "quantity": 2},
            ],
        },
    )
    order = created.json()["order"]
    paid = client.post(
        f"/api/commerce/orders/{order['id']}/payment",
        json={"method": "pix", "gateway": "mercadopago"},
    )
    repeat = client.post(
        f"/api/commerce/orders/{order['id']}/payment",
        json={"method": "pix", "gateway": "mercadopago"},
    )

    assert len(packages.json()["packages"]) == 2
    assert created.status_code == 201
    assert (order["subtotal"], order["tax"], order["total"]) == (200, 20, 220)
    assert order["delivery_method"] == "download"
    assert paid.status_code == 200
    assert paid.json()["payment"]["amount"] == 220
    assert paid.json()["order"]["status"] == "approved"
    assert paid.json()["order"]["payment_status"] == "paid"
    assert repeat.status_code == 400
    assert repeat.json()["code"] == "ALREADY_PAID"
    details = client.get(f"/api/commerce/orders/{order['id']}", headers=auth_headers)
    assert details.json()["order"]["status"] == "approved"
    assert [item["amount"] for item in details.json()["payments"]] == [220]


def test_order_with_unknown_package(
    client: TestClient, container: AppContainer
) -> None:
    session = make_session(container.session_service)

    response = client.post(
        f"/api/commerce/session/{session.access_code}/order",
        json={"order_type": "selection", "items": [{"package_id": 404}]},
    )

    assert response.status_code == 404
    assert response.json()["code"] == "PACKAGE_NOT_FOUND"


def test_order_requires_items(client: TestClient, container: AppContainer) -> None:
    session = make_session(container.session_service)

    response = client.post(
        f"/api/commerce/session/{session.access_code}/order",
        json={"order_type": "selection", "items": []},
    )

    assert response.status_code == 400


def test_order_status_updates_and_listing(
    client: TestClient, container: AppContainer, auth_headers: dict[str, str]
) -> None:
    session = make_session(container.session_service)
    package = _create_package(client, auth_headers, 10)
    order = client.post(
        f"/api/commerce/session/{session.access_code}/order",
        json={"order_type": "selection", "items": [{"package_id": package["id"]}]},
    ).json()["order"]

    cancelled = client.put(
        f"/api/commerce/orders/{order['id']}/status",
        json={"status": "cancelled"},
        headers=auth_headers,
    )
    reopened = client.put(
        f"/api/commerce/orders/{order['id']}/status",
        json={"status": "pending"},
        headers=auth_headers,
    )
    listed = client.get(
        "/api/commerce/orders", params={"status": "cancelled"}, headers=auth_headers
    )
    dashboard = client.get("/api/commerce/dashboard", headers=auth_headers)

    assert cancelled.json()["order"]["status"] == "cancelled"
    assert reopened.status_code == 409
    assert listed.json()["total"] == 1
    assert dashboard.json()["stats"]["total_orders"] == 1
    assert dashboard.json()["stats"]["pending_orders"] == 0


def test_foreign_order_status_is_not_found(
    client: TestClient,
    container: AppContainer,
    auth_headers: dict[str, str],
    other_auth_headers: dict[str, str],
) -> None:
    session = make_session(container.session_service)
    package = _create_package(client, auth_headers, 10)
    order = client.post(
        f"/api/commerce/session/{session.access_code}/order",
        json={"order_type": "selection", "items": [{"package_id": package["id"]}]},
    ).json()["order"]

    response = client.put(
        f"/api/commerce/orders/{order['id']}/status",
        json={"status": "approved"},
        headers=other_auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["code"] == "ORDER_NOT_FOUND"


def test_foreign_order_details_are_not_found(
    client: TestClient,
    container: AppContainer,
    auth_headers: dict[str, str],
    other_auth_headers: dict[str, str],
) -> None:
    session = make_session(container.session_service)
    package = _create_package(client, auth_headers, 10)
    order = client.post(
        f"/api/commerce/session/{session.access_code}/order",
        json={"order_type": "selection", "items": [{"package_id": package["id"]}]},
    ).json()["order"]

    response = client.get(
        f"/api/commerce/orders/{order['id']}", headers=other_auth_headers
    )

    assert response.status_code == 404
    assert response.json()["code"] == "ORDER_NOT_FOUND"
