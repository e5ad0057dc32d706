"""Package, order and payment endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from photoflow.api.auth import require_photographer
from photoflow.api.request_models import (
    AccessCode,
    OrderCreateRequest,
    OrderStatusRequest,
    PackageCreateRequest,
    PaymentRequest,
)
from photoflow.api.views import order_view, package_view, payment_view, session_view
from photoflow.domain.models import Photographer

if TYPE_CHECKING:
    from photoflow.containers import AppContainer

router = APIRouter(prefix="/api/commerce", tags=["commerce"])


@router.get("/dashboard")
async def dashboard(
    request: Request, photographer: Photographer = Depends(require_photographer)
) -> dict[str, object]:
    """Return order counts and revenue for the photographer."""
    container: AppContainer = request.app.state.container
    summary = container.commerce_service.dashboard(photographer.id)
    return {
        "stats": {
            "total_orders": summary.total_orders,
            "pending_orders": summary.pending_orders,
            "completed_orders": summary.completed_orders,
            "total_revenue": summary.total_revenue,
            "pending_revenue": summary.pending_revenue,
            "active_packages": summary.active_packages,
        },
        "recent_orders": [order_view(order) for order in summary.recent_orders],
        "packages": [package_view(package) for package in summary.packages],
    }


@router.get("/packages")
async def list_packages(
    request: Request, photographer: Photographer = Depends(require_photographer)
) -> dict[str, object]:
    """Return the photographer's active packages."""
    container: AppContainer = request.app.state.container
    packages = container.commerce_service.list_packages(photographer.id)
    return {"packages": [package_view(package) for package in packages]}


@router.post("/packages", status_code=status.HTTP_201_CREATED)
async def create_package(
    payload: PackageCreateRequest,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Create a package offered to clients."""
    container: AppContainer = request.app.state.container
    package = container.commerce_service.create_package(
        photographer_id=photographer.id,
        name=payload.name,
        description=payload.description,
        type=payload.type,
        price=payload.price,
        options=payload.options,
    )
    return {"package": package_view(package)}


@router.delete("/packages/{package_id}")
async def deactivate_package(
    package_id: int,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Withdraw a package from sale."""
    container: AppContainer = request.app.state.container
    package = container.commerce_service.deactivate_package(package_id, photographer.id)
    return {"package": package_view(package)}


@router.get("/orders")
async def list_orders(
    request: Request,
    order_status: str | None = Query(default=None, alias="status"),
    session_id: int | None = None,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Return the photographer's orders, newest first."""
    container: AppContainer = request.app.state.container
    orders = container.commerce_service.list_orders(
        photographer.id, status=order_status, session_id=session_id
    )
    return {"orders": [order_view(order) for order in orders], "total": len(orders)}


@router.get("/orders/{order_id}")
async def get_order(
    order_id: int,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Return one order with its payments."""
    container: AppContainer = request.app.state.container
    order, payments = container.commerce_service.order_details(
        order_id, photographer.id
    )
    return {
        "order": order_view(order),
        "payments": [payment_view(payment) for payment in payments],
    }


@router.put("/orders/{order_id}/status")
async def update_order_status(
    order_id: int,
    payload: OrderStatusRequest,
    request: Request,
    photographer: Photographer = Depends(require_photographer),
) -> dict[str, object]:
    """Move an order to a new status."""
    container: AppContainer = request.app.state.container
    order = container.commerce_service.update_order_status(
        order_id, photographer.id, payload.status
    )
    return {"order": order_view(order)}


@router.get("/session/{access_code}/packages")
async def session_packages(
    access_code: AccessCode, request: Request
) -> dict[str, object]:
    """Return packages a client can buy for a gallery."""
    container: AppContainer = request.app.state.container
    session = container.session_service.find_by_access_code(access_code)
    packages = container.commerce_service.list_packages(session.photographer_id)
    return {
        "session": session_view(session),
        "packages": [package_view(package) for package in packages],
    }


@router.post("/session/{access_code}/order", status_code=status.HTTP_201_CREATED)
async def create_order(
    access_code: AccessCode, payload: OrderCreateRequest, request: Request
) -> dict[str, object]:
    """Place an order for packages from a client gallery."""
    container: AppContainer = request.app.state.container
    session = container.session_service.find_by_access_code(access_code)
    order = container.commerce_service.create_order(
        session,
        order_type=payload.order_type,
        items=[item.to_request() for item in payload.items],
        deadline_days=container.settings.client_order_deadline_days,
        delivery_method=payload.delivery_method,
        delivery_address=payload.delivery_address,
        notes=payload.notes,
    )
    return {"order": order_view(order)}


@router.post("/orders/{order_id}/payment")
async def process_payment(
    order_id: int, payload: PaymentRequest, request: Request
) -> dict[str, object]:
    """Record a simulated payment for an order."""
    container: AppContainer = request.app.state.container
    payment, order = container.commerce_service.process_payment(
        order_id, method=payload.method, gateway=payload.gateway
    )
    return {"payment": payment_view(payment), "order": order_view(order)}
