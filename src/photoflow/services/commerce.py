"""Packages, orders and simulated payments."""

import logging
import secrets
import threading
import time
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from photoflow.domain.commerce import (
    ORDER_APPROVED,
    ORDER_COMPLETED,
    ORDER_PENDING,
    PAYABLE_STATUSES,
    PAYMENT_PAID,
    PAYMENT_PENDING,
    TAX_RATE,
    OrderDraft,
    OrderItem,
    OrderItemRequest,
    OrderRecord,
    PackageRecord,
    PaymentRecord,
    can_transition_order,
    compute_totals,
)
from photoflow.domain.errors import (
    AlreadyPaidError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
    PackageNotFoundError,
    SessionNotActiveError,
    ValidationError,
)
from photoflow.domain.sessions import SESSION_ARCHIVED, SessionRecord

logger = logging.getLogger(__name__)

_RECENT_ORDERS = 10


class PackageRepository(Protocol):
    """Persistence interface for sale packages."""

    def create_package(  # noqa: PLR0913
        self,
        photographer_id: int,
        name: str,
        description: str,
        type: str,
        price: float,
        options: dict[str, object],
    ) -> PackageRecord:
        """Create an active package and return it."""

    def get_package(self, package_id: int) -> PackageRecord | None:
        """Return a package by id, if present."""

    def list_active_by_photographer(self, photographer_id: int) -> list[PackageRecord]:
        """Return a photographer's active packages in creation order."""

    def set_active(self, package_id: int, active: bool) -> PackageRecord:
        """Toggle the soft-delete flag of a package."""


class OrderRepository(Protocol):
    """Persistence interface for client orders."""

    def create_order(self, draft: OrderDraft) -> OrderRecord:
        """Store a pending, unpaid order and return it."""

    def get_order(self, order_id: int) -> OrderRecord | None:
        """Return an order by id, if present."""

    def list_by_photographer(self, photographer_id: int) -> list[OrderRecord]:
        """Return a photographer's orders in creation order."""

    def update_status(
        self, order_id: int, status: str, payment_status: str | None = None
    ) -> OrderRecord:
        """Set order status, and payment status when given."""


class PaymentRepository(Protocol):
    """Persistence interface for payments."""

    def create_payment(  # noqa: PLR0913
        self,
        order_id: int,
        amount: float,
        method: str,
        gateway: str,
        transaction_id: str,
    ) -> PaymentRecord:
        """Record a completed payment and return it."""

    def list_by_order(self, order_id: int) -> list[PaymentRecord]:
        """Return payments recorded for an order."""


@dataclass(frozen=True)
class CommerceDashboard:
    """Order and revenue totals for a photographer."""

    total_orders: int
    pending_orders: int
    completed_orders: int
    total_revenue: float
    pending_revenue: float
    active_packages: int
    recent_orders: list[OrderRecord]
    packages: list[PackageRecord]


@dataclass
class CommerceService:
    """Application service for packages, orders and payments."""

    package_repository: PackageRepository
    order_repository: OrderRepository
    payment_repository: PaymentRepository
    lock: AbstractContextManager = field(default_factory=threading.RLock)
    tax_rate: float = TAX_RATE

    def create_package(  # noqa: PLR0913
        self,
        photographer_id: int,
        name: str,
        description: str,
        type: str,
        price: float,
        options: dict[str, object] | None = None,
    ) -> PackageRecord:
        """Create a package offered to the photographer's clients."""
        if price < 0:
            raise ValidationError("Price must be a non-negative number")
        with self.lock:
            package = self.package_repository.create_package(
                photographer_id=photographer_id,
                name=name,
                description=description,
                type=type,
                price=float(price),
                options=options or {},
            )
        logger.info(
            "Package created",
            extra={"package_id": package.id, "photographer_id": photographer_id},
        )
        return package

    def list_packages(self, photographer_id: int) -> list[PackageRecord]:
        """Return a photographer's active packages."""
        return self.package_repository.list_active_by_photographer(photographer_id)

    def deactivate_package(
        self, package_id: int, photographer_id: int
    ) -> PackageRecord:
        """Soft-delete a package so it can no longer be ordered."""
        with self.lock:
            package = self.package_repository.get_package(package_id)
            if package is None or package.photographer_id != photographer_id:
                raise PackageNotFoundError(package_id)
            return self.package_repository.set_active(package_id, active=False)

    def create_order(  # noqa: PLR0913
        self,
        session: SessionRecord,
        order_type: str,
        items: list[OrderItemRequest],
        deadline_days: int,
        delivery_method: str = "download",
        delivery_address: dict[str, object] | None = None,
        notes: str | None = None,
    ) -> OrderRecord:
        """Price the requested packages and store a pending order."""
        if session.status == SESSION_ARCHIVED:
            raise SessionNotActiveError(session.status)
        if not items:
            raise ValidationError("Order items are required")
        with self.lock:
            available = {
                package.id: package
                for package in self.package_repository.list_active_by_photographer(
                    session.photographer_id
                )
            }
            lines = [_price_item(available, item) for item in items]
            totals = compute_totals(lines, self.tax_rate)
            order = self.order_repository.create_order(
                OrderDraft(
                    session_id=session.id,
                    client_name=session.client_name,
                    client_email=session.client_email,
                    photographer_id=session.photographer_id,
                    order_type=order_type,
                    items=lines,
                    subtotal=totals.subtotal,
                    tax=totals.tax,
                    total=totals.total,
                    delivery_method=delivery_method,
                    delivery_address=delivery_address or {},
                    notes=notes,
                    deadline=datetime.now(tz=UTC) + timedelta(days=deadline_days),
                )
            )
        logger.info(
            "Order created",
            extra={
                "order_id": order.id,
                "session_id": session.id,
                "total": order.total,
            },
        )
        return order

    def get_order(self, order_id: int) -> OrderRecord:
        """Return an order by id."""
        order = self.order_repository.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def list_orders(
        self,
        photographer_id: int,
        status: str | None = None,
        session_id: int | None = None,
    ) -> list[OrderRecord]:
        """Return a photographer's orders, newest first."""
        orders = self.order_repository.list_by_photographer(photographer_id)
        if status:
            orders = [order for order in orders if order.status == status]
        if session_id is not None:
            orders = [order for order in orders if order.session_id == session_id]
        return _newest_first(orders)

    def order_details(
        self, order_id: int, photographer_id: int
    ) -> tuple[OrderRecord, list[PaymentRecord]]:
        """Return an owned order together with its recorded payments."""
        with self.lock:
            order = self.get_order(order_id)
            if order.photographer_id != photographer_id:
                raise OrderNotFoundError(order_id)
            return order, self.payment_repository.list_by_order(order.id)

    def update_order_status(
        self, order_id: int, photographer_id: int, status: str
    ) -> OrderRecord:
        """Move an order along the status transition table."""
        with self.lock:
            order = self.get_order(order_id)
            if order.photographer_id != photographer_id:
                raise OrderNotFoundError(order_id)
            if not can_transition_order(order.status, status):
                raise InvalidStatusTransitionError("order", order.status, status)
            updated = self.order_repository.update_status(order_id, status)
        logger.info(
            "Order status changed",
            extra={"order_id": order_id, "from": order.status, "to": status},
        )
        return updated

    def process_payment(
        self, order_id: int, method: str, gateway: str
    ) -> tuple[PaymentRecord, OrderRecord]:
        """Record a simulated payment for the order total and approve the order."""
        with self.lock:
            order = self.get_order(order_id)
            if order.payment_status == PAYMENT_PAID:
                raise AlreadyPaidError(order_id)
            if order.status not in PAYABLE_STATUSES:
                raise InvalidStatusTransitionError(
                    "order", order.status, ORDER_APPROVED
                )
            payment = self.payment_repository.create_payment(
                order_id=order.id,
                amount=order.total,
                method=method,
                gateway=gateway,
                transaction_id=_build_transaction_id(),
            )
            updated = self.order_repository.update_status(
                order.id, ORDER_APPROVED, payment_status=PAYMENT_PAID
            )
        logger.info(
            "Payment processed",
            extra={"order_id": order.id, "amount": payment.amount, "method": method},
        )
        return payment, updated

    def dashboard(self, photographer_id: int) -> CommerceDashboard:
        """Return order counts and revenue for a photographer."""
        orders = self.order_repository.list_by_photographer(photographer_id)
        packages = self.package_repository.list_active_by_photographer(photographer_id)
        newest_first = _newest_first(orders)
        return CommerceDashboard(
            total_orders=len(orders),
            pending_orders=sum(1 for order in orders if order.status == ORDER_PENDING),
            completed_orders=sum(
                1 for order in orders if order.status == ORDER_COMPLETED
            ),
            total_revenue=round(
                sum(o.total for o in orders if o.payment_status == PAYMENT_PAID), 2
            ),
            pending_revenue=round(
                sum(o.total for o in orders if o.payment_status == PAYMENT_PENDING), 2
            ),
            active_packages=len(packages),
            recent_orders=newest_first[:_RECENT_ORDERS],
            packages=packages,
        )


def _price_item(
    available: dict[int, PackageRecord], item: OrderItemRequest
) -> OrderItem:
    package = available.get(item.package_id)
    if package is None:
        raise PackageNotFoundError(item.package_id)
    if item.quantity < 1:
        raise ValidationError("Quantity must be at least 1")
    return OrderItem(
        package_id=package.id,
        package_name=package.name,
        quantity=item.quantity,
        unit_price=package.price,
        total=round(package.price * item.quantity, 2),
        options=dict(item.options),
    )


def _newest_first(orders: list[OrderRecord]) -> list[OrderRecord]:
    return sorted(orders, key=lambda order: (order.created_at, order.id), reverse=True)


def _build_transaction_id() -> str:
    return f"TXN_{time.time_ns() // 1_000_000}_{secrets.token_hex(4)}"
