"""In-memory package, order and payment repositories."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from photoflow.adapters.memory_table import InMemoryTable
from photoflow.domain.commerce import (
    ORDER_PENDING,
    PAYMENT_PENDING,
    PAYMENT_RECORD_COMPLETED,
    OrderDraft,
    OrderRecord,
    PackageRecord,
    PaymentRecord,
)
from photoflow.services.commerce import (
    OrderRepository,
    PackageRepository,
    PaymentRepository,
)


@dataclass
class InMemoryPackageRepository(PackageRepository):
    """Process-local storage for sale packages."""

    table: InMemoryTable[PackageRecord] = field(default_factory=InMemoryTable)

    def create_package(  # noqa: PLR0913
        self,
        photographer_id: int,
        name: str,
        description: str,
        type: str,
        price: float,
        options: dict[str, object],
    ) -> PackageRecord:
        now = datetime.now(tz=UTC)
        return self.table.insert(
            lambda package_id: PackageRecord(
                id=package_id,
                photographer_id=photographer_id,
                name=name,
                description=description,
                type=type,
                price=price,
                options=dict(options),
                active=True,
                created_at=now,
            )
        )

    def get_package(self, package_id: int) -> PackageRecord | None:
        return self.table.get(package_id)

    def list_active_by_photographer(self, photographer_id: int) -> list[PackageRecord]:
        return self.table.filter(
            lambda package: package.active
            and package.photographer_id == photographer_id
        )

    def set_active(self, package_id: int, active: bool) -> PackageRecord:
        package = self.table.rows[package_id]
        return self.table.replace(package_id, replace(package, active=active))


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """Process-local storage for client orders."""

    table: InMemoryTable[OrderRecord] = field(default_factory=InMemoryTable)

    def create_order(self, draft: OrderDraft) -> OrderRecord:
        """Store a draft as a pending, unpaid order."""
        now = datetime.now(tz=UTC)
        return self.table.insert(
            lambda order_id: OrderRecord(
                id=order_id,
                session_id=draft.session_id,
                client_name=draft.client_name,
                client_email=draft.client_email,
                photographer_id=draft.photographer_id,
                order_type=draft.order_type,
                items=list(draft.items),
                subtotal=draft.subtotal,
                tax=draft.tax,
                total=draft.total,
                status=ORDER_PENDING,
                payment_status=PAYMENT_PENDING,
                delivery_method=draft.delivery_method,
                delivery_address=dict(draft.delivery_address),
                notes=draft.notes,
                deadline=draft.deadline,
                created_at=now,
                updated_at=now,
            )
        )

    def get_order(self, order_id: int) -> OrderRecord | None:
        return self.table.get(order_id)

    def list_by_photographer(self, photographer_id: int) -> list[OrderRecord]:
        return self.table.filter(lambda order: order.photographer_id == photographer_id)

    def update_status(
        self, order_id: int, status: str, payment_status: str | None = None
    ) -> OrderRecord:
        order = self.table.rows[order_id]
        return self.table.replace(
            order_id,
            replace(
                order,
                status=status,
                payment_status=payment_status or order.payment_status,
                updated_at=datetime.now(tz=UTC),
            ),
        )


@dataclass
class InMemoryPaymentRepository(PaymentRepository):
    """Process-local storage for payments."""

    table: InMemoryTable[PaymentRecord] = field(default_factory=InMemoryTable)

    def create_payment(  # noqa: PLR0913
        self,
        order_id: int,
        amount: float,
        method: str,
        gateway: str,
        transaction_id: str,
    ) -> PaymentRecord:
        """Record a payment; simulated gateways always complete."""
        now = datetime.now(tz=UTC)
        return self.table.insert(
            lambda payment_id: PaymentRecord(
                id=payment_id,
                order_id=order_id,
                amount=amount,
                method=method,
                gateway=gateway,
                transaction_id=transaction_id,
                status=PAYMENT_RECORD_COMPLETED,
                created_at=now,
            )
        )

    def list_by_order(self, order_id: int) -> list[PaymentRecord]:
        return self.table.filter(lambda payment: payment.order_id == order_id)
