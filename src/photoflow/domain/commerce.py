"""Domain models for packages, orders and payments."""

from dataclasses import dataclass, field
from datetime import datetime

PACKAGE_TYPES = ("digital", "print", "album", "extra_photo")

ORDER_TYPES = ("selection", "extra_photos", "print_package")
DELIVERY_METHODS = ("download", "physical", "both")

ORDER_PENDING = "pending"
ORDER_APPROVED = "approved"
ORDER_PROCESSING = "processing"
ORDER_COMPLETED = "completed"
ORDER_CANCELLED = "cancelled"

ORDER_STATUSES = (
    ORDER_PENDING,
    ORDER_APPROVED,
    ORDER_PROCESSING,
    ORDER_COMPLETED,
    ORDER_CANCELLED,
)

ORDER_TRANSITIONS: dict[str, frozenset[str]] = {
    ORDER_PENDING: frozenset({ORDER_APPROVED, ORDER_PROCESSING, ORDER_CANCELLED}),
    ORDER_APPROVED: frozenset({ORDER_PROCESSING, ORDER_COMPLETED, ORDER_CANCELLED}),
    ORDER_PROCESSING: frozenset({ORDER_COMPLETED, ORDER_CANCELLED}),
    ORDER_COMPLETED: frozenset(),
    ORDER_CANCELLED: frozenset(),
}

PAYABLE_STATUSES = frozenset({ORDER_PENDING, ORDER_APPROVED})

PAYMENT_PENDING = "pending"
PAYMENT_PAID = "paid"
PAYMENT_FAILED = "failed"
PAYMENT_REFUNDED = "refunded"

PAYMENT_RECORD_COMPLETED = "completed"

PAYMENT_METHODS = ("credit_card", "pix", "bank_transfer")
PAYMENT_GATEWAYS = ("stripe", "pagseguro", "mercadopago")

TAX_RATE = 0.10


@dataclass(frozen=True)
class PackageRecord:
    """A priced product a photographer offers to clients."""

    id: int
    photographer_id: int
    name: str
    description: str
    type: str
    price: float
    options: dict[str, object]
    active: bool
    created_at: datetime


@dataclass(frozen=True)
class OrderItemRequest:
    """A package reference requested by a client."""

    package_id: int
    quantity: int = 1
    options: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class OrderItem:
    """A priced order line."""

    package_id: int
    package_name: str
    quantity: int
    unit_price: float
    total: float
    options: dict[str, object]


@dataclass(frozen=True)
class OrderDraft:
    """Computed order data ready to be stored."""

    session_id: int
    client_name: str
    client_email: str
    photographer_id: int
    order_type: str
    items: list[OrderItem]
    subtotal: float
    tax: float
    total: float
    delivery_method: str
    delivery_address: dict[str, object]
    notes: str | None
    deadline: datetime


@dataclass(frozen=True)
class OrderRecord:
    """A stored client order."""

    id: int
    session_id: int
    client_name: str
    client_email: str
    photographer_id: int
    order_type: str
    items: list[OrderItem]
    subtotal: float
    tax: float
    total: float
    status: str
    payment_status: str
    delivery_method: str
    delivery_address: dict[str, object]
    notes: str | None
    deadline: datetime
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PaymentRecord:
    """A recorded payment for an order."""

    id: int
    order_id: int
    amount: float
    method: str
    gateway: str
    transaction_id: str
    status: str
    created_at: datetime


@dataclass(frozen=True)
class OrderTotals:
    """Subtotal, tax and total for a set of order lines."""

    subtotal: float
    tax: float
    total: float


def compute_totals(items: list[OrderItem], tax_rate: float = TAX_RATE) -> OrderTotals:
    """Sum line totals and apply the tax rate."""
    subtotal = round(sum(item.total for item in items), 2)
    tax = round(subtotal * tax_rate, 2)
    return OrderTotals(subtotal=subtotal, tax=tax, total=round(subtotal + tax, 2))


def can_transition_order(current: str, requested: str) -> bool:
    """Return True when the order FSM allows the status change."""
    return requested in ORDER_TRANSITIONS.get(current, frozenset())
