"""Domain error codes for PhotoFlow."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Stable machine-readable error codes exposed to clients."""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    GALLERY_NOT_FOUND = "GALLERY_NOT_FOUND"
    PHOTO_NOT_FOUND = "PHOTO_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    PACKAGE_NOT_FOUND = "PACKAGE_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SELECTION_LIMIT_REACHED = "SELECTION_LIMIT_REACHED"
    SELECTION_NOT_ALLOWED = "SELECTION_NOT_ALLOWED"
    NO_PHOTOS_SELECTED = "NO_PHOTOS_SELECTED"
    SESSION_NOT_ACTIVE = "SESSION_NOT_ACTIVE"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    ALREADY_PAID = "ALREADY_PAID"
    WATERMARK_DISABLED = "WATERMARK_DISABLED"
    NO_PHOTOS_TO_PROCESS = "NO_PHOTOS_TO_PROCESS"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    ACCESS_DENIED = "ACCESS_DENIED"
    TOKEN_REQUIRED = "TOKEN_REQUIRED"
    TOKEN_INVALID = "TOKEN_INVALID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Base class for missing entities."""


class SessionNotFoundError(NotFoundError):
    """Raised when a session is absent or owned by another photographer."""

    def __init__(self, session_id: int) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class GalleryNotFoundError(NotFoundError):
    """Raised when an access code matches no session."""

    def __init__(self, access_code: str) -> None:
        super().__init__(
            code=ErrorCode.GALLERY_NOT_FOUND,
            message="Gallery not found",
        )
        self.access_code = access_code


class PhotoNotFoundError(NotFoundError):
    """Raised when a photo is absent or outside the expected scope."""

    def __init__(self, photo_id: int) -> None:
        super().__init__(
            code=ErrorCode.PHOTO_NOT_FOUND,
            message="Photo not found",
        )
        self.photo_id = photo_id


class OrderNotFoundError(NotFoundError):
    """Raised when an order is absent or owned by another photographer."""

    def __init__(self, order_id: int) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="Order not found",
        )
        self.order_id = order_id


class PackageNotFoundError(NotFoundError):
    """Raised when an order or request references an unknown package."""

    def __init__(self, package_id: int) -> None:
        super().__init__(
            code=ErrorCode.PACKAGE_NOT_FOUND,
            message=f"Package {package_id} not found",
        )
        self.package_id = package_id


class ValidationError(DomainError):
    """Raised for malformed input."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class SelectionLimitExceededError(DomainError):
    """Raised when a selection category cap has been reached."""

    def __init__(self, category: str, limit: int) -> None:
        super().__init__(
            code=ErrorCode.SELECTION_LIMIT_REACHED,
            message=f"Limit of {limit} photos for {category} reached",
        )
        self.category = category
        self.limit = limit


class SelectionNotAllowedError(DomainError):
    """Raised when a session disables a selection category."""

    def __init__(self, category: str) -> None:
        super().__init__(
            code=ErrorCode.SELECTION_NOT_ALLOWED,
            message=f"Selection for {category} is not enabled for this session",
        )
        self.category = category


class NoSelectionError(DomainError):
    """Raised when finalizing a session with no selected photos."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_PHOTOS_SELECTED,
            message="No photos were selected",
        )


class SessionNotActiveError(DomainError):
    """Raised when a client mutation targets a non-active session."""

    def __init__(self, status: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_ACTIVE,
            message=f"Session is {status} and no longer accepts changes",
        )
        self.status = status


class InvalidStatusTransitionError(DomainError):
    """Raised when a status change is not in the transition table."""

    def __init__(self, entity: str, current: str, requested: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            message=f"Cannot move {entity} from {current} to {requested}",
        )
        self.current = current
        self.requested = requested


class AlreadyPaidError(DomainError):
    """Raised when paying an order that is already paid."""

    def __init__(self, order_id: int) -> None:
        super().__init__(code=ErrorCode.ALREADY_PAID, message="Order already paid")
        self.order_id = order_id


class WatermarkDisabledError(DomainError):
    """Raised when watermarking is unconfigured or disabled."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WATERMARK_DISABLED,
            message="Watermark not configured or disabled",
        )


class NoPhotosToProcessError(DomainError):
    """Raised when a batch watermark filter matches no photos."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_PHOTOS_TO_PROCESS,
            message="No photos found to process",
        )


class WatermarkConfigNotFoundError(NotFoundError):
    """Raised when a preview is requested before any configuration exists."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CONFIG_NOT_FOUND,
            message="Watermark settings not found",
        )


class AccessDeniedError(DomainError):
    """Raised when a photographer touches another photographer's data."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.ACCESS_DENIED, message="Access denied")


class TokenRequiredError(DomainError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_REQUIRED,
            message="Access token required",
        )


class TokenInvalidError(DomainError):
    """Raised when a bearer token does not resolve to a photographer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_INVALID,
            message="Invalid or expired token",
        )
