"""Pydantic request models for the HTTP API."""

from datetime import datetime
from typing import Annotated, Literal

from fastapi import Path
from pydantic import BaseModel, EmailStr, Field

from photoflow.domain.commerce import OrderItemRequest
from photoflow.domain.photos import PhotoUpload
from photoflow.domain.sessions import ACCESS_CODE_LENGTH

AccessCode = Annotated[
    str, Path(min_length=ACCESS_CODE_LENGTH, max_length=ACCESS_CODE_LENGTH)
]

WatermarkPosition = Literal[
    "center",
    "top-left",
    "top-center",
    "top-right",
    "middle-left",
    "middle-right",
    "bottom-left",
    "bottom-center",
    "bottom-right",
]


class SessionCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None
    client_name: str = Field(min_length=1)
    client_email: EmailStr
    session_date: datetime
    max_album_selections: int | None = Field(default=None, ge=1)
    max_editing_selections: int | None = Field(default=None, ge=1)
    allow_album_selection: bool = True
    allow_editing_selection: bool = True


class PhotoUploadItem(BaseModel):
    filename: str = Field(min_length=1)
    original_filename: str | None = None
    file_size: int | None = Field(default=None, ge=0)
    width: int | None = Field(default=None, ge=1)
    height: int | None = Field(default=None, ge=1)
    metadata: dict[str, object] = Field(default_factory=dict)

    def to_upload(self) -> PhotoUpload:
        return PhotoUpload(
            filename=self.filename,
            original_filename=self.original_filename,
            file_size=self.file_size,
            width=self.width,
            height=self.height,
            metadata=self.metadata,
        )


class PhotoUploadRequest(BaseModel):
    photos: list[PhotoUploadItem] = Field(min_length=1)


class SelectPhotoRequest(BaseModel):
    photo_id: int
    selection_type: Literal["album", "editing", "general"]
    selected: bool
    client_notes: str | None = None


class PackageCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    type: Literal["digital", "print", "album", "extra_photo"]
    price: float = Field(ge=0)
    options: dict[str, object] = Field(default_factory=dict)


class OrderItemPayload(BaseModel):
    package_id: int
    quantity: int = Field(default=1, ge=1)
    options: dict[str, object] = Field(default_factory=dict)

    def to_request(self) -> OrderItemRequest:
        return OrderItemRequest(
            package_id=self.package_id,
            quantity=self.quantity,
            options=self.options,
        )


class OrderCreateRequest(BaseModel):
    order_type: Literal["selection", "extra_photos", "print_package"]
    items: list[OrderItemPayload] = Field(min_length=1)
    delivery_method: Literal["download", "physical", "both"] = "download"
    delivery_address: dict[str, object] | None = None
    notes: str | None = None


class OrderStatusRequest(BaseModel):
    status: Literal["pending", "approved", "processing", "completed", "cancelled"]


class PaymentRequest(BaseModel):
    method: Literal["credit_card", "pix", "bank_transfer"]
    gateway: Literal["stripe", "pagseguro", "mercadopago"]


class WatermarkSettingsRequest(BaseModel):
    """Partial watermark settings; omitted fields keep their current value."""

    enabled: bool | None = None
    type: Literal["text", "image", "both"] | None = None
    text: str | None = Field(default=None, min_length=1)
    image_url: str | None = None
    position: WatermarkPosition | None = None
    opacity: float | None = Field(default=None, ge=0, le=1)
    size: Literal["small", "medium", "large"] | None = None
    color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    apply_to_previews: bool | None = None
    apply_to_downloads: bool | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class ApplyWatermarkRequest(BaseModel):
    force_apply: bool = False


class BatchWatermarkRequest(BaseModel):
    apply_to: Literal["all", "selected", "unprocessed"] = "all"
    override_settings: WatermarkSettingsRequest | None = None
