"""Request payload models for the shop API."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    first_name: str
    last_name: str
    phone: str | None = None


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AddToCartRequest(BaseModel):
    product_id: int
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    quantity: int


class AddToWishlistRequest(BaseModel):
    product_id: int


class OrderItem(BaseModel):
    product_id: int
    quantity: int


class CreateOrderRequest(BaseModel):
    items: list[OrderItem]
    shipping_address: str


PayloadT = TypeVar("PayloadT", bound=BaseModel)


def dump_payload(model: type[PayloadT], payload: PayloadT | Mapping[str, Any]) -> dict[str, Any]:
    """Validate payload against model and return its JSON body, dropping unset optionals."""
    if not isinstance(payload, model):
        payload = model.model_validate(dict(payload))
    return payload.model_dump(exclude_none=True)
