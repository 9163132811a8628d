"""HTTP client for the GiftHarmony shop API.

All resource methods funnel through ``GiftHarmonyClient._request``, which
attaches the session headers, performs exactly one transport call and turns
the response into either the parsed JSON body or a ``RequestFailed``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from .config import ClientSettings, load_client_settings
from .errors import NetworkError, RequestFailed
from .models import (
    AddToCartRequest,
    AddToWishlistRequest,
    CreateOrderRequest,
    LoginRequest,
    RegisterRequest,
    UpdateCartItemRequest,
    dump_payload,
)
from .session import TokenSession
from .storage import KeyValueStorage, create_storage

logger = logging.getLogger(__name__)

QueryValue = str | int | float | bool | None


def format_query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: Mapping[str, QueryValue] | None) -> dict[str, str]:
    """Keep only supplied filters; None, empty strings and zero are left out.

    Values may be strings, ints, floats or bools. Integral floats drop their
    fractional part (``2.0`` -> ``"2"``) and bools are lowercased.
    """
    if not params:
        return {}
    return {key: format_query_value(value) for key, value in params.items() if value}


class GiftHarmonyClient:
    def __init__(
        self,
        base_url: str,
        session: TokenSession,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=None, follow_redirects=True)
        logger.info("API Base URL: %s", self.base_url)

    def __enter__(self) -> GiftHarmonyClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def set_token(self, token: str | None) -> None:
        self.session.set_token(token)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        params: Mapping[str, QueryValue] | None = None,
        body: Any = None,
    ) -> Any:
        url = self._url(path)
        query = build_query(params)
        headers = self.session.build_headers()
        logger.info("Calling %s API: %s", operation, url)
        try:
            response = self._http.request(
                method,
                url,
                params=query or None,
                json=body,
                headers=headers,
                follow_redirects=True,
            )
        except httpx.TransportError as exc:
            logger.error("API transport failure for %s %s: %s", method, url, exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        logger.debug("API Response: %s %s", response.status_code, response.reason_phrase)
        if response.is_success:
            return response.json()

        fallback = f"HTTP error! status: {response.status_code}"
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = payload.get("message") if isinstance(payload, dict) else None
        logger.warning("API Error: %s", payload if payload is not None else fallback)
        raise RequestFailed(str(message) if message else fallback, status=response.status_code)

    # Auth

    def register(self, payload: RegisterRequest | Mapping[str, Any]) -> Any:
        body = dump_payload(RegisterRequest, payload)
        return self._request("register", "POST", "/auth/register", body=body)

    def login(self, payload: LoginRequest | Mapping[str, Any]) -> Any:
        body = dump_payload(LoginRequest, payload)
        return self._request("login", "POST", "/auth/login", body=body)

    def login_and_store(self, payload: LoginRequest | Mapping[str, Any]) -> Any:
        """Log in and keep the returned ``token`` as the session token."""
        result = self.login(payload)
        token = result.get("token") if isinstance(result, dict) else None
        if token:
            self.set_token(str(token))
        return result

    def logout(self) -> None:
        self.set_token(None)

    def get_current_user(self) -> Any:
        return self._request("getCurrentUser", "GET", "/auth/me")

    # Products

    def get_products(
        self,
        category: str | None = None,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> Any:
        params = {"category": category, "search": search, "page": page, "limit": limit}
        return self._request("getProducts", "GET", "/products", params=params)

    def get_product(self, product_id: int) -> Any:
        return self._request("getProduct", "GET", f"/products/{product_id}")

    # Cart

    def get_cart(self) -> Any:
        return self._request("getCart", "GET", "/cart")

    def add_to_cart(self, product_id: int, quantity: int = 1) -> Any:
        body = dump_payload(AddToCartRequest, {"product_id": product_id, "quantity": quantity})
        return self._request("addToCart", "POST", "/cart", body=body)

    def update_cart_item(self, item_id: int, quantity: int) -> Any:
        body = dump_payload(UpdateCartItemRequest, {"quantity": quantity})
        return self._request("updateCartItem", "PUT", f"/cart/{item_id}", body=body)

    def remove_from_cart(self, item_id: int) -> Any:
        return self._request("removeFromCart", "DELETE", f"/cart/{item_id}")

    def clear_cart(self) -> Any:
        return self._request("clearCart", "DELETE", "/cart")

    # Wishlist

    def get_wishlist(self) -> Any:
        return self._request("getWishlist", "GET", "/wishlist")

    def add_to_wishlist(self, product_id: int) -> Any:
        body = dump_payload(AddToWishlistRequest, {"product_id": product_id})
        return self._request("addToWishlist", "POST", "/wishlist", body=body)

    def remove_from_wishlist_by_product(self, product_id: int) -> Any:
        return self._request(
            "removeFromWishlistByProduct",
            "DELETE",
            f"/wishlist/product/{product_id}",
        )

    # Orders

    def get_orders(self) -> Any:
        return self._request("getOrders", "GET", "/orders")

    def create_order(self, payload: CreateOrderRequest | Mapping[str, Any]) -> Any:
        body = dump_payload(CreateOrderRequest, payload)
        return self._request("createOrder", "POST", "/orders", body=body)


def create_client(
    settings: ClientSettings | None = None,
    storage: KeyValueStorage | None = None,
    http_client: httpx.Client | None = None,
) -> GiftHarmonyClient:
    settings = settings if settings is not None else load_client_settings()
    token_storage = storage if storage is not None else create_storage(settings.storage_path)
    return GiftHarmonyClient(
        base_url=settings.api_url,
        session=TokenSession(token_storage),
        http_client=http_client,
    )
