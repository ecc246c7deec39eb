"""
Storefront Application

Wires the API clients, feature services and session into the user actions
the storefront offers. Every action returns a standard_response dict and
reports failures as notifications; a failed action never raises a
StorefrontError to the caller.
"""

from pathlib import Path

from dotenv import load_dotenv

# Load .env first, then .env.local (which can override)
_env_file = Path.cwd() / ".env"
_env_local_file = Path.cwd() / ".env.local"
if _env_file.exists():
    load_dotenv(_env_file, override=False)
if _env_local_file.exists():
    load_dotenv(_env_local_file, override=True)

import logging  # noqa: E402
from dataclasses import dataclass  # noqa: E402
from typing import Any, Callable, Dict, List, Optional  # noqa: E402

import httpx  # noqa: E402

from storefront.clients import AuthClient, CartClient, CatalogClient  # noqa: E402
from storefront.config import config  # noqa: E402
from storefront.errors import ApiError, StorefrontError, UpstreamError  # noqa: E402
from storefront.features.auth import AuthService  # noqa: E402
from storefront.features.cart import CartService  # noqa: E402
from storefront.features.catalog import CatalogService, SearchDebouncer  # noqa: E402
from storefront.models import CartLineItem  # noqa: E402
from storefront.session import SessionContext  # noqa: E402
from storefront.utils.response import standard_response  # noqa: E402

logger = logging.getLogger(__name__)

BACKEND_UNREACHABLE = "Something went wrong. Check that the backend is running, reachable and returns valid JSON."
CATALOG_UNAVAILABLE = "Something went wrong. Check the backend console for more details"
CART_UNAVAILABLE = "Could not fetch cart details. Check that the backend is running, reachable and returns valid JSON."


@dataclass(frozen=True)
class Notification:
    """A transient message for the user (toast)."""

    message: str
    variant: str = "info"


def _log_notification(notification: Notification) -> None:
    level = logging.WARNING if notification.variant in ("warning", "error") else logging.INFO
    logger.log(level, "[%s] %s", notification.variant, notification.message)


class StorefrontApp:
    """The storefront's user actions over one session."""

    def __init__(
        self,
        session: Optional[SessionContext] = None,
        catalog: Optional[CatalogService] = None,
        cart: Optional[CartService] = None,
        auth: Optional[AuthService] = None,
        notifier: Optional[Callable[[Notification], None]] = None,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timer_factory: Optional[Callable] = None,
    ):
        self.session = session or SessionContext()
        self.catalog = catalog or CatalogService(CatalogClient(base_url, transport=transport))
        self.cart = cart or CartService(CartClient(base_url, transport=transport))
        self.auth = auth or AuthService(self.session, AuthClient(base_url, transport=transport))
        self.notifier = notifier or _log_notification
        self.timer_factory = timer_factory

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def notify(self, message: str, variant: str = "info") -> None:
        self.notifier(Notification(message, variant))

    def _fail(self, error: StorefrontError, unreachable_message: str = BACKEND_UNREACHABLE) -> Dict[str, Any]:
        if isinstance(error, ApiError):
            message = error.message
        elif isinstance(error, UpstreamError):
            logger.warning("Upstream failure: %s", error)
            message = unreachable_message
        else:
            message = error.message
        self.notify(message, error.variant)
        return standard_response(False, error=message)

    def line_items(self) -> List[CartLineItem]:
        return self.cart.line_items(self.catalog.products)

    def _cart_data(self) -> Dict[str, Any]:
        return {"entries": self.cart.store.entries, "items": self.line_items()}

    # ------------------------------------------------------------------
    # actions
    # ------------------------------------------------------------------

    def start(self) -> Dict[str, Any]:
        """Page load: restore the session, load the catalog, then the cart if logged in."""
        session = self.session.load()
        result = self.load_products()
        if not result["success"]:
            return result
        if session is not None:
            cart_result = self.refresh_cart()
            if not cart_result["success"]:
                return cart_result
        return standard_response(True, data={"products": result["data"]["products"], "session": session})

    def load_products(self) -> Dict[str, Any]:
        """Fetch the full catalog."""
        try:
            products = self.catalog.fetch_all()
        except StorefrontError as e:
            return self._fail(e, CATALOG_UNAVAILABLE)
        return standard_response(True, data={"products": products})

    def search(self, text: str) -> Dict[str, Any]:
        """Search right away, without debouncing."""
        try:
            products = self.catalog.search(text)
        except StorefrontError as e:
            return self._fail(e, CATALOG_UNAVAILABLE)
        return standard_response(True, data={"products": products})

    def search_box(
        self,
        mobile: bool = False,
        on_results: Optional[Callable[[list], None]] = None,
    ) -> SearchDebouncer:
        """A debounced search widget bound to this app's catalog."""
        wait_ms = config.SEARCH_DEBOUNCE_MOBILE_MS if mobile else config.SEARCH_DEBOUNCE_DESKTOP_MS
        return SearchDebouncer(
            self.catalog,
            wait_ms=wait_ms,
            on_results=on_results,
            on_error=lambda e: self._fail(e, CATALOG_UNAVAILABLE),
            timer_factory=self.timer_factory,
        )

    def login(self, form: Dict[str, Any]) -> Dict[str, Any]:
        try:
            session = self.auth.login(form)
        except StorefrontError as e:
            return self._fail(e)
        self.notify("Logged in successfully", "success")
        # A failed cart fetch notifies on its own; the login itself stands
        self.refresh_cart()
        return standard_response(True, data={"session": session})

    def register(self, form: Dict[str, Any]) -> Dict[str, Any]:
        try:
            self.auth.register(form)
        except StorefrontError as e:
            return self._fail(e)
        self.notify("Registered successfully", "success")
        return standard_response(True, data={"username": form.get("username")})

    def logout(self) -> Dict[str, Any]:
        self.auth.logout()
        self.cart.reset()
        return standard_response(True)

    def refresh_cart(self) -> Dict[str, Any]:
        try:
            self.cart.fetch_cart(self.session.token)
        except StorefrontError as e:
            return self._fail(e, CART_UNAVAILABLE)
        return standard_response(True, data=self._cart_data())

    def add_to_cart(self, product_id: str) -> Dict[str, Any]:
        """The catalog's "add to cart" button: qty 1, refused if already in the cart."""
        try:
            self.cart.add_from_catalog(self.session.token, product_id)
        except StorefrontError as e:
            return self._fail(e)
        return standard_response(True, data=self._cart_data())

    def change_quantity(self, product_id: str, qty: int) -> Dict[str, Any]:
        """Cart view quantity change; 0 removes the product."""
        try:
            self.cart.set_quantity(self.session.token, product_id, qty)
        except StorefrontError as e:
            return self._fail(e)
        return standard_response(True, data=self._cart_data())

    def increment(self, product_id: str) -> Dict[str, Any]:
        try:
            self.cart.increment(self.session.token, product_id)
        except StorefrontError as e:
            return self._fail(e)
        return standard_response(True, data=self._cart_data())

    def decrement(self, product_id: str) -> Dict[str, Any]:
        """One less of ``product_id``; at 1 this removes it."""
        try:
            self.cart.decrement(self.session.token, product_id)
        except StorefrontError as e:
            return self._fail(e)
        return standard_response(True, data=self._cart_data())
