"""
Shared fixtures: an in-process fake of the storefront API (served through
httpx.MockTransport) and a virtual clock for debounce timers.
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from storefront.clients import AuthClient, CartClient, CatalogClient
from storefront.session import InMemorySessionStore, SessionContext

BASE_URL = "http://api.test/api/v1"

PRODUCTS = [
    {
        "_id": "A",
        "name": "Tan Leatherette Weekender Duffle",
        "category": "Fashion",
        "cost": 10,
        "rating": 4,
        "image": "https://img.test/a.png",
    },
    {
        "_id": "B",
        "name": "The Minimalist Slim Leather Watch",
        "category": "Electronics",
        "cost": 20,
        "rating": 5,
        "image": "https://img.test/b.png",
    },
    {
        "_id": "C",
        "name": "Atomberg 1200mm BLDC Fan",
        "category": "Home & Kitchen",
        "cost": 30,
        "rating": 3,
        "image": "https://img.test/c.png",
    },
]


def _json(status: int, body: Any = None) -> httpx.Response:
    if body is None:
        return httpx.Response(status)
    return httpx.Response(status, json=body)


class FakeStorefrontApi:
    """Just enough of the storefront backend to drive the clients."""

    def __init__(self):
        self.products: List[Dict[str, Any]] = [dict(p) for p in PRODUCTS]
        self.users: Dict[str, str] = {"crio.do": "learnbydoing"}
        self.carts: Dict[str, List[Dict[str, Any]]] = {}
        self.requests: List[httpx.Request] = []
        self.balance: Any = 5000
        self.offline = False

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def requests_to(self, method: str, path: str) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and r.url.path == f"/api/v1{path}"
        ]

    def _token(self, request: httpx.Request) -> Optional[str]:
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            return None
        token = header[len("Bearer "):]
        return token if token in self.carts else None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("connection refused", request=request)

        path = request.url.path[len("/api/v1"):]
        body = json.loads(request.content) if request.content else {}

        if request.method == "POST" and path == "/auth/login":
            username, password = body.get("username"), body.get("password")
            if username not in self.users:
                return _json(400, {"success": False, "message": "Username does not exist"})
            if self.users[username] != password:
                return _json(400, {"success": False, "message": "Password is incorrect"})
            token = f"token-{username}"
            self.carts.setdefault(token, [])
            return _json(201, {"success": True, "token": token, "username": username, "balance": self.balance})

        if request.method == "POST" and path == "/auth/register":
            if body.get("username") in self.users:
                return _json(400, {"success": False, "message": "Username is already taken"})
            self.users[body["username"]] = body["password"]
            return _json(201, {"success": True})

        if request.method == "GET" and path == "/products":
            return _json(200, self.products)

        if request.method == "GET" and path == "/products/search":
            value = request.url.params.get("value", "")
            hits = [
                p for p in self.products
                if value in p["name"].lower() or value in p["category"].lower()
            ]
            return _json(200, hits) if hits else _json(404)

        if path == "/cart":
            token = self._token(request)
            if token is None:
                return _json(401, {"success": False, "message": "Protected route, Oauth2 Bearer token not found"})
            cart = self.carts[token]
            if request.method == "GET":
                return _json(200, cart)
            product_id, qty = body.get("productId"), body.get("qty")
            if not any(p["_id"] == product_id for p in self.products):
                return _json(404, {"success": False, "message": "Product doesn't exist"})
            existing = next((e for e in cart if e["productId"] == product_id), None)
            if qty == 0:
                if existing:
                    cart.remove(existing)
            elif existing:
                existing["qty"] = qty
            else:
                cart.append({"productId": product_id, "qty": qty})
            return _json(200, cart)

        return _json(404, {"success": False, "message": "Not found"})


class FakeTimer:
    def __init__(self, clock: "FakeClock", interval_ms: float, function, args):
        self.clock = clock
        self.interval_ms = interval_ms
        self.function = function
        self.args = args
        self.fire_at: Optional[float] = None
        self.cancelled = False

    def start(self):
        self.fire_at = self.clock.now + self.interval_ms
        self.clock.timers.append(self)

    def cancel(self):
        self.cancelled = True


class FakeClock:
    """Virtual milliseconds; timers fire only when the clock is advanced."""

    def __init__(self):
        self.now = 0.0
        self.timers: List[FakeTimer] = []
        self.fired: List[float] = []

    def timer_factory(self, interval: float, function, args=()):
        return FakeTimer(self, round(interval * 1000, 6), function, args)

    def advance(self, ms: float):
        target = self.now + ms
        while True:
            due = [t for t in self.timers if not t.cancelled and t.fire_at <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.fire_at)
            self.timers.remove(timer)
            self.now = timer.fire_at
            self.fired.append(self.now)
            timer.function(*timer.args)
        self.now = target

    @property
    def active(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]


@pytest.fixture
def fake_api():
    return FakeStorefrontApi()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog_client(fake_api):
    return CatalogClient(BASE_URL, transport=fake_api.transport)


@pytest.fixture
def cart_client(fake_api):
    return CartClient(BASE_URL, transport=fake_api.transport)


@pytest.fixture
def auth_client(fake_api):
    return AuthClient(BASE_URL, transport=fake_api.transport)


@pytest.fixture
def session_context():
    return SessionContext(InMemorySessionStore())


@pytest.fixture
def base_url():
    return BASE_URL
