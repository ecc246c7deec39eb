"""
Session Manager

Key-value storage for the logged-in user's session.

The session is three independent scalar keys, written and cleared together
but with no atomicity across them:

    token     - bearer token for authenticated cart calls
    username  - display name
    balance   - wallet balance, stored as text

Redis is used when REDIS_URL is configured, otherwise an in-memory store.
SessionContext wraps a store with an explicit lifecycle: load() at start-up,
persist() after login, clear() on logout.
"""

import logging
from typing import Dict, Optional

from storefront.config import config
from storefront.models import Session

logger = logging.getLogger(__name__)

SESSION_KEYS = ("token", "username", "balance")


class SessionStore:
    """Minimal string key-value interface backing the session."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Process-local store; lives as long as the interpreter."""

    def __init__(self):
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)


class RedisSessionStore(SessionStore):
    """Redis-backed store. Keys are namespaced with SESSION_KEY_PREFIX."""

    def __init__(self, client, prefix: Optional[str] = None):
        self._redis = client
        self.prefix = prefix if prefix is not None else config.SESSION_KEY_PREFIX

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        raw = self._redis.get(self._key(key))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            return raw.decode("utf-8")
        return str(raw)

    def set(self, key: str, value: str) -> None:
        self._redis.set(self._key(key), value)

    def delete(self, key: str) -> None:
        self._redis.delete(self._key(key))


def _get_redis_client(redis_url: Optional[str]):
    """
    Get Redis client for ``redis_url``.

    Returns:
        Redis client instance or None if Redis is not configured or unreachable.
    """
    if not redis_url:
        return None

    import redis

    try:
        client = redis.from_url(redis_url)
        client.ping()
        return client
    except (redis.RedisError, ValueError) as e:
        logger.warning("Redis unavailable at %s, using in-memory session store: %s", redis_url, e)
        return None


def get_session_store(redis_url: Optional[str] = None) -> SessionStore:
    """Build the session store: Redis when configured and reachable, in-memory otherwise."""
    url = redis_url if redis_url is not None else config.REDIS_URL
    client = _get_redis_client(url)
    if client is not None:
        logger.info("Using Redis session store")
        return RedisSessionStore(client)
    return InMemorySessionStore()


class SessionContext:
    """Explicit session object handed to the services that need the token."""

    def __init__(self, store: Optional[SessionStore] = None):
        self.store = store if store is not None else get_session_store()
        self._session: Optional[Session] = None

    def load(self) -> Optional[Session]:
        """
        Read the persisted keys into memory.

        Returns:
            The Session, or None when no token is stored
        """
        token = self.store.get("token")
        if not token:
            self._session = None
            return None

        balance_raw = self.store.get("balance")
        try:
            balance = float(balance_raw) if balance_raw not in (None, "") else None
        except ValueError:
            logger.warning("Ignoring unparseable stored balance %r", balance_raw)
            balance = None

        self._session = Session(
            token=token,
            username=self.store.get("username") or "",
            balance=balance,
        )
        return self._session

    def persist(self, token: str, username: str, balance: Optional[float]) -> Session:
        """Write all three keys and make the session current."""
        self.store.set("token", token)
        self.store.set("username", username)
        self.store.set("balance", "" if balance is None else str(balance))
        self._session = Session(token=token, username=username, balance=balance)
        return self._session

    def clear(self) -> None:
        """Delete all three keys together (logout)."""
        for key in SESSION_KEYS:
            self.store.delete(key)
        self._session = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def token(self) -> Optional[str]:
        return self._session.token if self._session else None

    @property
    def username(self) -> Optional[str]:
        return self._session.username if self._session else None

    @property
    def balance(self) -> Optional[float]:
        return self._session.balance if self._session else None

    @property
    def is_logged_in(self) -> bool:
        return self._session is not None
