"""
Session Management Module

Persisted token/username/balance for the logged-in user.
"""

from storefront.session.session_manager import (
    SESSION_KEYS,
    InMemorySessionStore,
    RedisSessionStore,
    SessionContext,
    SessionStore,
    get_session_store,
)

__all__ = [
    "SESSION_KEYS",
    "InMemorySessionStore",
    "RedisSessionStore",
    "SessionContext",
    "SessionStore",
    "get_session_store",
]
