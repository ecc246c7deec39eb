"""
Unit tests for the session store and SessionContext lifecycle.
"""

from unittest.mock import Mock, patch

from storefront.session import (
    InMemorySessionStore,
    RedisSessionStore,
    SessionContext,
    get_session_store,
)


class TestSessionContext:

    def test_load_without_token_is_none(self):
        context = SessionContext(InMemorySessionStore())
        assert context.load() is None
        assert not context.is_logged_in
        assert context.token is None

    def test_persist_then_reload_in_new_context(self):
        store = InMemorySessionStore()
        SessionContext(store).persist("tok", "crio.do", 5000)

        reloaded = SessionContext(store)
        session = reloaded.load()

        assert session.token == "tok"
        assert session.username == "crio.do"
        assert session.balance == 5000.0
        assert reloaded.is_logged_in

    def test_clear_removes_all_three_keys(self):
        store = InMemorySessionStore()
        context = SessionContext(store)
        context.persist("tok", "crio.do", 10)

        context.clear()

        assert store.get("token") is None
        assert store.get("username") is None
        assert store.get("balance") is None
        assert context.session is None

    def test_keys_are_independent(self):
        """A token alone is still a session; missing fields come back empty."""
        store = InMemorySessionStore()
        store.set("token", "tok")

        session = SessionContext(store).load()

        assert session.token == "tok"
        assert session.username == ""
        assert session.balance is None

    def test_unparseable_balance_is_ignored(self):
        store = InMemorySessionStore()
        store.set("token", "tok")
        store.set("balance", "lots")
        assert SessionContext(store).load().balance is None


class TestRedisSessionStore:

    def test_prefixed_keys(self):
        redis_client = Mock()
        redis_client.get.return_value = b"tok"
        store = RedisSessionStore(redis_client, prefix="shop:")

        store.set("token", "tok")
        assert store.get("token") == "tok"
        store.delete("token")

        redis_client.set.assert_called_once_with("shop:token", "tok")
        redis_client.get.assert_called_once_with("shop:token")
        redis_client.delete.assert_called_once_with("shop:token")

    def test_missing_key_is_none(self):
        redis_client = Mock()
        redis_client.get.return_value = None
        assert RedisSessionStore(redis_client).get("token") is None

    def test_context_over_redis(self):
        data = {}
        redis_client = Mock()
        redis_client.set.side_effect = lambda k, v: data.__setitem__(k, v.encode("utf-8"))
        redis_client.get.side_effect = lambda k: data.get(k)
        redis_client.delete.side_effect = lambda k: data.pop(k, None)
        store = RedisSessionStore(redis_client, prefix="s:")

        SessionContext(store).persist("tok", "crio.do", 1.5)
        assert set(data) == {"s:token", "s:username", "s:balance"}

        context = SessionContext(store)
        assert context.load().balance == 1.5
        context.clear()
        assert data == {}


class TestGetSessionStore:

    def test_no_url_is_in_memory(self):
        with patch("storefront.session.session_manager.config") as cfg:
            cfg.REDIS_URL = None
            assert isinstance(get_session_store(), InMemorySessionStore)

    def test_redis_when_available(self):
        with patch("storefront.session.session_manager._get_redis_client", return_value=Mock()):
            assert isinstance(get_session_store("redis://localhost:6379/0"), RedisSessionStore)

    def test_unreachable_redis_falls_back(self):
        with patch("storefront.session.session_manager._get_redis_client", return_value=None):
            assert isinstance(get_session_store("redis://nowhere:6379/0"), InMemorySessionStore)

    def test_url_without_scheme_falls_back(self):
        store = get_session_store("localhost:6379")
        assert isinstance(store, InMemorySessionStore)

    def test_ping_failure_falls_back(self):
        import redis

        client = Mock()
        client.ping.side_effect = redis.ConnectionError("refused")
        with patch("redis.from_url", return_value=client):
            assert isinstance(get_session_store("redis://nowhere:6379/0"), InMemorySessionStore)
