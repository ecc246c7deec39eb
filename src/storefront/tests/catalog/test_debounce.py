"""
Tests for the trailing-edge debouncer, driven by a virtual clock.
"""

from unittest.mock import Mock

import pytest

from storefront.errors import UpstreamError
from storefront.features.catalog import (
    DESKTOP_SEARCH_DEBOUNCE_MS,
    MOBILE_SEARCH_DEBOUNCE_MS,
    Debouncer,
    SearchDebouncer,
)


class TestDebouncer:

    def test_burst_fires_once_after_last_call(self, clock):
        """Keystrokes at 0/100/200ms with a 500ms window fire once, at 700ms, with the last text."""
        action = Mock()
        debouncer = Debouncer(500, action, timer_factory=clock.timer_factory)

        debouncer.call("l")
        clock.advance(100)
        debouncer.call("le")
        clock.advance(100)
        debouncer.call("lea")

        clock.advance(499)
        action.assert_not_called()

        clock.advance(1)
        action.assert_called_once_with("lea")
        assert clock.fired == [700]

        clock.advance(5000)
        assert action.call_count == 1

    def test_calls_separated_by_a_pause_each_fire(self, clock):
        action = Mock()
        debouncer = Debouncer(300, action, timer_factory=clock.timer_factory)

        debouncer.call("a")
        clock.advance(300)
        debouncer.call("b")
        clock.advance(300)

        assert [c.args for c in action.call_args_list] == [("a",), ("b",)]

    def test_only_one_timer_is_ever_live(self, clock):
        debouncer = Debouncer(500, Mock(), timer_factory=clock.timer_factory)
        for text in ("a", "ab", "abc", "abcd"):
            debouncer.call(text)
        assert len(clock.active) == 1
        assert debouncer.pending

    def test_cancel_drops_pending_call(self, clock):
        action = Mock()
        debouncer = Debouncer(500, action, timer_factory=clock.timer_factory)

        debouncer.call("x")
        debouncer.cancel()
        clock.advance(1000)

        action.assert_not_called()
        assert not debouncer.pending

    def test_flush_runs_pending_call_now(self, clock):
        action = Mock()
        debouncer = Debouncer(500, action, timer_factory=clock.timer_factory)

        assert debouncer.flush() is False
        debouncer.call("now")
        assert debouncer.flush() is True
        action.assert_called_once_with("now")

        clock.advance(1000)
        assert action.call_count == 1

    def test_stale_timer_callback_is_ignored(self, clock):
        """A timer that fires after being superseded must not run the action."""
        action = Mock()
        debouncer = Debouncer(500, action, timer_factory=clock.timer_factory)

        debouncer.call("old")
        stale = clock.timers[0]
        debouncer.call("new")
        stale.function(*stale.args)

        action.assert_not_called()
        clock.advance(500)
        action.assert_called_once_with("new")

    def test_negative_window_rejected(self):
        with pytest.raises(ValueError):
            Debouncer(-1, Mock())


class TestSearchDebouncer:

    def test_windows_are_distinct(self):
        assert DESKTOP_SEARCH_DEBOUNCE_MS == 500
        assert MOBILE_SEARCH_DEBOUNCE_MS == 300

    def test_only_final_text_reaches_catalog(self, clock):
        catalog = Mock()
        catalog.products = ("result",)
        on_results = Mock()
        box = SearchDebouncer(catalog, wait_ms=MOBILE_SEARCH_DEBOUNCE_MS,
                              on_results=on_results, timer_factory=clock.timer_factory)

        for text in ("w", "wa", "wat"):
            box.on_input(text)
            clock.advance(50)
        clock.advance(300)

        catalog.search.assert_called_once_with("wat")
        on_results.assert_called_once_with(("result",))

    def test_errors_go_to_on_error(self, clock):
        catalog = Mock()
        catalog.search.side_effect = UpstreamError("down")
        on_error = Mock()
        on_results = Mock()
        box = SearchDebouncer(catalog, wait_ms=500, on_results=on_results,
                              on_error=on_error, timer_factory=clock.timer_factory)

        box.on_input("x")
        clock.advance(500)

        on_error.assert_called_once()
        assert isinstance(on_error.call_args.args[0], UpstreamError)
        on_results.assert_not_called()

    def test_each_widget_has_its_own_timer(self, clock):
        catalog = Mock()
        desktop = SearchDebouncer(catalog, wait_ms=500, timer_factory=clock.timer_factory)
        mobile = SearchDebouncer(catalog, wait_ms=300, timer_factory=clock.timer_factory)

        desktop.on_input("desk")
        mobile.on_input("mob")
        clock.advance(300)
        catalog.search.assert_called_once_with("mob")

        clock.advance(200)
        assert [c.args for c in catalog.search.call_args_list] == [("mob",), ("desk",)]
