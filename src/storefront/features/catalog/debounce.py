"""
Trailing-edge debounce for search-as-you-type.

Every keystroke cancels the pending search and schedules a new one; only the
last keystroke before a quiet window of ``wait_ms`` reaches the catalog.
Each search widget owns exactly one Debouncer, and the desktop and mobile
boxes use different windows.
"""

import logging
import threading
from typing import Any, Callable, Optional, Tuple

from storefront.config import config
from storefront.errors import StorefrontError

logger = logging.getLogger(__name__)

DESKTOP_SEARCH_DEBOUNCE_MS = config.SEARCH_DEBOUNCE_DESKTOP_MS
MOBILE_SEARCH_DEBOUNCE_MS = config.SEARCH_DEBOUNCE_MOBILE_MS


def _daemon_timer(interval: float, function: Callable, args: Tuple = ()) -> threading.Timer:
    timer = threading.Timer(interval, function, args=args)
    timer.daemon = True
    return timer


class Debouncer:
    """
    Delay ``action`` until calls stop for ``wait_ms`` milliseconds.

    ``timer_factory`` is called as ``timer_factory(seconds, function, args)``
    and must return an object with ``start()`` and ``cancel()``, like
    ``threading.Timer``.
    """

    def __init__(
        self,
        wait_ms: int,
        action: Callable[..., Any],
        timer_factory: Optional[Callable] = None,
    ):
        if wait_ms < 0:
            raise ValueError("wait_ms must be >= 0")
        self.wait_ms = wait_ms
        self.action = action
        self._timer_factory = timer_factory or _daemon_timer
        self._lock = threading.Lock()
        self._timer = None
        self._pending_args: Optional[Tuple] = None
        # Bumped on every schedule/cancel so a timer that fires after being
        # superseded can tell it is stale.
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any) -> None:
        """Cancel any pending call and schedule ``action(*args)``."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending_args = args
            self._timer = self._timer_factory(
                self.wait_ms / 1000.0, self._fire, (self._generation, args)
            )
            self._timer.start()

    def _fire(self, generation: int, args: Tuple) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            self._pending_args = None
        self.action(*args)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending_args = None
            self._generation += 1

    def flush(self) -> bool:
        """Run the pending call now. Returns False when nothing was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            args = self._pending_args or ()
            self._timer = None
            self._pending_args = None
            self._generation += 1
        self.action(*args)
        return True


class SearchDebouncer:
    """Search box state: one pending search at a time, fed by keystrokes."""

    def __init__(
        self,
        catalog_service,
        wait_ms: int = DESKTOP_SEARCH_DEBOUNCE_MS,
        on_results: Optional[Callable[[list], None]] = None,
        on_error: Optional[Callable[[StorefrontError], None]] = None,
        timer_factory: Optional[Callable] = None,
    ):
        self.catalog_service = catalog_service
        self.on_results = on_results
        self.on_error = on_error
        self._debouncer = Debouncer(wait_ms, self._search, timer_factory=timer_factory)

    @property
    def wait_ms(self) -> int:
        return self._debouncer.wait_ms

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def on_input(self, text: str) -> None:
        self._debouncer.call(text)

    def flush(self) -> bool:
        return self._debouncer.flush()

    def cancel(self) -> None:
        self._debouncer.cancel()

    def _search(self, text: str) -> None:
        try:
            self.catalog_service.search(text)
        except StorefrontError as e:
            if self.on_error is None:
                raise
            self.on_error(e)
            return
        if self.on_results is not None:
            self.on_results(self.catalog_service.products)
