"""View controller that keeps one pagination bar in sync with the registry."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from config import SIZE_CLASSES
from services.page_window import DisplayOptions, PageMarker, compute_window
from services.registry import PaginationRegistry, PaginationState, Subscription, UnboundInstanceError
from services.scheduler import ScheduledCall, TickScheduler
from utils.pagination import clamp_page_number, compute_total_pages

logger = logging.getLogger(__name__)

PageChangeListener = Callable[[int], None]


class PaginationViewController:
    """Holds ``current_page``, ``last_page`` and ``pages`` for one bound instance id.

    Several controllers may bind the same id; each recomputes its own view
    state when the registry reports a change for that id. Page changes, from
    navigation or from out-of-range correction, all go through
    ``set_current_page`` and reach listeners once per distinct value.
    """

    first_page = 1

    def __init__(
        self,
        instance_id: str,
        registry: PaginationRegistry,
        scheduler: TickScheduler,
        options: DisplayOptions = DisplayOptions(),
        size: Optional[str] = None,
    ):
        self.instance_id = instance_id
        self.registry = registry
        self.scheduler = scheduler
        self.options = options
        self.size = size

        self.current_page: Optional[int] = None
        self.last_page = 0
        self.pages: List[PageMarker] = []

        self._page_change_listeners: List[PageChangeListener] = []
        self._subscription: Optional[Subscription] = None
        self._pending: List[ScheduledCall] = []

    @property
    def is_active(self) -> bool:
        return self._subscription is not None

    def add_page_change_listener(self, listener: PageChangeListener) -> None:
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._page_change_listeners.append(listener)

    def pagination_size_class(self) -> Optional[str]:
        """Style token for the bar size, ``None`` unless size is "sm" or "lg"."""
        return SIZE_CLASSES.get(self.size)

    # lifecycle

    def activate(self) -> None:
        """Bind to the registry and compute the initial window.

        Raises ``UnboundInstanceError`` before subscribing when the id is unknown.
        """
        if self.is_active:
            return
        if self.registry.get_instance(self.instance_id) is None:
            raise UnboundInstanceError(self.instance_id)

        self._subscription = self.registry.subscribe(self._on_registry_change)
        self.update_pages()

    def deactivate(self) -> None:
        """Release the subscription and drop pending corrections. Safe to repeat."""
        for call in self._pending:
            call.cancel()
        self._pending = []

        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    # navigation

    def to_previous(self) -> None:
        if self.current_page is not None and self.current_page > self.first_page:
            self.set_current_page(self.current_page - 1)

    def to_next(self) -> None:
        if self.current_page is not None and self.current_page < self.last_page:
            self.set_current_page(self.current_page + 1)

    def to_first(self) -> None:
        self.set_current_page(self.first_page)

    def to_last(self) -> None:
        self.set_current_page(max(self.last_page, self.first_page))

    def set_current_page(self, page: int) -> None:
        if page == self.current_page:
            return
        self.current_page = page
        logger.info("Pagination %s moved to page %s", self.instance_id, page)
        for listener in list(self._page_change_listeners):
            listener(page)

    # synchronisation

    @staticmethod
    def correct(state: PaginationState) -> int:
        """Return ``state.current_page`` clamped into the valid page range."""
        total_pages = compute_total_pages(state.total_items, state.items_per_page)
        return clamp_page_number(state.current_page, total_pages)

    def update_pages(self) -> None:
        """Re-derive the window from the registry state for the bound id.

        An out-of-range page is corrected on the next scheduler tick so the
        page-change event does not fire from inside a registry notification.
        """
        state = self._fetch_state()
        self.last_page = compute_total_pages(state.total_items, state.items_per_page)

        corrected = self.correct(state)
        if corrected != state.current_page:
            logger.info(
                "Pagination %s page %s out of range 1..%s, correcting to %s",
                self.instance_id,
                state.current_page,
                self.last_page,
                corrected,
            )
            call = self.scheduler.call_soon(lambda: self._apply_correction(call))
            self._pending.append(call)
            return

        self.current_page = state.current_page
        self.pages = self._compute(state, state.current_page)

    def _apply_correction(self, call: ScheduledCall) -> None:
        if call in self._pending:
            self._pending.remove(call)
        if not self.is_active:
            return

        state = self.registry.get_instance(self.instance_id)
        if state is None:
            logger.warning("Dropping page correction for unregistered instance %s", self.instance_id)
            return

        self.set_current_page(self.correct(state))

        # Listeners usually write the corrected page back, so read the state again.
        state = self.registry.get_instance(self.instance_id)
        if state is None or not self.is_active:
            return
        self.last_page = compute_total_pages(state.total_items, state.items_per_page)
        self.pages = self._compute(state, self.correct(state))

    def _compute(self, state: PaginationState, current_page: int) -> List[PageMarker]:
        pages = compute_window(current_page, state.items_per_page, state.total_items, self.options)
        logger.debug("Pagination %s window: %s", self.instance_id, [page.label for page in pages])
        return pages

    def _fetch_state(self) -> PaginationState:
        state = self.registry.get_instance(self.instance_id)
        if state is None:
            raise UnboundInstanceError(self.instance_id)
        return state

    def _on_registry_change(self, instance_id: str) -> None:
        if instance_id == self.instance_id:
            self.update_pages()
