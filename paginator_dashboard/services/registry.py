"""Shared pagination state keyed by instance id, with change notifications."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, TypeVar

from utils.pagination import page_slice

logger = logging.getLogger(__name__)

T = TypeVar("T")
ChangeListener = Callable[[str], None]


class UnboundInstanceError(LookupError):
    """Raised when a controller binds to an id that has no registered instance."""

    def __init__(self, instance_id: str):
        super().__init__(f"There is no instance registered with id `{instance_id}`")
        self.instance_id = instance_id


class PaginationState(NamedTuple):
    current_page: int
    items_per_page: int
    total_items: int


class Subscription:
    """Registration of one change listener; ``unsubscribe`` is idempotent."""

    def __init__(self, registry: "PaginationRegistry", listener: ChangeListener):
        self._registry = registry
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._registry._remove_listener(self._listener)


class PaginationRegistry:
    """Stores ``{current_page, items_per_page, total_items}`` per id.

    Every mutation that changes a stored value broadcasts the instance id to
    subscribers. Writes that leave the state as it was are silent.
    """

    def __init__(self) -> None:
        self._instances: Dict[str, PaginationState] = {}
        self._listeners: List[ChangeListener] = []

    def __contains__(self, instance_id: str) -> bool:
        return instance_id in self._instances

    def get_instance(self, instance_id: str) -> Optional[PaginationState]:
        return self._instances.get(instance_id)

    def register(
        self,
        instance_id: str,
        current_page: int = 1,
        items_per_page: int = 10,
        total_items: int = 0,
    ) -> PaginationState:
        """Create or update an instance and notify only when something changed."""
        if items_per_page <= 0:
            raise ValueError(f"items_per_page must be positive, got {items_per_page}")
        if total_items < 0:
            raise ValueError(f"total_items cannot be negative, got {total_items}")

        state = PaginationState(current_page, items_per_page, total_items)
        if self._instances.get(instance_id) != state:
            self._instances[instance_id] = state
            self._notify(instance_id)
        return state

    def unregister(self, instance_id: str) -> None:
        self._instances.pop(instance_id, None)

    def _update(self, instance_id: str, **changes: int) -> bool:
        state = self._instances.get(instance_id)
        if state is None:
            raise UnboundInstanceError(instance_id)
        updated = state._replace(**changes)
        if updated == state:
            return False
        self._instances[instance_id] = updated
        self._notify(instance_id)
        return True

    def set_current_page(self, instance_id: str, page: int) -> bool:
        return self._update(instance_id, current_page=page)

    def set_items_per_page(self, instance_id: str, items_per_page: int) -> bool:
        if items_per_page <= 0:
            raise ValueError(f"items_per_page must be positive, got {items_per_page}")
        return self._update(instance_id, items_per_page=items_per_page)

    def set_total_items(self, instance_id: str, total_items: int) -> bool:
        if total_items < 0:
            raise ValueError(f"total_items cannot be negative, got {total_items}")
        return self._update(instance_id, total_items=total_items)

    def subscribe(self, listener: ChangeListener) -> Subscription:
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _remove_listener(self, listener: ChangeListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self, instance_id: str) -> None:
        logger.debug("Pagination instance %s changed: %s", instance_id, self._instances[instance_id])
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(instance_id)


def paginate(
    collection: Sequence[T],
    registry: PaginationRegistry,
    instance_id: str,
    items_per_page: int,
    current_page: int = 1,
    total_items: Optional[int] = None,
) -> Sequence[T]:
    """Register the instance for ``collection`` and return the rows of its current page.

    With ``total_items`` the collection is taken to be the already fetched
    server-side page and is returned whole.
    """
    server_side = total_items is not None
    registry.register(
        instance_id,
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=total_items if server_side else len(collection),
    )
    if server_side:
        return collection

    start, end = page_slice(current_page, items_per_page)
    return collection[start:end]
