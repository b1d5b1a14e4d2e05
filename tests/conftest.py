import pytest

from services.controller import PaginationViewController
from services.page_window import DisplayOptions
from services.registry import PaginationRegistry
from services.scheduler import TickScheduler


@pytest.fixture
def registry():
    return PaginationRegistry()


@pytest.fixture
def scheduler():
    return TickScheduler()


@pytest.fixture
def make_controller(registry, scheduler):
    """Build a controller bound to ``instance_id`` that records its page-change events."""

    def _make(instance_id="catalog", options=DisplayOptions(), size=None, write_back=True):
        controller = PaginationViewController(instance_id, registry, scheduler, options, size)
        controller.events = []
        controller.add_page_change_listener(controller.events.append)
        if write_back:
            controller.add_page_change_listener(lambda page: registry.set_current_page(instance_id, page))
        return controller

    return _make
