import pytest

from services.controller import PaginationViewController
from services.page_window import DisplayOptions
from services.registry import PaginationState, UnboundInstanceError


def labels(controller):
    return [page.label for page in controller.pages]


def test_correct_clamps_into_range():
    assert PaginationViewController.correct(PaginationState(999, 10, 25)) == 3
    assert PaginationViewController.correct(PaginationState(0, 10, 25)) == 1
    assert PaginationViewController.correct(PaginationState(2, 10, 25)) == 2


def test_correct_without_items_keeps_page_one():
    assert PaginationViewController.correct(PaginationState(1, 10, 0)) == 1
    assert PaginationViewController.correct(PaginationState(0, 10, 0)) == 1


def test_activation_fails_for_unknown_id(registry, make_controller):
    controller = make_controller("missing")

    with pytest.raises(UnboundInstanceError):
        controller.activate()

    assert not controller.is_active
    registry.register("missing", total_items=50)
    assert controller.pages == []
    assert controller.last_page == 0


def test_activation_computes_initial_window(registry, make_controller):
    registry.register("catalog", current_page=2, items_per_page=10, total_items=25)
    controller = make_controller()

    controller.activate()

    assert controller.is_active
    assert controller.current_page == 2
    assert controller.last_page == 3
    assert labels(controller) == [1, 2, 3]
    assert controller.events == []


def test_activate_twice_keeps_one_subscription(registry, scheduler, make_controller):
    registry.register("catalog", total_items=25)
    controller = make_controller()
    controller.activate()
    controller.activate()

    registry.set_total_items("catalog", 300)

    assert controller.last_page == 30
    assert len(scheduler) == 0


def test_in_range_change_recomputes_synchronously(registry, scheduler, make_controller):
    registry.register("catalog", current_page=1, items_per_page=10, total_items=25)
    controller = make_controller(options=DisplayOptions(max_visible=3, rotate=False))
    controller.activate()

    registry.set_total_items("catalog", 100)

    assert len(scheduler) == 0
    assert controller.last_page == 10
    assert labels(controller) == [1, 2, 3, "…"]


def test_out_of_range_page_is_corrected_on_next_tick(registry, scheduler, make_controller):
    registry.register("catalog", current_page=10, items_per_page=10, total_items=100)
    controller = make_controller()
    controller.activate()

    registry.set_total_items("catalog", 25)

    # nothing fires from inside the notification
    assert controller.events == []
    assert controller.last_page == 3
    assert len(scheduler) == 1

    scheduler.run_pending()

    assert controller.events == [3]
    assert controller.current_page == 3
    assert registry.get_instance("catalog").current_page == 3
    assert [page.number for page in controller.pages if page.is_active] == [3]
    assert labels(controller) == [1, 2, 3]


def test_correction_uses_corrected_page_without_write_back(registry, scheduler, make_controller):
    registry.register("catalog", current_page=999, items_per_page=10, total_items=25)
    controller = make_controller(write_back=False)
    controller.activate()

    assert controller.pages == []
    scheduler.run_pending()

    assert controller.events == [3]
    assert [page.number for page in controller.pages if page.is_active] == [3]


def test_page_below_one_is_raised(registry, scheduler, make_controller):
    registry.register("catalog", current_page=0, items_per_page=10, total_items=25)
    controller = make_controller()
    controller.activate()
    scheduler.run_pending()

    assert controller.events == [1]
    assert registry.get_instance("catalog").current_page == 1


def test_repeated_corrections_fire_one_event(registry, scheduler, make_controller):
    registry.register("catalog", current_page=9, items_per_page=10, total_items=90)
    controller = make_controller(write_back=False)
    controller.activate()

    registry.set_total_items("catalog", 30)
    registry.set_total_items("catalog", 25)
    scheduler.run_pending()

    assert controller.events == [3]


def test_empty_list_gives_no_pages(registry, scheduler, make_controller):
    registry.register("catalog", current_page=1, items_per_page=10, total_items=0)
    controller = make_controller()
    controller.activate()

    assert controller.pages == []
    assert controller.last_page == 0
    assert len(scheduler) == 0

    controller.to_next()
    controller.to_last()
    assert controller.events == []


def test_navigation_emits_once_per_distinct_page(registry, make_controller):
    registry.register("catalog", current_page=1, items_per_page=10, total_items=30)
    controller = make_controller()
    controller.activate()

    controller.to_previous()
    controller.to_next()
    controller.to_next()
    controller.to_next()
    controller.to_next()
    controller.to_first()
    controller.to_first()
    controller.to_last()

    assert controller.events == [2, 3, 1, 3]
    assert registry.get_instance("catalog").current_page == 3
    assert [page.number for page in controller.pages if page.is_active] == [3]


def test_set_current_page_same_value_is_silent(registry, make_controller):
    registry.register("catalog", current_page=2, items_per_page=10, total_items=30)
    controller = make_controller()
    controller.activate()

    controller.set_current_page(2)

    assert controller.events == []


def test_controllers_sharing_an_id_recompute_independently(registry, make_controller):
    registry.register("catalog", current_page=1, items_per_page=10, total_items=100)
    strip = make_controller(options=DisplayOptions(max_visible=3, rotate=True))
    selector = make_controller(write_back=False)
    strip.activate()
    selector.activate()

    strip.to_next()

    assert strip.current_page == selector.current_page == 2
    assert labels(strip) == [1, 2, 3]
    assert labels(selector) == list(range(1, 11))
    assert selector.events == []


def test_other_ids_are_ignored(registry, make_controller):
    registry.register("catalog", total_items=20)
    registry.register("other", total_items=20)
    controller = make_controller()
    controller.activate()

    registry.set_total_items("other", 500)

    assert controller.last_page == 2


def test_deactivate_stops_updates_and_drops_pending_corrections(registry, scheduler, make_controller):
    registry.register("catalog", current_page=50, items_per_page=10, total_items=25)
    controller = make_controller()
    controller.activate()

    controller.deactivate()
    controller.deactivate()
    scheduler.run_pending()
    registry.set_total_items("catalog", 1000)

    assert controller.events == []
    assert controller.pages == []
    assert controller.last_page == 3
    assert registry.get_instance("catalog").current_page == 50


def test_correction_dropped_when_instance_unregistered(registry, scheduler, make_controller):
    registry.register("catalog", current_page=5, items_per_page=10, total_items=25)
    controller = make_controller()
    controller.activate()

    registry.unregister("catalog")
    scheduler.run_pending()

    assert controller.events == []


def test_pagination_size_class(registry, scheduler):
    def size_class(size):
        return PaginationViewController("catalog", registry, scheduler, size=size).pagination_size_class()

    assert size_class("sm") == "pagination-sm"
    assert size_class("lg") == "pagination-lg"
    assert size_class("md") is None
    assert size_class(None) is None
