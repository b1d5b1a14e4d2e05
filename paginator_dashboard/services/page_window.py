"""Page window calculation for the pagination bar.

Turns ``(current_page, items_per_page, total_items)`` plus display options into
the ordered list of markers the bar renders: page numbers, ellipsis
placeholders and the active flag.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple, Union

from config import ELLIPSIS_LABEL
from utils.pagination import compute_total_pages


class PageMarker(NamedTuple):
    """One rendered entry of the pagination bar."""

    number: int
    label: Union[int, str]
    is_active: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.label == ELLIPSIS_LABEL


class DisplayOptions(NamedTuple):
    """Window display settings.

    ``max_visible`` of ``None`` or 0 shows every page. ``rotate`` keeps the current
    page centred; otherwise pages advance in blocks of ``max_visible``.
    """

    max_visible: Optional[int] = None
    rotate: bool = True
    boundary_link_numbers: bool = False
    force_ellipses: bool = False


def _window_bounds(current_page: int, total_pages: int, options: DisplayOptions) -> Tuple[int, int]:
    """Return the inclusive ``(start_page, end_page)`` range of numbered markers."""
    start_page = 1
    end_page = total_pages
    max_visible = options.max_visible

    if not _is_windowed(options, total_pages):
        return start_page, end_page

    if options.rotate:
        start_page = max(current_page - max_visible // 2, 1)
        end_page = start_page + max_visible - 1
        if end_page > total_pages:
            end_page = total_pages
            start_page = end_page - max_visible + 1
    else:
        block = -(-current_page // max_visible)
        start_page = (block - 1) * max_visible + 1
        end_page = min(start_page + max_visible - 1, total_pages)

    return start_page, end_page


def _is_windowed(options: DisplayOptions, total_pages: int) -> bool:
    return bool(options.max_visible) and options.max_visible < total_pages


def _leading_markers(start_page: int, options: DisplayOptions) -> List[PageMarker]:
    if start_page <= 1:
        return []

    markers: List[PageMarker] = []
    if options.boundary_link_numbers:
        markers.append(PageMarker(1, 1))
        if start_page == 3:
            markers.append(PageMarker(2, 2))

    # Boundary numbers already cover the gap when the window starts at page 2 or 3.
    if not options.boundary_link_numbers or start_page > 3:
        markers.append(PageMarker(start_page - 1, ELLIPSIS_LABEL))
    return markers


def _trailing_markers(end_page: int, total_pages: int, options: DisplayOptions) -> List[PageMarker]:
    if end_page >= total_pages:
        return []

    markers: List[PageMarker] = []
    if not options.boundary_link_numbers or end_page < total_pages - 2:
        markers.append(PageMarker(end_page + 1, ELLIPSIS_LABEL))

    if options.boundary_link_numbers:
        if end_page == total_pages - 2:
            markers.append(PageMarker(total_pages - 1, total_pages - 1))
        markers.append(PageMarker(total_pages, total_pages))
    return markers


def compute_window(
    current_page: int,
    items_per_page: int,
    total_items: int,
    options: DisplayOptions = DisplayOptions(),
) -> List[PageMarker]:
    """Build the ordered page markers for the current position.

    ``items_per_page`` must be positive. ``current_page`` is used as given;
    callers clamp it first. Returns an empty list when there are no items.
    """
    total_pages = compute_total_pages(total_items, items_per_page)
    start_page, end_page = _window_bounds(current_page, total_pages, options)

    pages = [
        PageMarker(number, number, number == current_page)
        for number in range(start_page, end_page + 1)
    ]

    # A negative max_visible windows to an empty range and is never decorated.
    decorated = (
        _is_windowed(options, total_pages)
        and options.max_visible > 0
        and (
            not options.rotate or options.force_ellipses or options.boundary_link_numbers
        )
    )
    if not decorated:
        return pages

    return (
        _leading_markers(start_page, options)
        + pages
        + _trailing_markers(end_page, total_pages, options)
    )
