"""Pagination arithmetic shared by the window calculator and the controller."""

from __future__ import annotations

import math
from typing import Tuple


def compute_total_pages(total_items: int, items_per_page: int) -> int:
    """Compute the number of pages needed for ``total_items``; zero items means zero pages."""
    return math.ceil(total_items / items_per_page)


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp a page number into ``[1, total_pages]``, or 1 when there are no pages."""
    if 0 < total_pages < page_number:
        return total_pages
    if page_number < 1:
        return 1
    return page_number


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end
