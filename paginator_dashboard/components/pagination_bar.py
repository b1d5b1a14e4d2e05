"""Page-link strip component rendered from a controller's markers."""

from __future__ import annotations

import streamlit as st

from services.controller import PaginationViewController


def _nav_button(column, label: str, key: str, disabled: bool, on_click) -> None:
    with column:
        st.button(label, key=key, disabled=disabled, on_click=on_click, width="stretch")


def render_pagination_bar(
    controller: PaginationViewController,
    key: str,
    boundary_links: bool = True,
    direction_links: bool = True,
) -> None:
    """Render first/previous/page/next/last buttons for ``controller``."""
    if not controller.pages:
        st.caption("No pages to show.")
        return

    on_first = controller.current_page is None or controller.current_page <= controller.first_page
    on_last = controller.current_page is None or controller.current_page >= controller.last_page

    slots = len(controller.pages) + 2 * int(boundary_links) + 2 * int(direction_links)
    size_class = controller.pagination_size_class() or "pagination"

    with st.container(key=f"{key}-{size_class}"):
        columns = iter(st.columns(slots, gap="small"))

        if boundary_links:
            _nav_button(next(columns), "«", f"{key}_first", on_first, controller.to_first)
        if direction_links:
            _nav_button(next(columns), "‹", f"{key}_previous", on_first, controller.to_previous)

        for marker in controller.pages:
            with next(columns):
                st.button(
                    str(marker.label),
                    key=f"{key}_page_{marker.number}_{'gap' if marker.is_ellipsis else 'link'}",
                    type="primary" if marker.is_active else "secondary",
                    disabled=marker.is_active or marker.is_ellipsis,
                    on_click=controller.set_current_page,
                    args=(marker.number,),
                    width="stretch",
                )

        if direction_links:
            _nav_button(next(columns), "›", f"{key}_next", on_last, controller.to_next)
        if boundary_links:
            _nav_button(next(columns), "»", f"{key}_last", on_last, controller.to_last)
