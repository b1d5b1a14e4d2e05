"""Page-size selector bound to a pagination instance."""

from __future__ import annotations

import streamlit as st

from config import PAGE_SIZE_OPTIONS
from services.controller import PaginationViewController
from services.validation_service import validate_page_size


def _apply_page_size(controller: PaginationViewController, widget_key: str) -> None:
    valid, error_message, page_size = validate_page_size(st.session_state.get(widget_key))
    if not valid:
        st.session_state["notifications"].append(("warning", error_message))
        return
    controller.registry.set_items_per_page(controller.instance_id, page_size)


def render_page_size_selector(controller: PaginationViewController, key: str) -> None:
    """Render a rows-per-page selectbox and a page position caption."""
    state = controller.registry.get_instance(controller.instance_id)
    current_size = state.items_per_page if state is not None else PAGE_SIZE_OPTIONS[0]
    options = sorted(set(PAGE_SIZE_OPTIONS) | {current_size})

    left, right = st.columns([1, 3])
    with left:
        st.selectbox(
            "Rows per page",
            options=options,
            index=options.index(current_size),
            key=key,
            on_change=_apply_page_size,
            args=(controller, key),
        )
    with right:
        if controller.last_page:
            st.caption(f"Page {controller.current_page} of {controller.last_page}")
        else:
            st.caption("No matching items.")
