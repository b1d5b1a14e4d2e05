"""Streamlit app entrypoint for the Catalogue Paginator."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Tuple

import streamlit as st

from components.page_size_selector import render_page_size_selector
from components.pagination_bar import render_pagination_bar
from components.table import render_table
from config import (
    ASSETS_DIR,
    DEFAULT_INSTANCE_ID,
    DEFAULT_MAX_SIZE,
    DEFAULT_PAGE_SIZE,
    ITEMS_FILE,
    LOG_LEVEL,
    SEARCH_COLUMNS,
    SIZE_OPTIONS,
)
from services import data_loader, filter_service, validation_service
from services.controller import PaginationViewController
from services.page_window import DisplayOptions
from services.registry import PaginationRegistry, UnboundInstanceError, paginate
from services.scheduler import TickScheduler
from utils.helpers import configure_logging

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Catalogue Paginator", layout="wide")

CONTROLLER_KEYS = ["top_bar", "bottom_bar", "size_selector"]


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("registry", PaginationRegistry())
    st.session_state.setdefault("scheduler", TickScheduler())
    st.session_state.setdefault("controllers", {})
    st.session_state.setdefault("notifications", [])


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    for level, message in notifications:
        if level == "warning":
            st.warning(message)
        else:
            st.info(message)
    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False)
def get_items(items_path: str, file_mtime: float):
    """Load the catalogue with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_items(Path(items_path))


def reset_pagination() -> None:
    """Drop the catalogue controllers and instance so the next run starts on page 1."""
    for controller in st.session_state["controllers"].values():
        controller.deactivate()
    st.session_state["controllers"] = {}
    # The selector widget would otherwise keep showing the old page size.
    st.session_state.pop("page_size", None)

    registry: PaginationRegistry = st.session_state["registry"]
    if DEFAULT_INSTANCE_ID in registry:
        registry.unregister(DEFAULT_INSTANCE_ID)
    logger.info("Pagination %s reset", DEFAULT_INSTANCE_ID)


def render_settings() -> Tuple[DisplayOptions, str | None]:
    """Render window settings in the sidebar and return validated options."""
    st.sidebar.markdown("## Pagination")
    max_size = st.sidebar.text_input("Max visible pages", value=str(DEFAULT_MAX_SIZE), key="max_size")
    rotate = st.sidebar.checkbox("Rotate", value=True, key="rotate")
    boundary_link_numbers = st.sidebar.checkbox("Boundary link numbers", value=False, key="boundary_link_numbers")
    force_ellipses = st.sidebar.checkbox("Force ellipses", value=False, key="force_ellipses")
    size = st.sidebar.selectbox("Size", options=SIZE_OPTIONS, key="size")
    st.sidebar.button("Reset pagination", key="reset_pagination", on_click=reset_pagination)

    valid, error_message, normalized = validation_service.validate_display_settings(
        max_size,
        rotate,
        boundary_link_numbers,
        force_ellipses,
        size,
    )
    if not valid:
        st.sidebar.error(error_message)
        return DisplayOptions(max_visible=DEFAULT_MAX_SIZE), None
    return normalized["options"], normalized["size"]


def ensure_controllers(
    registry: PaginationRegistry,
    scheduler: TickScheduler,
    options: DisplayOptions,
    size: str | None,
) -> Dict[str, PaginationViewController]:
    """Create, activate and reconfigure the controllers bound to the catalogue."""
    controllers: Dict[str, PaginationViewController] = st.session_state["controllers"]

    for name in CONTROLLER_KEYS:
        controller = controllers.get(name)
        if controller is None:
            controller = PaginationViewController(DEFAULT_INSTANCE_ID, registry, scheduler, options, size)
            controller.add_page_change_listener(
                lambda page: registry.set_current_page(DEFAULT_INSTANCE_ID, page)
            )
            controller.activate()
            controllers[name] = controller
        elif controller.options != options or controller.size != size:
            controller.options = options
            controller.size = size
            controller.update_pages()

    return controllers


def main() -> None:
    """Render and run the Catalogue Paginator."""
    configure_logging(LOG_LEVEL)
    load_css()
    init_session_state()

    registry: PaginationRegistry = st.session_state["registry"]
    scheduler: TickScheduler = st.session_state["scheduler"]
    options, size = render_settings()

    try:
        if ITEMS_FILE.exists():
            items_df = get_items(str(ITEMS_FILE), ITEMS_FILE.stat().st_mtime)
        else:
            items_df = data_loader.build_demo_items()

        st.markdown("### Catalogue")
        query = st.text_input("Search", key="search", placeholder="Filter by name or category")
        filtered_df = filter_service.apply_search(items_df, query, SEARCH_COLUMNS)

        state = registry.get_instance(DEFAULT_INSTANCE_ID)
        paginate(
            filtered_df,
            registry,
            DEFAULT_INSTANCE_ID,
            items_per_page=state.items_per_page if state else DEFAULT_PAGE_SIZE,
            current_page=state.current_page if state else 1,
        )
        controllers = ensure_controllers(registry, scheduler, options, size)
    except UnboundInstanceError as exc:
        st.error(str(exc))
        st.stop()
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("Paginator initialization failed")
        st.error(f"Application initialization failed: {exc}")
        st.stop()

    # Corrections queued by registry notifications land before anything renders.
    scheduler.run_pending()

    state = registry.get_instance(DEFAULT_INSTANCE_ID)
    page_df = paginate(filtered_df, registry, DEFAULT_INSTANCE_ID, state.items_per_page, state.current_page)
    st.caption(f"Total Rows: {len(filtered_df)}/{len(items_df)}")

    render_pagination_bar(controllers["top_bar"], key="top_bar")
    render_table(page_df)
    render_pagination_bar(controllers["bottom_bar"], key="bottom_bar", boundary_links=False)
    render_page_size_selector(controllers["size_selector"], key="page_size")

    show_notifications()


if __name__ == "__main__":
    main()
