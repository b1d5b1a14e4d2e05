"""Validation logic for user-entered pagination settings."""

from __future__ import annotations

from typing import Optional, Tuple

from config import PAGE_SIZE_OPTIONS, SIZE_CLASSES
from services.page_window import DisplayOptions
from utils.helpers import normalize_text

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off", ""}


def validate_max_size(value: object) -> Tuple[bool, str, Optional[int]]:
    """Validate the visible-button limit; blank means no limit."""
    raw_value = normalize_text(value)
    if not raw_value:
        return True, "", None

    try:
        max_size = int(raw_value)
    except ValueError:
        return False, "max_size must be a whole number.", None

    if max_size < 0:
        return False, "max_size cannot be negative.", None
    return True, "", max_size


def validate_flag(value: object, field_name: str) -> Tuple[bool, str, bool]:
    """Accept booleans or common truthy/falsy strings."""
    if isinstance(value, bool):
        return True, "", value

    raw_value = normalize_text(value).lower()
    if raw_value in TRUE_VALUES:
        return True, "", True
    if raw_value in FALSE_VALUES:
        return True, "", False
    return False, f"{field_name} must be true or false.", False


def validate_page_size(value: object) -> Tuple[bool, str, int]:
    """Validate items per page against the offered options."""
    raw_value = normalize_text(value)
    try:
        page_size = int(raw_value)
    except ValueError:
        return False, "items_per_page must be a whole number.", 0

    if page_size not in PAGE_SIZE_OPTIONS:
        allowed = ", ".join(str(option) for option in PAGE_SIZE_OPTIONS)
        return False, f"items_per_page must be one of {allowed}.", 0
    return True, "", page_size


def validate_display_settings(
    max_size: object,
    rotate: object,
    boundary_link_numbers: object,
    force_ellipses: object,
    size: object = "",
) -> Tuple[bool, Optional[str], dict]:
    """Validate window settings and return ``DisplayOptions`` plus the size token."""
    max_valid, max_error, max_value = validate_max_size(max_size)
    if not max_valid:
        return False, max_error, {}

    flags = {}
    for field_name, raw in (
        ("rotate", rotate),
        ("boundary_link_numbers", boundary_link_numbers),
        ("force_ellipses", force_ellipses),
    ):
        flag_valid, flag_error, flag_value = validate_flag(raw, field_name)
        if not flag_valid:
            return False, flag_error, {}
        flags[field_name] = flag_value

    # Unknown sizes fall back to the default bar rather than failing.
    size_value = normalize_text(size).lower()
    normalized = {
        "options": DisplayOptions(max_visible=max_value, **flags),
        "size": size_value if size_value in SIZE_CLASSES else None,
    }
    return True, None, normalized
