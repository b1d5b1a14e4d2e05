"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
ASSETS_DIR = ROOT_DIR / "assets"

ITEMS_FILE = DATA_DIR / "items.csv"

LOG_LEVEL = os.getenv("PAGINATOR_LOG_LEVEL", "INFO")

DEFAULT_INSTANCE_ID = "catalog"
DEFAULT_PAGE_SIZE = int(os.getenv("PAGINATOR_PAGE_SIZE", "10"))
PAGE_SIZE_OPTIONS = [5, 10, 25, 50, 100]
DEFAULT_MAX_SIZE = int(os.getenv("PAGINATOR_MAX_SIZE", "5"))
DEMO_ITEM_COUNT = 237

ELLIPSIS_LABEL = "…"

SIZE_CLASSES = {
    "sm": "pagination-sm",
    "lg": "pagination-lg",
}
SIZE_OPTIONS = ["default", "sm", "lg"]

ITEM_COLUMNS = [
    "item_id",
    "name",
    "category",
    "price",
]

SEARCH_COLUMNS = ["name", "category"]
