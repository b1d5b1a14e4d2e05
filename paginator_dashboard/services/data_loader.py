"""Loading of the item catalogue shown in the paginated table."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from config import DEMO_ITEM_COUNT, ITEM_COLUMNS
from utils.helpers import read_csv_or_empty

logger = logging.getLogger(__name__)

DEMO_CATEGORIES = ["Books", "Games", "Music", "Garden", "Tools", "Toys"]


def build_demo_items(count: int = DEMO_ITEM_COUNT) -> pd.DataFrame:
    """Generate a deterministic catalogue when no CSV is available."""
    rows = [
        {
            "item_id": f"IT{number:05d}",
            "name": f"Item {number}",
            "category": DEMO_CATEGORIES[number % len(DEMO_CATEGORIES)],
            "price": f"{(number * 37) % 500 + 0.99:.2f}",
        }
        for number in range(1, count + 1)
    ]
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def load_items(items_file: Path) -> pd.DataFrame:
    """Load the catalogue CSV, falling back to demo data when the file is missing."""
    if not items_file.exists():
        logger.info("No catalogue at %s, using %s generated items", items_file, DEMO_ITEM_COUNT)
        return build_demo_items()

    dataframe = read_csv_or_empty(items_file, ITEM_COLUMNS)
    dataframe = dataframe[dataframe["item_id"].astype(str).str.strip() != ""].copy()
    logger.info("Loaded %s items from %s", len(dataframe), items_file)
    return dataframe.sort_values("item_id", kind="mergesort").reset_index(drop=True)
