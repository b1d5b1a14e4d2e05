"""Search filtering for the item catalogue."""

from __future__ import annotations

from typing import List

import pandas as pd

from utils.helpers import normalize_text


def apply_search(dataframe: pd.DataFrame, query: object, columns: List[str]) -> pd.DataFrame:
    """Keep rows where any searchable column contains the query, case-insensitively."""
    needle = normalize_text(query).lower()
    if not needle:
        return dataframe

    mask = pd.Series(False, index=dataframe.index)
    for column in columns:
        if column not in dataframe.columns:
            continue
        mask |= dataframe[column].astype(str).str.lower().str.contains(needle, regex=False)
    return dataframe[mask]

