"""Helper utilities for IO, text normalisation and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; repeated Streamlit reruns keep the first setup."""
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def read_csv_or_empty(file_path: Path, columns: list[str]) -> pd.DataFrame:
    """Read a CSV if it exists; otherwise return an empty dataframe with columns."""
    if not file_path.exists():
        return pd.DataFrame(columns=columns)

    dataframe = pd.read_csv(file_path, dtype=str).fillna("")
    for column in columns:
        if column not in dataframe.columns:
            dataframe[column] = ""
    return dataframe[columns]
