"""Read-only table for the rows of the current page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from config import ITEM_COLUMNS


def render_table(page_df: pd.DataFrame) -> None:
    """Render the current page slice."""
    if page_df.empty:
        st.info("No rows available.")
        return

    display_columns = [column for column in ITEM_COLUMNS if column in page_df.columns]
    st.dataframe(
        page_df[display_columns],
        hide_index=True,
        width="stretch",
        column_config={
            "item_id": st.column_config.TextColumn("ID", width="small"),
            "name": st.column_config.TextColumn("Name"),
            "category": st.column_config.TextColumn("Category"),
            "price": st.column_config.TextColumn("Price"),
        },
    )
