# client/components.py
import streamlit as st
import pandas as pd

def show_table(rows, caption: str | None = None):
    """Render a dict or list[dict] as a dataframe; otherwise show it raw."""
    if caption:
        st.caption(caption)
    if isinstance(rows, dict):
        rows = [rows]
    if isinstance(rows, list) and rows and isinstance(rows[0], dict):
        st.dataframe(pd.DataFrame(rows), hide_index=True)
    else:
        st.write(rows)
