# client/streamlit_app.py
import streamlit as st
import api as API
from components import show_table

st.set_page_config(page_title="Country Lookup", layout="wide")
st.title("🌍 Country Lookup")

st.markdown("""
Search a country by name. The service answers from its in-memory cache when it can
and otherwise asks REST Countries once, then remembers the result.

Exact spelling matters: `India` and `india` are cached separately.
""")

with st.sidebar:
    st.header("Settings")
    st.text_input("API Base URL (from env)", value=API.API, disabled=True)
    if st.button("Health check"):
        try:
            st.success(API.healthz())
        except Exception as e:
            st.error(f"Health check failed: {e}")

name = st.text_input("Country name", placeholder="India")

if st.button("Search"):
    try:
        show_table(API.search(name))
    except Exception as e:
        st.error(e)

st.info("Tip: set `API_BASE_URL` in `client/.env` (copy from `.env.sample`) or export it before running `streamlit run client/streamlit_app.py`.")
