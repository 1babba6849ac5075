# app.py
import logging

import streamlit as st

from prospect_search import INDUSTRIES, STATES, SearchCriteria, search
from prospect_search.config import configure_logging, get_settings
from prospect_search.exceptions import EntitySearchError
from prospect_search.io import results_to_csv, results_to_frame, results_to_json_bytes
from prospect_search.pagination import PAGE_SIZE, clamp_page, page_slice, total_pages

configure_logging(get_settings().log_level)
logger = logging.getLogger("prospect_search.app")


# ----------------------------
# Page config (ONLY ONCE in multipage app)
# ----------------------------
st.set_page_config(
    page_title="Prospect Search",
    page_icon="🏢",
    layout="wide",
    initial_sidebar_state="collapsed",
)

PAGE_CSS = """
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

.ps-title {
  font-size: 2rem;
  font-weight: 800;
  background: linear-gradient(90deg, #4f46e5, #2563eb);
  -webkit-background-clip: text;
  -webkit-text-fill-color: transparent;
}
.ps-footer {
  text-align: center;
  color: rgba(7, 22, 45, 0.55);
  font-size: 0.85rem;
  margin-top: 2rem;
}
</style>
"""
st.markdown(PAGE_CSS, unsafe_allow_html=True)

PLACEHOLDER_INDUSTRY = "Select Industry"
PLACEHOLDER_STATE = "Select State"


# ----------------------------
# Session init
# ----------------------------
if "ps_results" not in st.session_state:
    st.session_state["ps_results"] = []
if "ps_page" not in st.session_state:
    st.session_state["ps_page"] = 1
if "ps_error" not in st.session_state:
    st.session_state["ps_error"] = None
if "ps_has_searched" not in st.session_state:
    st.session_state["ps_has_searched"] = False
if "ps_pending" not in st.session_state:
    st.session_state["ps_pending"] = None  # SearchCriteria while a search is running


# ----------------------------
# Callbacks
# ----------------------------
def _current_criteria() -> SearchCriteria:
    industry = st.session_state.get("ps_industry") or ""
    state = st.session_state.get("ps_state") or ""
    if industry == PLACEHOLDER_INDUSTRY:
        industry = ""
    if state == PLACEHOLDER_STATE:
        state = ""
    return SearchCriteria(industry=industry, state=state)


def _request_search():
    criteria = _current_criteria()
    if not criteria.is_complete():
        st.session_state["ps_error"] = "Please select both industry and state"
        return
    st.session_state["ps_error"] = None
    st.session_state["ps_pending"] = criteria


def _clear():
    st.session_state["ps_industry"] = PLACEHOLDER_INDUSTRY
    st.session_state["ps_state"] = PLACEHOLDER_STATE
    st.session_state["ps_results"] = []
    st.session_state["ps_page"] = 1
    st.session_state["ps_error"] = None
    st.session_state["ps_has_searched"] = False


def _go_to(page: int):
    n_pages = total_pages(len(st.session_state["ps_results"]), PAGE_SIZE)
    st.session_state["ps_page"] = clamp_page(page, n_pages)


# ----------------------------
# Header
# ----------------------------
st.markdown('<div class="ps-title">🏢 Prospect Search</div>', unsafe_allow_html=True)
if st.session_state["ps_has_searched"]:
    st.warning("Please hit the 'clear' button before making a new search.", icon="⚠️")


# ----------------------------
# Search form
# ----------------------------
busy = st.session_state["ps_pending"] is not None

with st.container(border=True):
    c1, c2 = st.columns(2)
    with c1:
        st.selectbox("Industry", [PLACEHOLDER_INDUSTRY] + INDUSTRIES, key="ps_industry", disabled=busy)
    with c2:
        st.selectbox("State", [PLACEHOLDER_STATE] + STATES, key="ps_state", disabled=busy)

    if st.session_state["ps_error"]:
        st.error(st.session_state["ps_error"])

    _, bClear, bSearch = st.columns([4, 1, 1])
    with bClear:
        st.button("Clear", on_click=_clear, disabled=busy, use_container_width=True, key="btn_clear")
    with bSearch:
        st.button(
            "Searching..." if busy else "Search",
            type="primary",
            on_click=_request_search,
            disabled=busy,
            use_container_width=True,
            key="btn_search",
        )

if busy:
    criteria = st.session_state["ps_pending"]
    with st.spinner(f"Searching {criteria.industry} in {criteria.state}…"):
        try:
            st.session_state["ps_results"] = search(criteria)
            st.session_state["ps_page"] = 1
            st.session_state["ps_has_searched"] = True
        except EntitySearchError as e:
            st.session_state["ps_error"] = e.message
            st.session_state["ps_results"] = []
        except Exception:
            logger.exception("Search crashed")
            st.session_state["ps_error"] = "An unexpected error occurred. Please try again."
            st.session_state["ps_results"] = []
        finally:
            st.session_state["ps_pending"] = None
    st.rerun()


# ----------------------------
# Results
# ----------------------------
results = st.session_state["ps_results"]
if results:
    n_pages = total_pages(len(results), PAGE_SIZE)
    page = clamp_page(st.session_state["ps_page"], n_pages)
    current = page_slice(results, page, PAGE_SIZE)

    with st.container(border=True):
        st.subheader(f"Results ({len(results)})")
        st.dataframe(
            results_to_frame(current),
            hide_index=True,
            use_container_width=True,
            column_config={
                "ID": st.column_config.NumberColumn("ID", width="small"),
                "Website URL": st.column_config.LinkColumn("Website URL"),
            },
        )

        prev_col, label_col, next_col = st.columns([1, 3, 1], vertical_alignment="center")
        with prev_col:
            st.button(
                "← Previous",
                on_click=_go_to,
                args=(page - 1,),
                disabled=page <= 1,
                use_container_width=True,
                key="btn_prev",
            )
        with label_col:
            st.markdown(
                f"<div style='text-align:center'>Page {page} of {n_pages}</div>",
                unsafe_allow_html=True,
            )
        with next_col:
            st.button(
                "Next →",
                on_click=_go_to,
                args=(page + 1,),
                disabled=page >= n_pages,
                use_container_width=True,
                key="btn_next",
            )

        d1, d2, _ = st.columns([1, 1, 3])
        with d1:
            st.download_button(
                "Download CSV",
                data=results_to_csv(results),
                file_name="prospects.csv",
                mime="text/csv",
                use_container_width=True,
            )
        with d2:
            st.download_button(
                "Download JSON",
                data=results_to_json_bytes(results),
                file_name="prospects.json",
                mime="application/json",
                use_container_width=True,
            )
elif st.session_state["ps_has_searched"] and not st.session_state["ps_error"]:
    st.info("The search returned no entities.")


st.markdown('<div class="ps-footer">Powered by AI</div>', unsafe_allow_html=True)
