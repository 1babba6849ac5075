# pages/99_Admin.py
# Diagnostics: settings, prompt preview and an extractor sandbox. No st.set_page_config here.

import streamlit as st

from prospect_search import INDUSTRIES, STATES, SearchCriteria
from prospect_search.config import get_settings
from prospect_search.exceptions import EntitySearchError
from prospect_search.extract import extract_results
from prospect_search.io import results_to_frame
from prospect_search.prompts import INDUSTRY_PROMPTS, build_prompt

SAMPLE_REPLY = """Here are the entities you asked for:
```json
[
  {"id": 1, "entityName": "Acme Water Authority", "websiteUrl": "https://acme.test"}
]
```"""


st.title("Prospect Search (Admin)")
st.caption("Diagnostics only. Nothing here calls the upstream API.")

# ----------------------------
# Settings
# ----------------------------
st.subheader("Settings")
settings = get_settings()
s1, s2, s3 = st.columns(3)
with s1:
    st.metric("API key", "configured" if settings.has_api_key else "missing")
with s2:
    st.metric("Model", settings.gemini_model)
with s3:
    st.metric("Timeout (s)", f"{settings.request_timeout_s:g}")
st.caption(f"Endpoint: {settings.gemini_api_url}")

st.divider()

# ----------------------------
# Prompt preview
# ----------------------------
st.subheader("Prompt preview")
p1, p2 = st.columns(2)
with p1:
    industry = st.selectbox("Industry", INDUSTRIES + ["(custom)"], key="admin_industry")
    if industry == "(custom)":
        industry = st.text_input("Custom industry", value="Insurance", key="admin_custom_industry")
with p2:
    state = st.selectbox("State", STATES, key="admin_state")

criteria = SearchCriteria(industry=industry, state=state)
if criteria.is_complete():
    template = "special-cased" if industry.strip() in INDUSTRY_PROMPTS else "default"
    st.caption(f"Template: {template}")
    st.code(build_prompt(criteria), language="text", wrap_lines=True)
else:
    st.info("Pick both an industry and a state.")

st.divider()

# ----------------------------
# Extractor sandbox
# ----------------------------
st.subheader("Extractor sandbox")
raw = st.text_area("Model reply", value=SAMPLE_REPLY, height=220, key="admin_raw")
if st.button("Extract", key="admin_extract"):
    try:
        items = extract_results(raw)
        st.success(f"{len(items)} valid records ✅")
        st.dataframe(results_to_frame(items), hide_index=True, use_container_width=True)
    except EntitySearchError as e:
        st.error(str(e))
