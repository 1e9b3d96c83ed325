import streamlit as st

from backend.services.summary_config import OPTION_FIELDS, option_label
from backend.services.text_stats import reading_time_minutes, reduction_percent
from frontend.config_frontend import BACKEND_URL
from frontend.http_client import fetch_health, request_summary
from frontend.workspace import Workspace

st.set_page_config(page_title="Summora AI", layout="wide")

if "workspace" not in st.session_state:
    st.session_state.workspace = Workspace()

ws: Workspace = st.session_state.workspace


def _on_option_change(field: str) -> None:
    ws.set_option(field, st.session_state[f"opt_{field}"])


def _on_clear() -> None:
    ws.clear()
    st.session_state.sum_text = ""


st.title("Summora AI")
st.caption("Paste text, pick length, tone and format, and get a summary.")

# ---------- Sidebar ----------
with st.sidebar:
    st.header("Summary Settings")

    for field, enum_cls in OPTION_FIELDS.items():
        values = [m.value for m in enum_cls]
        current = getattr(ws.config, field).value
        st.radio(
            field.capitalize(),
            options=values,
            index=values.index(current),
            format_func=option_label,
            horizontal=True,
            key=f"opt_{field}",
            on_change=_on_option_change,
            args=(field,),
            disabled=ws.busy,
        )

    st.divider()
    st.markdown("**Quick Tips**")
    st.markdown(
        "- Paste long articles or documents.\n"
        "- Use \"Bullets\" for quick scanning.\n"
        "- Academic tone is great for research."
    )

    st.divider()
    st.header("Backend Status")
    healthy, info = fetch_health()
    if healthy:
        st.success("Backend is running")
    else:
        st.error("Backend is not reachable")
    with st.expander("Details"):
        st.code(BACKEND_URL)
        st.json(info)

# ---------- Input ----------
ws.text = st.text_area(
    "Original Text",
    height=320,
    key="sum_text",
    placeholder="Paste your text here (articles, reports, notes...)",
)

col_count, col_clear, col_go = st.columns([3, 1, 2])
with col_count:
    st.caption(f"{ws.live_word_count} words · Input limit: ~20,000 characters")
with col_clear:
    st.button("Clear", key="btn_clear", on_click=_on_clear, disabled=ws.busy)
with col_go:
    generate_clicked = st.button(
        "Generate Summary",
        key="btn_summarize",
        type="primary",
        disabled=not ws.can_submit,
    )

if generate_clicked:
    with st.spinner("Summarizing..."):
        ws.submit(request_summary)

# ---------- Output ----------
if ws.error:
    st.error(ws.error)

if ws.result is not None:
    st.subheader("Summary")
    st.markdown(ws.result.content)

    m1, m2, m3 = st.columns(3)
    m1.metric("Reduction", f"{reduction_percent(ws.result)}%")
    m2.metric("Word count", ws.result.word_count)
    m3.metric("Reading time", f"{reading_time_minutes(ws.result)} min")

    with st.expander("Copy summary"):
        st.code(ws.result.content, language=None)
elif not ws.busy:
    st.info("Your summary will appear here.")
