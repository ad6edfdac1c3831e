import streamlit as st
from loguru import logger

from synthdata_ui.api_client import ApiError, SynthDataClient
from synthdata_ui.config import API_URL
from synthdata_ui.context import SessionContext
from synthdata_ui.dashboard import render_stats, render_tabs, render_view
from synthdata_ui.navigation import DashboardState

# Streamlit Config
st.set_page_config(
    page_title="SynthData Kenya",
    page_icon="🛡️",
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={'About': "SynthData Kenya, synthetic data platform"},
)

if "session" not in st.session_state:
    st.session_state["session"] = None
if "dashboard" not in st.session_state:
    st.session_state["dashboard"] = DashboardState()


def auth_screen():
    st.title("SynthData Kenya")
    st.subheader("Privacy-preserving synthetic data for fintech")

    mode = st.radio("Mode", ["Sign In", "Create Account"], horizontal=True, label_visibility="collapsed")
    with st.form("auth_form"):
        email = st.text_input("Email", placeholder="you@company.co.ke")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button(mode, use_container_width=True)

    if not submitted:
        return
    if not email or len(password) < 6:
        st.error("Enter an email and a password of at least 6 characters")
        return
    api = SynthDataClient(API_URL)
    try:
        if mode == "Create Account":
            session = SessionContext.sign_up(api, email, password)
        else:
            session = SessionContext.sign_in(api, email, password)
    except ApiError as e:
        st.error(e.message or "An error occurred")
        return
    logger.info(f"Signed in as {session.user.email}")
    st.session_state["session"] = session
    st.session_state["dashboard"] = DashboardState()
    st.rerun()


def sign_out(session: SessionContext):
    session.sign_out()
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()


session = st.session_state["session"]
if session is None:
    auth_screen()
else:
    state = st.session_state["dashboard"]

    st.sidebar.title("SynthData Kenya")
    st.sidebar.caption("Synthetic Data Platform")
    st.sidebar.write(session.user.email)
    st.sidebar.caption("Fintech Developer")
    if st.sidebar.button("Sign Out"):
        sign_out(session)

    render_stats(session)
    render_tabs(state)
    try:
        render_view(session, state)
    except ApiError as e:
        st.error(e.message or "Something went wrong")
