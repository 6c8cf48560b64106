# coinkard/Home.py
import logging
import streamlit as st

from utils.config_loader import APP_CONFIG
from utils.data_loader import load_catalog
from utils.navigation import VIEWS, build_pages
from utils.session import init_session_state, close_dialog
from services.theme import theme_css, toggle, toggle_icon

logger = logging.getLogger(__name__)

app_config = APP_CONFIG.get('app', {})

st.set_page_config(
    page_title=app_config.get('title', "CoinKard"),
    page_icon=app_config.get('page_icon', "🪙"),
    layout="wide"
)

if "error" in APP_CONFIG:
    st.error(f"Configuration Error: {APP_CONFIG['error']}")
    st.stop()

catalog, _ = load_catalog()
init_session_state(catalog)

pages = build_pages()
navigation = st.navigation(pages, position="hidden")

st.markdown(theme_css(st.session_state.theme_mode), unsafe_allow_html=True)

# --- APP BAR ---
col_title, *col_links, col_theme, col_login = st.columns([3] + [1] * len(VIEWS) + [0.5, 0.8])
with col_title:
    st.title(app_config.get('title', "CoinKard"))
for column, page, view in zip(col_links, pages, VIEWS):
    with column:
        st.page_link(page, label=view.title, icon=view.icon)
with col_theme:
    if st.button(toggle_icon(st.session_state.theme_mode), key="theme_toggle", help="Toggle light/dark mode"):
        st.session_state.theme_mode = toggle(st.session_state.theme_mode)
        logger.info(f"Theme switched to {st.session_state.theme_mode.value}.")
        st.rerun()
with col_login:
    if st.button("Login", key="open_dialog"):
        st.session_state.session_dialog.open()
        st.rerun()

# --- SESSION DIALOG ---
dialog = st.session_state.session_dialog
if dialog.is_open:
    with st.container(border=True):
        st.subheader(dialog.mode_label)
        email = st.text_input("Email", key="dialog_email")
        password = st.text_input("Password", type="password", key="dialog_password")
        dialog.update_fields(email=email, password=password)

        col_confirm, col_switch, col_close = st.columns(3)
        if col_confirm.button(dialog.mode_label, key="dialog_confirm", type="primary"):
            dialog.submit()
            st.info(f"{dialog.mode_label} is not available in this demo.")
        switch_label = "Need an account? Sign Up" if dialog.mode_label == "Login" else "Have an account? Login"
        if col_switch.button(switch_label, key="dialog_switch"):
            dialog.switch_mode()
            st.rerun()
        if col_close.button("Close", key="dialog_close"):
            close_dialog()
            st.rerun()

st.markdown("---")

navigation.run()
