# coinkard/utils/session.py
import logging
import streamlit as st

from services.filter_engine import FilterEngine
from services.session_dialog import SessionDialog
from services.theme import ThemeMode
from utils.config_loader import APP_CONFIG

logger = logging.getLogger(__name__)

DIALOG_FIELD_KEYS = ("dialog_email", "dialog_password")


def init_session_state(catalog):
    """Seeds the per-session shell state once. Safe to call on every rerun."""
    if 'theme_mode' not in st.session_state:
        default_theme = APP_CONFIG.get('app', {}).get('default_theme', ThemeMode.LIGHT.value)
        try:
            st.session_state.theme_mode = ThemeMode(default_theme)
        except ValueError:
            logger.warning(f"Unknown default theme '{default_theme}', using light.")
            st.session_state.theme_mode = ThemeMode.LIGHT
    if 'session_dialog' not in st.session_state:
        st.session_state.session_dialog = SessionDialog()
    if 'filter_engine' not in st.session_state:
        st.session_state.filter_engine = FilterEngine(catalog)
        logger.info(f"Started a filter session over {len(catalog)} assets.")


def close_dialog():
    """Closes the dialog and drops whatever was typed into its widgets."""
    st.session_state.session_dialog.close()
    for key in DIALOG_FIELD_KEYS:
        st.session_state.pop(key, None)
