# coinkard/services/theme.py
from enum import Enum


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def toggle(mode: ThemeMode) -> ThemeMode:
    return ThemeMode.DARK if mode is ThemeMode.LIGHT else ThemeMode.LIGHT


def toggle_icon(mode: ThemeMode) -> str:
    # Shows the mode you would switch to.
    return "🌙" if mode is ThemeMode.LIGHT else "☀️"


def design_tokens(mode: ThemeMode) -> dict:
    """Color and typography tokens for a light or dark page."""
    light = mode is ThemeMode.LIGHT
    return {
        "palette": {
            "mode": mode.value,
            "primary": "#2E3B4E" if light else "#8BDBF9",
            "secondary": "#FF6B6B" if light else "#FFA07A",
            "background": "#F5F7FA" if light else "#121212",
            "paper": "#FFFFFF" if light else "#1E1E1E",
            "text": "#1A1A1A" if light else "#F5F5F5",
        },
        "typography": {
            "font_family": "'Inter', sans-serif",
            "heading_weight": 600,
        },
    }


def theme_css(mode: ThemeMode) -> str:
    tokens = design_tokens(mode)
    palette = tokens["palette"]
    typography = tokens["typography"]
    return f"""
<style>
.stApp {{
    background-color: {palette['background']};
    color: {palette['text']};
    font-family: {typography['font_family']};
}}
.stApp h1, .stApp h2, .stApp h3 {{
    color: {palette['primary']};
    font-weight: {typography['heading_weight']};
}}
div[data-testid="stVerticalBlockBorderWrapper"] {{
    background-color: {palette['paper']};
}}
.stApp .stButton button {{
    border-color: {palette['secondary']};
}}
</style>
"""
