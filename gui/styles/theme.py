"""
RPS Match theme: colors, spacing, and typography constants.

Flat blue background with white text and white call-to-action buttons.
"""

# Surfaces
SURFACE_MAIN = "#1E6FD9"      # Full-window background (all screens)
SURFACE_BUTTON = "#FFFFFF"    # Play Again button
SURFACE_BUTTON_ALT = "#0A84FF"  # Keep Playing button

# Text
TEXT_PRIMARY = "#FFFFFF"
TEXT_ON_LIGHT = "#000000"

# Spacing scale (px)
SPACING_SM = 8
SPACING_MD = 12

# Border radius (px)
RADIUS_MD = 10

# Font sizes (pt)
FONT_SIZE_MD = 14
FONT_SIZE_LG = 15
FONT_SIZE_XL = 16
FONT_SIZE_DISPLAY = 32

# Font families
FONT_UI = '"Segoe UI", "SF Pro Display", "Ubuntu", sans-serif'
FONT_EMOJI = '"Apple Color Emoji", "Segoe UI Emoji", "Noto Color Emoji", sans-serif'


def button_style(text_color: str, background: str) -> str:
    """Stylesheet for the rounded call-to-action buttons."""
    return f"""
        font-size: {FONT_SIZE_XL}pt;
        color: {text_color};
        background-color: {background};
        border-radius: {RADIUS_MD}px;
        padding: {SPACING_MD}px;
    """


def emoji_style(font_size: int) -> str:
    """Stylesheet for large emoji labels and buttons."""
    return f"font-size: {font_size}pt; font-family: {FONT_EMOJI};"
