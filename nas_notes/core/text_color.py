"""
Inline color styling for selected text
"""

import re

DEFAULT_COLOR = "#fff"

# Named colors offered in the color dialog
NAMED_COLORS = [
    "red", "blue", "green", "yellow", "purple", "orange", "black", "white",
    "gray", "pink", "brown", "cyan", "magenta", "lime", "teal", "navy",
]

_HEX_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_NAME_PATTERN = re.compile(r"^[A-Za-z]+$")


def apply_color(text: str, color: str) -> str:
    """Wrap text in a span that sets its color inline"""
    return f'<span style="color:{color}">{text}</span>'


def color_label(name: str) -> str:
    """Display label for a named color ('red' -> 'Red')"""
    return name[:1].upper() + name[1:]


def normalize_color(value: str) -> str:
    """
    Validate a user supplied color value

    Accepts #rgb, #rrggbb or an alphabetic CSS color name.

    Raises:
        ValueError: If the value is not a usable color
    """
    color = (value or "").strip()
    if _HEX_PATTERN.match(color):
        return color
    if _NAME_PATTERN.match(color):
        return color.lower()
    raise ValueError(f"Invalid color '{value}'")
