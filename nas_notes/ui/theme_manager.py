# nas_notes/ui/theme_manager.py - Theme management
"""
Theme management for the NAS Link Notes application

Provides functions for applying the dark and light editor themes.
"""

# Named font sizes in points
FONT_SIZES = {
    "small": 10,
    "medium": 12,
    "large": 14,
    "x-large": 16
}

THEMES = {
    "dark": {
        "window": "#2D2D2D",
        "base": "#303030",
        "text": "#EEEEEE",
        "bar": "#2A2A2A",
        "input": "#404040",
        "border": "#555555",
        "hover": "#4A4A4A",
        "pressed": "#555555",
        "preview": "#262626",
    },
    "light": {
        "window": "#F0F0F0",
        "base": "#F5F5F5",
        "text": "#303030",
        "bar": "#E5E5E5",
        "input": "#FFFFFF",
        "border": "#CCCCCC",
        "hover": "#D0D0D0",
        "pressed": "#C0C0C0",
        "preview": "#FFFFFF",
    },
}

_STYLESHEET_TEMPLATE = """
    QMainWindow {{
        background-color: {window};
        color: {text};
    }}
    QWidget {{
        background-color: {base};
        color: {text};
    }}
    QMenu {{
        background-color: {input};
        color: {text};
        border: 1px solid {border};
    }}
    QMenuBar, QStatusBar {{
        background-color: {bar};
        color: {text};
    }}
    QPushButton {{
        background-color: {input};
        color: {text};
        border: 1px solid {border};
        border-radius: 4px;
        padding: 5px 10px;
    }}
    QPushButton:hover {{
        background-color: {hover};
    }}
    QPushButton:pressed {{
        background-color: {pressed};
    }}
    QLineEdit, QPlainTextEdit, QComboBox {{
        background-color: {input};
        color: {text};
        border: 1px solid {border};
        border-radius: 3px;
        padding: 3px;
    }}
    QTextBrowser {{
        background-color: {preview};
        color: {text};
        border: 1px solid {border};
    }}
    QSplitter::handle {{
        background-color: {border};
    }}
"""


def apply_theme(widget, theme_name="dark", font_size=None):
    """Apply a theme to the application

    Args:
        widget: The main application widget
        theme_name: The theme name ('dark' or 'light')
        font_size: Optional font size to apply
    """
    widget.setStyleSheet(get_theme_stylesheet(theme_name))

    if font_size is not None:
        set_font_size(widget, font_size)


def set_font_size(widget, size):
    """Set the application font size

    Args:
        widget: The main application widget
        size: Font size in points or name ('small', 'medium', 'large')
    """
    if isinstance(size, str):
        size = FONT_SIZES.get(size.lower(), FONT_SIZES["medium"])

    font = widget.font()
    font.setPointSize(size)
    widget.setFont(font)


def get_theme_stylesheet(theme_name):
    """Get the CSS stylesheet for a theme

    Args:
        theme_name: The theme name ('dark' or 'light'), unknown names fall back to dark

    Returns:
        str: The CSS stylesheet
    """
    colors = THEMES.get(theme_name, THEMES["dark"])
    return _STYLESHEET_TEMPLATE.format(**colors)
