# markdown_utils.py
# Utility for converting note Markdown to HTML for the QTextBrowser preview
# Uses the markdown2 library for simplicity and compatibility

import re

import markdown2

# markdown2 does not accept <...> link destinations, which is how NAS links
# keep the spaces in share paths
_ANGLE_LINK = re.compile(r"\]\(<([^>]*)>\)")


def _quote_angle_links(text: str) -> str:
    """Rewrite ](<file:///a b>) as ](file:///a%20b) so markdown2 links it"""
    return _ANGLE_LINK.sub(lambda m: "](" + m.group(1).replace(" ", "%20") + ")", text)


def markdown_to_html(text: str) -> str:
    """
    Convert Markdown text to HTML for display in QTextBrowser.
    Raw HTML such as color spans passes through, and NAS link tables render as tables.
    """
    # extras can be extended as needed
    return markdown2.markdown(
        _quote_angle_links(text),
        extras=["fenced-code-blocks", "tables", "strike", "cuddled-lists"],
    )
