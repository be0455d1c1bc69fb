"""
Tests for the markdown preview conversion
"""

from nas_notes.core.link_formatter import create_content
from nas_notes.utils.markdown_utils import markdown_to_html


def test_color_span_passes_through():
    html = markdown_to_html('A <span style="color:red">warning</span> here')

    assert '<span style="color:red">warning</span>' in html


def test_link_table_renders_as_table():
    html = markdown_to_html(create_content(r"Z:\Shared\DnD\Dark Matter.pdf", False))

    assert "<table>" in html
    assert 'href="file:///Z:/Shared/DnD/Dark%20Matter.pdf"' in html
    assert 'href="file:///Volumes/Files/Shared/DnD/Dark%20Matter.pdf"' in html


def test_plain_markdown():
    html = markdown_to_html("# Notes\n\n~~old~~")

    assert "<h1>Notes</h1>" in html
    assert "<s>old</s>" in html
