"""
Tests for the command-line front end
"""

import pytest

from nas_notes.cli import build_parser, main
from nas_notes.core.app_state import AppState


def test_links_command(capsys):
    assert main(["links", r"Z:\Shared\file.pdf"]) == 0

    out = capsys.readouterr().out
    assert "| [Windows](<file:///Z:/Shared/file.pdf>) " in out
    assert "[MacOS](<file:///Volumes/Files/Shared/file.pdf>)<br>" in out


def test_links_preview_and_overrides(capsys):
    assert main(["links", "/Volumes/Media/clip.mp4", "--preview", "--drive", "Y:", "--mount", "/Volumes/Media"]) == 0

    out = capsys.readouterr().out
    assert "![Windows](<file:///Y:/clip.mp4>)" in out


def test_links_uses_saved_settings(capsys):
    AppState().set_setting("windows_drive", "X:")

    main(["links", "/Volumes/Files/a.txt"])

    assert "<file:///X:/a.txt>" in capsys.readouterr().out


def test_links_invalid_drive(capsys):
    assert main(["links", "Z:/a.txt", "--drive", "ZZ"]) == 2
    assert "error: Invalid Windows drive" in capsys.readouterr().err


def test_color_command(capsys):
    assert main(["color", "Hello", "Navy"]) == 0
    assert capsys.readouterr().out.strip() == '<span style="color:navy">Hello</span>'


def test_color_command_invalid(capsys):
    assert main(["color", "Hello", "#12"]) == 2
    assert "Invalid color" in capsys.readouterr().err


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
