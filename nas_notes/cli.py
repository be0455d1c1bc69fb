"""Command-line access to the NAS link and text color formatters."""

import argparse
import sys

from nas_notes.core.app_state import AppState
from nas_notes.core.link_formatter import LinkSettings, create_content
from nas_notes.core.text_color import apply_color, normalize_color


def links_command(args: argparse.Namespace) -> int:
    stored = AppState().get_link_settings()
    settings = LinkSettings(
        windows_drive=args.drive or stored.windows_drive,
        mac_mount=args.mount or stored.mac_mount,
        mobile_placeholder=stored.mobile_placeholder,
    )
    print(create_content(args.path, args.preview, settings))
    return 0


def color_command(args: argparse.Namespace) -> int:
    print(apply_color(args.text, normalize_color(args.color)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Format NAS link tables and colored text for markdown notes.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    links = subparsers.add_parser("links", help="Print the NAS link table for a file path")
    links.add_argument("path", help=r"Windows (Z:\...) or macOS (/Volumes/Files/...) path")
    links.add_argument("--preview", action="store_true", help="Embed the links as previews")
    links.add_argument("--drive", help="Windows drive letter of the share, e.g. Z:")
    links.add_argument("--mount", help="macOS mount point of the share, e.g. /Volumes/Files")
    links.set_defaults(func=links_command)

    color = subparsers.add_parser("color", help="Wrap text in a colored span")
    color.add_argument("text", help="Text to color")
    color.add_argument("color", help="Hex (#rgb, #rrggbb) or named CSS color")
    color.set_defaults(func=color_command)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
