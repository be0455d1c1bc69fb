# nas_notes/core/link_formatter.py - NAS link table generation
"""
Conversion of network-share file paths into markdown link tables

A path on the NAS can be given either as a Windows drive-letter path
(``Z:\\Shared\\Report.pdf``) or as a macOS mount path
(``/Volumes/Files/Shared/Report.pdf``). Both forms are rewritten into
``file://`` links for every supported OS and laid out as a three-column
markdown table.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_WINDOWS_DRIVE = "Z:"
DEFAULT_MAC_MOUNT = "/Volumes/Files"
MOBILE_PLACEHOLDER = "Not supported yet"
UNKNOWN_FILE_NAME = "Unknown File"

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:$")

# Column widths of the generated table
_SIDE_COLUMN_WIDTH = 91
_FILE_COLUMN_PADDING = 91
_LAST_COLUMN_WIDTH = 12


@dataclass(frozen=True)
class LinkSettings:
    """Prefixes used when translating between Windows and macOS paths"""

    windows_drive: str = DEFAULT_WINDOWS_DRIVE
    mac_mount: str = DEFAULT_MAC_MOUNT
    mobile_placeholder: str = MOBILE_PLACEHOLDER

    def __post_init__(self):
        if not isinstance(self.windows_drive, str) or not _DRIVE_PATTERN.match(self.windows_drive):
            raise ValueError(f"Invalid Windows drive '{self.windows_drive}', expected a letter followed by ':'")
        if not isinstance(self.mac_mount, str) or not self.mac_mount.startswith("/"):
            raise ValueError(f"Invalid mount point '{self.mac_mount}', expected an absolute path")
        if len(self.mac_mount) > 1 and self.mac_mount.endswith("/"):
            raise ValueError(f"Mount point '{self.mac_mount}' must not end with '/'")


@dataclass(frozen=True)
class NasLinks:
    """Per-OS links to the same shared file"""

    windows: str = ""
    mac: str = ""
    mobile: str = MOBILE_PLACEHOLDER

    def as_dict(self):
        return {"windows": self.windows, "mac": self.mac, "mobile": self.mobile}


def strip_quotes(path: str) -> str:
    """Remove every double quote from a path"""
    return path.replace('"', "")


def extract_file_name(path: str) -> str:
    """Return the last path component, splitting on both separator styles"""
    name = path.split("\\")[-1].split("/")[-1] or UNKNOWN_FILE_NAME
    return strip_quotes(name)


def detect_path_kind(path, settings=None):
    """
    Work out which OS style a path is written in

    Args:
        path: Path as entered by the user (quotes already stripped)
        settings: LinkSettings to match against

    Returns:
        "windows", "mac" or None when neither prefix is present
    """
    settings = settings or LinkSettings()
    drive = settings.windows_drive
    if drive.upper() in path or drive.lower() in path:
        return "windows"
    if settings.mac_mount in path:
        return "mac"
    return None


def generate_link_content(path: str, settings=None) -> NasLinks:
    """
    Build the Windows, macOS and mobile links for a NAS path

    Args:
        path: Windows or macOS path to a file on the share
        settings: Optional LinkSettings, defaults to Z: and /Volumes/Files

    Returns:
        NasLinks with empty windows/mac links when the path is not on the share
    """
    settings = settings or LinkSettings()
    path = strip_quotes(path)

    windows_link = ""
    mac_link = ""

    kind = detect_path_kind(path, settings)
    if kind == "windows":
        clean_path = path.replace("\\", "/")
        windows_link = f"<file:///{clean_path}>"

        # Z:/Shared/... -> /Volumes/Files/Shared/...
        relative_path = clean_path[len(settings.windows_drive):]
        mac_link = f"<file://{settings.mac_mount}{relative_path}>"
    elif kind == "mac":
        mac_link = f"<file://{path}>"

        # /Volumes/Files/Shared/... -> Z:/Shared/...
        relative_path = path[len(settings.mac_mount):]
        windows_link = f"<file:///{settings.windows_drive}{relative_path}>"
    else:
        logger.warning(
            "Path %r is neither under %s nor %s, leaving OS links empty",
            path, settings.windows_drive, settings.mac_mount,
        )

    return NasLinks(windows=windows_link, mac=mac_link, mobile=settings.mobile_placeholder)


def generate_table(file_name, windows_link, mac_link, mobile_link, preview=False):
    """
    Lay out the links as a markdown table

    With preview enabled every link is emitted as an embed (``![...](...)``)
    so the note renders the file inline.
    """
    embed = "!" if preview else ""
    header = (
        "|" + " " * _SIDE_COLUMN_WIDTH
        + f"| File: {file_name}" + " " * _FILE_COLUMN_PADDING
        + "|" + " " * _LAST_COLUMN_WIDTH + "|"
    )
    separator = (
        "| " + "-" * (_SIDE_COLUMN_WIDTH - 2)
        + " | " + "-" * 104
        + " | " + "-" * (_LAST_COLUMN_WIDTH - 2) + " |"
    )
    row = (
        f"| {embed}[Windows]({windows_link}) "
        f"| {embed}[MacOS]({mac_link})<br> "
        f"| {embed}[Mobile]({mobile_link}) |"
    )
    return "\n".join([header, separator, row])


def create_content(path: str, preview: bool = False, settings=None) -> str:
    """Convert a user-entered path into the NAS link table markdown"""
    file_name = extract_file_name(path)
    links = generate_link_content(path, settings)
    logger.debug("Generated NAS links for %s: %s", file_name, links.as_dict())
    return generate_table(file_name, links.windows, links.mac, links.mobile, preview)
