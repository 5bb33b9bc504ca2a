"""
Input/output path validation and SVG source discovery.
"""

import logging
import re
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"


class PathKind(str, Enum):
    """Expected kind of filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"
    ANY = "any"


def resolve_path(path: str | Path) -> Path:
    """Resolve a possibly relative path against the current working directory."""
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = Path.cwd() / p
    return p.resolve()


def is_path_valid(path: str | Path | None, kind: PathKind | str) -> bool:
    """
    Check that a path exists and is of the expected kind.

    Never raises for missing or mismatched paths; callers decide how to
    report an invalid path.

    Args:
        path: Path to check (relative paths resolve against the CWD)
        kind: file, directory or any (file or directory)

    Returns:
        True if the path exists and matches ``kind``
    """
    if path is None or str(path) == "":
        return False

    try:
        kind = PathKind(kind)
    except ValueError:
        return False

    try:
        resolved = resolve_path(path)
        if kind is PathKind.FILE:
            return resolved.is_file()
        if kind is PathKind.DIRECTORY:
            return resolved.is_dir()
        return resolved.is_file() or resolved.is_dir()
    except (OSError, RuntimeError):
        # Symlink loops and permission problems count as invalid
        return False


def collect_svg_sources(input_path: str | Path) -> list[Path]:
    """
    Enumerate the SVG files to convert.

    A directory yields its immediate ``.svg`` entries that resolve to regular
    files, sorted by name. Subdirectories and other extensions are skipped.
    A single ``.svg`` file yields itself.

    Args:
        input_path: Validated input file or directory

    Returns:
        Ordered list of absolute SVG file paths
    """
    root = resolve_path(input_path)

    if root.is_dir():
        return sorted(
            (entry for entry in root.iterdir() if _is_svg_file(entry)),
            key=lambda entry: entry.name,
        )

    if _is_svg_file(root):
        return [root]

    logger.warning(f"Input file {root} does not have the {SVG_EXTENSION} extension, skipping")
    return []


def _is_svg_file(entry: Path) -> bool:
    return entry.suffix == SVG_EXTENSION and is_path_valid(entry, PathKind.FILE)


def component_name_for(path: str | Path) -> str:
    """
    Derive the component (and output file) name from an input path.

    The file stem with its first character upper-cased, e.g. ``arrow-left.svg``
    becomes ``Arrow-left``.
    """
    stem = Path(path).stem
    return stem[:1].upper() + stem[1:]


def component_identifier(name: str) -> str:
    """
    Turn a component name into a valid JavaScript identifier.

    >>> component_identifier("Arrow-left")
    'ArrowLeft'
    >>> component_identifier("24px_icon")
    'Svg24pxIcon'
    """
    parts = re.split(r"[-_.\s]+", name)
    ident = "".join(part[:1].upper() + part[1:] for part in parts if part)
    ident = re.sub(r"[^A-Za-z0-9_$]", "", ident)
    if not ident or ident[0].isdigit():
        ident = "Svg" + ident
    return ident
