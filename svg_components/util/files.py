"""
File utility functions.
"""

import os
import tempfile
from pathlib import Path


def read_text(path: str | Path) -> str:
    """Read UTF-8 text file content."""
    return Path(path).read_text(encoding="utf-8")


def write_text_atomic(path: str | Path, content: str) -> Path:
    """
    Write text so readers never observe a partially written file.

    The content goes to a temporary file in the target directory which then
    replaces the target. An existing file at ``path`` is overwritten.

    Args:
        path: Destination file
        content: Text to write (UTF-8)

    Returns:
        The destination path
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=p.parent, prefix=f".{p.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_name, p)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return p
