"""Loading shader sources from disk."""

from __future__ import annotations

import os
from pathlib import Path


def read_shader(path: str | os.PathLike[str]) -> str:
    """Return the whole file as text, byte for byte (line endings untouched).

    Raises OSError if the file cannot be read.
    """
    return Path(path).read_bytes().decode("utf-8")