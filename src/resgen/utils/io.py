"""Filesystem helpers used by the resolver and the generator."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["read_file", "write_file", "ensure_dir"]


def read_file(path: str | Path) -> bytes:
    return Path(path).read_bytes()


def write_file(path: str | Path, data: bytes) -> int:
    """Write ``data`` to ``path`` as a whole, replacing any existing file.

    The buffer goes to a temporary sibling first and is moved into place
    with :func:`os.replace`, so readers never observe a truncated file.
    Returns the number of bytes written.
    """
    dest = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, dest)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    return len(data)


def ensure_dir(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
