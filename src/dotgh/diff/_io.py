"""File I/O helpers: content comparison, copying, removal."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

_CHUNK_SIZE = 65536


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def _files_equal(a: Path, b: Path) -> bool:
    """Return ``True`` if *a* and *b* have identical byte content.

    Files of different size differ.  Otherwise both are streamed in chunks
    and compared byte for byte; timestamps are never consulted.
    """
    if a.stat().st_size != b.stat().st_size:
        return False
    with open(a, "rb") as fa, open(b, "rb") as fb:
        while True:
            ca = fa.read(_CHUNK_SIZE)
            cb = fb.read(_CHUNK_SIZE)
            if ca != cb:
                return False
            if not ca:
                return True


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

def _copy_file(src: Path, dst: Path) -> None:
    """Copy *src* over *dst*, creating parents and copying permission bits.

    An existing *dst* is truncated and overwritten in place.
    """
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def _remove_file(path: Path) -> None:
    """Remove *path*; a path that is already gone is not an error.

    Parent directories are left in place even if they become empty.
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
