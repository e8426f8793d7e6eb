"""Pattern resolution: expand include/exclude globs against a directory root."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable

from .._glob import Segment, compile_pattern, match_path, validate_patterns
from ..exceptions import ResolutionIOError
from ._types import ResolvedFile


def resolve(
    root: str | os.PathLike[str],
    includes: Iterable[str],
    excludes: Iterable[str] | None = None,
) -> dict[str, ResolvedFile]:
    """Return ``{relative_path: ResolvedFile}`` for files under *root*.

    Every pattern is validated before the filesystem is touched, so a
    malformed include or exclude raises
    :class:`~dotgh.exceptions.PatternError` without any I/O.

    Paths matched by several includes appear once, in the order they were
    first matched.  A path matching any exclude is dropped.  Only regular
    files are collected (symlinks are followed); matched directories are
    skipped.  A missing *root* yields an empty mapping.
    """
    includes = list(includes)
    excludes = list(excludes or ())
    validate_patterns(includes)
    validate_patterns(excludes)

    base = Path(root)
    result: dict[str, ResolvedFile] = {}
    for pattern in includes:
        segments = compile_pattern(pattern)
        if not segments:
            continue
        for rel in _glob_walk(base, segments, ""):
            if rel in result:
                continue
            if any(match_path(ex, rel) for ex in excludes):
                continue
            entry = _stat_file(base, rel)
            if entry is not None:
                result[rel] = entry
    return result


def _glob_walk(base: Path, segments: tuple[Segment, ...], prefix: str) -> list[str]:
    """Expand *segments* below ``base/prefix``, returning relative paths."""
    seg = segments[0]
    rest = segments[1:]
    scan_dir = base / prefix if prefix else base

    if seg.regex is None:
        target = scan_dir / seg.text
        try:
            os.stat(target)
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as exc:
            raise ResolutionIOError(str(target), "stat", exc) from exc
        names = [seg.text]
    else:
        try:
            entries = sorted(os.listdir(scan_dir))
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as exc:
            raise ResolutionIOError(str(scan_dir), "list", exc) from exc
        names = [name for name in entries if seg.matches(name)]

    results: list[str] = []
    for name in names:
        rel = f"{prefix}/{name}" if prefix else name
        if rest:
            results.extend(_glob_walk(base, rest, rel))
        else:
            results.append(rel)
    return results


def _stat_file(base: Path, rel: str) -> ResolvedFile | None:
    """Return a :class:`ResolvedFile` for *rel*, or ``None`` if not a regular file."""
    full = base / rel
    try:
        st = full.stat()
    except FileNotFoundError:
        # Dangling symlink, or removed since the listing
        return None
    except OSError as exc:
        raise ResolutionIOError(str(full), "stat", exc) from exc
    if not stat.S_ISREG(st.st_mode):
        return None
    return ResolvedFile(rel, full, stat.S_IMODE(st.st_mode))
