"""Diff computation and change application."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from ..exceptions import ApplyIOError, ResolutionIOError
from ._io import _copy_file, _files_equal, _remove_file
from ._resolve import resolve
from ._types import Change, ChangeKind, DiffResult


def compute_diff(
    src_root: str | os.PathLike[str],
    dst_root: str | os.PathLike[str],
    includes: Iterable[str],
    excludes: Iterable[str] | None = None,
    *,
    merge_mode: bool = False,
) -> DiffResult:
    """Compute the changes that make *dst_root* match *src_root*.

    Both roots are resolved with the same *includes* and *excludes*.  A
    root that does not exist is treated as empty.

    - source only: added
    - destination only: deleted, or left out entirely when *merge_mode*
    - both, different bytes: modified

    Raises:
        PatternError: a pattern is malformed (before any I/O).
        ResolutionIOError: a directory or file could not be read.  No
            partial result is returned.
    """
    includes = list(includes)
    excludes = list(excludes or ())
    src_files = resolve(src_root, includes, excludes)
    dst_files = resolve(dst_root, includes, excludes)

    result = DiffResult()
    for rel, src in src_files.items():
        dst = dst_files.get(rel)
        if dst is None:
            result.added.append(Change(rel, ChangeKind.ADD))
            continue
        try:
            same = _files_equal(src.full_path, dst.full_path)
        except OSError as exc:
            raise ResolutionIOError(rel, "compare", exc) from exc
        if not same:
            result.modified.append(Change(rel, ChangeKind.MODIFY))

    if not merge_mode:
        for rel in dst_files:
            if rel not in src_files:
                result.deleted.append(Change(rel, ChangeKind.DELETE))

    result.added.sort(key=lambda c: c.path)
    result.modified.sort(key=lambda c: c.path)
    result.deleted.sort(key=lambda c: c.path)
    return result


def apply_changes(
    src_root: str | os.PathLike[str],
    dst_root: str | os.PathLike[str],
    diff: DiffResult,
) -> None:
    """Apply *diff* (computed from *src_root* to *dst_root*) to disk.

    Added and modified files are copied from *src_root*, then deleted files
    are removed from *dst_root*.  Stops at the first failure without
    rolling back: changes applied before it stay applied.

    Raises:
        ApplyIOError: naming the path and action that failed.
    """
    src_base = Path(src_root)
    dst_base = Path(dst_root)
    for change in diff.changes():
        target = dst_base / change.path
        try:
            if change.kind == ChangeKind.DELETE:
                _remove_file(target)
            else:
                _copy_file(src_base / change.path, target)
        except OSError as exc:
            raise ApplyIOError(change.path, str(change.kind), exc) from exc
