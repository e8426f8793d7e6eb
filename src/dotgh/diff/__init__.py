"""Compute and apply differences between two directory trees.

Files are selected under each root by include globs (``*``, ``?``,
``[...]``; no recursive ``**``) minus exclude globs.  The diff classifies
every selected path as added, modified, or deleted; merge mode never
deletes.
"""

from ._types import (
    Change,
    ChangeKind,
    DiffResult,
    ResolvedFile,
    format_apply_summary,
    format_changes,
    format_summary,
)
from ._resolve import resolve
from ._io import _files_equal
from ._ops import apply_changes, compute_diff

__all__ = [
    # Public types
    "Change", "ChangeKind", "DiffResult", "ResolvedFile",
    # Public functions
    "resolve", "compute_diff", "apply_changes",
    "format_changes", "format_summary", "format_apply_summary",
    # Private but used by tests
    "_files_equal",
]
