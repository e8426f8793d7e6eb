"""Data structures for diff computation and change application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class ResolvedFile:
    """A regular file selected by the include/exclude patterns.

    Attributes:
        path: Relative path (forward slashes).
        full_path: Absolute location on disk.
        mode: Permission bits of the file.
    """
    path: str
    full_path: Path
    mode: int


class ChangeKind(str, Enum):
    """Kind of change: ``ADD``, ``MODIFY``, or ``DELETE``."""
    ADD = "add"
    MODIFY = "modify"
    DELETE = "delete"

    def __str__(self) -> str:          # noqa: D105
        return self.value

    @property
    def marker(self) -> str:
        """Single-character prefix used when rendering a change."""
        return _MARKERS[self]


_MARKERS = {
    ChangeKind.ADD: "+",
    ChangeKind.MODIFY: "M",
    ChangeKind.DELETE: "-",
}


@dataclass(frozen=True)
class Change:
    """A single add/modify/delete of one relative path."""
    path: str
    kind: ChangeKind


@dataclass
class DiffResult:
    """Changes needed to make a destination tree match a source tree.

    A path appears in at most one of the three lists.  Each list is
    sorted by path.

    Attributes:
        added: Files present only in the source.
        modified: Files present in both with different content.
        deleted: Files present only in the destination (empty in merge mode).
    """
    added: list[Change] = field(default_factory=list)
    modified: list[Change] = field(default_factory=list)
    deleted: list[Change] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        """``True`` if there is anything to add, modify, or delete."""
        return bool(self.added or self.modified or self.deleted)

    @property
    def total(self) -> int:
        """Total number of changes."""
        return len(self.added) + len(self.modified) + len(self.deleted)

    def changes(self) -> list[Change]:
        """Return all changes in apply order: added, modified, deleted."""
        return [*self.added, *self.modified, *self.deleted]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def format_changes(diff: DiffResult, indent: str = "") -> list[str]:
    """Render one ``+ path`` / ``M path`` / ``- path`` line per change."""
    return [f"{indent}{c.kind.marker} {c.path}" for c in diff.changes()]


def format_summary(diff: DiffResult) -> str:
    """Count of each category, e.g. ``Summary: 1 addition(s), ...``."""
    return (
        f"Summary: {len(diff.added)} addition(s), "
        f"{len(diff.modified)} modification(s), "
        f"{len(diff.deleted)} deletion(s)"
    )


def format_apply_summary(diff: DiffResult) -> str:
    """Post-apply summary listing only non-empty categories."""
    parts = []
    if diff.added:
        parts.append(f"{len(diff.added)} added")
    if diff.modified:
        parts.append(f"{len(diff.modified)} modified")
    if diff.deleted:
        parts.append(f"{len(diff.deleted)} deleted")
    if not parts:
        return "Done: no changes"
    return "Done: " + ", ".join(parts)
