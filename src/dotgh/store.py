"""Template storage: named directory snapshots under a templates directory."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Iterable

from .diff import DiffResult, apply_changes, compute_diff
from .exceptions import TemplateNotFoundError


class TemplateStore:
    """A directory whose sub-directories are templates.

    Pulling copies a template into a working directory; pushing copies a
    working directory into a template.  Both directions use the same
    include/exclude patterns and only ever touch matching files.

    Usage::

        store = TemplateStore("~/.config/dotgh/templates")
        diff = store.diff_pull("python", ".", includes)
        if diff.has_changes:
            store.pull("python", ".", diff)
    """

    def __init__(self, templates_dir: str | os.PathLike[str]):
        self._dir = Path(templates_dir).expanduser()

    def __repr__(self) -> str:
        return f"TemplateStore({str(self._dir)!r})"

    @property
    def directory(self) -> Path:
        """The templates directory."""
        return self._dir

    def names(self) -> list[str]:
        """Sorted template names.  Plain files are ignored."""
        try:
            entries = list(os.scandir(self._dir))
        except (FileNotFoundError, NotADirectoryError):
            return []
        return sorted(e.name for e in entries if e.is_dir())

    def path(self, name: str) -> Path:
        """Return the directory of template *name*.

        Raises:
            ValueError: *name* is empty or not a single path segment.
        """
        if not name or name in (".", "..") or "/" in name or os.sep in name:
            raise ValueError(f"Invalid template name: {name!r}")
        return self._dir / name

    def exists(self, name: str) -> bool:
        return self.path(name).is_dir()

    def require(self, name: str) -> Path:
        """Return the template directory, raising if it does not exist."""
        p = self.path(name)
        if not p.is_dir():
            raise TemplateNotFoundError(name)
        return p

    # ------------------------------------------------------------------
    # Diffs
    # ------------------------------------------------------------------

    def diff_pull(
        self, name: str, target_dir: str | os.PathLike[str],
        includes: Iterable[str], excludes: Iterable[str] | None = None,
        *, merge_mode: bool = False,
    ) -> DiffResult:
        """Changes that make *target_dir* match template *name*."""
        return compute_diff(self.require(name), target_dir, includes, excludes,
                            merge_mode=merge_mode)

    def diff_push(
        self, name: str, source_dir: str | os.PathLike[str],
        includes: Iterable[str], excludes: Iterable[str] | None = None,
        *, merge_mode: bool = False,
    ) -> DiffResult:
        """Changes that make template *name* match *source_dir*.

        A template that does not exist yet diffs as empty.
        """
        return compute_diff(source_dir, self.path(name), includes, excludes,
                            merge_mode=merge_mode)

    # ------------------------------------------------------------------
    # Apply
    # ------------------------------------------------------------------

    def pull(self, name: str, target_dir: str | os.PathLike[str], diff: DiffResult) -> None:
        """Apply a :meth:`diff_pull` result to *target_dir*."""
        apply_changes(self.require(name), target_dir, diff)

    def push(self, name: str, source_dir: str | os.PathLike[str], diff: DiffResult) -> Path:
        """Apply a :meth:`diff_push` result, creating the template if needed."""
        p = self.path(name)
        p.mkdir(parents=True, exist_ok=True)
        apply_changes(source_dir, p, diff)
        return p

    def delete(self, name: str) -> None:
        """Remove template *name* and everything in it."""
        shutil.rmtree(self.require(name))
