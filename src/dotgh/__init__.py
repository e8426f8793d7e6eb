from .store import TemplateStore
from .config import Config, load_config, DEFAULT_INCLUDES
from .exceptions import (
    DotghError, PatternError, ResolutionIOError, ApplyIOError,
    TemplateNotFoundError, ConfigError,
)
from .diff import compute_diff, apply_changes, resolve
from .diff import Change, ChangeKind, DiffResult, ResolvedFile
from .diff import format_changes, format_summary, format_apply_summary

__all__ = [
    "TemplateStore", "Config", "load_config", "DEFAULT_INCLUDES",
    "DotghError", "PatternError", "ResolutionIOError", "ApplyIOError",
    "TemplateNotFoundError", "ConfigError",
    "compute_diff", "apply_changes", "resolve",
    "Change", "ChangeKind", "DiffResult", "ResolvedFile",
    "format_changes", "format_summary", "format_apply_summary",
]
