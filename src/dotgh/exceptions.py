"""Exceptions for dotgh."""


class DotghError(Exception):
    """Base class for all dotgh errors."""


class PatternError(DotghError, ValueError):
    """Raised when an include or exclude pattern is not valid glob syntax."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class ResolutionIOError(DotghError, OSError):
    """Raised when listing or reading a file fails while computing a diff.

    The whole diff computation is aborted; no partial result is returned.
    """

    def __init__(self, path: str, operation: str, cause: OSError):
        self.path = path
        self.operation = operation
        super().__init__(f"{operation} {path}: {cause.strerror or cause}")
        self.errno = cause.errno


class ApplyIOError(DotghError, OSError):
    """Raised when a change cannot be applied to disk.

    Changes applied before the failing one stay applied.
    """

    def __init__(self, path: str, action: str, cause: OSError):
        self.path = path
        self.action = action
        super().__init__(f"{action} {path}: {cause.strerror or cause}")
        self.errno = cause.errno


class TemplateNotFoundError(DotghError, FileNotFoundError):
    """Raised when a named template does not exist in the templates directory."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"template '{name}' not found")


class ConfigError(DotghError, ValueError):
    """Raised when the configuration file cannot be read or parsed."""
