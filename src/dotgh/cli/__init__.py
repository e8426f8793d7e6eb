"""dotgh CLI — pull, push, and diff templates against a working directory."""

from ._helpers import main  # noqa: F401 — entry point

# Import command modules to register Click commands with the main group.
from . import _templates, _sync, _config  # noqa: F401
