"""Configuration loading.

The configuration lives in ``config.yaml`` inside the dotgh config
directory (``$XDG_CONFIG_HOME/dotgh`` or ``~/.config/dotgh``).  When the
file does not exist the defaults are used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

CONFIG_FILE_NAME = "config.yaml"

DEFAULT_INCLUDES = (
    "AGENTS.md",
    ".github/agents/*.agent.md",
    ".github/copilot-chat-modes/*.chatmode.md",
    ".github/copilot-instructions.md",
    ".github/instructions/*.instructions.md",
    ".github/prompts/*.prompt.md",
    ".vscode/mcp.json",
)


def get_config_dir() -> Path:
    """Return the dotgh configuration directory."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "dotgh"


def get_config_path(config_dir: str | os.PathLike[str] | None = None) -> Path:
    """Return the path of ``config.yaml`` in *config_dir* (default: :func:`get_config_dir`)."""
    base = Path(config_dir) if config_dir is not None else get_config_dir()
    return base / CONFIG_FILE_NAME


def get_default_templates_dir(config_dir: str | os.PathLike[str] | None = None) -> Path:
    base = Path(config_dir) if config_dir is not None else get_config_dir()
    return base / "templates"


@dataclass
class Config:
    """Effective dotgh configuration.

    Attributes:
        editor: Editor command for ``config edit`` (not used by the engine).
        templates_dir: Where templates are stored; empty means
            ``<config dir>/templates``.  ``~`` is expanded.
        includes: Glob patterns selecting the managed files.
        excludes: Glob patterns removed from the included set.
        config_dir: Directory the configuration was loaded from.
    """
    editor: str = ""
    templates_dir: str = ""
    includes: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDES))
    excludes: list[str] = field(default_factory=list)
    config_dir: Path | None = field(default=None, repr=False, compare=False)

    def get_templates_dir(self) -> Path:
        """Resolve :attr:`templates_dir`, falling back to the default."""
        if not self.templates_dir:
            return get_default_templates_dir(self.config_dir)
        return Path(self.templates_dir).expanduser()

    def to_dict(self) -> dict[str, Any]:
        """Return the YAML-serializable fields, omitting empty optional ones."""
        data: dict[str, Any] = {}
        if self.editor:
            data["editor"] = self.editor
        if self.templates_dir:
            data["templates_dir"] = self.templates_dir
        data["includes"] = list(self.includes)
        if self.excludes:
            data["excludes"] = list(self.excludes)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_dir: Path | None = None) -> Config:
        """Build a :class:`Config` from parsed YAML, validating field types."""
        editor = _get_str(data, "editor")
        templates_dir = _get_str(data, "templates_dir")
        includes = _get_str_list(data, "includes")
        excludes = _get_str_list(data, "excludes")
        return cls(
            editor=editor,
            templates_dir=templates_dir,
            includes=list(DEFAULT_INCLUDES) if includes is None else includes,
            excludes=excludes or [],
            config_dir=config_dir,
        )


def _get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _get_str_list(data: dict[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return list(value)


def load_config(config_dir: str | os.PathLike[str] | None = None) -> Config:
    """Load ``config.yaml`` from *config_dir*.

    Returns the default configuration when the file does not exist.

    Raises:
        ConfigError: the file cannot be read or is not a valid config.
    """
    base = Path(config_dir) if config_dir is not None else get_config_dir()
    path = base / CONFIG_FILE_NAME
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Config(config_dir=base)
    except OSError as exc:
        raise ConfigError(f"read config file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"parse config file {path}: {exc}") from exc
    if data is None:
        return Config(config_dir=base)
    if not isinstance(data, dict):
        raise ConfigError(f"parse config file {path}: expected a mapping")
    return Config.from_dict(data, config_dir=base)


def generate_default_config_content() -> str:
    """Return the default ``config.yaml`` text, with explanatory comments."""
    lines = [
        "# editor: editor command used by `dotgh config edit` (e.g. \"code --wait\", \"vim\").",
        "# When unset, VISUAL, EDITOR or GIT_EDITOR is used, then a platform default.",
        "# editor: \"\"",
        "",
        "# templates_dir: directory where templates are stored.",
        "# Defaults to the \"templates\" directory next to this file. ~ is expanded.",
        "# templates_dir: \"~/dotgh-templates\"",
        "",
        "# includes: Specify file patterns to manage as templates (required).",
        "# Glob syntax (*, ?, [abc]) is supported. ** (recursive) is not supported.",
        "includes:",
    ]
    lines.extend(f"  - \"{pattern}\"" for pattern in DEFAULT_INCLUDES)
    lines.extend([
        "",
        "# excludes: patterns removed from the files matched by includes.",
        "# Useful for local-only settings or secrets.",
        "# excludes:",
        "#   - \".github/prompts/local.prompt.md\"",
        "#   - \".github/prompts/secret-*.prompt.md\"",
    ])
    return "\n".join(lines) + "\n"


def create_default_config_file(path: str | os.PathLike[str]) -> None:
    """Write the default configuration to *path*, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(generate_default_config_content(), encoding="utf-8")


def dump_config(config: Config) -> str:
    """Serialize *config* to YAML."""
    return yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)
