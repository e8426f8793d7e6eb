"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import click

from ..config import Config, load_config
from ..diff import DiffResult, format_changes
from ..exceptions import ConfigError
from ..store import TemplateStore


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _store_config_dir(ctx, param, value):
    """Click callback: store --config-dir value in the context."""
    ctx.ensure_object(dict)
    if value is not None:
        ctx.obj["config_dir"] = value
    return value


def _config_dir_option(f):
    """Shared --config-dir option decorator for all commands."""
    return click.option(
        "--config-dir", type=click.Path(file_okay=False), envvar="DOTGH_CONFIG_DIR",
        help="Configuration directory (or set DOTGH_CONFIG_DIR).",
        expose_value=False, callback=_store_config_dir, is_eager=True,
    )(f)


def _merge_option(f):
    """Shared -m/--merge flag for pull and push."""
    return click.option(
        "-m", "--merge", is_flag=True, default=False,
        help="Merge mode: only add/update files, no deletions.",
    )(f)


def _yes_option(f):
    """Shared -y/--yes flag for pull and push."""
    return click.option(
        "-y", "--yes", is_flag=True, default=False,
        help="Skip confirmation prompt.",
    )(f)


def _directory_option(f):
    """Shared -C/--directory option naming the working directory."""
    return click.option(
        "-C", "--directory", type=click.Path(file_okay=False), default=".",
        show_default=True, help="Working directory to sync with.",
    )(f)


def _load_config(ctx) -> Config:
    """Load the configuration from --config-dir (or the default location)."""
    try:
        cfg = load_config(ctx.obj.get("config_dir"))
    except ConfigError as exc:
        raise click.ClickException(f"load config: {exc}")
    _status(ctx, f"Using templates in {cfg.get_templates_dir()}")
    return cfg


def _open_store(cfg: Config) -> TemplateStore:
    return TemplateStore(cfg.get_templates_dir())


def _confirm(ctx, message: str) -> bool:
    """Ask for confirmation through the injected capability.

    ``ctx.obj["confirm"]`` may hold any callable taking the prompt text and
    returning a bool; the default prompts on the terminal, answering no on
    an empty reply.
    """
    confirm = ctx.obj.get("confirm")
    if confirm is None:
        return click.confirm(message, default=False)
    return bool(confirm(message))


def _echo_changes(diff: DiffResult):
    for line in format_changes(diff, indent="  "):
        click.echo(line)
    click.echo()


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config-dir", type=click.Path(file_okay=False), envvar="DOTGH_CONFIG_DIR",
              help="Configuration directory (or set DOTGH_CONFIG_DIR).",
              expose_value=False, callback=_store_config_dir, is_eager=True)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """dotgh — manage AI coding guideline templates.

    Save the pattern-selected configuration files of a project as a named
    template, and apply templates to other projects.

    \b
    Quick start:
      dotgh push my-template     Save the current directory as a template
      dotgh pull my-template     Apply a template to the current directory
      dotgh diff my-template     Show what a pull would change
      dotgh list                 List templates

    \b
    Managed files are selected by the includes/excludes patterns in
    config.yaml (see `dotgh config list`).
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
