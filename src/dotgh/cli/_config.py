"""The config command group: list, init."""

from __future__ import annotations

import click

from ..config import create_default_config_file, dump_config, get_config_path
from ._helpers import main, _config_dir_option, _load_config, _status


@main.group("config")
@_config_dir_option
def config_group():
    """View and initialize the dotgh configuration."""


@config_group.command("list")
@_config_dir_option
@click.pass_context
def config_list(ctx):
    """Display the effective configuration as YAML.

    Shows the defaults when no config file exists.
    """
    path = get_config_path(ctx.obj.get("config_dir"))
    cfg = _load_config(ctx)
    click.echo(f"# Config file: {path}")
    click.echo(dump_config(cfg), nl=False)


@config_group.command("init")
@_config_dir_option
@click.option("-f", "--force", is_flag=True, default=False,
              help="Overwrite an existing config file.")
@click.pass_context
def config_init(ctx, force):
    """Write a commented default config file."""
    path = get_config_path(ctx.obj.get("config_dir"))
    if path.exists() and not force:
        raise click.ClickException(
            f"Config file already exists: {path} (use --force to overwrite)"
        )
    try:
        create_default_config_file(path)
    except OSError as exc:
        raise click.ClickException(f"write config file: {exc}")
    _status(ctx, f"Wrote {path}")
    click.echo(f"Created config file: {path}")
