"""Template management commands: list, delete; plus version."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

import click

from ..exceptions import DotghError
from ._helpers import (
    main,
    _config_dir_option,
    _load_config,
    _open_store,
    _confirm,
    _status,
)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

@main.command("list")
@_config_dir_option
@click.pass_context
def list_templates(ctx):
    """Display the available templates."""
    store = _open_store(_load_config(ctx))
    names = store.names()
    click.echo("Available templates:")
    if not names:
        click.echo("  (no templates found)")
    else:
        for name in names:
            click.echo(f"  {name}")
        click.echo()
        click.echo(f"{len(names)} template(s) found")
    click.echo()
    click.echo(f"Template directory: {store.directory}")


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------

@main.command()
@_config_dir_option
@click.argument("template")
@click.option("-f", "--force", is_flag=True, default=False,
              help="Skip confirmation prompt.")
@click.pass_context
def delete(ctx, template, force):
    """Delete TEMPLATE from the templates directory."""
    store = _open_store(_load_config(ctx))
    try:
        path = store.require(template)
    except (DotghError, ValueError) as exc:
        raise click.ClickException(str(exc))

    if not force and not _confirm(ctx, f"Delete template '{template}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        store.delete(template)
    except OSError as exc:
        raise click.ClickException(f"delete template: {exc}")
    _status(ctx, f"Removed {path}")
    click.echo(f"Template '{template}' deleted.")


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------

@main.command()
def version():
    """Print the installed dotgh version."""
    try:
        v = _dist_version("dotgh")
    except PackageNotFoundError:
        v = "dev"
    click.echo(f"dotgh version {v}")
