"""The pull, push, and diff commands."""

from __future__ import annotations

import click

from ..diff import format_apply_summary, format_summary
from ..exceptions import DotghError
from ._helpers import (
    main,
    _config_dir_option,
    _merge_option,
    _yes_option,
    _directory_option,
    _load_config,
    _open_store,
    _confirm,
    _echo_changes,
    _status,
)


# ---------------------------------------------------------------------------
# pull
# ---------------------------------------------------------------------------

@main.command()
@_config_dir_option
@click.argument("template")
@_merge_option
@_yes_option
@_directory_option
@click.pass_context
def pull(ctx, template, merge, yes, directory):
    """Apply TEMPLATE to the working directory.

    By default performs a full sync: adds new files, updates modified
    files, and deletes managed files that exist locally but not in the
    template.  Use --merge to only add and update.

    \b
    Examples:
      dotgh pull my-template          Full sync with confirmation
      dotgh pull my-template --yes    Full sync without confirmation
      dotgh pull my-template --merge  Merge only (no deletions)
    """
    cfg = _load_config(ctx)
    store = _open_store(cfg)
    try:
        diff = store.diff_pull(template, directory, cfg.includes, cfg.excludes,
                               merge_mode=merge)
    except (DotghError, ValueError) as exc:
        raise click.ClickException(str(exc))

    if not diff.has_changes:
        click.echo(f"Template '{template}' is already in sync.")
        return

    mode = "merge" if merge else "full sync"
    click.echo(f"Pulling template '{template}' ({mode}):")
    _echo_changes(diff)

    if not yes and not _confirm(ctx, "Apply these changes?"):
        click.echo("Aborted.")
        return

    try:
        store.pull(template, directory, diff)
    except (DotghError, ValueError) as exc:
        raise click.ClickException(f"apply changes: {exc}")
    _status(ctx, f"Applied {diff.total} change(s) to {directory}")

    click.echo()
    click.echo(format_apply_summary(diff))


# ---------------------------------------------------------------------------
# push
# ---------------------------------------------------------------------------

@main.command()
@_config_dir_option
@click.argument("template")
@_merge_option
@_yes_option
@_directory_option
@click.pass_context
def push(ctx, template, merge, yes, directory):
    """Save the working directory's managed files as TEMPLATE.

    By default performs a full sync: files missing locally are deleted
    from the template.  Use --merge to only add and update.  The template
    is created if it does not exist.
    """
    cfg = _load_config(ctx)
    store = _open_store(cfg)
    try:
        existed = store.exists(template)
        diff = store.diff_push(template, directory, cfg.includes, cfg.excludes,
                               merge_mode=merge)
    except (DotghError, ValueError) as exc:
        raise click.ClickException(str(exc))

    if not diff.has_changes:
        click.echo(f"Template '{template}' is already in sync.")
        return

    if existed:
        mode = "merge" if merge else "full sync"
        click.echo(f"Pushing to template '{template}' ({mode}):")
    else:
        click.echo(f"Creating template '{template}':")
    _echo_changes(diff)

    if not yes and not _confirm(ctx, "Apply these changes?"):
        click.echo("Aborted.")
        return

    try:
        path = store.push(template, directory, diff)
    except (DotghError, ValueError) as exc:
        raise click.ClickException(f"apply changes: {exc}")

    click.echo()
    click.echo(format_apply_summary(diff))
    click.echo(f"Template saved to: {path}")


# ---------------------------------------------------------------------------
# diff
# ---------------------------------------------------------------------------

@main.command()
@_config_dir_option
@click.argument("template")
@click.option("-r", "--reverse", is_flag=True, default=False,
              help="Show differences for push (working directory → template).")
@click.option("--merge", is_flag=True, default=False,
              help="Show merge mode differences (no deletions).")
@_directory_option
@click.pass_context
def diff(ctx, template, reverse, merge, directory):
    """Show differences between TEMPLATE and the working directory.

    Lists the files a pull would add (+), modify (M) or delete (-).
    With --reverse, lists what a push would do instead.

    \b
    Exit codes:
      0 - No differences found
      1 - Differences found or error occurred
    """
    cfg = _load_config(ctx)
    store = _open_store(cfg)
    try:
        store.require(template)
        if reverse:
            result = store.diff_push(template, directory, cfg.includes, cfg.excludes,
                                     merge_mode=merge)
            direction = f"current directory → template '{template}'"
        else:
            result = store.diff_pull(template, directory, cfg.includes, cfg.excludes,
                                     merge_mode=merge)
            direction = f"template '{template}' → current directory"
    except (DotghError, ValueError) as exc:
        raise click.ClickException(str(exc))

    if merge:
        click.echo(f"Diff ({direction}, merge mode):")
    else:
        click.echo(f"Diff ({direction}):")

    if not result.has_changes:
        click.echo("  (no changes)")
        return

    _echo_changes(result)
    click.echo(format_summary(result))
    ctx.exit(1)
