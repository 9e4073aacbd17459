from __future__ import annotations

"""
Walletfy CLI Wrapper (Typer + Rich)

Local-only personal finance tracker: record income and expense events and
see the month-by-month balance flow.

All paths are resolved from a single workspace root:
  --data-dir / WALLETFY_DATA env var / current working directory
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from walletfy.model.event import EventType
from walletfy.workspace import ENV_VAR, Workspace

HELP_WRITE = "Persist changes (default: dry-run)"
HELP_ID_PREFIX = "Event ID or unique prefix (see 'walletfy events')"
HELP_DATE = "Event date, YYYY-MM-DD"
HELP_ATTACHMENT = "Image file to attach (stored base64-encoded)"

APP_HELP = "Walletfy CLI (local-only)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("walletfy")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Walletfy CLI: all paths resolved from a single workspace root."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["workspace"] = Workspace.resolve(data_dir)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a new workspace with the local store and starter settings.

    Safe to run on an existing workspace; skips anything that already exists.

    Examples:
      walletfy --data-dir ~/wallet init
      walletfy init
    """
    from walletfy.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Short name (1-20 characters)"),
    amount: float = typer.Option(..., "--amount", "-m", help="Positive amount; direction comes from --type"),
    event_type: EventType = typer.Option(..., "--type", "-t", case_sensitive=False, help="income or expense"),
    event_date: Optional[str] = typer.Option(None, "--date", "-d", help=HELP_DATE + " (default: today)"),
    description: Optional[str] = typer.Option(None, "--description", help="Optional description (max 100 characters)"),
    attachment: Optional[Path] = typer.Option(None, "--attachment", "-a", help=HELP_ATTACHMENT),
):
    """Record a new income or expense event.

    Examples:
      walletfy add --name Salary --amount 2500 --type income --date 2025-01-31
      walletfy add -n Groceries -m 84.20 -t expense --description "Weekly shop"
      walletfy add -n Dinner -m 42 -t expense --attachment receipt.png
    """
    from walletfy.cli.command import add as cmd_add

    code = cmd_add.run(
        workspace=_ws(ctx),
        name=name,
        amount=amount,
        event_type=event_type.value,
        event_date=event_date,
        description=description,
        attachment=attachment,
    )
    raise typer.Exit(code=code)


@app.command()
def edit(
    ctx: typer.Context,
    id_prefix: str = typer.Argument(..., help=HELP_ID_PREFIX),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    amount: Optional[float] = typer.Option(None, "--amount", "-m", help="New amount"),
    event_type: Optional[EventType] = typer.Option(None, "--type", "-t", case_sensitive=False, help="income or expense"),
    event_date: Optional[str] = typer.Option(None, "--date", "-d", help=HELP_DATE),
    description: Optional[str] = typer.Option(None, "--description", help="New description"),
    attachment: Optional[Path] = typer.Option(None, "--attachment", "-a", help=HELP_ATTACHMENT),
    clear_description: bool = typer.Option(False, "--clear-description", help="Remove the description"),
    clear_attachment: bool = typer.Option(False, "--clear-attachment", help="Remove the attachment"),
):
    """Edit a stored event. Only the given fields change; the id is kept.

    Examples:
      walletfy edit 3f2b8c1e --amount 90
      walletfy edit 3f2b --type income --clear-description
    """
    from walletfy.cli.command import edit as cmd_edit

    code = cmd_edit.run(
        workspace=_ws(ctx),
        id_prefix=id_prefix,
        name=name,
        amount=amount,
        event_type=event_type.value if event_type is not None else None,
        event_date=event_date,
        description=description,
        attachment=attachment,
        clear_description=clear_description,
        clear_attachment=clear_attachment,
    )
    raise typer.Exit(code=code)


@app.command()
def delete(
    ctx: typer.Context,
    id_prefix: str = typer.Argument(..., help=HELP_ID_PREFIX),
    write: bool = typer.Option(False, "--write", help=HELP_WRITE),
):
    """Delete a stored event.

    Examples:
      walletfy delete 3f2b8c1e
      walletfy delete 3f2b8c1e --write

    Safety: dry-run by default. Use --write to persist changes.
    """
    from walletfy.cli.command import delete as cmd_delete

    code = cmd_delete.run(workspace=_ws(ctx), id_prefix=id_prefix, write=write)
    raise typer.Exit(code=code)


@app.command()
def balance(
    ctx: typer.Context,
    amount: Optional[float] = typer.Argument(None, help="New initial balance (omit to show the current one)"),
):
    """Show or set the initial balance (starting capital before any event).

    Examples:
      walletfy balance
      walletfy balance 1500
      walletfy balance -- -200
    """
    from walletfy.cli.command import balance as cmd_balance

    code = cmd_balance.run(workspace=_ws(ctx), amount=amount)
    raise typer.Exit(code=code)


@app.command()
def events(
    ctx: typer.Context,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max number of rows to show (after sorting)"),
):
    """List stored events, oldest first."""
    from walletfy.cli.command import events as cmd_events

    code = cmd_events.run(workspace=_ws(ctx), limit=limit)
    raise typer.Exit(code=code)


@app.command()
def report(
    ctx: typer.Context,
    expand: Optional[bool] = typer.Option(None, "--expand/--collapse", help="List each month's events (default from settings)"),
):
    """Show the monthly balance flow and the current global balance.

    Examples:
      walletfy report
      walletfy report --expand
    """
    from walletfy.cli.command import report as cmd_report

    code = cmd_report.run(workspace=_ws(ctx), expand=expand)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
