"""Practice Tracker CLI entry point."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

import click

from practice_tracker import __version__

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path("practice-tracker.yaml")


def format_total(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    return f"Total practice time: {hours} hours and {minutes} minutes"


def _open_store(ctx: click.Context):
    """Build the session store, exiting if the sessions file can't be read."""
    from practice_tracker.sessions.store import SessionStore

    store = SessionStore(ctx.obj["sessions_path"])
    if not store.last_load.ok:
        click.echo(store.last_load.error.message, err=True)
        ctx.exit(1)
    return store


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(), default=None, help="Config file path")
@click.option("--file", "-f", "sessions_file", type=click.Path(), default=None, help="Sessions file path")
@click.option("--log-level", default=None, help="Log level")
@click.option("--json-logs", is_flag=True, help="JSON log output")
@click.pass_context
def main(
    ctx: click.Context,
    config: str | None,
    sessions_file: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """Practice Tracker - log and total your practice sessions."""
    from practice_tracker.config.loader import load_config
    from practice_tracker.logging_config import setup_logging

    cfg = load_config(Path(config) if config else DEFAULT_CONFIG)
    setup_logging(
        level=log_level or cfg.logging.level,
        json_output=json_logs or cfg.logging.json_output,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["sessions_path"] = (
        Path(sessions_file).expanduser() if sessions_file else cfg.storage.resolved_path
    )


# Unknown options pass through so negative durations reach validation.
@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("duration", type=int)
@click.pass_context
def add(ctx: click.Context, duration: int) -> None:
    """Record a session of DURATION minutes for today."""
    from practice_tracker.sessions.models import create_session

    created = create_session(dt.date.today(), duration)
    if not created.ok:
        click.echo(f"Error: {created.message}", err=True)
        ctx.exit(1)

    store = _open_store(ctx)
    saved = store.append(created.session)
    if not saved.ok:
        click.echo(f"Error: {saved.message}", err=True)
        ctx.exit(1)

    click.echo(f"Added session:  {created.session.duration} minutes")


@main.command("list")
@click.pass_context
def list_sessions(ctx: click.Context) -> None:
    """List recorded sessions in the order they were added."""
    store = _open_store(ctx)
    sessions = store.list()

    if not sessions:
        click.echo("No sessions added yet.")
        return

    for session in sessions:
        click.echo(f"{session.date.isoformat()}  {session.duration} minutes")


@main.command()
@click.pass_context
def total(ctx: click.Context) -> None:
    """Show total practice time."""
    store = _open_store(ctx)
    logger.debug("Totalling %d sessions", len(store))
    click.echo(format_total(store.total_minutes()))
