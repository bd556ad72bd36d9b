"""Command-line interface for the comment board."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import click

from commentboard.cache import TagCache
from commentboard.config.settings import Settings
from commentboard.lib.exceptions import PersistenceException
from commentboard.mutations import (
    Committed,
    MutationResult,
    PersistenceFailed,
    SubmitComment,
    SubmitFeedback,
    comment_mutation,
    feedback_mutation,
)
from commentboard.search import filter_records
from commentboard.store import JsonRecordStore

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _configure_logging(verbose: int, quiet: bool) -> None:
    level_index = min(verbose, len(LOG_LEVELS) - 1)
    level = LOG_LEVELS[level_index]
    if quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _comment_store(ctx: click.Context) -> JsonRecordStore:
    return JsonRecordStore(Settings.comments_path(ctx.obj["data_dir"]), record_type=str)


def _read_comments(ctx: click.Context) -> list:
    try:
        return _comment_store(ctx).read_all()
    except PersistenceException as e:
        raise click.ClickException(e.message)


def _report(result: MutationResult, committed_message: str) -> None:
    if isinstance(result, Committed):
        click.echo(committed_message)
        return

    if isinstance(result, PersistenceFailed):
        raise click.ClickException(f"Could not save, try again: {result.reason}")

    for field_name, messages in result.errors.items():
        for message in messages:
            click.echo(f"{field_name}: {message}", err=True)
    raise click.ClickException("Submission rejected")


@click.group()
@click.option("--data-dir", type=click.Path(path_type=Path), default=None,
              help="Directory holding comments.json and feedback.json")
@click.option("--verbose", "-v", count=True, help="Increase verbosity (use up to -vv)")
@click.option("--quiet", "-q", is_flag=True, help="Only show errors")
@click.pass_context
def cli(ctx: click.Context, data_dir: Optional[Path], verbose: int, quiet: bool) -> None:
    """Read, search and add comments."""
    _configure_logging(verbose, quiet)
    ctx.obj = {"data_dir": data_dir, "verbose": verbose, "quiet": quiet}


@cli.command(name="list")
@click.pass_context
def list_comments(ctx: click.Context) -> None:
    """Print every comment in insertion order."""
    for comment in _read_comments(ctx):
        click.echo(comment)


@cli.command()
@click.argument("query", required=False, default="")
@click.pass_context
def search(ctx: click.Context, query: str) -> None:
    """Print comments containing QUERY (case-insensitive)."""
    for comment in filter_records(_read_comments(ctx), query):
        click.echo(comment)


@cli.command()
@click.argument("comment")
@click.pass_context
def add(ctx: click.Context, comment: str) -> None:
    """Append COMMENT to the log."""
    handler = comment_mutation(_comment_store(ctx), TagCache())
    _report(handler.handle(SubmitComment(comment=comment)), "Comment added")


@cli.command()
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.option("--feedback", "feedback_text", required=True)
@click.pass_context
def feedback(ctx: click.Context, name: str, email: str, feedback_text: str) -> None:
    """Validate and store a feedback submission."""
    store = JsonRecordStore(Settings.feedback_path(ctx.obj["data_dir"]), record_type=dict)
    handler = feedback_mutation(store, TagCache())
    _report(
        handler.handle(SubmitFeedback(name=name, email=email, feedback=feedback_text)),
        "Feedback submitted"
    )


@cli.command()
@click.option("--host", default=None, help="Bind address (default: API_HOST)")
@click.option("--port", type=int, default=None, help="Port (default: API_PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Run the HTTP API with uvicorn."""
    if ctx.obj["data_dir"] is not None:
        # Reload subprocesses read the data directory from the environment
        os.environ["COMMENTBOARD_DATA_DIR"] = str(ctx.obj["data_dir"])
        Settings.DATA_DIRECTORY = str(ctx.obj["data_dir"])

    from commentboard.main import main as run_server  # noqa: PLC0415

    run_server(host=host, port=port, reload=reload or None)


def main() -> None:  # pragma: no cover - console entry point
    cli(prog_name="commentboard")


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    main()
