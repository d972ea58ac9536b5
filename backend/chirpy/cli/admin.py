"""Flask CLI commands mirroring the admin endpoints."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from chirpy.api.deps import admin_service
from chirpy.services._shared.errors import ForbiddenError

LOGGER = logging.getLogger(__name__)


@click.group("chirpy")
def admin_cli() -> None:
    """Administrative commands for Chirpy."""


@admin_cli.command("reset")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@with_appcontext
def reset_command(yes: bool) -> None:
    """Delete every user, chirp and refresh token (PLATFORM=dev only)."""
    if not yes:
        click.confirm("This will DELETE all users, chirps and refresh tokens. Continue?", abort=True)
    try:
        result = admin_service().reset()
    except ForbiddenError as exc:
        raise click.UsageError(exc.message) from exc
    LOGGER.info("reset finished via CLI")
    click.echo(
        f"Removed refresh_tokens={result.refresh_tokens} "
        f"chirps={result.chirps} users={result.users}"
    )


@admin_cli.command("metrics")
@with_appcontext
def metrics_command() -> None:
    """Print the file-server hit count of this process."""
    click.echo(str(admin_service().metrics()))
