"""CLI helpers for resolving the calling user."""

from __future__ import annotations

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import UnauthenticatedError


def resolve_caller_or_exit(ctx: click.Context) -> str:
    """Authenticate the caller, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    authenticator = ctx.obj["authenticator"]
    try:
        return authenticator.authenticate()
    except UnauthenticatedError as exc:
        handle_domain_error(ctx, exc)
