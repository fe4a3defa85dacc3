"""CLI error handling helpers."""

import click

from fintrack.domain.errors import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    StorageError,
    UnauthenticatedError,
    ValidationError,
)

# Exit codes follow the HTTP status the error would map to; 2 is click's usage error
EXIT_VALIDATION = 1
EXIT_FORBIDDEN = 3
EXIT_NOT_FOUND = 4
EXIT_STORAGE = 5
EXIT_UNAUTHENTICATED = 6

EXIT_CODES: dict[type[DomainError], int] = {
    ValidationError: EXIT_VALIDATION,
    ForbiddenError: EXIT_FORBIDDEN,
    NotFoundError: EXIT_NOT_FOUND,
    StorageError: EXIT_STORAGE,
    UnauthenticatedError: EXIT_UNAUTHENTICATED,
}


def exit_code_for(error: DomainError | ValueError) -> int:
    """Return the process exit code for an error."""
    for error_type in type(error).__mro__:
        if error_type in EXIT_CODES:
            return EXIT_CODES[error_type]
    return EXIT_VALIDATION


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, ValidationError) and len(error.errors) > 1:
        click.echo("Error: Invalid transaction", err=True)
        for field, message in error.errors.items():
            click.echo(f"  {field}: {message}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(exit_code_for(error))
