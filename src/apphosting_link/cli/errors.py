"""Map exceptions to clean stderr messages and exit codes."""

from __future__ import annotations

import typer


def _err(msg: str, *, fg: str | None) -> None:
    """Print a styled message to stderr."""
    typer.echo(typer.style(msg, fg=fg), err=True)


def handle_error(exc: Exception, *, color: bool = True) -> int:
    """Print a clean error message to stderr and return an exit code.

    All errors map to exit code 1.  No tracebacks are printed.
    """
    from apphosting_link.api.errors import ApiError, PermissionDeniedError
    from apphosting_link.config.loader import ConfigError
    from apphosting_link.engine.errors import (
        InsufficientPermissionsError,
        MalformedInputError,
        OperationFailedError,
        OperationTimeoutError,
    )

    fg = typer.colors.RED if color else None

    if isinstance(exc, ConfigError):
        _err(f"Configuration error: {exc}", fg=fg)
    elif isinstance(exc, InsufficientPermissionsError):
        _err(f"Permission error: {exc}", fg=fg)
        _err(
            "You, or your project administrator, can run the following command "
            "to grant the required role manually:",
            fg=fg,
        )
        _err("", fg=None)
        _err(exc.remediation, fg=fg)
    elif isinstance(exc, MalformedInputError):
        _err(f"Invalid input: {exc}", fg=fg)
    elif isinstance(exc, OperationTimeoutError):
        _err(f"Timed out: {exc}", fg=fg)
    elif isinstance(exc, OperationFailedError):
        _err(f"Operation failed: {exc}", fg=fg)
    elif isinstance(exc, PermissionDeniedError):
        _err(f"Permission denied: {exc.message or exc}", fg=fg)
    elif isinstance(exc, ApiError):
        _err(f"API error: {exc}", fg=fg)
    else:
        _err(f"Error: {exc}", fg=fg)

    return 1
