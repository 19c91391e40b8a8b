"""Global options shared by every command."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from apphosting_link.cli.errors import handle_error

if TYPE_CHECKING:
    from apphosting_link.config.schema import Config

DEFAULT_CONFIG = Path("apphosting.yaml")


@dataclass(frozen=True)
class GlobalOptions:
    """Root callback options, stored on ``ctx.obj``.

    ``config`` is None unless ``--config`` was given; only an explicit path
    must exist.
    """

    config: Path | None = None
    project: str | None = None
    location: str | None = None
    no_color: bool = False

    @property
    def color(self) -> bool:
        return not (self.no_color or os.environ.get("NO_COLOR"))

    def load(self) -> Config:
        """Load config, with CLI options taking precedence. Exits 1 on error."""
        from apphosting_link.config import load

        overrides: dict[str, Any] = {"project": self.project, "location": self.location}
        try:
            return load(
                self.config or DEFAULT_CONFIG,
                overrides={k: v for k, v in overrides.items() if v is not None},
                required=self.config is not None,
            )
        except Exception as exc:
            raise typer.Exit(handle_error(exc, color=self.color)) from exc


def get_options(ctx: typer.Context) -> GlobalOptions:
    obj = ctx.find_root().obj
    return obj if isinstance(obj, GlobalOptions) else GlobalOptions()
