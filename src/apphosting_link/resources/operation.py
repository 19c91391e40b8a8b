"""Long-running operation model."""

from __future__ import annotations

from typing import Any

from apphosting_link.resources.base import ApiResource


class OperationError(ApiResource):
    code: int = 0
    message: str = ""
    details: list[dict[str, Any]] | None = None


class Operation(ApiResource):
    name: str
    done: bool = False
    error: OperationError | None = None
    response: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
