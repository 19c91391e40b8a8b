"""Engine error types."""

from __future__ import annotations


class LinkError(Exception):
    """Base exception for repository linking errors."""


class MalformedInputError(LinkError):
    """Raised when a clone URI or resource name does not have the expected shape."""


class InsufficientPermissionsError(LinkError):
    """Raised when a required IAM role is missing and the grant was declined.

    ``remediation`` holds the command an administrator can run instead.
    """

    def __init__(self, message: str, *, remediation: str) -> None:
        super().__init__(message)
        self.remediation = remediation


class OperationTimeoutError(LinkError):
    """Raised when a long-running operation does not finish in time."""

    def __init__(self, operation_name: str, timeout: float) -> None:
        super().__init__(f"Operation {operation_name} did not complete within {timeout:g}s")
        self.operation_name = operation_name
        self.timeout = timeout


class OperationFailedError(LinkError):
    """Raised when a long-running operation completes with an error."""

    def __init__(self, operation_name: str, code: int, message: str) -> None:
        super().__init__(f"Operation {operation_name} failed ({code}): {message}")
        self.operation_name = operation_name
        self.code = code
        self.message = message
