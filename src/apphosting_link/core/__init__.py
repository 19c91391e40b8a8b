"""Core infrastructure components for apphosting-link."""

from apphosting_link.core.names import (
    ConnectionIdGenerator,
    ConnectionName,
    generate_repository_id,
    parse_connection_name,
)
from apphosting_link.core.provider import AccessTokenAuth, DeveloperConnectProvider

__all__ = [
    "AccessTokenAuth",
    "ConnectionIdGenerator",
    "ConnectionName",
    "DeveloperConnectProvider",
    "generate_repository_id",
    "parse_connection_name",
]
