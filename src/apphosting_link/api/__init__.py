"""Google API clients used by the linking flow."""

from apphosting_link.api.developer_connect import DeveloperConnectClient, service_agent_email
from apphosting_link.api.errors import ApiError, NotFoundError, PermissionDeniedError
from apphosting_link.api.resource_manager import ResourceManagerClient

__all__ = [
    "ApiError",
    "DeveloperConnectClient",
    "NotFoundError",
    "PermissionDeniedError",
    "ResourceManagerClient",
    "service_agent_email",
]
