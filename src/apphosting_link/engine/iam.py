"""IAM prerequisites for creating GitHub connections."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apphosting_link.api.developer_connect import service_agent_email
from apphosting_link.engine.errors import InsufficientPermissionsError

if TYPE_CHECKING:
    from apphosting_link.api.resource_manager import ResourceManagerClient
    from apphosting_link.engine.interaction import Interaction

logger = logging.getLogger(__name__)

SECRET_MANAGER_ADMIN_ROLE = "roles/secretmanager.admin"


def grant_command(project_id: str, email: str) -> str:
    """The gcloud command that grants the role by hand."""
    return (
        f"gcloud projects add-iam-policy-binding {project_id} \\\n"
        f'  --member="serviceAccount:{email}" \\\n'
        f'  --role="{SECRET_MANAGER_ADMIN_ROLE}"'
    )


def ensure_secret_manager_admin_grant(
    resource_manager: ResourceManagerClient,
    interaction: Interaction,
    project_id: str,
) -> None:
    """Make sure the Developer Connect service agent can manage secrets.

    New connections store their GitHub tokens in Secret Manager, which needs
    ``roles/secretmanager.admin`` on the service agent. Grants it after asking
    the user; raises ``InsufficientPermissionsError`` if they decline.
    """
    project_number = resource_manager.get_project_number(project_id)
    email = service_agent_email(project_number)

    if resource_manager.service_account_has_roles(project_id, email, [SECRET_MANAGER_ADMIN_ROLE]):
        logger.debug("%s already granted to %s", SECRET_MANAGER_ADMIN_ROLE, email)
        return

    interaction.notify(
        f"To create a new GitHub connection, Secret Manager Admin role "
        f"({SECRET_MANAGER_ADMIN_ROLE}) is required on the Developer Connect Service Agent."
    )
    if not interaction.confirm("Grant the required role to the Developer Connect Service Agent?"):
        raise InsufficientPermissionsError(
            "Insufficient IAM permissions to create a new connection to GitHub",
            remediation=grant_command(project_id, email),
        )

    resource_manager.add_service_account_to_roles(project_id, email, [SECRET_MANAGER_ADMIN_ROLE])
    interaction.notify(
        "Successfully granted the required role to the Developer Connect Service Agent!"
    )
