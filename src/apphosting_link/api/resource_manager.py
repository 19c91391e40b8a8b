"""Cloud Resource Manager client (project lookup and IAM policy bindings)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from apphosting_link.api.errors import raise_for_status

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "https://cloudresourcemanager.googleapis.com"


def _member(service_account_email: str) -> str:
    return f"serviceAccount:{service_account_email}"


class ResourceManagerClient:
    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    def close(self) -> None:
        self._http.close()

    def _post(self, url: str, json: dict[str, Any]) -> dict[str, Any]:
        logger.debug("POST %s", url)
        response = self._http.post(url, json=json)
        raise_for_status(response)
        return response.json()

    def get_project_number(self, project_id: str) -> str:
        response = self._http.get(f"/v1/projects/{project_id}")
        raise_for_status(response)
        return str(response.json()["projectNumber"])

    def get_iam_policy(self, project_id: str) -> dict[str, Any]:
        return self._post(f"/v1/projects/{project_id}:getIamPolicy", {})

    def set_iam_policy(self, project_id: str, policy: dict[str, Any]) -> dict[str, Any]:
        return self._post(
            f"/v1/projects/{project_id}:setIamPolicy",
            {"policy": policy, "updateMask": "bindings"},
        )

    def service_account_has_roles(
        self, project_id: str, service_account_email: str, roles: Iterable[str]
    ) -> bool:
        """True if every role in *roles* is bound to the service account."""
        member = _member(service_account_email)
        bindings = self.get_iam_policy(project_id).get("bindings", [])
        granted = {b.get("role") for b in bindings if member in b.get("members", [])}
        return all(role in granted for role in roles)

    def add_service_account_to_roles(
        self, project_id: str, service_account_email: str, roles: Iterable[str]
    ) -> dict[str, Any]:
        """Bind the service account to each role (read-modify-write on the policy)."""
        roles = list(roles)
        member = _member(service_account_email)
        policy = self.get_iam_policy(project_id)
        bindings: list[dict[str, Any]] = policy.setdefault("bindings", [])
        for role in roles:
            binding = next((b for b in bindings if b.get("role") == role), None)
            if binding is None:
                bindings.append({"role": role, "members": [member]})
                continue
            members = binding.setdefault("members", [])
            if member not in members:
                members.append(member)
        logger.info("Granting %s to %s", ", ".join(roles), member)
        return self.set_iam_policy(project_id, policy)
