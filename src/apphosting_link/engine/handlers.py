"""Engine-facing handler interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from apphosting_link.resources.base import ApiResource

if TYPE_CHECKING:
    from apphosting_link.api.developer_connect import DeveloperConnectClient
    from apphosting_link.core.provider import DeveloperConnectProvider
    from apphosting_link.engine.operations import OperationPoller
    from apphosting_link.resources.operation import Operation

R = TypeVar("R", bound=ApiResource)


@dataclass(frozen=True)
class EngineContext:
    """Context passed to handlers: where resources live and how to reach them."""

    provider: DeveloperConnectProvider
    project_id: str
    location: str

    @property
    def client(self) -> DeveloperConnectClient:
        return self.provider.developer_connect


class ResourceHandler(Generic[R]):
    """Base class for get-or-create resource handlers.

    Handlers translate provisioning requests into Developer Connect calls.
    Creation returns a long-running operation; ``_wait`` polls it and returns
    the created resource parsed as ``resource_model``.
    """

    resource_model: ClassVar[type[ApiResource]]

    def __init__(self, poller: OperationPoller) -> None:
        self._poller = poller

    def _wait(self, op: Operation, *, poller_name: str) -> R:
        result = self._poller.poll(op, self.resource_model, poller_name=poller_name)
        return result  # type: ignore[return-value]
