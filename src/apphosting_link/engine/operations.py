"""Long-running operation polling.

Create calls on Developer Connect return an operation rather than the
resource. The poller re-reads the operation with exponential backoff until it
reports ``done``, bounded by an overall wall-clock timeout.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, Field

from apphosting_link.engine.errors import OperationFailedError, OperationTimeoutError
from apphosting_link.resources.base import ApiResource

if TYPE_CHECKING:
    from collections.abc import Callable

    from apphosting_link.api.developer_connect import DeveloperConnectClient
    from apphosting_link.resources.operation import Operation

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ApiResource)


class PollerOptions(BaseModel):
    """Timing knobs for operation polling, in seconds."""

    master_timeout: float = Field(default=25 * 60, gt=0)
    max_backoff: float = Field(default=10.0, gt=0)
    initial_backoff: float = Field(default=0.25, gt=0)


class OperationPoller:
    def __init__(
        self,
        client: DeveloperConnectClient,
        options: PollerOptions | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._options = options or PollerOptions()
        self._sleep = sleep
        self._clock = clock

    def wait(self, op: Operation, *, poller_name: str = "") -> Operation:
        """Block until *op* is done and return the finished operation.

        Raises:
            OperationTimeoutError: ``master_timeout`` elapsed first.
            OperationFailedError: The operation finished with an error.
        """
        opts = self._options
        deadline = self._clock() + opts.master_timeout
        backoff = opts.initial_backoff
        current = op
        label = poller_name or op.name

        while not current.done:
            remaining = deadline - self._clock()
            if remaining <= 0:
                raise OperationTimeoutError(op.name, opts.master_timeout)
            delay = min(backoff, remaining)
            logger.debug("[%s] operation pending, next poll in %.2fs", label, delay)
            self._sleep(delay)
            backoff = min(backoff * 2, opts.max_backoff)
            current = self._client.get_operation(op.name)

        if current.error is not None:
            raise OperationFailedError(op.name, current.error.code, current.error.message)
        logger.debug("[%s] operation done", label)
        return current

    def poll(self, op: Operation, model: type[T], *, poller_name: str = "") -> T:
        """Wait for *op* and parse its response as *model*.

        Raises:
            OperationFailedError: The operation finished without a response.
        """
        done = self.wait(op, poller_name=poller_name)
        if not done.response:
            raise OperationFailedError(op.name, 0, "operation finished without a response")
        return model.model_validate(done.response)
