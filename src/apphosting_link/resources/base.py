"""Base model for Developer Connect API resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiResource(BaseModel):
    """Base class for resources exchanged with the Developer Connect API.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    fields returned by the service are ignored so new API fields never break
    parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_api(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON body the API expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
