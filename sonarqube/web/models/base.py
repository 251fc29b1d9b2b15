"""Base model for Web API payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Immutable model reading camelCase JSON into snake_case attributes.

    Unknown fields are kept (``extra="allow"``) so newer server versions do
    not break parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )
