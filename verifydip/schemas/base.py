from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    snake_case attributes in Python, camelCase keys on the wire.
    Enum-typed fields hold their plain string value.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class CamelInput(CamelModel):
    model_config = ConfigDict(extra="forbid")
