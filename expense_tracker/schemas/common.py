"""
Shared schema base.

Field names are snake_case in Python and camelCase on the wire.
Either spelling is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class OkResponse(ApiModel):
    ok: bool = True
    id: int | None = None
