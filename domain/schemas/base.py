"""Base schema shared by request and response models.

The JSON wire format is camelCase; Python attributes stay snake_case.
Incoming bodies may use either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement body"""

    message: str
