"""Shared pydantic base for models that cross the presentation boundary."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Model whose serialized form uses camelCase keys.

    Python code uses snake_case attributes; ``model_dump(by_alias=True)``
    produces the shape the presentation layer consumes (``requestId``,
    ``isAlive``, ``pendingRequest``...). Either spelling is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
