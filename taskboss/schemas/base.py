# taskboss/schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """
    Base for request bodies.

    The SPA sends a mix of camelCase (`dueDate`, `estimatedTime`) and
    snake_case keys, so both spellings are accepted. Unknown keys are
    dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class ResponseModel(BaseModel):
    """Base for response bodies, read straight off ORM objects."""

    model_config = ConfigDict(from_attributes=True)
