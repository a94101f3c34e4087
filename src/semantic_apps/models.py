"""Message and option models for semantic apps."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def encode_model(model: BaseModel) -> str:
    _dict = model.model_dump()
    return json.dumps(_dict)


class InputValueMessage(BaseModel):
    """Client -> server: an input binding reported a new value."""

    type: str = "input"
    input_id: str = Field(min_length=1)
    value: Any


class InputMessage(BaseModel):
    """Server -> client: one-shot update addressed to a single input binding."""

    type: str = "input_message"
    input_id: str
    message: dict[str, Any]


class ErrorMessage(BaseModel):
    type: str = "error"
    error_type: str
    message: str


class CounterOptions(BaseModel):
    """Configuration of a counter button.

    ``attrs`` holds pass-through attributes for the clickable element.
    Color and size keywords are not checked against Semantic UI; unknown
    values are rendered and left for the stylesheet to ignore.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    label: str = ""
    icon: Any = None
    value: int = Field(default=0, ge=0)
    color: str = ""
    size: str = ""
    separator: str = " "
    attrs: dict[str, Any] = Field(default_factory=dict)
