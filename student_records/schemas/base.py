"""
Base class for document schemas.

Mirrors how the document store treats incoming records:
- camelCase keys on the wire, snake_case attributes in Python
- unknown keys are dropped
- numbers given for string fields are cast to strings (whole floats
  without a trailing ".0")
- an explicit null is the same as leaving the field out
"""

from collections.abc import Mapping
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def cast_number(value: Any) -> Any:
    """Whole-number floats read as integers, so 9876543210.0 casts to "9876543210"."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class DocumentSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_input(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: cast_number(value) for key, value in data.items() if value is not None}
        return data

    def to_document(self) -> dict:
        """Plain dict ready for the driver: aliases, enum values, no empty optionals."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def check_pattern(pattern: re.Pattern, value: str, message: str, code: str = "format") -> str:
    """Whole-string match or a PydanticCustomError carrying `message`."""
    if pattern.fullmatch(value) is None:
        raise PydanticCustomError(code, message)
    return value
