"""
User-facing validation messages.

Templates use the document-store convention: `{PATH}` is the dotted field
path, `{VALUE}` the offending input, substituted literally. A MessageCatalog
maps paths to the templates a schema declares; anything it does not cover
falls back to the DEFAULT_* templates below.
"""

from typing import Any, Dict, Iterator, Optional
from pydantic import ValidationError as PydanticValidationError

from student_records.core.errors import FieldError


DEFAULT_REQUIRED = "Path `{PATH}` is required."
DEFAULT_MAXLENGTH = "Path `{PATH}` is longer than the maximum allowed length ({MAXLENGTH})."
DEFAULT_ENUM = "`{VALUE}` is not a valid enum value for path `{PATH}`."
DEFAULT_CAST = 'Cast to {KIND} failed for value "{VALUE}" at path "{PATH}"'

# pydantic error types -> rule they break
REQUIRED_TYPES = {"missing", "string_too_short"}
MAXLENGTH_TYPES = {"string_too_long"}
ENUM_TYPES = {"enum", "literal_error"}
CAST_KINDS = {
    "string_type": "String",
    "model_type": "Embedded",
    "model_attributes_type": "Embedded",
    "dict_type": "Embedded",
}


def stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_message(template: str, value: Any = None, path: str = "", **extra: Any) -> str:
    """
    Substitute {PATH}, any extra {KEY} placeholders, and {VALUE}.

    {VALUE} goes last so text coming from the input is never re-substituted.
    """
    message = template.replace("{PATH}", path)
    for key, replacement in extra.items():
        message = message.replace("{" + key.upper() + "}", stringify(replacement))
    return message.replace("{VALUE}", stringify(value))


class MessageCatalog:
    """Per-path message templates declared by a schema."""

    def __init__(
        self,
        required: Optional[Dict[str, str]] = None,
        maxlength: Optional[Dict[str, str]] = None,
        enum: Optional[Dict[str, str]] = None,
    ):
        self.required = required or {}
        self.maxlength = maxlength or {}
        self.enum = enum or {}

    def message_for(self, error: dict, path: str) -> str:
        """Turn one pydantic error dict into the user-facing message."""
        error_type = error["type"]
        value = error.get("input")

        if error_type in REQUIRED_TYPES:
            return render_message(self.required.get(path, DEFAULT_REQUIRED), value, path)
        if error_type in MAXLENGTH_TYPES:
            limit = (error.get("ctx") or {}).get("max_length", "")
            template = self.maxlength.get(path, DEFAULT_MAXLENGTH)
            return render_message(template, value, path, maxlength=limit)
        if error_type in ENUM_TYPES:
            return render_message(self.enum.get(path, DEFAULT_ENUM), value, path)
        if error_type in CAST_KINDS:
            return render_message(DEFAULT_CAST, value, path, kind=CAST_KINDS[error_type])
        # Custom rules raise PydanticCustomError with the final text already rendered
        return error["msg"]


def error_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def translate_errors(exc: PydanticValidationError, catalog: MessageCatalog) -> Iterator[FieldError]:
    """
    Yield one FieldError per failing path, keeping the first rule that failed.
    """
    seen = set()
    for error in exc.errors():
        path = error_path(error["loc"])
        if path in seen:
            continue
        seen.add(path)
        yield FieldError(path, catalog.message_for(error, path))
