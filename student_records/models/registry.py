"""
Model Registry - binds a schema to a model name and a collection.

Registration happens once, at import time of student_records.models, and the
registry is only read afterwards.

Usage:
    Student = get_model("Student")
    doc = Student.validate(payload)     # normalized dict or ValidationError
    Student.collection_name             # "students"
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple, Type

from pydantic import ValidationError as PydanticValidationError

from student_records.core.errors import (
    FieldError,
    ModelNotRegisteredError,
    ModelOverwriteError,
    ValidationError,
)
from student_records.schemas.base import DocumentSchema
from student_records.schemas.messages import DEFAULT_CAST, MessageCatalog, render_message, translate_errors

logger = logging.getLogger(__name__)

_models: Dict[str, "ModelDefinition"] = {}


def collection_name_for(model_name: str) -> str:
    """Lowercase and pluralize: Student -> students, Class -> classes, Category -> categories."""
    name = model_name.lower()
    if name.endswith(("s", "x", "z", "ch", "sh")):
        return name + "es"
    if name.endswith("y") and len(name) > 1 and name[-2] not in "aeiou":
        return name[:-1] + "ies"
    return name + "s"


class ModelDefinition:
    """
    A named, registered schema.

    Attributes:
        name: Model name ("Student")
        schema: DocumentSchema subclass doing the field checks
        messages: Per-path message templates for rejections
        unique: Top-level fields the store must keep unique
        collection_name: MongoDB collection the documents live in
    """

    def __init__(
        self,
        name: str,
        schema: Type[DocumentSchema],
        messages: MessageCatalog,
        unique: Iterable[str] = (),
        collection_name: Optional[str] = None,
    ):
        self.name = name
        self.schema = schema
        self.messages = messages
        self.unique: Tuple[str, ...] = tuple(unique)
        self.collection_name = collection_name or collection_name_for(name)

    def require_mapping(self, record: Any) -> Mapping:
        """Reject anything that is not a mapping with a single root-path error."""
        if not isinstance(record, Mapping):
            message = render_message(DEFAULT_CAST, record, self.name, kind=self.name)
            raise ValidationError(self.name, [FieldError("", message)])
        return record

    def validate(self, record: Any) -> dict:
        """
        Validate a candidate record.

        Returns:
            Normalized document (camelCase keys, trimmed strings, defaults applied)

        Raises:
            ValidationError: one (field, message) pair per failing path
        """
        self.require_mapping(record)

        try:
            instance = self.schema.model_validate(dict(record))
        except PydanticValidationError as e:
            errors = list(translate_errors(e, self.messages))
            logger.debug("%s rejected: %s", self.name, ", ".join(err.field for err in errors))
            raise ValidationError(self.name, errors) from None

        return instance.to_document()

    def is_valid(self, record: Any) -> bool:
        try:
            self.validate(record)
        except ValidationError:
            return False
        return True

    def __repr__(self) -> str:
        return f"<ModelDefinition {self.name} -> {self.collection_name}>"


def register_model(
    name: str,
    schema: Type[DocumentSchema],
    messages: Optional[MessageCatalog] = None,
    unique: Iterable[str] = (),
    collection_name: Optional[str] = None,
) -> ModelDefinition:
    """
    Register `schema` under `name`.

    Registering the same schema again returns the existing definition;
    a different schema under a taken name raises ModelOverwriteError.
    """
    existing = _models.get(name)
    if existing is not None:
        if existing.schema is schema:
            return existing
        raise ModelOverwriteError(name)

    model = ModelDefinition(name, schema, messages or MessageCatalog(), unique, collection_name)
    _models[name] = model
    logger.info("Registered model %s (collection=%s)", name, model.collection_name)
    return model


def get_model(name: str) -> ModelDefinition:
    try:
        return _models[name]
    except KeyError:
        raise ModelNotRegisteredError(name) from None


def registered_models() -> List[ModelDefinition]:
    return list(_models.values())
