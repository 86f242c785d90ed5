"""
Error types raised by the schema layer and the Student service.

All of them are recoverable by the caller (e.g. turned into a 4xx response).
"""
from typing import Any, Dict, Iterable, List, NamedTuple


class StudentRecordsError(Exception):
    """Base class for every error raised by this package."""


class FieldError(NamedTuple):
    field: str
    message: str


class ValidationError(StudentRecordsError):
    """
    A record was rejected. Carries one (field, message) pair per failing path.

    Usage:
        try:
            StudentModel.validate(payload)
        except ValidationError as e:
            return {"errors": e.messages}
    """

    def __init__(self, model_name: str, errors: Iterable[FieldError]):
        self.model_name = model_name
        self.errors: List[FieldError] = list(errors)
        super().__init__(self._render())

    @property
    def messages(self) -> Dict[str, str]:
        """Field path -> message."""
        return {error.field: error.message for error in self.errors}

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]

    def _render(self) -> str:
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        return f"{self.model_name} validation failed: {details}"


class ConstraintViolation(StudentRecordsError):
    """A unique field (id, email) already holds this value in the store."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f'Duplicate value "{value}" for unique field "{field}"')


class ModelOverwriteError(StudentRecordsError):
    """A model name was registered a second time with a different schema."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Cannot overwrite model "{name}" once registered')


class ModelNotRegisteredError(StudentRecordsError):
    """get_model() was asked for a name nobody registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Schema hasn\'t been registered for model "{name}"')
