"""Schema validation.

Adapts a Pydantic model (or any object honouring the same contract) to the
engine's ``validate`` operation. The engine only calls ``validate``;
``json_schema`` is consumed by the provider spec builders.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exo_tools.errors import FieldError


class ValidationResult(BaseModel):
    """Outcome of validating raw arguments."""

    success: bool
    data: Any = None
    errors: list[FieldError] | None = None


@runtime_checkable
class SchemaValidator(Protocol):
    """Structural schema used by a tool."""

    def validate(self, raw_args: Any) -> ValidationResult:
        ...

    def json_schema(self) -> dict[str, Any]:
        ...


class PydanticSchema:
    """SchemaValidator backed by a Pydantic model class."""

    def __init__(self, model: type[BaseModel]):
        self.model = model

    def validate(self, raw_args: Any) -> ValidationResult:
        """Validate raw input. Never raises."""
        try:
            data = self.model.model_validate(raw_args)
        except PydanticValidationError as e:
            return ValidationResult(success=False, errors=field_errors_from(e))
        return ValidationResult(success=True, data=data)

    def json_schema(self) -> dict[str, Any]:
        return self.model.model_json_schema()

    def __repr__(self) -> str:
        return f"PydanticSchema({self.model.__name__})"


def field_errors_from(error: PydanticValidationError) -> list[FieldError]:
    """Flatten pydantic errors into ``{field, message}`` pairs.

    ``field`` is the error location joined with dots, empty for errors on
    the input as a whole (e.g. a non-mapping payload).
    """
    return [
        FieldError(
            field=".".join(str(part) for part in err["loc"]),
            message=err["msg"],
        )
        for err in error.errors()
    ]


def as_validator(schema: type[BaseModel] | SchemaValidator) -> SchemaValidator:
    """Normalize a tool's declared schema into a SchemaValidator."""
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return PydanticSchema(schema)
    if isinstance(schema, SchemaValidator):
        return schema
    raise TypeError(
        f"schema must be a pydantic model class or expose validate()/json_schema(), "
        f"got {schema!r}"
    )
