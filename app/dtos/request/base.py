"""Base classes shared by all request DTOs.

A request DTO has two halves:

- a pydantic ``RequestSchema`` describing the rules for the raw wire payload,
  used only by ``validate``;
- a plain ``RequestDto`` carrier that copies recognized fields verbatim.
  ``to_model`` gives them back under their wire keys and ``to_attributes``
  under the ORM attribute names.

Keeping construction separate from validation means building a DTO never
fails, while ``validate`` reports every violation in one pass.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from app.dtos.response.error import ErrorDetail


class RequestSchema(BaseModel):
    """Base schema for raw request payloads."""

    model_config = ConfigDict(
        extra="forbid",  # Unknown fields are violations
        populate_by_name=True,
        str_strip_whitespace=True,
    )


@dataclass(frozen=True)
class ValidationFailure:
    """All violations found in one payload."""

    details: list[ErrorDetail] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "; ".join(detail.message for detail in self.details)

    @property
    def fields(self) -> list[str]:
        return [detail.field for detail in self.details]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a raw payload.

    Attributes:
        error: The violations, or None if the payload is valid.
        value: Validated and coerced payload keyed by wire field names,
            only set when validation passed.
    """

    error: ValidationFailure | None = None
    value: dict[str, Any] | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def describe_error(error: ErrorDetails) -> ErrorDetail:
    """Turn one pydantic error into a field/message pair naming the field.

    Also used for FastAPI path and query errors, so every 400 reads the same.
    """
    loc = error.get("loc", ())
    name = ".".join(str(part) for part in loc) if loc else "body"
    kind = error["type"]
    ctx = error.get("ctx", {})

    if kind == "missing" or (error.get("input") is None and loc and kind.endswith("_type")):
        message = f"{name} is required"
    elif kind == "extra_forbidden":
        message = f"{name} is not allowed"
    elif kind == "string_too_short":
        if ctx.get("min_length") == 1:
            message = f"{name} must not be empty"
        else:
            message = f"{name} must be at least {ctx.get('min_length')} characters long"
    elif kind == "string_too_long":
        message = f"{name} must be at most {ctx.get('max_length')} characters long"
    elif kind == "string_type":
        message = f"{name} must be a string"
    elif kind in ("float_type", "float_parsing", "finite_number"):
        message = f"{name} must be a number"
    elif kind == "greater_than_equal":
        message = f"{name} must be greater than or equal to {ctx.get('ge')}"
    elif kind == "less_than_equal":
        message = f"{name} must be less than or equal to {ctx.get('le')}"
    elif kind == "less_than":
        message = f"{name} must be less than {ctx.get('lt')}"
    elif kind in ("int_type", "int_parsing", "int_from_float"):
        message = f"{name} must be an integer"
    elif kind in ("uuid_type", "uuid_parsing"):
        message = f"{name} must be a valid UUID"
    elif kind.startswith(("date_", "datetime_")):
        message = f"{name} must be a valid date"
    elif kind == "value_error":
        text = str(ctx["error"]) if "error" in ctx else error["msg"]
        message = text if name in text else f"{name}: {text}"
    elif kind == "model_type":
        message = "body must be a JSON object"
    else:
        message = f"{name}: {error['msg']}"

    return ErrorDetail(field=name, message=message)


class RequestDto:
    """Plain carrier for an incoming payload.

    Subclasses set ``schema``; the DTO's attributes are the schema's field
    names and its wire keys are the schema's aliases.
    """

    schema: ClassVar[type[RequestSchema]]
    # Attributes masked in repr so credentials never reach logs
    secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        if not isinstance(data, Mapping):
            data = {}
        for name, info in self.schema.model_fields.items():
            setattr(self, name, data.get(info.alias or name))

    @classmethod
    def validate(cls, data: Any) -> ValidationResult:
        """Check a raw payload against the schema.

        Pure: the input is not modified and no DTO is built.

        Args:
            data: Raw payload, usually a parsed JSON body.

        Returns:
            ValidationResult with every violation, or the coerced values.
        """
        try:
            parsed = cls.schema.model_validate(data)
        except PydanticValidationError as exc:
            details: list[ErrorDetail] = []
            for error in exc.errors():
                detail = describe_error(error)
                if detail not in details:
                    details.append(detail)
            return ValidationResult(error=ValidationFailure(details=details))
        return ValidationResult(value=parsed.model_dump(by_alias=True))

    def to_model(self) -> dict[str, Any]:
        """The recognized fields keyed exactly as they arrived on the wire."""
        return {
            info.alias or name: getattr(self, name)
            for name, info in self.schema.model_fields.items()
        }

    def to_attributes(self) -> dict[str, Any]:
        """The same fields keyed by attribute name, for ORM constructors."""
        return {name: getattr(self, name) for name in self.schema.model_fields}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_model() == other.to_model()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{key}='***'" if key in self.secret_fields else f"{key}={value!r}"
            for key, value in self.to_attributes().items()
        )
        return f"{type(self).__name__}({fields})"
