"""
Temporal error models.

This module defines the exception hierarchy of the field/unit calculus.
Every exception carries a structured ErrorDetail using error codes from
the CHF-XXX-NNN taxonomy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .models import ValueRange


class ErrorDetail(BaseModel, frozen=True):
    """
    Structured temporal error.

    Error domains:
    - CHF-CFG-*: Invalid configuration (ranges, week definitions, settings)
    - CHF-FIELD-*: Unsupported fields
    - CHF-UNIT-*: Unsupported units
    - CHF-VALUE-*: Values outside their legal range
    - CHF-MATH-*: Arithmetic overflow
    - CHF-RES-*: Resolution failures
    - CHF-CHR-*: Chronology mismatches
    """

    code: str = Field(
        pattern=r"^CHF-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'CHF-CFG-001'",
    )
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (field, value, valid range, etc.)",
    )

    def __str__(self) -> str:
        """Format error for display."""
        return f"[{self.code}] {self.title} - {self.message}"


class TemporalError(Exception):
    """Base class for all errors raised by the calculus."""

    default_code = "CHF-RES-003"
    default_title = "Temporal error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        title: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.detail = ErrorDetail(
            code=code or self.default_code,
            title=title or self.default_title,
            message=message,
            context=context or {},
        )

    @property
    def code(self) -> str:
        return self.detail.code

    @property
    def message(self) -> str:
        return self.detail.message


class InvalidConfigurationError(TemporalError):
    """Malformed ValueRange bounds, week definition or settings."""

    default_code = "CHF-CFG-001"
    default_title = "Invalid configuration"


class UnsupportedFieldError(TemporalError):
    """A temporal does not expose a required field."""

    default_code = "CHF-FIELD-001"
    default_title = "Unsupported field"

    def __init__(self, field: object, *, message: str | None = None) -> None:
        self.field_name = str(field)
        super().__init__(
            message or f"Unsupported field: {self.field_name}",
            context={"field": self.field_name},
        )


class UnsupportedUnitError(TemporalError):
    """A temporal does not support a unit."""

    default_code = "CHF-UNIT-001"
    default_title = "Unsupported unit"

    def __init__(self, unit: object, *, message: str | None = None) -> None:
        self.unit_name = str(unit)
        super().__init__(
            message or f"Unsupported unit: {self.unit_name}",
            context={"unit": self.unit_name},
        )


class InvalidFieldValueError(TemporalError):
    """A value lies outside the declared or instance range of a field."""

    default_code = "CHF-VALUE-001"
    default_title = "Invalid field value"

    def __init__(
        self,
        message: str,
        *,
        field: object | None = None,
        value: int | None = None,
        valid_range: ValueRange | None = None,
        code: str | None = None,
    ) -> None:
        self.field_name = str(field) if field is not None else None
        self.value = value
        self.valid_range = valid_range
        context: dict[str, Any] = {}
        if self.field_name is not None:
            context["field"] = self.field_name
        if value is not None:
            context["value"] = value
        if valid_range is not None:
            context["valid_range"] = str(valid_range)
        super().__init__(message, code=code, context=context)


class ArithmeticOverflowError(TemporalError, ArithmeticError):
    """Integer or date arithmetic left its representable range."""

    default_code = "CHF-MATH-001"
    default_title = "Arithmetic overflow"


class ResolutionRejectedError(TemporalError):
    """Strict resolution rejected a date, or parsed fields conflict."""

    default_code = "CHF-RES-001"
    default_title = "Resolution rejected"

    def __init__(
        self,
        message: str,
        *,
        field: object | None = None,
        value: int | None = None,
        valid_range: ValueRange | None = None,
        code: str | None = None,
    ) -> None:
        self.field_name = str(field) if field is not None else None
        self.value = value
        self.valid_range = valid_range
        context: dict[str, Any] = {}
        if self.field_name is not None:
            context["field"] = self.field_name
        if value is not None:
            context["value"] = value
        if valid_range is not None:
            context["valid_range"] = str(valid_range)
        super().__init__(message, code=code, context=context)


# =============================================================================
# Error Codes Registry
# =============================================================================

TEMPORAL_ERROR_CODES: dict[str, str] = {
    # Configuration errors
    "CHF-CFG-001": "ValueRange bounds are not ordered",
    "CHF-CFG-002": "Minimal days in first week outside 1..7",
    "CHF-CFG-003": "Invalid settings file or environment override",
    # Field and unit errors
    "CHF-FIELD-001": "Field not supported by the temporal",
    "CHF-UNIT-001": "Unit not supported by the temporal",
    # Value errors
    "CHF-VALUE-001": "Value outside the legal range of the field",
    "CHF-VALUE-002": "Field values do not form a valid date",
    # Arithmetic errors
    "CHF-MATH-001": "Arithmetic overflow",
    # Resolution errors
    "CHF-RES-001": "Strict mode rejected the resolved date",
    "CHF-RES-002": "Conflicting field values",
    "CHF-RES-003": "Resolution did not converge",
    # Chronology errors
    "CHF-CHR-001": "Operation requires the ISO chronology",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return TEMPORAL_ERROR_CODES.get(code)
