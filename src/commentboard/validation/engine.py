"""Schema-driven validation of raw form values.

Validation never raises for bad input: the outcome is returned as a
ValidationSuccess or a ValidationFailure carrying per-field messages and
the values exactly as submitted.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Union


class Constraint(Protocol):
    """Anything that can check a single field value."""

    def check(self, value: str) -> Optional[str]:
        ...


Schema = Mapping[str, Sequence[Constraint]]


@dataclass(frozen=True)
class ValidationSuccess:
    """All fields passed; `data` holds trimmed values keyed by field."""
    data: Dict[str, str]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    """At least one field failed."""
    field_errors: Dict[str, List[str]]
    original_values: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def validate(schema: Schema, raw_values: Mapping[str, Optional[str]]) -> ValidationResult:
    """
    Validate raw field values against a schema.

    Every constraint of every field is evaluated, so a field can report
    several messages at once. Fields missing from raw_values are checked
    as empty strings.

    Args:
        schema: Field name to list of constraints
        raw_values: Submitted values keyed by field name

    Returns:
        ValidationSuccess with normalized data, or ValidationFailure with
        field errors and the raw values echoed back verbatim
    """
    field_errors: Dict[str, List[str]] = {}
    normalized: Dict[str, str] = {}

    for name, constraints in schema.items():
        value = raw_values.get(name)
        if value is None:
            value = ""

        messages = []
        for constraint in constraints:
            message = constraint.check(value)
            if message is not None:
                messages.append(message)

        if messages:
            field_errors[name] = messages
        else:
            normalized[name] = value.strip()

    if field_errors:
        return ValidationFailure(
            field_errors=field_errors,
            original_values=dict(raw_values)
        )

    return ValidationSuccess(data=normalized)
