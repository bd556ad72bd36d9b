"""Form validation engine and built-in schemas."""

from commentboard.validation.engine import (
    Schema,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    validate,
)
from commentboard.validation.schemas import COMMENT_SCHEMA, FEEDBACK_SCHEMA

__all__ = [
    'Schema',
    'ValidationFailure',
    'ValidationResult',
    'ValidationSuccess',
    'validate',
    'COMMENT_SCHEMA',
    'FEEDBACK_SCHEMA',
]
