"""FastAPI application for the comment board."""

from .models import (
    CommittedResponse,
    PersistenceErrorResponse,
    ValidationErrorResponse,
)
from .endpoints import app, create_app

__all__ = [
    "CommittedResponse",
    "PersistenceErrorResponse",
    "ValidationErrorResponse",
    "app",
    "create_app",
]
