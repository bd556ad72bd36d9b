"""Pydantic models for API responses."""

from typing import Dict, List

from pydantic import BaseModel, Field


class CommittedResponse(BaseModel):
    """Write persisted and caches invalidated."""
    success: bool = True


class ValidationErrorResponse(BaseModel):
    """Submitted fields were rejected; values are echoed for redisplay."""
    errors: Dict[str, List[str]] = Field(
        ...,
        description="Messages keyed by field name"
    )
    values: Dict[str, str] = Field(
        default_factory=dict,
        description="Field values exactly as submitted"
    )


class PersistenceErrorResponse(BaseModel):
    """Input was valid but could not be stored; the client may retry."""
    success: bool = False
    reason: str


class FeedbackRecord(BaseModel):
    name: str
    email: str
    feedback: str


class HealthResponse(BaseModel):
    status: str
    comments_file: str
    feedback_file: str
    cache_open: bool
