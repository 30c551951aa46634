from pydantic import BaseModel, Field
from typing import Optional, Any
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    extra: Optional[dict[str, Any]] = None


class ParseResumeResponse(BaseModel):
    """Response after parsing a resume file or resume text.

    ``resume_data`` holds the camelCase profile fields (firstName, email,
    projects, workExperiences, experience, ...).
    """
    resume_data: dict[str, Any]
    parsed_at: datetime = Field(default_factory=_utcnow)
