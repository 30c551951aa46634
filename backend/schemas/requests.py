from pydantic import BaseModel, Field


class ParseTextRequest(BaseModel):
    """Request carrying resume text that was already extracted by the caller."""
    text: str = Field(..., max_length=200000)
