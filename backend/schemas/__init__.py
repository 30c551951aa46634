from schemas.requests import ParseTextRequest
from schemas.responses import ParseResumeResponse, ErrorResponse

__all__ = [
    "ParseTextRequest",
    "ParseResumeResponse",
    "ErrorResponse",
]
