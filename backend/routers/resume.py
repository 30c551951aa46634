from fastapi import APIRouter, Depends, UploadFile, File, HTTPException
import logging
import tempfile
import os

from config import Settings, get_settings
from services.resume_parser import ResumeParser, detect_file_type
from schemas.requests import ParseTextRequest
from schemas.responses import ParseResumeResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resume", tags=["Resume"])

_error_responses = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_parser(settings: Settings = Depends(get_settings)) -> ResumeParser:
    """Parser configured from application settings."""
    return ResumeParser(
        current_year=settings.reference_year,
        clean=settings.clean_extracted_text,
    )


@router.post("/parse", response_model=ParseResumeResponse, responses=_error_responses)
async def parse_resume_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
    parser: ResumeParser = Depends(get_parser),
):
    """Upload and parse a resume file.

    Accepts PDF, DOCX, or TXT files.

    Returns:
        ParseResumeResponse with the parsed resume data.
    """
    # Validate file type
    filename = file.filename or ""
    file_ext = os.path.splitext(filename)[1].lower()

    if file_ext not in settings.allowed_extensions and detect_file_type(filename, file.content_type) is None:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type. Allowed: {', '.join(settings.allowed_extensions)}",
        )

    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_size_mb} MB",
        )

    tmp_path = None
    try:
        # Save to temp file
        with tempfile.NamedTemporaryFile(delete=False, suffix=file_ext) as tmp:
            tmp.write(content)
            tmp_path = tmp.name

        profile = parser.parse_file(tmp_path, content_type=file.content_type)
        return ParseResumeResponse(resume_data=profile.to_dict())

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logger.exception(f"Failed to parse uploaded resume {filename!r}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to parse resume: {str(e)}",
        )

    finally:
        # Cleanup temp file
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)


@router.post("/parse-text", response_model=ParseResumeResponse, responses=_error_responses)
async def parse_resume_text(
    request: ParseTextRequest,
    parser: ResumeParser = Depends(get_parser),
):
    """Parse resume text that the caller already extracted.

    Returns:
        ParseResumeResponse with the parsed resume data.
    """
    try:
        profile = parser.parse_text(request.text)
    except Exception as e:
        logger.exception("Failed to parse resume text")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to parse resume: {str(e)}",
        )
    return ParseResumeResponse(resume_data=profile.to_dict())
