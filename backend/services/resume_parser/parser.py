"""Main resume parser facade with unified API."""

import re
import logging
from typing import Any, Dict, Optional

from .models import ParsedProfile
from .contact import extract_address, extract_email, extract_full_name, extract_phone, split_full_name
from .links import extract_github_url, extract_linkedin_url, extract_portfolio_url
from .education import classify_education_level, extract_education
from .skills import extract_languages, extract_skills, extract_soft_skills, extract_technical_skills
from .projects import extract_projects
from .experience import extract_work_experience
from .certifications import extract_certifications
from .dates import calculate_experience
from .readers import extract_text
from .sections import COMMON_HEADERS
from .strategies import normalize_newlines


logger = logging.getLogger(__name__)


class ResumeParser:
    """Heuristic resume parser turning raw resume text into a ParsedProfile.

    Every extractor is independent and best-effort: a field that cannot be
    found is left at its default instead of failing the parse.

    Usage:
        parser = ResumeParser()
        profile = parser.parse_file("resume.pdf")
        print(profile.email)
        print(profile.to_dict()["workExperiences"])
    """

    def __init__(self, current_year: Optional[int] = None, clean: bool = True):
        """
        Args:
            current_year: Year that "Present" resolves to; defaults to the
                calendar year at parse time
            clean: Whether file text is cleaned of extraction artifacts
        """
        self.current_year = current_year
        self.clean = clean

    def parse_file(self, file_path: str, content_type: Optional[str] = None) -> ParsedProfile:
        """Parse a resume file and extract structured data.

        Args:
            file_path: Path to the resume file (PDF, DOCX, or TXT)
            content_type: Optional MIME type of the upload

        Returns:
            ParsedProfile with all extracted information

        Raises:
            ValueError: If file type is not supported
        """
        text = extract_text(file_path, content_type=content_type, clean=self.clean)
        return self.parse_text(text)

    def parse_text(self, text: str) -> ParsedProfile:
        """Parse resume text and extract structured data.

        Args:
            text: Raw resume text

        Returns:
            ParsedProfile with all extracted information
        """
        if not text or not text.strip():
            return ParsedProfile()

        text = normalize_newlines(text)
        full_name = extract_full_name(text)
        body = self._without_name(text, full_name)

        profile = ParsedProfile(
            name=split_full_name(full_name),
            email=extract_email(text),
            contact_number=extract_phone(text),
            linkedin_url=extract_linkedin_url(text),
            github_url=extract_github_url(text),
            portfolio_url=extract_portfolio_url(text),
            address=extract_address(text),
            education=extract_education(text, current_year=self.current_year),
            education_level=classify_education_level(text),
            skills=extract_skills(body),
            technical_skills=extract_technical_skills(body),
            soft_skills=extract_soft_skills(body),
            languages=extract_languages(body),
            projects=extract_projects(text),
            work_experiences=extract_work_experience(text),
            certifications=extract_certifications(text),
            experience=calculate_experience(text, current_year=self.current_year),
        )

        logger.debug(
            f"Parsed resume for '{full_name}': {len(profile.projects)} project(s), "
            f"{len(profile.work_experiences)} position(s), {profile.experience} year(s) of experience"
        )
        return profile

    @staticmethod
    def _without_name(text: str, full_name: str) -> str:
        """Text with the candidate's name removed, for vocabulary scans.

        Header lines are kept as they are so sections still resolve.
        """
        if not full_name:
            return text
        name_re = re.compile(re.escape(full_name), re.IGNORECASE)
        lines = []
        for line in text.split("\n"):
            if line.strip().rstrip(":").strip().lower() not in COMMON_HEADERS:
                line = name_re.sub("", line)
            lines.append(line)
        return "\n".join(lines)


# Module-level parser instance for convenience functions
_parser = ResumeParser()


def parse_resume(file_path: str, content_type: Optional[str] = None) -> Dict[str, Any]:
    """Parse a resume file and return a dictionary.

    Args:
        file_path: Path to resume file
        content_type: Optional MIME type of the upload

    Returns:
        Dictionary with the camelCase profile fields
    """
    return _parser.parse_file(file_path, content_type=content_type).to_dict()


def parse_resume_text(text: str) -> Dict[str, Any]:
    """Parse resume text and return a dictionary.

    Args:
        text: Raw resume text

    Returns:
        Dictionary with the camelCase profile fields
    """
    return _parser.parse_text(text).to_dict()
