"""Section location: find the span of resume text that belongs to a header.

A section starts right after the first header (tried synonym by synonym, shape
by shape) and runs until the nearest following header from COMMON_HEADERS, or
to the end of the document.
"""

import logging
import re
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from .strategies import normalize_newlines


logger = logging.getLogger(__name__)


# Sections shorter than this are treated as false positives while more than
# one synonym is still left to try
MIN_SECTION_LENGTH = 10

# Headers that may terminate any section
COMMON_HEADERS = [
    "education", "experience", "skills", "projects", "certifications",
    "achievements", "publications", "references", "interests", "summary",
    "objective", "profile", "contact", "personal", "work history",
    "employment", "qualifications", "languages", "awards", "volunteer",
    "research", "teaching", "grants", "funding", "conferences", "presentations",
    "professional activities", "memberships", "affiliations", "service",
    "honors", "distinctions", "extracurricular", "activities", "leadership",
    "technical skills", "soft skills", "coursework", "training", "workshops",
    # Multi-word forms of the headers above
    "work experience", "professional experience", "employment history",
    "research experience", "teaching experience", "career history",
    "personal projects", "academic projects", "key projects",
    "key skills", "core competencies", "professional skills", "interpersonal skills",
    "language skills", "professional summary", "career objective", "about me",
    "contact information", "personal information", "personal details",
    "academic background", "academic qualifications", "educational qualifications",
    "certificates", "credentials", "licenses and certifications",
    "honors and awards", "relevant coursework", "hobbies",
]

# Synonym lists per section family, more specific phrases first
CONTACT_HEADERS = [
    "contact information", "contact details", "contact",
    "personal information", "personal details",
]
SUMMARY_HEADERS = [
    "professional summary", "career objective", "about me", "summary", "profile", "objective",
]
EDUCATION_HEADERS = [
    "education", "educational qualifications", "academic qualifications",
    "academic background", "academic history", "academic record", "academic profile",
]
SKILLS_HEADERS = [
    "skills", "key skills", "core competencies", "professional skills",
    "technical skills", "expertise", "proficiencies", "qualifications",
]
TECHNICAL_SKILLS_HEADERS = [
    "technical skills", "technical expertise", "technical proficiencies",
    "technical competencies", "development skills", "computer skills",
    "programming languages", "technologies", "tools", "software", "frameworks",
]
SOFT_SKILLS_HEADERS = [
    "soft skills", "interpersonal skills", "personal skills", "transferable skills",
    "communication skills", "personal attributes", "personal qualities",
    "key competencies", "strengths", "attributes",
]
LANGUAGE_HEADERS = [
    "languages", "language skills", "language proficiency", "linguistic skills",
    "foreign languages", "spoken languages", "language competencies",
]
PROJECT_HEADERS = [
    "projects", "personal projects", "academic projects", "key projects",
    "notable projects", "selected projects", "software projects", "research projects",
    "work samples", "portfolio",
]
EXPERIENCE_HEADERS = [
    "work experience", "professional experience", "employment history", "work history",
    "career history", "employment record", "job history", "industry experience",
    "professional background", "professional appointments", "academic positions",
    "research experience", "teaching experience", "experience", "employment",
]
CERTIFICATION_HEADERS = ["certifications", "certificates", "credentials", "licenses and certifications"]

_GAP = r"[ \t]+"


def _header_regex(header: str, upper: bool = False) -> str:
    words = header.upper().split() if upper else header.split()
    return _GAP.join(re.escape(word) for word in words)


@lru_cache(maxsize=None)
def header_patterns(header: str) -> Tuple[Tuple[str, re.Pattern], ...]:
    """Header shapes for ``header`` in priority order.

    Every pattern ends where the section content begins: right after the
    colon for "Header:" lines, at the end of the header line otherwise.
    """
    h = _header_regex(header)
    caps = _header_regex(header, upper=True)
    flags = re.IGNORECASE | re.MULTILINE
    return (
        ("colon", re.compile(rf"^[ \t]*{h}[ \t]*:[ \t]*", flags)),
        ("underlined", re.compile(rf"^[ \t]*{h}\b[^\n]*\n[ \t]*[-=_]{{3,}}[ \t]*$", flags)),
        ("all-caps", re.compile(rf"^[ \t]*{caps}\b[^\n]*$", re.MULTILINE)),
        ("bracketed", re.compile(rf"^[ \t]*(?:\[[ \t]*{h}[ \t]*\]|\([ \t]*{h}[ \t]*\))[^\n]*$", flags)),
        ("markup", re.compile(rf"\\(?:sub)*section\*?\{{[ \t]*{h}[ \t]*\}}[^\n]*$", flags)),
        ("numbered", re.compile(rf"^[ \t]*\d+[.)][ \t]*{h}\b[^\n]*$", flags)),
        ("bare", re.compile(rf"^[ \t]*{h}[ \t]*:?[ \t]*$", flags)),
    )


def find_header(text: str, header: str, pos: int = 0) -> Optional[Tuple[str, re.Match]]:
    """Return (shape, match) for the first header shape found at or after ``pos``."""
    for shape, pattern in header_patterns(header):
        match = pattern.search(text, pos)
        if match:
            return shape, match
    return None


def _section_end(text: str, start: int, header: str) -> int:
    """Offset of the nearest other common header after ``start``."""
    end = len(text)
    current = header.lower()
    for other in COMMON_HEADERS:
        if other == current:
            continue
        for _, pattern in header_patterns(other):
            match = pattern.search(text, start)
            if match and match.start() < end:
                end = match.start()
    return end


def locate_section(text: str, header_synonyms: Sequence[str]) -> str:
    """Find the text of the section introduced by any of ``header_synonyms``.

    Synonyms are tried in the order given, so callers should list the more
    specific ones first (e.g. "technical skills" before "skills").

    Args:
        text: Full resume text
        header_synonyms: Alternative header phrases for one logical section

    Returns:
        Section content without the header line, or "" if no header matched
    """
    if not text:
        return ""

    text = normalize_newlines(text)
    fallback = ""
    for index, header in enumerate(header_synonyms):
        found = find_header(text, header)
        if found is None:
            continue

        shape, match = found
        start = match.end()
        section = text[start:_section_end(text, start, header)].strip()

        untried = len(header_synonyms) - index - 1
        if len(section) < MIN_SECTION_LENGTH and untried > 1:
            logger.debug(f"Section '{header}' too short ({len(section)} chars), trying next synonym")
            fallback = fallback or section
            continue

        logger.debug(f"Section '{header}' located via {shape} header ({len(section)} chars)")
        return section

    return fallback
