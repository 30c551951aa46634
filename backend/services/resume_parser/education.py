"""Education extraction and education-level classification from resume text."""

import re
from typing import Optional

from .dates import ANY_RANGE_RE, YEAR, is_ongoing, resolve_year
from .models import Education
from .sections import EDUCATION_HEADERS, locate_section
from .strategies import extract_pattern


# Labeled fields; a colon is required so prose such as "Institute of
# Technology" is not read as a label
_LABEL_START = r"^[ \t]*(?:[•·●◦▪■▸*\-][ \t]*)?"

COLLEGE_LABEL_RE = re.compile(
    rf"{_LABEL_START}(?:college|school|institute|institution)(?:[ \t]+name)?[ \t]*:[ \t]*([^\n,]+)",
    re.IGNORECASE | re.MULTILINE,
)
UNIVERSITY_LABEL_RE = re.compile(
    rf"{_LABEL_START}(?:university|academy|alma[ \t]+mater)(?:[ \t]+name)?[ \t]*:[ \t]*([^\n,]+)",
    re.IGNORECASE | re.MULTILINE,
)
DEGREE_LABEL_RE = re.compile(
    rf"{_LABEL_START}(?:degree|qualification|program|programme|course|diploma)[ \t]*:[ \t]*([^\n,]+)",
    re.IGNORECASE | re.MULTILINE,
)
SPECIALIZATION_LABEL_RE = re.compile(
    rf"{_LABEL_START}(?:specialization|specialisation|major|field(?:[ \t]+of[ \t]+study)?"
    r"|concentration|subject|discipline|focus)[ \t]*:[ \t]*([^\n,]+)",
    re.IGNORECASE | re.MULTILINE,
)
GRADUATION_YEAR_RE = re.compile(
    rf"\b(?:year|graduated|graduation|completed|class[ \t]+of|completion|finished)[ \t]*:?[ \t]*({YEAR})\b",
    re.IGNORECASE,
)
CGPA_RE = re.compile(
    r"\b(?:cgpa|gpa|grade|score|percentage|marks)[ \t]*:?[ \t]*([0-9]+(?:\.[0-9]+)?%?)",
    re.IGNORECASE,
)
LOCATION_LABEL_RE = re.compile(
    rf"{_LABEL_START}(?:location|city|place|campus)[ \t]*:[ \t]*([^\n]+)",
    re.IGNORECASE | re.MULTILINE,
)
FIRST_YEAR_RE = re.compile(rf"\b({YEAR})\b")

# Degree names as written, matched case-sensitively
DEGREE_RE = re.compile(
    r"(?<![A-Za-z])("
    r"Ph\.?[ ]?D\.?|Doctorate|MBBS|MBA|PGDM|LLB|LLM|BBA|BCA|MCA|BSc|MSc"
    r"|[BM]\.?[ ]?(?:Tech|Sc|Com|Eng|E|S|A)\.?"
    r"|(?:Bachelor|Master)(?:['’]?s)?(?:[ \t]+of[ \t]+[A-Z][a-zA-Z]*(?:[ \t]+[A-Z][a-zA-Z]*)*)?"
    r")(?![A-Za-z])"
    r"(?:[ \t]*[,\-–]?[ \t]*(?:in|of)[ \t]+([^\n,(]+))?"
)
_SPECIALIZATION_END_RE = re.compile(r"[ \t]+[-–—|][ \t]*|[ \t]+(?:from|at)[ \t]+|\d")

INSTITUTION_RE = re.compile(
    r"((?:[A-Z][A-Za-z&'.\-]*[ \t]+(?:(?:of|and|the|for)[ \t]+)?)*"
    r"(?:University|College|Institute|School|Academy|Center|Centre)\b"
    r"(?:[ \t]+(?:of|for|in)[ \t]+[A-Z][A-Za-z&.']*(?:[ \t]+[A-Z][A-Za-z&.']*)*)?)"
)
_METADATA_LINE_RE = re.compile(r"degree|year|gpa|grade|score|major|field|specialization", re.IGNORECASE)

_PLACE_PIECE_RE = re.compile(r"^[A-Z][a-zA-Z.'\-]*(?:[ \t]+[A-Z][a-zA-Z.'\-]*)*$")
CITY_COUNTRY_RE = re.compile(r"\b([A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+)*[ \t]*\([A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+)*\))")
_NOT_A_PLACE_RE = re.compile(
    r"universit|college|institut|school|academy|centre|center|bachelor|master|degree|diploma"
    r"|science|engineering|technology|arts|commerce|computer|management|gpa|cgpa",
    re.IGNORECASE,
)

# Education level tiers, checked in this order
INTERMEDIATE_RE = re.compile(
    r"(?i:\b(?:high[ \t]+school|higher[ \t]+secondary|senior[ \t]+secondary|secondary[ \t]+(?:school|education)"
    r"|12th|hsc)\b)"
    # "Intermediate" as a proficiency ("Spanish - Intermediate") does not count
    r"|(?im:^(?![^\n]*[-–:(,][ \t]*intermediate)[^\n]*\bintermediate\b)"
)
GRADUATE_RE = re.compile(
    r"(?i:\b(?:undergraduate|bachelor['’]?s?|(?<!post[ -])(?<!post)graduate)\b)"
    r"|\b(?:B\.?(?:Tech|TECH|Sc|SC|Com|COM|Eng)|B\.(?:E|A|S)|BE|BA|BCA|BBA)\.?(?![A-Za-z])"
)
POST_GRADUATE_RE = re.compile(
    r"(?i:\b(?:post[ -]?graduate|(?<!scrum )master['’]?s?|doctorate|ph\.?[ ]?d|mba|pgdm)\b)"
    r"|\b(?:M\.?(?:Tech|TECH|Sc|SC|Com|COM|Eng|Phil)|M\.(?:E|A|S)|MCA)\.?(?![A-Za-z])"
)
EDUCATION_LEVELS = [
    ("Intermediate", INTERMEDIATE_RE),
    ("Graduate", GRADUATE_RE),
    ("Post Graduate", POST_GRADUATE_RE),
]


def _clean_specialization(value: str) -> str:
    return _SPECIALIZATION_END_RE.split(value, maxsplit=1)[0].strip(" \t.,;:")


def _extract_location(section: str) -> str:
    location = extract_pattern(section, LOCATION_LABEL_RE)
    if location:
        return location

    for line in section.splitlines():
        pieces = [p.strip() for p in re.split(r"[,|]", line)]
        if ":" in line or len(pieces) > 4:
            continue
        for first, second in zip(pieces, pieces[1:]):
            candidate = f"{first}, {second}"
            if (
                _PLACE_PIECE_RE.match(first)
                and _PLACE_PIECE_RE.match(second)
                and not _NOT_A_PLACE_RE.search(candidate)
            ):
                return candidate
        for m in CITY_COUNTRY_RE.finditer(line):
            if not _NOT_A_PLACE_RE.search(m.group(1)):
                return m.group(1).strip()
    return ""


def _find_institution(section: str) -> Optional[str]:
    for line in section.splitlines():
        if _METADATA_LINE_RE.search(line):
            continue
        match = INSTITUTION_RE.search(line)
        if match:
            return match.group(1).strip()
    return None


def extract_education(text: str, current_year: Optional[int] = None) -> Education:
    """Extract the first education entry from the education section.

    Labeled fields are read first. A ``YYYY - YYYY|present`` range fills the
    start/end years, "present" resolving to ``current_year``. Degree,
    graduation year and institution then fall back to unlabeled patterns.

    Args:
        text: Raw resume text
        current_year: Year used for open-ended ranges (defaults to this year)

    Returns:
        Education object; all fields empty when there is no education section
    """
    education = Education()
    section = locate_section(text, EDUCATION_HEADERS)
    if not section:
        return education

    education.college_name = extract_pattern(section, COLLEGE_LABEL_RE)
    education.university_name = extract_pattern(section, UNIVERSITY_LABEL_RE)
    education.degree = extract_pattern(section, DEGREE_LABEL_RE)
    education.specialization = extract_pattern(section, SPECIALIZATION_LABEL_RE)
    education.graduation_year = extract_pattern(section, GRADUATION_YEAR_RE)
    education.cgpa = extract_pattern(section, CGPA_RE)

    years = ANY_RANGE_RE.search(section)
    if years:
        education.start_year = years.group(1)
        end = years.group(2)
        education.end_year = str(resolve_year(current_year)) if is_ongoing(end) else end
        if not education.graduation_year:
            education.graduation_year = education.end_year

    education.location = _extract_location(section)

    if not education.degree:
        match = DEGREE_RE.search(section)
        if match:
            education.degree = match.group(1).strip()
            if match.group(2) and not education.specialization:
                education.specialization = _clean_specialization(match.group(2))

    if not education.graduation_year:
        education.graduation_year = extract_pattern(section, FIRST_YEAR_RE)

    if not education.university_name and not education.college_name:
        institution = _find_institution(section)
        if institution:
            if "University" in institution:
                education.university_name = institution
            else:
                education.college_name = institution

    if not education.university_name and education.college_name:
        education.university_name = education.college_name

    return education


def _first_level(text: str) -> str:
    for level, pattern in EDUCATION_LEVELS:
        if pattern.search(text):
            return level
    return ""


def classify_education_level(text: str) -> str:
    """Classify highest-listed education as Intermediate, Graduate or Post Graduate.

    Tiers are tested in that fixed order against the whole document, then
    against the education section; the first tier that matches wins.
    """
    if not text:
        return ""
    level = _first_level(text)
    if level:
        return level
    section = locate_section(text, EDUCATION_HEADERS)
    return _first_level(section) if section else ""

