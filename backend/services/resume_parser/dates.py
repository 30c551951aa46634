"""Date range parsing and experience-years calculation."""

import re
from datetime import datetime
from typing import Optional

from .models import DateRange
from .sections import EXPERIENCE_HEADERS, locate_section


MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
YEAR = r"(?:19|20)\d{2}"
ONGOING = r"(?:present|current|now|till date|to date|ongoing)"
SEP = r"[ \t]*(?:-|–|—|to)[ \t]*"

YEAR_RANGE_RE = re.compile(rf"(?<![\d/])({YEAR}){SEP}({YEAR}|{ONGOING})\b", re.IGNORECASE)
MONTH_RANGE_RE = re.compile(
    rf"\b({MONTH}\.?,?[ \t]+{YEAR}){SEP}({MONTH}\.?,?[ \t]+{YEAR}|{YEAR}|{ONGOING})\b",
    re.IGNORECASE,
)
NUMERIC_RANGE_RE = re.compile(
    rf"(?<!\d)(\d{{1,2}}/{YEAR}){SEP}(\d{{1,2}}/{YEAR}|{ONGOING})\b",
    re.IGNORECASE,
)

# Any of the three shapes above; used when summing years across a section
ANY_RANGE_RE = re.compile(
    rf"(?:{MONTH}\.?,?[ \t]+|\d{{1,2}}/)?({YEAR}){SEP}(?:{MONTH}\.?,?[ \t]+|\d{{1,2}}/)?({YEAR}|{ONGOING})\b",
    re.IGNORECASE,
)

EXPLICIT_YEARS_RE = re.compile(
    r"(\d+)\+?[ \t]*(?:years?|yrs?)[ \t]*(?:of[ \t]+)?(?:[a-z-]+[ \t]+)?experience",
    re.IGNORECASE,
)

_ONGOING_RE = re.compile(rf"^{ONGOING}$", re.IGNORECASE)
_MONTH_BEFORE_RE = re.compile(rf"\b{MONTH}\.?,?[ \t]+$", re.IGNORECASE)


def resolve_year(current_year: Optional[int] = None) -> int:
    """Year that "present" stands for."""
    return current_year if current_year is not None else datetime.now().year


def is_ongoing(value: str) -> bool:
    return bool(_ONGOING_RE.match(value.strip()))


def normalize_end(value: str) -> str:
    """Map present/current/now to the literal "Present"."""
    return "Present" if is_ongoing(value) else value.strip()


def _plain_year_range(text: str) -> Optional[re.Match]:
    # "Jan 2020 - Present" belongs to the month shape, not this one
    for match in YEAR_RANGE_RE.finditer(text):
        if not _MONTH_BEFORE_RE.search(text[:match.start()]):
            return match
    return None


def extract_date_range(text: str) -> DateRange:
    """Find the first date range in ``text``.

    Shapes are tried in order: ``YYYY - YYYY``, ``Month YYYY - Month YYYY``
    and ``MM/YYYY - MM/YYYY``; each accepts present/current/now as its end,
    reported as "Present". Returns an empty DateRange when nothing matches.
    """
    if not text:
        return DateRange()

    for finder in (
        _plain_year_range,
        MONTH_RANGE_RE.search,
        NUMERIC_RANGE_RE.search,
    ):
        match = finder(text)
        if match:
            return DateRange(
                start_date=match.group(1).strip(),
                end_date=normalize_end(match.group(2)),
            )
    return DateRange()


def calculate_experience(text: str, current_year: Optional[int] = None) -> int:
    """Total years of experience.

    An explicit "N years of experience" phrase wins. Otherwise every date
    range in the work-experience section is summed as ``end - start``, with
    open ranges ending in ``current_year`` (this year when not given).
    Reversed ranges are ignored, so the result is never negative.
    """
    if not text:
        return 0

    match = EXPLICIT_YEARS_RE.search(text)
    if match:
        return int(match.group(1))

    section = locate_section(text, EXPERIENCE_HEADERS)
    if not section:
        return 0

    now = resolve_year(current_year)
    total = 0
    for match in ANY_RANGE_RE.finditer(section):
        start = int(match.group(1))
        end = now if is_ongoing(match.group(2)) else int(match.group(2))
        if end >= start:
            total += end - start
    return total
