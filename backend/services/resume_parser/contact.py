"""Identity and contact extraction (name, email, phone, address) from resume text."""

import re
from typing import Optional

from .models import PersonName
from .sections import COMMON_HEADERS, CONTACT_HEADERS, locate_section
from .strategies import extract_pattern, first_match, non_empty_lines


_NAME_WORD = r"[A-Z][a-zA-Z'.\-]*"

LABELED_NAME_RE = re.compile(
    r"(?:^[ \t]*(?i:full[ \t]+)?(?i:name)[ \t]*:|\b(?i:resume|cv)[ \t]+(?i:of))"
    rf"[ \t]*({_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{0,3}})",
    re.MULTILINE,
)
NAME_LINE_RE = re.compile(rf"^{_NAME_WORD}(?:[ \t]+{_NAME_WORD}){{1,3}}$")
FALLBACK_NAME_RE = re.compile(r"([A-Z][a-zA-Z'\-]+)[ \t]+(?:([A-Z][a-zA-Z'\-]+)[ \t]+)?([A-Z][a-zA-Z'\-]+)")

# Only the first few lines are considered for a standalone name
NAME_LINE_WINDOW = 5

_NOT_NAMES = {"curriculum vitae", "resume", "résumé", "cv"}

_EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
_EMAIL_RE = re.compile(_EMAIL_PATTERN)

_PHONE_PATTERN = (
    r"(?:(?:\+?\d{1,3}[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}"
    r"|(?:\+?\d{1,3}[-. ]?)?\d{5}[-. ]?\d{5})"
)
LABELED_PHONE_RE = re.compile(
    r"\b(?:phone|mobile|cell|contact|tel(?:ephone)?)(?:[ \t]*(?:no\.?|number|#))?[ \t]*[:\-]?[ \t]*"
    rf"({_PHONE_PATTERN})(?!\d)",
    re.IGNORECASE,
)
BARE_PHONE_RE = re.compile(rf"(?<![\w+])({_PHONE_PATTERN})(?!\d)")

LABELED_ADDRESS_RE = re.compile(r"\b(?:address|location|residence)[ \t]*:?[ \t]*([^\n]+)", re.IGNORECASE)
CITY_STATE_ZIP_RE = re.compile(r"([A-Za-z][A-Za-z \t]*,[ \t]*[A-Z]{2}[ \t]*\d{5}(?:-\d{4})?)")


def split_full_name(full_name: str) -> PersonName:
    """Split a full name on whitespace.

    One token is a first name, two are first and last, and anything longer
    puts the interior tokens into the middle name.
    """
    parts = full_name.split()
    if not parts:
        return PersonName()
    if len(parts) == 1:
        return PersonName(first_name=parts[0])
    if len(parts) == 2:
        return PersonName(first_name=parts[0], last_name=parts[1])
    return PersonName(
        first_name=parts[0],
        middle_name=" ".join(parts[1:-1]),
        last_name=parts[-1],
    )


def _title_case_if_caps(name: str) -> str:
    words = name.split()
    if words and all(w.isupper() for w in words if any(ch.isalpha() for ch in w)):
        return " ".join(w.capitalize() for w in words)
    return " ".join(words)


def _is_name_line(line: str) -> bool:
    if "@" in line or any(ch.isdigit() for ch in line):
        return False
    lowered = line.lower().rstrip(":")
    if lowered in _NOT_NAMES or lowered in COMMON_HEADERS:
        return False
    return bool(NAME_LINE_RE.match(line))


def _labeled_name(text: str) -> Optional[str]:
    name = extract_pattern(text, LABELED_NAME_RE)
    return _title_case_if_caps(name) if name else None


def _leading_name_line(text: str) -> Optional[str]:
    for line in non_empty_lines(text)[:NAME_LINE_WINDOW]:
        if _is_name_line(line):
            return _title_case_if_caps(line)
    return None


def _contact_section_name(text: str) -> Optional[str]:
    section = locate_section(text, CONTACT_HEADERS)
    for line in non_empty_lines(section):
        if _is_name_line(line):
            return _title_case_if_caps(line)
    return None


def _fallback_name(text: str) -> Optional[str]:
    for match in FALLBACK_NAME_RE.finditer(text):
        candidate = " ".join(part for part in match.groups() if part)
        lowered = candidate.lower()
        if lowered in _NOT_NAMES or lowered in COMMON_HEADERS:
            continue
        return candidate
    return None


def extract_full_name(text: str) -> str:
    """Detect the candidate's full name.

    Tries, in order: a "Name:" / "Resume of" label, a capitalized 2-4 word
    line among the first lines, a name-shaped line in the contact section,
    then any run of two or three capitalized words. ALL-CAPS names are
    returned in Title Case.

    Args:
        text: Raw resume text

    Returns:
        Full name or empty string
    """
    if not text:
        return ""
    return first_match(text, [
        _labeled_name,
        _leading_name_line,
        _contact_section_name,
        _fallback_name,
    ]) or ""


def extract_name(text: str) -> PersonName:
    """Extract the candidate name split into first/middle/last."""
    return split_full_name(extract_full_name(text))


def extract_email(text: str) -> str:
    """Extract the first email address in the text."""
    if not text:
        return ""
    match = _EMAIL_RE.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    """Extract a phone number, preferring one introduced by a phone label.

    The number is returned as written; no digit normalization is applied.
    """
    if not text:
        return ""
    return first_match(text, [
        lambda t: extract_pattern(t, LABELED_PHONE_RE),
        lambda t: extract_pattern(t, BARE_PHONE_RE),
    ]) or ""


def extract_address(text: str) -> str:
    """Extract a postal address from the contact/personal section only."""
    section = locate_section(text, CONTACT_HEADERS)
    if not section:
        return ""
    return first_match(section, [
        lambda s: extract_pattern(s, LABELED_ADDRESS_RE),
        lambda s: extract_pattern(s, CITY_STATE_ZIP_RE),
    ]) or ""
