"""Certifications extraction from resume text."""

import re

from .sections import CERTIFICATION_HEADERS, locate_section
from .strategies import BULLET_CHARS, non_empty_lines, strip_bullet


_HEADER_WORDS_RE = re.compile(r"\b(?:certifications|certificates|credentials)\b[ \t]*:?", re.IGNORECASE)


def extract_certifications(text: str) -> str:
    """Extract certifications, one per line, from the certifications section."""
    section = locate_section(text, CERTIFICATION_HEADERS)
    if not section:
        return ""

    items = []
    for line in non_empty_lines(_HEADER_WORDS_RE.sub("", section)):
        item = strip_bullet(line)
        if item.strip(BULLET_CHARS + "=_ \t"):
            items.append(item)
    return "\n".join(items)
