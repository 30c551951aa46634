"""Shared helpers for the ordered pattern-strategy extractors.

Each field extractor is written as a list of small ``text -> value`` functions
tried in priority order; the first one returning a non-empty value wins.
"""

import re
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar


T = TypeVar("T")

Strategy = Callable[[str], Optional[T]]

# Bullet markers seen in PDF/DOCX extractions
BULLET_CHARS = "•·●◦▪■▸*-"
BULLET_LINE_RE = re.compile(r"(?m)^[ \t]*[•·●◦▪■▸*\-][ \t]*(.+?)[ \t]*$")
_LEADING_BULLET_RE = re.compile(r"^[ \t]*[•·●◦▪■▸*\-][ \t]*")


def first_match(text: str, strategies: Sequence[Strategy]) -> Optional[T]:
    """Run strategies in order and return the first non-empty result."""
    for strategy in strategies:
        value = strategy(text)
        if value:
            return value
    return None


def extract_pattern(text: str, pattern: re.Pattern) -> str:
    """Return the stripped first capture group of ``pattern`` or ""."""
    match = pattern.search(text)
    if match and match.group(1):
        return match.group(1).strip()
    return ""


def unique(items: Iterable[str]) -> List[str]:
    """De-dupe (case-sensitive) while preserving order, dropping blanks."""
    seen = set()
    result: List[str] = []
    for item in items:
        item = item.strip()
        if item and item not in seen:
            seen.add(item)
            result.append(item)
    return result


def is_bullet_line(line: str) -> bool:
    return bool(_LEADING_BULLET_RE.match(line)) and bool(line.strip(BULLET_CHARS + " \t"))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker and surrounding whitespace."""
    return _LEADING_BULLET_RE.sub("", line, count=1).strip()


def bullet_items(text: str) -> List[str]:
    """Contents of every bulleted line in ``text``."""
    items = []
    for m in BULLET_LINE_RE.finditer(text):
        item = m.group(1).strip()
        # skip rule lines such as "-----"
        if item.strip(BULLET_CHARS + "=_ \t"):
            items.append(item)
    return items


def non_empty_lines(text: str) -> List[str]:
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


def split_blocks(text: str) -> List[str]:
    """Split text into blank-line delimited blocks."""
    return [b.strip("\n") for b in re.split(r"\n[ \t]*\n", text) if b.strip()]


def normalize_newlines(text: str) -> str:
    """Convert Windows and old Mac line breaks to "\\n"."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
