"""Skills, technical skills, soft skills and languages extraction from resume text."""

import re
from typing import Iterable, List

from .sections import (
    LANGUAGE_HEADERS,
    SKILLS_HEADERS,
    SOFT_SKILLS_HEADERS,
    SUMMARY_HEADERS,
    TECHNICAL_SKILLS_HEADERS,
    locate_section,
)
from .strategies import BULLET_CHARS, bullet_items, is_bullet_line, non_empty_lines, strip_bullet, unique


# Items longer than this are sentences, not list entries
MAX_ITEM_LENGTH = 50
MAX_TECH_LINE_LENGTH = 100
MAX_TECH_KEYWORDS = 20

# Known technology terms, scanned for when no technical skills section exists.
# Short ambiguous tokens (go, js, ts, ai, ml) are left out on purpose.
TECH_KEYWORDS = [
    "java", "python", "javascript", "typescript", "c++", "c#", "ruby", "php", "swift",
    "kotlin", "rust", "golang", "scala", "html", "css", "sql", "nosql", "react", "angular",
    "vue", "node.js", "node", "express", "django", "flask", "fastapi", "spring", "docker",
    "kubernetes", "aws", "azure", "gcp", "git", "github", "gitlab", "bitbucket", "jira",
    "agile", "scrum", "machine learning", "deep learning", "data science", "blockchain",
    "tensorflow", "pytorch", "pandas", "numpy", "mongodb", "postgresql", "mysql", "redis",
    "graphql", "linux",
]

SOFT_SKILL_PHRASES = [
    "communication", "teamwork", "leadership", "problem solving", "critical thinking",
    "adaptability", "flexibility", "time management", "organization", "creativity",
    "interpersonal", "negotiation", "conflict resolution", "decision making",
    "emotional intelligence", "attention to detail", "analytical", "presentation",
    "public speaking", "writing", "collaboration", "team player", "self-motivated",
    "proactive", "initiative", "multitasking", "planning", "prioritization",
    "customer service", "client relations",
]

COMMON_LANGUAGES = [
    "English", "Spanish", "French", "German", "Chinese", "Mandarin", "Japanese", "Arabic",
    "Russian", "Portuguese", "Italian", "Hindi", "Korean", "Bengali", "Tamil", "Telugu",
    "Urdu", "Dutch",
]

# "Frameworks: React, Vue" style lines
CATEGORY_RE = re.compile(r"^([A-Za-z][A-Za-z0-9 &/+#.\-]{0,40}?)[ \t]*:[ \t]*(.+)$")
LABEL_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z &/+.\-]{0,30}:[ \t]*")
PROFICIENCY_RE = re.compile(
    r"^([A-Za-z][\w+#. ]*?)[ \t]*[-–:(][ \t]*"
    r"(beginner|intermediate|advanced|expert|proficient|fluent|native|basic|working knowledge|professional)\)?$",
    re.IGNORECASE,
)

CEFR_RE = re.compile(
    r"^([A-Za-z][A-Za-z ]*?)[ \t]*(?:[-:–(][ \t]*)?(?:CEFR[ \t]*)?\(?(A1|A2|B1|B2|C1|C2)\)?$",
    re.IGNORECASE,
)
LANGUAGE_LEVEL_RE = re.compile(
    r"^([A-Za-z][A-Za-z ]*?)[ \t]*(?:[-:–(][ \t]*)?"
    r"(native|fluent|proficient|advanced|intermediate|beginner|basic|elementary"
    r"|professional working|professional|working|limited|conversational|bilingual|mother tongue)"
    r"(?:[ \t]+(?:proficiency|speaker|level))?\)?$",
    re.IGNORECASE,
)

_SPLIT_RE = re.compile(r"[,;]")


def _is_rule(line: str) -> bool:
    return not line.strip(BULLET_CHARS + "=_ \t")


def _pieces(line: str) -> List[str]:
    return [p.strip() for p in _SPLIT_RE.split(line) if p.strip()]


def _list_items(section: str, skip_word: str) -> List[str]:
    """Bulleted entries, then comma-separated runs, then short bare lines."""
    items = [item for item in bullet_items(section) if "," not in item]

    for line in non_empty_lines(section):
        line = LABEL_PREFIX_RE.sub("", strip_bullet(line))
        if "," in line:
            items.extend(p for p in _pieces(line) if len(p) < MAX_ITEM_LENGTH)

    for line in non_empty_lines(section):
        if is_bullet_line(line) or _is_rule(line):
            continue
        line = LABEL_PREFIX_RE.sub("", line).strip()
        if line and "," not in line and skip_word not in line.lower() and len(line) < MAX_ITEM_LENGTH:
            items.append(line)

    return unique(items)


def _scan_vocabulary(text: str, vocabulary: Iterable[str]) -> List[str]:
    """Vocabulary entries present in ``text``, in vocabulary order."""
    found = []
    for phrase in vocabulary:
        if re.search(rf"(?<![\w+#]){re.escape(phrase)}(?![\w+#])", text, re.IGNORECASE):
            found.append(phrase)
    return found


def _scan_tech_keywords(text: str) -> List[str]:
    """Technology keywords in order of first appearance, lowercased."""
    positions = []
    for keyword in TECH_KEYWORDS:
        match = re.search(rf"(?<![\w+#.]){re.escape(keyword)}(?![\w+#]|\.\w)", text, re.IGNORECASE)
        if match:
            positions.append((match.start(), keyword))
    positions.sort()
    return [keyword for _, keyword in positions][:MAX_TECH_KEYWORDS]


def extract_skills(text: str) -> str:
    """Extract the generic skills list as one comma-joined string."""
    section = locate_section(text, SKILLS_HEADERS)
    if not section:
        return ""
    return ", ".join(_list_items(section, skip_word="skill"))


def _technical_items(section: str) -> List[str]:
    items: List[str] = []
    category = ""

    for raw in section.splitlines():
        line = strip_bullet(raw)
        if not line or _is_rule(line) or len(line) >= MAX_TECH_LINE_LENGTH:
            continue

        # Category header on its own line; its list follows on the next line
        if line.endswith(":"):
            category = line[:-1].strip()
            continue

        proficiency = PROFICIENCY_RE.match(line)
        if proficiency:
            items.append(f"{proficiency.group(1).strip()} - {proficiency.group(2)}")
            category = ""
            continue

        grouped = CATEGORY_RE.match(line)
        if grouped:
            items.append(f"{grouped.group(1).strip()}: {', '.join(_pieces(grouped.group(2)))}")
        elif category:
            items.append(f"{category}: {', '.join(_pieces(line))}")
        else:
            items.extend(_pieces(line))
        category = ""

    return unique(items)


def extract_technical_skills(text: str) -> str:
    """Extract technical skills, one entry per line.

    Inside a technical section, entries are kept as "Category: a, b" groups,
    "Skill - Level" pairs or single items. Without a section (or when it
    yields nothing) the whole text is scanned for known technology keywords.

    Args:
        text: Resume text, ideally with the candidate name removed

    Returns:
        Newline-joined, de-duplicated entries
    """
    section = locate_section(text, TECHNICAL_SKILLS_HEADERS)
    items = _technical_items(section) if section else []
    if not items:
        items = _scan_tech_keywords(text)
    return "\n".join(items)


def extract_soft_skills(text: str) -> str:
    """Extract soft skills as a comma-joined string.

    Uses the soft-skills section's list when there is one; otherwise the
    summary/profile section (or the whole text) is scanned for common
    soft-skill phrases.
    """
    section = locate_section(text, SOFT_SKILLS_HEADERS)
    if section:
        items = _list_items(section, skip_word="skill")
        if not items:
            items = _scan_vocabulary(section, SOFT_SKILL_PHRASES)
        return ", ".join(items)

    source = locate_section(text, SUMMARY_HEADERS) or text
    return ", ".join(_scan_vocabulary(source, SOFT_SKILL_PHRASES))


def _language_entry(piece: str) -> str:
    cefr = CEFR_RE.match(piece)
    if cefr:
        return f"{cefr.group(1).strip()} - {cefr.group(2).upper()}"
    level = LANGUAGE_LEVEL_RE.match(piece)
    if level:
        return f"{level.group(1).strip()} - {level.group(2).capitalize()}"
    if len(piece) < MAX_ITEM_LENGTH and "language" not in piece.lower():
        return piece
    return ""


def extract_languages(text: str) -> str:
    """Extract spoken languages, with "Language - Level" when a level is given."""
    items: List[str] = []
    section = locate_section(text, LANGUAGE_HEADERS)
    if section:
        for line in non_empty_lines(section):
            if _is_rule(line):
                continue
            for piece in _pieces(strip_bullet(line)):
                entry = _language_entry(piece)
                if entry:
                    items.append(entry)

    if not items:
        items = _scan_vocabulary(text, COMMON_LANGUAGES)

    return ", ".join(unique(items))
