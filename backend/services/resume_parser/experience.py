"""Work experience extraction from resume text."""

import re
from typing import List, Optional, Set, Tuple

from .dates import ANY_RANGE_RE, extract_date_range
from .models import WorkExperience
from .sections import EXPERIENCE_HEADERS, locate_section
from .strategies import first_match, is_bullet_line, non_empty_lines, split_blocks, strip_bullet


_BULLET = r"(?:[•·●◦▪■▸*\-][ \t]*)?"
_LABEL = rf"^[ \t]*{_BULLET}"

COMPANY_LABEL_RE = re.compile(
    rf"{_LABEL}(?:company|employer|organi[sz]ation|firm|institution|university|college)(?:[ \t]+name)?"
    r"[ \t]*:[ \t]*([^\n]+)$",
    re.IGNORECASE | re.MULTILINE,
)
POSITION_LABEL_RE = re.compile(
    rf"{_LABEL}(?:position|title|role|designation|job[ \t]+title)[ \t]*:[ \t]*([^\n,]+)",
    re.IGNORECASE,
)
DURATION_LABEL_RE = re.compile(rf"{_LABEL}(?:duration|period|timeframe|dates?)[ \t]*:[ \t]*([^\n]+)", re.IGNORECASE)
LOCATION_LABEL_RE = re.compile(rf"{_LABEL}(?:location|place|city|site|address)[ \t]*:[ \t]*([^\n]+)", re.IGNORECASE)
RESPONSIBILITIES_LABEL_RE = re.compile(
    rf"{_LABEL}(?:key[ \t]+)?(?:responsibilities|duties|tasks)(?:[ \t]*:[ \t]*(.*)|[ \t]*$)",
    re.IGNORECASE,
)
ACHIEVEMENTS_LABEL_RE = re.compile(
    rf"{_LABEL}(?:key[ \t]+)?(?:achievements|accomplishments|results)(?:[ \t]*:[ \t]*(.*)|[ \t]*$)",
    re.IGNORECASE,
)
_ANY_LABEL_RE = re.compile(
    rf"{_LABEL}(?:key[ \t]+)?(?:responsibilities|duties|tasks|achievements|accomplishments|results"
    r"|position|title|role|designation|job[ \t]+title|duration|period|timeframe|dates?"
    r"|location|place|city|site|address|company|employer|organi[sz]ation|firm|institution"
    r"|university|college)\b[ \t]*(?::|$)",
    re.IGNORECASE,
)

# Bullets that read as outcomes rather than duties
ACHIEVEMENT_HINT_RE = re.compile(
    r"%|\b(?:award(?:ed)?|won|winner|recogni[sz]ed|honou?red|promoted|achievement)\b",
    re.IGNORECASE,
)

POSITION_AT_COMPANY_RE = re.compile(r"^(.+?)[ \t]+(?:at|@)[ \t]+(.+)$", re.IGNORECASE)
COMPANY_DASH_POSITION_RE = re.compile(r"^(.+?)(?:[ \t]+[-–—|][ \t]+|[ \t]*[–—|][ \t]*)(.+)$")
_PLACE_RE = re.compile(r"^[A-Z][A-Za-z .'\-]*(?:,[ \t]*[A-Z][A-Za-z .'\-]*)*$")

ACADEMIC_POSITION_RE = re.compile(
    r"\b((?:assistant[ \t]+|associate[ \t]+|adjunct[ \t]+|visiting[ \t]+)?"
    r"(?:professor|lecturer|instructor|researcher|fellow|postdoc|post-doc|teaching[ \t]+assistant"
    r"|research[ \t]+assistant|research[ \t]+associate|assistant|associate))"
    r"[ \t]+(?:at|of|in)[ \t]+([^\n,]+)",
    re.IGNORECASE,
)

MAX_POSITION_LENGTH = 60
_SEPARATORS = " \t|,;:()[]-–—@"


def _is_date_line(line: str) -> bool:
    match = ANY_RANGE_RE.search(line)
    if not match:
        return False
    return not line.replace(match.group(0), "").strip(_SEPARATORS)


def _without_dates(text: str) -> str:
    return ANY_RANGE_RE.sub("", text).strip(_SEPARATORS)


def _split_location(text: str) -> Tuple[str, str]:
    """Split "Acme Corp, Austin, TX" into ("Acme Corp", "Austin, TX")."""
    main, sep, rest = text.partition(",")
    rest = rest.strip(_SEPARATORS)
    if sep and rest and _PLACE_RE.match(rest):
        return main.strip(), rest
    return text.strip(), ""


def _labeled_block(lines: List[str], label_re: re.Pattern) -> Tuple[str, Set[int]]:
    """Text of a labeled sub-block: the label's inline text plus following
    lines up to a blank line or the next label."""
    for index, line in enumerate(lines):
        match = label_re.match(line)
        if not match:
            continue
        parts = [match.group(1).strip()] if match.group(1) and match.group(1).strip() else []
        used = {index}
        cursor = index + 1
        while cursor < len(lines) and lines[cursor].strip() and not _ANY_LABEL_RE.match(lines[cursor]):
            parts.append(strip_bullet(lines[cursor]))
            used.add(cursor)
            cursor += 1
        return "\n".join(parts), used
    return "", set()


def _labeled_value(lines: List[str], label_re: re.Pattern, used: Set[int]) -> str:
    for index, line in enumerate(lines):
        match = label_re.match(line)
        if match:
            used.add(index)
            return match.group(1).strip()
    return ""


def _complete(experience: WorkExperience, lines: List[str], block: str,
              position_from_body: bool = False) -> WorkExperience:
    """Fill dates, location, sub-blocks and description from a block's body lines."""
    used: Set[int] = set()

    duration = _labeled_value(lines, DURATION_LABEL_RE, used)
    if not experience.start_date:
        dates = extract_date_range(duration or block)
        experience.start_date = dates.start_date
        experience.end_date = dates.end_date
    used.update(i for i, line in enumerate(lines) if _is_date_line(line))

    position = _labeled_value(lines, POSITION_LABEL_RE, used)
    experience.position = experience.position or position
    location = _labeled_value(lines, LOCATION_LABEL_RE, used)
    experience.location = experience.location or location

    responsibilities, taken = _labeled_block(lines, RESPONSIBILITIES_LABEL_RE)
    used |= taken
    achievements, taken = _labeled_block(lines, ACHIEVEMENTS_LABEL_RE)
    used |= taken

    if not experience.position and position_from_body:
        for index, line in enumerate(lines):
            text = line.strip()
            if index in used or not text or is_bullet_line(line):
                continue
            if len(text) < MAX_POSITION_LENGTH and not text.endswith("."):
                experience.position = text
                used.add(index)
            break

    bullets = [(i, strip_bullet(line)) for i, line in enumerate(lines) if i not in used and is_bullet_line(line)]
    if not achievements:
        wins = [(i, text) for i, text in bullets if ACHIEVEMENT_HINT_RE.search(text)]
        achievements = "\n".join(text for _, text in wins)
        used.update(i for i, _ in wins)
        bullets = [(i, text) for i, text in bullets if i not in used]

    from_bullets = False
    if not responsibilities and bullets:
        responsibilities = "\n".join(text for _, text in bullets)
        used.update(i for i, _ in bullets)
        from_bullets = True

    description = "\n".join(
        strip_bullet(line) for i, line in enumerate(lines) if i not in used and line.strip()
    )
    if not description and from_bullets:
        description, _, responsibilities = responsibilities.partition("\n")

    experience.description = description.strip()
    experience.responsibilities = responsibilities.strip()
    experience.achievements = achievements.strip()
    return experience


def _labeled_experiences(section: str) -> List[WorkExperience]:
    headers = list(COMPANY_LABEL_RE.finditer(section))
    experiences = []
    for index, header in enumerate(headers):
        end = headers[index + 1].start() if index + 1 < len(headers) else len(section)
        body = section[header.end():end]
        experience = WorkExperience(company=header.group(1).strip())
        experiences.append(_complete(experience, body.splitlines(), body))
    return experiences


def _dated_header(line: str) -> Optional[str]:
    """Text in front of a date range on a header line, if the line is one."""
    match = ANY_RANGE_RE.search(line)
    if not match:
        return None
    prefix = strip_bullet(line[:match.start()]).strip(_SEPARATORS)
    if len(prefix) < 2 or not prefix[0].isupper():
        return None
    return prefix


def _dated_experiences(section: str) -> List[WorkExperience]:
    lines = section.splitlines()
    headers = [(i, prefix) for i, prefix in ((i, _dated_header(ln)) for i, ln in enumerate(lines)) if prefix]
    experiences = []
    for n, (start, prefix) in enumerate(headers):
        end = headers[n + 1][0] if n + 1 < len(headers) else len(lines)
        experience = WorkExperience()

        at_match = POSITION_AT_COMPANY_RE.match(prefix)
        dash_match = COMPANY_DASH_POSITION_RE.match(prefix)
        if at_match:
            experience.position = at_match.group(1).strip()
            experience.company, experience.location = _split_location(at_match.group(2))
        elif dash_match:
            experience.company, experience.location = _split_location(dash_match.group(1))
            experience.position = dash_match.group(2).strip(_SEPARATORS)
        else:
            experience.company, experience.location = _split_location(prefix)

        dates = extract_date_range(lines[start])
        experience.start_date, experience.end_date = dates.start_date, dates.end_date

        body = lines[start + 1:end]
        experiences.append(_complete(experience, body, "\n".join(lines[start:end]), position_from_body=True))
    return experiences


def _split_heading(heading: str) -> WorkExperience:
    heading = _without_dates(heading)
    at_match = POSITION_AT_COMPANY_RE.match(heading)
    if at_match:
        company, location = _split_location(at_match.group(2))
        return WorkExperience(company=company, position=at_match.group(1).strip(), location=location)
    dash_match = COMPANY_DASH_POSITION_RE.match(heading)
    if dash_match:
        company, location = _split_location(dash_match.group(1))
        return WorkExperience(company=company, position=dash_match.group(2).strip(), location=location)
    company, location = _split_location(heading)
    return WorkExperience(company=company, location=location)


def _block_experiences(section: str) -> List[WorkExperience]:
    experiences = []
    for block in split_blocks(section):
        lines = non_empty_lines(block)
        if len(lines) < 2:
            continue
        experience = _split_heading(strip_bullet(lines[0]))
        experiences.append(_complete(experience, lines[1:], block))
    return experiences


def _academic_experiences(section: str) -> List[WorkExperience]:
    matches = list(ACADEMIC_POSITION_RE.finditer(section))
    experiences = []
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(section)
        experience = WorkExperience(
            company=_without_dates(match.group(2)),
            position=match.group(1).strip(),
        )
        dates = extract_date_range(section[match.start():end])
        experience.start_date, experience.end_date = dates.start_date, dates.end_date
        body = section[match.end():end]
        experiences.append(_complete(experience, body.splitlines(), body))
    return experiences


def extract_work_experience(text: str) -> List[WorkExperience]:
    """Extract positions held from the work experience section.

    Layouts are tried in order, first non-empty result wins:
    1. "Company:" labeled blocks
    2. Header lines carrying a date range ("Acme Corp, Austin, TX  2019 - 2021")
    3. Blank-line separated blocks headed "Position at Company" or "Company - Position"
    4. Academic titles ("Assistant Professor at X")

    Each entry then gets its dates, location, responsibilities, achievements
    and whatever text remains as description. A single empty placeholder is
    returned when nothing is found.

    Args:
        text: Raw resume text

    Returns:
        List of WorkExperience objects, never empty
    """
    section = locate_section(text, EXPERIENCE_HEADERS)
    experiences: List[WorkExperience] = []
    if section:
        experiences = first_match(section, [
            _labeled_experiences,
            _dated_experiences,
            _block_experiences,
            _academic_experiences,
        ]) or []
    return experiences or [WorkExperience.placeholder()]
