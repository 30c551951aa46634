"""Projects extraction from resume text."""

import re
from typing import List, Optional, Tuple

from .dates import ANY_RANGE_RE, MONTH, ONGOING, SEP, YEAR, extract_date_range
from .links import extract_live_url, extract_project_github_url
from .models import Project
from .sections import PROJECT_HEADERS, locate_section
from .strategies import (
    BULLET_CHARS,
    extract_pattern,
    first_match,
    is_bullet_line,
    non_empty_lines,
    split_blocks,
    strip_bullet,
)


_BULLET = r"(?:[•·●◦▪■▸*\-][ \t]*)?"

PROJECT_LABEL_RE = re.compile(
    rf"^[ \t]*{_BULLET}(?:project(?:[ \t]+(?:name|title))?|application|portfolio[ \t]+item|publication)"
    r"[ \t]*:[ \t]*([^\n]+)$",
    re.IGNORECASE | re.MULTILINE,
)
TECH_LINE_RE = re.compile(
    rf"^[ \t]*{_BULLET}(?:"
    r"(?:technolog(?:y|ies)(?:[ \t]+used)?|tech[ \t]+stack|stack|tools(?:[ \t]+used)?|languages"
    r"|frameworks?|librar(?:y|ies))[ \t]*[:\-–]"
    r"|(?:built[ \t]+with|developed[ \t]+using|implemented[ \t]+with)[ \t]*:?"
    r")[ \t]*(.+)$",
    re.IGNORECASE,
)
USING_RE = re.compile(r"\busing[ \t]+([^\n]+?)[ \t]*(?:\.(?=[ \t]|$)|$)", re.IGNORECASE | re.MULTILINE)
WITH_RE = re.compile(r"\bwith[ \t]+([^\n]+?)[ \t]*(?:\.(?=[ \t]|$)|$)", re.IGNORECASE | re.MULTILINE)

# Lines carrying links, roles or dates rather than description text
META_LINE_RE = re.compile(
    rf"^[ \t]*{_BULLET}(?:github|repo(?:sitory)?|source[ \t]+code|code|live(?:[ \t]+(?:link|demo|url))?"
    r"|demo|link|url|website|role|position|duration|dates?)[ \t]*:",
    re.IGNORECASE,
)

ROLE_LABEL_RE = re.compile(r"\b(?:role|position|responsibility|title)[ \t]*:[ \t]*([^\n,]+)", re.IGNORECASE)
AS_ROLE_RE = re.compile(r"\b(?:worked[ \t]+|served[ \t]+)?as[ \t]+(?:a|an|the)[ \t]+([^\n,.]+)", re.IGNORECASE)
MAX_ROLE_LENGTH = 60

_DATE_SPAN = (
    rf"(?i:(?:{MONTH}\.?,?[ \t]*)?{YEAR}{SEP}(?:(?:{MONTH}\.?,?[ \t]*)?{YEAR}|{ONGOING}))"
)
DATED_TITLE_RE = re.compile(
    rf"^[ \t]*{_BULLET}([A-Z][^\n(]*?)[ \t]*\([ \t]*({_DATE_SPAN})[ \t]*\)[^\n]*$",
    re.MULTILINE,
)
_TITLE_DATES_RE = re.compile(rf"[ \t]*[(|,\-–—]?[ \t]*{_DATE_SPAN}[ \t]*\)?")


def extract_project_role(text: str) -> str:
    """Extract the candidate's role in a project ("Role: Lead" or "as a Lead")."""
    if not text:
        return ""
    role = first_match(text, [
        lambda t: extract_pattern(t, ROLE_LABEL_RE),
        lambda t: extract_pattern(t, AS_ROLE_RE),
    ]) or ""
    return role if len(role) <= MAX_ROLE_LENGTH else ""


def _is_date_line(line: str) -> bool:
    match = ANY_RANGE_RE.search(line)
    if not match:
        return False
    return not line.replace(match.group(0), "").strip(" \t()[]|,-–—")


def _description_lines(lines: List[str]) -> List[str]:
    result = []
    for line in lines:
        if not line.strip() or META_LINE_RE.match(line) or TECH_LINE_RE.match(line) or _is_date_line(line):
            continue
        result.append(strip_bullet(line))
    return result


def _split_technologies(content: str, phrases: bool = True) -> Tuple[str, str]:
    """Separate technologies from the description of one project.

    A "Technologies:"-style line wins; otherwise, when ``phrases`` is set,
    a "using X" or "with X" phrase is cut out of the text.

    Returns:
        (technologies, description)
    """
    lines = content.splitlines()
    for index, line in enumerate(lines):
        match = TECH_LINE_RE.match(line)
        if match:
            rest = lines[:index] + lines[index + 1:]
            return match.group(1).strip(), " ".join(_description_lines(rest))

    if phrases:
        for pattern in (USING_RE, WITH_RE):
            match = pattern.search(content)
            if match:
                content = content[:match.start()] + content[match.end():]
                return match.group(1).strip(), " ".join(_description_lines(content.splitlines()))

    return "", " ".join(_description_lines(lines))


def _clean_title(name: str) -> str:
    name = _TITLE_DATES_RE.sub("", strip_bullet(name))
    return name.strip(" \t|,:-–—")


def _build_project(name: str, description: str, technologies: str, block: str,
                   date_text: Optional[str] = None) -> Project:
    dates = extract_date_range(date_text or block)
    return Project(
        name=_clean_title(name),
        description=description.strip(),
        technologies=technologies,
        github_link=extract_project_github_url(block),
        live_link=extract_live_url(block),
        start_date=dates.start_date,
        end_date=dates.end_date,
        role=extract_project_role(block),
    )


def _labeled_projects(section: str) -> List[Project]:
    headers = list(PROJECT_LABEL_RE.finditer(section))
    projects = []
    for index, header in enumerate(headers):
        end = headers[index + 1].start() if index + 1 < len(headers) else len(section)
        body = section[header.end():end]
        technologies, description = _split_technologies(body, phrases=False)
        projects.append(_build_project(header.group(1), description, technologies, section[header.start():end]))
    return projects


def _bulleted_projects(section: str) -> List[Project]:
    lines = section.splitlines()
    first = next((ln for ln in lines if ln.strip(BULLET_CHARS + "=_ \t")), "")
    # Bullets under a plain title line are details, not project titles
    if not is_bullet_line(first):
        return []

    titles = [i for i, ln in enumerate(lines) if is_bullet_line(ln) and strip_bullet(ln)[:1].isupper()]
    projects = []
    for n, start in enumerate(titles):
        end = titles[n + 1] if n + 1 < len(titles) else len(lines)
        name, _, inline = strip_bullet(lines[start]).partition(":")
        content = "\n".join(([inline.strip()] if inline.strip() else []) + lines[start + 1:end])
        technologies, description = _split_technologies(content)
        projects.append(_build_project(name, description, technologies, "\n".join(lines[start:end])))
    return projects


def _block_projects(section: str) -> List[Project]:
    projects = []
    for block in split_blocks(section):
        lines = non_empty_lines(block)
        if len(lines) < 2:
            continue
        technologies, description = _split_technologies("\n".join(lines[1:]), phrases=False)
        projects.append(_build_project(lines[0], description, technologies, block))
    return projects


def _dated_projects(section: str) -> List[Project]:
    headers = list(DATED_TITLE_RE.finditer(section))
    projects = []
    for index, header in enumerate(headers):
        end = headers[index + 1].start() if index + 1 < len(headers) else len(section)
        body = section[header.end():end]
        technologies, description = _split_technologies(body, phrases=False)
        projects.append(_build_project(
            header.group(1),
            description,
            technologies,
            section[header.start():end],
            date_text=header.group(2),
        ))
    return projects


def extract_projects(text: str) -> List[Project]:
    """Extract projects from the projects section.

    Four layouts are tried in order and the first one that finds anything
    wins: "Project:" labels, bulleted titles, blank-line separated blocks,
    and "Title (Jan 2023 - Present)" headers. Never returns an empty list;
    a single placeholder project named "Project" stands in when nothing is
    found.

    Args:
        text: Raw resume text

    Returns:
        List of Project objects
    """
    section = locate_section(text, PROJECT_HEADERS)
    projects: List[Project] = []
    if section:
        projects = first_match(section, [
            _labeled_projects,
            _bulleted_projects,
            _block_projects,
            _dated_projects,
        ]) or []
    return projects or [Project.placeholder()]
