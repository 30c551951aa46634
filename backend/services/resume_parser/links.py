"""Profile and project link extraction (LinkedIn, GitHub, portfolio, live demo)."""

import re
from typing import Optional

from .strategies import first_match


_SCHEME = r"(?:https?://)?(?:www\.)?"
_PATH = r"(?:/[\w\-./?%&=#~+]*)?"
# TLDs accepted for unlabeled personal/live URLs; keeps "Node.js" or "e.g." out
_SITE_TLDS = r"(?:com|io|dev|me|app|net|org|co|xyz|site|tech|in|ai|page|live|sh)"

_LINKEDIN_URL = rf"{_SCHEME}(?:[a-z]{{2}}\.)?linkedin\.com/(?:in|pub|profile)/[\w\-%]+(?:/[\w\-%]+)*"
_GITHUB_URL = rf"{_SCHEME}github\.com/[\w\-]+(?:/[\w\-.]+)*"

LINKEDIN_LABELED_RE = re.compile(
    rf"(?:linkedin|profile|social)(?:[ \t]+(?:url|profile))?[ \t]*[:\-]?[ \t]*({_LINKEDIN_URL})",
    re.IGNORECASE,
)
LINKEDIN_BARE_RE = re.compile(rf"({_LINKEDIN_URL})", re.IGNORECASE)

GITHUB_LABELED_RE = re.compile(
    rf"(?:github|git|repo|repository|code)(?:[ \t]+(?:url|profile))?[ \t]*[:\-]?[ \t]*({_GITHUB_URL})",
    re.IGNORECASE,
)
GITHUB_BARE_RE = re.compile(rf"({_GITHUB_URL})", re.IGNORECASE)

PROJECT_GITHUB_LABELED_RE = re.compile(
    rf"(?:github|repository|repo|source[ \t]+code|code)[ \t]*[:\-]?[ \t]*({_GITHUB_URL})",
    re.IGNORECASE,
)

PORTFOLIO_LABELED_RE = re.compile(
    rf"(?:portfolio|website|personal[ \t]+site|homepage|web)[ \t]*[:\-]?[ \t]*"
    rf"({_SCHEME}[\w\-]+(?:\.[\w\-]+)*\.[a-z]{{2,}}{_PATH})",
    re.IGNORECASE,
)
PORTFOLIO_BARE_RE = re.compile(
    rf"(?<![@\w.])({_SCHEME}[\w\-]+(?:\.[\w\-]+)*\.{_SITE_TLDS}/[\w\-./?%&=#~+]*)",
    re.IGNORECASE,
)

LIVE_LABELED_RE = re.compile(
    rf"\b(?:live|demo|website|deployed|production|app|application|site|preview)\b"
    rf"(?:[ \t]+(?:link|url|demo))?[ \t]*[:\-]?[ \t]*"
    rf"({_SCHEME}[\w\-]+(?:\.[\w\-]+)*\.[a-z]{{2,}}{_PATH})",
    re.IGNORECASE,
)
# Unlabeled live links need a scheme, "www.", a hosting platform domain or a path
_HOSTED = r"(?:vercel\.app|netlify\.app|herokuapp\.com|github\.io|onrender\.com|web\.app|firebaseapp\.com|pages\.dev|surge\.sh)"
LIVE_BARE_RE = re.compile(
    r"(?<![@\w.])("
    rf"(?:https?://|www\.)[\w\-]+(?:\.[\w\-]+)*\.[a-z]{{2,}}{_PATH}"
    rf"|[\w\-]+\.{_HOSTED}{_PATH}"
    rf"|[\w\-]+(?:\.[\w\-]+)*\.{_SITE_TLDS}/[\w\-./?%&=#~+]*"
    r")",
    re.IGNORECASE,
)


def normalize_url(url: str) -> str:
    """Normalize URL to include https:// prefix."""
    url = url.strip().rstrip(".,;:)")
    if not url:
        return ""
    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url
    # Remove trailing slashes
    url = url.rstrip("/")
    return url


def _is_profile_domain(url: str) -> bool:
    lowered = url.lower()
    return "linkedin.com" in lowered or "github.com" in lowered


def _first_url(pattern: re.Pattern, text: str, exclude_github: bool = False,
               exclude_profiles: bool = False) -> Optional[str]:
    for match in pattern.finditer(text):
        url = match.group(1)
        if exclude_profiles and _is_profile_domain(url):
            continue
        if exclude_github and "github.com" in url.lower():
            continue
        return normalize_url(url)
    return None


def extract_linkedin_url(text: str) -> str:
    """Extract LinkedIn profile URL, labeled first then bare."""
    if not text:
        return ""
    return first_match(text, [
        lambda t: _first_url(LINKEDIN_LABELED_RE, t),
        lambda t: _first_url(LINKEDIN_BARE_RE, t),
    ]) or ""


def extract_github_url(text: str) -> str:
    """Extract GitHub profile URL, labeled first then bare."""
    if not text:
        return ""
    return first_match(text, [
        lambda t: _first_url(GITHUB_LABELED_RE, t),
        lambda t: _first_url(GITHUB_BARE_RE, t),
    ]) or ""


def extract_portfolio_url(text: str) -> str:
    """Extract personal website / portfolio URL.

    LinkedIn and GitHub URLs are never reported as a portfolio. Unlabeled
    URLs must carry a path so that plain domains mentioned in prose are
    left alone.

    Args:
        text: Raw resume text

    Returns:
        Normalized URL or empty string
    """
    if not text:
        return ""
    return first_match(text, [
        lambda t: _first_url(PORTFOLIO_LABELED_RE, t, exclude_profiles=True),
        lambda t: _first_url(PORTFOLIO_BARE_RE, t, exclude_profiles=True),
    ]) or ""


def extract_project_github_url(text: str) -> str:
    """Extract the repository link of a single project block."""
    if not text:
        return ""
    return first_match(text, [
        lambda t: _first_url(PROJECT_GITHUB_LABELED_RE, t),
        lambda t: _first_url(GITHUB_BARE_RE, t),
    ]) or ""


def extract_live_url(text: str) -> str:
    """Extract the deployed/demo link of a single project block (never GitHub)."""
    if not text:
        return ""
    return first_match(text, [
        lambda t: _first_url(LIVE_LABELED_RE, t, exclude_github=True),
        lambda t: _first_url(LIVE_BARE_RE, t, exclude_github=True),
    ]) or ""
