from services.resume_parser.sections import (
    EXPERIENCE_HEADERS,
    find_header,
    locate_section,
)


SAMPLE_RESUME = """Summary
Seasoned engineer building APIs.

Education
B.Tech in Computer Science
State University

Experience
Acme Corp 2019 - 2021
"""


def test_locate_section_bare_header():
    section = locate_section(SAMPLE_RESUME, ["education"])
    assert section == "B.Tech in Computer Science\nState University"


def test_locate_section_stops_at_next_header():
    section = locate_section(SAMPLE_RESUME, ["summary"])
    assert section == "Seasoned engineer building APIs."
    assert "Education" not in section


def test_locate_section_runs_to_end_of_document():
    assert locate_section(SAMPLE_RESUME, EXPERIENCE_HEADERS) == "Acme Corp 2019 - 2021"


def test_locate_section_colon_header():
    text = "Skills: Python, Java\nEducation: B.Sc Physics"
    assert locate_section(text, ["skills"]) == "Python, Java"


def test_locate_section_all_caps_header():
    text = "EDUCATION\nState University, 2016 - 2020\nEXPERIENCE\nAcme Corp"
    assert locate_section(text, ["education"]) == "State University, 2016 - 2020"


def test_locate_section_underlined_header():
    text = "Projects\n--------\nChat app built with Flask\n"
    assert locate_section(text, ["projects"]) == "Chat app built with Flask"


def test_locate_section_bracketed_header():
    text = "[Education]\nState University, 2016 - 2020\n(Experience)\nAcme Corp\n"
    assert locate_section(text, ["education"]) == "State University, 2016 - 2020"
    assert locate_section(text, ["experience"]) == "Acme Corp"


def test_locate_section_windows_line_breaks():
    text = "EDUCATION\r\nState University, 2016 - 2020\r\nEXPERIENCE\r\nAcme Corp\r\n"
    assert locate_section(text, ["education"]) == "State University, 2016 - 2020"


def test_locate_section_numbered_header():
    text = "1. Education\nState University\n2. Experience\nAcme Corp"
    assert locate_section(text, ["education"]) == "State University"


def test_locate_section_markup_header():
    text = "\\section{Education}\nMIT 2010 - 2014\n"
    assert locate_section(text, ["education"]) == "MIT 2010 - 2014"


def test_locate_section_short_match_tries_next_synonym():
    text = "Skills\nC\n\nTechnical Skills\nPython, Django, PostgreSQL\n"
    assert locate_section(text, ["skills", "technical skills", "key skills"]) == "Python, Django, PostgreSQL"


def test_locate_section_short_match_accepted_with_one_synonym_left():
    text = "Skills\nC\n\nTechnical Skills\nPython, Django, PostgreSQL\n"
    assert locate_section(text, ["skills", "technical skills"]) == "C"


def test_locate_section_short_match_kept_when_nothing_better():
    text = "Skills\nC\n"
    assert locate_section(text, ["skills", "key skills"]) == "C"


def test_locate_section_missing_header():
    assert locate_section(SAMPLE_RESUME, ["certifications"]) == ""


def test_locate_section_empty_text():
    assert locate_section("", ["education"]) == ""


def test_find_header_reports_shape():
    shape, match = find_header("EDUCATION\nMIT", "education")
    assert shape == "all-caps"
    assert match.group(0) == "EDUCATION"
