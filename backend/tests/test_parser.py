from services.resume_parser import ResumeParser, parse_resume, parse_resume_text


SAMPLE_RESUME = """JANE Q. PUBLIC
Contact: jane@example.com | Phone: (555) 123-4567
linkedin: linkedin.com/in/janeq | GitHub: github.com/janeq

Summary
Backend engineer focused on communication and problem solving.

Education
Bachelor of Technology in Computer Science
Riverside College, Pune, India
2014 - 2018
CGPA: 8.2

Work Experience
Initech - Software Engineer | 2018 - 2020
- Maintained billing services
Globex - Senior Engineer | 2021 - Present
- Led the API platform team

Technical Skills
Python, Django, PostgreSQL

Projects
Project: Expense Tracker
Technologies: React, Node.js
Tracks daily spending.

Certifications
AWS Certified Developer
"""


def test_parse_full_resume(parser, current_year):
    data = parser.parse_text(SAMPLE_RESUME).to_dict()

    assert (data["firstName"], data["middleName"], data["lastName"]) == ("Jane", "Q.", "Public")
    assert data["email"] == "jane@example.com"
    assert data["contactNumber"] == "(555) 123-4567"
    assert data["linkedinUrl"] == "https://linkedin.com/in/janeq"
    assert data["githubUrl"] == "https://github.com/janeq"
    assert data["portfolioUrl"] == ""

    assert data["collegeName"] == "Riverside College"
    assert data["universityName"] == "Riverside College"
    assert data["degree"] == "Bachelor of Technology"
    assert data["specialization"] == "Computer Science"
    assert (data["startYear"], data["endYear"], data["graduationYear"]) == ("2014", "2018", "2018")
    assert data["location"] == "Pune, India"
    assert data["cgpa"] == "8.2"
    assert data["educationLevel"] == "Graduate"

    assert data["skills"] == "Python, Django, PostgreSQL"
    assert data["technicalSkills"] == "Python\nDjango\nPostgreSQL"
    assert data["softSkills"] == "communication, problem solving"
    assert data["languages"] == ""

    assert [p["name"] for p in data["projects"]] == ["Expense Tracker"]
    assert data["projects"][0]["technologies"] == "React, Node.js"

    jobs = data["workExperiences"]
    assert [(j["company"], j["position"]) for j in jobs] == [
        ("Initech", "Software Engineer"),
        ("Globex", "Senior Engineer"),
    ]
    assert jobs[1]["endDate"] == "Present"

    assert data["certifications"] == "AWS Certified Developer"
    assert data["experience"] == (2020 - 2018) + (current_year - 2021)


def test_parse_is_idempotent(parser):
    assert parser.parse_text(SAMPLE_RESUME) == parser.parse_text(SAMPLE_RESUME)


def test_empty_text_gives_defaults():
    data = parse_resume_text("")

    assert data["experience"] == 0
    assert len(data["projects"]) == 1
    assert data["projects"][0]["name"] == "Project"
    assert len(data["workExperiences"]) == 1
    assert all(value == "" for value in data["workExperiences"][0].values())

    strings = {k: v for k, v in data.items() if k not in ("projects", "workExperiences", "experience")}
    assert all(value == "" for value in strings.values())


def test_placeholder_project_without_section(parser):
    profile = parser.parse_text("Jane Doe\njane@example.com\n\nSkills\nPython, SQL\n")
    assert len(profile.projects) == 1
    assert profile.projects[0].name == "Project"


def test_name_not_reported_as_skill(parser):
    text = "Ruby Jones\nrj@example.com\n\nSummary\nBackend developer working with Python.\n"
    profile = parser.parse_text(text)
    assert profile.name.full_name == "Ruby Jones"
    assert profile.technical_skills == "python"


def test_current_year_is_injectable():
    text = "Work Experience\nAcme Corp 2020 - Present\n"
    assert ResumeParser(current_year=2022).parse_text(text).experience == 2
    assert ResumeParser(current_year=2025).parse_text(text).experience == 5


def test_parse_resume_from_text_file(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text(SAMPLE_RESUME, encoding="utf-8")

    data = parse_resume(str(path))
    assert data["email"] == "jane@example.com"
    assert data["firstName"] == "Jane"


def test_windows_line_breaks_parse_like_unix(parser):
    crlf = SAMPLE_RESUME.replace("\n", "\r\n")
    assert parser.parse_text(crlf).to_dict() == parser.parse_text(SAMPLE_RESUME).to_dict()

    data = parser.parse_text(crlf).to_dict()
    assert data["degree"] == "Bachelor of Technology"
    assert data["workExperiences"][0]["company"] == "Initech"


def test_lowercase_name_keeps_soft_skills_section(parser):
    text = "john smith\njohn@example.com\n\nSoft Skills\nTeamwork, Leadership\n"
    profile = parser.parse_text(text)
    assert profile.name.full_name == ""
    assert profile.soft_skills == "Teamwork, Leadership"


def test_name_removal_keeps_header_lines():
    text = "Skills Lab Alumni\nSkills\nPython, SQL\n"
    assert ResumeParser._without_name(text, "Skills") == " Lab Alumni\nSkills\nPython, SQL\n"
