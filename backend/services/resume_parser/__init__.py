"""Resume Parser Module

A heuristic resume parser that turns the plain text of a resume into a
structured profile for pre-filling a job application form.

Components:
    - models: Data classes for the parsed profile
    - sections: Section header detection and section text location
    - contact: Name, email, phone and address extraction
    - links: LinkedIn, GitHub, portfolio and project link extraction
    - education: Education record and education level extraction
    - skills: Skills, technical skills, soft skills and languages
    - projects: Project list extraction
    - experience: Work experience extraction
    - dates: Date range parsing and years-of-experience calculation
    - certifications: Certifications extraction
    - readers: File format handlers (PDF, DOCX, TXT)
    - parser: Main parser facade

Usage:
    from services.resume_parser import ResumeParser, parse_resume

    # Using the class-based API
    parser = ResumeParser(current_year=2024)
    profile = parser.parse_text(text)
    print(profile.email)
    print(profile.projects[0].name)

    # Using the function API
    data = parse_resume("resume.pdf")
    print(data["firstName"])
    print(data["technicalSkills"])
"""

from .models import (
    FileType,
    PersonName,
    DateRange,
    Education,
    Project,
    WorkExperience,
    ParsedProfile,
)

from .sections import locate_section

from .contact import (
    extract_name,
    extract_full_name,
    split_full_name,
    extract_email,
    extract_phone,
    extract_address,
)

from .links import (
    extract_linkedin_url,
    extract_github_url,
    extract_portfolio_url,
    extract_project_github_url,
    extract_live_url,
)

from .education import extract_education, classify_education_level

from .skills import (
    extract_skills,
    extract_technical_skills,
    extract_soft_skills,
    extract_languages,
)

from .projects import extract_projects, extract_project_role

from .experience import extract_work_experience

from .dates import extract_date_range, calculate_experience

from .certifications import extract_certifications

from .readers import (
    detect_file_type,
    extract_text,
    extract_text_from_pdf,
    extract_text_from_docx,
    extract_text_from_txt,
)

from .parser import (
    ResumeParser,
    parse_resume,
    parse_resume_text,
)


__all__ = [
    # Models
    "FileType",
    "PersonName",
    "DateRange",
    "Education",
    "Project",
    "WorkExperience",
    "ParsedProfile",
    # Main parser
    "ResumeParser",
    "parse_resume",
    "parse_resume_text",
    # Individual extractors
    "locate_section",
    "extract_name",
    "extract_full_name",
    "split_full_name",
    "extract_email",
    "extract_phone",
    "extract_address",
    "extract_linkedin_url",
    "extract_github_url",
    "extract_portfolio_url",
    "extract_project_github_url",
    "extract_live_url",
    "extract_education",
    "classify_education_level",
    "extract_skills",
    "extract_technical_skills",
    "extract_soft_skills",
    "extract_languages",
    "extract_projects",
    "extract_project_role",
    "extract_work_experience",
    "extract_date_range",
    "calculate_experience",
    "extract_certifications",
    # File readers
    "detect_file_type",
    "extract_text",
    "extract_text_from_pdf",
    "extract_text_from_docx",
    "extract_text_from_txt",
]
