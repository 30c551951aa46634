"""Data models and types for the resume parser."""

from dataclasses import dataclass, field
from typing import List
from enum import Enum


class FileType(Enum):
    """Supported file types for parsing."""
    PDF = "pdf"
    DOCX = "docx"
    TXT = "txt"


@dataclass
class PersonName:
    """Candidate name split into its parts."""
    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    def to_dict(self) -> dict:
        return {
            "firstName": self.first_name,
            "middleName": self.middle_name,
            "lastName": self.last_name,
        }


@dataclass
class DateRange:
    """Start/end pair as written in the resume ("Present" for open ranges)."""
    start_date: str = ""
    end_date: str = ""

    def to_dict(self) -> dict:
        return {
            "startDate": self.start_date,
            "endDate": self.end_date,
        }


@dataclass
class Education:
    """Education information extracted from resume."""
    college_name: str = ""
    degree: str = ""
    university_name: str = ""
    specialization: str = ""
    graduation_year: str = ""
    start_year: str = ""
    end_year: str = ""
    location: str = ""
    cgpa: str = ""

    def to_dict(self) -> dict:
        return {
            "collegeName": self.college_name,
            "degree": self.degree,
            "universityName": self.university_name,
            "specialization": self.specialization,
            "graduationYear": self.graduation_year,
            "startYear": self.start_year,
            "endYear": self.end_year,
            "location": self.location,
            "cgpa": self.cgpa,
        }


@dataclass
class Project:
    """A single project extracted from resume."""
    name: str = ""
    description: str = ""
    technologies: str = ""
    github_link: str = ""
    live_link: str = ""
    start_date: str = ""
    end_date: str = ""
    role: str = ""

    @classmethod
    def placeholder(cls) -> "Project":
        return cls(name="Project")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "technologies": self.technologies,
            "githubLink": self.github_link,
            "liveLink": self.live_link,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "role": self.role,
        }


@dataclass
class WorkExperience:
    """A single position held, extracted from resume."""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""
    responsibilities: str = ""
    achievements: str = ""

    @classmethod
    def placeholder(cls) -> "WorkExperience":
        return cls()

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "position": self.position,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "location": self.location,
            "description": self.description,
            "responsibilities": self.responsibilities,
            "achievements": self.achievements,
        }


def _default_projects() -> List[Project]:
    return [Project.placeholder()]


def _default_work_experiences() -> List[WorkExperience]:
    return [WorkExperience.placeholder()]


@dataclass
class ParsedProfile:
    """Complete parsed resume data, ready to pre-fill an application form.

    Every string defaults to "" and every list to a one-element placeholder
    list, so consumers never have to check for missing values.
    """
    name: PersonName = field(default_factory=PersonName)
    email: str = ""
    contact_number: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    portfolio_url: str = ""
    address: str = ""
    education: Education = field(default_factory=Education)
    education_level: str = ""
    skills: str = ""
    technical_skills: str = ""
    soft_skills: str = ""
    languages: str = ""
    projects: List[Project] = field(default_factory=_default_projects)
    work_experiences: List[WorkExperience] = field(default_factory=_default_work_experiences)
    certifications: str = ""
    experience: int = 0

    def to_dict(self) -> dict:
        data = {}
        data.update(self.name.to_dict())
        data.update({
            "email": self.email,
            "contactNumber": self.contact_number,
            "linkedinUrl": self.linkedin_url,
            "githubUrl": self.github_url,
            "portfolioUrl": self.portfolio_url,
            "address": self.address,
        })
        data.update(self.education.to_dict())
        data.update({
            "educationLevel": self.education_level,
            "skills": self.skills,
            "technicalSkills": self.technical_skills,
            "softSkills": self.soft_skills,
            "languages": self.languages,
            "projects": [p.to_dict() for p in self.projects],
            "workExperiences": [w.to_dict() for w in self.work_experiences],
            "certifications": self.certifications,
            "experience": self.experience,
        })
        return data
