from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class SkillCategory(StrEnum):
    TECHNICAL = "technical"
    SOFT_SKILL = "soft_skill"
    LANGUAGE = "language"
    TOOL = "tool"


class _ProfileModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class PersonalInfo(_ProfileModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None
    professional_summary: str | None = None


class ExperienceEntry(_ProfileModel):
    company: str
    role: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str | None = None
    description: str = ""
    responsibilities: list[str] = []
    achievements: list[str] = []
    technologies: list[str] = []


class EducationEntry(_ProfileModel):
    institution: str
    degree: str = ""
    field_of_study: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str | None = None
    gpa: str | None = None
    relevant_coursework: list[str] = []
    achievements: list[str] = []
    activities: list[str] = []


class ProjectEntry(_ProfileModel):
    name: str
    description: str = ""
    project_url: str | None = None
    technologies: list[str] = []
    key_features: list[str] = []
    achievements: list[str] = []
    role_responsibilities: list[str] = []


class SkillEntry(_ProfileModel):
    name: str
    category: SkillCategory = SkillCategory.TECHNICAL
    proficiency_level: str | None = None


class ExtractedProfile(_ProfileModel):
    personal_info: PersonalInfo = PersonalInfo()
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    projects: list[ProjectEntry] = []
    skills: list[SkillEntry] = []
