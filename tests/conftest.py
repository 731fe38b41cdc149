import copy
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from resume_extraction.api.deps import (
    get_completion_client,
    get_file_storage,
    get_settings,
    get_text_extractor,
)
from resume_extraction.core.config import Settings
from resume_extraction.main import create_app
from resume_extraction.services.pipeline import ResumeParseService
from resume_extraction.storage.local import LocalFileStorage
from tests.mocks.fake_completion_client import FakeCompletionClient
from tests.mocks.fake_text_extractor import FakeTextExtractor

SAMPLE_RESUME_TEXT = """JANE DOE
jane.doe@example.com | (555) 123-4567 | Austin, TX
linkedin.com/in/janedoe

EXPERIENCE
Staff Engineer, Initech | Austin, TX
2019 - 2022
- Led backend rewrite in Go
- Mentored four engineers

EDUCATION
STANFORD UNIVERSITY
B.S. Computer Science, 2015 - 2019
Relevant coursework: Distributed Systems, Databases

PROJECTS
Resume Brain: resume analysis tool built with Python and FastAPI

SKILLS
Python, Go, PostgreSQL, Communication
"""

# Minimal bytes that pass the media-type gate; extraction is faked.
FAKE_PDF_BYTES = b"%PDF-1.4\n% fake resume for tests\n%%EOF"

_COMPLETION_DATA = {
    "personal_info": {
        "name": "Jane Doe",
        "email": "jane.doe@example.com",
        "phone": "(555) 123-4567",
        "location": "Austin, TX",
        "linkedin": "https://www.linkedin.com/in/janedoe",
        "github": None,
        "portfolio": None,
        "professional_summary": None,
    },
    "experience": [
        {
            "company": "Initech",
            "role": "Staff Engineer",
            "location": "Austin, TX",
            "start_date": "2019",
            "end_date": "2022",
            "description": "",
            "responsibilities": ["Led backend rewrite in Go", "Mentored four engineers"],
            "achievements": [],
            "technologies": ["Go"],
        }
    ],
    "education": [
        {
            "institution": "Stanford University",
            "degree": "B.S.",
            "field_of_study": "Computer Science",
            "location": "",
            "start_date": "2015",
            "end_date": "2019",
            "gpa": None,
            "relevant_coursework": ["Distributed Systems", "Databases"],
            "achievements": [],
            "activities": [],
        }
    ],
    "projects": [
        {
            "name": "Resume Brain",
            "description": "resume analysis tool built with Python and FastAPI",
            "project_url": None,
            "technologies": ["Python", "FastAPI"],
            "key_features": [],
            "achievements": [],
            "role_responsibilities": [],
        }
    ],
    "skills": [
        {"name": "Python", "category": "technical", "proficiency_level": None},
        {"name": "Go", "category": "technical", "proficiency_level": None},
        {"name": "Communication", "category": "soft_skill", "proficiency_level": None},
    ],
}


def make_completion_data(**overrides) -> dict:
    """Helper to create a model completion payload that verifies against SAMPLE_RESUME_TEXT."""
    data = copy.deepcopy(_COMPLETION_DATA)
    data.update(overrides)
    return data


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,  # Prevent reading .env file during tests
    )


@pytest.fixture
def fake_completion_client() -> FakeCompletionClient:
    return FakeCompletionClient(make_completion_data())


@pytest.fixture
def fake_text_extractor() -> FakeTextExtractor:
    return FakeTextExtractor(SAMPLE_RESUME_TEXT)


@pytest.fixture
def storage(tmp_path: Path) -> LocalFileStorage:
    return LocalFileStorage(str(tmp_path / "uploads"), "https://files.example.com/resumes/")


@pytest.fixture
def parse_service(
    fake_text_extractor: FakeTextExtractor,
    fake_completion_client: FakeCompletionClient,
    settings: Settings,
    storage: LocalFileStorage,
) -> ResumeParseService:
    return ResumeParseService(fake_text_extractor, fake_completion_client, settings, storage)


@pytest_asyncio.fixture
async def client(
    settings: Settings,
    fake_text_extractor: FakeTextExtractor,
    fake_completion_client: FakeCompletionClient,
    storage: LocalFileStorage,
) -> AsyncGenerator[AsyncClient]:
    app = create_app()

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_text_extractor] = lambda: fake_text_extractor
    app.dependency_overrides[get_completion_client] = lambda: fake_completion_client
    app.dependency_overrides[get_file_storage] = lambda: storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
