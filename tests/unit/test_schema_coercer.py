"""Unit tests for coercing raw completions into profiles."""

import json

import pytest

from resume_extraction.core.exceptions import MalformedCompletionError
from resume_extraction.schemas.profile import ExtractedProfile, SkillCategory
from resume_extraction.services.schema_coercer import coerce_completion, coerce_skill_category
from tests.conftest import make_completion_data

pytestmark = pytest.mark.unit


class TestMalformed:
    @pytest.mark.parametrize("raw", ["not json at all", "{\"experience\": [", "", "   "])
    def test_invalid_json_raises(self, raw: str) -> None:
        with pytest.raises(MalformedCompletionError):
            coerce_completion(raw)

    @pytest.mark.parametrize("raw", ["[]", "[{\"name\": \"x\"}]", "\"a string\"", "42", "null"])
    def test_non_object_raises(self, raw: str) -> None:
        with pytest.raises(MalformedCompletionError, match="JSON object"):
            coerce_completion(raw)


class TestTolerated:
    def test_full_payload(self) -> None:
        profile = coerce_completion(json.dumps(make_completion_data()))
        assert isinstance(profile, ExtractedProfile)
        assert profile.personal_info.name == "Jane Doe"
        assert profile.experience[0].company == "Initech"
        assert profile.experience[0].responsibilities[0] == "Led backend rewrite in Go"
        assert profile.education[0].relevant_coursework == ["Distributed Systems", "Databases"]
        assert profile.skills[2].category == SkillCategory.SOFT_SKILL

    def test_surrounding_whitespace(self) -> None:
        profile = coerce_completion("\n\n  " + json.dumps(make_completion_data()) + "  \n")
        assert profile.personal_info.email == "jane.doe@example.com"

    def test_code_fence(self) -> None:
        raw = "```json\n" + json.dumps(make_completion_data()) + "\n```"
        assert coerce_completion(raw).projects[0].name == "Resume Brain"

    def test_code_fence_on_one_line(self) -> None:
        raw = "```json" + json.dumps(make_completion_data()) + "```"
        assert coerce_completion(raw).personal_info.name == "Jane Doe"

    @pytest.mark.parametrize("opening", ["```JSON\n", "```\n", "```json "])
    def test_code_fence_variants(self, opening: str) -> None:
        raw = opening + json.dumps(make_completion_data()) + "\n```"
        assert coerce_completion(raw).experience[0].company == "Initech"

    def test_unclosed_code_fence(self) -> None:
        raw = "```json\n" + json.dumps(make_completion_data())
        assert coerce_completion(raw).education[0].institution == "Stanford University"

    def test_empty_object_gives_empty_profile(self) -> None:
        profile = coerce_completion("{}")
        assert profile == ExtractedProfile()
        assert profile.personal_info.name == ""
        assert profile.experience == []
        assert profile.skills == []

    def test_null_sections_become_empty(self) -> None:
        raw = json.dumps({"personal_info": None, "experience": None, "skills": None})
        profile = coerce_completion(raw)
        assert profile.experience == []
        assert profile.skills == []

    def test_missing_optional_keys(self) -> None:
        raw = json.dumps({"experience": [{"company": "Initech"}]})
        entry = coerce_completion(raw).experience[0]
        assert entry.company == "Initech"
        assert entry.role == ""
        assert entry.end_date is None
        assert entry.responsibilities == []

    def test_single_object_instead_of_array(self) -> None:
        raw = json.dumps({"education": {"institution": "MIT", "gpa": 3.9}})
        education = coerce_completion(raw).education
        assert len(education) == 1
        assert education[0].institution == "MIT"
        assert education[0].gpa == "3.9"

    def test_string_instead_of_list(self) -> None:
        raw = json.dumps({"projects": [{"name": "Orbit", "technologies": "Python"}]})
        assert coerce_completion(raw).projects[0].technologies == ["Python"]

    def test_list_items_cleaned(self) -> None:
        raw = json.dumps(
            {"experience": [{"company": "Initech", "achievements": ["Shipped v2", None, "", 3]}]}
        )
        assert coerce_completion(raw).experience[0].achievements == ["Shipped v2", "3"]

    def test_non_object_entries_skipped(self) -> None:
        raw = json.dumps({"experience": ["Initech", {"company": "Acme"}]})
        assert [e.company for e in coerce_completion(raw).experience] == ["Acme"]

    def test_bare_string_skills(self) -> None:
        raw = json.dumps({"skills": ["Python", {"name": "Go", "category": "tool"}]})
        skills = coerce_completion(raw).skills
        assert [s.name for s in skills] == ["Python", "Go"]
        assert skills[0].category == SkillCategory.TECHNICAL
        assert skills[1].category == SkillCategory.TOOL

    def test_personal_info_at_top_level(self) -> None:
        raw = json.dumps({"name": "Jane Doe", "email": "jane@example.com", "skills": []})
        info = coerce_completion(raw).personal_info
        assert info.name == "Jane Doe"
        assert info.email == "jane@example.com"

    def test_envelope_unwrapped(self) -> None:
        raw = json.dumps({"resume": make_completion_data()})
        assert coerce_completion(raw).experience[0].company == "Initech"

    def test_nested_value_in_scalar_field_dropped(self) -> None:
        raw = json.dumps({"personal_info": {"name": {"first": "Jane"}, "email": "j@x.io"}})
        info = coerce_completion(raw).personal_info
        assert info.name == ""
        assert info.email == "j@x.io"

    def test_null_proficiency_stays_null(self) -> None:
        raw = json.dumps({"skills": [{"name": "Python", "proficiency_level": None}]})
        assert coerce_completion(raw).skills[0].proficiency_level is None


class TestSkillCategory:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("soft", SkillCategory.SOFT_SKILL),
            ("Soft Skill", SkillCategory.SOFT_SKILL),
            ("soft-skill", SkillCategory.SOFT_SKILL),
            ("LANGUAGE", SkillCategory.LANGUAGE),
            ("tools", SkillCategory.TOOL),
            ("framework", SkillCategory.TECHNICAL),
            (None, SkillCategory.TECHNICAL),
        ],
    )
    def test_category_aliases(self, raw, expected) -> None:
        assert coerce_skill_category(raw) == expected
