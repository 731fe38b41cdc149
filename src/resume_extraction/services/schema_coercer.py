"""Turn untrusted model output into an ``ExtractedProfile``.

The completion is only *supposed* to be JSON in our schema. Syntax errors and
non-object payloads are fatal; everything else (missing sections, a single
object where a list belongs, numbers in string fields) is coerced to the
closest valid shape.
"""

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from resume_extraction.core.exceptions import MalformedCompletionError
from resume_extraction.schemas.profile import (
    EducationEntry,
    ExperienceEntry,
    ExtractedProfile,
    PersonalInfo,
    ProjectEntry,
    SkillCategory,
    SkillEntry,
)

logger = logging.getLogger(__name__)

SECTIONS = ("personal_info", "experience", "education", "projects", "skills")

PERSONAL_FIELDS = tuple(PersonalInfo.model_fields)

CATEGORY_ALIASES: dict[str, SkillCategory] = {
    "technical": SkillCategory.TECHNICAL,
    "tech": SkillCategory.TECHNICAL,
    "soft": SkillCategory.SOFT_SKILL,
    "soft_skill": SkillCategory.SOFT_SKILL,
    "soft skill": SkillCategory.SOFT_SKILL,
    "soft_skills": SkillCategory.SOFT_SKILL,
    "language": SkillCategory.LANGUAGE,
    "languages": SkillCategory.LANGUAGE,
    "tool": SkillCategory.TOOL,
    "tools": SkillCategory.TOOL,
}

# ```json ... ``` with or without line breaks or a closing fence
CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*(?:```)?$", re.DOTALL | re.IGNORECASE)


def _strip_code_fence(text: str) -> str:
    m = CODE_FENCE.match(text)
    return m.group(1) if m else text


def _load_object(raw_text: str) -> dict[str, Any]:
    text = _strip_code_fence((raw_text or "").strip())
    if not text:
        raise MalformedCompletionError("Completion was empty")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedCompletionError(f"Completion is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedCompletionError(
            f"Completion must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def _unwrap_envelope(payload: dict[str, Any]) -> dict[str, Any]:
    # {"resume": {...}} or {"data": {...}}
    if len(payload) == 1 and not any(key in payload for key in SECTIONS):
        inner = next(iter(payload.values()))
        if isinstance(inner, dict) and any(key in inner for key in SECTIONS):
            return inner
    return payload


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value).strip()


def _as_str(value: Any) -> str:
    return _as_text(value) or ""


def _as_optional_str(value: Any) -> str | None:
    return _as_text(value) or None


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    items = (_as_text(item) for item in value)
    return [item for item in items if item]


def _as_objects(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return value
    return []


def _coerce_fields(raw: dict[str, Any], model: type, nullable: set[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        value = raw.get(name)
        if info.annotation == list[str]:
            fields[name] = _as_str_list(value)
        elif name in nullable:
            fields[name] = _as_optional_str(value)
        else:
            fields[name] = _as_str(value)
    return fields


def _nullable_fields(model: type) -> set[str]:
    return {
        name
        for name, info in model.model_fields.items()
        if info.annotation == str | None
    }


def coerce_personal_info(payload: dict[str, Any]) -> PersonalInfo:
    raw = payload.get("personal_info")
    if not isinstance(raw, dict):
        # Fields sometimes come back at the top level instead of nested.
        raw = {key: payload[key] for key in PERSONAL_FIELDS if key in payload}
    return PersonalInfo(**_coerce_fields(raw, PersonalInfo, _nullable_fields(PersonalInfo)))


def _coerce_entries(value: Any, model: type) -> list[Any]:
    nullable = _nullable_fields(model)
    entries = []
    for item in _as_objects(value):
        if not isinstance(item, dict):
            logger.debug("Skipping non-object %s item: %r", model.__name__, item)
            continue
        entries.append(model(**_coerce_fields(item, model, nullable)))
    return entries


def coerce_skill_category(value: Any) -> SkillCategory:
    key = _as_str(value).lower().replace("-", "_")
    return CATEGORY_ALIASES.get(key, SkillCategory.TECHNICAL)


def coerce_skills(value: Any) -> list[SkillEntry]:
    skills = []
    for item in _as_objects(value):
        if isinstance(item, dict):
            skills.append(
                SkillEntry(
                    name=_as_str(item.get("name")),
                    category=coerce_skill_category(item.get("category")),
                    proficiency_level=_as_optional_str(item.get("proficiency_level")),
                )
            )
        elif _as_text(item):
            skills.append(SkillEntry(name=_as_str(item)))
    return skills


def coerce_completion(raw_text: str) -> ExtractedProfile:
    """Parse raw completion text into an ``ExtractedProfile``.

    Raises:
        MalformedCompletionError: if the text is not a JSON object.
    """
    payload = _unwrap_envelope(_load_object(raw_text))
    try:
        return ExtractedProfile(
            personal_info=coerce_personal_info(payload),
            experience=_coerce_entries(payload.get("experience"), ExperienceEntry),
            education=_coerce_entries(payload.get("education"), EducationEntry),
            projects=_coerce_entries(payload.get("projects"), ProjectEntry),
            skills=coerce_skills(payload.get("skills")),
        )
    except ValidationError as e:
        raise MalformedCompletionError(f"Completion does not match the profile schema: {e}") from e
