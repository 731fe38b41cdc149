"""Provenance validation: keep only what the source document actually says.

Each composite entry is gated on its identifying field (company, institution,
project name, skill name). If that value is not found in the source text the
whole entry is dropped; otherwise the entry is kept as extracted. Sibling
fields such as responsibilities or achievements are not checked unless
``strict`` is set, which means a fabricated achievement under a real employer
survives the default pass.

Links (linkedin, github, portfolio, project_url) are never checked because
models routinely normalise or shorten URLs.

Validation never raises. A profile where nothing verified is still a valid
result with blank scalars and empty arrays.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel

from resume_extraction.schemas.parse_result import DroppedItem
from resume_extraction.schemas.profile import ExtractedProfile, PersonalInfo
from resume_extraction.services.text_normalizer import contains_verbatim

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound=BaseModel)

VERIFIED_PERSONAL_FIELDS = ("name", "email", "phone", "location")

# Identifying field for each section.
ENTRY_KEYS: dict[str, str] = {
    "experience": "company",
    "education": "institution",
    "projects": "name",
    "skills": "name",
}

UNCHECKED_FIELDS = frozenset(
    {"linkedin", "github", "portfolio", "project_url", "professional_summary", "category"}
)

NOT_IN_SOURCE = "not found in source text"
EMPTY_KEY = "identifying field is empty"


class _DropLog:
    def __init__(self) -> None:
        self.items: list[DroppedItem] = []

    def add(self, field: str, value: str, reason: str) -> None:
        logger.warning("Dropping %s %r: %s", field, value, reason)
        self.items.append(DroppedItem(field=field, value=value, reason=reason))


def _check_fields(
    model: EntryT,
    source_text: str,
    fields: tuple[str, ...],
    path: str,
    drops: _DropLog,
) -> dict:
    """Blank unverified scalars and filter unverified list items."""
    updates: dict = {}
    for name in fields:
        value = getattr(model, name)
        if isinstance(value, list):
            kept = [item for item in value if contains_verbatim(source_text, item)]
            for item in value:
                if item not in kept:
                    drops.add(f"{path}.{name}", item, NOT_IN_SOURCE)
            if len(kept) != len(value):
                updates[name] = kept
        elif isinstance(value, str) and value and not contains_verbatim(source_text, value):
            drops.add(f"{path}.{name}", value, NOT_IN_SOURCE)
            updates[name] = None if type(model).model_fields[name].annotation != str else ""
    return updates


def validate_personal_info(
    personal_info: PersonalInfo,
    source_text: str,
    drops: _DropLog,
) -> PersonalInfo:
    updates = _check_fields(
        personal_info, source_text, VERIFIED_PERSONAL_FIELDS, "personal_info", drops
    )
    return personal_info.model_copy(update=updates) if updates else personal_info


def _sibling_fields(entry: BaseModel, key: str) -> tuple[str, ...]:
    return tuple(
        name for name in type(entry).model_fields if name != key and name not in UNCHECKED_FIELDS
    )


def validate_entries(
    section: str,
    entries: list[EntryT],
    source_text: str,
    drops: _DropLog,
    strict: bool = False,
) -> list[EntryT]:
    key = ENTRY_KEYS[section]
    kept: list[EntryT] = []
    for index, entry in enumerate(entries):
        path = f"{section}[{index}]"
        value = getattr(entry, key)
        if not value or not value.strip():
            drops.add(f"{path}.{key}", value, EMPTY_KEY)
            continue
        if not contains_verbatim(source_text, value):
            drops.add(f"{path}.{key}", value, NOT_IN_SOURCE)
            continue
        if strict:
            updates = _check_fields(
                entry, source_text, _sibling_fields(entry, key), path, drops
            )
            if updates:
                entry = entry.model_copy(update=updates)
        kept.append(entry)
    return kept


def validate_profile_with_report(
    profile: ExtractedProfile,
    source_text: str,
    *,
    strict: bool = False,
) -> tuple[ExtractedProfile, list[DroppedItem]]:
    """Validate ``profile`` against ``source_text`` and report what was removed."""
    drops = _DropLog()
    validated = ExtractedProfile(
        personal_info=validate_personal_info(profile.personal_info, source_text, drops),
        experience=validate_entries("experience", profile.experience, source_text, drops, strict),
        education=validate_entries("education", profile.education, source_text, drops, strict),
        projects=validate_entries("projects", profile.projects, source_text, drops, strict),
        skills=validate_entries("skills", profile.skills, source_text, drops, strict),
    )
    logger.info(
        "Provenance check kept %d experience, %d education, %d projects, %d skills "
        "(%d values dropped)",
        len(validated.experience),
        len(validated.education),
        len(validated.projects),
        len(validated.skills),
        len(drops.items),
    )
    return validated, drops.items


def validate_profile(
    profile: ExtractedProfile,
    source_text: str,
    *,
    strict: bool = False,
) -> ExtractedProfile:
    validated, _ = validate_profile_with_report(profile, source_text, strict=strict)
    return validated

