"""Optional conversion of verbatim resume dates to ``YYYY-MM``.

Runs after provenance validation, so dates are always checked as the model
copied them and only reformatted afterwards.
"""

import re

from resume_extraction.schemas.profile import EducationEntry, ExperienceEntry, ExtractedProfile

MONTHS: dict[str, str] = {
    "january": "01", "jan": "01",
    "february": "02", "feb": "02",
    "march": "03", "mar": "03",
    "april": "04", "apr": "04",
    "may": "05",
    "june": "06", "jun": "06",
    "july": "07", "jul": "07",
    "august": "08", "aug": "08",
    "september": "09", "sep": "09", "sept": "09",
    "october": "10", "oct": "10",
    "november": "11", "nov": "11",
    "december": "12", "dec": "12",
}

ONGOING = {"present", "current", "now"}

YEAR_ONLY = re.compile(r"^\d{4}$")
YEAR_RANGE = re.compile(r"^(\d{4})\s*-\s*(\d{4})$")
MONTH_YEAR = re.compile(r"([A-Za-z]+)\.?\s+(\d{4})")
RANGE_SEPARATOR = " - "


def normalize_date(value: str | None) -> str | None:
    """Normalize one date string; unknown formats are returned unchanged."""
    if not value or value.strip().lower() in ONGOING:
        return None
    value = value.strip()

    if YEAR_ONLY.match(value):
        return f"{value}-01"

    m = MONTH_YEAR.search(value)
    if m:
        month = MONTHS.get(m.group(1).lower())
        if month:
            return f"{m.group(2)}-{month}"

    return value


def _split_range(start_date: str) -> tuple[str, str] | None:
    if RANGE_SEPARATOR in start_date:
        start, end = start_date.split(RANGE_SEPARATOR, 1)
        return start.strip(), end.strip()
    return None


def normalize_experience_dates(entry: ExperienceEntry) -> ExperienceEntry:
    parts = _split_range(entry.start_date)
    if parts:
        start, end = parts
        start_date = normalize_date(start) or entry.start_date
        end_date = normalize_date(end)
    else:
        start_date = normalize_date(entry.start_date) or entry.start_date
        end_date = normalize_date(entry.end_date)
    return entry.model_copy(update={"start_date": start_date, "end_date": end_date})


def normalize_education_dates(entry: EducationEntry) -> EducationEntry:
    years = YEAR_RANGE.match(entry.start_date.strip())
    if years:
        start_date, end_date = f"{years.group(1)}-01", f"{years.group(2)}-12"
    elif parts := _split_range(entry.start_date):
        start, end = parts
        start_date = normalize_date(start) or entry.start_date
        end_date = normalize_date(end)
    else:
        start_date = normalize_date(entry.start_date) or entry.start_date
        end_date = normalize_date(entry.end_date)
    return entry.model_copy(update={"start_date": start_date, "end_date": end_date})


def normalize_profile_dates(profile: ExtractedProfile) -> ExtractedProfile:
    return profile.model_copy(
        update={
            "experience": [normalize_experience_dates(e) for e in profile.experience],
            "education": [normalize_education_dates(e) for e in profile.education],
        }
    )
