"""Normalize raw profile data into scoring snapshots.

Profile rows arrive from several places (database, YAML files, form posts)
that disagree on day names ("Mon" vs "monday"), column names
("time_of_day" vs "time_slot") and may carry duplicate skills or bogus
team sizes. Everything is cleaned here so the scorer can stay pure.
"""
import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from src.matching.compatibility import ProfileSnapshot, Skill

logger = logging.getLogger(__name__)

DAYS_OF_WEEK = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
TIME_SLOTS = ("morning", "afternoon", "evening")

MIN_TEAM_SIZE = 2
MAX_TEAM_SIZE = 4

_DAY_ALIASES = {day[:3]: day for day in DAYS_OF_WEEK}
_DAY_ALIASES.update({"tues": "tuesday", "wed": "wednesday", "thur": "thursday", "thurs": "thursday"})


def normalize_day(value: str) -> str:
    """Map "Mon", "mon", "MONDAY" etc. to the canonical full day name.

    Unknown values are stripped and lowercased and passed through.
    """
    key = (value or "").strip().lower().rstrip(".")
    if key in DAYS_OF_WEEK:
        return key
    return _DAY_ALIASES.get(key, key)


def normalize_time_slot(value: str) -> str:
    return (value or "").strip().lower()


def normalize_availability(entries: Optional[Iterable[Any]]) -> frozenset[tuple[str, str]]:
    """Convert availability rows to a set of (day, slot) pairs.

    Accepts mappings with ``day_of_week`` and ``time_slot`` or
    ``time_of_day``, or plain (day, slot) pairs. Incomplete entries are
    dropped.
    """
    slots = set()
    for entry in entries or ():
        if isinstance(entry, Mapping):
            day = entry.get("day_of_week")
            slot = entry.get("time_slot") or entry.get("time_of_day")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            day, slot = entry
        else:
            logger.debug("Dropping malformed availability entry: %r", entry)
            continue

        day = normalize_day(day) if day else ""
        slot = normalize_time_slot(slot) if slot else ""
        if not day or not slot:
            logger.debug("Dropping incomplete availability entry: %r", entry)
            continue
        slots.add((day, slot))
    return frozenset(slots)


def normalize_team_size(value: Any) -> Optional[int]:
    """Return a team size in the supported range, or None.

    Missing, non-numeric, non-finite, fractional and out-of-range values
    are ignored so the scorer treats the preference as unspecified.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric team size preference: %r", value)
        return None

    if not math.isfinite(number) or not number.is_integer():
        logger.debug("Ignoring invalid team size preference: %r", value)
        return None

    size = int(number)
    if size < MIN_TEAM_SIZE or size > MAX_TEAM_SIZE:
        logger.debug("Ignoring out-of-range team size preference: %r", value)
        return None
    return size


def dedupe_skills(skills: Optional[Iterable[Skill]]) -> frozenset[Skill]:
    """Collapse skills to one per id, keeping the first occurrence."""
    seen: dict[str, Skill] = {}
    for skill in skills or ():
        if skill is None:
            continue
        seen.setdefault(skill.id, skill)
    return frozenset(seen.values())


def normalize_interests(values: Optional[Iterable[str]]) -> tuple[str, ...]:
    """Strip whitespace and drop blank interest tags, preserving order."""
    return tuple(v.strip() for v in values or () if v and v.strip())


def build_snapshot(
    skills: Optional[Iterable[Skill]] = None,
    looking_for: Optional[Iterable[Skill]] = None,
    availability: Optional[Iterable[Any]] = None,
    project_interests: Optional[Iterable[str]] = None,
    team_size_preference: Any = None,
) -> ProfileSnapshot:
    """Build a clean ProfileSnapshot from raw profile fields."""
    return ProfileSnapshot(
        skills=dedupe_skills(skills),
        looking_for=dedupe_skills(looking_for),
        availability=normalize_availability(availability),
        project_interests=normalize_interests(project_interests),
        team_size_preference=normalize_team_size(team_size_preference),
    )
