"""Line codec for the save-file format.

    <score>
    SimpleGoal|<name>|<description>|<points>|<True|False>
    EternalGoal|<name>|<description>|<points>
    ChecklistGoal|<name>|<description>|<points>|<bonus>|<target>|<amount_completed>

Pure functions; decoding raises MalformedHeader / MalformedRecord and never
touches any store.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from quest.engine.errors import MalformedHeader, MalformedRecord
from quest.engine.goals import ChecklistGoal, EternalGoal, Goal, SimpleGoal

DELIMITER = "|"

# Field count per record tag, tag included
ARITY: dict[str, int] = {
    "SimpleGoal": 5,
    "EternalGoal": 4,
    "ChecklistGoal": 7,
}

_INT_RE = re.compile(r"-?[0-9]+")
_BOOLS = {"True": True, "False": False}


def encode_header(score: int) -> str:
    return str(score)


def decode_header(line: str | None) -> int:
    if line is None:
        raise MalformedHeader(None)
    stripped = line.strip()
    if not _INT_RE.fullmatch(stripped):
        raise MalformedHeader(line)
    return int(stripped)


def encode_goal(goal: Goal) -> str:
    if isinstance(goal, SimpleGoal):
        fields = [goal.kind, goal.name, goal.description, str(goal.points), str(goal.completed)]
    elif isinstance(goal, EternalGoal):
        fields = [goal.kind, goal.name, goal.description, str(goal.points)]
    elif isinstance(goal, ChecklistGoal):
        # bonus precedes target
        fields = [
            goal.kind,
            goal.name,
            goal.description,
            str(goal.points),
            str(goal.bonus),
            str(goal.target),
            str(goal.amount_completed),
        ]
    else:
        raise TypeError(f"Unknown goal type: {type(goal).__name__}")
    return DELIMITER.join(fields)


def _int_field(record: str, value: str, field: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise MalformedRecord(record, f"{field} is not an integer")
    return int(value)


def decode_goal(record: str) -> Goal:
    """Parse one record line into a goal with its stored progress."""
    parts = record.split(DELIMITER)
    tag = parts[0]
    expected = ARITY.get(tag)
    if expected is None:
        raise MalformedRecord(record, f"unknown goal type {tag!r}")
    if len(parts) != expected:
        raise MalformedRecord(record, f"{tag} expects {expected} fields, got {len(parts)}")

    name, description = parts[1], parts[2]
    points = _int_field(record, parts[3], "points")

    try:
        if tag == "SimpleGoal":
            if parts[4] not in _BOOLS:
                raise MalformedRecord(record, "completed flag must be True or False")
            return SimpleGoal(
                name=name,
                description=description,
                points=points,
                completed=_BOOLS[parts[4]],
            )
        if tag == "EternalGoal":
            return EternalGoal(name=name, description=description, points=points)
        return ChecklistGoal(
            name=name,
            description=description,
            points=points,
            bonus=_int_field(record, parts[4], "bonus"),
            target=_int_field(record, parts[5], "target"),
            amount_completed=_int_field(record, parts[6], "amount_completed"),
        )
    except ValidationError as exc:
        raise MalformedRecord(record, f"invalid field values ({exc.error_count()} errors)") from exc
