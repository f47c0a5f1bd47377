"""Static goal kinds catalogue, configuration only.

Kind ids double as the record tags of the save-file format.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GoalKind:
    id: str
    label: str
    description: str
    needs_target: bool = False  # Checklist goals also take target + bonus


GOAL_KINDS: dict[str, GoalKind] = {
    "SimpleGoal": GoalKind(
        id="SimpleGoal",
        label="Simple Goal",
        description="Done once; awards its points when recorded.",
    ),
    "EternalGoal": GoalKind(
        id="EternalGoal",
        label="Eternal Goal",
        description="Never finished; awards its points every time it is recorded.",
    ),
    "ChecklistGoal": GoalKind(
        id="ChecklistGoal",
        label="Checklist Goal",
        description="Recorded a set number of times; pays a bonus on the last one.",
        needs_target=True,
    ),
}


def get_kind(kind_id: str) -> GoalKind | None:
    return GOAL_KINDS.get(kind_id)


def list_kinds() -> list[GoalKind]:
    return list(GOAL_KINDS.values())
