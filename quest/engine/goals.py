"""Goal variants and their behavior.

The variant set is closed: SimpleGoal, EternalGoal and ChecklistGoal are
pydantic models discriminated by ``kind``. Behavior lives in plain functions
that branch over the three models, so adding a variant means touching each
of them (and the codec).
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, ValidationError, computed_field, field_validator

from quest.engine.errors import InvalidGoal
from quest.engine.goal_kinds import get_kind


class _GoalBase(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    points: int

    @field_validator("name", "description")
    @classmethod
    def _persistable(cls, value: str) -> str:
        if "|" in value or "\n" in value or "\r" in value:
            raise ValueError("must not contain '|' or line breaks")
        return value


class SimpleGoal(_GoalBase):
    kind: Literal["SimpleGoal"] = "SimpleGoal"
    completed: bool = False


class EternalGoal(_GoalBase):
    kind: Literal["EternalGoal"] = "EternalGoal"


class ChecklistGoal(_GoalBase):
    kind: Literal["ChecklistGoal"] = "ChecklistGoal"
    target: int
    bonus: int
    amount_completed: int = 0


Goal = Annotated[Union[SimpleGoal, EternalGoal, ChecklistGoal], Field(discriminator="kind")]


class RewardReport(BaseModel):
    """Outcome of a single recorded event."""

    points: int
    bonus: int = 0
    completed: bool = False
    messages: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.points + self.bonus


def _unknown(goal: object) -> TypeError:
    return TypeError(f"Unknown goal type: {type(goal).__name__}")


def is_complete(goal: Goal) -> bool:
    if isinstance(goal, SimpleGoal):
        return goal.completed
    if isinstance(goal, EternalGoal):
        return False
    if isinstance(goal, ChecklistGoal):
        return goal.amount_completed >= goal.target
    raise _unknown(goal)


def record_event(goal: Goal) -> RewardReport:
    """Apply one event to `goal` and report what it earned.

    Never fails. A SimpleGoal that is already complete is awarded again.
    The checklist bonus is paid only by the event that crosses the target.
    """
    if isinstance(goal, SimpleGoal):
        goal.completed = True
        return RewardReport(
            points=goal.points,
            completed=True,
            messages=[f"Congrats! You earned {goal.points} points."],
        )
    if isinstance(goal, EternalGoal):
        return RewardReport(
            points=goal.points,
            completed=False,
            messages=[f"Good job! You earned {goal.points} points."],
        )
    if isinstance(goal, ChecklistGoal):
        was_complete = is_complete(goal)
        goal.amount_completed += 1
        done = is_complete(goal)
        messages = [f"Well done! You earned {goal.points} points."]
        bonus = 0
        if done and not was_complete:
            bonus = goal.bonus
            messages.append(f"Bonus! You earned {goal.bonus} extra points!")
        return RewardReport(points=goal.points, bonus=bonus, completed=done, messages=messages)
    raise _unknown(goal)


def status_line(goal: Goal) -> str:
    """One-line rendering, e.g. ``[ ] Read (Read scriptures) -- Completed 1/3``."""
    if isinstance(goal, EternalGoal):
        return f"[∞] {goal.name} ({goal.description})"
    if isinstance(goal, (SimpleGoal, ChecklistGoal)):
        checkbox = "[X]" if is_complete(goal) else "[ ]"
        line = f"{checkbox} {goal.name} ({goal.description})"
        if isinstance(goal, ChecklistGoal):
            line += f" -- Completed {goal.amount_completed}/{goal.target}"
        return line
    raise _unknown(goal)


def make_goal(
    kind: str,
    name: str,
    description: str,
    points: int,
    target: int | None = None,
    bonus: int | None = None,
) -> Goal:
    """Build a fresh goal of `kind`. Raises InvalidGoal on bad arguments."""
    goal_kind = get_kind(kind)
    if goal_kind is None:
        raise InvalidGoal(f"Unknown goal kind: {kind!r}")
    if goal_kind.needs_target and (target is None or bonus is None):
        raise InvalidGoal(f"{kind} requires both target and bonus")

    try:
        if kind == "SimpleGoal":
            return SimpleGoal(name=name, description=description, points=points)
        if kind == "EternalGoal":
            return EternalGoal(name=name, description=description, points=points)
        return ChecklistGoal(
            name=name,
            description=description,
            points=points,
            target=target,
            bonus=bonus,
        )
    except ValidationError as exc:
        detail = "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors())
        raise InvalidGoal(f"Invalid {kind}: {detail}") from exc
