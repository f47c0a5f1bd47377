"""Request/response contracts for the quest HTTP surface — Pydantic v2 models."""

from __future__ import annotations

from pydantic import BaseModel

from quest.engine.goals import Goal, RewardReport


class GoalKindOut(BaseModel):
    id: str
    label: str
    description: str
    needs_target: bool = False


class CreateGoalRequest(BaseModel):
    kind: str  # "SimpleGoal" | "EternalGoal" | "ChecklistGoal"
    name: str
    description: str
    points: int
    target: int | None = None  # ChecklistGoal only
    bonus: int | None = None  # ChecklistGoal only


class GoalView(BaseModel):
    position: int  # 1-based
    kind: str
    status: str
    complete: bool
    goal: Goal


class GoalListing(BaseModel):
    score: int
    completed: int  # Goals currently complete
    goals: list[GoalView]


class EventResult(BaseModel):
    position: int
    reward: RewardReport
    score: int


class ScoreOut(BaseModel):
    score: int


class PersistResult(BaseModel):
    name: str
    goals: int
    score: int
