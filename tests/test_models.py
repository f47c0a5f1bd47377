"""Tests for the goal and HTTP contract models."""

from pydantic import TypeAdapter

from quest.engine.goals import ChecklistGoal, EternalGoal, Goal, RewardReport, SimpleGoal
from quest.engine.models import GoalListing, GoalView


class TestGoalDiscriminator:
    def test_parses_by_kind(self):
        adapter = TypeAdapter(Goal)
        goal = adapter.validate_python(
            {"kind": "ChecklistGoal", "name": "Read", "description": "Read", "points": 10, "target": 3, "bonus": 50}
        )
        assert isinstance(goal, ChecklistGoal)

    def test_kind_defaults(self):
        assert SimpleGoal(name="a", description="b", points=1).kind == "SimpleGoal"
        assert EternalGoal(name="a", description="b", points=1).kind == "EternalGoal"

    def test_equality_is_by_value(self):
        assert EternalGoal(name="a", description="b", points=1) == EternalGoal(name="a", description="b", points=1)
        assert EternalGoal(name="a", description="b", points=1) != EternalGoal(name="a", description="b", points=2)


class TestRewardReport:
    def test_total_in_dump(self):
        data = RewardReport(points=10, bonus=50, completed=True).model_dump()
        assert data["total"] == 60
        assert data["messages"] == []


class TestGoalListingSerialization:
    def test_view_json(self):
        listing = GoalListing(
            score=5,
            completed=0,
            goals=[
                GoalView(
                    position=1,
                    kind="EternalGoal",
                    status="[∞] Pray (Daily)",
                    complete=False,
                    goal=EternalGoal(name="Pray", description="Daily", points=5),
                )
            ],
        )
        data = listing.model_dump(mode="json")
        assert data["goals"][0]["goal"]["kind"] == "EternalGoal"
        assert data["score"] == 5
