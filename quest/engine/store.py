"""GoalStore: the ordered goal collection and the score it has earned.

All mutation of goals and score goes through this class. The store does no
locking; callers serialize access.
"""

from __future__ import annotations

import logging

from quest.engine import codec
from quest.engine.errors import IndexOutOfRange, MalformedHeader, MalformedRecord
from quest.engine.goals import (
    Goal,
    RewardReport,
    SimpleGoal,
    is_complete,
    make_goal,
    record_event,
    status_line,
)
from quest.engine.storage import LineSink, LineSource, split_lines

logger = logging.getLogger(__name__)


class GoalStore:
    def __init__(self, strict_single_award: bool = False):
        # When set, a completed SimpleGoal pays out only once.
        self.strict_single_award = strict_single_award
        self._goals: list[Goal] = []
        self._score = 0

    def __len__(self) -> int:
        return len(self._goals)

    @property
    def score(self) -> int:
        return self._score

    def goals(self) -> list[Goal]:
        """Copies of the stored goals, in order."""
        return [g.model_copy(deep=True) for g in self._goals]

    def get_goal(self, index: int) -> Goal:
        self._check_index(index)
        return self._goals[index].model_copy(deep=True)

    def add_goal(
        self,
        kind: str,
        name: str,
        description: str,
        points: int,
        target: int | None = None,
        bonus: int | None = None,
    ) -> int:
        """Create a goal and append it. Returns its 0-based index.

        `target` and `bonus` are only used for ChecklistGoal.
        """
        goal = make_goal(kind, name, description, points, target=target, bonus=bonus)
        self._goals.append(goal)
        logger.debug("Added %s %r at index %d", goal.kind, goal.name, len(self._goals) - 1)
        return len(self._goals) - 1

    def list_goals(self) -> list[str]:
        return [status_line(g) for g in self._goals]

    def _check_index(self, index: int) -> None:
        # Negative indexes are rejected rather than wrapped.
        if not 0 <= index < len(self._goals):
            raise IndexOutOfRange(index, len(self._goals))

    def record_event(self, index: int) -> RewardReport:
        """Record one event on the goal at `index` and credit the score.

        The base points are always credited. The checklist bonus is credited
        only on the event that brings the goal to its target.
        """
        self._check_index(index)
        goal = self._goals[index]

        if self.strict_single_award and isinstance(goal, SimpleGoal) and goal.completed:
            logger.info("Goal %r already complete; no points awarded", goal.name)
            return RewardReport(
                points=0,
                completed=True,
                messages=[f"{goal.name} is already complete."],
            )

        report = record_event(goal)
        self._score += report.total
        logger.info(
            "Recorded %s %r: +%d (bonus %d), score now %d",
            goal.kind,
            goal.name,
            report.points,
            report.bonus,
            self._score,
        )
        return report

    def completed_count(self) -> int:
        return sum(1 for g in self._goals if is_complete(g))

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_lines(self) -> list[str]:
        return [codec.encode_header(self._score)] + [codec.encode_goal(g) for g in self._goals]

    def save(self) -> str:
        """Serialize score and goals to the flat text format."""
        return "\n".join(self.save_lines()) + "\n"

    def load_lines(self, lines: list[str]) -> None:
        """Replace score and goals with the decoded `lines`.

        Everything is decoded before the store is touched, so a malformed
        input leaves the current state as it was.
        """
        try:
            score = codec.decode_header(lines[0] if lines else None)
        except MalformedHeader:
            logger.warning("Rejected load: bad score header")
            raise
        goals: list[Goal] = []
        for line_no, line in enumerate(lines[1:], start=2):
            try:
                goals.append(codec.decode_goal(line))
            except MalformedRecord as exc:
                logger.warning("Rejected load at line %d: %s", line_no, exc.reason)
                raise MalformedRecord(exc.record, exc.reason, line_no=line_no) from exc

        self._goals = goals
        self._score = score
        logger.info("Loaded %d goals, score %d", len(goals), score)

    def load(self, blob: str) -> None:
        self.load_lines(split_lines(blob))

    def save_to(self, sink: LineSink, name: str) -> None:
        sink.write_all_lines(name, self.save_lines())
        logger.info("Saved %d goals to %s", len(self._goals), name)

    def load_from(self, source: LineSource, name: str) -> None:
        self.load_lines(source.read_all_lines(name))
