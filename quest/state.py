"""Process-wide goal store and save-file storage, exposed as FastAPI dependencies."""

from quest.config import settings
from quest.engine.storage import LineFileStore
from quest.engine.store import GoalStore

goal_store = GoalStore(strict_single_award=settings.strict_single_award)
line_store = LineFileStore(settings.save_dir)


def get_store() -> GoalStore:
    return goal_store


def get_line_store() -> LineFileStore:
    return line_store
