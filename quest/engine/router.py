"""Quest HTTP router — goals, events, save/load."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from quest.auth import verify_api_key
from quest.engine.errors import IndexOutOfRange, InvalidGoal, MalformedHeader, MalformedRecord
from quest.engine.goal_kinds import list_kinds
from quest.engine.goals import Goal, is_complete, status_line
from quest.engine.models import (
    CreateGoalRequest,
    EventResult,
    GoalKindOut,
    GoalListing,
    GoalView,
    PersistResult,
    ScoreOut,
)
from quest.engine.storage import LineFileStore
from quest.engine.store import GoalStore
from quest.state import get_line_store, get_store

router = APIRouter(prefix="/quest", tags=["quest"], dependencies=[Depends(verify_api_key)])

# Plain file names only; no separators, no leading dot
FILE_NAME_PATTERN = r"^[A-Za-z0-9_-][A-Za-z0-9_.-]*$"


def _view(position: int, goal: Goal) -> GoalView:
    return GoalView(
        position=position,
        kind=goal.kind,
        status=status_line(goal),
        complete=is_complete(goal),
        goal=goal,
    )


# ---------------------------------------------------------------------------
# /quest/kinds
# ---------------------------------------------------------------------------


@router.get("/kinds", response_model=list[GoalKindOut])
async def kinds_list() -> list[GoalKindOut]:
    return [
        GoalKindOut(id=k.id, label=k.label, description=k.description, needs_target=k.needs_target)
        for k in list_kinds()
    ]


# ---------------------------------------------------------------------------
# /quest/goals
# ---------------------------------------------------------------------------


@router.get("/goals", response_model=GoalListing)
async def goals_list(store: GoalStore = Depends(get_store)) -> GoalListing:
    return GoalListing(
        score=store.score,
        completed=store.completed_count(),
        goals=[_view(i, g) for i, g in enumerate(store.goals(), start=1)],
    )


@router.post("/goals", response_model=GoalView, status_code=201)
async def goal_create(
    body: CreateGoalRequest,
    store: GoalStore = Depends(get_store),
) -> GoalView:
    try:
        index = store.add_goal(
            body.kind,
            body.name,
            body.description,
            body.points,
            target=body.target,
            bonus=body.bonus,
        )
    except InvalidGoal as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return _view(index + 1, store.get_goal(index))


@router.post("/goals/{position}/events", response_model=EventResult)
async def goal_record_event(
    position: int,
    store: GoalStore = Depends(get_store),
) -> EventResult:
    try:
        reward = store.record_event(position - 1)
    except IndexOutOfRange:
        raise HTTPException(status_code=404, detail=f"Invalid goal number: {position}")
    return EventResult(position=position, reward=reward, score=store.score)


@router.get("/score", response_model=ScoreOut)
async def score_get(store: GoalStore = Depends(get_store)) -> ScoreOut:
    return ScoreOut(score=store.score)


# ---------------------------------------------------------------------------
# /quest/save, /quest/load, /quest/export
# ---------------------------------------------------------------------------


# Save/load do their file I/O on the event loop, which keeps them serialized
# with the other store mutations.
@router.post("/save", response_model=PersistResult)
async def goals_save(
    name: str = Query(..., pattern=FILE_NAME_PATTERN, description="Save file name"),
    store: GoalStore = Depends(get_store),
    lines: LineFileStore = Depends(get_line_store),
) -> PersistResult:
    try:
        store.save_to(lines, name)
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Could not save {name}: {exc.strerror or exc}")
    return PersistResult(name=name, goals=len(store), score=store.score)


@router.post("/load", response_model=PersistResult)
async def goals_load(
    name: str = Query(..., pattern=FILE_NAME_PATTERN, description="Save file name"),
    store: GoalStore = Depends(get_store),
    lines: LineFileStore = Depends(get_line_store),
) -> PersistResult:
    try:
        store.load_from(lines, name)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"File not found: {name}")
    except (MalformedHeader, MalformedRecord) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except OSError as exc:
        raise HTTPException(status_code=500, detail=f"Could not load {name}: {exc.strerror or exc}")
    return PersistResult(name=name, goals=len(store), score=store.score)


@router.get("/export", response_class=PlainTextResponse)
async def goals_export(store: GoalStore = Depends(get_store)) -> str:
    return store.save()
