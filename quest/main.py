import logging

from fastapi import FastAPI

from quest.config import settings
from quest.engine.router import router as quest_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Eternal Quest", version="0.1.0")
app.include_router(quest_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "quest": {
            "kinds": "/quest/kinds",
            "goals": "/quest/goals",
            "record": "/quest/goals/{position}/events",
            "score": "/quest/score",
            "save": "/quest/save?name={file}",
            "load": "/quest/load?name={file}",
            "export": "/quest/export",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
