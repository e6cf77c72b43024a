from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from fitness_tracker.api.dashboard import router as dashboard_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.weights import router as weights_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.core.logger import setup_logger
from fitness_tracker.db.session import init_db

setup_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Create missing tables on startup; existing data is loaded as is."""
    init_db()
    logger.info("Fitness tracker API started")
    yield
    logger.info("Fitness tracker API stopped")


app = FastAPI(title="Fitness Tracker", lifespan=lifespan)

app.include_router(workouts_router)
app.include_router(weights_router)
app.include_router(profile_router)
app.include_router(dashboard_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
