import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from auraboard import config
from auraboard.database import init_models
from auraboard.errors import install_error_handlers
from auraboard.logging_setup import setup_logging
from auraboard.routers import profile_router, reflection_router, task_router

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.CREATE_TABLES:
        logger.info("creating tables")
        await init_models()
    yield


app = FastAPI(title="AuraBoard", lifespan=lifespan)
install_error_handlers(app)

app.include_router(task_router.router, prefix="/tasks", tags=["Tasks"])
app.include_router(reflection_router.router, prefix="/reflection", tags=["Reflection"])
app.include_router(profile_router.router, prefix="/profile", tags=["Profile"])


# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("auraboard.main:app", host="0.0.0.0", port=8000)
