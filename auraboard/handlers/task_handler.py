from fastapi import FastAPI
from mangum import Mangum
from auraboard import config
from auraboard.errors import install_error_handlers
from auraboard.logging_setup import setup_logging
from auraboard.routers.profile_router import router as profile_router
from auraboard.routers.task_router import router as task_router

setup_logging(config.LOG_LEVEL)

app = FastAPI(title="Task Lambda")
install_error_handlers(app)
app.include_router(task_router, prefix="/tasks")
app.include_router(profile_router, prefix="/profile")

handler = Mangum(app)
