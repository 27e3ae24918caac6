from fastapi import FastAPI
from mangum import Mangum
from auraboard import config
from auraboard.errors import install_error_handlers
from auraboard.logging_setup import setup_logging
from auraboard.routers.reflection_router import router as reflection_router

setup_logging(config.LOG_LEVEL)

app = FastAPI(title="Reflection Lambda")
install_error_handlers(app)
app.include_router(reflection_router, prefix="/reflection")

handler = Mangum(app)
