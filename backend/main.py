import logging
from fastapi import FastAPI

from dotenv import load_dotenv
load_dotenv()

from backend.api import router_summarization
from backend.core.config import settings
from backend.core.errors import register_exception_handlers
from backend.core.logging_config import setup_logging
from backend.core.middleware import RequestIdMiddleware

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Backend API for Summora, the AI text summarizer.",
)

app.add_middleware(RequestIdMiddleware)
register_exception_handlers(app)

app.include_router(router_summarization.router)


@app.on_event("startup")
def on_startup():
    logger.info("Starting %s (env=%s, model=%s)", settings.app_name, settings.environment, settings.llm_model)


@app.get("/health")
def health_check():
    logger.info("Health check endpoint called")
    return {
        "status": "ok",
        "message": "Summora backend is running.",
        "env": settings.environment,
        "model": settings.llm_model,
    }
