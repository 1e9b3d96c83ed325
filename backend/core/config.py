import os
from pydantic import BaseModel

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings(BaseModel):
    app_name: str = "Summora API"
    app_version: str = "0.1.0"

    environment: str = os.getenv("APP_ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    log_file: str = os.getenv("LOG_FILE", "logs/app.log")

    api_key: str = os.getenv("API_KEY", "")
    llm_base_url: str = os.getenv("LLM_BASE_URL", GEMINI_OPENAI_BASE_URL)
    llm_model: str = os.getenv("LLM_MODEL", "gemini-3-flash-preview")


settings = Settings()
