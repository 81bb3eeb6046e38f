"""
Configuration from environment variables
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "case_sensitive": True}
    """Application settings from environment variables"""

    # Remote User API
    # Base location only, resource paths (/user, /user/{id}) are appended
    USER_API_URL: str = "https://xamil.chickenkiller.com/api"
    # None keeps the httpx default timeout
    USER_API_TIMEOUT: Optional[float] = None

    # Screen rendering
    # strftime pattern for the Created column, None renders M/D/YYYY
    DATE_FORMAT: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # FastAPI Configuration
    FASTAPI_HOST: str = "0.0.0.0"
    FASTAPI_PORT: int = 8000

    # CORS Configuration (only the JSON state endpoint is of interest to other origins)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


# Global settings instance
settings = Settings()
