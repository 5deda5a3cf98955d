import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    EMPLOYEE_API_URL: str = "http://localhost:8112/api/v1/employee"
    EMPLOYEE_API_TIMEOUT: float = 30.0

    TOP_EARNERS_LIMIT: int = 10

    CORS_ORIGINS: str = "http://localhost:5173"

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
