# genere/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Read from GENERE_* environment variables (or a .env file).
    """

    # --- Application Meta ---
    APP_NAME: str = "genere"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE
    OTEL_SERVICE_NAME: str = "genere"

    # --- Generation ---
    # Seed used by the CLI when none is given on the command line
    DEFAULT_SEED: Optional[int] = None
    TABLE_ENCODING: str = "utf-8"

    model_config = SettingsConfigDict(env_prefix="GENERE_", env_file=".env", extra="ignore")

settings = Settings()
