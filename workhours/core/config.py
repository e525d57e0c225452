import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def parse_list_env(env_var: str, default: List[str] = None) -> List[str]:
    """Parse comma-separated environment variable into list"""
    if default is None:
        default = []

    value = os.getenv(env_var, "")
    if not value.strip():
        return default

    return [item.strip() for item in value.split(",") if item.strip()]

def parse_bool_env(env_var: str, default: bool = False) -> bool:
    """Parse boolean environment variable"""
    return os.getenv(env_var, str(default)).lower() in ("true", "1", "yes", "on")

class ShiftFormConfig:
    """Shift entry form settings from Environment"""

    # Break menu: fixed increments up to a ceiling
    BREAK_STEP_MINUTES = int(os.getenv("BREAK_STEP_MINUTES", "15"))
    MAX_BREAK_MINUTES = int(os.getenv("MAX_BREAK_MINUTES", "120"))
    BREAK_MINUTE_OPTIONS = list(range(0, MAX_BREAK_MINUTES + 1, BREAK_STEP_MINUTES))

class ServerConfig:
    """Server Configuration from Environment"""

    # Server settings
    HOST = os.getenv("WORKHOURS_HOST", "0.0.0.0")
    PORT = int(os.getenv("WORKHOURS_PORT", "8000"))
    WORKERS = int(os.getenv("WORKHOURS_WORKERS", "1"))
    LOG_LEVEL = os.getenv("WORKHOURS_LOG_LEVEL", "info")

    # Database settings
    DATABASE_PATH = os.getenv("DATABASE_PATH", "workhours.db")

    # Development settings
    SEED_TEST_DATA = parse_bool_env("SEED_TEST_DATA", True)
    DEVELOPMENT_MODE = parse_bool_env("DEVELOPMENT_MODE", False)
    ENABLE_API_DOCS = parse_bool_env("ENABLE_API_DOCS", True)

    # CORS settings
    CORS_ORIGINS = parse_list_env("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = parse_bool_env("CORS_ALLOW_CREDENTIALS", True)

    # App metadata
    APP_NAME = os.getenv("APP_NAME", "Work Hours Tracker")
    APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
    APP_DESCRIPTION = os.getenv("APP_DESCRIPTION", "Shift logging with pay-period classification and history reports")
