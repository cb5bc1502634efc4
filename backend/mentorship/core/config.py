from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List, Literal


_BACKEND_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Mentorship Session Core"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Storage: "memory" keeps everything in-process, "json" rewrites a single
    # document after each mutation, "sql" stores one row per entity
    STORAGE_BACKEND: Literal["memory", "json", "sql"] = "memory"
    DATA_FILE: Path = _BACKEND_DIR / "data" / "mentorship.json"
    DATABASE_URL: str = "sqlite:///./mentorship.db"

    # Seed the built-in session templates on startup
    SEED_DEFAULT_TEMPLATES: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
