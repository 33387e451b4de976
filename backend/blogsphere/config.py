"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection string and port come from the environment (or .env), never hardcoded at call sites
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults work out-of-the-box against a local MongoDB
    - static_dir anchored at the project root so launching from another directory still serves public/
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
MONGO_SCHEMES = ("mongodb://", "mongodb+srv://")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    mongo_uri: str = "mongodb://127.0.0.1:27017/blogsphere"
    mongo_database: str = "blogsphere"
    mongo_server_selection_timeout_ms: int = 5000

    @field_validator("mongo_uri", mode="before")
    @classmethod
    def check_mongo_scheme(cls, v: str) -> str:
        """Reject connection strings the driver cannot parse as MongoDB URIs."""
        if isinstance(v, str):
            v = v.strip()
            if not v.startswith(MONGO_SCHEMES):
                raise ValueError(
                    "mongo_uri must start with mongodb:// or mongodb+srv://",
                )
        return v

    # API
    cors_origins: list[str] = ["*"]
    static_dir: str = str(PROJECT_ROOT / "public")

    @field_validator("static_dir", mode="after")
    @classmethod
    def anchor_static_dir(cls, v: str) -> str:
        """Relative asset directories resolve against the project root, not the cwd."""
        path = Path(v)
        return str(path if path.is_absolute() else PROJECT_ROOT / path)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
