"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All job tracker configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: jobify/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# Load .env into environment BEFORE pydantic reads. override=True ensures .env
# values override any shell env. When .env doesn't exist (prod), this is a no-op.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "Jobify"
    app_version: str = "1.0.0"
    port: int = 8001

    # Database
    database_url: str = "sqlite:///./jobify.db"

    # Auth
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Redirect targets (unauthenticated callers, missing jobs, failed reports)
    public_entry_path: str = "/"
    jobs_redirect_path: str = "/jobs"

    # Redis
    redis_url: str = ""

    # Cache TTLs (seconds)
    stats_cache_ttl: int = 120
    charts_cache_ttl: int = 300

    # Jobs listing / charts
    jobs_page_size: int = 10
    jobs_max_page_size: int = 100
    charts_window_months: int = 6

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, business config) ---

# Status filter value meaning "no status filter"
STATUS_ALL: str = "all"

# Monthly chart label, e.g. "Apr 25"
MONTH_LABEL_FORMAT: str = "%b %y"

# Response header listing the client query keys a mutation made stale
INVALIDATE_HEADER: str = "X-Invalidate-Queries"
