"""Environment configuration for the store services."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[2]


def load_environment(repo_root: Path = REPO_ROOT) -> Path | None:
    """Load ``.env.<ENVIRONMENT>`` or ``.env`` from the repository root.

    Values already present in the process environment win over both files.

    Returns:
        The file that was loaded, or None if neither exists
    """
    environment = os.getenv("ENVIRONMENT", "development")
    for candidate in (repo_root / f".env.{environment}", repo_root / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=False)
            logger.debug(f"Loaded environment from {candidate}")
            return candidate
    return None


def build_db_connection_string() -> str:
    """
    Build PostgreSQL connection string from environment variables.

    Checks DATABASE_URL first, then falls back to individual POSTGRES_* variables.

    Returns:
        PostgreSQL connection string
    """
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    host = os.getenv("POSTGRES_HOST", "localhost")
    port = os.getenv("POSTGRES_PORT", "5432")
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD", "postgres")
    db = os.getenv("POSTGRES_DB", "jobly")
    ssl_mode = os.getenv("POSTGRES_SSL_MODE", "")

    conn_str = f"postgresql://{user}:{password}@{host}:{port}/{db}"
    if ssl_mode:
        conn_str += f"?sslmode={ssl_mode}"
    return conn_str
