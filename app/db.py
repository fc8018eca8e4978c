import os
import asyncio
import logging
from tortoise import Tortoise
from app.config import settings

_logger = logging.getLogger("db")

MODELS = [
    "app.models.user",
    "app.models.monument",
    "app.models.gallery",
]

TEST_DB_PATH = "./.test_db.sqlite3"


def _tortoise_url_from_env() -> str:
    """Normalize database URL for Tortoise ORM and force SQLite for tests."""
    # File-based SQLite under pytest so writes are visible across connections
    if "PYTEST_CURRENT_TEST" in os.environ:
        return f"sqlite://{TEST_DB_PATH}"

    url = settings.DATABASE_URL.strip().strip('"').strip("'")
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgres://", 1)
    if not url.startswith(("postgres://", "sqlite://")):
        raise ValueError("Unsupported DATABASE_URL; use postgres://... or sqlite://...")
    return url


def _build_tortoise_config() -> dict:
    return {
        "connections": {"default": _tortoise_url_from_env()},
        "apps": {
            "models": {
                "models": MODELS,
                "default_connection": "default",
            }
        },
        "use_tz": False,
        "timezone": "UTC",
    }


async def init_db(max_retries: int = 3, delay_seconds: float = 0.5) -> None:
    """Initialize the database connection and schema, retrying briefly on failure."""
    config = _build_tortoise_config()
    for attempt in range(1, max_retries + 1):
        try:
            await Tortoise.init(config=config)
            await Tortoise.generate_schemas(safe=True)
            _logger.info("Database initialized successfully")
            return
        except Exception as exc:
            if attempt == max_retries:
                _logger.error("Database unavailable after %s attempts: %s", attempt, exc)
                raise
            _logger.info(
                "DB init failed (attempt %s/%s): %s; retrying in %.1fs",
                attempt,
                max_retries,
                exc,
                delay_seconds,
            )
            await asyncio.sleep(delay_seconds)


async def close_db() -> None:
    """Close database connections in the current event loop."""
    await Tortoise.close_connections()
