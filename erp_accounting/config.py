"""
Application configuration, read from environment variables
(and a .env file, if present).

DATABASE_URL        where the books are stored (SQLite by default)
DEFAULT_OWNER_ID    owner used when a request has no X-Owner-Id header
DEFAULT_BUSINESS_NAME
                    name the default chart of accounts is seeded with
                    when the seed request does not give one
LOG_LEVEL, DEBUG    logging and FastAPI debug mode
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Settings:
    """Settings for one running ERP instance."""

    APP_NAME: str = "Small Business ERP Accounting"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = _env_flag("DEBUG")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./erp_accounting.db"
    )

    # Books are partitioned by owner
    DEFAULT_OWNER_ID: str = os.getenv("DEFAULT_OWNER_ID", "default")
    DEFAULT_BUSINESS_NAME: str = os.getenv(
        "DEFAULT_BUSINESS_NAME", "My Business"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
