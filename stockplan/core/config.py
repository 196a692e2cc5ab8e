import os
from functools import lru_cache


class Settings:
    """Client settings loaded from environment.

    Uses dotenv if present (optional) and falls back to sensible defaults.
    """

    def __init__(self, api_base_url: str | None = None, timeout: float | None = None) -> None:
        # Attempt to load .env if python-dotenv is available
        try:
            from dotenv import load_dotenv  # type: ignore

            load_dotenv()
        except ImportError:
            pass

        self.API_BASE_URL: str = api_base_url or os.getenv(
            "STOCKPLAN_API_BASE_URL", "http://localhost:8080/api"
        )
        raw_timeout = os.getenv("STOCKPLAN_TIMEOUT")
        self.TIMEOUT: float | None = timeout if timeout is not None else (
            float(raw_timeout) if raw_timeout else None
        )
        self.LOG_LEVEL: str = os.getenv("STOCKPLAN_LOG_LEVEL", "INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
