import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

SAVE_METHODS = ("POST", "PUT")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Remote prompt service
    api_base: str = os.getenv("API_BASE", "http://localhost:8080").rstrip("/")
    prompt_save_method: str = os.getenv("PROMPT_SAVE_METHOD", "POST").upper()
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30.0"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.prompt_save_method not in SAVE_METHODS:
            raise ValueError(
                f"PROMPT_SAVE_METHOD must be one of {list(SAVE_METHODS)}, "
                f"got {self.prompt_save_method}"
            )

        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be greater than 0")

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL is not a valid logging level: {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
