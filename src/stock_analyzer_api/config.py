"""Runtime configuration, read once at startup and passed to providers."""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 4000


@dataclass(frozen=True)
class Settings:
    """Explicit configuration for the API process.

    Build with Settings.from_env() in production; tests construct it directly.
    """

    gemini_api_key: str | None = None
    polygon_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    polygon_base_url: str = "https://api.polygon.io"
    cors_origin: str = "http://localhost:5173"
    rate_limit_max: int = 500
    rate_limit_window_minutes: int = 10
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment (and a local .env file, if any)."""
        load_dotenv()
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            polygon_api_key=os.getenv("POLYGON_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", cls.gemini_model),
            polygon_base_url=os.getenv("POLYGON_BASE_URL", cls.polygon_base_url),
            cors_origin=os.getenv("CORS_ORIGIN", cls.cors_origin),
            rate_limit_max=int(os.getenv("RATE_LIMIT_MAX", cls.rate_limit_max)),
            rate_limit_window_minutes=int(
                os.getenv("RATE_LIMIT_WINDOW_MINUTES", cls.rate_limit_window_minutes)
            ),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )

    def missing_keys(self) -> list[str]:
        """Names of required API keys that are not configured."""
        missing = []
        if not self.gemini_api_key:
            missing.append("GEMINI_API_KEY")
        if not self.polygon_api_key:
            missing.append("POLYGON_API_KEY")
        return missing

    def warn_if_incomplete(self) -> None:
        """Log missing API keys once. Startup continues; calls fail at request time."""
        missing = self.missing_keys()
        if missing:
            logger.warning(
                "Missing %s; upstream requests will fail until configured",
                " and ".join(missing),
            )
