"""Application configuration helpers."""

import logging
import math
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-pro"
DEFAULT_TIMEOUT_S = 60.0
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    gemini_model: str = DEFAULT_MODEL
    gemini_api_url: str = DEFAULT_API_URL
    request_timeout_s: float = DEFAULT_TIMEOUT_S
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.gemini_api_key)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number; using %s.", name, raw, default)
        return default
    if not math.isfinite(value) or value <= 0:
        logger.warning("%s must be a positive finite number; using %s.", name, default)
        return default
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables (and a local .env file)."""
    load_dotenv()

    gemini_api_key = os.getenv("GEMINI_API_KEY", "").strip()
    gemini_model = os.getenv("GEMINI_MODEL", "").strip() or DEFAULT_MODEL
    gemini_api_url = (os.getenv("GEMINI_API_URL", "").strip() or DEFAULT_API_URL).rstrip("/")
    request_timeout_s = _float_env("GEMINI_TIMEOUT_S", DEFAULT_TIMEOUT_S)
    log_level = (os.getenv("LOG_LEVEL", "").strip() or "INFO").upper()

    if not gemini_api_key:
        logger.warning("GEMINI_API_KEY is not configured; searches will fail.")

    return Settings(
        gemini_api_key=gemini_api_key,
        gemini_model=gemini_model,
        gemini_api_url=gemini_api_url,
        request_timeout_s=request_timeout_s,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once the root logger has handlers, so Streamlit reruns are safe
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
