import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> str:
    val = os.getenv(name, default)
    if val is None or val.strip() == "":
        raise RuntimeError(f"Missing required environment variable: {name}")
    return val.strip()


def _parse_origins(raw: str) -> list[str]:
    raw = (raw or "").strip()
    if not raw or raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


DATABASE_URL = _get_env("DATABASE_URL", "sqlite:///./career_guidance.db")

AUTH_SERVICE_URL = _get_env("AUTH_SERVICE_URL", "http://auth-service:8001").rstrip("/")
SUGGESTION_SERVICE_URL = _get_env("SUGGESTION_SERVICE_URL", "http://localhost:8000/ai/suggestions")
SUGGESTION_TIMEOUT = float(_get_env("SUGGESTION_TIMEOUT", "10"))

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_MODEL = _get_env("OPENROUTER_MODEL", "deepseek/deepseek-r1-0528:free")
OPENROUTER_SITE_URL = _get_env("OPENROUTER_SITE_URL", "http://localhost")
OPENROUTER_APP_NAME = _get_env("OPENROUTER_APP_NAME", "career-guidance")

CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", "*"))
LOG_LEVEL = _get_env("LOG_LEVEL", "INFO").upper()
PORT = int(_get_env("PORT", "8000"))


def openrouter_api_key() -> str | None:
    # read lazily so a key added after startup (or in tests) is picked up
    return os.getenv("OPENROUTER_API_KEY")
