"""Environment configuration. Uses python-dotenv.

Reads `.env` from the project root once per accessor call; callers use the
functions below instead of touching `os.environ` directly.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_FALSY = {"0", "false", "no", "off"}


def project_root() -> Path:
    return Path(__file__).resolve().parent


def load_config() -> None:
    """Load .env from project root. Idempotent; existing env vars win."""
    load_dotenv(project_root() / ".env", override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def get_flag(key: str, default: bool) -> bool:
    raw = get_optional(key, "")
    if not raw:
        return default
    return raw.lower() not in _FALSY


# --- Public config accessors ---

def log_level() -> int:
    """Optional: LOG_LEVEL name. Default INFO; unknown names fall back to INFO."""
    name = get_optional("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def log_file() -> Optional[Path]:
    """Optional: LOG_FILE path. Logs go to stderr only when unset."""
    val = get_optional("LOG_FILE", "")
    return Path(val) if val else None


def seed_sample_data() -> bool:
    """Optional: SEED_SAMPLE_DATA. Default on."""
    return get_flag("SEED_SAMPLE_DATA", True)
