import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
TEMPLATES_DIR = os.getenv("TEMPLATES_DIR", str(BASE_DIR / "templates"))
STATIC_DIR = os.getenv("STATIC_DIR", str(BASE_DIR / "static"))


def log_level(name: Optional[str] = None) -> Optional[str]:
    """Canonical level name ("warn" -> "WARNING"), or None if the name is unknown."""
    level = logging.getLevelName((name or LOG_LEVEL).upper())
    if not isinstance(level, int) or level == logging.NOTSET:
        return None
    return logging.getLevelName(level)


def configure_logging(name: Optional[str] = None) -> None:
    level = log_level(name)
    logging.basicConfig(
        level=level or "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        logger.warning("Unknown LOG_LEVEL %r, falling back to INFO", name or LOG_LEVEL)
