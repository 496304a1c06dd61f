"""Application configuration: environment variables and derived constants.

Loads the bot token, endpoint URLs, timeouts and logging settings from the
environment via ``python-dotenv``.  All values are resolved at import time so
other modules can ``from config import …`` without repeated lookups.  The
``telegrambot`` library itself only reads this module through
:meth:`telegrambot.API.from_env`.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import BotLogger, parse_level

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_float(raw: str | None, default: float) -> float:
    """Parse a positive number of seconds, falling back to *default*."""
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _parse_optional_int(raw: str | None) -> int | None:
    """Parse a non-negative integer; empty or invalid means *unset*."""
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_ENDPOINT_URL: str = os.environ.get("API_ENDPOINT_URL") or "https://api.telegram.org/bot"
FILE_ENDPOINT_URL: str = os.environ.get("FILE_ENDPOINT_URL") or "https://api.telegram.org/file/bot"
REQUEST_TIMEOUT: float = _parse_float(os.environ.get("REQUEST_TIMEOUT"), 60.0)
POLL_TIMEOUT: int = _parse_int(os.environ.get("POLL_TIMEOUT"), 2)
MAX_RATE_LIMIT_RETRIES: int | None = _parse_optional_int(os.environ.get("MAX_RATE_LIMIT_RETRIES"))
LOG_LEVEL: int = parse_level(os.environ.get("LOG_LEVEL"))
LOG_DIR: str | None = os.environ.get("LOG_DIR") or None


# ── Logger (used for startup diagnostics below) ──────────────────────────────
logger = BotLogger.get_logger(LOG_LEVEL, LOG_DIR)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded, BOT_TOKEN is set")
else:
    logger.warning("Config loaded, BOT_TOKEN is NOT set")

if REQUEST_TIMEOUT <= POLL_TIMEOUT:
    logger.warning(
        "REQUEST_TIMEOUT does not exceed POLL_TIMEOUT; long polls will time out",
        extra={"request_timeout": REQUEST_TIMEOUT, "poll_timeout": POLL_TIMEOUT},
    )

logger.info(
    "Client settings resolved",
    extra={
        "api_endpoint_url": API_ENDPOINT_URL,
        "request_timeout": REQUEST_TIMEOUT,
        "poll_timeout": POLL_TIMEOUT,
        "max_rate_limit_retries": MAX_RATE_LIMIT_RETRIES,
    },
)
