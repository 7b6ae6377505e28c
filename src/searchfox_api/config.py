import logging
import os

DEFAULT_BASE_URL = "https://searchfox.org"
DEFAULT_REPO = "mozilla-central"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def get_base_url() -> str:
    return os.getenv("SEARCHFOX_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def get_default_repo() -> str:
    return os.getenv("SEARCHFOX_REPO", DEFAULT_REPO)


def get_log_level() -> str:
    """Level name from ``SEARCHFOX_LOG_LEVEL``; unknown names fall back to the default."""
    level = os.getenv("SEARCHFOX_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning("Ignoring unknown SEARCHFOX_LOG_LEVEL %r, using %s", level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level
