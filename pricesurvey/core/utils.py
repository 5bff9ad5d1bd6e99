"""Configuration helpers: environment lookups and an optional settings file."""
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")
_TRUTHY = {"1", "true", "yes", "on"}


def get_config_value(key: str, default: str = "") -> str:
    """Return a configuration value from the environment."""

    return os.getenv(key, default)


def get_bool_config(key: str, default: bool = False) -> bool:
    """Interpret an environment flag such as ``PRICESURVEY_DEDUPLICATE=1``."""

    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def parse_env_line(line: str) -> Optional[Tuple[str, str]]:
    """Split a ``KEY=value`` line; comments, blanks and malformed lines give ``None``."""

    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    key, sep, value = stripped.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("\"'")


def load_env_file(path: Path | None = None) -> None:
    """Export settings from ``path`` (or ``PRICESURVEY_ENV_FILE``, else ``.env``).

    Variables already present in the environment win over the file.
    """

    path = path or Path(os.getenv("PRICESURVEY_ENV_FILE", DEFAULT_ENV_FILE))
    if not path.is_file():
        return

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.debug("Could not read settings file %s: %s", path, exc)
        return

    for line in lines:
        parsed = parse_env_line(line)
        if parsed is not None:
            os.environ.setdefault(*parsed)
