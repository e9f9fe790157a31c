"""Ambient environment lookups."""

import os
from typing import Mapping, Optional

from modxinstall.constants import DEFAULT_TIMEZONE

TIMEZONE_FILE = "/etc/timezone"


def resolve_timezone(
    explicit: Optional[str] = None,
    environ: Mapping[str, str] = os.environ,
    timezone_file: str = TIMEZONE_FILE,
) -> str:
    """Pick the timezone identifier handed to PHP's ``date.timezone``."""
    if explicit:
        return explicit

    # POSIX TZ values may carry a leading colon, e.g. ":Europe/Amsterdam"
    from_env = environ.get("TZ", "").lstrip(":").strip()
    if from_env:
        return from_env

    try:
        with open(timezone_file, "r", encoding="utf-8") as file_obj:
            from_file = file_obj.readline().strip()
    except OSError:
        from_file = ""

    return from_file or DEFAULT_TIMEZONE


def default_cache_dir() -> str:
    return os.path.join(os.path.expanduser("~"), ".modxinstall", "cache")
