"""Input validation and normalization helpers for modxinstall."""

import re

from modxinstall.constants import MIN_PASSWORD_LENGTH
from modxinstall.errors import ValidationError
from modxinstall.errors_catalog import actionable_error

_REPEATED_SLASHES = re.compile(r"/{2,}")
_VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+-[a-z]+\d*$")


def validate_password(value: str) -> str:
    if not value or len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            actionable_error("password_too_short", min_length=str(MIN_PASSWORD_LENGTH))
        )
    return value


def normalize_host(value: str) -> str:
    return value.strip().rstrip("/")


def normalize_base_url(value: str) -> str:
    """Return ``value`` wrapped in single slashes with no doubled separators."""
    url = "/" + value.strip().strip("/") + "/"
    return _REPEATED_SLASHES.sub("/", url)


def is_valid_version(version: str) -> bool:
    return bool(_VERSION_PATTERN.match(version))
