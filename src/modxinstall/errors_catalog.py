"""Actionable error catalog for modxinstall."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "password_too_short": {
        "what": "Please specify a password of at least {min_length} characters to continue.",
        "next": "Choose a password with {min_length} or more characters.",
    },
    "empty_value": {
        "what": "{label} cannot be empty.",
        "next": "Provide a non-blank value for this field.",
    },
    "invalid_version": {
        "what": "Invalid MODX version `{version}`.",
        "next": "Use the format `2.8.5-pl`, or `latest` for the last stable release.",
    },
    "no_stable_release": {
        "what": "Could not find a stable MODX release to install.",
        "next": "Specify the version explicitly, for example `2.8.5-pl`.",
    },
    "download_failed": {
        "what": "Download failed for MODX {version}: {reason}",
        "next": "Check your network connection and retry with `--download` to refresh the cache.",
    },
    "config_write_failed": {
        "what": "Could not write setup config file {path}: {reason}",
        "next": "Make sure the working directory exists and is writable.",
    },
    "php_not_found": {
        "what": "PHP executable not found: {php}",
        "next": "Install the PHP CLI or point `--php` at an existing binary.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
