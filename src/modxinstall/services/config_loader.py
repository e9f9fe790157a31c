"""Configuration loader for modxinstall."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from modxinstall.errors import InstallerError


class ConfigLoader:
    """Loads YAML configuration files for CLI defaults."""

    PARAMETER_KEYS = {
        "db_name",
        "db_user",
        "db_password",
        "db_host",
        "base_url",
        "language",
        "manager_user",
        "manager_password",
        "manager_email",
    }

    SUPPORTED_KEYS = PARAMETER_KEYS | {
        "version",
        "working_dir",
        "timezone",
        "php_binary",
        "cache_dir",
        "verbose",
        "log_file",
    }

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise InstallerError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise InstallerError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise InstallerError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise InstallerError(f"Unknown configuration keys: {unknown_list}")

        for key in self.PARAMETER_KEYS & set(parsed.keys()):
            if parsed[key] is not None:
                parsed[key] = str(parsed[key])

        return parsed
