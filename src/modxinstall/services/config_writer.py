"""Renders the MODX CLI setup config document."""

import os
import tempfile
import xml.etree.ElementTree as ET
from typing import List, Tuple

from modxinstall.constants import (
    CONFIG_FILE_MODE,
    CONFIG_FILE_NAME,
    DATABASE_CHARSET,
    DATABASE_COLLATION,
    DATABASE_SERVER,
    DATABASE_TYPE,
    HTTPS_PORT,
    TABLE_PREFIX,
)
from modxinstall.errors import ConfigWriteError
from modxinstall.errors_catalog import actionable_error
from modxinstall.models import InstallParameters


def _directory_prefix(working_dir: str) -> str:
    return os.path.join(os.path.abspath(working_dir), "")


class ConfigWriter:
    """Writes ``config.xml`` for ``setup/index.php --config``."""

    def __init__(self, logger):
        self.logger = logger

    def build_entries(self, params: InstallParameters, working_dir: str) -> List[Tuple[str, str]]:
        directory = _directory_prefix(working_dir)
        base_url = params.base_url
        return [
            ("database_type", DATABASE_TYPE),
            ("database_server", DATABASE_SERVER),
            ("database", params.db_name),
            ("database_user", params.db_user),
            ("database_password", params.db_password),
            ("database_connection_charset", DATABASE_CHARSET),
            ("database_charset", DATABASE_CHARSET),
            ("database_collation", DATABASE_COLLATION),
            ("table_prefix", TABLE_PREFIX),
            ("https_port", str(HTTPS_PORT)),
            ("http_host", params.db_host),
            ("cache_disabled", "0"),
            ("inplace", "1"),
            ("unpacked", "0"),
            ("language", params.language),
            ("cmsadmin", params.manager_user),
            ("cmspassword", params.manager_password),
            ("cmsadminemail", params.manager_email),
            ("core_path", f"{directory}core/"),
            ("context_mgr_path", f"{directory}manager/"),
            ("context_mgr_url", f"{base_url}manager/"),
            ("context_connectors_path", f"{directory}connectors/"),
            ("context_connectors_url", f"{base_url}connectors/"),
            ("context_web_path", directory),
            ("context_web_url", base_url),
            ("remove_setup_directory", "1"),
        ]

    def render(self, params: InstallParameters, working_dir: str) -> str:
        root = ET.Element("modx")
        for tag, value in self.build_entries(params, working_dir):
            ET.SubElement(root, tag).text = value
        ET.indent(root)
        return ET.tostring(root, encoding="unicode") + "\n"

    def write(self, params: InstallParameters, working_dir: str) -> str:
        config_path = os.path.join(os.path.abspath(working_dir), CONFIG_FILE_NAME)
        contents = self.render(params, working_dir)

        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=".config-", suffix=".xml", dir=os.path.dirname(config_path)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as file_obj:
                file_obj.write(contents)
            os.chmod(temp_path, CONFIG_FILE_MODE)
            os.replace(temp_path, config_path)
        except OSError as exc:
            raise ConfigWriteError(
                actionable_error("config_write_failed", path=config_path, reason=str(exc))
            ) from exc
        finally:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    pass

        self.logger.debug("Wrote setup config to %s", config_path)
        return config_path
