"""Shared constants for modxinstall."""

CONFIG_FILE_NAME = "config.xml"
DEFAULT_CONFIG_FILE = ".modxinstall.yml"
CONFIG_FILE_MODE = 0o600

MIN_PASSWORD_LENGTH = 8
GENERATED_PASSWORD_LENGTH = (8, 15)
GENERATE_SENTINEL = "generate"

DEFAULT_DB_USER = "root"
DEFAULT_BASE_URL = "/"
DEFAULT_LANGUAGE = "en"
MANAGER_USER_SUFFIX = "_admin"

LATEST_VERSION = "latest"
RELEASE_DOWNLOAD_URL = "https://modx.com/download/direct/modx-{version}.zip"
RELEASE_TAGS_URL = "https://api.github.com/repos/modxcms/revolution/tags"
STABLE_RELEASE_SUFFIX = "-pl"
DOWNLOAD_TIMEOUT = 60

DEFAULT_PHP_BINARY = "php"
SETUP_SCRIPT = "setup/index.php"
INSTALL_MODE = "new"
DEFAULT_TIMEZONE = "UTC"

# Fixed part of the MODX setup config document.
DATABASE_TYPE = "mysql"
DATABASE_SERVER = "localhost"
DATABASE_CHARSET = "utf8"
DATABASE_COLLATION = "utf8_general_ci"
TABLE_PREFIX = "modx_"
HTTPS_PORT = 443
