import logging
import os

import click
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE, DEFAULT_PHP_BINARY, LATEST_VERSION
from .core import ModxInstaller
from .errors import InstallerError
from .models import ExplicitInputs
from .services.config_loader import ConfigLoader


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.argument("version", required=False)
@click.option(
    "-d",
    "--download",
    is_flag=True,
    default=False,
    help="Force download the MODX package even if it already exists in the cache folder.",
)
@click.option("-N", "--name", "db_name", help="Specify the name of the database to use.")
@click.option("-u", "--user", "db_user", help="Specify the database user to use for the install script.")
@click.option("-p", "--password", "db_password", help="Specify the database password to use.")
@click.option("-H", "--host", "db_host", help="Specify the database host to use for the install script.")
@click.option("-b", "--base", "base_url", help="Specify the base URL of the MODX install.")
@click.option("-l", "--language", help="Specify the manager language to install.")
@click.option(
    "-U",
    "--manager-user",
    help="Specify the manager user to be created by the install script.",
)
@click.option(
    "-P",
    "--manager-password",
    help='Specify the password for the newly created manager user. Use "generate" to let a random one be created.',
)
@click.option(
    "-E",
    "--manager-email",
    help="Specify the email address for the newly created manager user.",
)
@click.option(
    "--working-dir",
    type=click.Path(file_okay=False),
    help="Directory to install MODX into (default: current directory).",
)
@click.option("--timezone", help="Timezone passed to PHP as date.timezone (default: system timezone).")
@click.option("--php", "php_binary", help="PHP executable used to run the MODX setup (default: php).")
@click.option("--cache-dir", type=click.Path(file_okay=False), help="Where downloaded MODX packages are cached.")
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(
    version,
    download,
    db_name,
    db_user,
    db_password,
    db_host,
    base_url,
    language,
    manager_user,
    manager_password,
    manager_email,
    working_dir,
    timezone,
    php_binary,
    cache_dir,
    config,
    verbose,
    log_file,
):
    """Download, configure and install a fresh MODX installation.

    VERSION is the MODX release to install, in the format 2.8.5-pl. Leave it
    empty or use "latest" to install the last stable release.
    """
    logger = logging.getLogger("modxinstall")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(working_dir or os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except InstallerError as exc:
        raise click.ClickException(str(exc)) from exc

    version = _resolve_option(version, config_values, "version", default=LATEST_VERSION)
    working_dir = _resolve_option(working_dir, config_values, "working_dir")
    timezone = _resolve_option(timezone, config_values, "timezone")
    php_binary = _resolve_option(php_binary, config_values, "php_binary", default=DEFAULT_PHP_BINARY)
    cache_dir = _resolve_option(cache_dir, config_values, "cache_dir")
    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    log_file = _resolve_option(log_file, config_values, "log_file")

    explicit = ExplicitInputs(
        db_name=_resolve_option(db_name, config_values, "db_name"),
        db_user=_resolve_option(db_user, config_values, "db_user"),
        db_password=_resolve_option(db_password, config_values, "db_password"),
        db_host=_resolve_option(db_host, config_values, "db_host"),
        base_url=_resolve_option(base_url, config_values, "base_url"),
        language=_resolve_option(language, config_values, "language"),
        manager_user=_resolve_option(manager_user, config_values, "manager_user"),
        manager_password=_resolve_option(manager_password, config_values, "manager_password"),
        manager_email=_resolve_option(manager_email, config_values, "manager_email"),
    )

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    installer = ModxInstaller(
        version=str(version),
        force_download=download,
        explicit=explicit,
        working_dir=working_dir,
        timezone=timezone,
        php_binary=php_binary,
        cache_dir=cache_dir,
    )

    raise SystemExit(installer.run())


if __name__ == "__main__":
    main()
