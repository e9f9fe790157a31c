import logging
import os
from typing import Optional

import click
import requests
from rich.console import Console

from .constants import DEFAULT_PHP_BINARY, LATEST_VERSION
from .errors import InstallerError
from .models import ExplicitInputs
from .services.archive import ArchiveService
from .services.command_runner import CommandRunner
from .services.config_writer import ConfigWriter
from .services.download import DownloadService
from .services.environment import default_cache_dir, resolve_timezone
from .services.filesystem import FileSystemService
from .services.prompts import PromptChannel
from .services.releases import ReleaseService
from .services.resolver import ParameterResolver
from .services.run_stats import RunTimer
from .services.setup_runner import SetupRunner

console = Console()
logger = logging.getLogger("modxinstall")


class ModxInstaller:
    def __init__(
        self,
        version: str = LATEST_VERSION,
        force_download: bool = False,
        explicit: Optional[ExplicitInputs] = None,
        working_dir: Optional[str] = None,
        timezone: Optional[str] = None,
        php_binary: str = DEFAULT_PHP_BINARY,
        cache_dir: Optional[str] = None,
        hostname: Optional[str] = None,
    ):
        self.version = version or LATEST_VERSION
        self.force_download = force_download
        self.explicit = explicit or ExplicitInputs()
        self.working_dir = os.path.join(os.path.abspath(working_dir or os.getcwd()), "")
        self.timezone = resolve_timezone(timezone)
        self.cache_dir = cache_dir or default_cache_dir()
        self.timer = RunTimer()

        self.filesystem_service = FileSystemService(logger=logger, console=console)
        self.command_runner = CommandRunner(logger=logger)
        self.download_service = DownloadService(
            logger=logger,
            console=console,
            requests_module=requests,
        )
        self.release_service = ReleaseService(
            download_service=self.download_service,
            archive_service=ArchiveService(),
            cache_dir=self.cache_dir,
            logger=logger,
            console=console,
        )
        self.resolver = ParameterResolver(
            channel=PromptChannel(console),
            working_dir=self.working_dir,
            logger=logger,
            hostname=hostname,
        )
        self.config_writer = ConfigWriter(logger=logger)
        self.setup_runner = SetupRunner(
            command_runner=self.command_runner,
            filesystem_service=self.filesystem_service,
            logger=logger,
            console=console,
            php_binary=php_binary,
        )

    def download(self) -> str:
        return self.release_service.install(
            self.version,
            self.working_dir,
            force=self.force_download,
        )

    def install(self) -> str:
        params = self.resolver.resolve(self.explicit)
        config_path = self.config_writer.write(params, self.working_dir)
        return self.setup_runner.run(config_path, self.timezone, self.working_dir)

    def run(self) -> int:
        logger.info("Starting modxinstall in %s", self.working_dir)

        try:
            installed_version = self.download()
            self.install()
        except (KeyboardInterrupt, click.Abort):
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except InstallerError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {exc}")
            logger.exception("Unexpected error")
            return 1

        logger.info("MODX %s setup finished", installed_version)
        console.print(f"[bold green]Done![/bold green] {self.timer.summary()}")
        return 0
