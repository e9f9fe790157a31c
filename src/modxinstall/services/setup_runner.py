"""Runs the MODX CLI setup against a generated config file."""

import os
from typing import List

from rich.markup import escape

from modxinstall.constants import DEFAULT_PHP_BINARY, INSTALL_MODE, SETUP_SCRIPT
from modxinstall.errors import InstallerError
from modxinstall.errors_catalog import actionable_error
from modxinstall.services.command_runner import CommandRunner
from modxinstall.services.filesystem import FileSystemService

CLEANUP_WARNING = "Could not clean up the setup config file, please remove it manually."


class SetupRunner:
    """Invokes ``setup/index.php`` and always removes the config file afterwards."""

    def __init__(
        self,
        command_runner: CommandRunner,
        filesystem_service: FileSystemService,
        logger,
        console,
        php_binary: str = DEFAULT_PHP_BINARY,
    ):
        self.command_runner = command_runner
        self.filesystem_service = filesystem_service
        self.logger = logger
        self.console = console
        self.php_binary = php_binary

    def build_command(self, config_path: str, timezone: str, working_dir: str) -> List[str]:
        setup_script = os.path.join(os.path.abspath(working_dir), SETUP_SCRIPT)
        return [
            self.php_binary,
            "-d",
            f"date.timezone={timezone}",
            setup_script,
            f"--installmode={INSTALL_MODE}",
            f"--config={config_path}",
        ]

    def run(self, config_path: str, timezone: str, working_dir: str) -> str:
        cmd = self.build_command(config_path, timezone, working_dir)
        env = dict(os.environ, TZ=timezone)

        self.console.print("[blue]Running MODX Setup...[/blue]")
        self.logger.info("Running MODX setup in %s", working_dir)

        try:
            try:
                result = self.command_runner.run(
                    cmd,
                    check=False,
                    capture_output=True,
                    env=env,
                    cwd=working_dir,
                )
            except InstallerError as exc:
                if isinstance(exc.__cause__, FileNotFoundError):
                    raise InstallerError(
                        actionable_error("php_not_found", php=self.php_binary)
                    ) from exc
                raise

            lines = (result.stdout or "").splitlines()
            first_line = lines[0] if lines else ""
            self.logger.debug("MODX setup exited with status %s", result.returncode)
            self.console.print(f"[yellow]{escape(first_line)}[/yellow]", highlight=False)
            return first_line
        finally:
            self.filesystem_service.remove_file(config_path, CLEANUP_WARNING)
