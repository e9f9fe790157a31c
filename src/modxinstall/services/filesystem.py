"""Filesystem helpers for modxinstall."""

import logging
import os

from rich.console import Console


class FileSystemService:
    """Encapsulates file removal side effects."""

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def remove_file(self, path: str, warning: str) -> bool:
        try:
            os.remove(path)
        except FileNotFoundError:
            return True
        except OSError as exc:
            self.console.print(f"[yellow]Warning:[/yellow] {warning}")
            self.logger.warning("Could not remove %s: %s", path, exc)
            return False

        self.logger.debug("Removed file: %s", path)
        return True

