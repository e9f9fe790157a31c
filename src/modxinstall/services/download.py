"""Download service with progress reporting."""

import os

from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from modxinstall.constants import DOWNLOAD_TIMEOUT
from modxinstall.errors import DownloadError


class DownloadService:
    """Streams remote files to disk."""

    def __init__(self, logger, console, requests_module, timeout: float = DOWNLOAD_TIMEOUT):
        self.logger = logger
        self.console = console
        self.requests = requests_module
        self.timeout = timeout

    def download_file(self, url: str, dest_path: str, description: str = "Downloading..."):
        self.logger.info("Downloading %s to %s", url, dest_path)
        partial_path = f"{dest_path}.part"

        try:
            with self.requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                total_size = int(response.headers.get("Content-Length", 0))

                os.makedirs(os.path.dirname(dest_path) or ".", exist_ok=True)

                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    BarColumn(),
                    TaskProgressColumn(),
                    "•",
                    TimeElapsedColumn(),
                    console=self.console,
                ) as progress:
                    task = progress.add_task(f"[cyan]{description}", total=total_size or None)
                    with open(partial_path, "wb") as file_obj:
                        for chunk in response.iter_content(chunk_size=8192):
                            if not chunk:
                                continue
                            file_obj.write(chunk)
                            progress.update(task, advance=len(chunk))

            os.replace(partial_path, dest_path)
        except self.requests.RequestException as exc:
            raise DownloadError(f"Download failed for {description}: {exc}") from exc
        except OSError as exc:
            raise DownloadError(f"Could not save {url} to {dest_path}: {exc}") from exc
        finally:
            if os.path.exists(partial_path):
                try:
                    os.remove(partial_path)
                except OSError:
                    pass

    def get_json(self, url: str):
        self.logger.debug("Fetching %s", url)
        try:
            response = self.requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (self.requests.RequestException, ValueError) as exc:
            raise DownloadError(f"Could not fetch {url}: {exc}") from exc
