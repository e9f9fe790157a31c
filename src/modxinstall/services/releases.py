"""MODX release lookup, caching and unpacking."""

import os
from typing import List

from packaging.version import InvalidVersion, Version

from modxinstall.constants import (
    LATEST_VERSION,
    RELEASE_DOWNLOAD_URL,
    RELEASE_TAGS_URL,
    STABLE_RELEASE_SUFFIX,
)
from modxinstall.errors import DownloadError
from modxinstall.errors_catalog import actionable_error
from modxinstall.services.archive import ArchiveService
from modxinstall.services.download import DownloadService
from modxinstall.services.validation import is_valid_version


class ReleaseService:
    """Makes a MODX release available in the working directory."""

    def __init__(
        self,
        download_service: DownloadService,
        archive_service: ArchiveService,
        cache_dir: str,
        logger,
        console,
    ):
        self.download_service = download_service
        self.archive_service = archive_service
        self.cache_dir = cache_dir
        self.logger = logger
        self.console = console

    def stable_versions(self, tag_names: List[str]) -> List[str]:
        candidates = []
        for name in tag_names:
            if not name.endswith(STABLE_RELEASE_SUFFIX):
                continue
            try:
                parsed = Version(name[: -len(STABLE_RELEASE_SUFFIX)].lstrip("v"))
            except InvalidVersion:
                continue
            candidates.append((parsed, name.lstrip("v")))
        return [name for _parsed, name in sorted(candidates, reverse=True)]

    def resolve_version(self, version: str) -> str:
        if not version or version == LATEST_VERSION:
            tags = self.download_service.get_json(RELEASE_TAGS_URL)
            if not isinstance(tags, list):
                raise DownloadError(f"Unexpected response from {RELEASE_TAGS_URL}.")
            tag_names = [tag.get("name", "") for tag in tags if isinstance(tag, dict)]
            stable = self.stable_versions(tag_names)
            if not stable:
                raise DownloadError(actionable_error("no_stable_release"))
            self.logger.info("Latest stable MODX release is %s", stable[0])
            return stable[0]

        if not is_valid_version(version):
            raise DownloadError(actionable_error("invalid_version", version=version))
        return version

    def archive_path(self, version: str) -> str:
        return os.path.join(self.cache_dir, f"modx-{version}.zip")

    def fetch(self, version: str, force: bool = False) -> str:
        zip_path = self.archive_path(version)
        if os.path.exists(zip_path) and not force:
            self.console.print(f"[blue]Using cached MODX {version} package.[/blue]")
            self.logger.info("Using cached package %s", zip_path)
            return zip_path

        url = RELEASE_DOWNLOAD_URL.format(version=version)
        try:
            self.download_service.download_file(url, zip_path, f"Downloading MODX {version}...")
        except DownloadError as exc:
            raise DownloadError(
                actionable_error("download_failed", version=version, reason=str(exc))
            ) from exc
        return zip_path

    def install(self, version: str, working_dir: str, force: bool = False) -> str:
        resolved = self.resolve_version(version)
        zip_path = self.fetch(resolved, force=force)

        self.console.print(f"[blue]Extracting MODX {resolved}...[/blue]")
        self.archive_service.extract_release(zip_path, working_dir)
        self.console.print(f"[green]MODX {resolved} unpacked in {working_dir}.[/green]")
        return resolved
