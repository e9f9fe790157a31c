"""Archive extraction helpers for modxinstall."""

import os
import shutil
import zipfile
from pathlib import Path
from typing import Optional

from modxinstall.errors import DownloadError


class ArchiveService:
    """Encapsulates safe extraction of MODX release archives."""

    def is_within_dir(self, base_dir: Path, candidate: Path) -> bool:
        try:
            return os.path.commonpath([str(base_dir), str(candidate)]) == str(base_dir)
        except ValueError:
            return False

    def common_root(self, names) -> Optional[str]:
        roots = {name.split("/", 1)[0] for name in names if name}
        if len(roots) != 1:
            return None
        root = roots.pop()
        if root in ("", ".", ".."):
            return None
        prefix = f"{root}/"
        if any(name.startswith(prefix) for name in names):
            return root
        return None

    def ensure_safe_member(self, base: Path, member: zipfile.ZipInfo, name: str) -> Path:
        target_path = (base / name).resolve()
        if not self.is_within_dir(base, target_path):
            raise DownloadError(
                f"Unsafe ZIP entry detected: `{member.filename}`. "
                "Archive extraction aborted to prevent path traversal."
            )

        file_type = (member.external_attr >> 16) & 0o170000
        if file_type == 0o120000:
            raise DownloadError(
                f"Unsafe ZIP entry detected: `{member.filename}` is a symbolic link."
            )
        return target_path

    def extract_release(self, zip_path: str, destination_dir: str):
        """Extract ``zip_path`` into ``destination_dir``.

        Release archives wrap everything in a single ``modx-<version>/``
        folder; that folder is flattened away.
        """
        base = Path(destination_dir).resolve()

        try:
            with zipfile.ZipFile(zip_path, "r") as zip_ref:
                members = zip_ref.infolist()
                names = [member.filename.replace("\\", "/") for member in members]
                for member, raw_name in zip(members, names):
                    self.ensure_safe_member(base, member, raw_name)

                root = self.common_root(names)
                targets = []
                for member, normalized_name in zip(members, names):
                    if root:
                        normalized_name = normalized_name[len(root) :].lstrip("/")
                    if not normalized_name:
                        continue

                    target_path = self.ensure_safe_member(base, member, normalized_name)
                    targets.append((member, normalized_name, target_path))

                for member, normalized_name, target_path in targets:
                    if member.is_dir() or normalized_name.endswith("/"):
                        target_path.mkdir(parents=True, exist_ok=True)
                        continue

                    target_path.parent.mkdir(parents=True, exist_ok=True)
                    with zip_ref.open(member, "r") as src, open(target_path, "wb") as dst:
                        shutil.copyfileobj(src, dst)
        except zipfile.BadZipFile as exc:
            raise DownloadError(f"Invalid ZIP archive: {zip_path}") from exc
        except OSError as exc:
            raise DownloadError(f"Could not extract {zip_path}: {exc}") from exc
