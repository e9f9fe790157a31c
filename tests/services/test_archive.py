import zipfile

import pytest

from modxinstall.errors import DownloadError
from modxinstall.services.archive import ArchiveService


def test_archive_service_blocks_path_traversal(tmp_path):
    service = ArchiveService()

    zip_path = tmp_path / "malicious.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        zip_file.writestr("../escape.txt", "malicious")

    destination = tmp_path / "extract"
    destination.mkdir()

    with pytest.raises(DownloadError):
        service.extract_release(str(zip_path), str(destination))

    assert not (tmp_path / "escape.txt").exists()


def test_archive_service_flattens_release_folder(tmp_path):
    service = ArchiveService()

    zip_path = tmp_path / "modx-2.8.5-pl.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        zip_file.writestr("modx-2.8.5-pl/", "")
        zip_file.writestr("modx-2.8.5-pl/setup/index.php", "<?php")
        zip_file.writestr("modx-2.8.5-pl/core/config/config.inc.php", "<?php")

    destination = tmp_path / "site"
    destination.mkdir()

    service.extract_release(str(zip_path), str(destination))

    assert (destination / "setup" / "index.php").read_text(encoding="utf-8") == "<?php"
    assert (destination / "core" / "config" / "config.inc.php").exists()
    assert not (destination / "modx-2.8.5-pl").exists()


def test_archive_service_keeps_layout_without_common_root(tmp_path):
    service = ArchiveService()

    zip_path = tmp_path / "flat.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        zip_file.writestr("index.php", "<?php")
        zip_file.writestr("core/cache/.keep", "")

    destination = tmp_path / "site"
    destination.mkdir()

    service.extract_release(str(zip_path), str(destination))

    assert (destination / "index.php").exists()
    assert (destination / "core" / "cache" / ".keep").exists()


def test_archive_service_rejects_invalid_zip(tmp_path):
    bogus = tmp_path / "bogus.zip"
    bogus.write_text("not a zip", encoding="utf-8")

    with pytest.raises(DownloadError, match="Invalid ZIP archive"):
        ArchiveService().extract_release(str(bogus), str(tmp_path))


def test_archive_service_blocks_traversal_inside_release_folder(tmp_path):
    zip_path = tmp_path / "modx-2.8.5-pl.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        zip_file.writestr("modx-2.8.5-pl/setup/index.php", "<?php")
        zip_file.writestr("modx-2.8.5-pl/../../escape.txt", "malicious")

    destination = tmp_path / "site"
    destination.mkdir()

    with pytest.raises(DownloadError, match="path traversal"):
        ArchiveService().extract_release(str(zip_path), str(destination))

    assert not (tmp_path / "escape.txt").exists()
    assert not (destination / "setup").exists()


def test_common_root_ignores_relative_markers():
    service = ArchiveService()

    assert service.common_root(["../escape.txt"]) is None
    assert service.common_root(["./a/b.txt"]) is None
    assert service.common_root(["modx-2.8.5-pl/", "modx-2.8.5-pl/index.php"]) == "modx-2.8.5-pl"
