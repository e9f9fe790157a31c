import socket
import xml.etree.ElementTree as ET

from click.testing import CliRunner

import modxinstall.cli as cli_module
from modxinstall.core import ModxInstaller


class FakeInstaller:
    captured = {}

    def __init__(self, **kwargs):
        FakeInstaller.captured = kwargs

    def run(self):
        return 0


def test_cli_maps_short_options_to_explicit_inputs(monkeypatch):
    monkeypatch.setattr(cli_module, "ModxInstaller", FakeInstaller)

    result = CliRunner().invoke(
        cli_module.main,
        [
            "2.8.5-pl",
            "-d",
            "-N", "shop",
            "-u", "root",
            "-p", "longenoughpw",
            "-H", "127.0.0.1",
            "-b", "/store",
            "-l", "en",
            "-U", "admin",
            "-P", "generate",
            "-E", "a@b.com",
        ],
    )

    assert result.exit_code == 0
    captured = FakeInstaller.captured
    assert captured["version"] == "2.8.5-pl"
    assert captured["force_download"] is True
    explicit = captured["explicit"]
    assert explicit.db_name == "shop"
    assert explicit.db_host == "127.0.0.1"
    assert explicit.base_url == "/store"
    assert explicit.manager_password == "generate"
    assert explicit.is_complete()


def test_cli_defaults_to_latest_without_explicit_inputs(monkeypatch):
    monkeypatch.setattr(cli_module, "ModxInstaller", FakeInstaller)

    result = CliRunner().invoke(cli_module.main, [])

    assert result.exit_code == 0
    assert FakeInstaller.captured["version"] == "latest"
    assert FakeInstaller.captured["force_download"] is False
    assert FakeInstaller.captured["explicit"].db_name is None


def test_cli_uses_config_and_allows_cli_override(tmp_path, monkeypatch):
    config_file = tmp_path / "install.yml"
    config_file.write_text(
        "version: 2.8.4-pl\n" "db_name: fromconfig\n" "db_user: deploy\n" "php_binary: /usr/bin/php8.1\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(cli_module, "ModxInstaller", FakeInstaller)

    result = CliRunner().invoke(
        cli_module.main,
        ["--config", str(config_file), "--name", "fromcli"],
    )

    assert result.exit_code == 0
    captured = FakeInstaller.captured
    assert captured["version"] == "2.8.4-pl"
    assert captured["php_binary"] == "/usr/bin/php8.1"
    assert captured["explicit"].db_name == "fromcli"
    assert captured["explicit"].db_user == "deploy"


def test_cli_uses_default_config_file_in_working_dir(tmp_path, monkeypatch):
    (tmp_path / ".modxinstall.yml").write_text("manager_email: ops@example.com\n", encoding="utf-8")
    monkeypatch.setattr(cli_module, "ModxInstaller", FakeInstaller)

    result = CliRunner().invoke(cli_module.main, ["--working-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert FakeInstaller.captured["working_dir"] == str(tmp_path)
    assert FakeInstaller.captured["explicit"].manager_email == "ops@example.com"


def test_cli_rejects_unknown_config_keys(tmp_path):
    config_file = tmp_path / "install.yml"
    config_file.write_text("database: nope\n", encoding="utf-8")

    result = CliRunner().invoke(cli_module.main, ["--config", str(config_file)])

    assert result.exit_code == 1
    assert "Unknown configuration keys" in result.output


def test_cli_propagates_installer_exit_code(monkeypatch):
    class FailingInstaller(FakeInstaller):
        def run(self):
            return 1

    monkeypatch.setattr(cli_module, "ModxInstaller", FailingInstaller)

    result = CliRunner().invoke(cli_module.main, ["latest"])

    assert result.exit_code == 1


def test_cli_interactive_install_accepts_defaults(tmp_path, fake_php, monkeypatch):
    site = tmp_path / "myproject"
    site.mkdir()
    monkeypatch.setattr(ModxInstaller, "download", lambda self: "2.8.5-pl")

    answers = [
        "",  # database name
        "",  # database user
        "dbpassword",
        "",  # hostname
        "",  # base url
        "",  # language
        "",  # manager user
        "",  # manager password
        "me@example.com",
    ]
    result = CliRunner().invoke(
        cli_module.main,
        ["--working-dir", str(site), "--php", str(fake_php), "--timezone", "UTC"],
        input="\n".join(answers) + "\n",
    )

    assert result.exit_code == 0, result.output
    assert "Please complete the following details" in result.output
    assert "Database Name [myproject]: " in result.output
    assert "Manager User [myproject_admin]: " in result.output
    assert "dbpassword" not in result.output
    assert "Generated Manager Password:" in result.output
    assert "Done!" in result.output
    assert not (site / "config.xml").exists()

    values = {child.tag: child.text for child in ET.parse(fake_php.parent / "captured.xml").getroot()}
    assert values["database"] == "myproject"
    assert values["database_user"] == "root"
    assert values["database_password"] == "dbpassword"
    assert values["http_host"] == socket.gethostname().strip().rstrip("/")
    assert values["context_web_url"] == "/"
    assert values["language"] == "en"
    assert values["cmsadmin"] == "myproject_admin"
    assert values["cmsadminemail"] == "me@example.com"
    assert 8 <= len(values["cmspassword"]) <= 15
