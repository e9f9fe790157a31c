import stat
import sys

import pytest


@pytest.fixture
def fake_php(tmp_path):
    """A stand-in for the PHP CLI that keeps a copy of the config it was given."""
    if sys.platform == "win32":
        pytest.skip("requires a POSIX shell script")

    script = tmp_path / "bin" / "php"
    script.parent.mkdir()
    script.write_text(
        "#!/bin/sh\n"
        'bin_dir="$(dirname "$0")"\n'
        'printf "%s\\n" "$@" > "$bin_dir/args.txt"\n'
        "for arg in \"$@\"; do\n"
        '  case "$arg" in --config=*) cp "${arg#--config=}" "$bin_dir/captured.xml" ;; esac\n'
        "done\n"
        'echo "Installation finished successfully"\n'
        'echo "second line"\n',
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script
