import stat
import textwrap

import pytest

from uniffi_php_bindings import Layout, Platform

FAKE_BINDGEN = textwrap.dedent("""\
    #!/bin/sh
    here="$(dirname "$0")"
    printf '%s\\n' "$@" > "$here/argv.txt"
    ls -A "$3" > "$here/out_listing.txt"
    touch "$3/generated.php"
    exit "${FAKE_BINDGEN_STATUS:-0}"
""")


def write_fake_bindgen(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(FAKE_BINDGEN)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def workspace(tmp_path):
    """A root directory with a fake generator, a library and a config."""
    root = tmp_path / "proj"
    layout = Layout(root=root, platform=Platform.LINUX)
    write_fake_bindgen(layout.bindgen_exe)
    layout.lib_file.write_bytes(b"\x7fELF")
    layout.config_file.parent.mkdir(parents=True)
    layout.config_file.write_text('[bindings.php]\ncdylib_name = "uniffi_fixtures"\n')
    return layout


def recorded_argv(layout):
    return (layout.binaries_dir / "argv.txt").read_text().splitlines()


def recorded_out_listing(layout):
    return (layout.binaries_dir / "out_listing.txt").read_text().splitlines()
