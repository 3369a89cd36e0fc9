import pytest

from uniffi_php_bindings.layout import Layout
from uniffi_php_bindings.platforms import Platform
from uniffi_php_bindings.preflight import check_layout, has_php_section


def test_all_present(workspace, capsys):
    assert check_layout(workspace) == 0
    out = capsys.readouterr().out
    assert "✓ Binding generator" in out
    assert "✓ Fixtures library" in out
    assert "✓ Config file" in out
    assert "All preflight checks passed" in out


def test_does_not_touch_output_directory(workspace):
    check_layout(workspace)
    assert not workspace.bindings_dir.exists()


@pytest.mark.parametrize("artifact", ["bindgen_exe", "lib_file", "config_file"])
def test_missing_artifact_fails(workspace, artifact, capsys):
    path = getattr(workspace, artifact)
    path.unlink()
    assert check_layout(workspace) == 1
    assert str(path) in capsys.readouterr().err


def test_library_for_other_platform_is_missing(workspace, capsys):
    darwin = Layout(root=workspace.root, platform=Platform.DARWIN)
    assert check_layout(darwin) == 1
    assert "libuniffi_fixtures.dylib" in capsys.readouterr().err


def test_warns_without_php_section(workspace, capsys):
    workspace.config_file.write_text('[bindings.kotlin]\npackage_name = "x"\n')
    assert check_layout(workspace) == 0
    assert "No [bindings.php] table" in capsys.readouterr().out


def test_warns_on_unrecognized_platform(workspace, capsys):
    other = Layout(root=workspace.root, platform=Platform.OTHER)
    assert check_layout(other) == 0
    assert "Unrecognized platform" in capsys.readouterr().out


def test_has_php_section(tmp_path):
    config = tmp_path / "uniffi.toml"
    config.write_text("[bindings.php]\n")
    assert has_php_section(config) is True
    config.write_text("[bindings.python]\n")
    assert has_php_section(config) is False
    assert has_php_section(tmp_path / "missing.toml") is None
