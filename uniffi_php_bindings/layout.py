"""Filesystem layout of the bindings workspace."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .platforms import Platform, classify_platform, lib_filename

FIXTURES_LIB = "uniffi_fixtures"
BINDGEN_EXE = "uniffi-bindgen-php"

# Checked in order, after an explicit root.
ROOT_ENV_VARS = ("ROOT_DIR", "SCRIPT_DIR")

# A computed root is only accepted if it contains one of these.
WORKSPACE_MARKERS = (Path("fixtures") / "uniffi.toml", Path("Cargo.toml"))


class RootNotFoundError(RuntimeError):
    """The root directory could not be determined."""


def default_root() -> Path:
    """Directory containing the project (uniffi_php_bindings/layout.py -> repo)."""
    return Path(__file__).resolve().parent.parent


def is_workspace(path: Path) -> bool:
    return any((path / marker).is_file() for marker in WORKSPACE_MARKERS)


def resolve_root(
    explicit: str | os.PathLike | None = None,
    environ: Mapping[str, str] | None = None,
    fallback: Path | None = None,
) -> Path:
    """
    Resolve the root directory.

    Precedence: explicit argument, ``ROOT_DIR``, ``SCRIPT_DIR``, then
    ``fallback`` (or the project directory when no fallback is given).
    Relative values are made absolute against the current directory once,
    here, so later path composition does not depend on it.

    The project directory is only a checkout when the package is not
    installed into site-packages, so it must contain a workspace marker;
    otherwise ``RootNotFoundError`` is raised.
    """
    if environ is None:
        environ = os.environ

    if explicit is not None:
        return Path(explicit).resolve()

    for name in ROOT_ENV_VARS:
        value = environ.get(name)
        if value:
            return Path(value).resolve()

    if fallback is not None:
        return fallback.resolve()

    root = default_root()
    if not is_workspace(root):
        raise RootNotFoundError(
            f"{root} does not look like the bindings workspace "
            "(no fixtures/uniffi.toml or Cargo.toml); pass --root or set ROOT_DIR"
        )
    return root


@dataclass(frozen=True)
class Layout:
    root: Path
    platform: Platform

    @classmethod
    def for_root(cls, root: Path, platform: Platform | None = None) -> "Layout":
        if platform is None:
            platform = classify_platform()
        return cls(root=Path(root), platform=platform)

    @property
    def bindings_dir(self) -> Path:
        return self.root / "out"

    @property
    def binaries_dir(self) -> Path:
        return self.root / "target" / "debug"

    @property
    def lib_file(self) -> Path:
        return self.binaries_dir / lib_filename(FIXTURES_LIB, self.platform)

    @property
    def bindgen_exe(self) -> Path:
        return self.binaries_dir / BINDGEN_EXE

    @property
    def config_file(self) -> Path:
        return self.root / "fixtures" / "uniffi.toml"
