"""Platform classification and shared library naming."""

import enum
import sys


class Platform(enum.Enum):
    """Platforms the build driver knows how to name libraries for."""

    DARWIN = "darwin"
    LINUX = "linux"
    OTHER = "other"


def classify_platform(identifier: str | None = None) -> Platform:
    """Classify a platform identifier such as ``sys.platform`` or ``darwin-arm64``."""
    if identifier is None:
        identifier = sys.platform
    identifier = identifier.lower()
    if identifier.startswith("darwin"):
        return Platform.DARWIN
    if identifier.startswith("linux"):
        return Platform.LINUX
    return Platform.OTHER


def lib_extension(platform: Platform) -> str:
    """Get the shared library extension for the given platform."""
    if platform is Platform.DARWIN:
        return "dylib"
    return "so"


def lib_filename(crate_lib: str, platform: Platform) -> str:
    """Get the shared library file name for a cdylib crate."""
    return f"lib{crate_lib}.{lib_extension(platform)}"
