"""
Build driver for the PHP bindings of the uniffi fixtures library.

Resets the output directory and runs the prebuilt ``uniffi-bindgen-php``
executable against the compiled fixtures library.
"""

from .layout import Layout, RootNotFoundError, resolve_root
from .platforms import Platform, classify_platform, lib_extension, lib_filename
from .runner import ExecutionContext, bindgen_command, build_bindings, reset_directory, run_bindgen

__version__ = "0.1.0"

__all__ = [
    "ExecutionContext",
    "Layout",
    "Platform",
    "RootNotFoundError",
    "bindgen_command",
    "build_bindings",
    "classify_platform",
    "lib_extension",
    "lib_filename",
    "reset_directory",
    "resolve_root",
    "run_bindgen",
]
