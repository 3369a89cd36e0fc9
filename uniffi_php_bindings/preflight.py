"""
Check that the artifacts a bindings run depends on are in place.

This check:
1. Verifies the generator executable and the fixtures library were built
2. Verifies the uniffi config exists, and warns if it has no PHP section
"""

import os
import re
import sys
from pathlib import Path

from .layout import Layout
from .platforms import Platform


def has_php_section(config_path: Path) -> bool | None:
    """Whether the config declares a [bindings.php] table, or None if unreadable."""
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Warning: Error reading {config_path}: {e}", file=sys.stderr)
        return None

    return re.search(r"^\s*\[bindings\.php\]\s*$", content, re.MULTILINE) is not None


def check_layout(layout: Layout) -> int:
    """Print a report for ``layout`` and return 1 if anything required is missing."""
    errors = []
    warnings = []

    print(f"Root directory: {layout.root}")

    exe = layout.bindgen_exe
    if not exe.is_file():
        errors.append(f"  Binding generator not found: {exe}")
    elif not os.access(exe, os.X_OK):
        errors.append(f"  Binding generator is not executable: {exe}")
    else:
        print(f"  ✓ Binding generator: {exe}")

    if layout.lib_file.is_file():
        print(f"  ✓ Fixtures library: {layout.lib_file}")
    else:
        errors.append(f"  Fixtures library not found: {layout.lib_file}")

    if layout.config_file.is_file():
        print(f"  ✓ Config file: {layout.config_file}")
        if has_php_section(layout.config_file) is False:
            warnings.append(f"  No [bindings.php] table in {layout.config_file}")
    else:
        errors.append(f"  Config file not found: {layout.config_file}")

    if layout.platform is Platform.OTHER:
        warnings.append("  Unrecognized platform, assuming .so libraries")

    if warnings:
        print()
        print("⚠ Warnings:")
        for warning in warnings:
            print(warning)

    if errors:
        print()
        print("✗ Missing build artifacts:", file=sys.stderr)
        for error in errors:
            print(error, file=sys.stderr)
        return 1

    print()
    print("✓ All preflight checks passed!")
    return 0
