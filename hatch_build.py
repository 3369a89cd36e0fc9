"""Custom build hook for hatchling that regenerates the PHP bindings."""

import os
import subprocess
import sys
from pathlib import Path

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

GENERATE_ENV_VAR = "UNIFFI_PHP_GENERATE_BINDINGS"

# Where out/ lands inside the wheel.
BINDINGS_WHEEL_PATH = "uniffi_php_bindings/bindings"


def generation_requested(environ=None) -> bool:
    """Whether the environment asks for bindings to be regenerated during the build."""
    if environ is None:
        environ = os.environ
    return environ.get(GENERATE_ENV_VAR, "").strip().lower() in ("1", "true", "yes", "on")


def generate_bindings(root: Path, verbose: bool = True):
    """Run build_bindings.py from the project root."""
    script = root / "build_bindings.py"
    if not script.exists():
        raise RuntimeError(f"Bindings script not found at {script}")

    if verbose:
        print(f"Running {script}...", file=sys.stderr)

    result = subprocess.run(
        [sys.executable, str(script)] + ([] if verbose else ["--quiet"]),
        cwd=root,
        capture_output=not verbose,
        text=True,
    )

    if result.returncode != 0:
        if not verbose and result.stderr:
            print(result.stderr, file=sys.stderr)
        raise RuntimeError(f"Binding generation failed with return code {result.returncode}")

    if verbose:
        print("Binding generation completed successfully.", file=sys.stderr)


def include_bindings(root: Path, build_data: dict, verbose: bool = True):
    """Ship the generated out/ directory inside the wheel."""
    bindings_dir = root / "out"
    if not bindings_dir.is_dir():
        raise RuntimeError(f"Generated bindings not found at {bindings_dir}")

    if "force_include" not in build_data:
        build_data["force_include"] = {}
    build_data["force_include"][str(bindings_dir)] = BINDINGS_WHEEL_PATH

    if verbose:
        print(f"Including {bindings_dir} as {BINDINGS_WHEEL_PATH}", file=sys.stderr)


class CustomBuildHook(BuildHookInterface):
    """Custom build hook that regenerates out/ before packaging."""

    PLUGIN_NAME = "custom"

    def initialize(self, version, build_data):
        """Initialize the build hook - runs before the build."""
        # Only run for editable and wheel builds
        if self.target_name not in ("wheel", "editable"):
            return

        if not generation_requested():
            return

        root = Path(self.root)
        print(f"Generating PHP bindings (target: {self.target_name})...", file=sys.stderr)
        generate_bindings(root)

        # Editable installs read out/ from the source tree
        if self.target_name == "wheel":
            include_bindings(root, build_data)
