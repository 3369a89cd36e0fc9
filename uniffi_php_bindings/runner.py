"""Reset the output directory and run the PHP binding generator."""

import shlex
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from .layout import Layout


@dataclass
class ExecutionContext:
    """How a run behaves: stop at the first failure, and echo each step."""

    fail_fast: bool = True
    verbose: bool = True

    def trace(self, *words) -> None:
        if self.verbose:
            print("+ " + shlex.join(str(w) for w in words), file=sys.stderr)


def reset_directory(path: Path, context: ExecutionContext | None = None) -> None:
    """Remove ``path`` if present and recreate it empty, parents included."""
    if context is None:
        context = ExecutionContext()

    context.trace("rm", "-rf", path)
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)

    context.trace("mkdir", "-p", path)
    path.mkdir(parents=True)


def bindgen_command(layout: Layout, crate_name: str | None = None, no_format: bool = False) -> list[str]:
    """Build the generator command line, executable first."""
    command = [
        str(layout.bindgen_exe),
        str(layout.lib_file),
        "--out-dir", str(layout.bindings_dir),
        "--library",
        "--config", str(layout.config_file),
    ]
    if crate_name:
        command += ["--crate", crate_name]
    if no_format:
        command.append("--no-format")
    return command


def run_bindgen(command: list[str], cwd: Path | None = None, context: ExecutionContext | None = None) -> int:
    """
    Run the generator and return its exit status.

    Launch failures and signals are mapped the way a shell reports them:
    127 when the executable is missing, 126 when it cannot be executed,
    and 128 + N when the process was killed by signal N. A missing
    working directory is status 1, like a failed ``cd``.
    """
    if context is None:
        context = ExecutionContext()

    if cwd is not None and not Path(cwd).is_dir():
        print(f"Error: working directory does not exist: {cwd}", file=sys.stderr)
        return 1

    context.trace(*command)
    try:
        result = subprocess.run(command, cwd=cwd)
    except FileNotFoundError:
        print(f"Error: binding generator not found: {command[0]}", file=sys.stderr)
        return 127
    except PermissionError:
        print(f"Error: binding generator is not executable: {command[0]}", file=sys.stderr)
        return 126
    except OSError as e:
        print(f"Error: could not execute {command[0]}: {e}", file=sys.stderr)
        return 126

    if result.returncode < 0:
        return 128 - result.returncode
    return result.returncode


def build_bindings(
    layout: Layout,
    context: ExecutionContext | None = None,
    crate_name: str | None = None,
    no_format: bool = False,
) -> int:
    """Reset the bindings directory and generate bindings into it."""
    if context is None:
        context = ExecutionContext()

    status = 0
    try:
        reset_directory(layout.bindings_dir, context)
    except OSError as e:
        print(f"Error: could not reset {layout.bindings_dir}: {e}", file=sys.stderr)
        if context.fail_fast:
            return 1
        status = 1

    returncode = run_bindgen(
        bindgen_command(layout, crate_name=crate_name, no_format=no_format),
        cwd=layout.root,
        context=context,
    )
    if returncode != 0 and context.verbose:
        print(f"Binding generation failed with return code {returncode}", file=sys.stderr)

    return status or returncode
