"""Command-line entry point."""

import argparse
import sys
from pathlib import Path

from .layout import Layout, RootNotFoundError, resolve_root
from .platforms import Platform, classify_platform
from .preflight import check_layout
from .runner import ExecutionContext, build_bindings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="uniffi-php-bindings",
        description="Regenerate the PHP bindings of the uniffi fixtures library into out/.",
    )
    parser.add_argument("--root", help="root directory (default: $ROOT_DIR, $SCRIPT_DIR, or the project directory)")
    parser.add_argument("--platform", help="platform identifier to build for (default: sys.platform)")
    parser.add_argument("--crate", dest="crate_name", help="only generate bindings for this crate")
    parser.add_argument("--no-format", action="store_true", help="do not format the generated bindings")
    parser.add_argument("--keep-going", action="store_true", help="continue after a failed step")
    parser.add_argument("--quiet", "-q", action="store_true", help="do not echo commands")
    parser.add_argument("--check", action="store_true", help="only check that the build artifacts exist")
    return parser.parse_args(argv)


def main(argv=None, default_root: Path | None = None) -> int:
    args = parse_args(argv)

    try:
        root = resolve_root(args.root, fallback=default_root)
    except RootNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    platform = classify_platform(args.platform)
    layout = Layout.for_root(root, platform)

    if args.check:
        return check_layout(layout)

    context = ExecutionContext(fail_fast=not args.keep_going, verbose=not args.quiet)
    if platform is Platform.OTHER:
        print(
            f"Warning: unrecognized platform {args.platform or sys.platform!r}, using {layout.lib_file.name}",
            file=sys.stderr,
        )

    return build_bindings(layout, context, crate_name=args.crate_name, no_format=args.no_format)
