#!/usr/bin/env python3
"""
Regenerate the PHP bindings for the uniffi fixtures.

Expects `cargo build` to have produced target/debug/uniffi-bindgen-php and
target/debug/libuniffi_fixtures.{so,dylib}. Bindings are written to out/.
"""

import sys
from pathlib import Path

from uniffi_php_bindings.cli import main

if __name__ == "__main__":
    sys.exit(main(default_root=Path(__file__).resolve().parent))
