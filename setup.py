"""
Build script for nametagger with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compile the whole scan path with mypyc
    NAMETAGGER_USE_MYPYC=1 pip install .

    # Compile only some of it, e.g. while chasing a mypyc incompatibility
    NAMETAGGER_USE_MYPYC=1 NAMETAGGER_MYPYC_MODULES=trie,cursor pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("NAMETAGGER_USE_MYPYC", "0") == "1"

PACKAGE_DIR = "src/nametagger"

# Modules run once per symbol of every scanned line. cli.py, dictionary.py,
# records.py and serialize.py run once per process or per match and stay
# interpreted.
SCAN_MODULES = ("smallset", "normalize", "trie", "cursor", "candidates", "engine")


def select_modules(requested=None):
    """Return the source paths to compile.

    ``requested`` is a comma-separated subset of SCAN_MODULES; empty or None
    selects all of them.
    """
    if not requested:
        names = list(SCAN_MODULES)
    else:
        names = [name.strip() for name in requested.split(",") if name.strip()]
        unknown = [name for name in names if name not in SCAN_MODULES]
        if unknown:
            raise ValueError(
                f"unknown module(s) {', '.join(unknown)}; choose from {', '.join(SCAN_MODULES)}"
            )
    return [f"{PACKAGE_DIR}/{name}.py" for name in names]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install nametagger[mypyc]", file=sys.stderr)
        sys.exit(1)

    try:
        modules = select_modules(os.environ.get("NAMETAGGER_MYPYC_MODULES"))
    except ValueError as exc:
        print(f"ERROR: NAMETAGGER_MYPYC_MODULES: {exc}", file=sys.stderr)
        sys.exit(1)

    for module_path in modules:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print("=" * 70)
    print(f"Compiling {len(modules)} of {len(SCAN_MODULES)} nametagger scan modules with mypyc:")
    for module in modules:
        print(f"  - {module}")
    print("=" * 70)

    return mypycify(
        modules,
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        debug_level=os.environ.get("MYPYC_DEBUG_LEVEL", "0"),
        verbose=True,
        # one shared extension, so cross-module calls on the scan path stay native
        separate=False,
        multi_file=False,
    )


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()
    else:
        print("Building nametagger in pure Python mode (no mypyc compilation)")
        print("To enable mypyc: NAMETAGGER_USE_MYPYC=1 pip install .")

    setup(
        ext_modules=ext_modules,
    )
