"""Entry point: python -m abigen

Reads abis/*.abi.json, generates abis/<Contract>.ts and abis/index.ts for
every contract declared under src/{branch,hub,interfaces,lib,message,twab}.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .codegen import generate
from .context_builder import build_context
from .loader import (
    DEFAULT_ABI_DIR,
    DEFAULT_SRC_DIR,
    SOURCE_DIRS,
    SOURCE_EXTENSION,
    collect_interface_names,
    scan_abi_dir,
)
from .naming import MODULE_EXTENSION


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="abigen",
        description="Generate typed TypeScript modules from JSON ABI files.",
    )
    parser.add_argument("--root", type=Path, default=Path("."),
                        help="Project root (default: current directory)")
    parser.add_argument("--abi-dir", type=Path, default=DEFAULT_ABI_DIR,
                        help="ABI directory, relative to --root (default: abis)")
    parser.add_argument("--src-dir", type=Path, default=DEFAULT_SRC_DIR,
                        help="Solidity source directory, relative to --root (default: src)")
    parser.add_argument("--source-dirs", default=",".join(SOURCE_DIRS),
                        help="Comma-separated subdirectories of --src-dir to scan")
    parser.add_argument("--source-extension", default=SOURCE_EXTENSION,
                        help="Extension of interface-definition files (default: .sol)")
    parser.add_argument("--extension", default=MODULE_EXTENSION,
                        help="Extension of emitted modules (default: .ts)")
    return parser.parse_args(argv)


def run(
    abi_dir: Path,
    allowed: set[str],
    extension: str = MODULE_EXTENSION,
) -> dict | None:
    """Generate modules for abi_dir against an explicit allow-list.

    Returns the context, or None if the directory holds no ABI files.
    """
    entries = scan_abi_dir(abi_dir)
    if not entries:
        # Already migrated; keep the existing index
        print(f"No ABI files in {abi_dir}, nothing to do", file=sys.stderr)
        return None

    context = build_context(entries, allowed)
    generate(context, abi_dir, extension)
    return context


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    source_dirs = [d.strip() for d in args.source_dirs.split(",") if d.strip()]

    allowed = collect_interface_names(
        args.root / args.src_dir, source_dirs, args.source_extension,
    )
    run(args.root / args.abi_dir, allowed, args.extension)


if __name__ == "__main__":
    main()
