"""Load interface names and ABI descriptions from disk.

Reads the Solidity source tree for the allow-list of interface names and
the flat ABI directory for description files.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from .naming import ABI_SUFFIX, contract_name, is_abi_file

DEFAULT_SRC_DIR = Path("src")
DEFAULT_ABI_DIR = Path("abis")

# Source subdirectories whose contracts get typed bindings
SOURCE_DIRS: tuple[str, ...] = ("branch", "hub", "interfaces", "lib", "message", "twab")
SOURCE_EXTENSION = ".sol"


@dataclass
class AbiEntry:
    """One description file in the ABI directory."""

    filename: str
    path: Path
    name: str
    content: Any


def collect_interface_names(
    src_dir: Path = DEFAULT_SRC_DIR,
    source_dirs: Iterable[str] = SOURCE_DIRS,
    extension: str = SOURCE_EXTENSION,
) -> set[str]:
    """Return the base names of every source file under the given subdirectories."""
    names: set[str] = set()
    for subdir in source_dirs:
        for path in (Path(src_dir) / subdir).glob(f"**/*{extension}"):
            if path.is_file():
                names.add(path.stem)
    return names


def load_abi(path: Path) -> Any:
    """Read and parse one ABI description file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def scan_abi_dir(abi_dir: Path = DEFAULT_ABI_DIR, suffix: str = ABI_SUFFIX) -> list[AbiEntry]:
    """Load every description file in abi_dir, in directory listing order.

    Not recursive. Parse errors propagate.
    """
    abi_dir = Path(abi_dir)
    entries: list[AbiEntry] = []
    for filename in os.listdir(abi_dir):
        if not is_abi_file(filename):
            continue
        path = abi_dir / filename
        entries.append(AbiEntry(
            filename=filename,
            path=path,
            name=contract_name(filename, suffix),
            content=load_abi(path),
        ))
    return entries
