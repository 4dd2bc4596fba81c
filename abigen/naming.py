"""Derive contract names and output filenames from ABI description files.

Pattern: <Contract>.abi.json -> <Contract> -> <Contract>.ts

Examples:
  TokenVault.abi.json  -> TokenVault
  Dispatcher.abi.json  -> Dispatcher
  Oracle.json          -> Oracle.json   (no .abi suffix, never matches)
"""

from __future__ import annotations

from pathlib import Path

ABI_SUFFIX = ".abi.json"
ABI_EXTENSION = ".json"
MODULE_EXTENSION = ".ts"
INDEX_NAME = "index"


def is_abi_file(filename: str) -> bool:
    """Check if a directory entry looks like an ABI description file."""
    return Path(filename).suffix == ABI_EXTENSION


def contract_name(filename: str, suffix: str = ABI_SUFFIX) -> str:
    """Strip the ABI suffix from a filename.

    Filenames without the suffix are returned unchanged.
    """
    if filename.endswith(suffix):
        return filename[: -len(suffix)]
    return filename


def module_filename(name: str, extension: str = MODULE_EXTENSION) -> str:
    """Return the filename of the module emitted for a contract."""
    return f"{name}{extension}"


def index_filename(extension: str = MODULE_EXTENSION) -> str:
    return module_filename(INDEX_NAME, extension)
