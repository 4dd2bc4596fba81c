"""Shared fixtures for abigen tests.

Builds a throwaway Foundry-style project under tmp_path:

  src/interfaces/ITokenVault.sol ...
  abis/<Name>.abi.json ...
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


TRANSFER_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address", "internalType": "address"},
            {"name": "amount", "type": "uint256", "internalType": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool", "internalType": "bool"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
        "anonymous": False,
    },
]

PRICE_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "latestPrice",
        "inputs": [],
        "outputs": [{"name": "", "type": "int256", "internalType": "int256"}],
        "stateMutability": "view",
    },
]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Empty project root with src/ and abis/ directories."""
    (tmp_path / "src").mkdir()
    (tmp_path / "abis").mkdir()
    return tmp_path


@pytest.fixture
def abi_dir(project: Path) -> Path:
    return project / "abis"


@pytest.fixture
def write_source(project: Path) -> Callable[[str], Path]:
    """Create an empty source file at src/<relpath>."""
    def _write(relpath: str) -> Path:
        path = project / "src" / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// SPDX-License-Identifier: MIT\n")
        return path
    return _write


@pytest.fixture
def write_abi(abi_dir: Path) -> Callable[[str, Any], Path]:
    """Write a description file abis/<filename> holding content as JSON."""
    def _write(filename: str, content: Any) -> Path:
        path = abi_dir / filename
        path.write_text(json.dumps(content))
        return path
    return _write


@pytest.fixture
def transfer_abi() -> list[dict[str, Any]]:
    return json.loads(json.dumps(TRANSFER_ABI))


@pytest.fixture
def price_abi() -> list[dict[str, Any]]:
    return json.loads(json.dumps(PRICE_ABI))
