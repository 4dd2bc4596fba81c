"""Build the Jinja2 template context from scanned ABI entries.

Decides which entries become typed modules and which are skipped, without
touching the filesystem. The result is consumed by codegen.generate.
"""

from __future__ import annotations

from typing import Any, Iterable

from .loader import AbiEntry

# Skip reasons reported for discarded entries
SKIP_NOT_REFERENCED = "not-referenced"
SKIP_NOT_A_LIST = "not-a-list"
SKIP_EMPTY = "empty"


def skip_reason(entry: AbiEntry, allowed: set[str] | frozenset[str]) -> str | None:
    """Return why an entry is skipped, or None if it should be emitted."""
    if entry.name not in allowed:
        return SKIP_NOT_REFERENCED
    if not isinstance(entry.content, list):
        return SKIP_NOT_A_LIST
    if len(entry.content) == 0:
        return SKIP_EMPTY
    return None


def build_context(
    entries: Iterable[AbiEntry],
    allowed: set[str] | frozenset[str],
) -> dict[str, Any]:
    """Split entries into emitted contracts and skipped files.

    Order of `contracts` follows the order of `entries`, which is the
    directory listing order of the ABI directory.
    """
    contracts: list[dict[str, Any]] = []
    skipped: list[dict[str, Any]] = []
    consumed: list[AbiEntry] = []

    for entry in entries:
        consumed.append(entry)

        reason = skip_reason(entry, allowed)
        if reason is not None:
            skipped.append({
                "filename": entry.filename,
                "name": entry.name,
                "reason": reason,
            })
            continue

        contracts.append({
            "name": entry.name,
            "filename": entry.filename,
            "abi": entry.content,
        })

    return {
        "contracts": contracts,
        "skipped": skipped,
        "consumed": consumed,
        "contract_count": len(contracts),
    }
