"""Render templates and write generated output.

Takes the context from context_builder and produces one <Contract>.ts per
accepted ABI plus index.ts in the ABI directory. Consumed description files
are removed once every output has been written.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import jinja2

from .naming import MODULE_EXTENSION, index_filename, module_filename

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_module(env: jinja2.Environment, contract: dict[str, Any]) -> str:
    """Render the typed module for one contract."""
    template = env.get_template("module.ts.j2")
    return template.render(
        name=contract["name"],
        abi_json=json.dumps(contract["abi"], indent=2, ensure_ascii=False),
    )


def render_index(env: jinja2.Environment, contracts: list[dict[str, Any]]) -> str:
    """Render the barrel file re-exporting every emitted module."""
    template = env.get_template("index.ts.j2")
    return template.render(contracts=contracts)


def generate(
    context: dict[str, Any],
    abi_dir: Path,
    extension: str = MODULE_EXTENSION,
) -> None:
    """Write modules and index.ts, then delete the consumed ABI files.

    Skipped entries go to stdout; the summary goes to stderr.
    """
    abi_dir = Path(abi_dir)
    env = _environment()

    for skipped in context["skipped"]:
        print(f"Skipping {skipped['filename']}")

    for contract in context["contracts"]:
        output_path = abi_dir / module_filename(contract["name"], extension)
        output_path.write_text(render_module(env, contract), encoding="utf-8")

    index_path = abi_dir / index_filename(extension)
    index_path.write_text(render_index(env, context["contracts"]), encoding="utf-8")

    for entry in context["consumed"]:
        entry.path.unlink()

    print(
        f"Generated {index_path} ({context['contract_count']} contracts,"
        f" {len(context['skipped'])} skipped)",
        file=sys.stderr,
    )
