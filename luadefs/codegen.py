"""Render the template and write the annotation file.

Takes the context from context_builder and produces
generated/core-games-api.def.lua.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
OUTPUT_DIR = Path(__file__).parent.parent / "generated"
OUTPUT_FILENAME = "core-games-api.def.lua"
TEMPLATE_NAME = f"{OUTPUT_FILENAME}.j2"


def render(context: dict[str, Any]) -> str:
    """Render the annotation file template to text."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


def generate(context: dict[str, Any], output_dir: Path | None = None) -> Path:
    """Render the template and write it to the output directory."""
    output = render(context)

    target_dir = output_dir or OUTPUT_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / OUTPUT_FILENAME
    output_path.write_text(output, encoding="utf-8")

    print(
        f"Generated {output_path} ({context['class_count']} classes, "
        f"{context['namespace_count']} namespaces, {context['enum_count']} enums)"
    )
    return output_path
