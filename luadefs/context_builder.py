"""Build Jinja2 template context from the Core Lua API document.

Walks every class, namespace and enum, renders each to annotation lines,
and adds the globals the document does not describe.
"""

from __future__ import annotations

from typing import Any

from .loader import get_classes, get_enums, get_namespaces
from .model import Function, Parameter, Return, Signature
from .schema_walker import generate_class, generate_enum, generate_namespace

# Type of the global ``script`` binding available to every Core script
SCRIPT_TYPE = "CoreObject"


def build_global_functions() -> list[Function]:
    """Hand-declared globals missing from the API document."""
    time_function = Function("time", signatures=[
        Signature(returns=Return(["number"])),
    ])
    tick_function = Function("Tick", signatures=[
        Signature([Parameter("deltaTime", ["number"])], Return(["number"])),
    ])
    return [time_function, tick_function]


def _block_lines(entities: list[Any]) -> list[str]:
    """Render entities, each block followed by a blank line."""
    lines: list[str] = []
    for entity in entities:
        lines.extend(entity.get_lines())
        lines.append("")
    return lines


def build_context(api: dict[str, Any]) -> dict[str, Any]:
    """Build the full template context from the API document."""
    classes = [generate_class(record) for record in get_classes(api)]
    namespaces = [generate_namespace(record) for record in get_namespaces(api)]
    enums = [generate_enum(record) for record in get_enums(api)]

    global_lines: list[str] = []
    for function in build_global_functions():
        global_lines.extend(function.get_lines())

    return {
        "class_lines": _block_lines(classes),
        "namespace_lines": _block_lines(namespaces),
        "enum_lines": _block_lines(enums),
        "global_lines": global_lines,
        "script_type": SCRIPT_TYPE,
        "class_count": len(classes),
        "namespace_count": len(namespaces),
        "enum_count": len(enums),
    }
