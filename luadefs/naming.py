"""Map Core API type and identifier names to Lua annotation names.

Types:
  - Number, Integer, int, float  -> number
  - String                       -> string
  - bool, Boolean                -> boolean
  - Table, Array                 -> table
  - Function                     -> function
  - Array<Player>                -> Player[]
  - anything else (documented classes and enums) passes through

Identifiers:
  Lua keywords get a trailing underscore, e.g. ``end`` -> ``end_``.
"""

from __future__ import annotations

import re

_TYPES: dict[str, str] = {
    "number": "number",
    "Number": "number",
    "integer": "number",
    "Integer": "number",
    "int": "number",
    "float": "number",
    "double": "number",
    "string": "string",
    "String": "string",
    "bool": "boolean",
    "boolean": "boolean",
    "Boolean": "boolean",
    "table": "table",
    "Table": "table",
    "Array": "table",
    "function": "function",
    "Function": "function",
    "nil": "nil",
    "any": "any",
    "Variant": "any",
}

_RESERVED_NAMES: frozenset[str] = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for",
    "function", "goto", "if", "in", "local", "nil", "not", "or",
    "repeat", "return", "then", "true", "until", "while",
})

_ARRAY_RE = re.compile(r"^Array<(.+)>$")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def map_type(name: str) -> str:
    """Return the annotation type for a schema type name."""
    if name in _TYPES:
        return _TYPES[name]
    match = _ARRAY_RE.match(name)
    if match:
        return f"{map_type(match.group(1).strip())}[]"
    return name


def map_reserved_name(name: str) -> str:
    """Return an identifier that does not collide with a Lua keyword."""
    if name in _RESERVED_NAMES:
        return f"{name}_"
    return name


def is_identifier(name: str) -> bool:
    """Whether a name can be written bare as a Lua identifier."""
    return bool(_IDENTIFIER_RE.match(name)) and name not in _RESERVED_NAMES
