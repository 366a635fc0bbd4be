"""Type model for the generated annotation file.

Entities are built once by the schema walker, accumulate their children in
declaration order, and render themselves to annotation lines. Rendering never
mutates an entity, so the same tree always renders to the same lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .naming import is_identifier

INSTANCE_SUFFIX = "Instance"
GLOBAL_PREFIX = "Global"

_SENTENCE_END_RE = re.compile(r"(?<=\.)\s")
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")


def annotation(kind: str, value: str, description: str | None = None) -> str:
    """Build a single ``---@kind value @description`` line."""
    line = f"---@{kind} {value}"
    if description:
        line += f" @{description}"
    return line


def short_description(description: str | None) -> str | None:
    """Return the first sentence of the first non-empty line."""
    if not description:
        return None
    for line in description.splitlines():
        line = line.strip()
        if line:
            return _SENTENCE_END_RE.split(line, maxsplit=1)[0]
    return None


def lua_literal(value: int | float | str | bool) -> str:
    """Render an enum value as a Lua literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    escaped = _CONTROL_CHAR_RE.sub(lambda m: f"\\{ord(m.group()):03d}", escaped)
    return f'"{escaped}"'


def lua_key(name: str) -> str:
    """Render a table key, bracketing names that are not plain identifiers."""
    if is_identifier(name):
        return name
    return f"[{lua_literal(name)}]"


@dataclass
class Field:
    name: str
    types: list[str]
    description: str | None = None
    # Constants render exactly like static fields.
    is_constant: bool = False

    def to_annotation(self) -> str:
        return annotation(
            "field",
            f"public {self.name} {'|'.join(self.types)}",
            short_description(self.description),
        )


@dataclass
class Parameter:
    name: str
    types: list[str]
    is_optional: bool = False
    is_variadic: bool = False

    @property
    def argument(self) -> str:
        """Name used in the declaration's argument list."""
        return "..." if self.is_variadic else self.name

    def to_annotation(self) -> str:
        return annotation("param", f"{self.annotated_name} {'|'.join(self.types)}")

    @property
    def annotated_name(self) -> str:
        return f"{self.argument}?" if self.is_optional else self.argument

    def to_overload(self) -> str:
        return f"{self.annotated_name}: {'|'.join(self.types)}"


@dataclass
class Return:
    types: list[str] = field(default_factory=list)

    def add_type(self, type_name: str) -> None:
        self.types.append(type_name)

    def to_annotation(self) -> str:
        return annotation("return", ", ".join(self.types))


@dataclass
class Signature:
    parameters: list[Parameter] = field(default_factory=list)
    returns: Return | None = None

    def add_parameter(self, parameter: Parameter) -> None:
        self.parameters.append(parameter)

    def set_return(self, returns: Return) -> None:
        self.returns = returns

    def get_lines(self) -> list[str]:
        lines = [p.to_annotation() for p in self.parameters]
        if self.returns is not None:
            lines.append(self.returns.to_annotation())
        return lines

    def arguments(self) -> str:
        return ", ".join(p.argument for p in self.parameters)

    def to_overload(self) -> str:
        """Render as a single ``---@overload fun(...)`` line."""
        value = f"fun({', '.join(p.to_overload() for p in self.parameters)})"
        if self.returns is not None:
            value += f": {', '.join(self.returns.types)}"
        return annotation("overload", value)


@dataclass
class Function:
    """A callable declared on an owner table, or a bare global when ``owner`` is None.

    The display name joins owner and name with ``:`` for member functions and
    ``.`` for static ones. The first signature annotates the single
    declaration; later overloads attach to it as ``---@overload`` lines.
    """

    name: str
    owner: str | None = None
    is_member: bool = False
    description: str | None = None
    signatures: list[Signature] = field(default_factory=list)

    def add_signature(self, signature: Signature) -> None:
        self.signatures.append(signature)

    def display_name(self, owner_alias: str | None = None) -> str:
        owner = owner_alias or self.owner
        if owner is None:
            return self.name
        separator = ":" if self.is_member else "."
        return f"{owner}{separator}{self.name}"

    def get_lines(self, owner_alias: str | None = None) -> list[str]:
        name = self.display_name(owner_alias)
        lines: list[str] = []
        doc = short_description(self.description)
        if doc:
            lines.append(f"---{doc}")
        if not self.signatures:
            lines.append(f"function {name}() end")
            return lines
        first, *overloads = self.signatures
        lines.extend(first.get_lines())
        lines.extend(signature.to_overload() for signature in overloads)
        lines.append(f"function {name}({first.arguments()}) end")
        return lines


@dataclass
class ClassLike:
    """A Core class or namespace.

    Classes render two halves: the instance type (``Foo`` with its table
    ``FooInstance``) and the class-level table (type ``GlobalFoo`` bound to
    ``Foo``). Namespaces only have the class-level half.
    """

    name: str
    base_class: str | None = None
    description: str | None = None
    is_namespace: bool = False
    static_functions: list[Function] = field(default_factory=list)
    member_functions: list[Function] = field(default_factory=list)
    static_fields: list[Field] = field(default_factory=list)
    member_fields: list[Field] = field(default_factory=list)

    @property
    def instance_name(self) -> str:
        return f"{self.name}{INSTANCE_SUFFIX}"

    @property
    def global_name(self) -> str:
        return f"{GLOBAL_PREFIX}{self.name}"

    def add_function(self, function: Function, is_static: bool = False) -> None:
        if is_static:
            self.static_functions.append(function)
        else:
            self._check_member(function.name)
            self.member_functions.append(function)

    def add_field(self, item: Field, is_static: bool = False) -> None:
        if is_static:
            self.static_fields.append(item)
        else:
            self._check_member(item.name)
            self.member_fields.append(item)

    def _check_member(self, name: str) -> None:
        if self.is_namespace:
            raise ValueError(f"namespace {self.name} cannot have member {name!r}")

    def _directive(self, type_name: str) -> str:
        value = type_name
        if self.base_class:
            value += f" : {self.base_class}"
        return annotation("class", value, short_description(self.description))

    def _instance_lines(self) -> list[str]:
        lines = [self._directive(self.name)]
        lines.extend(f.to_annotation() for f in self.member_fields)
        lines.append(f"local {self.instance_name} = {{}}")
        for function in self.member_functions:
            lines.extend(function.get_lines(owner_alias=self.instance_name))
        return lines

    def _static_lines(self) -> list[str]:
        lines = [self._directive(self.global_name)]
        lines.extend(f.to_annotation() for f in self.static_fields)
        lines.append(f"{self.name} = {{}}")
        for function in self.static_functions:
            lines.extend(function.get_lines())
        return lines

    def get_lines(self) -> list[str]:
        lines: list[str] = []
        if not self.is_namespace:
            lines.extend(self._instance_lines())
        lines.extend(self._static_lines())
        return lines


@dataclass
class Enum:
    name: str
    values: list[tuple[str, int | float | str]] = field(default_factory=list)

    def add_value(self, name: str, value: int | float | str) -> None:
        self.values.append((name, value))

    def get_lines(self) -> list[str]:
        lines = [annotation("enum", self.name), f"{self.name} = {{"]
        lines.extend(f"    {lua_key(name)} = {lua_literal(value)}," for name, value in self.values)
        lines.append("}")
        return lines
