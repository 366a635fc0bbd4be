"""Build type model entities from CoreLuaAPI.json records.

Handles:
- Classes: events, static functions, constructors, properties,
  member functions, constants
- Namespaces: static events, static functions, constants
- Enums: values in declaration order
- Function overloads, optional and variadic parameters, multiple returns

Required keys are indexed directly so a malformed document fails loudly.
"""

from __future__ import annotations

from typing import Any

from .model import ClassLike, Enum, Field, Function, Parameter, Return, Signature
from .naming import map_reserved_name, map_type

# Root of the class hierarchy; never emitted as a base class.
ROOT_TYPE = "Object"

EVENT_TYPE = "Event"


def _constant_field(constant: dict[str, Any]) -> Field:
    return Field(
        constant["Name"],
        [map_type(constant["Type"])],
        constant.get("Description"),
        is_constant=True,
    )


def generate_signatures(signatures: list[dict[str, Any]]) -> list[Signature]:
    """Build one Signature per declared overload."""
    result = []
    for signature in signatures:
        type_signature = Signature()
        for parameter in signature["Parameters"]:
            type_signature.add_parameter(Parameter(
                map_reserved_name(parameter["Name"]),
                [map_type(parameter["Type"])],
                is_optional=parameter.get("IsOptional", False),
                is_variadic=parameter.get("IsVariadic", False),
            ))

        # No declared returns means no Return at all, not an empty one.
        if signature["Returns"]:
            type_return = Return()
            for ret in signature["Returns"]:
                type_return.add_type(map_type(ret["Type"]))
            type_signature.set_return(type_return)

        result.append(type_signature)
    return result


def generate_function(owner: str, func: dict[str, Any], member: bool) -> Function:
    """Build a Function named ``owner:name`` (member) or ``owner.name``."""
    function = Function(
        func["Name"],
        owner=owner,
        is_member=member,
        description=func.get("Description"),
    )
    for signature in generate_signatures(func["Signatures"]):
        function.add_signature(signature)
    return function


def generate_class(record: dict[str, Any]) -> ClassLike:
    """Convert a schema class record into a ClassLike."""
    name = record["Name"]
    base_type = record.get("BaseType")
    type_class = ClassLike(
        name,
        base_class=base_type if base_type != ROOT_TYPE else None,
        description=record.get("Description"),
    )

    for event in record.get("Events", []):
        type_class.add_field(Field(event["Name"], [EVENT_TYPE], event.get("Description")))

    # Constructors live on the class table just like static functions.
    for func in record.get("StaticFunctions", []):
        type_class.add_function(generate_function(name, func, False), is_static=True)
    for func in record.get("Constructors", []):
        type_class.add_function(generate_function(name, func, False), is_static=True)

    for prop in record["Properties"]:
        type_class.add_field(Field(
            prop["Name"],
            [map_type(prop["Type"])],
            prop.get("Description"),
        ))

    for func in record["MemberFunctions"]:
        type_class.add_function(generate_function(name, func, True))

    for constant in record.get("Constants", []):
        type_class.add_field(_constant_field(constant), is_static=True)

    return type_class


def generate_namespace(record: dict[str, Any]) -> ClassLike:
    """Convert a schema namespace record into a static-only ClassLike."""
    name = record["Name"]
    namespace = ClassLike(name, description=record.get("Description"), is_namespace=True)

    for event in record.get("StaticEvents", []):
        namespace.add_field(
            Field(event["Name"], [EVENT_TYPE], event.get("Description")),
            is_static=True,
        )
    for func in record.get("StaticFunctions", []):
        namespace.add_function(generate_function(name, func, False), is_static=True)
    for constant in record.get("Constants", []):
        namespace.add_field(_constant_field(constant), is_static=True)

    return namespace


def generate_enum(record: dict[str, Any]) -> Enum:
    """Convert a schema enum record, keeping value order."""
    type_enum = Enum(record["Name"])
    for value in record["Values"]:
        type_enum.add_value(value["Name"], value["Value"])
    return type_enum
