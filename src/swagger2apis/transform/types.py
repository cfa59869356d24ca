"""Resolved type expressions.

Every schema node resolves to exactly one of these variants. ``render()``
produces the TypeScript text handed to the renderer.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Swagger and Java type names -> TypeScript type names.
PRIMITIVE_TYPES: dict[str, str] = {
    "integer": "number",
    "int": "number",
    "Integer": "number",
    "long": "number",
    "Long": "number",
    "short": "number",
    "Short": "number",
    "byte": "number",
    "Byte": "number",
    "number": "number",
    "float": "number",
    "Float": "number",
    "double": "number",
    "Double": "number",
    "BigDecimal": "number",
    "BigInteger": "number",
    "string": "string",
    "String": "string",
    "char": "string",
    "date": "string",
    "Date": "string",
    "LocalDate": "string",
    "LocalDateTime": "string",
    "boolean": "boolean",
    "Boolean": "boolean",
    "object": "object",
    "Object": "object",
    "file": "File",
}


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True)


class Primitive(_Descriptor):
    kind: Literal["primitive"] = "primitive"
    name: str

    def render(self) -> str:
        return self.name


class Reference(_Descriptor):
    """A named interface, resolved by name only."""

    kind: Literal["reference"] = "reference"
    name: str

    def render(self) -> str:
        return self.name


class ArrayOf(_Descriptor):
    kind: Literal["array"] = "array"
    item: "TypeDescriptor"

    def render(self) -> str:
        return f"{self.item.render() or 'any'}[]"


class MapOf(_Descriptor):
    kind: Literal["map"] = "map"
    key: "TypeDescriptor"
    value: "TypeDescriptor"

    def render(self) -> str:
        return f"Record<{self.key.render() or 'any'},{self.value.render() or 'any'}>"


class ObjectAnonymous(_Descriptor):
    kind: Literal["object"] = "object"

    def render(self) -> str:
        return "object"


class Unknown(_Descriptor):
    """Nothing could be resolved; the consumer picks the fallback text."""

    kind: Literal["unknown"] = "unknown"

    def render(self) -> str:
        return ""


TypeDescriptor = Annotated[
    Union[Primitive, Reference, ArrayOf, MapOf, ObjectAnonymous, Unknown],
    Field(discriminator="kind"),
]

ArrayOf.model_rebuild()
MapOf.model_rebuild()


def primitive(type_name: str) -> Primitive:
    """Map a type name through ``PRIMITIVE_TYPES``, passing unknown names through."""
    return Primitive(name=PRIMITIVE_TYPES.get(type_name, type_name))


def referenced_interface(descriptor) -> str | None:
    """Name of the interface a property type points at, looking through arrays."""
    while isinstance(descriptor, ArrayOf):
        descriptor = descriptor.item
    if isinstance(descriptor, Reference):
        return descriptor.name
    return None
