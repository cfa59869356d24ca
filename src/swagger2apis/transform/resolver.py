"""Type resolver: one schema node in, one ``TypeDescriptor`` out.

A node is classified into a shape once, then resolved by shape:

1. ``$ref``                   -> Reference(interface name)
2. ``additionalProperties``   -> MapOf(string, ...) for array values, else object
3. ``type: array``            -> MapOf for ``Name«K,V»`` items, else ArrayOf
4. anything else              -> primitive table lookup, or Unknown

The resolver never raises; malformed nodes degrade to ``Unknown``.
"""

import logging
import re
from dataclasses import dataclass

from swagger2apis.transform.naming import interface_name, ref_segment
from swagger2apis.transform.types import (
    PRIMITIVE_TYPES,
    ArrayOf,
    MapOf,
    ObjectAnonymous,
    Primitive,
    Reference,
    TypeDescriptor,
    Unknown,
    primitive,
)

logger = logging.getLogger(__name__)

GENERIC_PAIR = re.compile(r"^\w*«([^«»,]+),([^«»]+)»$")


@dataclass(frozen=True)
class ReferenceShape:
    ref: str


@dataclass(frozen=True)
class MapShape:
    values: object


@dataclass(frozen=True)
class ArrayShape:
    items: object


@dataclass(frozen=True)
class ObjectShape:
    pass


@dataclass(frozen=True)
class PrimitiveShape:
    type_name: str | None


SchemaShape = ReferenceShape | MapShape | ArrayShape | ObjectShape | PrimitiveShape


def classify(node) -> SchemaShape:
    """Decide which shape a raw schema node has."""
    if not isinstance(node, dict):
        return PrimitiveShape(None)
    if node.get("$ref"):
        return ReferenceShape(str(node["$ref"]))
    if node.get("additionalProperties"):
        return MapShape(node["additionalProperties"])
    declared = node.get("type")
    if declared == "array":
        return ArrayShape(node.get("items"))
    if declared == "object" or (declared is None and isinstance(node.get("properties"), dict)):
        return ObjectShape()
    return PrimitiveShape(declared if isinstance(declared, str) else None)


def resolve(node) -> TypeDescriptor:
    shape = classify(node)

    if isinstance(shape, ReferenceShape):
        return Reference(name=interface_name(ref_segment(shape.ref)))

    if isinstance(shape, MapShape):
        if isinstance(shape.values, dict) and shape.values.get("type") == "array":
            return MapOf(key=Primitive(name="string"), value=resolve(shape.values))
        return ObjectAnonymous()

    if isinstance(shape, ArrayShape):
        return _resolve_array(shape.items)

    if isinstance(shape, ObjectShape):
        return ObjectAnonymous()

    if shape.type_name in PRIMITIVE_TYPES:
        return primitive(shape.type_name)
    if shape.type_name is not None:
        logger.debug("Unrecognized schema type %r", shape.type_name)
    return Unknown()


def _resolve_array(items) -> TypeDescriptor:
    if not isinstance(items, dict):
        logger.debug("Array schema without items")
        return ArrayOf(item=Unknown())

    ref = items.get("$ref")
    if isinstance(ref, str):
        match = GENERIC_PAIR.match(ref_segment(ref))
        if match:
            key, value = (part.strip() for part in match.groups())
            return MapOf(key=primitive(key), value=primitive(value))

    return ArrayOf(item=resolve(items))


def resolve_text(node) -> str:
    """Resolve and render in one step."""
    return resolve(node).render()
