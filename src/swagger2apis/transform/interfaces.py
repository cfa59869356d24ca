"""Interface builder: ``definitions`` -> InterfaceDescriptor list.

Back-end definitions often only declare ``required`` for request payloads, so
any interface that is a 200-response type gets every property marked
required. Properties of such an interface that point at another interface
put that interface into ``context.deep``; after the first pass those
interfaces are rebuilt as all-required too. This reaches exactly one hop
below a response type.
"""

import logging

from swagger2apis.transform.context import ReachabilityContext
from swagger2apis.transform.models import InterfaceDescriptor, PropertyDescriptor, as_text
from swagger2apis.transform.naming import interface_name
from swagger2apis.transform.resolver import resolve
from swagger2apis.transform.types import referenced_interface

logger = logging.getLogger(__name__)

DEFAULT_PROPERTY_DESCRIPTION = "No description provided"


def build_interfaces(definitions: dict, context: ReachabilityContext) -> list[InterfaceDescriptor]:
    """Build every interface, then rebuild the ones reached from a response."""
    built: dict[str, InterfaceDescriptor] = {}
    all_required: set[str] = set()

    for raw_name, definition in definitions.items():
        if not isinstance(definition, dict):
            definition = {}
        name = interface_name(raw_name)
        if name in built:
            logger.debug("Definition %r overwrites interface %s", raw_name, name)

        declared = definition.get("required")
        required = declared if isinstance(declared, list) else []
        in_response = context.is_response_type(name)
        if in_response:
            context.mark_deep(name)
            all_required.add(name)
        else:
            all_required.discard(name)

        raw_properties = definition.get("properties")
        if not isinstance(raw_properties, dict):
            raw_properties = {}

        built[name] = InterfaceDescriptor(
            name=name,
            description=as_text(definition.get("description")),
            properties=build_properties(raw_properties, required, in_response, context),
            raw_properties=raw_properties,
        )

    for name in sorted(context.deep - all_required):
        interface = built.get(name)
        if interface is None:
            continue
        built[name] = interface.model_copy(
            update={"properties": build_properties(interface.raw_properties, [], True)}
        )

    return list(built.values())


def build_properties(
    raw_properties: dict,
    required: list,
    all_required: bool,
    context: ReachabilityContext | None = None,
) -> list[PropertyDescriptor]:
    """Without a context the all-required policy does not propagate further."""
    properties = []
    for name, schema in raw_properties.items():
        resolved = resolve(schema)

        if all_required and context is not None:
            target = referenced_interface(resolved)
            if target:
                context.mark_deep(target)

        description = schema.get("description") if isinstance(schema, dict) else None
        properties.append(
            PropertyDescriptor(
                name=str(name),
                type=resolved.render(),
                description=as_text(description) or DEFAULT_PROPERTY_DESCRIPTION,
                required=all_required or name in required,
            )
        )
    return properties
