"""API extractor: ``paths`` -> ApiDescriptor list.

Also records every 200-response type in the reachability context, which the
interface builder reads afterwards.
"""

import logging

from swagger2apis.transform.context import ReachabilityContext
from swagger2apis.transform.models import ApiDescriptor, ParameterDescriptor, ResponseDescriptor, as_text
from swagger2apis.transform.resolver import resolve, resolve_text
from swagger2apis.transform.types import Unknown

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")
PARAMETER_POSITIONS = ("path", "query", "body", "formData")


def extract_apis(paths: dict, context: ReachabilityContext) -> list[ApiDescriptor]:
    """Build one ApiDescriptor per (path, method) pair."""
    apis = []
    for path, methods in paths.items():
        if not isinstance(methods, dict):
            continue
        for method, operation in methods.items():
            if str(method).lower() not in HTTP_METHODS or not isinstance(operation, dict):
                logger.debug("Skipping %r under %s", method, path)
                continue

            response = _parse_response(operation.get("responses") or {})
            context.record_response(response.type)

            apis.append(
                ApiDescriptor(
                    tags=_parse_tags(operation.get("tags")),
                    path=str(path),
                    method=str(method),
                    description=as_text(operation.get("description")) or as_text(operation.get("summary")),
                    parameters=_parse_parameters(operation.get("parameters") or []),
                    response=response,
                )
            )
    return apis


def _parse_tags(tags) -> list[str]:
    if isinstance(tags, str):
        return [tags]
    if not isinstance(tags, list):
        return []
    return [as_text(t) for t in tags if t is not None]


def _parse_parameters(params: list) -> list[ParameterDescriptor]:
    result = []
    for p in params:
        if not isinstance(p, dict) or p.get("in") not in PARAMETER_POSITIONS:
            continue
        result.append(
            ParameterDescriptor(
                name=as_text(p.get("name")),
                description=as_text(p.get("description")),
                type=_parameter_type(p),
                required=p.get("required") is True,
                position=p["in"],
            )
        )
    return result


def _parameter_type(param: dict) -> str:
    declared = param.get("type")
    if declared is not None and not isinstance(declared, str):
        logger.debug("Parameter %r has a non-string type %r", param.get("name"), declared)
        return ""
    if declared:
        resolved = resolve(param)
        if isinstance(resolved, Unknown):
            return str(declared)
        return resolved.render()
    return resolve_text(param.get("schema"))


def _parse_response(responses) -> ResponseDescriptor:
    if not isinstance(responses, dict):
        return ResponseDescriptor()
    ok = responses.get("200") or responses.get(200)
    if not isinstance(ok, dict):
        return ResponseDescriptor()
    schema = ok.get("schema")
    return ResponseDescriptor(
        description=as_text(ok.get("description")),
        type=resolve_text(schema) if schema else "",
    )
