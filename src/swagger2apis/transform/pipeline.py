"""Top-level transform: schema document -> ``TransformResult``."""

import logging

from swagger2apis.transform.context import ReachabilityContext
from swagger2apis.transform.extractor import extract_apis
from swagger2apis.transform.interfaces import build_interfaces
from swagger2apis.transform.models import TransformResult

logger = logging.getLogger(__name__)


def transform(document: dict, context: ReachabilityContext | None = None) -> TransformResult:
    """Convert a swagger document into endpoints and interfaces.

    Endpoints are extracted first so every response type is known before any
    interface decides its required policy. A fresh ``ReachabilityContext`` is
    used unless one is passed in (to inspect it afterwards).
    """
    if context is None:
        context = ReachabilityContext()
    if not isinstance(document, dict):
        logger.debug("Document is not a mapping, nothing to transform")
        return TransformResult()

    paths = document.get("paths")
    definitions = document.get("definitions")

    apis = extract_apis(paths if isinstance(paths, dict) else {}, context)
    interfaces = build_interfaces(definitions if isinstance(definitions, dict) else {}, context)
    logger.debug("Transformed %d endpoints and %d interfaces", len(apis), len(interfaces))

    return TransformResult(apis=apis, interfaces=interfaces)
