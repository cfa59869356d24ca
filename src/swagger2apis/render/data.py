"""Render data — turns a ``TransformResult`` into what client templates consume.

Only cosmetic work happens here: function naming, path templating and
default values. Types arrive already resolved and are never re-resolved.
"""

import re

from pydantic import BaseModel

from swagger2apis.config import Settings
from swagger2apis.transform.models import ApiDescriptor, InterfaceDescriptor, TransformResult
from swagger2apis.transform.naming import first_upper, remove_special_characters

PARAMETER_NAME = "parameter"

# TypeScript types that are used as-is, without a namespace prefix.
TS_RAW_TYPES = {
    "string",
    "number",
    "boolean",
    "object",
    "any",
    "File",
    "string[]",
    "number[]",
    "boolean[]",
    "object[]",
    "any[]",
    "File[]",
}

DEFAULT_VALUES = {
    "string": "''",
    "number": "0",
    "boolean": "false",
    "string[]": "[]",
    "number[]": "[]",
    "boolean[]": "[]",
    "object[]": "[]",
    "any[]": "[]",
}

FALLBACK_DEFAULT = "{} as any"

_PATH_PARAM = re.compile(r"{([^}]*)}")


class ParamsInfo(BaseModel):
    type: str
    show: bool
    default_val: str | None = None


class RenderedApi(ApiDescriptor):
    fn_name: str
    params_info: ParamsInfo
    response_type: str


class RenderData(BaseModel):
    apis: list[RenderedApi]
    interfaces: list[InterfaceDescriptor]
    namespace: str
    safe: bool
    parameter_name: str = PARAMETER_NAME


def build_render_data(result: TransformResult, settings: Settings | None = None) -> RenderData:
    settings = settings or Settings()
    namespace = settings.namespace.upper()
    return RenderData(
        apis=[render_api(api, namespace) for api in result.apis],
        interfaces=result.interfaces,
        namespace=namespace,
        safe=settings.safe,
    )


def render_api(api: ApiDescriptor, namespace: str) -> RenderedApi:
    data = api.model_dump()
    data.update(
        fn_name=render_fn_name(api),
        description=render_description(api),
        path=render_path(api.path),
        method=api.method.upper(),
        params_info=render_params(api, namespace),
        response_type=render_type(api.response.type, namespace),
    )
    return RenderedApi(**data)


def render_fn_name(api: ApiDescriptor) -> str:
    """``GET /users/{id}`` with path parameter ``id`` -> ``Users_Id_$id$GET``."""
    parts = [p for p in api.path.split("/") if p]
    name = "_".join(
        first_upper(remove_special_characters(p.replace("{", "").replace("}", ""))) for p in parts
    )

    path_param = next((p for p in api.parameters if p.position == "path"), None)
    if path_param:
        name = f"{name}_${path_param.name}$"

    return f"{name}{api.method.upper()}"


def render_description(api: ApiDescriptor) -> str:
    return f"{', '.join(api.tags)}: {api.description}"


def render_path(path: str) -> str:
    """Replace ``{id}`` placeholders with the ``${parameter}`` template slot."""
    return _PATH_PARAM.sub("${" + PARAMETER_NAME + "}", path)


def render_params(api: ApiDescriptor, namespace: str) -> ParamsInfo:
    """Describe the single argument of the generated request function.

    Only the position of the first parameter is considered: query parameters
    become one inline object, a path parameter becomes a string, and a body or
    form parameter keeps its own type.
    """
    if not api.parameters:
        return ParamsInfo(type="", show=False)

    first = api.parameters[0]

    if first.position == "query":
        fields = ",".join(f"{p.name}: {p.type or 'any'}" for p in api.parameters)
        return ParamsInfo(type=f"{{{fields}}}", show=True, default_val=FALLBACK_DEFAULT)

    # TODO: pass every path segment once a request function takes more than one path parameter
    if first.position == "path":
        return ParamsInfo(type="string", show=True, default_val="''")

    type_text = first.type
    if type_text and type_text not in TS_RAW_TYPES and not type_text.startswith("Record<"):
        type_text = f"{namespace}.{type_text}"

    return ParamsInfo(
        type=type_text,
        show=bool(type_text),
        default_val=DEFAULT_VALUES.get(type_text, FALLBACK_DEFAULT),
    )


def render_type(type_text: str, namespace: str) -> str:
    if not type_text:
        return "any"
    if type_text in TS_RAW_TYPES or type_text.startswith("Record<"):
        return type_text
    return f"{namespace}.{type_text}"
