"""Render-ready data models produced by ``transform()``.

Type fields hold the rendered text of a resolved ``TypeDescriptor``
(``number``, ``IUser[]``, ``Record<string,IItem>`` ...). An empty string
means the type could not be resolved.
"""

from typing import Literal

from pydantic import BaseModel

ParameterPosition = Literal["path", "query", "body", "formData"]


class ParameterDescriptor(BaseModel):
    """A single request parameter. Header parameters never get here."""

    name: str
    description: str = ""
    type: str
    required: bool = False
    position: ParameterPosition


class ResponseDescriptor(BaseModel):
    """The 200 response; other status codes are ignored."""

    description: str = ""
    type: str = ""


class ApiDescriptor(BaseModel):
    """One endpoint: a (path, method) pair."""

    tags: list[str] = []
    path: str  # /users/{id}
    method: str  # lower case, as in the document
    description: str = ""
    parameters: list[ParameterDescriptor] = []
    response: ResponseDescriptor = ResponseDescriptor()


class PropertyDescriptor(BaseModel):
    name: str
    type: str
    description: str
    required: bool


class InterfaceDescriptor(BaseModel):
    """A named type built from one entry of ``definitions``."""

    name: str
    description: str = ""
    properties: list[PropertyDescriptor] = []
    raw_properties: dict = {}


class TransformResult(BaseModel):
    apis: list[ApiDescriptor] = []
    interfaces: list[InterfaceDescriptor] = []


def as_text(value) -> str:
    """Coerce a free-text document field; YAML turns ``summary: 2024`` into an int."""
    if value is None:
        return ""
    return str(value)
