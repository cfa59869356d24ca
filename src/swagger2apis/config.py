"""Render settings."""

import os

from pydantic import BaseModel

NAMESPACE_ENV = "SWAGGER2APIS_NAMESPACE"
SAFE_ENV = "SWAGGER2APIS_SAFE"

DEFAULT_NAMESPACE = "API"


class Settings(BaseModel):
    """Options consumed by the render-data stage."""

    namespace: str = DEFAULT_NAMESPACE  # prefix for interface types, e.g. API.IUser
    safe: bool = False  # hide sensitive information in generated code

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            namespace=os.getenv(NAMESPACE_ENV, DEFAULT_NAMESPACE),
            safe=os.getenv(SAFE_ENV, "").lower() in ("1", "true", "yes", "on"),
        )
