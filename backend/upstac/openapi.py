"""Public import for the OpenAPI builder and the documentation descriptor.

Keeps a stable import path while the implementation lives in
`openapi_builder.py` and `openapi_parts/descriptor.py`.
"""
from .openapi_builder import build_openapi_spec  # noqa: F401
from .openapi_parts.descriptor import (  # noqa: F401
    build_descriptor,
    documented_paths,
    secured_paths,
)

__all__ = ["build_openapi_spec", "build_descriptor", "documented_paths", "secured_paths"]
