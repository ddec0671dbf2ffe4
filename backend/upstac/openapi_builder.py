"""Deterministic OpenAPI spec builder driven by the documentation descriptor.

Scope:
- Walk the Flask URL map and keep only rules the descriptor documents
- Secured rules carry the Authorization requirement with every role scope
- Paths, methods and tags are sorted so output is stable across runs

This is the canonical builder module; `upstac/openapi.py` re-exports from here.
"""
from typing import Any, Dict, Optional

from flask import Flask

from .openapi_parts.constants import IMPLICIT_METHODS, OPENAPI_VERSION
from .openapi_parts.descriptor import ApiDescriptor, build_descriptor
from .openapi_parts.helpers import (
    auth_responses,
    openapi_path,
    operation_id,
    path_parameters,
    summary_from,
    tag_for,
)

__all__ = ["build_openapi_spec", "build_components"]


def build_components(descriptor: ApiDescriptor) -> Dict[str, Any]:
    schemes: Dict[str, Any] = {}
    for scheme in descriptor.security_schemes:
        body = scheme.to_openapi()
        # apiKey schemes have no scope table of their own; list role scopes as an extension
        scopes = [
            {"scope": s.scope, "description": s.description}
            for ctx in descriptor.security_contexts
            for ref in ctx.security_references
            if ref.reference == scheme.name
            for s in ref.scopes
        ]
        if scopes:
            body["x-authorization-scopes"] = scopes
        schemes[scheme.name] = body
    return {
        "securitySchemes": schemes,
        "responses": {
            "Unauthorized": {"description": "Unauthorized"},
            "Forbidden": {"description": "Forbidden"},
        },
    }


def build_openapi_spec(
    app: Flask,
    descriptor: Optional[ApiDescriptor] = None,
    server_url: Optional[str] = None,
) -> Dict[str, Any]:
    descriptor = descriptor or build_descriptor()
    paths: Dict[str, Any] = {}
    tag_names = set()
    used_ids = set()
    total_rules = 0
    documented_rules = 0

    for rule in sorted(app.url_map.iter_rules(), key=lambda r: (r.rule, r.endpoint)):
        if rule.endpoint == "static":
            continue
        total_rules += 1
        if not descriptor.is_documented(rule.rule):
            continue
        methods = sorted(m.lower() for m in (rule.methods or ()) if m not in IMPLICIT_METHODS)
        if not methods:
            continue
        documented_rules += 1

        path = openapi_path(rule.rule)
        contexts = descriptor.contexts_for(rule.rule)
        security = [ref.to_requirement() for ctx in contexts for ref in ctx.security_references]
        view = app.view_functions.get(rule.endpoint)
        tag = tag_for(rule.endpoint, rule.rule)
        tag_names.add(tag)

        ops = paths.setdefault(path, {})
        for method in methods:
            # one view may serve several rules; later rules get a numeric suffix
            base_id = op_id = operation_id(method, rule.endpoint)
            n = 1
            while op_id in used_ids:
                n += 1
                op_id = f"{base_id}_{n}"
            used_ids.add(op_id)
            od: Dict[str, Any] = {
                "summary": summary_from(view, rule.endpoint),
                "operationId": op_id,
                "tags": [tag],
                "responses": {"200": {"description": "OK"}},
            }
            params = path_parameters(rule.rule)
            if params:
                od["parameters"] = params
            if security:
                od["security"] = security
                od["responses"].update(auth_responses())
            ops[method] = od

    app.logger.debug("Documented %d of %d routes", documented_rules, total_rules)

    spec: Dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": descriptor.metadata.to_openapi(),
        "paths": dict(sorted(paths.items())),
        "components": build_components(descriptor),
        "tags": [{"name": n, "description": f"{n} endpoints"} for n in sorted(tag_names)],
    }
    if server_url:
        spec["servers"] = [{"url": server_url}]
    return spec
