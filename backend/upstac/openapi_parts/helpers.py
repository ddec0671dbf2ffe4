"""Helper functions for the OpenAPI builder.

These translate Flask URL rules into OpenAPI path keys and fragments.
"""
import re
from typing import Any, Dict, List, Optional

from .constants import CONVERTER_SCHEMAS

# <converter(args):name> or <name>
_RULE_VAR_RE = re.compile(r'<(?:(?P<converter>[a-zA-Z_][a-zA-Z0-9_]*)(?:\([^)]*\))?:)?(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)>')


def openapi_path(rule: str) -> str:
    return _RULE_VAR_RE.sub(lambda m: '{' + m.group('name') + '}', rule)


def path_parameters(rule: str) -> List[Dict[str, Any]]:
    params = []
    for m in _RULE_VAR_RE.finditer(rule):
        converter = m.group('converter') or 'default'
        schema = CONVERTER_SCHEMAS.get(converter, CONVERTER_SCHEMAS['default'])
        params.append({'name': m.group('name'), 'in': 'path', 'required': True, 'schema': dict(schema)})
    return params


def summary_from(view_func: Optional[Any], endpoint: str) -> str:
    doc = getattr(view_func, '__doc__', None) or ''
    for line in doc.strip().splitlines():
        if line.strip():
            return line.strip()
    return endpoint.rsplit('.', 1)[-1].replace('_', ' ').capitalize()


def tag_for(endpoint: str, path: str) -> str:
    if '.' in endpoint:
        return endpoint.split('.', 1)[0].capitalize()
    segments = [s for s in path.split('/') if s]
    return segments[0].capitalize() if segments else 'Default'


def operation_id(method: str, endpoint: str) -> str:
    return f"{method}_{endpoint.replace('.', '_')}"


def auth_responses() -> Dict[str, Any]:
    return {
        '401': {'$ref': '#/components/responses/Unauthorized'},
        '403': {'$ref': '#/components/responses/Forbidden'},
    }


__all__ = ['openapi_path', 'path_parameters', 'summary_from', 'tag_for', 'operation_id', 'auth_responses']
