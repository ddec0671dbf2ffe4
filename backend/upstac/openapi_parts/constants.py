"""Centralized constants for the API documentation descriptor.

Splitting these out keeps `descriptor.py` to plain assembly. Tests depend on
deterministic ordering and content.
"""
from typing import Dict, Tuple

API_TITLE = 'Upgrad UPSTAC System'
API_DESCRIPTION = 'UPSTAC Track APIs'
API_CONTACT = 'Upgrad'
API_LICENSE = 'Apache 2.0'
API_LICENSE_URL = 'http://www.apache.org/licenses/LICENSE-2.0.html'
API_VERSION = '1.0.0'

OPENAPI_VERSION = '3.1.0'

# Public endpoints that are documented but carry no credential
PUBLIC_PATTERNS: Tuple[str, ...] = (
    '/auth/**',
    '/documents/**',
)

# Endpoints that require the Authorization header
SECURED_PATTERNS: Tuple[str, ...] = (
    '/api/testrequests/**',
    '/api/government/**',
    '/api/consultations/**',
    '/users/**',
    '/api/labrequests/**',
)

SECURITY_SCHEME_NAME = 'Authorization'
SECURITY_KEY_NAME = 'Authorization'
SECURITY_KEY_LOCATION = 'header'

# Methods Flask adds to every rule on its own
IMPLICIT_METHODS = frozenset({'HEAD', 'OPTIONS'})

# Flask converter name -> OpenAPI parameter schema
CONVERTER_SCHEMAS: Dict[str, Dict[str, str]] = {
    'int': {'type': 'integer'},
    'float': {'type': 'number'},
    'uuid': {'type': 'string', 'format': 'uuid'},
    'path': {'type': 'string'},
    'string': {'type': 'string'},
    'default': {'type': 'string'},
}

__all__ = [
    'API_TITLE',
    'API_DESCRIPTION',
    'API_CONTACT',
    'API_LICENSE',
    'API_LICENSE_URL',
    'API_VERSION',
    'OPENAPI_VERSION',
    'PUBLIC_PATTERNS',
    'SECURED_PATTERNS',
    'SECURITY_SCHEME_NAME',
    'SECURITY_KEY_NAME',
    'SECURITY_KEY_LOCATION',
    'IMPLICIT_METHODS',
    'CONVERTER_SCHEMAS',
]
