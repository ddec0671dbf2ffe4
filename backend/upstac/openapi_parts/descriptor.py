"""Documentation descriptor for the UPSTAC API.

Everything here is built once at startup and never mutated: the API metadata,
the documented/secured path predicates and the Authorization header scheme
with one scope per user role. Every builder is a pure function, so calling it
twice yields equal values.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..constants.roles import ROLE_DESCRIPTIONS, UserRole
from ..utils.path_matching import PathPredicate, any_of
from .constants import (
    API_CONTACT,
    API_DESCRIPTION,
    API_LICENSE,
    API_LICENSE_URL,
    API_TITLE,
    API_VERSION,
    PUBLIC_PATTERNS,
    SECURED_PATTERNS,
    SECURITY_KEY_LOCATION,
    SECURITY_KEY_NAME,
    SECURITY_SCHEME_NAME,
)


@dataclass(frozen=True)
class ApiMetadata:
    title: str
    description: str
    contact: str
    license: str
    license_url: str
    version: str

    def to_openapi(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'contact': {'name': self.contact},
            'license': {'name': self.license, 'url': self.license_url},
            'version': self.version,
        }


@dataclass(frozen=True)
class SecurityScheme:
    """API key carried in a request header."""

    name: str
    key_name: str
    location: str

    def to_openapi(self) -> Dict[str, Any]:
        return {'type': 'apiKey', 'name': self.key_name, 'in': self.location}


@dataclass(frozen=True)
class AuthorizationScope:
    scope: str
    description: str


@dataclass(frozen=True)
class SecurityReference:
    reference: str
    scopes: Tuple[AuthorizationScope, ...]

    def to_requirement(self) -> Dict[str, List[str]]:
        return {self.reference: [s.scope for s in self.scopes]}


@dataclass(frozen=True)
class SecurityContext:
    security_references: Tuple[SecurityReference, ...]
    for_paths: PathPredicate

    def applies_to(self, path: str) -> bool:
        return self.for_paths.matches(path)


@dataclass(frozen=True)
class ApiDescriptor:
    """Everything the OpenAPI builder needs, in one immutable record."""

    metadata: ApiMetadata
    documented_paths: PathPredicate
    security_schemes: Tuple[SecurityScheme, ...]
    security_contexts: Tuple[SecurityContext, ...]

    def is_documented(self, path: str) -> bool:
        return self.documented_paths.matches(path)

    def contexts_for(self, path: str) -> List[SecurityContext]:
        return [c for c in self.security_contexts if c.applies_to(path)]


def build_metadata() -> ApiMetadata:
    return ApiMetadata(
        title=API_TITLE,
        description=API_DESCRIPTION,
        contact=API_CONTACT,
        license=API_LICENSE,
        license_url=API_LICENSE_URL,
        version=API_VERSION,
    )


def secured_paths() -> PathPredicate:
    return any_of(*SECURED_PATTERNS)


def documented_paths() -> PathPredicate:
    # secured paths are an OR term, so they are always documented too
    return any_of(*PUBLIC_PATTERNS, secured_paths())


def build_authorization_scopes() -> List[AuthorizationScope]:
    """One scope per role, in the role enumeration's declaration order."""
    return [AuthorizationScope(scope=role.name, description=ROLE_DESCRIPTIONS[role]) for role in UserRole]


def build_security_schemes() -> List[SecurityScheme]:
    return [SecurityScheme(name=SECURITY_SCHEME_NAME, key_name=SECURITY_KEY_NAME, location=SECURITY_KEY_LOCATION)]


def build_security_references() -> List[SecurityReference]:
    return [SecurityReference(reference=SECURITY_SCHEME_NAME, scopes=tuple(build_authorization_scopes()))]


def build_security_contexts() -> List[SecurityContext]:
    return [SecurityContext(security_references=tuple(build_security_references()), for_paths=secured_paths())]


def build_descriptor() -> ApiDescriptor:
    return ApiDescriptor(
        metadata=build_metadata(),
        documented_paths=documented_paths(),
        security_schemes=tuple(build_security_schemes()),
        security_contexts=tuple(build_security_contexts()),
    )


__all__ = [
    'ApiMetadata',
    'SecurityScheme',
    'AuthorizationScope',
    'SecurityReference',
    'SecurityContext',
    'ApiDescriptor',
    'build_metadata',
    'documented_paths',
    'secured_paths',
    'build_authorization_scopes',
    'build_security_schemes',
    'build_security_references',
    'build_security_contexts',
    'build_descriptor',
]
