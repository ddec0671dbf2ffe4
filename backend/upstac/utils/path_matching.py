from __future__ import annotations
"""Ant-style path patterns combined into boolean predicates.

Pattern syntax:
    ?       one character inside a segment
    *       zero or more characters inside a segment
    **      zero or more whole segments
    {name}  one segment's worth of characters (template variable)

Usage:
    from upstac.utils.path_matching import ant, any_of
    api = any_of(ant('/auth/**'), '/documents/**')
    api('/auth/login')        # True
    api.matches('/authx')     # False
"""
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Pattern, Tuple, Union

SEPARATOR = '/'
_TOKEN_RE = re.compile(r'\?|\*|\{[^/{}]+\}')


class InvalidPathPattern(ValueError):
    """Raised when a pattern cannot be used for path matching."""


@lru_cache(maxsize=None)
def _segment_regex(segment: str) -> Pattern[str]:
    parts = []
    pos = 0
    for m in _TOKEN_RE.finditer(segment):
        parts.append(re.escape(segment[pos:m.start()]))
        token = m.group(0)
        if token == '?':
            parts.append('.')
        elif token == '*':
            parts.append('.*')
        else:
            parts.append('[^/]*')
        pos = m.end()
    parts.append(re.escape(segment[pos:]))
    return re.compile(''.join(parts))


def _tokenize(value: str) -> Tuple[str, ...]:
    return tuple(t for t in value.split(SEPARATOR) if t)


def _match_tokens(pattern: Tuple[str, ...], path: Tuple[str, ...]) -> bool:
    if not pattern:
        return not path
    head = pattern[0]
    if head == '**':
        rest = pattern[1:]
        # consecutive ** collapse into one
        while rest and rest[0] == '**':
            rest = rest[1:]
        return any(_match_tokens(rest, path[i:]) for i in range(len(path) + 1))
    if not path:
        return False
    if not _segment_regex(head).fullmatch(path[0]):
        return False
    return _match_tokens(pattern[1:], path[1:])


def match_pattern(pattern: str, path: str) -> bool:
    """Return True when ``path`` matches the Ant-style ``pattern``."""
    if not path.startswith(SEPARATOR):
        return False
    tokens = _tokenize(pattern)
    if not _match_tokens(tokens, _tokenize(path)):
        return False
    if tokens and tokens[-1] == '**':
        return True
    return pattern.endswith(SEPARATOR) == path.endswith(SEPARATOR)


def _validate(pattern: str) -> str:
    if not isinstance(pattern, str) or not pattern.startswith(SEPARATOR):
        raise InvalidPathPattern(f"Path pattern must start with '/': {pattern!r}")
    if pattern.count('{') != pattern.count('}'):
        raise InvalidPathPattern(f"Unbalanced template variable in pattern: {pattern!r}")
    return pattern


@dataclass(frozen=True)
class PathPredicate:
    """OR of a fixed, ordered set of Ant-style patterns."""

    patterns: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'patterns', tuple(_validate(p) for p in self.patterns))

    def matches(self, path: str) -> bool:
        return any(match_pattern(p, path) for p in self.patterns)

    def __call__(self, path: str) -> bool:
        return self.matches(path)

    def __or__(self, other: 'PathPredicate') -> 'PathPredicate':
        if not isinstance(other, PathPredicate):
            return NotImplemented
        return any_of(self, other)

    def includes(self, other: 'PathPredicate') -> bool:
        """True when every pattern of ``other`` is one of this predicate's OR terms."""
        return set(other.patterns).issubset(self.patterns)


def ant(pattern: str) -> PathPredicate:
    return PathPredicate((pattern,))


def any_of(*terms: Union[str, PathPredicate, Iterable[str]]) -> PathPredicate:
    """Combine patterns and predicates with boolean OR, keeping first-seen order."""
    patterns = []
    for term in terms:
        if isinstance(term, PathPredicate):
            candidates = term.patterns
        elif isinstance(term, str):
            candidates = (term,)
        else:
            candidates = tuple(term)
        for p in candidates:
            if p not in patterns:
                patterns.append(p)
    return PathPredicate(tuple(patterns))


__all__ = ['InvalidPathPattern', 'PathPredicate', 'ant', 'any_of', 'match_pattern']
