"""Modular pieces for the programmatic OpenAPI builder.

This package holds the documentation descriptor, its constants and the
helpers the main builder imports to keep spec generation readable.
"""

__all__ = [
    "constants",
    "descriptor",
    "helpers",
]
