"""
Alias resolution package for the ago package alias wrapper.

This package rewrites command-line tokens that start with a registered alias
into fully-qualified package references.
"""

from .models import TokenParts
from .resolver import AliasResolver, resolve_token, resolve_args

__all__ = [
    'TokenParts',
    'AliasResolver',
    'resolve_token',
    'resolve_args'
]
