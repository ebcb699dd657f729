"""
Storage package for the ago package alias wrapper.

This package provides persistence of the alias mapping including:
- AliasStore for loading and saving aliases.json
- Model classes and exceptions for alias entries
"""

from .alias_store import AliasStore, ALIASES_FILE
from .models import Alias, ValidationError, AliasStoreError

__all__ = [
    'AliasStore',
    'ALIASES_FILE',
    'Alias',
    'ValidationError',
    'AliasStoreError'
]
