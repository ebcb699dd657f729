"""
Data models and validation classes for the alias store.

This module defines the alias entry data structure and the exceptions raised
by the storage layer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


class ValidationError(Exception):
    """Raised when alias data validation fails."""
    pass


class AliasStoreError(Exception):
    """Raised when the persisted alias state cannot be read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None
        self.original_error = original_error


@dataclass
class Alias:
    """
    Represents a single alias entry.

    Attributes:
        name: Short user-defined name typed on the command line
        target: Package path the alias expands to (may end in a /vN segment)
    """
    name: str
    target: str

    def __post_init__(self):
        """Validate alias data after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate alias data.

        Raises:
            ValidationError: If validation fails
        """
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Alias name cannot be empty")

        if not isinstance(self.target, str) or not self.target.strip():
            raise ValidationError(f"Target package for alias {self.name!r} cannot be empty")
