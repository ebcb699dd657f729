"""
Data models for alias resolution.

This module defines the transient decomposition of a command-line token
computed while an alias is being expanded.
"""

from dataclasses import dataclass


@dataclass
class TokenParts:
    """
    A token split around its matched alias.

    Attributes:
        alias: Matched alias prefix
        target: Package path the alias expands to, after major reconciliation
        major: Requested major version segment including the leading slash, or empty
        remainder: Path after the alias (and after any major segment), or empty
        version: Version suffix including the leading "@", or empty
    """
    alias: str
    target: str
    major: str = ""
    remainder: str = ""
    version: str = ""

    def compose(self) -> str:
        """Build the rewritten token."""
        return f"{self.target}{self.major}{self.remainder}{self.version}"

