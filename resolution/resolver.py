"""
Alias Resolver - Core rewriting logic for get/install arguments.

This module provides the AliasResolver class that expands a registered alias
at the start of a command-line token into the aliased package path.

Key Features:
- Longest-prefix alias matching
- Version pins ("@v1.2.3", "@latest") carried through verbatim
- Major version segments ("/v3") reconciled with the alias target

Usage Examples:

    from resolution.resolver import AliasResolver

    resolver = AliasResolver({"foo": "github.com/foo/bar/v2"})
    resolver.resolve("foo@v1.2.3")     # github.com/foo/bar/v2@v1.2.3
    resolver.resolve("foo/v3/sub")     # github.com/foo/bar/v3/sub
    resolver.resolve_args(["-u", "foo"])
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from .models import TokenParts


logger = logging.getLogger(__name__)

MAJOR_SEGMENT_PATTERN = re.compile(r'v[0-9]+')
TARGET_MAJOR_SUFFIX_PATTERN = re.compile(r'/v[0-9]+\Z')

# Majors 0 and 1 are never written as a path suffix.
IMPLICIT_MAJORS = ('/v0', '/v1')


class AliasResolver:
    """
    Expands aliases found at the start of command-line tokens.

    Aliases are applied at most once per token; a target that itself starts
    with another alias is not expanded again.
    """

    def __init__(self, aliases: Dict[str, str]):
        """
        Initialize the resolver.

        Args:
            aliases: Mapping of alias to target package path
        """
        self.aliases = dict(aliases)
        # Longest first; equal lengths ordered by name so the choice never
        # depends on mapping order.
        self._candidates = sorted(self.aliases.items(), key=lambda item: (-len(item[0]), item[0]))

    def match(self, token: str) -> Optional[Tuple[str, str]]:
        """
        Find the longest alias that is a literal prefix of the token.

        Returns:
            (alias, target) pair, or None if no alias applies
        """
        for alias, target in self._candidates:
            if alias and token.startswith(alias):
                return alias, target
        return None

    def split(self, token: str) -> Optional[TokenParts]:
        """
        Decompose a token around its matched alias.

        Returns:
            TokenParts ready to compose, or None if no alias applies
        """
        matched = self.match(token)
        if matched is None:
            return None
        alias, target = matched

        working, version = split_version(token)

        if working.startswith(alias):
            remainder = working[len(alias):]
        else:
            # The alias itself reaches past the last "@".
            remainder = working

        major, remainder = extract_major(remainder)

        if major:
            target = strip_target_major(target)
            if major in IMPLICIT_MAJORS:
                major = ""

        return TokenParts(
            alias=alias,
            target=target,
            major=major,
            remainder=remainder,
            version=version
        )

    def resolve(self, token: str) -> str:
        """
        Rewrite a single token.

        Returns:
            The expanded package reference, or the token unchanged if no alias applies
        """
        parts = self.split(token)
        if parts is None:
            return token

        resolved = parts.compose()
        logger.debug(f"Resolved {token!r} -> {resolved!r} via alias {parts.alias!r}")
        return resolved

    def resolve_args(self, args: Iterable[str]) -> List[str]:
        """Rewrite every token, preserving count and order."""
        return [self.resolve(arg) for arg in args]


def split_version(token: str) -> Tuple[str, str]:
    """
    Split a version pin off the token at its last "@".

    Returns:
        (working token, version suffix including "@" or empty)
    """
    idx = token.rfind('@')
    if idx == -1:
        return token, ""
    return token[:idx], token[idx:]


def extract_major(remainder: str) -> Tuple[str, str]:
    """
    Pull a leading major version segment out of the remainder path.

    "/v3/sub/pkg" gives ("/v3", "/sub/pkg"); "/v3" gives ("/v3", "").

    Returns:
        (major segment with leading "/" or empty, remaining path)
    """
    parts = remainder.split('/', 2)
    if len(parts) < 2 or parts[0] != "" or not MAJOR_SEGMENT_PATTERN.fullmatch(parts[1]):
        return "", remainder

    major = "/" + parts[1]
    rest = "/" + parts[2] if len(parts) > 2 else ""
    return major, rest


def strip_target_major(target: str) -> str:
    """Remove a trailing /vN segment from an alias target."""
    return TARGET_MAJOR_SUFFIX_PATTERN.sub("", target)


def resolve_token(token: str, aliases: Dict[str, str]) -> str:
    """Rewrite a single token using the given alias mapping."""
    return AliasResolver(aliases).resolve(token)


def resolve_args(args: Iterable[str], aliases: Dict[str, str]) -> List[str]:
    """Rewrite every token using the given alias mapping."""
    return AliasResolver(aliases).resolve_args(args)
