"""
Alias store for the ago package alias wrapper.

This module persists the alias mapping as a pretty-printed JSON object
inside a base directory supplied at construction time.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple, Union

from storage.models import Alias, AliasStoreError


# Configure logging
logger = logging.getLogger(__name__)

ALIASES_FILE = "aliases.json"


class AliasStore:
    """
    Loads and saves the alias mapping.

    The store performs no locking; two invocations modifying the mapping
    at the same time may lose one of the updates.
    """

    def __init__(self, config_dir: Union[str, Path]):
        """
        Initialize the alias store.

        Args:
            config_dir: Directory holding the aliases file
        """
        self.config_dir = Path(config_dir)
        self.path = self.config_dir / ALIASES_FILE

    def load(self) -> Dict[str, str]:
        """
        Read the persisted alias mapping.

        Returns:
            Mapping of alias to target package path (empty if nothing is persisted)

        Raises:
            AliasStoreError: If the file exists but cannot be read or decoded
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug(f"No aliases file at {self.path}, starting empty")
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise AliasStoreError(f"decode aliases file: {e}", self.path, e)
        except OSError as e:
            raise AliasStoreError(f"open aliases file: {e}", self.path, e)

        if not isinstance(data, dict):
            raise AliasStoreError(
                f"decode aliases file: expected a JSON object, got {type(data).__name__}",
                self.path
            )

        for name, target in data.items():
            if not isinstance(target, str):
                raise AliasStoreError(
                    f"decode aliases file: target of alias {name!r} must be a string",
                    self.path
                )

        logger.debug(f"Loaded {len(data)} aliases from {self.path}")
        return data

    def save(self, aliases: Dict[str, str]) -> None:
        """
        Overwrite the persisted state with the given mapping.

        Keys are written in sorted order with 2-space indentation. The file is
        written next to the target and moved into place.

        Args:
            aliases: Mapping of alias to target package path

        Raises:
            AliasStoreError: If the directory or file cannot be written
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AliasStoreError(f"create config dir: {e}", self.config_dir, e)

        content = json.dumps(aliases, indent=2, sort_keys=True, ensure_ascii=False) + "\n"

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=".aliases-", suffix=".tmp", dir=str(self.config_dir)
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise AliasStoreError(f"create aliases file: {e}", self.path, e)
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.debug(f"Saved {len(aliases)} aliases to {self.path}")

    @staticmethod
    def set(aliases: Dict[str, str], alias: str, target: str) -> Dict[str, str]:
        """
        Define or replace an alias in the mapping.

        Raises:
            ValidationError: If the alias or target is empty
        """
        entry = Alias(name=alias, target=target)
        aliases[entry.name] = entry.target
        return aliases

    @staticmethod
    def remove(aliases: Dict[str, str], alias: str) -> Dict[str, str]:
        """Remove an alias from the mapping. Unknown aliases are ignored."""
        aliases.pop(alias, None)
        return aliases

    def add_alias(self, alias: str, target: str) -> Dict[str, str]:
        """Load, define the alias, and persist. Returns the saved mapping."""
        aliases = self.set(self.load(), alias, target)
        self.save(aliases)
        logger.debug(f"Aliased {alias!r} to {target!r}")
        return aliases

    def remove_alias(self, alias: str) -> Dict[str, str]:
        """Load, remove the alias, and persist. Returns the saved mapping."""
        aliases = self.load()
        if alias not in aliases:
            logger.debug(f"Alias {alias!r} not defined, nothing to remove")
        aliases = self.remove(aliases, alias)
        self.save(aliases)
        return aliases

    def list_aliases(self) -> List[Tuple[str, str]]:
        """Return all (alias, target) pairs sorted by alias."""
        return sorted(self.load().items())
