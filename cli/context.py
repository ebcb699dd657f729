"""
CLI Context module for the ago package alias wrapper.

This module provides the shared context and decorators used across CLI commands,
preventing circular imports between cli.main and command modules.
"""

import os
from pathlib import Path
from typing import Optional

import click

from storage.alias_store import AliasStore


CONFIG_DIR_ENV = 'AGO_CONFIG_DIR'
GO_BINARY_ENV = 'AGO_GO_BINARY'
DEFAULT_CONFIG_DIRNAME = '.ago'
DEFAULT_GO_BINARY = 'go'


def default_config_dir() -> Path:
    """
    Resolve the directory holding aliases.json.
    
    Returns:
        AGO_CONFIG_DIR if set, otherwise ~/.ago
    """
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / DEFAULT_CONFIG_DIRNAME


class CLIContext:
    """Context object to share state between CLI commands."""
    
    def __init__(self, config_dir: Optional[str] = None, go_binary: Optional[str] = None):
        self.verbose = False
        self.quiet = False
        self.config_dir = Path(config_dir) if config_dir else default_config_dir()
        self.go_binary = go_binary or os.environ.get(GO_BINARY_ENV) or DEFAULT_GO_BINARY
        self.alias_store = None
    
    def get_alias_store(self) -> AliasStore:
        """Get or create the alias store for the configured directory."""
        if self.alias_store is None:
            self.alias_store = AliasStore(self.config_dir)
        return self.alias_store


# Pass context between commands
pass_context = click.make_pass_decorator(CLIContext, ensure=True)
