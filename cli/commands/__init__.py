"""
CLI command modules for the ago package alias wrapper.

This package contains the command implementations organized by functional area:
- alias_commands: Alias definition, removal and listing
- go_commands: Alias resolution for get/install and forwarding to go
"""

# Import command groups for easy access
from . import (
    alias_commands,
    go_commands
)

__all__ = [
    'alias_commands',
    'go_commands'
]
