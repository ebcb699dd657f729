"""
CLI package for the ago package alias wrapper.

This package provides the command-line interface that manages package aliases
and forwards commands to the go tool.
"""

from .version import __version__
