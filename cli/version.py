"""
Version management utilities for the ago package alias wrapper.

This module provides version information from the installed package metadata,
enriched with the git commit hash when running from a checkout.
"""

import subprocess
import sys
from importlib import metadata
from pathlib import Path
from typing import Optional


# Base version - used when the package metadata is not available
BASE_VERSION = "0.1.0"

DISTRIBUTION_NAME = "ago"


def get_git_commit_hash(short: bool = True) -> Optional[str]:
    """
    Get the current git commit hash.

    Args:
        short: If True, return short hash (7 chars), otherwise full hash

    Returns:
        Git commit hash string or None if not available
    """
    try:
        # Get the directory where this file is located
        repo_root = Path(__file__).parent.parent

        cmd = ["git", "rev-parse"]
        if short:
            cmd.append("--short")
        cmd.append("HEAD")

        result = subprocess.run(
            cmd,
            cwd=repo_root,
            capture_output=True,
            text=True,
            timeout=5
        )

        if result.returncode == 0:
            return result.stdout.strip()
        else:
            return None

    except (subprocess.TimeoutExpired, subprocess.SubprocessError, OSError):
        return None


def get_version() -> str:
    """
    Get the version string.

    Returns:
        Installed distribution version, or BASE_VERSION when not installed
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return BASE_VERSION


def get_version_info() -> dict:
    """
    Get comprehensive version information.

    Returns:
        Dictionary containing version details
    """
    short_hash = get_git_commit_hash(short=True)

    return {
        "version": get_version(),
        "short_hash": short_hash,
        "python_version": sys.version.split()[0],
        "git_available": short_hash is not None
    }


def format_version() -> str:
    """Format the one-line version banner shown by --version."""
    info = get_version_info()
    line = f"ago version {info['version']}"
    if info['git_available']:
        line += f" (commit {info['short_hash']})"
    return f"{line} python {info['python_version']}"


__version__ = get_version()
