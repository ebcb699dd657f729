"""
Custom exception classes for the CLI interface.

This module defines CLI-specific exceptions that provide clear error messages
and appropriate exit codes for different error conditions.
"""


class CLIError(Exception):
    """Base exception for CLI-related errors."""
    
    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class UsageError(CLIError):
    """Raised when an alias command is missing required arguments."""
    
    def __init__(self, message: str = "not enough arguments", command: str = None):
        super().__init__(message)
        self.command = command


class StoreError(CLIError):
    """Raised when the alias file cannot be read or written."""
    
    def __init__(self, message: str, path: str = None):
        if path:
            message = f"{message} ({path})"
        super().__init__(message)
        self.path = path


class GoCommandError(CLIError):
    """Raised when the go command could not be started."""
    
    def __init__(self, binary: str, reason: str):
        super().__init__(f"failed to run {binary}: {reason}")
        self.binary = binary


class UserCancelledError(CLIError):
    """Raised when user cancels an operation."""
    
    def __init__(self, message: str = "Operation cancelled by user"):
        super().__init__(message, exit_code=130)  # Standard SIGINT exit code
