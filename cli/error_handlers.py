"""
Centralized error handling utilities for CLI commands.

This module provides the error handling decorator applied to every command:
- Translates storage and process errors into CLIError with a fixed exit code
- Prints actionable recovery suggestions; the message itself is reported
  once by the top-level command group
"""

import logging
from functools import wraps
from typing import Dict, Any, Optional, Callable

from cli.exceptions import CLIError, UsageError, StoreError, GoCommandError, UserCancelledError
from cli.formatters import print_info
from storage.models import AliasStoreError, ValidationError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling with recovery suggestions."""

    @staticmethod
    def handle_store_error(error: AliasStoreError, context: Dict[str, Any]) -> None:
        """
        Handle errors reading or writing the aliases file.

        Args:
            error: The store error that occurred
            context: Additional context about the operation that failed
        """
        error_msg = str(error).lower()
        path = error.path or context.get('path', 'unknown')

        if "decode" in error_msg:
            print_info("Recovery suggestions:")
            print_info(f"  1. Fix the JSON in {path} by hand")
            print_info("  2. The file must be an object mapping alias names to package paths")
            print_info("  3. Delete the file to start with no aliases")

        elif "permission" in error_msg:
            print_info("Recovery suggestions:")
            print_info(f"  1. Check file and directory permissions on {path}")
            print_info("  2. Point AGO_CONFIG_DIR at a writable directory")

    @staticmethod
    def handle_usage_error(error: UsageError, context: Dict[str, Any]) -> None:
        """
        Handle missing or malformed arguments to an alias command.

        Args:
            error: The usage error
            context: Additional context including the command name
        """
        command = error.command or context.get('command', 'alias')
        print_info(f"Run 'ago {command} help' for usage.")

    @staticmethod
    def handle_validation_error(error: ValidationError, context: Dict[str, Any]) -> None:
        """
        Handle an invalid alias definition.

        Args:
            error: The validation error
            context: Additional context
        """
        print_info("Example: ago alias foo github.com/foo/bar/v2")

    @staticmethod
    def handle_go_command_error(error: GoCommandError, context: Dict[str, Any]) -> None:
        """
        Handle a go command that could not be started.

        Args:
            error: The process start error
            context: Additional context
        """
        print_info("Recovery suggestions:")
        print_info(f"  1. Make sure '{error.binary}' is installed and on your PATH")
        print_info("  2. Set AGO_GO_BINARY to the full path of the go command")

    @staticmethod
    def with_error_handling(error_context: Optional[Dict[str, Any]] = None):
        """
        Decorator for consistent error handling across commands.

        Args:
            error_context: Additional context to include in error handling

        Returns:
            Decorator function that wraps command functions with error handling
        """
        if error_context is None:
            error_context = {}

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)

                except UsageError as e:
                    logger.debug(f"Usage error in {func.__name__}: {e}")
                    ErrorHandler.handle_usage_error(e, error_context)
                    raise

                except GoCommandError as e:
                    logger.debug(f"Go command failed to start in {func.__name__}: {e}")
                    ErrorHandler.handle_go_command_error(e, error_context)
                    raise

                except ValidationError as e:
                    logger.debug(f"Validation error in {func.__name__}: {e}")
                    ErrorHandler.handle_validation_error(e, error_context)
                    raise CLIError(f"invalid alias: {e}")

                except AliasStoreError as e:
                    logger.debug(f"Alias store error in {func.__name__}: {e}")
                    ErrorHandler.handle_store_error(e, error_context)
                    raise StoreError(str(e), e.path)

                except KeyboardInterrupt:
                    logger.info(f"User interrupted {func.__name__}")
                    print_info("\nOperation cancelled by user.")
                    raise UserCancelledError()

            return wrapper
        return decorator


# Export the main decorator for easy use
def error_handler(error_context: Optional[Dict[str, Any]] = None):
    """
    Decorator for consistent error handling across commands.

    This is an alias for ErrorHandler.with_error_handling.

    Args:
        error_context: Additional context to include in error handling

    Returns:
        Decorator function that wraps command functions with error handling
    """
    return ErrorHandler.with_error_handling(error_context)
