"""
Unit tests for the CLI error handling decorator.

This module tests that storage, validation and process errors are translated
into CLIError subclasses with the expected exit codes.
"""

import pytest
from unittest.mock import patch

from cli.error_handlers import ErrorHandler, error_handler
from cli.exceptions import CLIError, UsageError, StoreError, GoCommandError, UserCancelledError
from storage.models import AliasStoreError, ValidationError


def _raising(error):
    @error_handler({'command': 'alias'})
    def command():
        raise error
    return command


class TestErrorHandlerDecorator:
    """Test error translation by the decorator."""

    def test_returns_value_when_no_error(self):
        @error_handler()
        def command(value):
            return value * 2

        assert command(21) == 42

    def test_store_error_becomes_store_cli_error(self):
        with patch('cli.error_handlers.print_info'):
            with pytest.raises(StoreError) as exc_info:
                _raising(AliasStoreError("decode aliases file: bad", "/tmp/aliases.json"))()
        assert exc_info.value.exit_code == 1
        assert "decode aliases file: bad" in str(exc_info.value)
        assert exc_info.value.path == "/tmp/aliases.json"

    def test_validation_error_becomes_cli_error(self):
        with patch('cli.error_handlers.print_info'):
            with pytest.raises(CLIError) as exc_info:
                _raising(ValidationError("Alias name cannot be empty"))()
        assert exc_info.value.exit_code == 1
        assert "invalid alias" in str(exc_info.value)

    def test_usage_error_propagates_with_hint(self):
        with patch('cli.error_handlers.print_info') as mock_info:
            with pytest.raises(UsageError) as exc_info:
                _raising(UsageError(command='alias'))()
        assert exc_info.value.exit_code == 1
        mock_info.assert_called_once_with("Run 'ago alias help' for usage.")

    def test_go_command_error_propagates(self):
        with patch('cli.error_handlers.print_info'):
            with pytest.raises(GoCommandError) as exc_info:
                _raising(GoCommandError('go', 'No such file or directory'))()
        assert str(exc_info.value) == "failed to run go: No such file or directory"
        assert exc_info.value.exit_code == 1

    def test_keyboard_interrupt_becomes_cancelled(self):
        with patch('cli.error_handlers.print_info'):
            with pytest.raises(UserCancelledError) as exc_info:
                _raising(KeyboardInterrupt())()
        assert exc_info.value.exit_code == 130

    def test_unrelated_errors_are_not_swallowed(self):
        with pytest.raises(RuntimeError):
            _raising(RuntimeError("boom"))()


class TestStoreErrorSuggestions:
    """Test recovery suggestions for store errors."""

    def test_decode_error_suggests_fixing_file(self):
        with patch('cli.error_handlers.print_info') as mock_info:
            ErrorHandler.handle_store_error(
                AliasStoreError("decode aliases file: bad", "/tmp/aliases.json"), {}
            )
        messages = [call.args[0] for call in mock_info.call_args_list]
        assert any("/tmp/aliases.json" in message for message in messages)

    def test_permission_error_suggests_config_dir(self):
        with patch('cli.error_handlers.print_info') as mock_info:
            ErrorHandler.handle_store_error(
                AliasStoreError("create aliases file: Permission denied", "/root/.ago"), {}
            )
        messages = [call.args[0] for call in mock_info.call_args_list]
        assert any("AGO_CONFIG_DIR" in message for message in messages)
