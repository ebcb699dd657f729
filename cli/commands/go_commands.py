"""
Go command forwarding for the CLI interface.

This module implements the commands that run the go tool:
- get: resolve aliases in the arguments, then run go get
- install: resolve aliases in the arguments, then run go install
- any other command: forwarded to go untouched
"""

import logging
import subprocess
from typing import List, Sequence

import click

from cli.context import CLIContext, pass_context
from cli.error_handlers import error_handler
from cli.exceptions import GoCommandError
from cli.formatters import print_command
from resolution.resolver import AliasResolver


logger = logging.getLogger(__name__)

# Sub-commands whose arguments name packages and are rewritten.
RESOLVING_COMMANDS = ('get', 'install')


class RawArgsCommand(click.Command):
    """
    Command that hands every argument to its callback untouched.

    No option parsing takes place, so flags such as -h, -u or -- reach go
    exactly as typed.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('add_help_option', False)
        super().__init__(*args, **kwargs)

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        ctx.params['args'] = tuple(args)
        ctx.args = []
        return []


def exit_status(returncode: int) -> int:
    """Map a subprocess return code to a process exit status."""
    if returncode < 0:
        # Terminated by a signal.
        return 128 - returncode
    return returncode


def run_go(cli_ctx: CLIContext, go_args: Sequence[str]) -> int:
    """
    Run the go command with inherited standard streams.

    Args:
        cli_ctx: CLI context holding the go binary and output settings
        go_args: Arguments following the binary name

    Returns:
        Exit status of the go command

    Raises:
        GoCommandError: If the process could not be started
    """
    binary = cli_ctx.go_binary
    go_args = list(go_args)

    if not cli_ctx.quiet:
        print_command(binary, go_args)

    logger.debug(f"Running {[binary] + go_args}")
    try:
        result = subprocess.run([binary] + go_args)
    except OSError as e:
        raise GoCommandError(binary, e.strerror or str(e))

    logger.debug(f"{binary} exited with {result.returncode}")
    return exit_status(result.returncode)


def resolve_and_run(cli_ctx: CLIContext, subcommand: str, args: Sequence[str]) -> int:
    """Rewrite aliased package arguments and run the go sub-command."""
    aliases = cli_ctx.get_alias_store().load()
    resolved = AliasResolver(aliases).resolve_args(args)
    return run_go(cli_ctx, [subcommand] + resolved)


@click.command(name='get', cls=RawArgsCommand)
@pass_context
@error_handler({'command': 'get'})
def get(ctx, args):
    """Download packages and dependencies (aliases resolved)."""
    click.get_current_context().exit(resolve_and_run(ctx, 'get', args))


@click.command(name='install', cls=RawArgsCommand)
@pass_context
@error_handler({'command': 'install'})
def install(ctx, args):
    """Compile and install packages and dependencies (aliases resolved)."""
    click.get_current_context().exit(resolve_and_run(ctx, 'install', args))


def make_passthrough_command(name: str) -> click.Command:
    """
    Build a command that forwards itself and its arguments to go verbatim.

    Args:
        name: The go sub-command (or any other first token) as typed

    Returns:
        Click command for the token
    """
    @click.command(name=name, cls=RawArgsCommand, hidden=True)
    @pass_context
    @error_handler({'command': name})
    def passthrough(ctx, args):
        click.get_current_context().exit(run_go(ctx, [name] + list(args)))

    return passthrough
