"""
Main CLI entry point for the ago package alias wrapper.

This module provides the top-level command group. The alias management and
help commands are handled here; get and install have their package aliases
resolved; every other command is forwarded to go unchanged.
"""

import sys
import logging

import click

from cli.context import CLIContext, CONFIG_DIR_ENV
from cli.version import format_version
from cli.commands import alias_commands, go_commands
from cli.exceptions import CLIError
from cli.formatters import setup_logging, print_error


logger = logging.getLogger(__name__)


AGO_USAGE = """usage: ago <command> [arguments]

ago is a wrapper around the go command that adds the ability to alias packages
with short, memorable names. Only the get and install commands are affected. All
other flags and arguments are passed through to the go command.

create aliases with the alias command:

\t$ ago alias foo github.com/foo/bar/v2

then use the alias in place of the package name:

\t$ ago get foo

which is equivalent to:

\t$ go get github.com/foo/bar/v2

The commands are:

\talias, a      create/manage package aliases
\tget           download packages and dependencies
\tinstall       compile and install packages and dependencies
\thelp          display this help text

"""


class AgoGroup(click.Group):
    """
    Top-level group that forwards unknown commands to go.

    Errors raised as CLIError by any command are reported once here and turned
    into the error's exit code.
    """

    command_aliases = {'a': 'alias'}

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, self.command_aliases.get(cmd_name, cmd_name))
        if command is None:
            command = go_commands.make_passthrough_command(cmd_name)
        return command

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except CLIError as e:
            logger.debug(f"Command failed: {e}")
            print_error(str(e))
            ctx.exit(e.exit_code)


def _print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(format_version())
    ctx.exit()


@click.group(cls=AgoGroup, invoke_without_command=True,
             context_settings={'ignore_unknown_options': True})
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-essential output')
@click.option('--config-dir', type=click.Path(file_okay=False), envvar=CONFIG_DIR_ENV,
              help='Directory holding aliases.json (default: ~/.ago)')
@click.option('--version', is_flag=True, callback=_print_version, expose_value=False,
              is_eager=True, help='Show the version and exit')
@click.pass_context
def cli(ctx, verbose, quiet, config_dir):
    """
    ago - package aliases for the go command.

    Examples:
        # Alias a package
        ago alias foo github.com/foo/bar/v2

        # Use the alias
        ago get foo@v2.1.0

        # Anything else goes straight to go
        ago build ./...
    """
    # Initialize context
    cli_ctx = CLIContext(config_dir=config_dir)
    cli_ctx.verbose = verbose
    cli_ctx.quiet = quiet
    ctx.obj = cli_ctx

    # Setup logging
    setup_logging(verbose, quiet)

    if ctx.invoked_subcommand is None:
        click.echo(AGO_USAGE, nl=False)


@cli.command(name='help')
def show_help():
    """Display this help text."""
    click.echo(AGO_USAGE, nl=False)


# Add commands
cli.add_command(alias_commands.alias_group)
cli.add_command(go_commands.get)
cli.add_command(go_commands.install)


def main():
    """Main entry point for the CLI application."""
    try:
        cli()
    except CLIError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error occurred")
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
