"""
Alias management commands for the CLI interface.

This module implements the alias command group including:
- <alias> <target>: Define an alias
- rm: Remove an alias
- list (ls, l): List all aliases
- help: Show alias usage
"""

import logging

import click

from cli.context import pass_context
from cli.error_handlers import error_handler
from cli.exceptions import UsageError
from cli.formatters import print_success, format_table, format_json, format_quoted
from cli.commands.go_commands import RawArgsCommand


logger = logging.getLogger(__name__)


ALIAS_USAGE = """usage:

create an alias:

\tago alias foo github.com/foo/bar/v2

remove an alias:

\tago alias rm foo

list all aliases:

\tago alias list

The sub-commands are:

\tlist, ls, l       list all aliases
\trm                remove an alias
\thelp              display this help text

"""


@click.command(name='define', cls=RawArgsCommand)
@pass_context
@error_handler({'command': 'alias'})
def define(ctx, args):
    """Define an alias: ago alias <alias> <package>."""
    if len(args) < 2:
        raise UsageError(command='alias')

    alias_name, target = args[0], args[1]
    ctx.get_alias_store().add_alias(alias_name, target)
    logger.debug(f"Defined alias {alias_name!r}")
    print_success(f"aliased {format_quoted(alias_name)} to {format_quoted(target)}")


class AliasCommandGroup(click.Group):
    """
    Alias group with short command names and a default define form.

    Any first token that is not a sub-command is an alias name, so
    "ago alias foo github.com/foo/bar" runs the define command.
    """

    command_aliases = {'ls': 'list', 'l': 'list'}

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.command_aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        if self.get_command(ctx, args[0]) is None:
            return define.name, define, args
        return super().resolve_command(ctx, args)


# Create alias command group
@click.group(name='alias', cls=AliasCommandGroup, invoke_without_command=True,
             context_settings={'ignore_unknown_options': True})
@click.pass_context
def alias_group(ctx):
    """Create and manage package aliases."""
    if ctx.invoked_subcommand is None:
        click.echo(ALIAS_USAGE, nl=False)


@alias_group.command(name='list')
@click.option('--format', '-f', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.argument('extra_args', nargs=-1)
@pass_context
@error_handler({'command': 'alias'})
def list_aliases(ctx, output_format, extra_args):
    """
    List all aliases sorted by name.

    Examples:
        # Show aliases as a table
        ago alias list

        # Show aliases as JSON
        ago alias ls --format json
    """
    rows = ctx.get_alias_store().list_aliases()

    if output_format == 'json':
        click.echo(format_json(dict(rows)))
        return

    click.echo(format_table([{'alias': name, 'package': target} for name, target in rows],
                            headers=['alias', 'package']))


@alias_group.command(name='rm', cls=RawArgsCommand)
@pass_context
@error_handler({'command': 'alias'})
def remove(ctx, args):
    """
    Remove an alias.

    Removing an alias that does not exist is not an error. Arguments after
    the alias name are ignored.

    Examples:
        ago alias rm foo
    """
    if not args:
        raise UsageError(command='alias')

    alias_name = args[0]

    ctx.get_alias_store().remove_alias(alias_name)
    print_success(f"removed alias {format_quoted(alias_name)}")


@alias_group.command(name='help')
def alias_help():
    """Display alias usage."""
    click.echo(ALIAS_USAGE, nl=False)
