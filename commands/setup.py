"""
Setup commands for the blilys CLI.

Contains the custom Click group class (typo suggestions and error
reporting) plus the pair and config commands.
"""

import click

from core.config import print_config
from core.exceptions import BlilysError
from models.utils import find_similar_strings, get_bridge


class BlilysGroup(click.Group):
    """Custom Group class that suggests similar commands and reports errors tersely."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx) from e
            raise

    def _get_suggestions(self, ctx, cmd_name):
        """Get visible command names similar to cmd_name."""
        if not cmd_name:
            return []

        visible = [
            name for name in self.list_commands(ctx)
            if not self.get_command(ctx, name).hidden
        ]
        return find_similar_strings(cmd_name, visible)

    def invoke(self, ctx):
        """Run the command, turning blilys errors into a one-line diagnostic."""
        try:
            return super().invoke(ctx)
        except BlilysError as e:
            raise click.ClickException(e.message) from e


@click.command(name='pair')
@click.pass_context
def pair_command(ctx):
    """Pair with the bridge to get a username.

    Press the link button on the bridge when asked, then press Enter.
    The bridge address and new username are saved to the config file.
    """
    get_bridge(ctx, force_pair=True)


@click.command(name='config')
@click.pass_context
def config_command(ctx):
    """Show the config file location and contents."""
    obj = ctx.find_root().obj
    print_config(obj['config_path'], obj['config'])
