"""
Listing commands.

Print one line per light or group known to the bridge.
"""

import click

from models.utils import format_group_line, format_light_line, get_bridge


@click.command(name='lights')
@click.pass_context
def lights_command(ctx):
    """List available lights.

    \b
    Columns: id, name, on/off, brightness, hue.
    """
    bridge = get_bridge(ctx)
    for light in bridge.get_lights():
        click.echo(format_light_line(light))


@click.command(name='groups')
@click.pass_context
def groups_command(ctx):
    """List available groups with their member light ids."""
    bridge = get_bridge(ctx)
    for group in bridge.get_groups():
        click.echo(format_group_line(group))
