"""
Control commands for direct manipulation of lights and groups.

Both 'light ID' and 'group ID' take the same operations: on (with optional
brightness and hue), off, and the Halloween flicker.
"""

import click

from core.effects import halloween
from models.types import LightCommand
from models.utils import get_bridge


def build_on_command(bri: int | None = None, hue: int | None = None) -> LightCommand:
    """State delta for 'on', with optional brightness and hue."""
    return LightCommand(on=True, bri=bri, hue=hue)


def target_setter(bridge, kind: str, target_id: int):
    """Return a callable applying a LightCommand to one light or group."""
    if kind == 'light':
        return lambda command: bridge.set_light_state(target_id, command)
    return lambda command: bridge.set_group_state(target_id, command)


def make_target_group(kind: str) -> click.Group:
    """Build the 'light' or 'group' command with its on/off/halloween operations."""

    @click.group(name=kind, help=f"Control a {kind}.")
    @click.argument('target_id', metavar='ID', type=int)
    @click.pass_context
    def target_group(ctx, target_id: int):
        ctx.obj = {'kind': kind, 'target_id': target_id}

    def set_state(ctx, command: LightCommand):
        bridge = get_bridge(ctx)
        target_setter(bridge, ctx.obj['kind'], ctx.obj['target_id'])(command)

    @target_group.command(name='on')
    @click.option('--bri', '-b', type=click.IntRange(0, 255), help='Brightness (0-255)')
    @click.option('--hue', '-u', type=click.IntRange(0, 65535), help='Hue value (0-65535)')
    @click.pass_context
    def on_command(ctx, bri: int | None, hue: int | None):
        """Turn on, optionally setting brightness and hue.

        \b
        Examples:
          blilys light 3 on --bri 80
          blilys group 1 on -u 46920
        """
        set_state(ctx, build_on_command(bri, hue))

    @target_group.command(name='off')
    @click.pass_context
    def off_command(ctx):
        """Turn off."""
        set_state(ctx, LightCommand(on=False))

    @target_group.command(name='halloween')
    @click.pass_context
    def halloween_command(ctx):
        """Halloween mode with scary blinking lights.

        Runs until interrupted with Ctrl-C.
        """
        bridge = get_bridge(ctx)
        halloween(target_setter(bridge, ctx.obj['kind'], ctx.obj['target_id']))

    return target_group


light_command = make_target_group('light')
group_command = make_target_group('group')
