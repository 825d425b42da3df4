#!/usr/bin/env python3
"""
blilys
Control Philips Hue lights from the command line.
"""

import logging

import click

from core.auth import discover_bridge_ip
from core.bridge import HueBridge
from core.config import load_config, resolve_path

from commands.setup import BlilysGroup, pair_command, config_command
from commands.listing import lights_command, groups_command
from commands.control import light_command, group_command


@click.group(
    cls=BlilysGroup,
    context_settings={'help_option_names': ['-h', '--help']}
)
@click.version_option(version='0.1.0', prog_name='blilys')
@click.option('--bridge', 'bridge_ip', metavar='IP',
              help='Bridge IP address. If not provided, the cached address or auto discovery is used.')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, bridge_ip: str | None, debug: bool):
    """Control Philips Hue lights from the command line.

Pairing: run 'pair' once and press the link button on the bridge.
The bridge address and username are cached in the config file; see 'config'."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    # config_path, bridge_factory and discover may be supplied by the caller via obj
    obj = ctx.ensure_object(dict)
    if 'config_path' not in obj:
        obj['config_path'] = resolve_path()
    obj['config'] = load_config(obj['config_path'])
    obj['bridge_ip'] = bridge_ip
    obj.setdefault('bridge_factory', HueBridge)
    obj.setdefault('discover', discover_bridge_ip)


cli.add_command(pair_command)
cli.add_command(config_command)
cli.add_command(lights_command)
cli.add_command(groups_command)
cli.add_command(light_command)
cli.add_command(group_command)


def main():
    cli()


if __name__ == '__main__':
    main()
