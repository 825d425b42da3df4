"""
Authentication module for Hue Bridge.

Handles bridge discovery, the bridge address precedence chain, link button
pairing, and attaching the cached username to a bridge handle.
"""

from pathlib import Path
from typing import Callable

import click
import requests

from core.bridge import HueBridge
from core.config import print_config, save_config
from core.exceptions import DiscoveryError
from models.types import Configuration, DiscoveredBridge

DISCOVERY_URL = 'https://discovery.meethue.com/'

# devicetype sent when registering a new user
APP_NAME = 'blilys'


def discover_bridges() -> list[DiscoveredBridge]:
    """Discover Hue bridges on the network using N-UPnP.

    Uses the Philips discovery service at https://discovery.meethue.com/
    to find bridges on the same network.

    Returns:
        List of bridge dicts sorted by IP address (may be empty)

    Raises:
        DiscoveryError: If the discovery service cannot be queried
    """
    try:
        response = requests.get(DISCOVERY_URL, timeout=5)
        response.raise_for_status()
        bridges = response.json()
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            raise DiscoveryError(
                "Philips discovery service rate limit reached. "
                "Pass the bridge address with --bridge instead."
            ) from e
        raise DiscoveryError(f"Bridge discovery failed: {e}") from e
    except requests.exceptions.RequestException as e:
        raise DiscoveryError(f"Bridge discovery failed: {e}") from e
    except ValueError as e:
        raise DiscoveryError(f"Failed to parse discovery response: {e}") from e

    if not isinstance(bridges, list):
        raise DiscoveryError(f"Failed to parse discovery response: {bridges!r}")

    bridges = [b for b in bridges if isinstance(b, dict) and b.get('internalipaddress')]
    return sorted(bridges, key=lambda b: b['internalipaddress'])


def discover_bridge_ip() -> str:
    """Return the address of the first discovered bridge.

    Raises:
        DiscoveryError: If no bridge is found
    """
    bridges = discover_bridges()
    if not bridges:
        raise DiscoveryError(
            "No Hue bridge found on the network. Pass the bridge address with --bridge."
        )
    return bridges[0]['internalipaddress']


def resolve_bridge_ip(explicit_ip: str | None, cached_ip: str | None,
                      discover: Callable[[], str] = discover_bridge_ip) -> str:
    """Pick the bridge address to use for this invocation.

    Priority order:
    1. Address passed on the command line
    2. Address cached in the configuration
    3. Network discovery (only called when neither of the above is set)
    """
    sources = (
        lambda: explicit_ip,
        lambda: cached_ip,
        discover,
    )
    for source in sources:
        ip = source()
        if ip:
            return ip
    raise DiscoveryError("No Hue bridge address available.")


def pair_bridge(bridge: HueBridge, config: Configuration, config_path: Path) -> HueBridge:
    """Pair with a bridge via the link button and persist the new credential.

    The configuration is only touched once registration has succeeded, and
    the address and username are saved together.

    Returns:
        Authenticated bridge handle

    Raises:
        PairingError: If the bridge rejects the registration
        ConfigIoError: If the new configuration cannot be saved
    """
    click.echo(f"Discovered Philips Hue bridge at {bridge.ip}.", err=True)
    click.echo("To pair, press the button on your bridge now.", err=True)
    click.prompt("Then, press Enter to continue pairing", default='',
                 show_default=False, err=True)

    click.echo("Registering user ...", err=True)
    paired = bridge.register_user(APP_NAME)
    click.secho("✓ Pairing complete.", fg='green', err=True)

    click.echo("Saving configuration ...", err=True)
    updated = Configuration(ip=paired.ip, username=paired.username)
    save_config(config_path, updated)
    config.ip = updated.ip
    config.username = updated.username
    print_config(config_path, config)

    return paired


def connect_bridge(config: Configuration, config_path: Path, explicit_ip: str | None = None,
                   force_pair: bool = False,
                   bridge_factory: Callable[[str], HueBridge] = HueBridge,
                   discover: Callable[[], str] = discover_bridge_ip) -> HueBridge:
    """Build an authenticated bridge handle for this invocation.

    Pairs when force_pair is set or when no username is cached; otherwise
    attaches the cached username without contacting the bridge.
    """
    ip = resolve_bridge_ip(explicit_ip, config.ip, discover)
    bridge = bridge_factory(ip)

    if force_pair or not config.username:
        return pair_bridge(bridge, config, config_path)
    return bridge.with_user(config.username)
