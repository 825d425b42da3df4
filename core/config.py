"""Configuration persistence.

This module handles:
- Resolving the per-user config file (<app dir>/blilys/config.toml)
- Loading/saving the bridge address and username as TOML
- Printing the configuration for the 'config' command and after pairing
"""

import tomllib
from pathlib import Path

import click
import tomli_w

from core.exceptions import ConfigIoError, ConfigParseError
from models.types import Configuration

APP_NAME = 'blilys'
CONFIG_FILENAME = 'config.toml'


def resolve_path() -> Path:
    """Return the config file path, creating its directory if needed.

    Raises:
        ConfigIoError: If the config directory cannot be created
    """
    config_dir = Path(click.get_app_dir(APP_NAME))
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigIoError(f"Cannot create config directory {config_dir}: {e}") from e
    return config_dir / CONFIG_FILENAME


def load_config(path: Path) -> Configuration:
    """Load configuration from path.

    A missing file is not an error: a fresh installation simply has no
    bridge address or username yet.

    Raises:
        ConfigParseError: If the file is not valid TOML or has the wrong shape
        ConfigIoError: If the file exists but cannot be read
    """
    if not path.exists():
        return Configuration()

    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Invalid config file {path}: {e}") from e
    except OSError as e:
        raise ConfigIoError(f"Cannot read config file {path}: {e}") from e

    bridge = data.get('bridge', {})
    if not isinstance(bridge, dict):
        raise ConfigParseError(f"Invalid config file {path}: 'bridge' must be a table")

    for key in ('ip', 'username'):
        if key in bridge and not isinstance(bridge[key], str):
            raise ConfigParseError(f"Invalid config file {path}: 'bridge.{key}' must be a string")

    return Configuration(ip=bridge.get('ip'), username=bridge.get('username'))


def dump_config(config: Configuration) -> str:
    """Serialise configuration to TOML, omitting absent fields."""
    bridge = {}
    if config.ip is not None:
        bridge['ip'] = config.ip
    if config.username is not None:
        bridge['username'] = config.username
    return tomli_w.dumps({'bridge': bridge})


def save_config(path: Path, config: Configuration):
    """Overwrite the config file with config.

    Raises:
        ConfigIoError: If the file cannot be written
    """
    contents = dump_config(config)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(contents)
    except OSError as e:
        raise ConfigIoError(f"Cannot write config file {path}: {e}") from e


def print_config(path: Path, config: Configuration):
    """Show where the config lives (stderr) and what it contains (stdout)."""
    click.echo(f"# {path}", err=True)
    click.echo(dump_config(config), nl=False)
