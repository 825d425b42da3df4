"""Pytest configuration and fixtures for blilys tests."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from click.testing import CliRunner

from models.types import Group, Light


class StubBridge:
    """In-memory stand-in for HueBridge that records every call."""

    def __init__(self, ip, username=None, lights=None, groups=None, calls=None,
                 register_error=None):
        self.ip = ip
        self.username = username
        self.lights = lights if lights is not None else []
        self.groups = groups if groups is not None else []
        self.calls = calls if calls is not None else []
        self.register_error = register_error

    def with_user(self, username):
        return type(self)(self.ip, username, self.lights, self.groups, self.calls)

    def register_user(self, devicetype):
        self.calls.append(('register_user', devicetype))
        if self.register_error:
            raise self.register_error
        return self.with_user('new-user-token')

    def get_lights(self):
        self.calls.append(('get_lights',))
        return self.lights

    def get_groups(self):
        self.calls.append(('get_groups',))
        return self.groups

    def set_light_state(self, light_id, command):
        self.calls.append(('set_light_state', light_id, command))

    def set_group_state(self, group_id, command):
        self.calls.append(('set_group_state', group_id, command))


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_path(tmp_path):
    """Return a config file path inside a temporary directory."""
    return tmp_path / 'config.toml'


@pytest.fixture
def paired_config(config_path):
    """Write a config with a cached bridge address and username."""
    config_path.write_text('[bridge]\nip = "10.0.0.2"\nusername = "cached-user"\n')
    return config_path


@pytest.fixture
def bridge_calls():
    """Shared list of calls made against any StubBridge in a test."""
    return []


@pytest.fixture
def stub_lights():
    return [
        Light(id=1, name='Hallway', on=True, bri=80, hue=8418),
        Light(id=3, name='Desk', on=False),
    ]


@pytest.fixture
def stub_groups():
    return [
        Group(id=1, name='Living room', lights=['2', '10', '1']),
    ]


@pytest.fixture
def bridge_factory(bridge_calls, stub_lights, stub_groups):
    """Factory producing StubBridge handles that share one call log."""
    def factory(ip):
        bridge_calls.append(('connect', ip))
        return StubBridge(ip, lights=stub_lights, groups=stub_groups, calls=bridge_calls)
    return factory


@pytest.fixture
def discover():
    """Discovery stub returning a fixed address."""
    return MagicMock(return_value='10.0.0.99')


@pytest.fixture
def run_cli(config_path, bridge_factory, discover):
    """Invoke the blilys CLI against the stub bridge and temporary config."""
    from blilys import cli

    def run(args, input=None, factory=None):
        obj = {
            'config_path': config_path,
            'bridge_factory': factory or bridge_factory,
            'discover': discover,
        }
        return CliRunner().invoke(cli, args, input=input, obj=obj)
    return run
