"""Type definitions for the blilys CLI.

This module provides the dataclasses and TypedDicts shared between the
config store, the bridge client and the command modules.
"""

from dataclasses import dataclass, field
from typing import TypedDict


class DiscoveredBridge(TypedDict):
    """Bridge information from N-UPnP discovery."""
    id: str
    internalipaddress: str
    name: str | None


@dataclass
class Configuration:
    """Persisted bridge address and credential.

    Both fields are optional: a fresh installation has neither, and a
    successful pairing sets both at once.
    """
    ip: str | None = None
    username: str | None = None


@dataclass(frozen=True)
class LightCommand:
    """State delta sent to a light or group.

    Only the fields that are set end up in the request body.
    """
    on: bool | None = None
    bri: int | None = None
    hue: int | None = None

    def to_payload(self) -> dict:
        """Render the delta as a Hue v1 state body."""
        payload = {}
        if self.on is not None:
            payload['on'] = self.on
        if self.bri is not None:
            payload['bri'] = self.bri
        if self.hue is not None:
            payload['hue'] = self.hue
        return payload


@dataclass(frozen=True)
class Light:
    """A light as reported by the bridge listing."""
    id: int
    name: str
    on: bool = False
    bri: int | None = None
    hue: int | None = None


@dataclass(frozen=True)
class Group:
    """A bridge-defined group of lights."""
    id: int
    name: str
    lights: list[str] = field(default_factory=list)
