"""HueBridge class for talking to a Philips Hue bridge.

This module wraps the handful of Hue v1 REST endpoints the CLI needs:
listing lights and groups, reading and changing their state, and
registering a new user during pairing.
"""

import logging

import requests

from core.exceptions import BridgeCommandError, PairingError
from models.types import Group, Light, LightCommand

logger = logging.getLogger(__name__)

# Hue v1 error type for "link button not pressed"
LINK_BUTTON_NOT_PRESSED = 101


def _find_error(result) -> dict | None:
    """Return the first error entry of a v1 response list, if any."""
    if isinstance(result, list):
        for entry in result:
            if isinstance(entry, dict) and 'error' in entry:
                return entry['error']
    return None


class HueBridge:
    """A handle on a single Hue bridge.

    A handle created with only an IP address is unauthenticated and can
    only register a new user. Attaching a username (via with_user() or
    register_user()) makes the light and group calls available.
    """

    def __init__(self, ip: str, username: str | None = None,
                 session: requests.Session | None = None, timeout: float = 5):
        """Initialise HueBridge.

        Args:
            ip: Bridge IP address or host name
            username: API username; None for an unauthenticated handle
            session: requests session to reuse (a new one is created if omitted)
            timeout: Per-request timeout in seconds
        """
        self.ip = ip
        self.username = username
        self.session = session or requests.Session()
        self.timeout = timeout

    def __repr__(self) -> str:
        state = 'authenticated' if self.authenticated else 'unauthenticated'
        return f"<HueBridge {self.ip} ({state})>"

    @property
    def authenticated(self) -> bool:
        return self.username is not None

    def with_user(self, username: str) -> 'HueBridge':
        """Return an authenticated handle for the same bridge.

        The username is not checked against the bridge here; a revoked or
        unknown username surfaces on the first real call.
        """
        return HueBridge(self.ip, username, session=self.session, timeout=self.timeout)

    def _request(self, method: str, endpoint: str, data: dict | None = None):
        """Make a request to the Hue Bridge API v1.

        Raises:
            BridgeCommandError: On transport failure, HTTP error status, or an
                error entry in the bridge's response
        """
        url = f"http://{self.ip}/api{endpoint}"
        logger.debug(f"{method} {url} {data}")

        try:
            response = self.session.request(method, url, json=data, timeout=self.timeout)
            response.raise_for_status()
            result = response.json()
        except requests.exceptions.HTTPError as e:
            raise BridgeCommandError(
                e.response.status_code,
                f"{method} request to {url} failed with status code {e.response.status_code}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise BridgeCommandError(-1, f"{method} request to {url} failed: {e}") from e
        except ValueError as e:
            raise BridgeCommandError(-1, f"Invalid response from bridge at {self.ip}: {e}") from e

        error = _find_error(result)
        if error:
            raise BridgeCommandError(
                error.get('type', -1),
                f"Bridge error: {error.get('description', 'unknown error')}"
            )
        return result

    def _user_endpoint(self, path: str) -> str:
        if not self.authenticated:
            raise BridgeCommandError(-1, f"Bridge at {self.ip} is not paired. Run 'blilys pair' first.")
        return f"/{self.username}{path}"

    def register_user(self, devicetype: str) -> 'HueBridge':
        """Register a new API user and return an authenticated handle.

        The link button on the bridge must have been pressed within the
        last 30 seconds.

        Raises:
            PairingError: If the bridge rejects the registration or is unreachable
        """
        try:
            result = self._request('POST', '', {'devicetype': devicetype})
        except BridgeCommandError as e:
            if e.id == LINK_BUTTON_NOT_PRESSED:
                raise PairingError(
                    "The link button has not been pressed in the last 30 seconds. "
                    "Press the button on the bridge and try again."
                ) from e
            raise PairingError(f"Pairing with bridge at {self.ip} failed: {e.message}") from e

        for entry in result if isinstance(result, list) else []:
            success = entry.get('success', {}) if isinstance(entry, dict) else {}
            if 'username' in success:
                logger.debug(f"Registered user on bridge {self.ip}")
                return self.with_user(success['username'])

        raise PairingError(f"Unexpected registration response from bridge at {self.ip}: {result}")

    @staticmethod
    def _parse_light(light_id, data: dict) -> Light:
        state = data.get('state', {})
        return Light(
            id=int(light_id),
            name=data.get('name', ''),
            on=bool(state.get('on', False)),
            bri=state.get('bri'),
            hue=state.get('hue'),
        )

    @staticmethod
    def _parse_group(group_id, data: dict) -> Group:
        return Group(
            id=int(group_id),
            name=data.get('name', ''),
            lights=list(data.get('lights', [])),
        )

    def get_lights(self) -> list[Light]:
        """Get all lights, ordered by id."""
        result = self._request('GET', self._user_endpoint('/lights'))
        lights = [self._parse_light(light_id, data) for light_id, data in result.items()]
        return sorted(lights, key=lambda light: light.id)

    def get_light(self, light_id: int) -> Light:
        """Get a single light by id."""
        result = self._request('GET', self._user_endpoint(f'/lights/{light_id}'))
        return self._parse_light(light_id, result)

    def set_light_state(self, light_id: int, command: LightCommand) -> list:
        """Apply a state delta to a light."""
        return self._request('PUT', self._user_endpoint(f'/lights/{light_id}/state'), command.to_payload())

    def get_groups(self) -> list[Group]:
        """Get all groups, ordered by id."""
        result = self._request('GET', self._user_endpoint('/groups'))
        groups = [self._parse_group(group_id, data) for group_id, data in result.items()]
        return sorted(groups, key=lambda group: group.id)

    def get_group(self, group_id: int) -> Group:
        """Get a single group by id."""
        result = self._request('GET', self._user_endpoint(f'/groups/{group_id}'))
        return self._parse_group(group_id, result)

    def set_group_state(self, group_id: int, command: LightCommand) -> list:
        """Apply a state delta to every light in a group."""
        return self._request('PUT', self._user_endpoint(f'/groups/{group_id}/action'), command.to_payload())
