"""Exceptions raised by the blilys core.

Every error the CLI can report derives from BlilysError. The top-level
command group turns these into a one-line diagnostic and a non-zero exit.
"""


class BlilysError(Exception):
    """Base exception for all blilys errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigParseError(BlilysError):
    """Raised when the persisted configuration file is malformed."""

    pass


class ConfigIoError(BlilysError):
    """Raised when the configuration directory or file cannot be read or written."""

    pass


class DiscoveryError(BlilysError):
    """Raised when no Hue bridge could be found on the network."""

    pass


class PairingError(BlilysError):
    """Raised when the bridge rejects user registration or cannot be reached."""

    pass


class BridgeCommandError(BlilysError):
    """Raised when a list, get or set call against the bridge fails.

    Attributes:
        id: Hue API error type, HTTP status code, or -1 for transport failures
        message: Human-readable description
    """

    def __init__(self, id: int, message: str):
        self.id = id
        super().__init__(message)
