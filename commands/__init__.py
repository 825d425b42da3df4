"""CLI command modules.

This package contains:
- setup: Custom Click group, pair and config commands
- listing: Light and group listings
- control: on/off/halloween for a single light or group
"""
