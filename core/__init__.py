"""Core functionality for blilys.

This package contains:
- bridge: HueBridge class for Hue v1 API interaction
- auth: Discovery, bridge address resolution and link button pairing
- config: Config file location, loading and saving
- effects: Halloween flicker loop
- exceptions: Error hierarchy reported by the CLI
"""
