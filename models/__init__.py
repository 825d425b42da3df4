"""Data models and utility functions.

This package contains:
- types: Configuration, LightCommand, Light and Group records
- utils: Listing formatters and fuzzy command matching
"""
