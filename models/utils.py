"""Utility functions for the blilys CLI.

This module contains helper functions used across the application:
- sort_light_ids: Order light ids numerically rather than lexically
- format_light_line / format_group_line: One-line listing renderers
- similarity_score: Fuzzy string matching for command typo suggestions
- find_similar_strings: Rank candidates by similarity_score
- get_bridge: Authenticated bridge handle for a running command
"""

import click

from core.auth import connect_bridge
from core.bridge import HueBridge
from models.types import Group, Light


def sort_light_ids(light_ids: list[str]) -> list[str]:
    """Sort light ids by their numeric value.

    The bridge reports ids as strings, so a plain sort would put "10"
    before "2".
    """
    return sorted(light_ids, key=int)


def format_light_line(light: Light) -> str:
    """Render a light as a single listing line.

    Example:
        ' 3: Hallway                        [on ] [bri  80] [hue  8418]'
    """
    on = 'on' if light.on else 'off'
    bri = str(light.bri or 0)
    hue = str(light.hue or 0)
    return f"{light.id:>2}: {light.name:30} [{on:3}] [bri {bri:>3}] [hue {hue:>5}]"


def format_group_line(group: Group) -> str:
    """Render a group as a single listing line with its member ids."""
    lights = ', '.join(sort_light_ids(group.lights))
    return f"{group.id:>2}: {group.name:30} [{lights}]"


def similarity_score(typed: str, name: str) -> int:
    """Score how closely a typed command resembles a command name.

    Exact match scores 100, prefix 80, substring 60. Otherwise the score is
    proportional to how many typed characters appear in order in name,
    capped at 50 and dropped to 0 below 21.
    """
    typed, name = typed.lower(), name.lower()
    if typed == name:
        return 100
    if name.startswith(typed) or typed.startswith(name):
        return 80
    if typed in name or name in typed:
        return 60

    remaining = iter(name)
    in_order = sum(1 for char in typed if char in remaining)
    score = in_order * 50 // max(len(typed), len(name))
    return score if score > 20 else 0


def find_similar_strings(target: str, candidates: list[str], limit: int = 3) -> list[str]:
    """Find the candidates most similar to target, best match first."""
    scored = [(candidate, similarity_score(target, candidate)) for candidate in candidates]
    matches = sorted((pair for pair in scored if pair[1] > 0), key=lambda pair: pair[1], reverse=True)
    return [candidate for candidate, _ in matches[:limit]]


def get_bridge(ctx: click.Context, force_pair: bool = False) -> HueBridge:
    """Get an authenticated bridge handle for the current invocation.

    This helper reduces boilerplate in bridge commands. It reads the
    settings the top-level group stored on ctx.obj and pairs if needed.

    Args:
        ctx: Click context of the running command
        force_pair: Pair even when a username is cached
    """
    obj = ctx.find_root().obj
    return connect_bridge(
        obj['config'],
        obj['config_path'],
        explicit_ip=obj.get('bridge_ip'),
        force_pair=force_pair,
        bridge_factory=obj['bridge_factory'],
        discover=obj['discover'],
    )
