"""Tests for the Halloween effect in core/effects.py"""

import random
from unittest.mock import MagicMock

from core.effects import BRIGHT_BRI, DIM_BRI, PAUSE_MS, halloween, rand_bri, sleep_a_bit
from models.types import LightCommand


class TestConstants:
    """The flicker ranges are fixed."""

    def test_ranges(self):
        assert DIM_BRI == (1, 50)
        assert BRIGHT_BRI == (70, 120)
        assert PAUSE_MS == (200, 1000)


class TestHalloween:
    """Test the dim/bright alternation."""

    def test_alternates_dim_and_bright(self):
        commands = []
        sleeps = []

        halloween(commands.append, iterations=500, sleep=sleeps.append, rng=random.Random(42))

        assert len(commands) == 1000
        dim = commands[0::2]
        bright = commands[1::2]
        assert all(1 <= c.bri < 50 for c in dim)
        assert all(70 <= c.bri < 120 for c in bright)
        assert all(0.2 <= s < 1.0 for s in sleeps)
        assert len(sleeps) == 1000

    def test_only_brightness_is_sent(self):
        commands = []
        halloween(commands.append, iterations=3, sleep=lambda s: None, rng=random.Random(1))
        assert all(c.on is None and c.hue is None for c in commands)
        assert all(set(c.to_payload()) == {'bri'} for c in commands)

    def test_draws_from_half_open_ranges(self):
        """randrange is asked for the exact bounds, so upper bounds are never hit."""
        rng = MagicMock()
        rng.randrange.side_effect = [1, 500, 119, 999]
        commands = []
        sleeps = []

        halloween(commands.append, iterations=1, sleep=sleeps.append, rng=rng)

        assert [call.args for call in rng.randrange.call_args_list] == [
            (1, 50), (200, 1000), (70, 120), (200, 1000),
        ]
        assert commands == [LightCommand(bri=1), LightCommand(bri=119)]
        assert sleeps == [0.5, 0.999]

    def test_zero_iterations_does_nothing(self):
        set_state = MagicMock()
        halloween(set_state, iterations=0)
        set_state.assert_not_called()


class TestHelpers:

    def test_rand_bri_bounds(self):
        rng = random.Random(7)
        values = {rand_bri(1, 3, rng=rng) for _ in range(200)}
        assert values == {1, 2}

    def test_sleep_a_bit_uses_seconds(self):
        rng = MagicMock()
        rng.randrange.return_value = 250
        sleep = MagicMock()
        sleep_a_bit(sleep, rng)
        sleep.assert_called_once_with(0.25)
