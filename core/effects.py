"""Light effects.

Currently just the Halloween flicker: alternate a dim and a bright random
brightness with random pauses, forever.
"""

import random
import time
from typing import Callable

from models.types import LightCommand

# Half-open [low, high) ranges
DIM_BRI = (1, 50)
BRIGHT_BRI = (70, 120)
PAUSE_MS = (200, 1000)


def rand_bri(low: int, high: int, rng=random) -> int:
    """Uniform brightness in [low, high)."""
    return rng.randrange(low, high)


def sleep_a_bit(sleep: Callable[[float], None] = time.sleep, rng=random):
    """Pause for a uniform random duration in [200, 1000) ms."""
    sleep(rng.randrange(*PAUSE_MS) / 1000)


def halloween(set_state: Callable[[LightCommand], object], iterations: int | None = None,
              sleep: Callable[[float], None] = time.sleep, rng=random):
    """Run the Halloween flicker.

    Only brightness is sent, so each step overrides whatever brightness
    was set by other sources. Runs until the process is interrupted
    unless iterations is given.

    Args:
        set_state: Called with each LightCommand (e.g. a bound set_light_state)
        iterations: Number of dim/bright cycles; None runs forever
        sleep: Sleep function taking seconds
        rng: Source of randrange()
    """
    count = 0
    while iterations is None or count < iterations:
        set_state(LightCommand(bri=rand_bri(*DIM_BRI, rng=rng)))
        sleep_a_bit(sleep, rng)

        set_state(LightCommand(bri=rand_bri(*BRIGHT_BRI, rng=rng)))
        sleep_a_bit(sleep, rng)
        count += 1
