"""
Synthetic slow operation used to simulate a sluggish backend.

When the ``ERRORS`` flag is on, the get‑by‑id endpoint calls
``simulate_expensive_operation`` before touching the repository.  The
routine burns CPU on trigonometric and square‑root arithmetic with
short pauses in between, then sleeps off whatever is left of
``min_duration``.  It keeps a single float accumulator, so memory use
stays flat no matter how many iterations run.

This is a demonstration and chaos‑testing switch, not an algorithm.
"""

import logging
import math
import random
import time

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 1_000_000
DEFAULT_PAUSE_EVERY = 100_000
DEFAULT_PAUSE_SECONDS = 0.01
DEFAULT_MIN_DURATION = 1.0


def simulate_expensive_operation(
    iterations: int = DEFAULT_ITERATIONS,
    pause_every: int = DEFAULT_PAUSE_EVERY,
    pause_seconds: float = DEFAULT_PAUSE_SECONDS,
    min_duration: float = DEFAULT_MIN_DURATION,
) -> float:
    """Block the calling thread for at least ``min_duration`` seconds.

    Parameters
    ----------
    iterations : int
        Number of arithmetic steps to perform.
    pause_every : int
        Sleep ``pause_seconds`` whenever the step index is a multiple
        of this value (including step 0).  Values below 1 disable the
        pauses.
    pause_seconds : float
        Length of each pause.
    min_duration : float
        Lower bound on the wall‑clock time of the call.

    Returns
    -------
    float
        The accumulated result, returned so the work is observable.
    """
    rng = random.Random()
    started = time.perf_counter()
    result = 0.0
    for i in range(max(iterations, 0)):
        result += math.sqrt(rng.random() * 1000) * math.sin(i) * math.cos(i)
        if pause_every > 0 and i % pause_every == 0:
            time.sleep(pause_seconds)

    remaining = min_duration - (time.perf_counter() - started)
    if remaining > 0:
        time.sleep(remaining)
    logger.debug(
        "Slow operation finished after %.3fs (%d iterations)",
        time.perf_counter() - started,
        iterations,
    )
    return result
