"""Domain service: random Guess generation.

The source of randomness is injected so callers (and tests) can supply a
seeded generator. Without one, a shared SystemRandom is used.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol

from guessing_utils.domain.exceptions import GuessRangeError
from guessing_utils.domain.model.guess import GUESS_MAX, GUESS_MIN, Guess

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that draws uniform integers from a closed interval.

    ``random.Random``, ``random.SystemRandom`` and the ``random`` module
    itself all qualify.
    """

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that a <= N <= b."""
        ...


# Draws from the OS entropy pool, no in-process state to share.
_default_source: RandomSource = random.SystemRandom()


def gen_random(rng: RandomSource | None = None) -> Guess:
    """Return a Guess holding a uniformly drawn number in 0-100.

    Always succeeds for a well-behaved source. A source that hands back a
    number outside the interval it was asked for is a programming error and
    surfaces as RuntimeError, not as a GuessError.
    """
    source = rng if rng is not None else _default_source
    drawn = source.randint(GUESS_MIN, GUESS_MAX)

    try:
        guess = Guess(drawn)
    except GuessRangeError as exc:
        logger.critical(
            "Random source %r returned %r outside [%d, %d]",
            source, drawn, GUESS_MIN, GUESS_MAX,
        )
        raise RuntimeError(
            f"Random source returned {drawn!r}, outside {GUESS_MIN}-{GUESS_MAX}"
        ) from exc

    logger.debug("Generated random guess %s", guess)
    return guess
