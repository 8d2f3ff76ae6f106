"""The Guess value object.

A Guess is an immutable integer in the closed range 0-100. Validation lives
in the constructor, so an out-of-range Guess can never exist. Guesses compare
by value, not identity.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from guessing_utils.domain.exceptions import GuessRangeError, LexicalParseError

logger = logging.getLogger(__name__)

GUESS_MIN = 0
GUESS_MAX = 100

# Parsed text must fit a signed 32-bit integer.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")

# Unicode White_Space characters. str.strip() with no argument also removes
# the U+001C-U+001F separators, which are not whitespace.
_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Guess:
    """A guessed number between 0 and 100 inclusive."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Guess value must be an integer, got {type(self.value).__name__}"
            )
        if self.value < GUESS_MIN or self.value > GUESS_MAX:
            raise GuessRangeError(self.value)

    # --- Comparison -----------------------------------------------------------

    def compare(self, other: Guess) -> Ordering:
        """Order two guesses the way their integer values order."""
        if not isinstance(other, Guess):
            raise TypeError(f"Cannot compare Guess with {type(other).__name__}")
        if self.value < other.value:
            return Ordering.LESS
        if self.value > other.value:
            return Ordering.GREATER
        return Ordering.EQUAL

    def __lt__(self, other: Guess) -> bool:
        if not isinstance(other, Guess):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Guess) -> bool:
        if not isinstance(other, Guess):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Guess) -> bool:
        if not isinstance(other, Guess):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Guess) -> bool:
        if not isinstance(other, Guess):
            return NotImplemented
        return self.value >= other.value

    # --- Display --------------------------------------------------------------

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Guess:
        """Build a Guess from user input such as ``" 57\\n"``.

        Surrounding whitespace is ignored. Raises LexicalParseError when the
        text is not a whole number, and GuessRangeError when it is one but
        falls outside 0-100.
        """
        if not isinstance(text, str):
            raise TypeError(f"Can only parse str, got {type(text).__name__}")

        token = text.strip(_WHITESPACE)
        if not _INTEGER_TOKEN.fullmatch(token):
            logger.debug("Rejected non-numeric guess input %r", text)
            raise LexicalParseError(text)

        number = int(token)
        if number < INT32_MIN or number > INT32_MAX:
            logger.debug("Rejected guess input %r: integer overflow", text)
            raise LexicalParseError(text)

        return cls(number)
