"""Domain-level exceptions.

Every failure a caller is expected to handle derives from GuessError, so an
outer layer can catch them uniformly and display ``str(exc)``. Parsing can
fail in two distinct ways; the two kinds are sibling classes so an
``except`` clause for one never catches the other.
"""

from __future__ import annotations

class GuessError(Exception):
    """Base class for all guess errors."""


class GuessRangeError(GuessError):
    """The supplied integer lies outside the 0-100 range."""

    MESSAGE = "The guess value was out of 0-100 range"

    def __init__(self, value: int | None = None) -> None:
        super().__init__(self.MESSAGE)
        self.value = value


class LexicalParseError(GuessError):
    """The supplied text is not an integer at all."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Cannot parse {text!r} as a whole number")
        self.text = text


# Every way Guess.parse can fail, for ``except PARSE_FAILURES:``
PARSE_FAILURES = (LexicalParseError, GuessRangeError)
