"""click parameter type for guesses.

Lets any click command take a Guess as an argument or option. Parse
failures are reported through click's usual usage-error path, with a
different message for non-numbers and for out-of-range numbers.
"""

from __future__ import annotations

import click

from guessing_utils.domain.exceptions import GuessRangeError, LexicalParseError
from guessing_utils.domain.model.guess import Guess


class GuessParamType(click.ParamType):
    name = "guess"

    def convert(self, value, param, ctx) -> Guess:
        if isinstance(value, Guess):
            return value

        try:
            return Guess.parse(str(value))
        except LexicalParseError:
            self.fail(f"{value!r} is not a whole number.", param, ctx)
        except GuessRangeError as exc:
            self.fail(f"{exc} (got {value!r}).", param, ctx)


GUESS = GuessParamType()
