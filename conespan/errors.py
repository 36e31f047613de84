"""Exception types raised by conespan."""

from __future__ import annotations


class ConeSpanError(Exception):
    """Base class for all conespan errors."""


class InvalidConeCount(ConeSpanError, ValueError):
    """The requested number of cones is below 2."""

    def __init__(self, cone_number: int) -> None:
        self.cone_number = cone_number
        super().__init__(f"The number of cones should be larger than 1, got {cone_number}")


class RootIsolationFailure(ConeSpanError, ArithmeticError):
    """The root-isolation oracle could not produce the requested root."""


class UnknownStrategy(ConeSpanError, KeyError):
    """No cone-boundary strategy is registered under the given name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
