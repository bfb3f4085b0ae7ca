"""Exception hierarchy shared by every layer."""

from __future__ import annotations


class InteractorError(Exception):
    """Base class for all interactor errors."""


class SetupError(InteractorError, ValueError):
    """The initial configuration violates the board invariants."""


class GameOverError(InteractorError, RuntimeError):
    """A move was submitted after the outcome had been decided."""


class PolicyPreconditionError(InteractorError, RuntimeError):
    """The adversary was asked to move in a position with no legal reply."""


class ProtocolError(InteractorError, ValueError):
    """A line received from the contestant could not be understood."""

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line:
            return f"{self.message} (input: {self.line!r})"
        return self.message
