"""Errors raised when a game rule is broken."""


class GameError(Exception):
    """A bowling rule was violated by the supplied data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message