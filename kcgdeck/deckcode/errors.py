"""Errors raised while decoding KCG deck codes."""


class DeckCodeError(Exception):
    """Base error for deck code decoding."""

    def __init__(self, message: str, fragment: str | None = None):
        super().__init__(message)
        self.message = message
        self.fragment = fragment


class InvalidFormatError(DeckCodeError):
    """The deck code is not well-formed and cannot be decoded at all."""
    pass
