"""
Errors raised by the bracket engine.

All of them derive from ValueError: every failure here is a rejection of
invalid input, raised before any match is built.
"""


class TournamentError(ValueError):
    """Base class for bracket engine errors."""


class InvalidParticipantCountError(TournamentError):
    """Too few participants, or too many for the requested format."""


class UnsupportedBracketSizeError(TournamentError):
    """No balanced seed order exists for the requested bracket size."""


class UnknownFormatError(TournamentError):
    """The format selector does not know the requested format."""


class InvalidTournamentFileError(TournamentError):
    """A tournament file is not shaped as a format plus participants."""
