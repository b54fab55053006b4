"""
Bulldog - Engine Exceptions

Configuration errors also subclass ValueError so callers that already
catch ValueError keep working.
"""


class BulldogError(Exception):
    """Base class for all Bulldog errors."""


class InvalidConfiguration(BulldogError, ValueError):
    """A die, game or strategy was configured with an invalid value."""


class RosterTooSmall(InvalidConfiguration):
    """Fewer players than the game needs."""


class RosterTooLarge(InvalidConfiguration):
    """More players than the game allows."""


class DuplicatePlayer(BulldogError, ValueError):
    """The player is already on the roster."""


class InvalidDecision(BulldogError, ValueError):
    """A human answer that is neither continue nor stop."""


class TurnStateError(BulldogError, RuntimeError):
    """A turn was driven out of order."""


class ChannelClosed(BulldogError):
    """The presentation layer went away while a decision was pending."""
