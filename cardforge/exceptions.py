"""Exception hierarchy for Card Forge."""


class CardForgeError(Exception):
    """Base class for all errors raised by Card Forge."""


class ExportError(CardForgeError):
    """Raised when artifacts cannot be written to the requested location."""
