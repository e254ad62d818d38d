class SpellerError(Exception):
    """Raised when spell checking fails."""


class SpellerNetworkError(SpellerError):
    """Raised when the speller call fails due to network/infrastructure issues."""
