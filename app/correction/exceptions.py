class CorrectionError(Exception):
    """Base exception for correction engine errors."""


class ChunkingConfigurationError(CorrectionError):
    """Raised when the chunk size is not a positive number. Fatal, never retried."""
