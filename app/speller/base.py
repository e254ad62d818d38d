from abc import ABC, abstractmethod

from app.tasks.models import CorrectionOption, Language


class BaseSpellerClient(ABC):
    """Contract for all spell-checking adapters."""

    @abstractmethod
    def correct(
        self,
        text: str,
        language: Language,
        options: tuple[CorrectionOption, ...] = (),
    ) -> str:
        """Return the text with the speller's first suggestions applied.

        Args:
            text: One chunk of the original text.
            language: Language of the text.
            options: Matching flags for the speller.

        Raises:
            SpellerNetworkError: on network, timeout, non-2xx or unreadable response.
        """

    def close(self) -> None:
        """Release resources held by the adapter. No-op by default."""
