"""Example speller adapter.

Use this module as a reference when implementing new speller adapters.
Implement BaseSpellerClient and register the provider in SpellerFactory.
"""

from app.speller.base import BaseSpellerClient
from app.tasks.models import CorrectionOption, Language


class ExampleSpellerAdapter(BaseSpellerClient):
    """Returns every text unchanged. No network calls."""

    def correct(
        self,
        text: str,
        language: Language,
        options: tuple[CorrectionOption, ...] = (),
    ) -> str:
        _ = language, options
        return text
