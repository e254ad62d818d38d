from app.speller.base import BaseSpellerClient
from app.speller.factory import SpellerFactory

__all__ = ["BaseSpellerClient", "SpellerFactory"]
