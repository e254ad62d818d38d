from dataclasses import dataclass, field
from typing import Any

from app.speller.exceptions import SpellerNetworkError


@dataclass(frozen=True)
class SpellingCorrection:
    """One misspelling reported by the speller.

    `pos` and `length` index into the chunk that was submitted.
    """

    word: str
    pos: int
    length: int
    suggestions: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SpellingCorrection":
        try:
            return cls(
                word=str(payload["word"]),
                pos=int(payload["pos"]),
                length=int(payload["len"]),
                suggestions=[str(s) for s in payload.get("s") or []],
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SpellerNetworkError(f"Malformed speller record {payload!r}: {exc}") from exc
