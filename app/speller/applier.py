from app.logging.logger import Log
from app.speller.models import SpellingCorrection


def apply_corrections(text: str, corrections: list[SpellingCorrection]) -> str:
    """Replace each reported word with its first suggestion.

    Corrections are applied from the highest offset down so earlier offsets
    stay valid. Records without suggestions, out of range, or whose span no
    longer holds the reported word are skipped.
    """
    if not corrections:
        return text

    result = text
    for correction in sorted(corrections, key=lambda c: c.pos, reverse=True):
        if not correction.suggestions:
            continue
        start, end = correction.pos, correction.pos + correction.length
        if start < 0 or end > len(result):
            Log.warning(
                f"Correction for '{correction.word}' at position {start} "
                f"is out of range for text of length {len(result)}"
            )
            continue

        actual = result[start:end]
        if actual != correction.word:
            Log.warning(
                f"Word mismatch at position {start}: "
                f"expected '{correction.word}' but found '{actual}'"
            )
            continue

        replacement = correction.suggestions[0]
        Log.debug(f"Replacing '{correction.word}' with '{replacement}' at position {start}")
        result = result[:start] + replacement + result[end:]
    return result
