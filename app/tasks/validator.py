"""Content rules for submitted text."""

import unicodedata

from app.tasks.exceptions import TaskValidationError

CONTENT_ERROR_CODE = 40001

# Categories allowed in a text that has no letters but is still "only special
# characters": numbers, punctuation, symbols, separators.
_SPECIAL_CATEGORY_PREFIXES = ("N", "P", "S", "Z")


def validate_text_content(text: str | None) -> None:
    """Reject blank text and text without a single letter.

    Raises:
        TaskValidationError: with error code 40001 on any violation.
    """
    if text is None or not text.strip():
        raise TaskValidationError("Text cannot be empty", CONTENT_ERROR_CODE)

    if any(ch.isalpha() for ch in text):
        return

    if all(_is_special(ch) for ch in text):
        raise TaskValidationError(
            "Text cannot contain only special characters and digits",
            CONTENT_ERROR_CODE,
        )
    raise TaskValidationError(
        "Text must contain at least one letter", CONTENT_ERROR_CODE
    )


def _is_special(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch).startswith(
        _SPECIAL_CATEGORY_PREFIXES
    )
