"""Derives speller options from the raw text."""

import re

from app.tasks.models import CorrectionOption

_DIGIT_PATTERN = re.compile(r"\d")
_URL_PATTERN = re.compile(
    r"https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)",
    re.IGNORECASE,
)


def determine_options(text: str) -> tuple[CorrectionOption, ...]:
    """Return IGNORE_DIGITS and/or IGNORE_URLS, in that order, when they apply."""
    options: list[CorrectionOption] = []
    if contains_digits(text):
        options.append(CorrectionOption.IGNORE_DIGITS)
    if contains_urls(text):
        options.append(CorrectionOption.IGNORE_URLS)
    return tuple(options)


def contains_digits(text: str) -> bool:
    return _DIGIT_PATTERN.search(text) is not None


def contains_urls(text: str) -> bool:
    return _URL_PATTERN.search(text) is not None


def options_to_bitmask(options: tuple[CorrectionOption, ...] | list[CorrectionOption]) -> int:
    """Combine option bits for the speller `options` form field."""
    bitmask = 0
    for option in set(options):
        bitmask |= option.bit
    return bitmask
