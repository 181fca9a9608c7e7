"""
Structural validation of Toyota part number bodies.

A body is the hyphen-free, upper-cased text left after sanitization:
5 chars category + 5 chars usage code, optionally followed by a 2 char suffix.
"""
from enum import Enum
from typing import Optional

# category+usage, or category+usage+suffix
VALID_BODY_LENGTHS = (10, 12)


class ParseFailure(Enum):
    EMPTY_OR_WHITESPACE_INPUT = "empty_or_whitespace_input"
    TRAILING_SEPARATOR = "trailing_separator"
    DISALLOWED_CHARACTER = "disallowed_character"
    EMPTY_AFTER_CLEANUP = "empty_after_cleanup"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER_IN_BODY = "invalid_character_in_body"


def _is_body_char(ch: str) -> bool:
    return ("0" <= ch <= "9") or ("A" <= ch <= "Z")


def toyota_validation_failure(text: str) -> Optional[ParseFailure]:
    """
    Return why `text` is not an acceptable body, or None if it is.
    Hyphens are tolerated and ignored. Lowercase letters are rejected:
    case folding must happen before validation.
    """
    cleaned = [ch for ch in text if ch != "-"]

    if len(cleaned) not in VALID_BODY_LENGTHS:
        return ParseFailure.INVALID_LENGTH

    for ch in cleaned:
        if not _is_body_char(ch):
            return ParseFailure.INVALID_CHARACTER_IN_BODY

    return None


def validate_toyota_part_number(text: str) -> bool:
    """True if `text` (hyphens ignored) is a structurally legal part number body."""
    return toyota_validation_failure(text) is None
