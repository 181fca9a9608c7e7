"""
Toyota part number parsing, normalization and formatting.

A Toyota part number is a 5 char category, a 5 char vehicle usage code and an
optional 2 char supersession suffix, e.g. "90915-YZZJ3" or "90915-YZZJ3-01".
Hyphens and letter case are not significant.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from app.utils.toyota_validator import ParseFailure, toyota_validation_failure

logger = logging.getLogger(__name__)

CATEGORY_LENGTH = 5
USAGE_CODE_LENGTH = 5
SUFFIX_LENGTHS = (0, 2)
SEPARATOR = "-"


class InvalidToyotaPartNumberError(ValueError):
    """Raised by parse_toyota_part_number. The raw input is never echoed."""

    def __init__(self, reason: ParseFailure, param_name: str = "part_number"):
        self.reason = reason
        self.param_name = param_name
        super().__init__(f"Invalid Toyota Part Number (Parameter '{param_name}')")


@dataclass(frozen=True, eq=False)
class ToyotaPartNumber:
    category: str
    usage_code: str
    suffix: str = ""
    compact: str = field(init=False, repr=False)

    def __post_init__(self):
        fields = (self.category, self.usage_code, self.suffix)
        if not all(isinstance(f, str) and f.isascii() for f in fields):
            raise InvalidToyotaPartNumberError(ParseFailure.INVALID_CHARACTER_IN_BODY)
        if (
            len(self.category) != CATEGORY_LENGTH
            or len(self.usage_code) != USAGE_CODE_LENGTH
            or len(self.suffix) not in SUFFIX_LENGTHS
        ):
            raise InvalidToyotaPartNumberError(ParseFailure.INVALID_LENGTH)

        object.__setattr__(self, "category", self.category.upper())
        object.__setattr__(self, "usage_code", self.usage_code.upper())
        object.__setattr__(self, "suffix", self.suffix.upper())
        object.__setattr__(self, "compact", f"{self.category}{self.usage_code}{self.suffix}")

        failure = toyota_validation_failure(self.compact)
        if failure is not None:
            raise InvalidToyotaPartNumberError(failure)

    @classmethod
    def try_parse(
        cls, raw: Optional[str], remove_non_alphanumeric_characters: bool = False
    ) -> Optional["ToyotaPartNumber"]:
        return try_parse_toyota_part_number(raw, remove_non_alphanumeric_characters)

    @classmethod
    def parse(
        cls, raw: Optional[str], remove_non_alphanumeric_characters: bool = False
    ) -> "ToyotaPartNumber":
        return parse_toyota_part_number(raw, remove_non_alphanumeric_characters)

    def render(self, include_hyphens: bool = True) -> str:
        """
        Canonical rendering, always uppercase.
        - include_hyphens=False: "90915YZZJ301"
        - include_hyphens=True:  "90915-YZZJ3" or "90915-YZZJ3-01"
        """
        if not include_hyphens:
            return self.compact
        parts = [self.category, self.usage_code]
        if self.suffix:
            parts.append(self.suffix)
        return SEPARATOR.join(parts).upper()

    def __str__(self) -> str:
        return self.render(include_hyphens=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ToyotaPartNumber):
            return NotImplemented
        return self.compact.casefold() == other.compact.casefold()

    def __hash__(self) -> int:
        return hash(self.compact.casefold())


def _is_accepted_char(ch: str) -> bool:
    return ("0" <= ch <= "9") or ("A" <= ch <= "Z") or ("a" <= ch <= "z") or ch == SEPARATOR


def _clean(raw: Optional[str], remove_non_alphanumeric_characters: bool) -> tuple[str, Optional[ParseFailure]]:
    """
    Sanitize raw input into an uppercase, hyphen-free body.
    Returns (body, None) on success or ("", failure) otherwise.
    """
    if not isinstance(raw, str) or not raw.strip():
        return "", ParseFailure.EMPTY_OR_WHITESPACE_INPUT

    accepted: list[str] = []
    for ch in raw:
        if _is_accepted_char(ch):
            accepted.append(ch)
        elif not remove_non_alphanumeric_characters:
            return "", ParseFailure.DISALLOWED_CHARACTER

    # A trailing hyphen means the suffix was cut off
    if accepted and accepted[-1] == SEPARATOR:
        return "", ParseFailure.TRAILING_SEPARATOR

    body = "".join(ch for ch in accepted if ch != SEPARATOR).upper()
    if not body:
        return "", ParseFailure.EMPTY_AFTER_CLEANUP

    failure = toyota_validation_failure(body)
    if failure is not None:
        return "", failure

    return body, None


def _from_body(body: str) -> ToyotaPartNumber:
    usage_end = CATEGORY_LENGTH + USAGE_CODE_LENGTH
    return ToyotaPartNumber(
        category=body[:CATEGORY_LENGTH],
        usage_code=body[CATEGORY_LENGTH:usage_end],
        suffix=body[usage_end:],
    )


def try_parse_toyota_part_number(
    raw: Optional[str], remove_non_alphanumeric_characters: bool = False
) -> Optional[ToyotaPartNumber]:
    """
    Parse a Toyota part number, returning None instead of raising on bad input.

    With remove_non_alphanumeric_characters=True, characters other than
    ASCII letters, digits and hyphens are dropped instead of rejecting the input.
    """
    body, failure = _clean(raw, remove_non_alphanumeric_characters)
    if failure is not None:
        logger.debug("Rejected Toyota part number: %s", failure.value)
        return None
    return _from_body(body)


def parse_toyota_part_number(
    raw: Optional[str], remove_non_alphanumeric_characters: bool = False
) -> ToyotaPartNumber:
    """Parse a Toyota part number or raise InvalidToyotaPartNumberError."""
    body, failure = _clean(raw, remove_non_alphanumeric_characters)
    if failure is not None:
        raise InvalidToyotaPartNumberError(failure)
    return _from_body(body)


def is_toyota_part_number(raw: Optional[str], remove_non_alphanumeric_characters: bool = False) -> bool:
    return try_parse_toyota_part_number(raw, remove_non_alphanumeric_characters) is not None
