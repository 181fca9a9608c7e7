"""
Pydantic schemas for the Toyota part number API.
"""

from pydantic import BaseModel, Field

from app.config import settings
from app.utils.part_numbers import ToyotaPartNumber


class ToyotaPartNumberOut(BaseModel):
    """A parsed Toyota part number with its canonical renderings."""

    category: str
    usage_code: str
    suffix: str = ""
    compact: str  # "90915YZZJ301"
    hyphenated: str  # "90915-YZZJ3-01"

    @classmethod
    def from_part_number(cls, part: ToyotaPartNumber) -> "ToyotaPartNumberOut":
        return cls(
            category=part.category,
            usage_code=part.usage_code,
            suffix=part.suffix,
            compact=part.render(include_hyphens=False),
            hyphenated=str(part),
        )


class ValidateRequest(BaseModel):
    part_numbers: list[str] = Field(..., max_length=settings.max_bulk_items)
    remove_non_alphanumeric_characters: bool | None = None  # None = use server default


class ValidationResult(BaseModel):
    input: str
    valid: bool
    part_number: ToyotaPartNumberOut | None = None


class ValidateResponse(BaseModel):
    total: int
    valid: int
    invalid: int
    results: list[ValidationResult] = Field(default_factory=list)
