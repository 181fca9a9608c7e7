"""
Toyota part number API routes: parse a single number, validate a batch.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from app.config import settings
from app.schemas.part_numbers import (
    ToyotaPartNumberOut,
    ValidateRequest,
    ValidateResponse,
    ValidationResult,
)
from app.utils.part_numbers import (
    InvalidToyotaPartNumberError,
    parse_toyota_part_number,
    try_parse_toyota_part_number,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/part-numbers/toyota", tags=["part-numbers"])


@router.post("/validate", response_model=ValidateResponse)
async def validate_part_numbers_endpoint(req: ValidateRequest):
    """Validate a batch of candidate part numbers. Invalid entries never fail the request."""
    strip_noise = req.remove_non_alphanumeric_characters
    if strip_noise is None:
        strip_noise = settings.remove_non_alphanumeric_characters

    results: list[ValidationResult] = []
    for raw in req.part_numbers:
        part = try_parse_toyota_part_number(raw, remove_non_alphanumeric_characters=strip_noise)
        results.append(
            ValidationResult(
                input=raw,
                valid=part is not None,
                part_number=ToyotaPartNumberOut.from_part_number(part) if part else None,
            )
        )

    valid = sum(1 for r in results if r.valid)
    logger.info("Validated %d Toyota part numbers (%d invalid)", len(results), len(results) - valid)
    return ValidateResponse(total=len(results), valid=valid, invalid=len(results) - valid, results=results)


@router.get("/{part_number:path}", response_model=ToyotaPartNumberOut)
async def parse_part_number_endpoint(
    part_number: str,
    remove_non_alphanumeric_characters: bool | None = Query(
        None, description="Drop characters other than letters, digits and hyphens"
    ),
):
    """Parse one Toyota part number into category, usage code and suffix. Slashes count as noise."""
    strip_noise = remove_non_alphanumeric_characters
    if strip_noise is None:
        strip_noise = settings.remove_non_alphanumeric_characters

    try:
        part = parse_toyota_part_number(part_number, remove_non_alphanumeric_characters=strip_noise)
    except InvalidToyotaPartNumberError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ToyotaPartNumberOut.from_part_number(part)
