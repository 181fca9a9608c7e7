"""
Bulk validation of line-delimited part number files.

Accepts a plain text/CSV file with one candidate per line, or a ZIP archive
holding such a file.
"""
import logging
import zipfile
from dataclasses import dataclass, field
from io import TextIOWrapper
from pathlib import Path
from typing import Iterable, Iterator

from app.utils.part_numbers import ToyotaPartNumber, try_parse_toyota_part_number

logger = logging.getLogger(__name__)

_TEXT_SUFFIXES = (".csv", ".txt")


@dataclass
class BulkValidationSummary:
    total: int = 0
    valid: int = 0
    invalid: list[str] = field(default_factory=list)
    parsed: list[tuple[str, ToyotaPartNumber]] = field(default_factory=list)


def _non_blank(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        stripped = line.strip()
        if stripped:
            yield stripped


def _pick_zip_entry(archive: zipfile.ZipFile) -> str:
    """First .csv entry, else first .txt entry."""
    names = [n for n in archive.namelist() if not n.endswith("/")]
    for suffix in _TEXT_SUFFIXES:
        for name in names:
            if name.lower().endswith(suffix):
                return name
    raise ValueError(f"No {' or '.join(_TEXT_SUFFIXES)} entry found in archive")


def read_part_number_lines(path: str | Path) -> Iterator[str]:
    """Yield stripped, non-blank lines from a text file or from the text entry of a ZIP."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if zipfile.is_zipfile(path):
        with zipfile.ZipFile(path) as archive:
            entry = _pick_zip_entry(archive)
            logger.debug("Reading %s from %s", entry, path.name)
            with archive.open(entry) as raw:
                yield from _non_blank(TextIOWrapper(raw, encoding="utf-8-sig"))
        return

    with open(path, encoding="utf-8-sig") as f:
        yield from _non_blank(f)


def validate_part_numbers(
    lines: Iterable[str], remove_non_alphanumeric_characters: bool = True
) -> BulkValidationSummary:
    """Parse every candidate and collect valid/invalid counts."""
    summary = BulkValidationSummary()
    for line in lines:
        summary.total += 1
        part = try_parse_toyota_part_number(line, remove_non_alphanumeric_characters)
        if part is None:
            summary.invalid.append(line)
        else:
            summary.valid += 1
            summary.parsed.append((line, part))

    logger.info(
        "Total part numbers: %d, valid: %d, invalid: %d",
        summary.total,
        summary.valid,
        len(summary.invalid),
    )
    return summary
