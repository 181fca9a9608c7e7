#!/usr/bin/env python3
"""
Validate Toyota part numbers from a line-delimited file or a ZIP holding one.

Usage:
    python validate_part_numbers.py --file "data/Toyota Part Numbers.csv"
    python validate_part_numbers.py --file "data/Toyota Parts.zip" --strict
    One part number per line; blank lines are ignored.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from app.config import settings
from app.utils.part_number_files import read_part_number_lines, validate_part_numbers


def run(filepath: str, strict: bool = False, show_valid: bool = False) -> int:
    path = Path(filepath)
    if not path.exists():
        print(f"Error: file not found: {path}")
        return 1

    strip_noise = False if strict else settings.bulk_validate_noise_stripping
    try:
        summary = validate_part_numbers(read_part_number_lines(path), remove_non_alphanumeric_characters=strip_noise)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if show_valid:
        for raw, part in summary.parsed:
            print(f"  Valid: {raw} -> {part}")
    if summary.invalid:
        print("\nInvalid part numbers list:")
        for raw in summary.invalid:
            print(f"  - {raw}")

    print(f"\nTotal part numbers: {summary.total}")
    print(f"Valid part numbers: {summary.valid}")
    print(f"Invalid part numbers: {len(summary.invalid)}")
    return 1 if summary.invalid else 0


def main():
    parser = argparse.ArgumentParser(description="Validate Toyota part numbers from a text, CSV or ZIP file")
    parser.add_argument("--file", required=True, help="Path to .txt/.csv or .zip")
    parser.add_argument("--strict", action="store_true", help="Reject entries with non-alphanumeric noise")
    parser.add_argument("--show-valid", action="store_true", help="Also print each valid entry")
    args = parser.parse_args()
    sys.exit(run(args.file, strict=args.strict, show_valid=args.show_valid))


if __name__ == "__main__":
    main()
