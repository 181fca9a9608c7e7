"""
Shared fixtures for the Toyota part number backend tests.
"""
import io
import os
import sys
import zipfile

import pytest

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Force env vars so exported overrides in a developer shell don't change Settings defaults
os.environ["REMOVE_NON_ALPHANUMERIC_CHARACTERS"] = "false"
os.environ["BULK_VALIDATE_NOISE_STRIPPING"] = "true"


@pytest.fixture
def sample_part_numbers():
    """Lines as they appear in exported part lists, noise included."""
    return [
        "90915-YZZJ3",
        "90915YZZJ3",
        "04152-YZZA1",
        "90915-YZZJ3-01",
        "12345 12345",
        "1234ф5-12345",
    ]


@pytest.fixture
def part_numbers_csv(tmp_path, sample_part_numbers):
    """Line-delimited CSV with a blank line and surrounding whitespace."""
    path = tmp_path / "Toyota Part Numbers.csv"
    lines = ["  " + sample_part_numbers[0] + "  ", ""] + sample_part_numbers[1:]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def part_numbers_zip(tmp_path, sample_part_numbers):
    """ZIP archive holding a readme and the CSV of part numbers."""
    path = tmp_path / "Toyota Parts.zip"
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        archive.writestr("README.md", "not part numbers")
        archive.writestr("parts/Toyota Parts.csv", "\n".join(sample_part_numbers))
    path.write_bytes(buf.getvalue())
    return path
