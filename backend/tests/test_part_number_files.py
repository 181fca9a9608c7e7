"""Tests for bulk validation of part number files and the validation CLI."""

import zipfile

import pytest

import validate_part_numbers
from app.utils.part_number_files import read_part_number_lines, validate_part_numbers as validate_lines


class TestReadPartNumberLines:
    def test_csv_skips_blank_and_strips(self, part_numbers_csv, sample_part_numbers):
        assert list(read_part_number_lines(part_numbers_csv)) == sample_part_numbers

    def test_zip_reads_csv_entry(self, part_numbers_zip, sample_part_numbers):
        assert list(read_part_number_lines(part_numbers_zip)) == sample_part_numbers

    def test_zip_falls_back_to_txt(self, tmp_path):
        path = tmp_path / "parts.zip"
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("parts.txt", "90915-YZZJ3\r\n04152YZZA1\r\n")
        assert list(read_part_number_lines(path)) == ["90915-YZZJ3", "04152YZZA1"]

    def test_zip_without_text_entry(self, tmp_path):
        path = tmp_path / "empty.zip"
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("image.png", b"\x89PNG")
        with pytest.raises(ValueError):
            list(read_part_number_lines(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(read_part_number_lines(tmp_path / "missing.csv"))

    def test_utf8_bom_is_ignored(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeff90915-YZZJ3\n".encode("utf-8"))
        assert list(read_part_number_lines(path)) == ["90915-YZZJ3"]


class TestValidatePartNumbers:
    def test_permissive_accepts_noise(self, sample_part_numbers):
        summary = validate_lines(sample_part_numbers, remove_non_alphanumeric_characters=True)
        assert summary.total == 6
        assert summary.valid == 6
        assert summary.invalid == []
        assert str(summary.parsed[-1][1]) == "12345-12345"

    def test_strict_rejects_noise(self, sample_part_numbers):
        summary = validate_lines(sample_part_numbers, remove_non_alphanumeric_characters=False)
        assert summary.valid == 4
        assert summary.invalid == ["12345 12345", "1234ф5-12345"]

    def test_empty(self):
        summary = validate_lines([])
        assert summary.total == 0
        assert summary.valid == 0


class TestValidateCli:
    def test_all_valid_exit_zero(self, part_numbers_zip, capsys):
        assert validate_part_numbers.run(str(part_numbers_zip)) == 0
        out = capsys.readouterr().out
        assert "Total part numbers: 6" in out
        assert "Invalid part numbers: 0" in out

    def test_strict_lists_invalid(self, part_numbers_csv, capsys):
        assert validate_part_numbers.run(str(part_numbers_csv), strict=True) == 1
        out = capsys.readouterr().out
        assert "  - 12345 12345" in out
        assert "Invalid part numbers: 2" in out

    def test_show_valid(self, part_numbers_csv, capsys):
        validate_part_numbers.run(str(part_numbers_csv), show_valid=True)
        out = capsys.readouterr().out
        assert "Valid: 90915-YZZJ3-01 -> 90915-YZZJ3-01" in out

    def test_missing_file(self, tmp_path, capsys):
        assert validate_part_numbers.run(str(tmp_path / "nope.csv")) == 1
        assert "file not found" in capsys.readouterr().out
