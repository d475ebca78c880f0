"""
Tests for the writers module.
"""

import csv
import json
import os
from unittest.mock import patch

import pytest

from releasex.model import OutputError, TrendSnapshot
from releasex.writers import write_csv, write_json, write_snapshot


def test_write_json(temp_dir, sample_records):
    """Test writing records to JSON."""
    path = os.path.join(temp_dir, "out", "results.json")

    write_json(sample_records, path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    assert len(data) == 3
    assert data[0]["InmateName"] == "SMITH, JOHN"


def test_write_csv(temp_dir):
    """Test writing records to CSV with uneven fields."""
    path = os.path.join(temp_dir, "results.csv")
    records = [{"InmateName": "SMITH, JOHN", "Court": "CCL 1"}, {"InmateName": "DOE", "Extra": "x"}]

    write_csv(records, path)

    with open(path, "r", encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0]) == ["InmateName", "Court", "Extra"]
    assert rows[0]["InmateName"] == "SMITH, JOHN"
    assert rows[1]["Court"] == ""
    assert rows[1]["Extra"] == "x"


def test_write_snapshot(temp_dir):
    """Test writing a snapshot to JSON."""
    path = os.path.join(temp_dir, "trends.json")

    write_snapshot(TrendSnapshot(total_releases=2, courts=(("CCL 1", 2),)), path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    assert data["total_releases"] == 2
    assert data["courts"] == [["CCL 1", 2]]


def test_write_json_error(temp_dir):
    """Test that I/O errors surface as OutputError."""
    with patch("builtins.open", side_effect=OSError("disk full")):
        with pytest.raises(OutputError):
            write_json([], os.path.join(temp_dir, "x.json"))
