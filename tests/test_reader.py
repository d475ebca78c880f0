"""
Tests for the reader module.
"""

import io
import os
from unittest.mock import patch

from releasex.reader import discover_files, iter_file_records, iter_records


def test_iter_records_basic():
    """Test streaming records keyed by header."""
    handle = io.StringIO("Name,Court\nSMITH,CCL 1\nJONES,CCL 2\n")

    records = list(iter_records(handle))

    assert records == [
        {"Name": "SMITH", "Court": "CCL 1"},
        {"Name": "JONES", "Court": "CCL 2"},
    ]


def test_iter_records_drops_mismatched_rows():
    """Test that rows with the wrong column count are dropped."""
    handle = io.StringIO("Name,Court\nSMITH,CCL 1\nBROKEN\nTOO,MANY,COLUMNS\n\nJONES,CCL 2\n")

    records = list(iter_records(handle))

    assert [r["Name"] for r in records] == ["SMITH", "JONES"]


def test_iter_records_quoted_delimiters():
    """Test that quoted fields may contain the delimiter."""
    handle = io.StringIO('Name,Court\n"SMITH, JOHN",CCL 1\n')

    records = list(iter_records(handle))

    assert records == [{"Name": "SMITH, JOHN", "Court": "CCL 1"}]


def test_iter_records_custom_delimiter():
    """Test a non-comma delimiter."""
    handle = io.StringIO("Name|Court\nSMITH|CCL 1\n")

    records = list(iter_records(handle, delimiter="|"))

    assert records == [{"Name": "SMITH", "Court": "CCL 1"}]


def test_iter_records_empty_input():
    """Test that an empty file yields nothing."""
    assert list(iter_records(io.StringIO(""))) == []


def test_iter_records_header_only():
    """Test that a header without rows yields nothing."""
    assert list(iter_records(io.StringIO("Name,Court\n"))) == []


def test_iter_records_is_lazy():
    """Test that rows are read on demand."""
    handle = io.StringIO("Name\nA\nB\nC\n")

    records = iter_records(handle)
    first = next(records)

    assert first == {"Name": "A"}
    assert next(records) == {"Name": "B"}


def test_discover_files_sorted_by_name(data_dir):
    """Test that files are discovered in name order and filtered by extension."""
    for name in ["b.csv", "a.csv", "notes.txt", "c.CSV"]:
        with open(os.path.join(data_dir, name), "w") as f:
            f.write("x\n")
    os.makedirs(os.path.join(data_dir, "nested.csv"))

    files = discover_files(data_dir)

    assert [os.path.basename(f) for f in files] == ["a.csv", "b.csv"]


def test_discover_files_missing_directory(temp_dir):
    """Test that a missing directory yields no files."""
    assert discover_files(os.path.join(temp_dir, "missing")) == []


def test_iter_file_records(write_csv_file, sample_records):
    """Test reading records from a file on disk."""
    path = write_csv_file("a.csv", sample_records)

    records = list(iter_file_records(path))

    assert len(records) == 3
    assert records[0]["InmateName"] == "SMITH, JOHN"


def test_iter_file_records_strips_bom(data_dir):
    """Test that a UTF-8 byte order mark does not leak into the first header."""
    path = os.path.join(data_dir, "bom.csv")
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        f.write("InmateName,Court\nSMITH,CCL 1\n")

    records = list(iter_file_records(path))

    assert records == [{"InmateName": "SMITH", "Court": "CCL 1"}]


def test_iter_file_records_open_failure(temp_dir):
    """Test that a file that cannot be opened is skipped."""
    with patch("builtins.open", side_effect=PermissionError("denied")):
        records = list(iter_file_records(os.path.join(temp_dir, "locked.csv")))

    assert records == []
