"""
Pytest configuration and fixtures.
"""

import csv
import os
import tempfile
from typing import Callable, List

import pytest

from releasex.config import CacheConfig, Config, DataConfig
from releasex.model import Record

from test_helpers import HEADERS, make_record


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture
def data_dir(temp_dir):
    """Create an empty data directory."""
    path = os.path.join(temp_dir, "data")
    os.makedirs(path)
    return path


@pytest.fixture
def sample_config(temp_dir, data_dir) -> Config:
    """Return a configuration pointing at the temporary directory."""
    return Config(
        data=DataConfig(directory=data_dir),
        cache=CacheConfig(path=os.path.join(temp_dir, "cache", "trends.json")),
    )


@pytest.fixture
def write_csv_file(data_dir) -> Callable[..., str]:
    """Return a factory writing release files into the data directory."""

    def _write(name: str, records: List[Record], headers: List[str] = HEADERS,
               extra_rows: List[List[str]] = ()) -> str:
        path = os.path.join(data_dir, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(headers)
            for record in records:
                writer.writerow([record.get(header, "") for header in headers])
            for row in extra_rows:
                writer.writerow(row)
        return path

    return _write


@pytest.fixture
def sample_records() -> List[Record]:
    """Return a list of sample records."""
    return [
        make_record(
            InmateName="SMITH, JOHN",
            CaseNumber="CR-1001",
            ReleaseType="Bond",
            OffenseDescription="THEFT",
            OffenseDate="09/28/2025",
            BondType="Surety",
            Court="CCL 1",
            AttorneyName="DOE, JANE",
            BondsmanName="AAA BONDS",
            ReleaseDate="2025-10-02",
            BondAmount="1500",
        ),
        make_record(
            InmateName="JOHNSON, MARY",
            CaseNumber="CR-1002",
            ReleaseType="Bond",
            OffenseDescription="DWI",
            BondType="Cash",
            Court="CCL 2",
            ReleaseDate="2025-10-02",
            BondAmount="750",
        ),
        make_record(
            InmateName="SMITH, JOHN",
            CaseNumber="CR-1003",
            ReleaseType="Time Served",
            OffenseDescription="THEFT",
            Court="CCL 1",
            ReleaseDate="2025-11-15",
        ),
    ]
