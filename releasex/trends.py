"""
Trend accumulation for Release Extract.

A load pass folds every record into one WorkingAggregate through
apply_record(); finalize() later turns it into a TrendSnapshot.
"""

import re
from typing import Dict, List, Optional, Set, Tuple

from releasex.dates import derive_month
from releasex.model import (
    ATTORNEY_NAME,
    BOND_AMOUNT,
    BOND_TYPE,
    BONDSMAN_NAME,
    CASE_NUMBER,
    COURT,
    INMATE_NAME,
    OFFENSE_DESCRIPTION,
    RELEASE_DATE,
    RELEASE_TYPE,
    UNKNOWN,
    Record,
)

# Aggregate attribute -> record field
CATEGORY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("release_types", RELEASE_TYPE),
    ("offense_types", OFFENSE_DESCRIPTION),
    ("bond_types", BOND_TYPE),
    ("courts", COURT),
    ("attorneys", ATTORNEY_NAME),
    ("bondsmen", BONDSMAN_NAME),
)

# Bucket label -> inclusive upper bound (None = open-ended)
BOND_BUCKETS: Tuple[Tuple[str, Optional[float]], ...] = (
    ("0-1000", 1000),
    ("1001-5000", 5000),
    ("5001-10000", 10000),
    ("10001-25000", 25000),
    ("25001-50000", 50000),
    ("50001+", None),
)

# Leading numeric prefix, e.g. "7000", "1500.50", "2e3", "500 cash"
AMOUNT_REGEX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class WorkingAggregate:
    """Mutable counts and sums built during a single load pass."""

    def __init__(self):
        self.release_types: Dict[str, int] = {}
        self.offense_types: Dict[str, int] = {}
        self.bond_types: Dict[str, int] = {}
        self.courts: Dict[str, int] = {}
        self.attorneys: Dict[str, int] = {}
        self.bondsmen: Dict[str, int] = {}
        self.releases_by_date: Dict[str, int] = {}
        self.releases_by_month: Dict[str, int] = {}
        self.bond_sum: float = 0.0
        self.bond_count: int = 0
        self.bond_ranges: Dict[str, int] = {label: 0 for label, _ in BOND_BUCKETS}
        self.unique_inmates: Set[str] = set()
        self.unique_case_numbers: Set[str] = set()

    def category_maps(self) -> List[Tuple[str, Dict[str, int]]]:
        return [(name, getattr(self, name)) for name, _ in CATEGORY_FIELDS]


def _increment(counts: Dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def parse_bond_amount(value: Optional[str]) -> float:
    """
    Parse a bond amount.
    
    Currency symbols and thousands separators are ignored; anything after
    the leading number is ignored too. Text with no leading number is 0.
    
    Args:
        value: Raw amount text
        
    Returns:
        Parsed amount
    """
    if not value:
        return 0.0

    cleaned = value.strip().replace("$", "").replace(",", "")
    match = AMOUNT_REGEX.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def bucket_for_amount(amount: float) -> Optional[str]:
    """Return the bucket label for a positive amount, None for amount <= 0."""
    if amount <= 0:
        return None
    for label, upper in BOND_BUCKETS:
        if upper is None or amount <= upper:
            return label
    return None


def apply_record(record: Record, aggregate: WorkingAggregate) -> None:
    """
    Fold one record into the aggregate.
    
    Args:
        record: Parsed record
        aggregate: Aggregate to update in place
    """
    inmate_name = (record.get(INMATE_NAME) or "").strip()
    if inmate_name:
        aggregate.unique_inmates.add(inmate_name)

    case_number = (record.get(CASE_NUMBER) or "").strip()
    if case_number:
        aggregate.unique_case_numbers.add(case_number)

    for name, field in CATEGORY_FIELDS:
        category = (record.get(field) or "").strip() or UNKNOWN
        _increment(getattr(aggregate, name), category)

    release_date = (record.get(RELEASE_DATE) or "").strip()
    if release_date:
        _increment(aggregate.releases_by_date, release_date)
        month = derive_month(release_date)
        if month is not None:
            _increment(aggregate.releases_by_month, month)

    amount = parse_bond_amount(record.get(BOND_AMOUNT))
    bucket = bucket_for_amount(amount)
    if bucket is not None:
        aggregate.bond_sum += amount
        aggregate.bond_count += 1
        aggregate.bond_ranges[bucket] += 1
