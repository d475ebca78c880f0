"""
Turns a WorkingAggregate into a presentation-ordered TrendSnapshot.
"""

from typing import Dict

from releasex.model import CountPairs, TrendSnapshot
from releasex.trends import BOND_BUCKETS, WorkingAggregate

TOP_SLICE = 10


def sort_by_count(counts: Dict[str, int]) -> CountPairs:
    """
    Order a frequency map by descending count.
    
    Equal counts keep first-seen order (the sort is stable over the
    map's insertion order).
    """
    return tuple(sorted(counts.items(), key=lambda item: item[1], reverse=True))


def sort_by_key(counts: Dict[str, int]) -> CountPairs:
    """Order a frequency map by ascending key."""
    return tuple(sorted(counts.items(), key=lambda item: item[0]))


def finalize(aggregate: WorkingAggregate, total_records: int) -> TrendSnapshot:
    """
    Build the snapshot for a completed load pass.
    
    Args:
        aggregate: Aggregate built by apply_record(); left untouched
        total_records: Number of valid rows processed
        
    Returns:
        Trend snapshot
    """
    categories = {name: sort_by_count(counts) for name, counts in aggregate.category_maps()}
    by_date = sort_by_count(aggregate.releases_by_date)

    if aggregate.bond_count > 0:
        average_bond = aggregate.bond_sum / aggregate.bond_count
    else:
        average_bond = 0.0

    return TrendSnapshot(
        total_releases=total_records,
        unique_inmates=len(aggregate.unique_inmates),
        unique_cases=len(aggregate.unique_case_numbers),
        releases_by_date=by_date,
        releases_by_month=sort_by_key(aggregate.releases_by_month),
        average_bond=average_bond,
        bond_ranges=tuple((label, aggregate.bond_ranges[label]) for label, _ in BOND_BUCKETS),
        top_offenses=categories["offense_types"][:TOP_SLICE],
        busiest_days=by_date[:TOP_SLICE],
        **categories,
    )
