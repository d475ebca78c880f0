"""
Release Extract - Jail Release Trend Analysis.

Aggregates jail release records from delimited files into cached trend
snapshots and searches the raw records.
"""

__version__ = "0.1.0"

from releasex.model import Record, TrendSnapshot, clamp_top_n
from releasex.config import Config, load_config
from releasex.cache import CacheEntry, CacheStore
from releasex.finalize import finalize
from releasex.loader import LoadOutcome, TrendLoader
from releasex.reader import discover_files, iter_records
from releasex.search import build_criteria, matches, search
from releasex.trends import WorkingAggregate, apply_record

__all__ = [
    "Record",
    "TrendSnapshot",
    "clamp_top_n",
    "Config",
    "load_config",
    "CacheEntry",
    "CacheStore",
    "finalize",
    "LoadOutcome",
    "TrendLoader",
    "discover_files",
    "iter_records",
    "build_criteria",
    "matches",
    "search",
    "WorkingAggregate",
    "apply_record",
]
