"""
Data models for Release Extract.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

# One parsed input row: header name -> cell value
Record = Dict[str, str]

# Ordered (key, count) pairs
CountPairs = Tuple[Tuple[str, int], ...]

# Header names recognised by the core
INMATE_NAME = "InmateName"
CASE_NUMBER = "CaseNumber"
RELEASE_TYPE = "ReleaseType"
OFFENSE_DESCRIPTION = "OffenseDescription"
OFFENSE_DATE = "OffenseDate"
BOND_TYPE = "BondType"
COURT = "Court"
ATTORNEY_NAME = "AttorneyName"
BONDSMAN_NAME = "BondsmanName"
RELEASE_DATE = "ReleaseDate"
BOND_AMOUNT = "BondAmount"

UNKNOWN = "Unknown"


class TrendSnapshot(BaseModel):
    """
    Presentation-ready trends produced by one load pass.

    Ordered maps are kept as tuples of (key, count) pairs: categorical
    maps and the date map are sorted by descending count, the month map
    by ascending key.
    """

    model_config = ConfigDict(frozen=True)

    total_releases: int = 0
    unique_inmates: int = 0
    unique_cases: int = 0
    release_types: CountPairs = ()
    offense_types: CountPairs = ()
    bond_types: CountPairs = ()
    courts: CountPairs = ()
    attorneys: CountPairs = ()
    bondsmen: CountPairs = ()
    releases_by_date: CountPairs = ()
    releases_by_month: CountPairs = ()
    average_bond: float = 0.0
    bond_ranges: CountPairs = ()
    top_offenses: CountPairs = ()
    busiest_days: CountPairs = ()

    def top(self, key: str, n: int) -> List[Tuple[str, int]]:
        """
        Get the first n entries of one of the ordered maps.

        Args:
            key: Snapshot field name (e.g. "courts")
            n: Number of entries

        Returns:
            List of (key, count) pairs
        """
        return list(self._pairs(key)[:max(n, 0)])

    def as_dict(self, key: str) -> Dict[str, int]:
        """Return one ordered map as a plain dict (insertion order kept)."""
        return dict(self._pairs(key))

    def _pairs(self, key: str) -> CountPairs:
        pairs = getattr(self, key, None)
        if not isinstance(pairs, tuple):
            raise KeyError(f"Not an ordered map: {key}")
        return pairs

    def is_empty(self) -> bool:
        return self.total_releases == 0


def clamp_top_n(n: Optional[int], default: int = 10) -> int:
    """Clamp a requested display size to the 5..100 range."""
    if n is None:
        n = default
    return max(5, min(100, int(n)))


class ReleaseXError(Exception):
    """Base class for all releasex exceptions."""

    pass


class ConfigError(ReleaseXError):
    """Exception raised for configuration errors."""

    pass


class CacheError(ReleaseXError):
    """Exception raised when the trend cache cannot be written."""

    pass


class LoadError(ReleaseXError):
    """Exception raised when a load pass cannot be completed."""

    pass


class SearchError(ReleaseXError):
    """Exception raised for invalid search criteria."""

    pass


class OutputError(ReleaseXError):
    """Exception raised for output errors."""

    pass
