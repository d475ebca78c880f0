"""
File-backed trend cache for Release Extract.
"""

import json
import os
import tempfile
import time
from typing import Callable, Optional

from pydantic import BaseModel, ValidationError

from releasex.log import get_logger
from releasex.model import CacheError, TrendSnapshot

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 3600


class CacheEntry(BaseModel):
    """
    Persisted result of one load pass.
    """

    trends: TrendSnapshot
    record_count: int
    timestamp: float  # Creation time, seconds since the epoch


class CacheStore:
    """
    Single-file cache holding the latest trend snapshot.
    
    Entries expire ttl_seconds after they were written. Missing, stale
    and unreadable entries all read as absent. No locking is done; one
    writer per cache file is assumed.
    """

    def __init__(self, path: str, ttl_seconds: int = DEFAULT_TTL_SECONDS,
                 clock: Callable[[], float] = time.time):
        self.path = path
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    def exists(self) -> bool:
        """Check whether a cache file is present, fresh or not."""
        return os.path.exists(self.path)

    def read(self) -> Optional[CacheEntry]:
        """
        Read the cached entry.
        
        Returns:
            The entry if present and younger than the TTL, else None
        """
        if not self.exists():
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            entry = CacheEntry.model_validate(payload)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable cache {self.path}: {e}")
            return None

        age = self.clock() - entry.timestamp
        if age >= self.ttl_seconds:
            logger.info(f"Cache expired ({age:.0f}s old)")
            return None

        return entry

    def write(self, snapshot: TrendSnapshot, record_count: int) -> CacheEntry:
        """
        Persist a snapshot, replacing any previous entry.
        
        Args:
            snapshot: Trend snapshot
            record_count: Number of records behind the snapshot
            
        Returns:
            The written entry
        """
        entry = CacheEntry(trends=snapshot, record_count=record_count, timestamp=self.clock())
        directory = os.path.dirname(os.path.abspath(self.path))

        try:
            os.makedirs(directory, exist_ok=True)

            # Write beside the target, then swap it in
            fd, tmp_path = tempfile.mkstemp(prefix=".releasex-", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(entry.model_dump(mode="json"), f)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Error writing cache to {self.path}: {e}")
            raise CacheError(f"Error writing cache to {self.path}: {e}")

        logger.info(f"Cached {record_count} records to {self.path}")
        return entry

    def clear(self) -> None:
        """Delete the cache file if present."""
        try:
            os.remove(self.path)
            logger.info(f"Removed cache {self.path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            raise CacheError(f"Error removing cache {self.path}: {e}")
