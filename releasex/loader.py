"""
Load orchestration for Release Extract.

TrendLoader owns the current TrendSnapshot for the process. It serves
the snapshot from the cache when fresh, otherwise streams every release
file into one WorkingAggregate and caches the finalized result. At most
one load may run at a time per loader.
"""

import gc
from typing import Any, Dict, List, Mapping, Optional, Tuple

from releasex.cache import CacheStore
from releasex.config import Config
from releasex.finalize import finalize
from releasex.log import get_logger
from releasex.model import CacheError, LoadError, Record, TrendSnapshot
from releasex.reader import discover_files, iter_file_records
from releasex.search import search
from releasex.trends import WorkingAggregate, apply_record

logger = get_logger(__name__)

EMPTY_RESULT_ERROR = "No data loaded or trends empty"


class LoadOutcome:
    """Outcome of a load request."""

    def __init__(self, success: bool, record_count: int = 0, message: Optional[str] = None,
                 error: Optional[str] = None, from_cache: bool = False):
        self.success = success
        self.record_count = record_count
        self.message = message
        self.error = error
        self.from_cache = from_cache

    @property
    def trends_loaded(self) -> bool:
        return self.success

    def to_dict(self) -> Dict[str, Any]:
        """Convert outcome to dictionary."""
        if self.success:
            return {
                "success": True,
                "count": self.record_count,
                "message": self.message,
                "trends_loaded": True,
                "from_cache": self.from_cache,
            }
        return {
            "success": False,
            "count": self.record_count,
            "error": self.error,
        }


class TrendLoader:
    """
    Loads trends from a directory of release files.
    """

    def __init__(self, config: Optional[Config] = None, cache: Optional[CacheStore] = None):
        self.config = config or Config()
        self.cache = cache or CacheStore(self.config.cache.path, self.config.cache.ttl_seconds)
        self.snapshot: Optional[TrendSnapshot] = None
        self.record_count = 0
        self.from_cache = False

    def load(self, directory: Optional[str] = None, force: bool = False) -> int:
        """
        Load trends, from the cache when possible.
        
        Args:
            directory: Directory holding the release files (defaults to config)
            force: Ignore the cache and re-read every file
            
        Returns:
            Total number of valid records
            
        Raises:
            LoadError: The snapshot was built but could not be cached. The
                new snapshot is current regardless.
        """
        if not force:
            entry = self.cache.read()
            if entry is not None:
                logger.info(f"Using cached trends ({entry.record_count} records)")
                self.snapshot = entry.trends
                self.record_count = entry.record_count
                self.from_cache = True
                return entry.record_count

        directory = directory or self.config.data.directory
        snapshot, total = self._build(directory)

        self.snapshot = snapshot
        self.record_count = total
        self.from_cache = False

        try:
            self.cache.write(snapshot, total)
        except CacheError as e:
            raise LoadError(f"Loaded {total} records but could not cache trends: {e}")

        return total

    def _build(self, directory: str) -> Tuple[TrendSnapshot, int]:
        data = self.config.data
        interval = self.config.performance.compact_interval
        files = discover_files(directory, data.extension)
        logger.info(f"Loading {len(files)} files from {directory}")

        aggregate = WorkingAggregate()
        total = 0
        for path in files:
            file_count = 0
            for record in iter_file_records(path, data.delimiter, data.encoding):
                apply_record(record, aggregate)
                file_count += 1
                total += 1
                if interval and total % interval == 0:
                    gc.collect()
            logger.info(f"Processed {path}: {file_count} records")

        logger.info(f"Loaded {total} records from {len(files)} files")
        return finalize(aggregate, total), total

    def run_load(self, directory: Optional[str] = None, force: bool = False) -> LoadOutcome:
        """
        Load trends and report the outcome instead of raising.
        
        Args:
            directory: Directory holding the release files (defaults to config)
            force: Ignore the cache and re-read every file
            
        Returns:
            Load outcome
        """
        try:
            count = self.load(directory, force)
        except LoadError as e:
            logger.error(str(e))
            return LoadOutcome(False, record_count=self.record_count, error=str(e))
        except Exception as e:
            logger.exception(f"Error loading trends: {e}")
            return LoadOutcome(False, error=f"Error loading trends: {e}")

        if count > 0 and self.snapshot is not None:
            return LoadOutcome(True, record_count=count, message="Data loaded successfully",
                               from_cache=self.from_cache)
        return LoadOutcome(False, record_count=count, error=EMPTY_RESULT_ERROR)

    def clear_cache(self) -> None:
        """Delete the cached trends. The in-memory snapshot is kept."""
        self.cache.clear()

    def search(self, criteria: Mapping[str, str], directory: Optional[str] = None) -> List[Record]:
        """
        Search release files with the configured limits.
        
        Args:
            criteria: Field name -> query text
            directory: Directory holding the release files (defaults to config)
            
        Returns:
            Matching records
        """
        data = self.config.data
        return search(
            directory or self.config.data.directory,
            criteria,
            max_results=self.config.search.max_results,
            extension=data.extension,
            delimiter=data.delimiter,
            encoding=data.encoding,
        )
