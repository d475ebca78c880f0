"""
Record search for Release Extract.

Search always streams the release files themselves; the trend cache only
holds aggregates.
"""

from typing import Dict, List, Mapping, Optional

from releasex.dates import same_day
from releasex.log import get_logger
from releasex.model import (
    ATTORNEY_NAME,
    BOND_TYPE,
    BONDSMAN_NAME,
    CASE_NUMBER,
    COURT,
    INMATE_NAME,
    OFFENSE_DATE,
    OFFENSE_DESCRIPTION,
    RELEASE_DATE,
    RELEASE_TYPE,
    Record,
    SearchError,
)
from releasex.reader import discover_files, iter_file_records

logger = get_logger(__name__)

DEFAULT_MAX_RESULTS = 100

# Fields a search may filter on, in form order
SEARCH_FIELDS = (
    INMATE_NAME,
    CASE_NUMBER,
    OFFENSE_DESCRIPTION,
    OFFENSE_DATE,
    COURT,
    ATTORNEY_NAME,
    BONDSMAN_NAME,
    RELEASE_TYPE,
    BOND_TYPE,
    RELEASE_DATE,
)

DATE_FIELDS = frozenset([RELEASE_DATE, OFFENSE_DATE])


def build_criteria(values: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """
    Build search criteria from field values.
    
    Args:
        values: Field name -> query text; None counts as blank
        
    Returns:
        Criteria in SEARCH_FIELDS order
    """
    unknown = [field for field in values if field not in SEARCH_FIELDS]
    if unknown:
        raise SearchError(f"Unsupported search fields: {', '.join(sorted(unknown))}")

    return {field: values.get(field) or "" for field in SEARCH_FIELDS if field in values}


def date_matches(record_value: str, search_value: str) -> bool:
    """
    Match a date field.
    
    Both values are expected trimmed and lowercased. Accepts an exact
    match, a substring match ("2025-10" finds "2025-10-02"), or two
    values that parse to the same day ("10/02/2025" finds "2025-10-02").
    """
    if record_value == search_value:
        return True
    if search_value in record_value:
        return True
    return same_day(record_value, search_value)


def matches(record: Record, criteria: Mapping[str, str]) -> bool:
    """
    Check a record against search criteria.
    
    Blank criteria are ignored. Text fields match case-insensitively on
    substring; date fields use date_matches().
    
    Args:
        record: Parsed record
        criteria: Field name -> query text
        
    Returns:
        True if every non-blank criterion accepts the record
    """
    for field, value in criteria.items():
        if not value or not value.strip():
            continue

        record_value = (record.get(field) or "").strip().lower()
        search_value = value.strip().lower()

        if field in DATE_FIELDS:
            if not date_matches(record_value, search_value):
                return False
        elif search_value not in record_value:
            return False

    return True


def search(directory: str, criteria: Mapping[str, str], max_results: int = DEFAULT_MAX_RESULTS,
           extension: str = ".csv", delimiter: str = ",", encoding: str = "utf-8-sig") -> List[Record]:
    """
    Search release files for matching records.
    
    Files are scanned in name order and scanning stops once max_results
    records have matched.
    
    Args:
        directory: Directory holding the release files
        criteria: Field name -> query text
        max_results: Result cap
        extension: Release file extension
        delimiter: Column delimiter
        encoding: File encoding
        
    Returns:
        Matching records in file then row order
    """
    results: List[Record] = []
    if max_results <= 0:
        return results

    for path in discover_files(directory, extension):
        records = iter_file_records(path, delimiter, encoding)
        try:
            for record in records:
                if matches(record, criteria):
                    results.append(record)
                    if len(results) >= max_results:
                        logger.info(f"Search stopped at {max_results} results in {path}")
                        return results
        finally:
            records.close()

    logger.info(f"Search found {len(results)} results")
    return results
