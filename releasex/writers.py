"""
Output writers for Release Extract.
"""

import csv
import json
import os
from typing import Any, List

from releasex.log import get_logger
from releasex.model import OutputError, Record, TrendSnapshot

logger = get_logger(__name__)


def _ensure_parent(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def write_json(data: Any, path: str, pretty: bool = True) -> None:
    """
    Write data to a JSON file.
    
    Args:
        data: JSON-serialisable data
        path: Output file path
        pretty: Whether to pretty-print the JSON
    """
    logger.info(f"Writing JSON to {path}")

    try:
        _ensure_parent(path)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2 if pretty else None, ensure_ascii=False)
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing JSON to {path}: {e}")
        raise OutputError(f"Error writing JSON to {path}: {e}")


def write_csv(records: List[Record], path: str) -> None:
    """
    Write search results to a CSV file.
    
    Columns are the union of record fields in first-seen order.
    
    Args:
        records: Records to write
        path: Output file path
    """
    logger.info(f"Writing CSV to {path}")

    fieldnames: List[str] = []
    for record in records:
        for field in record:
            if field not in fieldnames:
                fieldnames.append(field)

    try:
        _ensure_parent(path)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, restval="")
            writer.writeheader()
            writer.writerows(records)

        logger.info(f"Wrote {len(records)} rows to {path}")
    except (OSError, csv.Error) as e:
        logger.error(f"Error writing CSV to {path}: {e}")
        raise OutputError(f"Error writing CSV to {path}: {e}")


def write_snapshot(snapshot: TrendSnapshot, path: str, pretty: bool = True) -> None:
    """Write a trend snapshot to a JSON file."""
    write_json(snapshot.model_dump(mode="json"), path, pretty)
