"""
Delimited release file reader for Release Extract.
"""

import csv
import os
from typing import Iterator, List, TextIO

from releasex.log import get_logger
from releasex.model import Record

logger = get_logger(__name__)


def discover_files(directory: str, extension: str = ".csv") -> List[str]:
    """
    Find release files in a directory.
    
    Args:
        directory: Directory to scan (not recursive)
        extension: File extension to accept
        
    Returns:
        File paths sorted by file name
    """
    if not os.path.isdir(directory):
        logger.warning(f"Data directory not found: {directory}")
        return []

    names = sorted(
        name for name in os.listdir(directory)
        if name.endswith(extension) and os.path.isfile(os.path.join(directory, name))
    )
    return [os.path.join(directory, name) for name in names]


def iter_records(handle: TextIO, delimiter: str = ",") -> Iterator[Record]:
    """
    Stream records from an open delimited file.
    
    The first row names the fields. Rows whose column count differs from
    the header are dropped.
    
    Args:
        handle: Text file handle positioned at the start
        delimiter: Column delimiter
        
    Yields:
        One record per well-formed row
    """
    reader = csv.reader(handle, delimiter=delimiter)
    headers = next(reader, None)
    if headers is None:
        return

    width = len(headers)
    dropped = 0
    for row in reader:
        if len(row) != width:
            dropped += 1
            continue
        yield dict(zip(headers, row))

    if dropped:
        logger.debug(f"Dropped {dropped} malformed rows")


def iter_file_records(path: str, delimiter: str = ",", encoding: str = "utf-8-sig") -> Iterator[Record]:
    """
    Stream records from a file on disk.
    
    A file that cannot be opened yields nothing. A file that turns out
    to be unreadable part-way through stops at that point; records
    already yielded stand.
    
    Args:
        path: File path
        delimiter: Column delimiter
        encoding: File encoding
        
    Yields:
        One record per well-formed row
    """
    try:
        handle = open(path, "r", encoding=encoding, errors="replace", newline="")
    except OSError as e:
        logger.warning(f"Skipping {path}: {e}")
        return

    with handle:
        try:
            yield from iter_records(handle, delimiter)
        except csv.Error as e:
            logger.warning(f"Stopped reading {path}: {e}")
