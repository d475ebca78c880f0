"""
Command-line interface for Release Extract.
"""

import argparse
import json
import sys
from typing import List, Optional

from releasex.config import load_config
from releasex.loader import TrendLoader
from releasex.log import configure_logging, get_logger
from releasex.model import ReleaseXError, TrendSnapshot, clamp_top_n
from releasex.search import build_criteria
from releasex.writers import write_csv, write_json

logger = get_logger(__name__)

# CLI option dest -> record field
SEARCH_OPTIONS = [
    ("inmate_name", "InmateName", "Inmate name contains"),
    ("case_number", "CaseNumber", "Case number contains"),
    ("offense", "OffenseDescription", "Offense description contains"),
    ("offense_date", "OffenseDate", "Offense date (exact, partial or any date format)"),
    ("court", "Court", "Court contains"),
    ("attorney", "AttorneyName", "Attorney name contains"),
    ("bondsman", "BondsmanName", "Bondsman name contains"),
    ("release_type", "ReleaseType", "Release type contains"),
    ("bond_type", "BondType", "Bond type contains"),
    ("release_date", "ReleaseDate", "Release date (exact, partial or any date format)"),
]

# Snapshot rankings shown by the trends command
RANKINGS = [
    ("release_types", "Release Types"),
    ("offense_types", "Offenses"),
    ("bond_types", "Bond Types"),
    ("courts", "Courts"),
    ("attorneys", "Attorneys"),
    ("bondsmen", "Bondsmen"),
    ("releases_by_date", "Busiest Days"),
]


def format_snapshot(snapshot: TrendSnapshot, top_n: int) -> str:
    """
    Render a snapshot as plain text.
    
    Args:
        snapshot: Trend snapshot
        top_n: Entries shown per ranking
        
    Returns:
        Text report
    """
    lines = [
        f"Total releases: {snapshot.total_releases:,}",
        f"Unique inmates: {snapshot.unique_inmates:,}",
        f"Unique cases:   {snapshot.unique_cases:,}",
        f"Average bond:   ${snapshot.average_bond:,.2f}",
    ]

    for key, title in RANKINGS:
        lines.append("")
        lines.append(f"{title}:")
        for name, count in snapshot.top(key, top_n):
            lines.append(f"  {name}: {count:,}")

    lines.append("")
    lines.append("Bond Ranges:")
    for label, count in snapshot.bond_ranges:
        lines.append(f"  {label}: {count:,}")

    lines.append("")
    lines.append("Releases by Month:")
    for month, count in snapshot.releases_by_month:
        lines.append(f"  {month}: {count:,}")

    return "\n".join(lines)


def process_command(args: argparse.Namespace) -> int:
    """
    Process command-line arguments.
    
    Args:
        args: Command-line arguments
        
    Returns:
        Exit code
    """
    config = load_config(args.config)
    configure_logging(config, args.log_level)
    if args.data_dir:
        config.data.directory = args.data_dir

    loader = TrendLoader(config)

    if args.command == "load":
        outcome = loader.run_load(force=args.force)
        if outcome.success:
            print(f"Loaded {outcome.record_count:,} records successfully!")
            return 0
        print(f"Load failed: {outcome.error}")
        return 1
    elif args.command == "clear-cache":
        loader.clear_cache()
        print("Cache cleared successfully!")
        return 0
    elif args.command == "trends":
        outcome = loader.run_load()
        if loader.snapshot is None:
            print(f"No trends available: {outcome.error}")
            return 1
        if args.json:
            print(json.dumps(loader.snapshot.model_dump(mode="json"), indent=2))
        else:
            print(format_snapshot(loader.snapshot, clamp_top_n(args.top_n, config.report.top_n)))
        if not outcome.success:
            logger.warning(outcome.error)
        return 0
    elif args.command == "search":
        criteria = build_criteria({field: getattr(args, dest) for dest, field, _ in SEARCH_OPTIONS})
        results = loader.search(criteria)

        if args.csv:
            write_csv(results, args.csv)
        if args.json_out:
            write_json(results, args.json_out)

        if args.json:
            print(json.dumps(results, indent=2))
        else:
            print(f"Found {len(results)} matching records")
            for i, record in enumerate(results, 1):
                print(f"\n--- Match {i} ---")
                for field, value in record.items():
                    print(f"{field}: {value}")
        return 0
    else:
        logger.error("No command given")
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Release Extract")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    parser.add_argument("--data-dir", help="Directory holding the release files")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Load command
    load_parser = subparsers.add_parser("load", help="Load release files and cache trends")
    load_parser.add_argument("--force", action="store_true", help="Ignore the cache and re-read every file")

    # Trends command
    trends_parser = subparsers.add_parser("trends", help="Show release trends")
    trends_parser.add_argument("--top-n", type=int, help="Entries per ranking (5-100)")
    trends_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search release records")
    for dest, _, help_text in SEARCH_OPTIONS:
        search_parser.add_argument(f"--{dest.replace('_', '-')}", dest=dest, default="", help=help_text)
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")
    search_parser.add_argument("--csv", help="Also write results to this CSV file")
    search_parser.add_argument("--json-out", help="Also write results to this JSON file")

    # Clear cache command
    subparsers.add_parser("clear-cache", help="Delete the cached trends")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.
    
    Returns:
        Exit code
    """
    args = build_parser().parse_args(argv)

    try:
        return process_command(args)
    except ReleaseXError as e:
        logger.error(f"Error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
