#!/usr/bin/env python3
"""
Extract Daijirin terms from decoded entries.

Reads JSON Lines of decoded entries ({"heading": ..., "text": ...}, one per
line, as written by an EPWING dump tool) and writes one JSON line per term.

Output formats:
- rows:    term bank rows [expression, reading, tags, rules, score, *glossary]
- records: full record objects

Environment (.env is loaded if present):
    DAIJIRIN_LOG_LEVEL   Logging level (default INFO)
    DAIJIRIN_PROGRESS    Set to 0 to hide the progress bar

Usage:
    python3 extract_daijirin.py daijirin_entries.jsonl -o terms.jsonl
    python3 extract_daijirin.py daijirin_entries.jsonl --format records --stats
    python3 extract_daijirin.py --revision
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Iterator, Optional

from dotenv import load_dotenv
from tqdm import tqdm

from daijirin_parser import REVISION, Entry, ExtractionStats, extract

logger = logging.getLogger(__name__)


def iter_entries(input_path: Path) -> Iterator[Entry]:
    """Yield entries from a JSONL file, skipping malformed lines."""
    with open(input_path, 'rb') as f:
        for line_number, raw in enumerate(f, 1):
            if not raw.strip():
                continue
            try:
                entry = Entry.from_dict(json.loads(raw.decode('utf-8')))
            except UnicodeDecodeError:
                logger.warning(f"Line {line_number}: invalid UTF-8")
                continue
            except json.JSONDecodeError as e:
                logger.warning(f"Line {line_number}: invalid JSON ({e})")
                continue
            except (KeyError, TypeError) as e:
                logger.warning(f"Line {line_number}: missing heading or text ({e})")
                continue

            if not isinstance(entry.heading, str) or not isinstance(entry.text, str):
                logger.warning(f"Line {line_number}: heading and text must be strings")
                continue

            yield entry


def run(
    input_path: Path,
    output,
    output_format: str = "rows",
    show_progress: bool = True,
) -> ExtractionStats:
    """
    Extract every entry of input_path and write the terms to output.

    Returns:
        Statistics for the run
    """
    stats = ExtractionStats()

    for entry in tqdm(iter_entries(input_path), desc="Entries", unit=" entries",
                      disable=not show_progress):
        records = extract(entry.heading, entry.text)
        stats.add(records)
        for record in records:
            data = record.to_term_row() if output_format == "rows" else record.to_dict()
            output.write(json.dumps(data, ensure_ascii=False) + "\n")

    logger.info(f"Extracted {stats.records:,} terms from {stats.entries:,} entries "
                f"({stats.skipped:,} skipped)")
    return stats


def main(argv: Optional[list] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description='Extract Daijirin terms from decoded EPWING entries'
    )
    parser.add_argument('input', nargs='?', help='JSONL file of {"heading", "text"} entries')
    parser.add_argument('-o', '--output', help='Output JSONL path (default: stdout)')
    parser.add_argument('-f', '--format', choices=['rows', 'records'], default='rows',
                        help='Output format (default: rows)')
    parser.add_argument('--stats', action='store_true',
                        help='Print extraction statistics to stderr')
    parser.add_argument('--revision', action='store_true',
                        help='Print the extractor revision and exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Verbose output')
    parser.add_argument('--no-progress', action='store_true',
                        help='Hide the progress bar')

    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.verbose else os.environ.get("DAIJIRIN_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"unknown log level in DAIJIRIN_LOG_LEVEL: {log_level}")

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if args.revision:
        print(REVISION)
        return 0

    if not args.input:
        parser.error("input is required when not using --revision")

    input_path = Path(args.input)
    if not input_path.is_file():
        parser.error(f"input file not found: {input_path}")

    show_progress = not args.no_progress and os.environ.get("DAIJIRIN_PROGRESS", "1") != "0"

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as output:
            stats = run(input_path, output, args.format, show_progress)
    else:
        # tqdm draws on stderr, so the bar never mixes with stdout rows
        stats = run(input_path, sys.stdout, args.format, show_progress)

    if args.stats:
        print(json.dumps(stats.to_dict(), ensure_ascii=False, indent=2), file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
