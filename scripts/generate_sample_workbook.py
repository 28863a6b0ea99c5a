#!/usr/bin/env python3
"""Generate a sample listings workbook for manual runs.

Writes an .xlsx file with a header row and synthetic listings in the
layout the report expects (id in A, sale price in L, rent in M, status
in AF). Feed the result to ``listing-stats --file-path``.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from listing_stats.config import DEFAULT_SHEET_NAME
from listing_stats.generators import ListingGenerator, build_header
from listing_stats.sources.workbook import write_workbook

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a sample listings workbook")
    parser.add_argument("--rows", type=int, default=500, help="Number of listings (default: 500)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--duplicate-rate",
        type=float,
        default=0.02,
        help="Probability of reusing an existing id (default: 0.02)",
    )
    parser.add_argument("--sheet", default=DEFAULT_SHEET_NAME, help="Worksheet name")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("local/sample_listings.xlsx"),
        help="Output file (default: local/sample_listings.xlsx)",
    )
    args = parser.parse_args()

    args.output.parent.mkdir(parents=True, exist_ok=True)

    generator = ListingGenerator(seed=args.seed, duplicate_rate=args.duplicate_rate)
    rows = generator.generate_rows(args.rows)
    write_workbook(args.output, rows, sheet_name=args.sheet, header=build_header())

    logger.info("Sample workbook ready: %s (%d listings)", args.output, args.rows)


if __name__ == "__main__":
    main()
