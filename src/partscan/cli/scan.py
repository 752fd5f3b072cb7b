#!/usr/bin/env python3
"""
partscan - Engine schematic scanner CLI.

Reads a schematic one line at a time and reports the sum of all part
numbers (numbers adjacent to a symbol) and the sum of all gear ratios
(products of the two numbers touching each `*`).

Usage:
    partscan INPUT [options]

Example:
    partscan schematic.txt
    partscan schematic.txt --json --stats reports/schematic-stats.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from partscan.config import load_config
from partscan.errors import SchematicError
from partscan.progress_display import ScanProgressDisplay
from partscan.scanner import ScanResult, SchematicScanner


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="partscan",
        description="Sum part numbers and gear ratios in an engine schematic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plain totals
  partscan schematic.txt

  # Machine-readable totals plus a statistics sidecar
  partscan schematic.txt --json --stats stats.json

  # Custom alphabet / limits
  partscan schematic.txt --config partscan.yaml
        """
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Schematic text file (one row per line)",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="YAML scanner configuration (default: built-in alphabet)",
    )

    parser.add_argument(
        "--stats",
        type=Path,
        default=None,
        help="Output path for statistics JSON file (optional)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print totals as a JSON object",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a live progress panel on stderr",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every row window and extraction",
    )

    return parser.parse_args(argv)


def run_scan(input_path: Path, scanner: SchematicScanner, progress: bool = False) -> ScanResult:
    """Feed the input file through the scanner, optionally with a live panel."""
    with open(input_path, 'r', encoding='utf-8') as f:
        if not progress:
            for line in f:
                scanner.feed(line)
            return scanner.finish()

        with ScanProgressDisplay(f"Scanning {input_path.name}") as display:
            for line in f:
                scanner.feed(line)
                display.update(scanner)
            result = scanner.finish()
            display.update(scanner)
        return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.getLogger('partscan').setLevel(level)

    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    try:
        config = load_config(args.config)
        logger.info(f"Scanning {args.input}")
        result = run_scan(args.input, SchematicScanner(config), progress=args.progress)
    except SchematicError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1

    if args.json:
        print(orjson.dumps(result.to_dict()).decode('utf-8'))
    else:
        print(f"Sum = {result.part_sum}")
        print(f"Gears Ratio Sum = {result.gear_ratio_sum}")

    if args.stats:
        args.stats.parent.mkdir(parents=True, exist_ok=True)
        result.stats.write_to_file(args.stats)
        logger.info(f"Statistics written to: {args.stats}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
