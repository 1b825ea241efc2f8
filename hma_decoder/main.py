#!/usr/bin/env python3
"""
HMA dump tool
Decodes HMA aerospace unit files and writes one JSON document per unit.
"""
import os
import sys
import json
import logging
import argparse
from pathlib import Path
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence

from tqdm import tqdm

from .diagnostics import report_unresolved
from .errors import HmaDecodeError
from .parser.file_parser import HmaFileParser
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Decode HMA aerospace unit files to JSON',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        'path',
        type=Path,
        help='Path to an HMA file or a directory of HMA files'
    )

    parser.add_argument(
        '--output',
        type=Path,
        default=Path('output'),
        help='Output directory for JSON files'
    )

    parser.add_argument(
        '--workers',
        type=int,
        default=os.cpu_count(),
        help='Maximum number of worker threads'
    )

    parser.add_argument(
        '--log-dir',
        type=Path,
        default=Path('logs'),
        help='Log directory'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show debug messages on the console'
    )

    return parser.parse_args(argv)


def find_hma_files(path: Path) -> List[Path]:
    """HMA files at path: the file itself, or every *.hma file in a directory"""
    if path.is_file():
        return [path]
    return sorted(path.glob('*.[hH][mM][aA]'))


def process_file(file_path: Path, output_dir: Path, parser: HmaFileParser) -> Path:
    """Decode one file and write its JSON document"""
    unit = parser.parse_file(file_path)
    report_unresolved(unit)

    output_path = output_dir / f"{file_path.stem}.json"
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(unit.to_dict(), f, indent=2)

    logger.debug(f"Results written to {output_path}")
    return output_path


def process_files(
    files: Sequence[Path],
    output_dir: Path,
    max_workers: Optional[int] = None
) -> int:
    """Decode files in parallel.

    Returns:
        Number of files that failed
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    parser = HmaFileParser()
    failed = 0

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_path = {
            executor.submit(process_file, path, output_dir, parser): path
            for path in files
        }

        with tqdm(total=len(files), desc="Decoding", unit="file", dynamic_ncols=True) as progress:
            for future in as_completed(future_to_path):
                path = future_to_path[future]
                try:
                    future.result()
                except (HmaDecodeError, OSError) as e:
                    logger.error(f"Failed to process {path}: {e}")
                    failed += 1
                progress.update(1)

    return failed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    setup_logging(args.log_dir, verbose=args.verbose)

    if not args.path.exists():
        logger.error(f"Path not found: {args.path}")
        return 1

    files = find_hma_files(args.path)
    if not files:
        logger.error(f"No HMA files found in {args.path}")
        return 1

    logger.info(f"Processing {len(files)} files into {args.output}")
    failed = process_files(files, args.output, args.workers)

    logger.info(f"Decoded {len(files) - failed} of {len(files)} files")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
