"""
genclass command line.

Usage:
  genclass --class_jar libfoo.jar --manifest_proto libfoo.jar_manifest.json \
      --output_jar libfoo-gen.jar

Exit codes:
  0 = output jar written
  1 = manifest, class jar or output failure
  2 = bad arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from genclass import __version__
from genclass.errors import GenClassError
from genclass.extractor.config import GenClassConfig
from genclass.extractor.pipeline import run_genclass

logger = logging.getLogger("genclass")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genclass",
        description="Extract the classes of annotation processor generated sources from a class jar",
    )
    parser.add_argument("--class_jar", type=Path, required=True,
                        help="Jar with all classes produced by the compilation")
    parser.add_argument("--manifest_proto", "--manifest", dest="manifest", type=Path, required=True,
                        help="Compilation manifest in JSON format (the flag name is kept "
                             "from the protobuf-based tool; protobuf input is not read)")
    parser.add_argument("--output_jar", type=Path, required=True,
                        help="Jar to write the generated classes to")
    parser.add_argument("--temp_dir", type=Path,
                        help="Directory to create the staging directory in")
    parser.add_argument("--report", type=Path,
                        help="Write a JSON classification report")
    parser.add_argument("--timing_log", type=Path,
                        help="Append phase timings to a shared JSONL file")
    parser.add_argument("--no_compress", action="store_true",
                        help="Store entries without compression")
    parser.add_argument("--no_normalize", action="store_true",
                        help="Keep file timestamps instead of a fixed one")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for progress, -vv for per-entry detail")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config = GenClassConfig(
        class_jar=args.class_jar,
        manifest_path=args.manifest,
        output_jar=args.output_jar,
        temp_dir=args.temp_dir,
        compress=not args.no_compress,
        normalize=not args.no_normalize,
        report_path=args.report,
        timing_path=args.timing_log,
    )

    try:
        result = run_genclass(config)
    except GenClassError as e:
        print(f"genclass: error: {e.stage} failed: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        # Staging directory could not be created
        print(f"genclass: error: staging failed: {e}", file=sys.stderr)
        return 1

    logger.info(
        f"{result.output_jar}: {result.entries_written} generated classes "
        f"({result.entries_excluded} user-written excluded)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
