# PDFBookGen/pdfbookgen/cli.py
"""
Command line front end.

Example:
    pdfbookgen source.pdf booklet.pdf --paper A4 --signature-size 3
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from .logic.booklet_config import MAX_SIG_SIZE, BookletConfig
from .logic.booklet_processor import BookletProcessor, default_output_path
from .logic.errors import ConfigurationError
from .logic.sheet_sizes import DEFAULT_PAPER_SIZE, PAPER_SIZE_NAMES, is_known_preset
from .logic.signature import SignatureStats

logger = logging.getLogger(__name__)

UNITS = ("mm", "in", "pt")


def _paper_name(value: str) -> str:
    if not is_known_preset(value):
        raise argparse.ArgumentTypeError(
            f"unknown paper size {value!r} (choose from {', '.join(PAPER_SIZE_NAMES)})"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfbookgen",
        description="Generate a booklet, printed in signatures, from a PDF document.",
    )
    parser.add_argument("source", help="Source PDF document")
    parser.add_argument(
        "output",
        nargs="?",
        help="Generated PDF (default: <source>-booklet.pdf)",
    )

    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "-p",
        "--paper",
        type=_paper_name,
        default=DEFAULT_PAPER_SIZE,
        help=f"Sheet size preset (default: {DEFAULT_PAPER_SIZE})",
    )
    size.add_argument(
        "--size",
        nargs=3,
        metavar=("WIDTH", "HEIGHT", "UNIT"),
        help=f"Explicit portrait sheet size, unit one of {', '.join(UNITS)}",
    )

    parser.add_argument(
        "-s",
        "--signature-size",
        type=int,
        default=1,
        help=f"Sheets of paper in each signature, 1 to {MAX_SIG_SIZE} (default: 1)",
    )
    parser.add_argument(
        "--first", type=int, default=1, help="First source page (default: 1)"
    )
    parser.add_argument(
        "--last", type=int, help="Last source page (default: last page of source)"
    )
    parser.add_argument(
        "--no-rotate",
        action="store_true",
        help="Rotate the back of each sheet the same way as the front",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show the signature statistics and exit without generating",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _parse_size(parser: argparse.ArgumentParser, values: List[str]):
    width, height, unit = values
    try:
        size = (float(width), float(height), unit)
    except ValueError:
        parser.error(f"invalid --size {' '.join(values)}")
    if unit not in UNITS:
        parser.error(f"invalid unit {unit!r} (choose from {', '.join(UNITS)})")
    return size


def format_stats(
    stats: SignatureStats, page_size_mm: Optional[Tuple[float, float]] = None
) -> str:
    """Render the statistics the way the host application lists them."""
    rows = [("Source pages", stats.page_count)]
    if page_size_mm:
        rows.append(("Source page size", "%.1f x %.1f mm" % page_size_mm))
    rows += [
        ("Sheets of paper", stats.sheet_count),
        ("Pages per signature", stats.sig_page_count),
        ("Signatures", stats.sig_count),
        ("Last signature starts at page", stats.last_sig_first_page),
        ("Pages in last signature", stats.last_sig_page_count),
        ("Blank pages in last signature", stats.last_sig_blank_count),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}}  {value}" for label, value in rows)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paper_size = _parse_size(parser, args.size) if args.size else args.paper
    config = BookletConfig(
        sig_size=args.signature_size,
        first_page=args.first,
        last_page=args.last,
        paper_size=paper_size,
        rotate=not args.no_rotate,
    )

    logger.debug("Options: %s", config)
    if not os.path.isfile(args.source):
        parser.error(f"cannot read source document {args.source}")

    processor = BookletProcessor(args.source)
    processor.set_config(config)
    try:
        processor.config.validate(processor.original_page_count)
    except ConfigurationError as e:
        parser.error(str(e))

    if args.stats:
        print(
            format_stats(
                processor.get_signature_stats(),
                processor.get_original_page_size_mm(),
            )
        )
        return 0

    output_path = args.output or default_output_path(args.source)
    success, error_message = processor.generate(output_path)
    if not success:
        print(f"pdfbookgen: {error_message}", file=sys.stderr)
        return 1

    print(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
