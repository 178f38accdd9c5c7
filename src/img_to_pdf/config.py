"""
CLI configuration and argument parsing
"""

import argparse
from typing import List, Optional

DEFAULT_OUTPUT = "output.pdf"
DEFAULT_ORDER = "seq"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser"""
    parser = argparse.ArgumentParser(
        prog="img-to-pdf",
        description="Combine JPG, PNG, WEBP and TIFF images into a single PDF",
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-i",
        "-input",
        "--input",
        dest="input",
        help="Input directories and/or image files (comma-separated)",
    )

    parser.add_argument(
        "-o",
        "-output",
        "--output",
        dest="output",
        default=DEFAULT_OUTPUT,
        help=f"Output PDF file path (default: {DEFAULT_OUTPUT})",
    )

    parser.add_argument(
        "-order",
        "--order",
        dest="order",
        default=DEFAULT_ORDER,
        help=(
            "Sorting order for images: seq (sequential), nam (by name), "
            "mod (by modification time) (default: seq)"
        ),
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    parser.add_argument(
        "-h", "-help", "--help", dest="help", action="store_true", help="Show help"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = create_parser()
    return parser.parse_args(argv)


class ConverterConfig:
    """Settings for one conversion run, built once from the command line"""

    def __init__(
        self,
        input_value: str = "",
        output: str = DEFAULT_OUTPUT,
        order: str = DEFAULT_ORDER,
        verbose: bool = False,
        show_help: bool = False,
    ):
        self.input_value = input_value
        self.output = output
        self.order = order
        self.verbose = verbose
        self.show_help = show_help

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ConverterConfig":
        return cls(
            input_value=args.input or "",
            output=args.output,
            order=args.order,
            verbose=args.verbose,
            show_help=args.help,
        )

    @property
    def has_input(self) -> bool:
        return bool(self.input_value.strip())
