"""
Main entry point and orchestration
"""

import sys
from typing import List, Optional

from .config import ConverterConfig, create_parser, parse_args
from .converter import ImageToPDFConverter
from .errors import ConverterError, InvalidInputError
from .logger import Logger


def print_usage():
    """Print the full help text"""
    print("Image to PDF Converter")
    print("\nSupported formats: JPG, JPEG, PNG, WEBP, TIFF")
    print("\nUsage:")
    print("  img-to-pdf -i <directories|files> [-o <pdf_file>] [-order seq|nam|mod]")
    print("\nExamples:")
    print("  img-to-pdf -i images/")
    print('  img-to-pdf -i "image1.jpg,photo.png,scan.tiff" -o result.pdf')
    print('  img-to-pdf -i "images/,photo.jpg,scan.png" -o result.pdf -order mod')
    print(
        "\nNote: The -i flag accepts both directories and individual files "
        "(comma-separated)"
    )
    print(
        "Sorting order for images: seq (sequential), nam (by name), "
        "mod (by modification time)"
    )
    print()
    print(create_parser().format_help())


def print_input_help():
    """Print the short usage shown when no input was given"""
    print("Image to PDF Converter")
    print("\nUsage:")
    print('  img-to-pdf -i "image1.jpg,photo.png,scan.tiff" -o result.pdf')
    print("  img-to-pdf -i ./images -o result.pdf")


def fail(error: Exception):
    """Report a fatal error and exit"""
    print(f"Error: {error}", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    config = ConverterConfig.from_args(parse_args(argv))

    if config.show_help:
        print_usage()
        sys.exit(0)

    if not config.has_input:
        print_input_help()
        fail(InvalidInputError())

    logger = Logger(verbose=config.verbose)
    converter = ImageToPDFConverter(logger=logger)

    try:
        pages = converter.convert(config.input_value, config.output, config.order)
    except ConverterError as e:
        fail(e)

    if config.verbose:
        print(str(converter.stats))

    print(f"Successfully converted {len(pages)} image(s) to {config.output}")
    sys.exit(0)


if __name__ == "__main__":
    main()
