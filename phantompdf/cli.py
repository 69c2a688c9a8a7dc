"""
Command Line Interface
======================

Render an HTML file to PDF with the PhantomJS rasterizer.

Usage:
    phantom-pdf page.html ./out --root /opt/phantomjs --paper-size A4
    cat page.html | phantom-pdf - ./out
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from phantompdf.config.logging import get_logger
from phantompdf.config.settings import get_settings
from phantompdf.core.exceptions import (
    InvalidArgumentError,
    RasterizationError,
    UnsupportedPlatformError,
)
from phantompdf.core.rendering.pdf_generator import PdfGenerator
from phantompdf.models.schemas import GenerationRequest, GeneratorOptions

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_RENDER_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="phantom-pdf", description="Render HTML to PDF with PhantomJS"
    )
    parser.add_argument(
        "--version", action="version", version=f"{settings.app_name} {settings.app_version}"
    )
    parser.add_argument("html_file", help="HTML file to render, or - to read stdin")
    parser.add_argument("output_dir", help="Existing directory that receives the PDF")
    parser.add_argument(
        "--root", help="PhantomJS tool folder (default: PHANTOM_PDF_PHANTOM_ROOT_FOLDER)"
    )
    parser.add_argument("--paper-size", help="Paper size passed to rasterize.js")
    parser.add_argument(
        "--check-exit-status",
        action="store_true",
        help="Fail when the rasterizer exits with a non-zero status",
    )
    parser.add_argument("--timeout", type=float, help="Rasterizer timeout in seconds")
    return parser


def _read_html(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the phantom-pdf command."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    root = args.root or settings.phantom_root_folder
    if root is None:
        print("error: no PhantomJS root folder given (--root)", file=sys.stderr)
        return EXIT_USAGE

    try:
        html = _read_html(args.html_file)
    except OSError as e:
        print(f"error: cannot read {args.html_file}: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        options = GeneratorOptions(
            root,
            paper_size=args.paper_size or settings.paper_size,
            rasterize_script=settings.rasterize_script,
            timeout=args.timeout if args.timeout is not None else settings.render_timeout,
            check_exit_status=args.check_exit_status or settings.check_exit_status,
        )
        generator = PdfGenerator(options)
        result = generator.render(
            GenerationRequest(html=html, output_folder=Path(args.output_dir))
        )
    except (InvalidArgumentError, UnsupportedPlatformError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except RasterizationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_RENDER_FAILED

    if not result.succeeded:
        logger.warning(
            "Rasterizer did not produce a PDF",
            return_code=result.return_code,
            output_path=result.output_path,
        )

    print(result.output_path)
    return EXIT_OK if result.succeeded else EXIT_RENDER_FAILED


if __name__ == "__main__":
    sys.exit(main())
