#!/usr/bin/env python3
"""
CLI for exporting a finished story to web and print PDFs.

The input is the same JSON body the /exports/pdf endpoint accepts:
{"config": {...}, "pages": [{"page_number": 1, "text": "...", ...}, ...]}

Usage:
    python cli/export_story.py story.json
    python cli/export_story.py story.json --output-dir exports/
    python cli/export_story.py story.json --check  # report page status only
    python cli/export_story.py story.json --force  # export even if pages fail validation
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storybook.api.models.requests import ExportPdfRequest
from storybook.api.services.export_service import ExportService, ExportValidationError


def main():
    parser = argparse.ArgumentParser(
        description="Export a storybook JSON file to web and print PDFs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/export_story.py story.json
    python cli/export_story.py story.json --output-dir exports/
    python cli/export_story.py story.json --check
        """,
    )

    parser.add_argument(
        "story_file",
        type=Path,
        help="JSON file with 'config' and 'pages'",
    )

    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=Path(__file__).parent.parent / "output",
        help="Directory for the PDFs (default: output/)",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Print per-page status and exit without rendering",
    )

    parser.add_argument(
        "--force",
        action="store_true",
        help="Render even when pages fail validation",
    )

    args = parser.parse_args()

    request = ExportPdfRequest.model_validate(json.loads(args.story_file.read_text()))
    config = request.config.to_config()
    pages = request.to_pages()
    service = ExportService()

    if args.check:
        check = service.check(config, pages)
        for report in check.pages:
            marker = "ok" if report.export_ready else "--"
            print(
                f"[{marker}] Page {report.page_number}: {report.word_count} words "
                f"({report.status}), image: {report.image_state}"
            )
        for message in check.messages:
            print(f"  {message}")
        sys.exit(0 if check.is_valid else 1)

    try:
        result = service.export(config, pages, enforce_validation=not args.force)
    except ExportValidationError as e:
        print("Book is not ready to export:", file=sys.stderr)
        for error in e.errors:
            print(f"  {error.message}", file=sys.stderr)
        sys.exit(1)

    args.output_dir.mkdir(parents=True, exist_ok=True)
    web_path = args.output_dir / result.web_filename
    print_path = args.output_dir / result.print_filename
    web_path.write_bytes(result.web_pdf)
    print_path.write_bytes(result.print_pdf)

    print(f"Web PDF saved to: {web_path}")
    print(f"Print PDF saved to: {print_path}")
    print(f"Pages (including cover): {result.page_count}")


if __name__ == "__main__":
    main()
