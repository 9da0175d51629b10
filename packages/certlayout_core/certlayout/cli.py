"""
Command-line interface for CertLayout.

Usage:
    certlayout plan record.json
    certlayout plan record.json --json
    certlayout render record.json -o certificate.pdf --asset footer=footer.png
    certlayout version
"""

import argparse
import json
import sys
from pathlib import Path

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_OVERFLOW = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="certlayout",
        description="CertLayout - training certificate layout engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  certlayout plan record.json
  certlayout plan record.json --json
  certlayout render record.json -o out.pdf --asset logo=logo.png --asset footer=footer.png
  certlayout version
        """,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)"
    )
    parser.add_argument(
        "--plain-logs",
        action="store_true",
        help="Disable rich log formatting"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    plan_parser = subparsers.add_parser("plan", help="Resolve the layout without rendering")
    plan_parser.add_argument("input", help="Certificate record JSON file")
    plan_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    render_parser = subparsers.add_parser("render", help="Render a certificate to PDF")
    render_parser.add_argument("input", help="Certificate record JSON file")
    render_parser.add_argument(
        "-o", "--output",
        help="Output PDF path (default: generated certificate file name)"
    )
    render_parser.add_argument(
        "--asset",
        action="append",
        default=[],
        metavar="NAME=PATH",
        help="Decoration image: background, sidebar, footer or logo (repeatable)"
    )

    subparsers.add_parser("version", help="Show version information")

    return parser


def load_record(path: Path):
    """Read a ``CertificateRecord`` from a JSON object file."""
    from .models.record import CertificateRecord

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return CertificateRecord.from_dict(data)


def load_images(specs):
    """Build ``CertificateImages`` from ``NAME=PATH`` arguments."""
    from .models.assets import CertificateImages, ImageAsset

    assets = {}
    for spec in specs:
        name, sep, raw_path = spec.partition("=")
        if not sep or not name or not raw_path:
            raise ValueError(f"Invalid asset '{spec}', expected NAME=PATH")
        if name not in CertificateImages.SLOTS:
            raise ValueError(f"Unknown asset '{name}', expected one of {', '.join(CertificateImages.SLOTS)}")
        path = Path(raw_path)
        assets[name] = ImageAsset.from_bytes(path.name, path.read_bytes())
    return CertificateImages.from_mapping(assets)


def _resolution_summary(composed) -> dict:
    resolution = composed.resolution
    return {
        "file_name": composed.file_name,
        "outcome": resolution.outcome.value,
        "content_bottom_limit": round(composed.frame.content_bottom_limit, 2),
        "sections": [
            {
                "id": result.section_id,
                "page": result.page,
                "start_y": round(result.start_y, 2),
                "height": round(result.height, 2),
                "mandatory": result.mandatory,
                "overflowed": result.overflowed,
            }
            for result in resolution.results()
        ],
        "deferred": list(resolution.deferred_ids),
        "pages": len(composed.description),
        "warnings": list(composed.warnings),
    }


def cmd_plan(args):
    """Handle plan command."""
    from .composer import compose_certificate

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return EXIT_ERROR

    composed = compose_certificate(load_record(input_path))
    summary = _resolution_summary(composed)

    if args.json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
    else:
        print(f"File name: {summary['file_name']}")
        print(f"Outcome:   {summary['outcome']}")
        print(f"Pages:     {summary['pages']}")
        print(f"Limit:     {summary['content_bottom_limit']}")
        for section in summary["sections"]:
            flag = " (overflowed)" if section["overflowed"] else ""
            print(
                f"  [{section['page']}] {section['id']:<10} y={section['start_y']:>7} "
                f"h={section['height']:>7}{flag}"
            )
        if summary["deferred"]:
            print(f"Deferred:  {', '.join(summary['deferred'])}")
    return EXIT_OK


def cmd_render(args):
    """Handle render command."""
    from .composer import render_certificate_pdf

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return EXIT_ERROR

    record = load_record(input_path)
    images = load_images(args.asset)
    pdf_bytes, composed = render_certificate_pdf(record, images)

    output_path = Path(args.output) if args.output else input_path.with_name(composed.file_name)
    output_path.write_bytes(pdf_bytes)
    print(f"Saved: {output_path} ({len(composed.description)} page(s), {composed.resolution.outcome.value})")
    return EXIT_OK


def cmd_version(args=None):
    """Handle version command."""
    from .version import __version__
    print(f"CertLayout v{__version__}")
    print("Training certificate layout engine")
    return EXIT_OK


def main(argv=None):
    """Main entry point for CLI."""
    from .exceptions import CertLayoutError, ContentOverflowFatal
    from .utils.logger import configure_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level, rich_output=not args.plain_logs)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    handlers = {
        "plan": cmd_plan,
        "render": cmd_render,
        "version": cmd_version,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return EXIT_OK

    try:
        return handler(args)
    except ContentOverflowFatal as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Shorten the module lists or the certificate text and try again.", file=sys.stderr)
        return EXIT_OVERFLOW
    except (CertLayoutError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main() or 0)
