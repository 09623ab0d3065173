from __future__ import annotations

import argparse
from pathlib import Path

from . import __version__
from .config import ConfigManager
from .core import ContentSummary, LibraryScanner


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    print(f"media-library-summary v{__version__}")
    if args.command is None:
        parser.print_help()
        return

    config = ConfigManager(Path(args.config) if args.config else None)
    errors = config.validate_config()
    if errors:
        for error in errors:
            print(f"設定錯誤: {error}")
        raise SystemExit(2)

    if args.command == "scan":
        _run_scan(args, config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="media_library_summary")
    parser.add_argument("--config", help="Path to config file", default=None)

    subparsers = parser.add_subparsers(dest="command")
    scan = subparsers.add_parser("scan", help="Scan a media library and write the content summary")
    scan.add_argument("--source", required=True, help="Library root folder")
    scan.add_argument("--output", help="Output folder (default: current directory)")
    scan.add_argument("--config", help="Path to config file", default=argparse.SUPPRESS)

    return parser


def _run_scan(args: argparse.Namespace, config: ConfigManager) -> None:
    source_path = Path(args.source)
    output_dir = Path(args.output) if args.output else Path.cwd()
    output_dir.mkdir(parents=True, exist_ok=True)

    summary = ContentSummary.from_config(config)
    scanner = LibraryScanner(config, summary)
    result = scanner.scan_directory(source_path)
    output_path = scanner.on_scan_completed(output_dir)

    print(f"Summary written to: {output_path}")
    print(f"Processed: {result.processed}, Failed: {len(result.failed)}, Skipped: {result.skipped}")


if __name__ == "__main__":
    main()
