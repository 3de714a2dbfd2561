"""Command-line interface for c2pa-remover.

Provides the ``c2pa-remover`` entry point that dispatches to one of
three workflows:

- ``--check`` on a file       — report whether C2PA metadata is present
- ``--check`` on a directory  — check every supported image in it
- *(default)*                 — strip C2PA metadata into a cleaned copy

Exit status is 1 whenever C2PA metadata is found by a check, remains in
a cleaned file, or an error occurs.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from metadata_handler import (
    C2PARemoverError,
    SUPPORTED_FORMATS,
    has_c2pa,
    is_reencode_available,
    is_supported_format,
    remove_c2pa,
    save_cleaned_image,
)


# ── Branding ────────────────────────────────────────────────────────

_ASCII_LOGO = """
  ██████╗██████╗ ██████╗  █████╗
 ██╔════╝╚════██╗██╔══██╗██╔══██╗
 ██║      █████╔╝██████╔╝███████║
 ██║     ██╔═══╝ ██╔═══╝ ██╔══██║
 ╚██████╗███████╗██║     ██║  ██║
  ╚═════╝╚══════╝╚═╝     ╚═╝  ╚═╝
     ─── c2pa-remover ───
"""


def _print_ascii_logo() -> None:
    """Print the startup banner, colored unless ``NO_COLOR`` is set."""
    if os.environ.get("NO_COLOR"):
        print(_ASCII_LOGO, file=sys.stdout)
        return
    cyan = "\033[96m"
    bold = "\033[1m"
    reset = "\033[0m"
    print(f"{bold}{cyan}{_ASCII_LOGO}{reset}", file=sys.stdout)


# ── Argument parser construction ────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="c2pa-remover",
        description="Detect and remove C2PA provenance metadata from PNG and JPG files.",
        epilog="Example: c2pa-remover image.jpg -o clean.jpg",
    )

    parser.add_argument(
        "source", type=Path,
        help=f"Image file or directory (formats: {', '.join(sorted(SUPPORTED_FORMATS))})",
    )
    parser.add_argument(
        "-o", "--output", type=Path,
        help="Output file path (default: <name>_cleaned<ext> next to the source)",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Only check for C2PA metadata; required when source is a directory",
    )
    parser.add_argument(
        "--no-smart", action="store_true",
        help="Skip the re-encode step and only strip C2PA segments/chunks",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    return parser


# ── Command handlers ────────────────────────────────────────────────

def _handle_check(source: Path) -> int:
    """Report whether a single file carries C2PA metadata."""
    if has_c2pa(source.read_bytes()):
        print("⚠️  C2PA metadata detected")
        return 1
    print("✓ No C2PA metadata found")
    return 0


def _handle_check_dir(directory: Path) -> int:
    """Check every supported image directly inside *directory*."""
    files = sorted(p for p in directory.iterdir() if p.is_file() and is_supported_format(p))

    checked = 0
    with_c2pa = 0

    for file_path in files:
        try:
            data = file_path.read_bytes()
        except OSError as e:
            print(f"Error reading file {file_path}: {e}", file=sys.stderr)
            continue

        checked += 1
        if has_c2pa(data):
            with_c2pa += 1
            print(f"⚠️  {file_path.name}: C2PA metadata detected")
        else:
            print(f"✓ {file_path.name}: No C2PA metadata")

    print(f"\nSummary: Checked {checked} images, found C2PA metadata in {with_c2pa} images")
    return 1 if with_c2pa else 0


def _handle_remove(args: argparse.Namespace) -> int:
    """Strip C2PA metadata from the source image into a cleaned copy."""
    data = args.source.read_bytes()

    if not has_c2pa(data):
        print("No C2PA metadata found, no changes needed")
        return 0

    smart = not args.no_smart
    if smart and not is_reencode_available():
        print("Warning: Pillow lacks JPEG/PNG codecs, using segment removal only", file=sys.stderr)
        smart = False

    print("Removing C2PA metadata...")
    try:
        cleaned = remove_c2pa(data, smart=smart)
    except C2PARemoverError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if cleaned == data:
        print("No changes made")
        return 0

    try:
        output_path = save_cleaned_image(args.source, cleaned, args.output)
        size_percent = len(cleaned) / len(data) * 100
        print(f"✓ Cleaned file saved as {output_path} ({size_percent:.1f}% of original size)")

        if has_c2pa(output_path.read_bytes()):
            print("⚠️  Warning: C2PA metadata still detected in cleaned file")
            return 1
    except OSError as e:
        print(f"Error saving file: {e}", file=sys.stderr)
        return 1

    print("✓ Verification: No C2PA metadata in cleaned file")
    return 0


# ── Entry point ─────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to the appropriate command handler."""
    _print_ascii_logo()

    parser = _build_parser()

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.source.is_dir():
        if not args.check:
            print("Error: Directories can only be checked (use --check).", file=sys.stderr)
            return 1
        return _handle_check_dir(args.source)

    if not args.source.exists():
        print(f"Error: File not found: {args.source}", file=sys.stderr)
        return 1
    if not is_supported_format(args.source):
        print(
            f"Warning: Source file '{args.source}' may not be a supported format "
            f"({', '.join(sorted(SUPPORTED_FORMATS))}).",
            file=sys.stderr,
        )

    try:
        if args.check:
            return _handle_check(args.source)
        return _handle_remove(args)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
