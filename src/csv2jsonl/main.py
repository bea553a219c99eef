#!/usr/bin/env python3
"""
csv2jsonl Main Entry Point

Reads one CSV file, converts it to JSON Lines, prints a short summary with a
preview of the first lines and writes the .jsonl file next to the source (or
wherever --output / --output-dir point).
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Union

from csv2jsonl.config import get_config
from csv2jsonl.converter import convert_csv_text
from csv2jsonl.errors import Csv2JsonlError, InvalidInputFileError, NoValidDataError
from csv2jsonl.schemas.conversion import ConversionResult
from csv2jsonl.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def read_csv_file(path: PathLike) -> str:
    """Read a .csv file as UTF-8 text."""
    path = Path(path)
    extension = get_config().converter.input_extension
    if path.suffix.lower() != extension.lower():
        raise InvalidInputFileError("Please select a valid CSV file.")
    if not path.is_file():
        raise InvalidInputFileError(f"File not found: {path}")

    try:
        # utf-8-sig drops a leading byte order mark if there is one
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise InvalidInputFileError("Failed to read file") from e


def derive_output_path(input_path: PathLike, output_dir: Optional[PathLike] = None) -> Path:
    """Name the output after the input, with .csv swapped for .jsonl."""
    converter_cfg = get_config().converter
    input_path = Path(input_path)
    name = input_path.name
    if converter_cfg.input_extension in name:
        name = name.replace(converter_cfg.input_extension, converter_cfg.output_extension, 1)
    else:
        name = Path(name).with_suffix(converter_cfg.output_extension).name

    parent = Path(output_dir) if output_dir else input_path.parent
    return parent / name


def format_summary(result: ConversionResult) -> str:
    return (f"Conversion completed! Total rows converted: {result.count} "
            f"| File size: {result.size_mb:.2f} MB")


def run_conversion(input_path: PathLike, output_path: Optional[PathLike] = None,
                   output_dir: Optional[PathLike] = None, preview_lines: Optional[int] = None,
                   normalize_newlines: Optional[bool] = None, dry_run: bool = False) -> ConversionResult:
    """Convert one file end to end and write the JSON Lines artifact."""
    cfg = get_config()
    print(f"🔧 Reading and converting {input_path}...")

    text = read_csv_file(input_path)
    result = convert_csv_text(text, normalize_newlines=normalize_newlines)

    if result.is_empty:
        raise NoValidDataError("No valid data found in the CSV file.")

    print(f"✓ {format_summary(result)}")
    if result.skipped:
        print(f"⚠ Skipped {len(result.skipped)} malformed line(s): "
              f"{', '.join(str(row.line_number) for row in result.skipped)}")

    if preview_lines is None:
        preview_lines = cfg.converter.preview_lines
    if preview_lines > 0:
        print(f"Preview (first {preview_lines} lines):")
        print(result.preview(preview_lines))

    if output_path is None:
        output_path = derive_output_path(input_path, output_dir or cfg.project.data_output_dir)
    output_path = Path(output_path)

    if dry_run:
        print(f"DRY: would write {output_path}")
        return result

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as f:
        f.write(result.lines)
    print(f"📄 Wrote {output_path}")
    return result


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="csv2jsonl", description="Convert a CSV file to JSON Lines")
    parser.add_argument('input', help='CSV file to convert')
    parser.add_argument('-o', '--output', help='Output JSONL file (default: input name with .jsonl)')
    parser.add_argument('--output-dir', help='Directory for the derived output file')
    parser.add_argument('--preview', type=non_negative_int, default=None,
                        help='Number of output lines to preview')
    parser.add_argument('--no-normalize-newlines', action='store_true',
                        help='Split on \\n only, leaving \\r characters in place')
    parser.add_argument('--dry-run', action='store_true', help='Convert and preview without writing output')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        run_conversion(
            args.input,
            output_path=args.output,
            output_dir=args.output_dir,
            preview_lines=args.preview,
            normalize_newlines=False if args.no_normalize_newlines else None,
            dry_run=args.dry_run,
        )
    except Csv2JsonlError as e:
        print(f"✗ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
