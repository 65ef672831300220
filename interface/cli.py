"""
Command line entry points.

conversor-produtos [input.xlsx] [output.xlsx] [--debug] [--strict | --no-strict]
    Convert a product spreadsheet into the catalog import layout ("Produtos" sheet).

separador-codigo [input.xlsx] [output.xlsx] [--debug]
    Split "code description" values in the code column into code + Descrição.

Both return a process exit code: 0 when an output file was written, 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from config import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_SPLIT_OUTPUT_FILE,
    LOG_FORMAT,
    MAX_ERRORS_SHOWN,
    MAX_WARNINGS_SHOWN,
    OUTPUT_SHEET_NAME,
    STRICT_MODE,
)
from extraction import ConversionResult, collect_headers, convert_rows, split_code_column
from input_readers import InvalidWorkbookError, read_excel
from writers import OutputWriteError, write_output

logger = logging.getLogger(__name__)


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def _base_parser(prog: str, description: str, default_output: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=prog, description=description)
    ap.add_argument("input", nargs="?", default=DEFAULT_INPUT_FILE, help="Input spreadsheet (.xlsx)")
    ap.add_argument("output", nargs="?", default=default_output, help="Output spreadsheet (.xlsx)")
    ap.add_argument("--debug", "-d", action="store_true", help="Verbose diagnostics")
    return ap


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = _base_parser(
        "conversor-produtos",
        "Convert a product spreadsheet into the catalog import layout.",
        DEFAULT_OUTPUT_FILE,
    )
    ap.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=STRICT_MODE,
        help="Reject rows without a code; --no-strict overrides CONVERSOR_STRICT",
    )
    return ap.parse_args(argv)


def _load_rows(input_path: Path, usage: str) -> Optional[List[dict]]:
    """Read the input sheet, logging the reason and returning None on failure."""
    if not input_path.exists():
        logger.error("Input file %s not found.", input_path)
        logger.info("Usage: %s", usage)
        return None

    try:
        rows = read_excel(input_path)
    except InvalidWorkbookError as e:
        logger.error("Could not read %s: %s", input_path, e)
        return None

    logger.info("Read %d rows from %s", len(rows), input_path)
    return rows


def _report(result: ConversionResult) -> None:
    logger.info("=== CONVERSION RESULTS ===")
    logger.info("%d rows converted", result.succeeded)
    logger.info("%d rows failed", result.failed)
    logger.info("%d descriptions inferred", result.inferred_descriptions)

    placeholders = result.placeholder_rows
    if placeholders:
        logger.warning("%d rows have no real description (placeholder used):", len(placeholders))
        for item in placeholders[:MAX_WARNINGS_SHOWN]:
            logger.warning("  - row %d: %s", item.row_number, item.code)
        if len(placeholders) > MAX_WARNINGS_SHOWN:
            logger.warning("  ... and %d more", len(placeholders) - MAX_WARNINGS_SHOWN)

    if result.failures:
        logger.info("Failure details (first %d):", MAX_ERRORS_SHOWN)
        for i, failure in enumerate(result.failures[:MAX_ERRORS_SHOWN], start=1):
            logger.info("%d. Row %d: %s", i, failure.row_number, failure.message)
        if result.failed > MAX_ERRORS_SHOWN:
            logger.info("... and %d more errors", result.failed - MAX_ERRORS_SHOWN)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _setup_logging(args.debug)

    input_path = Path(args.input)
    output_path = Path(args.output)

    logger.info("Input file: %s", input_path)
    logger.info("Output file: %s", output_path)
    logger.info("Strict mode: %s", "on" if args.strict else "off")

    rows = _load_rows(input_path, "conversor-produtos [input.xlsx] [output.xlsx] [--debug] [--strict | --no-strict]")
    if rows is None:
        return 1

    result = convert_rows(rows, strict=args.strict)
    _report(result)

    if not result.records:
        logger.warning("No rows were converted; nothing to save.")
        return 1

    try:
        written = write_output(output_path, result.records)
    except OutputWriteError as e:
        logger.error("%s", e)
        return 1

    logger.info("Conversion finished. File saved to %s", written)
    return 0


def split_main(argv: Optional[Sequence[str]] = None) -> int:
    ap = _base_parser(
        "separador-codigo",
        "Split 'code description' values into separate code and Descrição columns.",
        DEFAULT_SPLIT_OUTPUT_FILE,
    )
    args = ap.parse_args(argv)
    _setup_logging(args.debug)

    input_path = Path(args.input)
    rows = _load_rows(input_path, "separador-codigo [input.xlsx] [output.xlsx]")
    if rows is None:
        return 1
    if not rows:
        logger.warning("No rows found in %s; nothing to save.", input_path)
        return 1

    logger.debug("Columns found: %s", ", ".join(collect_headers(rows)))
    result = split_code_column(rows)

    logger.info("Codes containing a description (split): %d", result.split_count)
    logger.info("Codes without spaces: %d", result.unsplit_count)

    try:
        written = write_output(
            Path(args.output),
            result.rows,
            headers=collect_headers(result.rows),
            sheet_name=OUTPUT_SHEET_NAME,
        )
    except OutputWriteError as e:
        logger.error("%s", e)
        return 1

    logger.info("File saved to %s", written)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
