"""
Command-line interface for reservation field extraction.

Usage:
    # Single file
    reservation-extract request.txt

    # From stdin, with a stricter threshold
    cat request.txt | reservation-extract - --threshold 0.8

    # Directory batch processing, with account-creation macros
    reservation-extract requests/ --macro accountCreation --output results.jsonl
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import structlog

from reservation_extractor.config import settings
from reservation_extractor.entity_extraction import EntityExtractor, InputError
from reservation_extractor.field_mapping import FieldMapper
from reservation_extractor.logging_config import setup_logging
from reservation_extractor.version import EXTRACTOR_VERSION, FIELD_MAPPING_VERSION


logger = structlog.get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def process_text(
    text: str,
    source: str,
    extractor: EntityExtractor,
    macro_form_type: Optional[str] = None,
) -> dict:
    """
    Extract fields from one text and build its output record.

    Args:
        text: Raw client text
        source: Where the text came from (file path or "<stdin>")
        extractor: Configured extractor
        macro_form_type: Form type to build an automation macro for (optional)

    Returns:
        Output record as dict

    Raises:
        InputError: If the text is empty
        ValueError: If the form type is unknown
    """
    result = extractor.extract(text)

    record = {
        "source": source,
        "extractor_version": EXTRACTOR_VERSION,
        "fields": result.to_dict(),
    }

    if macro_form_type:
        macro = FieldMapper().generate_macro(macro_form_type, result)
        record["macro"] = macro.to_automation_dict()
        record["field_mapping_version"] = FIELD_MAPPING_VERSION

    return record


def process_single_file(
    path: Path,
    extractor: EntityExtractor,
    macro_form_type: Optional[str] = None,
    verbose: bool = False,
) -> dict:
    """Read a text file and process it."""
    if verbose:
        logger.info("processing_file", path=str(path))

    text = path.read_text(encoding="utf-8", errors="replace")
    return process_text(text, str(path), extractor, macro_form_type)


def process_directory(
    dir_path: Path,
    extractor: EntityExtractor,
    macro_form_type: Optional[str] = None,
    verbose: bool = False,
) -> List[dict]:
    """
    Process all .txt files in a directory (recursively).

    Files that fail are logged and skipped.

    Returns:
        List of output records, one per successfully processed file
    """
    txt_files = sorted(dir_path.glob("**/*.txt"))

    if not txt_files:
        logger.warning("no_text_files_found", directory=str(dir_path))
        return []

    logger.info("processing_directory", files_count=len(txt_files))

    results = []
    errors = []

    for txt_file in txt_files:
        try:
            results.append(process_single_file(txt_file, extractor, macro_form_type, verbose))
        except (InputError, ValueError, OSError) as e:
            logger.error("file_processing_failed", file=str(txt_file), error=str(e))
            errors.append({"file": str(txt_file), "error": str(e)})

    logger.info(
        "directory_processing_completed",
        total=len(txt_files),
        success=len(results),
        errors=len(errors),
    )

    return results


def write_output(results: List[dict], output_path: Optional[Path], as_lines: bool, stdout: TextIO) -> None:
    """
    Write results as pretty JSON (single record) or JSON Lines.

    Args:
        results: Output records
        output_path: Output file path (stdout when None)
        as_lines: Write one JSON object per line
        stdout: Stream used when no output path is given
    """
    if as_lines:
        payload = "".join(json.dumps(result, ensure_ascii=False) + "\n" for result in results)
    else:
        payload = json.dumps(results[0] if len(results) == 1 else results, ensure_ascii=False, indent=2) + "\n"

    if not output_path:
        stdout.write(payload)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(payload, encoding="utf-8")

    logger.info("output_written", path=str(output_path), count=len(results))


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reservation-extract",
        description="Extract reservation and contact fields from client messages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  %(prog)s request.txt

  # Read from stdin
  pbpaste | %(prog)s -

  # Directory, JSON Lines to a file, with CRM macros
  %(prog)s requests/ --macro accountCreation --output results.jsonl
        """,
    )

    parser.add_argument("input", type=str, help="Text file, directory of .txt files, or '-' for stdin")

    parser.add_argument(
        "--threshold",
        "-t",
        type=float,
        default=None,
        help=f"Confidence threshold in [0, 1] (default: {settings.confidence_threshold})",
    )

    parser.add_argument(
        "--macro",
        "-m",
        type=str,
        nargs="?",
        const=settings.default_form_type,
        default=None,
        metavar="FORM_TYPE",
        help=f"Include a form-filling macro (default form: {settings.default_form_type})",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit code
    """
    setup_logging()

    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        extractor = EntityExtractor(confidence_threshold=args.threshold)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    output_path = Path(args.output) if args.output else None

    try:
        if args.input == "-":
            results = [process_text(stdin.read(), "<stdin>", extractor, args.macro)]
            as_lines = False
        else:
            input_path = Path(args.input)

            if input_path.is_file():
                results = [process_single_file(input_path, extractor, args.macro, args.verbose)]
                as_lines = False
            elif input_path.is_dir():
                results = process_directory(input_path, extractor, args.macro, args.verbose)
                as_lines = True
                if not results:
                    print(f"Error: No text could be processed in {input_path}", file=sys.stderr)
                    return 1
            else:
                print(f"Error: Path not found: {input_path}", file=sys.stderr)
                return 1

        write_output(results, output_path, as_lines, stdout)

    except (InputError, ValueError, OSError) as e:
        logger.error("cli_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Processed {len(results)} input(s) successfully", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
