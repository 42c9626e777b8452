"""Command-line interface for json-to-ts.

Usage:
    # Convert a JSON file
    json-to-ts data.json

    # Convert a JSON string
    json-to-ts '{"name": "Ana", "age": 30}'

    # Custom root name, save to file
    json-to-ts --root-name User --output types.ts user.json

    # Read from stdin
    cat data.json | json-to-ts -
"""

import argparse
import sys
from pathlib import Path
from typing import BinaryIO

from json_to_ts import __version__
from json_to_ts.config.logging import get_logger, setup_logging
from json_to_ts.config.settings import DEFAULT_INPUT_GLOB, get_settings
from json_to_ts.exceptions import (
    InputError,
    InputFileNotFoundError,
    InvalidInputError,
    JsonToTsError,
    MissingInputError,
    OutputError,
)
from json_to_ts.generator import JsonToTypeScript, parse_json
from json_to_ts.models.options import ConverterOptions


log = get_logger(__name__)

STDIN_MARKER = "-"
UTF8_BOM = b"\xef\xbb\xbf"

EPILOG = """\
examples:
  json-to-ts data.json
  json-to-ts '{"name": "Ana", "age": 30}'
  json-to-ts --root-name User --output types.ts user.json
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser"""
    parser = argparse.ArgumentParser(
        prog="json-to-ts",
        description="Generate TypeScript interfaces/types from an example JSON value.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="JSON_FILE_OR_STRING",
        help="JSON file path, literal JSON text, or '-' for stdin",
    )
    parser.add_argument(
        "--root-name",
        metavar="NAME",
        help="Name of the root interface/type (default: RootObject)",
    )
    parser.add_argument(
        "--use-types", action="store_true", help="Use type aliases instead of interfaces"
    )
    parser.add_argument(
        "--no-export", action="store_true", help="Do not add export to declarations"
    )
    parser.add_argument(
        "--optional", action="store_true", help="Make every field optional"
    )
    parser.add_argument("--output", metavar="FILE", help="Save the result to a file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _looks_like_json(text: str) -> bool:
    """Heuristic: does an argument look like JSON text rather than a path?"""
    stripped = text.strip()
    if stripped[:1] in ("{", "[", '"'):
        return True
    try:
        parse_json(stripped)
    except InvalidInputError:
        return False
    return True


def _read_file(path: Path) -> bytes:
    """Read input file bytes (UTF-8 BOM stripped)"""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise InputError(f"Failed to read '{path}': {e}") from e
    log.debug("input_file_read path={} bytes={}", path, len(data))
    return data.removeprefix(UTF8_BOM)


def resolve_input(
    candidates: list[str],
    *,
    cwd: Path | None = None,
    input_glob: str = DEFAULT_INPUT_GLOB,
    stdin: BinaryIO | None = None,
) -> str | bytes:
    """Pick the JSON input among positional arguments.

    Priority: existing file, then '-' (stdin), then the last argument that
    looks like JSON text. Anything else is treated as a missing file.

    Raises:
        MissingInputError: no positional arguments
        InputFileNotFoundError: the fallback path does not exist
    """
    if not candidates:
        raise MissingInputError()

    for candidate in candidates:
        if candidate != STDIN_MARKER and Path(candidate).is_file():
            return _read_file(Path(candidate))

    if STDIN_MARKER in candidates:
        log.debug("input_from_stdin")
        data = (stdin or sys.stdin.buffer).read()
        return data.removeprefix(UTF8_BOM)

    for candidate in reversed(candidates):
        if _looks_like_json(candidate):
            log.debug("input_from_argument length={}", len(candidate))
            return candidate

    base_dir = cwd or Path.cwd()
    missing = candidates[-1]
    available = sorted(p.name for p in base_dir.glob(input_glob) if p.is_file())
    raise InputFileNotFoundError(missing, base_dir, available)


def write_output(path: str | Path, text: str) -> Path:
    """Write generated declarations to path.

    Raises:
        OutputError: the file could not be written
    """
    output_path = Path(path)
    try:
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(output_path, str(e)) from e
    return output_path


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        Process exit status
    """
    args_list = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not args_list:
        parser.print_help()
        return 0

    args = parser.parse_args(args_list)
    if args.root_name is not None and not args.root_name.strip():
        parser.error("--root-name must not be empty")

    setup_logging("DEBUG" if args.verbose else None)
    settings = get_settings()

    try:
        options = ConverterOptions.from_settings(
            settings.converter,
            root_name=args.root_name,
            use_interfaces=False if args.use_types else None,
            export_types=False if args.no_export else None,
            optional_fields=True if args.optional else None,
        )
        json_input = resolve_input(args.inputs, input_glob=settings.converter.input_glob)
        result = JsonToTypeScript(options).convert(json_input)

        if args.output:
            output_path = write_output(args.output, result)
            print(f"TypeScript types written to: {output_path}")
        else:
            print(result)
    except JsonToTsError as e:
        log.debug("conversion_failed error={}", e.to_dict())
        print(f"Error: {e.message}", file=sys.stderr)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
