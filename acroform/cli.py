"""
Command-line interface for acroform-fields.

Lists, validates and fills the AcroForm fields of a PDF.
"""

from __future__ import annotations

import argparse
from enum import IntEnum
import logging
import os
from pathlib import Path
import sys

from acroform.config import (
    DEFAULT_LOG_LEVEL,
    FALSE_TOKENS,
    LIST_SEPARATOR,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
    TRUE_TOKENS,
)
from acroform.errors import (
    FieldValueError,
    LoadError,
    MalformedFieldError,
    PdfWriteError,
    TypeMismatchError,
)
from acroform.model.field import FieldType
from acroform.model.form import Form
from acroform.report import format_json, format_text

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Exit codes for command results."""
    OK = 0
    INVALID_VALUE = 1  # A value was rejected by a field
    ERROR = 2          # Unreadable, malformed or unwritable document


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="acroform-fields",
        description="Inspect and fill the interactive form fields of a PDF.",
        epilog="Exit codes: 0=ok, 1=value rejected, 2=load or write error",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List fields with their type and value.")
    list_cmd.add_argument("file", type=Path, help="PDF file to read.")
    list_cmd.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output a JSON report to stdout.",
    )

    check_cmd = commands.add_parser("check", help="Validate every discovered field.")
    check_cmd.add_argument("file", type=Path, help="PDF file to validate.")

    fill_cmd = commands.add_parser("fill", help="Set field values and save a copy.")
    fill_cmd.add_argument("file", type=Path, help="PDF file to fill.")
    fill_cmd.add_argument(
        "--output",
        "-o",
        type=Path,
        required=True,
        metavar="PATH",
        help="Where to write the filled PDF.",
    )
    fill_cmd.add_argument(
        "--set",
        action="append",
        dest="assignments",
        default=[],
        metavar="FIELD=VALUE",
        help="Field index or name and its new value (repeatable).",
    )
    fill_cmd.add_argument(
        "--need-appearances",
        action="store_true",
        help="Ask viewers to regenerate field appearances.",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def parse_assignment(text: str) -> tuple[str, str]:
    field, sep, value = text.partition("=")
    if not sep or not field:
        raise argparse.ArgumentTypeError(f"Expected FIELD=VALUE, got {text!r}")
    return field, value


def resolve_index(form: Form, field: str) -> int:
    if field.isdigit():
        return int(field)
    return form.index_of(field)


def apply_value(form: Form, index: int, value: str) -> None:
    """Set field ``index`` from its command-line text form."""
    field_type = form.type_of(index)
    if field_type is FieldType.TEXT:
        form.set_text(index, value)
    elif field_type is FieldType.CHECK_BOX:
        token = value.strip().lower()
        if token in TRUE_TOKENS:
            form.set_check_box(index, True)
        elif token in FALSE_TOKENS:
            form.set_check_box(index, False)
        else:
            raise FieldValueError(f"Not a check box value: {value!r}")
    elif field_type is FieldType.RADIO:
        form.set_radio(index, value)
    elif field_type is FieldType.LIST_BOX:
        choices = [item.strip() for item in value.split(LIST_SEPARATOR) if item.strip()]
        form.set_list_box(index, choices)
    elif field_type is FieldType.COMBO_BOX:
        form.set_combo_box(index, value)
    else:
        raise TypeMismatchError("Push buttons have no value")


def run_list(args: argparse.Namespace) -> int:
    form = Form.load(args.file)
    if args.json_output:
        print(format_json(args.file, form))
    else:
        print(format_text(args.file, form))
    return ExitCode.OK.value


def run_check(args: argparse.Namespace) -> int:
    form = Form.load(args.file)
    form.validate()
    print(f"{args.file.name}: {form.field_count} field(s) OK")
    return ExitCode.OK.value


def run_fill(args: argparse.Namespace) -> int:
    form = Form.load(args.file)
    for text in args.assignments:
        field, value = parse_assignment(text)
        try:
            index = resolve_index(form, field)
            apply_value(form, index, value)
        except (FieldValueError, KeyError, IndexError) as exc:
            print(f"Error: cannot set {field}: {exc}", file=sys.stderr)
            return ExitCode.INVALID_VALUE.value
        logger.info(f"run_fill: Set field {index} from {field!r}")

    form.save(args.output, need_appearances=args.need_appearances)
    print(f"Saved {args.output}")
    return ExitCode.OK.value


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    handlers = {"list": run_list, "check": run_check, "fill": run_fill}
    try:
        return handlers[args.command](args)
    except argparse.ArgumentTypeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return ExitCode.INVALID_VALUE.value
    except (LoadError, MalformedFieldError, PdfWriteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return ExitCode.ERROR.value


if __name__ == "__main__":
    sys.exit(main())
