"""Command line front end for the document filing pipeline.

Usage:
    medfiling report1.pdf report2.pdf
    medfiling report1.pdf --base-url http://localhost:3000
    medfiling report1.pdf report2.pdf --edit 1:category=Letter --confirm
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from medfiling.config.settings import Settings
from medfiling.logging.logger import Log
from medfiling.pipeline.exceptions import PipelineError
from medfiling.pipeline.factory import (
    build_batch_processor,
    build_http_client,
    build_review_session,
)
from medfiling.pipeline.models import ProgressEvent, SelectedFile
from medfiling.pipeline.review_session import ReviewSession
from medfiling.submission.exceptions import SubmissionError


def _parse_edit(raw: str) -> tuple[int, str, str]:
    """Parse INDEX:FIELD=VALUE (INDEX is 1-based)."""
    try:
        position, assignment = raw.split(":", 1)
        field, value = assignment.split("=", 1)
        return int(position) - 1, field.strip(), value
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid edit '{raw}', expected INDEX:FIELD=VALUE"
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medfiling",
        description="Upload medical PDFs, extract filing fields and file them.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF files to process, in order")
    parser.add_argument("--base-url", help="API base URL (defaults to API_BASE_URL)")
    parser.add_argument(
        "--edit",
        action="append",
        default=[],
        type=_parse_edit,
        metavar="INDEX:FIELD=VALUE",
        help="Change a field of the INDEX-th document before filing (repeatable)",
    )
    parser.add_argument(
        "--confirm", action="store_true", help="File every document after review"
    )
    return parser


def _print_progress(event: ProgressEvent) -> None:
    print(f"[{event.index + 1}/{event.total}] {event.stage.value} {event.file_name}", file=sys.stderr)


def _print_document(session: ReviewSession) -> None:
    document = session.active_document
    print(f"\n== {document.name} (confidence: {document.confidence})")
    for name, value in document.fields.to_dict().items():
        print(f"  {name:<18} {value}")
    if document.missing_fields:
        print(f"  missing: {', '.join(document.missing_fields)}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = Settings()
    if args.base_url:
        settings.api_base_url = args.base_url
    Log.configure(settings.log_level)

    try:
        files = [SelectedFile.from_path(path) for path in args.files]
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    with build_http_client(settings) as http:
        processor = build_batch_processor(settings, http, on_progress=_print_progress)
        session = build_review_session(settings, http)
        try:
            session.load(processor.run(files))
        except PipelineError:
            print(processor.status, file=sys.stderr)
            return 1
        print(processor.status, file=sys.stderr)

        try:
            for index, field, value in args.edit:
                session.select(index)
                session.edit(field, value)
        except (IndexError, KeyError) as exc:
            print(f"Error: cannot apply edit: {exc}", file=sys.stderr)
            return 2

        for index in range(len(session.documents)):
            session.select(index)
            _print_document(session)
            if args.confirm:
                try:
                    receipt = session.confirm_current()
                except SubmissionError as exc:
                    print(f"Error: {exc}", file=sys.stderr)
                    return 1
                print(f"  filed: {'yes' if receipt.success else 'no'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
