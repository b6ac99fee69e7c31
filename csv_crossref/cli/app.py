from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import CrossRefConfig, resolve_config
from ..errors import ConfigError, CrossRefError, UploadError
from ..logging.error_log import ErrorLogBuffer, record_for_error
from ..logging.init import log_summary, set_level, setup_logging
from ..models.options import CrossRefOptions
from ..models.upload import UploadedFile
from ..services.pipeline import run_update
from ..services.summary import render_summary_line
from ..sheet import open_sheet
from ..upload import parse_upload_payload, read_upload_files

"""CLI entrypoint.

Flow:
- Load .env and the YAML config (CLI flags override config values)
- Collect uploads from a JSON payload and/or CSV paths, in the order given
- Run the cross-reference pipeline against the sheet file
- Print a SUMMARY line; on failure print an ERROR line and write the error log
"""

__all__ = [
    "main",
    "EXIT_SUCCESS",
    "EXIT_FATAL",
]

EXIT_SUCCESS = 0
EXIT_FATAL = 1


def _load_env_file(path: Path) -> None:
    # .env may set CROSSREF_CONFIG; existing environment variables win
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="csv-crossref",
        description="Add an 'In Files' column listing which CSV files contain each row's key",
    )
    p.add_argument("files", nargs="*", type=Path, help="Uploaded CSV files, in order")
    p.add_argument("--sheet", required=True, type=Path, help="Sheet to update (.xlsx or .csv)")
    p.add_argument("--sheet-name", help="Worksheet name (default: the active sheet)")
    p.add_argument("--column", help="Key column in the uploaded files (default: number)")
    p.add_argument("--sheet-column", help="Key column in the sheet (default: same as --column)")
    p.add_argument("--label", help="Header of the inserted column (default: In Files)")
    p.add_argument("--payload", help="JSON file with [{filename, contents}] uploads, '-' for stdin")
    p.add_argument("--config", type=Path, help="YAML config file (default: config/crossref.yml)")
    p.add_argument("--dry-run", action="store_true", help="Print the computed column without writing")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _options_from(cfg: CrossRefConfig, args: argparse.Namespace) -> CrossRefOptions:
    base = cfg.to_options()
    return CrossRefOptions(
        key_column=args.column or base.key_column,
        sheet_key_column=args.sheet_column or base.sheet_key_column,
        header_label=args.label if args.label is not None else base.header_label,
        separator=base.separator,
    )


def _collect_uploads(args: argparse.Namespace) -> list[UploadedFile]:
    uploads: list[UploadedFile] = []
    if args.payload:
        if args.payload == "-":
            raw = sys.stdin.read()
        else:
            payload_path = Path(args.payload)
            if not payload_path.is_file():
                raise UploadError(f"payload file not found: {payload_path}")
            raw = payload_path.read_text(encoding="utf-8")
        uploads.extend(parse_upload_payload(raw))
    uploads.extend(read_upload_files(args.files))
    return uploads


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む (テストで main([]) を呼ぶため)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_level(logging.DEBUG)
        logger.debug("debug mode enabled")

    error_log = ErrorLogBuffer()
    try:
        cfg = resolve_config(args.config)
        options = _options_from(cfg, args)
        uploads = _collect_uploads(args)
        if not uploads:
            logger.warning("no CSV files given; every row will be empty")
        sheet = open_sheet(args.sheet, sheet_name=args.sheet_name or cfg.sheet_name)
        result = run_update(uploads, sheet, options, dry_run=args.dry_run)
    except CrossRefError as e:
        if isinstance(e, ConfigError):
            logger.error(f"config: {e}")
        else:
            logger.error(str(e))
        error_log.append(record_for_error(e))
        log_path = error_log.flush()
        logger.info(f"error log written: {log_path}")
        return EXIT_FATAL

    if args.dry_run:
        for value in result.column:
            print(value)

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix
    log_summary(summary_line.removeprefix("SUMMARY "))
    return EXIT_SUCCESS
