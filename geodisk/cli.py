"""Calculate great-circle distances from a reference point to locations in a CSV file."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from geodisk.common.config_loader import Settings, load_database_config, load_settings
from geodisk.common.constants import (
    DEFAULT_DATABASE_CONFIG_PATH,
    DEFAULT_SETTINGS_PATH,
    EXIT_CONFIG_FAIL,
    EXIT_HARD_FAIL,
    EXIT_SUCCESS,
)
from geodisk.common.errors import ConfigError, GeoDiskError, SourceUnavailableError
from geodisk.common.logging import build_logger, log_event
from geodisk.common.time_utils import generate_run_id
from geodisk.pipeline.rank import rank
from geodisk.pipeline.report import render_report, write_run_summary
from geodisk.sources.csv_source import CsvRecordSource
from geodisk.sources.db_source import DatabaseRecordSource


def parse_args(argv: list[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--settings", default=None, help=f"reference point settings (default: {DEFAULT_SETTINGS_PATH})")
    common.add_argument("--overlay-settings", default=None)
    common.add_argument("--run-id", default=None)
    common.add_argument("--log-file", default=None)
    common.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARN", "WARNING", "ERROR"])

    parser = argparse.ArgumentParser(prog="geodisk", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    csv_parser = commands.add_parser("csv", parents=[common], help="Calculate geo distance from csv file.")
    csv_parser.add_argument("path", nargs="?", default=None, help="csv file to be used for calculation")
    csv_parser.add_argument("--file", default=None, help="csv file to be used for calculation (overrides PATH)")
    csv_parser.add_argument("--report-json", default=None)

    db_parser = commands.add_parser("db", parents=[common], help="Calculate geo distance from a db.")
    db_parser.add_argument(
        "--config",
        default=DEFAULT_DATABASE_CONFIG_PATH,
        help="yaml file that contains database configuration values",
    )
    return parser.parse_args(argv)


def _load_settings(args: argparse.Namespace) -> Settings:
    overlay_path = Path(args.overlay_settings) if args.overlay_settings else None
    if overlay_path is not None and not overlay_path.exists():
        raise ConfigError(f"Missing config file: {overlay_path}")
    if args.settings is None:
        return load_settings(Path(DEFAULT_SETTINGS_PATH), overlay_path=overlay_path)
    return load_settings(Path(args.settings), overlay_path=overlay_path, required=True)


def _fail(logger: logging.Logger, run_id: str, command: str, exc: BaseException, error_code: str) -> None:
    log_event(
        logger,
        str(exc),
        level=logging.ERROR,
        run_id=run_id,
        command=command,
        event="COMMAND_FAIL",
        status="error",
        error_code=error_code,
    )
    print(f"error: {exc}", file=sys.stderr)


def run_csv(args: argparse.Namespace, settings: Settings, logger: logging.Logger, run_id: str) -> int:
    csv_file = args.file or args.path
    if not csv_file:
        print("error: require csv file path, see geodisk csv --help", file=sys.stderr)
        return EXIT_HARD_FAIL

    source = CsvRecordSource(Path(os.path.normpath(csv_file)), logger=logger)
    try:
        records = source.load(settings.reference)
    except (OSError, UnicodeDecodeError) as exc:
        _fail(logger, run_id, "csv", exc, "IO_ERROR")
        return EXIT_HARD_FAIL
    except GeoDiskError as exc:
        _fail(logger, run_id, "csv", exc, exc.error_code)
        return EXIT_HARD_FAIL

    ranked = rank(records, limit=settings.rank_limit)
    log_event(logger, "records ranked", run_id=run_id, command="csv", event="RANK_END", status="ok", rows_in=ranked.total)

    sys.stdout.write(render_report(ranked, settings.reference.name, limit=settings.rank_limit))
    if args.report_json:
        try:
            write_run_summary(Path(args.report_json), run_id=run_id, reference=settings.reference, ranked=ranked)
        except OSError as exc:
            _fail(logger, run_id, "csv", exc, "IO_ERROR")
            return EXIT_HARD_FAIL
    return EXIT_SUCCESS


def run_db(args: argparse.Namespace, settings: Settings, logger: logging.Logger, run_id: str) -> int:
    config_path = Path(args.config)
    config = load_database_config(config_path) if config_path.exists() else None

    source = DatabaseRecordSource(config)
    try:
        source.load(settings.reference)
    except SourceUnavailableError as exc:
        log_event(
            logger,
            str(exc),
            level=logging.WARNING,
            run_id=run_id,
            command="db",
            event="COMMAND_END",
            status="skipped",
            error_code=exc.error_code,
        )
        print(str(exc), file=sys.stderr)
    return EXIT_SUCCESS


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    logger = build_logger(
        run_id,
        level=args.log_level,
        log_path=Path(args.log_file) if args.log_file else None,
    )
    log_event(logger, "command start", run_id=run_id, command=args.command, event="COMMAND_START", status="ok")

    try:
        settings = _load_settings(args)
        if args.command == "db":
            return run_db(args, settings, logger, run_id)
        exit_code = run_csv(args, settings, logger, run_id)
    except ConfigError as exc:
        _fail(logger, run_id, args.command, exc, exc.error_code)
        return EXIT_CONFIG_FAIL

    if exit_code == EXIT_SUCCESS:
        log_event(logger, "command end", run_id=run_id, command=args.command, event="COMMAND_END", status="ok")
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    return run_command(args)


if __name__ == "__main__":
    raise SystemExit(main())
