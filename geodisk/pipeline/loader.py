"""CSV ingestion: header/row validation and per-record distance annotation."""

from __future__ import annotations

import csv
import logging
import math
import os
import time
from pathlib import Path
from typing import Iterator, TextIO, Union

from geodisk.common.constants import CSV_HEADER
from geodisk.common.errors import (
    EmptyInputError,
    InvalidFormatError,
    InvalidHeaderError,
    LoadError,
    NumericParseError,
)
from geodisk.common.logging import log_event
from geodisk.common.models import GeoRecord
from geodisk.pipeline.distance import great_circle_distance, to_radians

Source = Union[str, os.PathLike, TextIO]


def _rows(reader, records: list[GeoRecord]) -> Iterator[list[str]]:
    # blank lines are skipped
    try:
        for row in reader:
            if row:
                yield row
    except csv.Error as exc:
        raise InvalidFormatError(
            f"line {reader.line_num}: malformed csv data: {exc}",
            records=records,
            line_number=reader.line_num,
        ) from exc


def _parse_degrees(value: str, column: str, records: list[GeoRecord], line_number: int) -> float:
    message = f"line {line_number}: {column} value {value!r} is not a valid number"
    # float() tolerates padding and digit separators; coordinates must be plain finite numbers
    if value != value.strip() or "_" in value:
        raise NumericParseError(message, records=records, line_number=line_number)
    try:
        parsed = float(value)
    except ValueError as exc:
        raise NumericParseError(message, records=records, line_number=line_number) from exc
    if not math.isfinite(parsed):
        raise NumericParseError(message, records=records, line_number=line_number)
    return parsed


def _load_records(stream: TextIO, target_lat: float, target_long: float) -> list[GeoRecord]:
    reader = csv.reader(stream, strict=True)
    records: list[GeoRecord] = []
    rows = _rows(reader, records)

    header = next(rows, None)
    if header is None:
        raise EmptyInputError("csv has no header row")
    if len(header) != len(CSV_HEADER):
        raise InvalidFormatError(
            f"csv data has invalid format, expects {len(CSV_HEADER)} fields per line",
            line_number=reader.line_num,
        )
    if tuple(header) != CSV_HEADER:
        raise InvalidHeaderError(
            f"csv has invalid geo header {header!r}, expects {list(CSV_HEADER)!r}",
            line_number=reader.line_num,
        )

    for line in rows:
        line_number = reader.line_num
        if len(line) != len(CSV_HEADER):
            raise InvalidFormatError(
                f"line {line_number}: csv data has invalid format, expects {len(CSV_HEADER)} fields per line",
                records=records,
                line_number=line_number,
            )

        lat = to_radians(_parse_degrees(line[1], "lat", records, line_number))
        long = to_radians(_parse_degrees(line[2], "lng", records, line_number))
        records.append(
            GeoRecord(
                id=line[0],
                latitude=lat,
                longitude=long,
                distance=great_circle_distance(lat, long, target_lat, target_long),
            )
        )

    return records


def distance_with_csv_reader(
    stream: TextIO,
    target_lat: float,
    target_long: float,
    *,
    logger: logging.Logger | None = None,
    source_name: str = "<stream>",
) -> list[GeoRecord]:
    """Load records from an open CSV stream and annotate each with its distance.

    ``target_lat`` and ``target_long`` must be in radians. The stream is not
    closed. On a malformed row the raised ``LoadError`` carries the records
    parsed before it in ``records``.
    """
    started = time.monotonic()
    try:
        records = _load_records(stream, target_lat, target_long)
    except LoadError as exc:
        if logger is not None:
            log_event(
                logger,
                str(exc),
                level=logging.ERROR,
                source=source_name,
                event="LOAD_FAIL",
                status="error",
                rows_out=len(exc.records),
                error_code=exc.error_code,
            )
        raise

    if logger is not None:
        log_event(
            logger,
            "records loaded",
            source=source_name,
            event="LOAD_END",
            status="ok",
            duration_ms=round((time.monotonic() - started) * 1000, 3),
            rows_out=len(records),
        )
    return records


def distance_with_csv_file(
    path: str | os.PathLike[str],
    target_lat: float,
    target_long: float,
    *,
    logger: logging.Logger | None = None,
) -> list[GeoRecord]:
    path = Path(path)
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        return distance_with_csv_reader(f, target_lat, target_long, logger=logger, source_name=str(path))


def compute_distances(
    source: Source,
    target_lat: float,
    target_long: float,
    *,
    logger: logging.Logger | None = None,
) -> list[GeoRecord]:
    """Load records from a path or an already-open stream."""
    if isinstance(source, (str, os.PathLike)):
        return distance_with_csv_file(source, target_lat, target_long, logger=logger)
    return distance_with_csv_reader(source, target_lat, target_long, logger=logger)
