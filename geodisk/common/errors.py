"""Domain errors and failure typing."""

from __future__ import annotations


class GeoDiskError(Exception):
    """Base class for geodisk failures."""

    error_code = "GEODISK_ERROR"


class ConfigError(GeoDiskError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class LoadError(GeoDiskError):
    """Raised when a record source cannot be fully loaded.

    ``records`` holds whatever was parsed before the failure so callers can
    decide whether a partial result is still useful.
    """

    error_code = "LOAD_ERROR"

    def __init__(self, message: str, records: list | None = None, line_number: int | None = None):
        super().__init__(message)
        self.records = list(records or [])
        self.line_number = line_number


class EmptyInputError(LoadError):
    error_code = "EMPTY_INPUT"


class InvalidFormatError(LoadError):
    """Raised when the header or a data row does not have exactly 3 fields."""

    error_code = "INVALID_FORMAT"


class InvalidHeaderError(LoadError):
    """Raised when the header is not ``id,lat,lng``."""

    error_code = "INVALID_HEADER"


class NumericParseError(LoadError):
    """Raised when a latitude or longitude is not a float."""

    error_code = "NUMERIC_PARSE_ERROR"


class SourceUnavailableError(GeoDiskError):
    """Raised by record sources that are declared but not implemented."""

    error_code = "SOURCE_UNAVAILABLE"
