"""Application constants."""

import math

EARTH_RADIUS_KM = 6371
MAX_DISTANCE_KM = math.pi * EARTH_RADIUS_KM

DEFAULT_REFERENCE_NAME = "Housing Anywhere"
DEFAULT_REFERENCE_LAT = 51.925146
DEFAULT_REFERENCE_LNG = 4.478617

CSV_HEADER = ("id", "lat", "lng")
RANK_LIMIT = 5

DEFAULT_SETTINGS_PATH = "config/geodisk.yml"
DEFAULT_DATABASE_CONFIG_PATH = "config.yaml"
DATABASE_DRIVERS = ("mongo", "sql")

EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
EXIT_CONFIG_FAIL = 30

JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "command",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
