"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from geodisk.common.constants import DATABASE_DRIVERS
from geodisk.common.errors import ConfigError


def _assert_mapping(obj, ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    _assert_mapping(obj, ctx)
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_number_in_range(value, minimum: float, maximum: float, ctx: str) -> None:
    # bool is an int subclass; a YAML "yes" must not pass as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{ctx} must be a number")
    if not minimum <= value <= maximum:
        raise ConfigError(f"{ctx} must be between {minimum} and {maximum}")


def validate_settings_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, {"reference"}, "settings")
    _assert_no_unknown_keys(cfg, {"reference", "ranking"}, "settings", allow_unknown)

    reference = cfg["reference"]
    _assert_required_keys(reference, {"name", "lat", "lng"}, "reference")
    _assert_no_unknown_keys(reference, {"name", "lat", "lng"}, "reference", allow_unknown)
    if not isinstance(reference["name"], str) or not reference["name"].strip():
        raise ConfigError("reference.name must be a non-empty string")
    _assert_number_in_range(reference["lat"], -90, 90, "reference.lat")
    _assert_number_in_range(reference["lng"], -180, 180, "reference.lng")

    ranking = cfg.get("ranking", {})
    _assert_mapping(ranking, "ranking")
    _assert_no_unknown_keys(ranking, {"limit"}, "ranking", allow_unknown)
    if "limit" in ranking:
        limit = ranking["limit"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ConfigError("ranking.limit must be a positive integer")

    return cfg


def validate_database_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, {"database"}, "database config")
    _assert_no_unknown_keys(cfg, {"database"}, "database config", allow_unknown)

    database = cfg["database"]
    _assert_required_keys(database, {"driver", "dsn"}, "database")
    _assert_no_unknown_keys(database, {"driver", "dsn", "collection", "table"}, "database", allow_unknown)
    if database["driver"] not in DATABASE_DRIVERS:
        raise ConfigError(f"database.driver must be one of: {', '.join(DATABASE_DRIVERS)}")
    if not isinstance(database["dsn"], str) or not database["dsn"]:
        raise ConfigError("database.dsn must be a non-empty string")

    return cfg
