"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from geodisk.common.constants import RANK_LIMIT
from geodisk.common.fs import read_yaml
from geodisk.common.models import DEFAULT_REFERENCE, ReferencePoint
from geodisk.common.schema import validate_database_config, validate_settings_config


@dataclass(frozen=True)
class Settings:
    reference: ReferencePoint
    rank_limit: int = RANK_LIMIT


DEFAULT_SETTINGS = Settings(reference=DEFAULT_REFERENCE)


def _default_settings_config() -> dict:
    return {
        "reference": DEFAULT_SETTINGS.reference.to_dict(),
        "ranking": {"limit": DEFAULT_SETTINGS.rank_limit},
    }


@dataclass(frozen=True)
class DatabaseConfig:
    driver: str
    dsn: str
    collection: str | None = None
    table: str | None = None


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    return _deep_merge(base, overlay)


def load_settings(
    path: Path,
    *,
    allow_unknown: bool = False,
    overlay_path: Path | None = None,
    required: bool = False,
) -> Settings:
    """Load the reference point and ranking settings.

    A missing optional settings file yields the built-in defaults, with the
    overlay (if any) merged on top of them.
    """
    if path.exists() or required:
        raw = _load_yaml_with_overlay(path, overlay_path)
    elif overlay_path is not None and overlay_path.exists():
        raw = _deep_merge(_default_settings_config(), read_yaml(overlay_path))
    else:
        return DEFAULT_SETTINGS

    cfg = validate_settings_config(raw, allow_unknown=allow_unknown)
    reference = cfg["reference"]
    return Settings(
        reference=ReferencePoint(
            name=reference["name"],
            latitude_degrees=float(reference["lat"]),
            longitude_degrees=float(reference["lng"]),
        ),
        rank_limit=cfg.get("ranking", {}).get("limit", RANK_LIMIT),
    )


def load_database_config(path: Path, *, allow_unknown: bool = False) -> DatabaseConfig:
    cfg = validate_database_config(read_yaml(path), allow_unknown=allow_unknown)
    database = cfg["database"]
    return DatabaseConfig(
        driver=database["driver"],
        dsn=database["dsn"],
        collection=database.get("collection"),
        table=database.get("table"),
    )
