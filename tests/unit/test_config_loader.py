from pathlib import Path

import pytest

from geodisk.common.config_loader import DEFAULT_SETTINGS, load_database_config, load_settings
from geodisk.common.errors import ConfigError

CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

SETTINGS_YAML = """reference:
  name: Rotterdam Centraal
  lat: 51.9244
  lng: 4.4690
ranking:
  limit: 3
"""


def test_load_settings_from_repo_config_dir():
    settings = load_settings(CONFIG_DIR / "geodisk.yml")
    assert settings.reference.name == "Housing Anywhere"
    assert settings.reference.latitude_degrees == 51.925146
    assert settings.reference.longitude_degrees == 4.478617
    assert settings.rank_limit == 5


def test_missing_optional_settings_uses_defaults(tmp_path: Path):
    assert load_settings(tmp_path / "absent.yml") is DEFAULT_SETTINGS


def test_missing_required_settings_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="Missing config file"):
        load_settings(tmp_path / "absent.yml", required=True)


def test_load_settings_builds_reference_coordinate(tmp_path: Path):
    path = tmp_path / "geodisk.yml"
    path.write_text(SETTINGS_YAML, encoding="utf-8")

    settings = load_settings(path)

    assert settings.reference.name == "Rotterdam Centraal"
    assert settings.reference.coordinate.latitude == pytest.approx(0.906252, abs=1e-6)
    assert settings.rank_limit == 3


def test_ranking_section_is_optional(tmp_path: Path):
    path = tmp_path / "geodisk.yml"
    path.write_text("reference:\n  name: HQ\n  lat: 0\n  lng: 0\n", encoding="utf-8")
    assert load_settings(path).rank_limit == 5


def test_load_settings_applies_overlay_values(tmp_path: Path):
    base = tmp_path / "geodisk.yml"
    overlay = tmp_path / "overlay.yml"
    base.write_text(SETTINGS_YAML, encoding="utf-8")
    overlay.write_text("reference:\n  name: Overlay HQ\nranking:\n  limit: 7\n", encoding="utf-8")

    settings = load_settings(base, overlay_path=overlay)

    assert settings.reference.name == "Overlay HQ"
    assert settings.reference.latitude_degrees == 51.9244
    assert settings.rank_limit == 7


def test_invalid_yaml_raises_config_error(tmp_path: Path):
    path = tmp_path / "geodisk.yml"
    path.write_text("reference: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(path)


def test_load_database_config(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "database:\n  driver: sql\n  dsn: postgresql://localhost/geo\n  table: locations\n",
        encoding="utf-8",
    )

    cfg = load_database_config(path)

    assert cfg.driver == "sql"
    assert cfg.dsn == "postgresql://localhost/geo"
    assert cfg.table == "locations"
    assert cfg.collection is None


def test_load_database_config_from_example():
    cfg = load_database_config(CONFIG_DIR / "database.example.yml")
    assert cfg.driver == "mongo"
    assert cfg.collection == "locations"


def test_overlay_applies_to_defaults_when_settings_file_is_absent(tmp_path: Path):
    overlay = tmp_path / "overlay.yml"
    overlay.write_text("reference:\n  name: Overlay HQ\nranking:\n  limit: 2\n", encoding="utf-8")

    settings = load_settings(tmp_path / "absent.yml", overlay_path=overlay)

    assert settings.reference.name == "Overlay HQ"
    assert settings.reference.latitude_degrees == DEFAULT_SETTINGS.reference.latitude_degrees
    assert settings.reference.longitude_degrees == DEFAULT_SETTINGS.reference.longitude_degrees
    assert settings.rank_limit == 2


def test_overlay_on_defaults_is_validated(tmp_path: Path):
    overlay = tmp_path / "overlay.yml"
    overlay.write_text("reference:\n  lat: 123\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="reference.lat"):
        load_settings(tmp_path / "absent.yml", overlay_path=overlay)
