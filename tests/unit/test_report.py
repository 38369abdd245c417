import math
from pathlib import Path

import pytest

from geodisk.common.fs import read_json
from geodisk.common.models import DEFAULT_REFERENCE, GeoRecord, RankedRecords
from geodisk.pipeline.report import format_record, render_report, write_run_summary


def _record(record_id: str, distance: float) -> GeoRecord:
    return GeoRecord(id=record_id, latitude=math.pi / 4, longitude=-math.pi / 2, distance=distance)


def test_format_record_uses_six_decimals():
    assert format_record(_record("382582", 1758.0806131)) == "LocationID: 382582 (1758.080613 kilometers)"


def test_render_report_layout():
    near = _record("1", 0.1)
    far = _record("2", 2.5)
    ranked = RankedRecords(closest=[near, far], farthest=[near, far], total=2)

    text = render_report(ranked, "Housing Anywhere")

    assert text == (
        "Top 5 Locations closest to Housing Anywhere:\n"
        "\tLocationID: 1 (0.100000 kilometers)\n"
        "\tLocationID: 2 (2.500000 kilometers)\n"
        "\n"
        "Top 5 Locations farthest to Housing Anywhere:\n"
        "\tLocationID: 1 (0.100000 kilometers)\n"
        "\tLocationID: 2 (2.500000 kilometers)\n"
        "\n"
    )


def test_render_report_with_empty_result():
    ranked = RankedRecords(closest=[], farthest=[], total=0)
    text = render_report(ranked, "HQ", limit=3)
    assert text.splitlines() == ["Top 3 Locations closest to HQ:", "", "Top 3 Locations farthest to HQ:", ""]


def test_write_run_summary(tmp_path: Path):
    record = _record("a", 12.5)
    ranked = RankedRecords(closest=[record], farthest=[record], total=1)

    path = write_run_summary(tmp_path / "out" / "summary.json", "run-test", DEFAULT_REFERENCE, ranked)

    payload = read_json(path)
    assert payload["run_id"] == "run-test"
    assert payload["reference"] == {"name": "Housing Anywhere", "lat": 51.925146, "lng": 4.478617}
    assert payload["total"] == 1
    assert payload["closest"][0]["id"] == "a"
    assert payload["closest"][0]["lat"] == pytest.approx(45.0)
    assert payload["farthest"][0]["lng"] == pytest.approx(-90.0)
    assert payload["farthest"][0]["distance_km"] == 12.5
