from __future__ import annotations

import json
from dataclasses import replace
from decimal import Decimal

import pytest

from masteringinfo.errors import MissingFieldError
from masteringinfo.metrics.derived import add_derived_metrics
from masteringinfo.parsing.afinfo import parse_report
from masteringinfo.reporting.json_report import build_report_dict
from masteringinfo.reporting.summary import RIGHT_COLUMN, render_summary
from tests.conftest import REPORT_TEXT, ROOT, SUMMARY_TEXT


def _info():
    return add_derived_metrics(parse_report(REPORT_TEXT))


def _readme_example() -> str:
    text = (ROOT / "README.md").read_text(encoding="utf-8")
    block = text.split("Report:\n\n```\n", 1)[1]
    return block.split("```", 1)[0]


def test_render_summary_matches_expected_text():
    assert render_summary(_info(), "example.wav") == SUMMARY_TEXT


def test_render_summary_matches_readme_example():
    assert render_summary(_info(), "example.wav") == _readme_example()


def test_title_rule_matches_title_length():
    lines = render_summary(_info(), "a much longer file name.wav").splitlines()
    assert lines[0] == "Sound Check Info for a much longer file name.wav"
    assert lines[1] == "=" * len(lines[0])
    assert lines[2] == ""


def test_noise_floor_right_value_at_fixed_column():
    info = replace(_info(), noise_floor=(Decimal("-9.5"), Decimal("-129.031")))
    lines = render_summary(info, "x.wav").splitlines()
    noise = lines[-1]
    assert noise.startswith("Noise Floor:")
    assert noise[RIGHT_COLUMN:] == "-129.03"
    assert noise[:RIGHT_COLUMN].rstrip().endswith("-9.50")
    assert lines[-2][RIGHT_COLUMN:] == "Right"
    assert lines[-3] == ""


def test_render_summary_requires_crest_factor():
    with pytest.raises(MissingFieldError, match="crest_factor"):
        render_summary(parse_report(REPORT_TEXT), "example.wav")


def test_render_summary_requires_noise_floor():
    info = replace(_info(), noise_floor=None)
    with pytest.raises(MissingFieldError, match="noise_floor"):
        render_summary(info, "example.wav")


def test_build_report_dict_is_json_serializable():
    report = build_report_dict(_info(), "example.wav")
    decoded = json.loads(json.dumps(report))
    assert decoded["source"] == "example.wav"
    assert decoded["channels"] == 2
    assert decoded["sample_rate_khz"] == pytest.approx(44.1)
    assert decoded["length"]["hms"] == "00:03:32"
    assert decoded["crest_factor_db"] == pytest.approx(-17.10161)
    assert decoded["noise_floor_db"] == {"left": -121.47, "right": -120.83}
