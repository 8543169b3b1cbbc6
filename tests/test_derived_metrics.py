from __future__ import annotations

from decimal import Decimal

import pytest

from masteringinfo.errors import MissingFieldError
from masteringinfo.metrics.derived import add_derived_metrics, require_fields
from masteringinfo.parsing.afinfo import parse_report
from masteringinfo.types import MasteringInfo
from tests.conftest import REPORT_TEXT


def test_crest_factor_from_report_lines():
    info = parse_report(
        "aa itu loudness                  : -14.3081\n"
        "aa itu true peak               : -0.161641\n"
    )
    out = add_derived_metrics(info)
    assert out.crest_factor == Decimal("-14.146459")
    assert float(out.crest_factor) == pytest.approx(-14.146459)
    assert info.crest_factor is None


def test_crest_factor_full_report():
    out = add_derived_metrics(parse_report(REPORT_TEXT))
    assert out.crest_factor == Decimal("-17.10161")
    assert out.ilufs == Decimal("-21.0245")


@pytest.mark.parametrize(
    "info, missing",
    [
        (MasteringInfo(true_peak=Decimal("-1")), "ilufs"),
        (MasteringInfo(ilufs=Decimal("-14")), "true_peak"),
        (MasteringInfo(), "ilufs"),
    ],
)
def test_add_derived_metrics_requires_inputs(info, missing):
    with pytest.raises(MissingFieldError) as excinfo:
        add_derived_metrics(info)
    assert excinfo.value.field == missing


def test_require_fields_names_first_missing():
    info = parse_report(REPORT_TEXT)
    require_fields(info)
    with pytest.raises(MissingFieldError, match="bit_depth"):
        require_fields(MasteringInfo(length=Decimal("1")))
