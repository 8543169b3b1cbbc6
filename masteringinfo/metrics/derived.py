"""Metrics computed from values already present in the analysis report."""
from __future__ import annotations
from dataclasses import replace
from typing import Iterable

from masteringinfo.errors import MissingFieldError
from masteringinfo.types import MasteringInfo

# Fields the summary prints, in the order they are checked.
RENDERED_FIELDS = (
    "length",
    "bit_depth",
    "sample_rate",
    "ilufs",
    "max_short_term_lufs",
    "loudness_range",
    "true_peak",
    "max_momentary_lufs",
    "sound_check_normalization_gain",
    "noise_floor",
)


def require_fields(info: MasteringInfo, fields: Iterable[str] = RENDERED_FIELDS) -> None:
    """Raise MissingFieldError for the first absent field."""
    for name in fields:
        if getattr(info, name) is None:
            raise MissingFieldError(name)


def crest_factor(ilufs, true_peak):
    """Integrated loudness minus true peak."""
    return ilufs - true_peak


def add_derived_metrics(info: MasteringInfo) -> MasteringInfo:
    """Return a copy of ``info`` with crest_factor filled in."""
    require_fields(info, ("ilufs", "true_peak"))
    return replace(info, crest_factor=crest_factor(info.ilufs, info.true_peak))
