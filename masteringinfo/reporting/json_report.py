from __future__ import annotations

from masteringinfo.metrics.derived import require_fields, RENDERED_FIELDS
from masteringinfo.types import MasteringInfo
from masteringinfo.utils.timefmt import format_duration

SCHEMA_VERSION = "1.0"


def _num(x) -> float | None:
    return None if x is None else float(x)


def build_report_dict(info: MasteringInfo, source_label: str) -> dict:
    """Build a JSON-serializable report dictionary."""
    require_fields(info, RENDERED_FIELDS + ("crest_factor",))
    left, right = info.noise_floor
    return {
        "schema_version": SCHEMA_VERSION,
        "source": source_label,
        "channels": info.channels,
        "sample_rate_khz": _num(info.sample_rate),
        "bit_depth": info.bit_depth,
        "length": {
            "seconds": _num(info.length),
            "hms": format_duration(info.length, compact=True),
        },
        "loudness": {
            "integrated_lufs": _num(info.ilufs),
            "max_short_term_lufs": _num(info.max_short_term_lufs),
            "max_momentary_lufs": _num(info.max_momentary_lufs),
            "loudness_range_lu": _num(info.loudness_range),
        },
        "true_peak_dbtp": _num(info.true_peak),
        "crest_factor_db": _num(info.crest_factor),
        "sound_check_gain_db": _num(info.sound_check_normalization_gain),
        "noise_floor_db": {"left": _num(left), "right": _num(right)},
    }
