"""Plain-text summary of a MasteringInfo record."""
from __future__ import annotations

from masteringinfo.metrics.derived import require_fields, RENDERED_FIELDS
from masteringinfo.types import MasteringInfo
from masteringinfo.utils.timefmt import format_duration

LABEL_WIDTH = 24
RIGHT_COLUMN = 40


def _row(label: str, value) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value}"


def render_summary(info: MasteringInfo, source_label: str) -> str:
    """
    Render the human-readable Sound Check report.

    Args:
        info: Parsed record with crest_factor already derived
        source_label: Name shown in the title line (usually the input file)

    Returns:
        Multi-line report text ending in a newline
    """
    require_fields(info, RENDERED_FIELDS + ("crest_factor",))
    title = f"Sound Check Info for {source_label}"
    left, right = info.noise_floor
    noise_left = _row("Noise Floor", f"{left:.2f}")

    lines = [
        title,
        "=" * len(title),
        "",
        _row("Approx Length", format_duration(info.length)),
        _row("Bit Depth", info.bit_depth),
        _row("Sample Rate", f"{info.sample_rate} kbps"),
        _row("Loudness iLUFS", info.ilufs),
        _row("Max Short-term LUFS", info.max_short_term_lufs),
        _row("Loudness Range", info.loudness_range),
        _row("True Peak", info.true_peak),
        _row("Crest Factor", info.crest_factor),
        _row("Max Momentary LUFS", info.max_momentary_lufs),
        _row("Sound Check Norm Gain", f"{info.sound_check_normalization_gain} dB"),
        "",
        f"{'':<{LABEL_WIDTH}}{'Left':<{RIGHT_COLUMN - LABEL_WIDTH}}Right",
        f"{noise_left:<{RIGHT_COLUMN}}{right:.2f}",
    ]
    return "\n".join(lines) + "\n"
