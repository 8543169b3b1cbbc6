from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MasteringInfo:
    channels: int | None = None
    sample_rate: Decimal | None = None
    length: Decimal | None = None
    noise_floor: tuple[Decimal, Decimal] | None = None
    true_peak: Decimal | None = None
    max_short_term_lufs: Decimal | None = None
    loudness_range: Decimal | None = None
    ilufs: Decimal | None = None
    bit_depth: int | None = None
    sound_check_normalization_gain: Decimal | None = None
    max_momentary_lufs: Decimal | None = None
    crest_factor: Decimal | None = None


@dataclass(frozen=True)
class InputInfo:
    path: str
    fs: float
    channels: int
    frames: int
    duration: float
    format: str
    subtype: str


@dataclass(frozen=True)
class ToolConfig:
    afconvert: str = "afconvert"
    afinfo: str = "afinfo"
    afconvert_flags: tuple[str, ...] = (
        "-f", "caff",
        "-d", "0",
        "--soundcheck-generate",
        "--anchor-generate",
    )
    timeout: float | None = None
