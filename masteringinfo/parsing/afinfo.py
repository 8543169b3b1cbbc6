"""Parser for the text report printed by ``afinfo``."""
from __future__ import annotations
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from masteringinfo.errors import ChannelCountError, UndeterminedChannelsError
from masteringinfo.types import MasteringInfo

NUM = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
INT = r"\d+"


@dataclass(frozen=True)
class ExtractionRule:
    """One labelled line of the report and the fields it fills."""
    name: str
    pattern: re.Pattern
    extract: Callable[[re.Match], dict]

    def match(self, line: str) -> re.Match | None:
        return self.pattern.match(line)


def _rule(name: str, label: str, value: str, extract: Callable[[re.Match], dict]) -> ExtractionRule:
    pattern = re.compile(rf"^\s*{label}\s*:\s*{value}\s*$", re.IGNORECASE)
    return ExtractionRule(name=name, pattern=pattern, extract=extract)


def _number(field: str) -> Callable[[re.Match], dict]:
    return lambda m: {field: Decimal(m.group(1))}


def _integer(field: str) -> Callable[[re.Match], dict]:
    return lambda m: {field: int(m.group(1))}


def _channels_and_rate(m: re.Match) -> dict:
    return {
        "channels": int(m.group(1)),
        "sample_rate": Decimal(m.group(2)) / 1000,
    }


def _number_pair(field: str) -> Callable[[re.Match], dict]:
    def extract(m: re.Match) -> dict:
        left, right = m.group(1).split()
        return {field: (Decimal(left), Decimal(right))}
    return extract


RULES: tuple[ExtractionRule, ...] = (
    _rule(
        "data_format", r"data\s+format",
        rf"({INT})\s+ch\s*,\s*({NUM})\s+Hz\b.*",
        _channels_and_rate,
    ),
    _rule(
        "estimated_duration", r"estimated\s+duration",
        rf"({NUM})\s*sec",
        _number("length"),
    ),
    _rule(
        "noise_floor", r"aa\s+noise\s+floor\s+master",
        rf'"(\s*{NUM}\s+{NUM}\s*)"',
        _number_pair("noise_floor"),
    ),
    _rule(
        "true_peak", r"aa\s+itu\s+true\s+peak",
        rf"({NUM})",
        _number("true_peak"),
    ),
    _rule(
        "max_short_term", r"aa\s+ebu\s+max\s+short-term\s+loudness",
        rf"({NUM})",
        _number("max_short_term_lufs"),
    ),
    _rule(
        "loudness_range", r"aa\s+ebu\s+loudness\s+range",
        rf"({NUM})",
        _number("loudness_range"),
    ),
    _rule(
        "integrated_loudness", r"aa\s+itu\s+loudness",
        rf"({NUM})",
        _number("ilufs"),
    ),
    _rule(
        "bit_depth", r"bit\s+depth\s+pcm\s+master",
        rf"({INT})",
        _integer("bit_depth"),
    ),
    _rule(
        "sound_check_gain", r"sound\s+check\s+volume\s+normalization\s+gain",
        rf"({NUM})\s*dB",
        _number("sound_check_normalization_gain"),
    ),
    _rule(
        "max_momentary", r"aa\s+ebu\s+max\s+momentary\s+loudness",
        rf"({NUM})",
        _number("max_momentary_lufs"),
    ),
)


def matching_rules(line: str) -> list[ExtractionRule]:
    """Return every rule that accepts ``line``."""
    return [rule for rule in RULES if rule.match(line)]


def parse_report(text: str) -> MasteringInfo:
    """
    Extract mastering fields from an afinfo report.

    Lines that match no rule are skipped. A field seen more than once
    keeps its last value. Parsing never fails; fields that never appear
    stay None.
    """
    fields: dict = {}
    for line in text.splitlines():
        for rule in RULES:
            m = rule.match(line)
            if m:
                fields.update(rule.extract(m))
                break
    return MasteringInfo(**fields)


def verify_two_channels(report: str | MasteringInfo) -> None:
    """Raise a ChannelError unless the report describes stereo audio."""
    info = parse_report(report) if isinstance(report, str) else report
    if info.channels is None:
        raise UndeterminedChannelsError()
    if info.channels != 2:
        raise ChannelCountError(info.channels)
