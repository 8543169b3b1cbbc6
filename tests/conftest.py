from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


REPORT_TEXT = """\
File:           example.caf
File type ID:   caff
Num Tracks:     1
----
Data format:     2 ch,  44100 Hz, 'lpcm' (0x0000000C) 24-bit little-endian signed integer
                no channel layout.
estimated duration: 212.430000 sec
audio bytes: 56213064
audio packets: 9368844
bit rate: 2116800 bits per second
packet size upper bound: 6
maximum packet size: 6
audio data file offset: 4096
not optimized
sound check:
    approximate duration in seconds : 212.43
    aa ebu loudness range            : 9.8
    aa ebu max momentary loudness    : -12.9814
    aa ebu max short-term loudness   : -15.6478
    aa itu loudness                  : -21.0245
    aa itu true peak                 : -3.92289
    aa noise floor master            : "-121.47 -120.83"
    bit depth pcm master             : 24
    sound check volume normalization gain: -6.43 dB
----
"""

SUMMARY_TEXT = """\
Sound Check Info for example.wav
================================

Approx Length:          00h:03m:32.43s
Bit Depth:              24
Sample Rate:            44.1 kbps
Loudness iLUFS:         -21.0245
Max Short-term LUFS:    -15.6478
Loudness Range:         9.8
True Peak:              -3.92289
Crest Factor:           -17.10161
Max Momentary LUFS:     -12.9814
Sound Check Norm Gain:  -6.43 dB

                        Left            Right
Noise Floor:            -121.47         -120.83
"""


def build_report_text(*, drop: tuple[str, ...] = (), replace: dict | None = None) -> str:
    """Return REPORT_TEXT without lines containing any of ``drop``.

    ``replace`` maps a substring to a full replacement line.
    """
    lines = []
    for line in REPORT_TEXT.splitlines():
        if any(d in line for d in drop):
            continue
        for key, new_line in (replace or {}).items():
            if key in line:
                line = new_line
        lines.append(line)
    return "\n".join(lines) + "\n"


def write_report(tmp_path: Path, text: str = REPORT_TEXT, name: str = "afinfo.txt") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path
