"""Input audio inspection."""
from __future__ import annotations
from pathlib import Path

import soundfile as sf

from masteringinfo.errors import ChannelCountError
from masteringinfo.types import InputInfo


def probe_input(path: str) -> InputInfo:
    """
    Read the header of the input file with soundfile (libsndfile).

    Raises FileNotFoundError for a missing file, ValueError when libsndfile
    cannot read it and ChannelCountError when it is not stereo.
    """
    if not Path(path).is_file():
        raise FileNotFoundError(path)
    try:
        info = sf.info(path)
    except RuntimeError as exc:
        raise ValueError(f"cannot read audio file {path}: {exc}") from exc
    if info.channels != 2:
        raise ChannelCountError(info.channels)
    return InputInfo(
        path=str(path),
        fs=float(info.samplerate),
        channels=int(info.channels),
        frames=int(info.frames),
        duration=float(info.duration),
        format=str(info.format),
        subtype=str(info.subtype),
    )
