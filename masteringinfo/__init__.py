"""
masteringinfo - Sound Check / mastering info report

Converts a stereo WAV to CAF with afconvert, reads the embedded loudness
analysis back with afinfo and prints a summary for mastering engineers.
"""
from masteringinfo.version import __version__
from masteringinfo.types import (
    MasteringInfo,
    InputInfo,
    ToolConfig,
)

__all__ = [
    "__version__",
    "MasteringInfo",
    "InputInfo",
    "ToolConfig",
]
