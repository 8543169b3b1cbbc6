"""Wrappers around the afconvert and afinfo command line tools."""
from __future__ import annotations
import os
import shlex
import shutil
import signal
import subprocess
import sys
import tempfile
from pathlib import Path

from masteringinfo.errors import RootUserError, ToolError, ToolNotFoundError
from masteringinfo.types import ToolConfig


class ConversionWorkspace:
    """Temporary directory holding the intermediate CAF file.

    Use as a context manager; the directory and everything in it is
    removed on exit, including when an exception is propagating.
    """

    def __init__(self, source_path: str, *, prefix: str = "masteringinfo-") -> None:
        self.source_path = source_path
        self.prefix = prefix
        self._tmp: tempfile.TemporaryDirectory | None = None

    @property
    def directory(self) -> Path:
        if self._tmp is None:
            raise RuntimeError("workspace is not open")
        return Path(self._tmp.name)

    @property
    def caf_path(self) -> Path:
        return self.directory / (Path(self.source_path).stem + ".caf")

    def __enter__(self) -> "ConversionWorkspace":
        self._tmp = tempfile.TemporaryDirectory(prefix=self.prefix)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._tmp is not None:
            self._tmp.cleanup()
            self._tmp = None


def ensure_not_root() -> None:
    """Refuse to run with an effective uid of 0."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is not None and geteuid() == 0:
        raise RootUserError("refusing to run as root")


def find_tool(name: str) -> str:
    """Resolve a tool name or path to an executable."""
    path = shutil.which(name)
    if not path:
        raise ToolNotFoundError(name)
    return path


def _describe_returncode(returncode: int) -> str:
    if returncode < 0:
        try:
            sig = signal.Signals(-returncode).name
        except ValueError:
            sig = str(-returncode)
        return f"killed by signal {sig}"
    return f"exited with status {returncode}"


def run_tool(
    cmd: list[str],
    *,
    timeout: float | None = None,
    verbose: bool = False
) -> subprocess.CompletedProcess:
    """Run an external tool, raising ToolError on any failure."""
    tool = Path(cmd[0]).name
    if verbose:
        print("+ " + shlex.join(cmd), file=sys.stderr)
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout
        )
    except OSError as exc:
        raise ToolError(tool, f"could not start: {exc}") from exc
    except subprocess.TimeoutExpired as exc:
        raise ToolError(tool, f"timed out after {timeout}s") from exc
    if proc.returncode != 0:
        detail = (proc.stderr or "").strip()
        msg = _describe_returncode(proc.returncode)
        raise ToolError(tool, f"{msg}: {detail}" if detail else msg)
    return proc


def convert_to_caf(
    source: str,
    dest: Path,
    config: ToolConfig,
    *,
    verbose: bool = False
) -> Path:
    """Transcode ``source`` to CAF with Sound Check analysis embedded."""
    afconvert = find_tool(config.afconvert)
    cmd = [afconvert, *config.afconvert_flags, str(source), str(dest)]
    run_tool(cmd, timeout=config.timeout, verbose=verbose)
    if not dest.exists():
        raise ToolError(Path(afconvert).name, f"did not write {dest}")
    return dest


def read_analysis(caf_path: Path, config: ToolConfig, *, verbose: bool = False) -> str:
    """Return afinfo's combined stdout and stderr for ``caf_path``."""
    afinfo = find_tool(config.afinfo)
    proc = run_tool([afinfo, str(caf_path)], timeout=config.timeout, verbose=verbose)
    return (proc.stdout or "") + (proc.stderr or "")
