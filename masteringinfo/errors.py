"""Exception types raised by the masteringinfo pipeline."""
from __future__ import annotations


class ChannelError(ValueError):
    """Raised when the analysed audio is not two-channel."""


class UndeterminedChannelsError(ChannelError):
    """Raised when no channel count can be found."""

    def __init__(self, message: str = "could not determine channel count") -> None:
        super().__init__(message)


class ChannelCountError(ChannelError):
    """Raised when the channel count is known but is not 2."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"expected 2 channels, found {count}")


class MissingFieldError(ValueError):
    """Raised when a field needed for derivation or rendering is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"analysis report has no value for '{field}'")


class ConfigError(ValueError):
    """Raised for malformed tool configuration."""


class ToolError(RuntimeError):
    """Raised when an external tool fails."""

    def __init__(self, tool: str, message: str) -> None:
        self.tool = tool
        super().__init__(f"{tool}: {message}")


class ToolNotFoundError(ToolError):
    """Raised when an external tool is not on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(tool, "not found")


class RootUserError(RuntimeError):
    """Raised when the tool is run as root."""
