"""Exception types raised by swapui."""
from __future__ import annotations


class SwapUIError(Exception):
    """Base class for swapui errors."""


class ConfigError(SwapUIError, ValueError):
    """Raised when a configuration file holds an invalid value."""


class IdGenerationError(SwapUIError, RuntimeError):
    """Raised when an identifier cannot meet the unpredictability floor."""


class InputKindError(SwapUIError, TypeError):
    """Raised when an input builder is configured for a kind it cannot render."""


__all__ = [
    "ConfigError",
    "IdGenerationError",
    "InputKindError",
    "SwapUIError",
]
