"""
Error types raised while estimating token costs.

Every error is fatal to a run; the CLI reports the message and exits non-zero.
"""

from pathlib import Path
from typing import Optional

from .registry import TokenizerKind


class TokenCostError(Exception):
    """Base class for all token cost estimation failures."""


class InputReadError(TokenCostError):
    """Raised when the input text cannot be read from a file or stdin."""
    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class TokenizationError(TokenCostError):
    """Raised when a tokenizer backend fails to produce a token count."""
    def __init__(self, message: str, kind: TokenizerKind):
        super().__init__(message)
        self.kind = kind


class TokenizerLoadError(TokenizationError):
    """The tokenizer backend could not be loaded or initialized."""


class EncodingError(TokenizationError):
    """The tokenizer backend rejected or failed on the input text."""
