"""
Input text loading from a file or standard input.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .exceptions import InputReadError

logger = logging.getLogger(__name__)


def read_input(path: Optional[Path] = None, stream: Optional[TextIO] = None) -> str:
    """Read the text to tokenize.

    Line endings are kept as given.

    Args:
        path: File to read as UTF-8. When None, ``stream`` is read instead.
        stream: Text stream read to end-of-stream. When None, the raw
            bytes of sys.stdin are decoded as UTF-8.

    Returns:
        The full input text

    Raises:
        InputReadError: If the file or stream cannot be read or decoded
    """
    if path is None:
        try:
            if stream is not None:
                text = stream.read()
            else:
                # Bypass newline translation and the locale encoding
                text = sys.stdin.buffer.read().decode('utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Failed to read standard input: {e}") from e
        logger.debug("Read %d characters from standard input", len(text))
        return text

    try:
        text = Path(path).read_bytes().decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"Failed to read {path}: {e}", path=Path(path)) from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text
