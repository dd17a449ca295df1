"""
Registry of supported tokenizers.

Maps each tokenizer to the Hugging Face Hub repository its vocabulary is
loaded from.
"""

from enum import Enum
from typing import Dict, Tuple


class TokenizerKind(Enum):
    """Supported tokenizers, in display order."""
    GPT4O = "GPT 4O"
    GEMINI = "Gemini"
    CLAUDE_3_7 = "Claude 3.7"
    CLAUDE_3_5 = "Claude 3.5"

    def __str__(self) -> str:
        return self.value

    @property
    def backend_id(self) -> str:
        """Hugging Face Hub repository id of the tokenizer."""
        return _BACKEND_IDS[self]


# Gemini has no public tokenizer; Gemma 2 shares its vocabulary family.
# Both Claude versions are estimated with the same open Claude tokenizer.
_BACKEND_IDS: Dict[TokenizerKind, str] = {
    TokenizerKind.GPT4O: "Xenova/gpt-4o",
    TokenizerKind.GEMINI: "Xenova/gemma-2-tokenizer",
    TokenizerKind.CLAUDE_3_7: "Xenova/claude-tokenizer",
    TokenizerKind.CLAUDE_3_5: "Xenova/claude-tokenizer",
}

# Tokenizers run by the CLI. Claude 3.5 is omitted since it matches Claude 3.7.
DEFAULT_TOKENIZERS: Tuple[TokenizerKind, ...] = (
    TokenizerKind.GPT4O,
    TokenizerKind.GEMINI,
    TokenizerKind.CLAUDE_3_7,
)


def backend_id(kind: TokenizerKind) -> str:
    """Return the backend identifier used to load the tokenizer for ``kind``."""
    return kind.backend_id
