"""
Token counting and cost statistics.

Runs text through each tokenizer backend and prices the result.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Optional, Sequence

from tokenizers import Tokenizer

from .exceptions import EncodingError, TokenizerLoadError
from .pricing import calculate_cost, get_rates
from .registry import DEFAULT_TOKENIZERS, TokenizerKind
from token_cost.config.loader import CostRates

logger = logging.getLogger(__name__)

TokenizerLoader = Callable[[str], Tokenizer]
ProgressCallback = Callable[[TokenizerKind], None]


@dataclass(frozen=True)
class TokenStats:
    """Token count and input cost of one text under one tokenizer."""
    total_tokens: int
    cost_dollars: float
    cost_cached_dollars: float

    def __post_init__(self):
        """Validate stats are non-negative."""
        if self.total_tokens < 0:
            raise ValueError("total_tokens cannot be negative")


@dataclass(frozen=True)
class TokenStatsRow:
    """TokenStats labelled with the tokenizer that produced them."""
    tokenizer: TokenizerKind
    stats: TokenStats


@lru_cache(maxsize=None)
def load_tokenizer(backend_id: str) -> Tokenizer:
    """Load a tokenizer from the Hugging Face Hub.

    Tokenizers are cached per backend id, so kinds sharing a vocabulary
    are downloaded once.
    """
    logger.debug("Loading tokenizer %s", backend_id)
    return Tokenizer.from_pretrained(backend_id)


def count_tokens(tokenizer: Tokenizer, text: str) -> int:
    """Count the tokens of ``text`` without special tokens."""
    encoding = tokenizer.encode(text, add_special_tokens=False)
    return len(encoding.ids)


def compute_stats(token_count: int, rates: CostRates) -> TokenStats:
    """Price a token count at the given rates."""
    return TokenStats(
        total_tokens=token_count,
        cost_dollars=calculate_cost(token_count, rates.input),
        cost_cached_dollars=calculate_cost(token_count, rates.cached_input),
    )


def calc_stats(
    text: str,
    kind: TokenizerKind,
    loader: Optional[TokenizerLoader] = None
) -> TokenStats:
    """Tokenize ``text`` with ``kind`` and compute its cost.

    Args:
        text: Input text
        kind: Tokenizer to use
        loader: Callable returning a tokenizer for a backend id
            (defaults to load_tokenizer)

    Returns:
        TokenStats for the text

    Raises:
        TokenizerLoadError: If the tokenizer cannot be initialized
        EncodingError: If the text cannot be encoded
    """
    loader = loader or load_tokenizer

    # Backends raise plain Exception subclasses, so catch broadly here
    try:
        tokenizer = loader(kind.backend_id)
    except Exception as e:
        raise TokenizerLoadError(f"Failed to initialize tokenizer: {e}", kind) from e

    try:
        token_count = count_tokens(tokenizer, text)
    except Exception as e:
        raise EncodingError(f"Failed to encode text: {e}", kind) from e

    logger.debug("%s produced %d tokens", kind, token_count)
    return compute_stats(token_count, get_rates(kind))


def calc_all(
    text: str,
    kinds: Sequence[TokenizerKind] = DEFAULT_TOKENIZERS,
    loader: Optional[TokenizerLoader] = None,
    on_progress: Optional[ProgressCallback] = None
) -> List[TokenStatsRow]:
    """Compute stats for every tokenizer in ``kinds``.

    Results keep the order of ``kinds``. The first failure aborts the run.
    """
    rows = []
    for kind in kinds:
        stats = calc_stats(text, kind, loader=loader)
        rows.append(TokenStatsRow(tokenizer=kind, stats=stats))
        if on_progress is not None:
            on_progress(kind)
    return rows
