"""
Pricing calculations and rate management.

Handles cost computations for each supported tokenizer.
"""

from dataclasses import dataclass
from typing import Dict

from token_cost.config.loader import CostRates, load_rate_table

from .registry import TokenizerKind


TOKENS_PER_MILLION = 1_000_000


@dataclass(frozen=True)
class PricingTable:
    """Fixed pricing table for supported tokenizers."""
    prices: Dict[TokenizerKind, CostRates]

    def get_pricing(self, kind: TokenizerKind) -> CostRates:
        """Get pricing for a specific tokenizer.

        Args:
            kind: Tokenizer to look up

        Returns:
            CostRates for the tokenizer

        Raises:
            ValueError: If the tokenizer has no rates
        """
        if kind not in self.prices:
            raise ValueError(f"No rates configured for tokenizer: {kind}")
        return self.prices[kind]


# Loaded once from the bundled rate file; validation guarantees every
# tokenizer has an entry.
PRICING_TABLE = PricingTable(load_rate_table())


def get_rates(kind: TokenizerKind) -> CostRates:
    """Return the published rates for ``kind``."""
    return PRICING_TABLE.get_pricing(kind)


def calculate_cost(token_count: int, rate_per_million: float) -> float:
    """Calculate the dollar cost of ``token_count`` tokens.

    No rounding is applied; formatting is left to the caller.

    Args:
        token_count: Number of tokens
        rate_per_million: Price in dollars per one million tokens

    Returns:
        Cost in dollars
    """
    if token_count < 0:
        raise ValueError("token_count cannot be negative")
    tokens_in_millions = token_count / TOKENS_PER_MILLION
    return tokens_in_millions * rate_per_million
