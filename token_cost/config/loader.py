"""
Rate table loading and validation.

Reads the per-tokenizer price list from YAML.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

import yaml

from token_cost.core.registry import TokenizerKind


DEFAULT_RATES_PATH = Path(__file__).parent / "rates.yaml"

RATE_KEYS = ("input", "cached_input", "output")


@dataclass(frozen=True)
class CostRates:
    """Prices in dollars per one million tokens."""
    input: float
    cached_input: float
    output: float

    def __post_init__(self):
        """Validate rates are non-negative."""
        for name in RATE_KEYS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} rate cannot be negative")


def load_rate_table(
    path: Union[str, Path] = DEFAULT_RATES_PATH
) -> Dict[TokenizerKind, CostRates]:
    """Load and validate the tokenizer rate table from a YAML file.

    Every tokenizer must have an entry so that rate lookups can never
    fail at runtime.

    Args:
        path: Path to YAML rate file

    Returns:
        Mapping from tokenizer to its validated rates

    Raises:
        FileNotFoundError: If rate file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If the rate table is invalid or incomplete
    """
    rates_path = Path(path)
    if not rates_path.exists():
        raise FileNotFoundError(f"Rate file not found: {path}")

    with open(rates_path, 'r', encoding='utf-8') as f:
        try:
            raw_rates = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in rate file {path}: {e}")

    if not raw_rates:
        raise ValueError("Rate file is empty")

    if not isinstance(raw_rates, dict):
        raise ValueError("Rate file must map tokenizer names to rates")

    known_kinds = {kind.name for kind in TokenizerKind}
    unknown_kinds = set(raw_rates.keys()) - known_kinds
    if unknown_kinds:
        raise ValueError(f"Unknown tokenizers in rate file: {unknown_kinds}")

    missing_kinds = known_kinds - set(raw_rates.keys())
    if missing_kinds:
        raise ValueError(f"Missing rates for tokenizers: {missing_kinds}")

    return {
        kind: _parse_rates(raw_rates[kind.name], kind.name)
        for kind in TokenizerKind
    }


def _parse_rates(data: Dict, path: str) -> CostRates:
    """Parse and validate the rates of a single tokenizer.

    Args:
        data: Rate entry data
        path: Path for error messages

    Returns:
        Validated CostRates

    Raises:
        ValueError: If the entry is invalid
    """
    if not isinstance(data, dict):
        raise ValueError(f"Rates for '{path}' must be a dictionary")

    unknown_keys = set(data.keys()) - set(RATE_KEYS)
    if unknown_keys:
        raise ValueError(f"Unknown keys in {path}: {unknown_keys}")

    values = {}
    for key in RATE_KEYS:
        if key not in data:
            raise ValueError(f"Missing required '{key}' in {path}")
        value = data[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'{key}' in {path} must be a number")
        if value < 0:
            raise ValueError(f"'{key}' in {path} must be >= 0")
        values[key] = float(value)

    return CostRates(**values)
