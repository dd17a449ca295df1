"""
Shared fixtures for Token Cost tests.

Tokenizers are replaced by a whitespace splitter so no Hub access is needed.
"""

from types import SimpleNamespace

import pytest


class FakeTokenizer:
    """Tokenizer stand-in producing one token per whitespace-separated word."""

    def __init__(self, fail_with=None):
        self.fail_with = fail_with
        self.calls = []

    def encode(self, text, add_special_tokens=True):
        self.calls.append((text, add_special_tokens))
        if self.fail_with is not None:
            raise self.fail_with
        return SimpleNamespace(ids=list(range(len(text.split()))))


@pytest.fixture
def fake_tokenizer():
    """A working fake tokenizer."""
    return FakeTokenizer()


@pytest.fixture
def fake_loader(fake_tokenizer):
    """Loader returning the fake tokenizer and recording requested ids."""
    requested = []

    def loader(backend_id):
        requested.append(backend_id)
        return fake_tokenizer

    loader.requested = requested
    return loader
