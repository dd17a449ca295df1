"""
Core modules for Token Cost.

This package contains the tokenizer registry, pricing table,
token counting, and input reading.
"""
