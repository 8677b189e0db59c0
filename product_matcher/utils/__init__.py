"""Shared helpers."""
from product_matcher.utils.normalization import (
    normalize,
    normalize_tokens,
    normalized_manufacturer,
    first_word,
)

__all__ = [
    "normalize",
    "normalize_tokens",
    "normalized_manufacturer",
    "first_word",
]
