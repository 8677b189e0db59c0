"""Candidate lookup keys derived from a listing title."""
import re
from typing import List, Set

from product_matcher.services.matching.rules import strip_listing_key, trim_title
from product_matcher.utils.normalization import normalize, normalize_tokens

TITLE_SEPARATORS = re.compile(r"[ ,./+]")

DEFAULT_MAX_WINDOW = 3


def tokenize_title(title: str) -> List[str]:
    """Split a title on spaces, commas, periods, slashes and plus signs."""
    return [token for token in TITLE_SEPARATORS.split(title) if token]


def window_keys(tokens: List[str], size: int) -> List[str]:
    """Normalized concatenations of every run of size contiguous tokens."""
    return [
        normalize_tokens(tokens[start:start + size])
        for start in range(len(tokens) - size + 1)
    ]


def candidate_keys(title: str, max_window: int = DEFAULT_MAX_WINDOW) -> Set[str]:
    """Every key worth probing the product index with for a title.

    Single tokens and runs of up to max_window tokens are normalized into base
    keys, so "PowerShot SX 130 IS" yields both "sx" and "sx130is". Each base
    key may add one variant with a color, country, qualifier or camera-type
    marker removed ("dmcfh20egk" -> "fh20").
    """
    tokens = tokenize_title(trim_title(title))

    base_keys = {normalize(token) for token in tokens}
    for size in range(2, max_window + 1):
        base_keys.update(window_keys(tokens, size))

    variants = set()
    for key in base_keys:
        variant = strip_listing_key(key)
        if variant is not None:
            variants.add(variant)

    keys = base_keys | variants
    keys.discard("")
    return keys
