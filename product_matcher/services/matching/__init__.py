"""Heuristic product matching services.

This package matches free-text listings to catalog products by probing a
multi-key product index with keys derived from the listing title.

Key Components:
    - build_index / ProductIndex: lookup key -> product for the whole catalog
    - candidate_keys: keys derived from a listing title
    - HeuristicsMatcher: resolves listings to at most one product each
    - rules: ordered prefix/suffix/title stripping rules kept as data
"""
from product_matcher.services.matching.indexer import (
    ProductIndex,
    build_index,
    indexing_keys,
)
from product_matcher.services.matching.keys import (
    candidate_keys,
    tokenize_title,
)
from product_matcher.services.matching.matcher import (
    HeuristicsMatcher,
    is_false_positive,
    select_best_match,
)
from product_matcher.services.matching.rules import (
    StripRule,
    MODEL_STRIP_RULES,
    LISTING_KEY_RULES,
    TITLE_TRIM_RULES,
    trim_title,
)

__all__ = [
    "ProductIndex",
    "build_index",
    "indexing_keys",
    "candidate_keys",
    "tokenize_title",
    "HeuristicsMatcher",
    "is_false_positive",
    "select_best_match",
    "StripRule",
    "MODEL_STRIP_RULES",
    "LISTING_KEY_RULES",
    "TITLE_TRIM_RULES",
    "trim_title",
]
