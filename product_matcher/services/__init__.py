"""Business logic services for the listing matcher.

Available Services:
    - matching: Heuristic listing-to-product matching over a multi-key index
"""
from product_matcher.services.matching import (
    HeuristicsMatcher,
    ProductIndex,
    build_index,
    candidate_keys,
)

__all__: list[str] = [
    "HeuristicsMatcher",
    "ProductIndex",
    "build_index",
    "candidate_keys",
]
