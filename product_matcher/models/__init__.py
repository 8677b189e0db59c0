"""Pydantic validation models."""

from product_matcher.models.catalog import (
    Product,
    Listing,
)
from product_matcher.models.matching import (
    MatchResult,
    MatchReport,
    ProductListings,
)

__all__ = [
    # Catalog models
    "Product",
    "Listing",
    # Matching models
    "MatchResult",
    "MatchReport",
    "ProductListings",
]
