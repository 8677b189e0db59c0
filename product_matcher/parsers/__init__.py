"""Record loaders."""
from product_matcher.parsers.jsonl_parser import (
    load_records,
    load_products,
    load_listings,
)

__all__ = [
    "load_records",
    "load_products",
    "load_listings",
]
