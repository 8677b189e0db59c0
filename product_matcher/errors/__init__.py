"""Error handling module."""
from product_matcher.errors.exceptions import (
    ProductMatcherError,
    RecordParseError,
    ResultWriteError,
    ConfigurationError,
)

__all__ = [
    "ProductMatcherError",
    "RecordParseError",
    "ResultWriteError",
    "ConfigurationError",
]
