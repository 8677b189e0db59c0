"""Custom exception hierarchy for loading and writing match records.

Matching itself never raises: a listing without a product is a normal
outcome. Only the record I/O around the matcher can fail.
"""
from typing import Any, Dict, Optional


class ProductMatcherError(Exception):
    """Base exception for all product matcher errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize error with message and optional context."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RecordParseError(ProductMatcherError):
    """Raised when an input line is not valid JSON or fails record validation."""
    pass


class ResultWriteError(ProductMatcherError):
    """Raised when an output file cannot be written."""
    pass


class ConfigurationError(ProductMatcherError):
    """Raised when configuration is invalid."""
    pass
