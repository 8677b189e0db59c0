"""Configuration management using pydantic-settings."""
import logging
import sys
from functools import lru_cache
from typing import Any, List, Literal

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatcherSettings(BaseSettings):
    """Matching run configuration loaded from environment variables.

    All settings prefixed with MATCH_ (e.g., MATCH_PRODUCTS_PATH=products.txt)
    """

    # Input / Output Files
    products_path: str = Field(
        default="products.txt",
        description="JSON-lines file with one catalog product per line"
    )
    listings_path: str = Field(
        default="listings.txt",
        description="JSON-lines file with one listing per line"
    )
    results_path: str = Field(
        default="results.txt",
        description="Output file for listings grouped by product model"
    )
    unmatched_path: str = Field(
        default="unmatched.txt",
        description="Output file for listings without a product match"
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used for every input and output file"
    )

    # Loader Behaviour
    strict_records: bool = Field(
        default=True,
        description="Raise on the first malformed record instead of skipping it"
    )

    # Key Generation
    max_window_tokens: int = Field(
        default=3,
        ge=1,
        le=5,
        description="Longest run of contiguous title tokens joined into one candidate key"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="console for colored human output, json for machine-readable logs"
    )

    model_config = SettingsConfigDict(
        env_prefix="MATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> MatcherSettings:
    """Get cached settings instance."""
    return MatcherSettings()


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        log_level: Name of the stdlib logging level
        log_format: "json" for JSON lines, anything else for colored console output
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
