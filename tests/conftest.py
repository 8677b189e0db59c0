"""Pytest configuration and fixtures for test suite.

This is the root-level conftest.py that provides:
- Python path setup (so we can import product_matcher without installing)
- Isolation from MATCH_* variables in the developer's environment
- Shared catalog and listing factories
"""
import os
import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Optional

import pytest

# Add project root to Python path so we can import product_matcher
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from product_matcher.config import get_settings  # noqa: E402
from product_matcher.models.catalog import Listing, Product  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop MATCH_* overrides and the settings cache around every test."""
    for name in list(os.environ):
        if name.upper().startswith("MATCH_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_product(
    model: str,
    manufacturer: str = "Canon",
    family: Optional[str] = None,
    product_name: Optional[str] = None,
) -> Product:
    """Build a catalog product with a fixed announce date."""
    if product_name is None:
        parts = [manufacturer] + ([family] if family else []) + [model]
        product_name = "_".join(part.replace(" ", "_") for part in parts)
    return Product(
        model=model,
        manufacturer=manufacturer,
        family=family,
        product_name=product_name,
        announced_date=datetime(2010, 1, 6, 19, 0, tzinfo=timezone.utc),
    )


def make_listing(title: str, manufacturer: str = "Canon", price: str = "99.99", currency: str = "USD") -> Listing:
    """Build a listing."""
    return Listing(title=title, manufacturer=manufacturer, currency=currency, price=Decimal(price))


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def listing_factory():
    return make_listing


@pytest.fixture
def sample_catalog():
    """A handful of real-world camera catalog entries."""
    return [
        make_product("A495", family="PowerShot"),
        make_product("130 IS", family="Digital IXUS", product_name="Canon_IXUS_130_IS"),
        make_product("DSC-W310", manufacturer="Sony", family="Cyber-shot"),
        make_product("ZR100", manufacturer="Casio", family="Exilim", product_name="Casio-EX-ZR100"),
        make_product("DMC-FH20", manufacturer="Panasonic", family="Lumix"),
        make_product("D3100", manufacturer="Nikon"),
        make_product("1000", manufacturer="Samsung", family="Digimax"),
    ]
