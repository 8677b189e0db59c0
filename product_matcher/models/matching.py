"""Models for the outcome of matching listings against the catalog."""
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from product_matcher.models.catalog import Listing, Product


class MatchResult(BaseModel):
    """Outcome of matching one listing.

    Attributes:
        listing: The listing that was matched
        product: Best product for the listing, None when nothing matched
        matched_key: Index key that selected the product
    """

    listing: Listing
    product: Optional[Product] = None
    matched_key: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_matched(self) -> bool:
        return self.product is not None


class ProductListings(BaseModel):
    """One output record: every listing matched to a given product model."""

    product_name: str
    model: str
    listings: List[Listing] = Field(default_factory=list)


class MatchReport(BaseModel):
    """Matched and unmatched partitions of a listing batch, in input order."""

    matched: List[Tuple[Product, Listing]] = Field(default_factory=list)
    unmatched: List[Listing] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.unmatched)

    def add(self, result: MatchResult) -> None:
        """Append a single listing outcome to the right partition."""
        if result.product is None:
            self.unmatched.append(result.listing)
        else:
            self.matched.append((result.product, result.listing))

    def grouped_by_model(self) -> List[ProductListings]:
        """Group matched listings by the raw model of their product.

        Groups appear in order of first match; product_name comes from the
        first product seen for the model.
        """
        groups: Dict[str, ProductListings] = {}
        for product, listing in self.matched:
            group = groups.get(product.model)
            if group is None:
                group = ProductListings(product_name=product.product_name, model=product.model)
                groups[product.model] = group
            group.listings.append(listing)
        return list(groups.values())
