"""Heuristic listing-to-product matcher.

Key Components:
    - HeuristicsMatcher: owns the product index and resolves listings
    - select_best_match: picks the most specific of several index hits

A listing is resolved in four steps:
    1. derive candidate keys from its title (see keys.candidate_keys)
    2. look every key up in the product index
    3. drop hits whose manufacturer disagrees with the listing
    4. keep the hit with the longest key
"""
from typing import Iterable, List, Optional, Sequence, Tuple

import structlog

from product_matcher.models.catalog import Listing, Product
from product_matcher.models.matching import MatchReport, MatchResult
from product_matcher.services.matching.indexer import ProductIndex, build_index
from product_matcher.services.matching.keys import DEFAULT_MAX_WINDOW, candidate_keys

logger = structlog.get_logger(__name__)

PossibleMatch = Tuple[str, Product]


def is_false_positive(listing: Listing, product: Product) -> bool:
    """Check whether an index hit belongs to another manufacturer.

    Short keys like "a10" exist for several brands, so a hit only counts when
    the product's manufacturer is either the listing's manufacturer or the
    first word of the listing title.
    """
    return product.normalized_manufacturer not in (
        listing.normalized_manufacturer,
        listing.alternative_manufacturer,
    )


def select_best(possible_matches: Sequence[PossibleMatch]) -> Optional[PossibleMatch]:
    """Pick the hit with the longest key.

    Longer keys are more specific and collide less. Among keys of equal
    length the lexicographically smallest wins, so results do not depend on
    probing order.
    """
    if not possible_matches:
        return None
    return min(possible_matches, key=lambda match: (-len(match[0]), match[0]))


def select_best_match(possible_matches: Sequence[PossibleMatch]) -> Optional[Product]:
    """Product of the best hit, None when there are no hits."""
    best = select_best(possible_matches)
    return None if best is None else best[1]


class HeuristicsMatcher:
    """Matches listings to catalog products through a multi-key index.

    The index is built once in the constructor and only read afterwards, so
    one matcher can serve any number of find_match calls.

    Attributes:
        index: Lookup key -> product mapping for the whole catalog
        max_window: Longest run of title tokens combined into a single key
    """

    def __init__(self, products: Iterable[Product], max_window: int = DEFAULT_MAX_WINDOW):
        self.index: ProductIndex = build_index(products)
        self.max_window = max_window
        self._log = logger.bind(matcher="HeuristicsMatcher")

    def find_all_possible_matches(self, listing: Listing, keys: Iterable[str]) -> List[PossibleMatch]:
        """Look every key up and keep the hits confirmed by manufacturer.

        Args:
            listing: Listing the keys were derived from
            keys: Candidate keys to probe

        Returns:
            (key, product) pairs that survived the false-positive check
        """
        possible_matches: List[PossibleMatch] = []
        for key in sorted(keys):
            product = self.index.get(key)
            if product is None:
                continue
            if is_false_positive(listing, product):
                self._log.debug(
                    "false_positive_rejected",
                    key=key,
                    title=listing.title[:80],
                    listing_manufacturer=listing.normalized_manufacturer,
                    product_manufacturer=product.normalized_manufacturer,
                )
                continue
            possible_matches.append((key, product))
        return possible_matches

    def resolve(self, listing: Listing) -> MatchResult:
        """Match a listing and report which key decided it."""
        keys = candidate_keys(listing.title, max_window=self.max_window)
        possible_matches = self.find_all_possible_matches(listing, keys)
        best = select_best(possible_matches)

        if best is None:
            self._log.debug("no_match", title=listing.title[:80], keys_count=len(keys))
            return MatchResult(listing=listing)

        key, product = best
        self._log.debug(
            "match_completed",
            title=listing.title[:80],
            product_name=product.product_name,
            matched_key=key,
            candidates_count=len(possible_matches),
        )
        return MatchResult(listing=listing, product=product, matched_key=key)

    def find_match(self, listing: Listing) -> Optional[Product]:
        """Best catalog product for a listing, or None."""
        return self.resolve(listing).product

    def match_all(self, listings: Iterable[Listing]) -> MatchReport:
        """Match a batch of listings into matched and unmatched partitions."""
        report = MatchReport()
        for listing in listings:
            report.add(self.resolve(listing))

        self._log.info(
            "batch_matched",
            matched=len(report.matched),
            unmatched=len(report.unmatched),
            total=report.total,
        )
        return report
