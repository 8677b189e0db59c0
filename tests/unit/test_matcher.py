"""Unit tests for HeuristicsMatcher and best-match selection.

Tests cover:
    - is_false_positive: manufacturer and title-first-word confirmation
    - select_best_match: longest key wins, deterministic tie-break
    - HeuristicsMatcher.find_match / resolve on real-world titles
    - match_all partitioning
"""
import pytest

from product_matcher.services.matching import (
    HeuristicsMatcher,
    candidate_keys,
    is_false_positive,
    select_best_match,
)


class TestIsFalsePositive:
    """Tests for the manufacturer cross-check."""

    def test_same_manufacturer(self, product_factory, listing_factory):
        product = product_factory("A495", manufacturer="Canon")
        listing = listing_factory("PowerShot A495", manufacturer="Canon Canada")
        assert not is_false_positive(listing, product)

    def test_manufacturer_from_title(self, product_factory, listing_factory):
        product = product_factory("D3100", manufacturer="Nikon")
        listing = listing_factory("Nikon D3100 Body", manufacturer="eCOST")
        assert not is_false_positive(listing, product)

    def test_different_manufacturer(self, product_factory, listing_factory):
        product = product_factory("A10", manufacturer="Nikon")
        listing = listing_factory("Canon A10 lens cap", manufacturer="Canon")
        assert is_false_positive(listing, product)


class TestSelectBestMatch:
    """Tests for select_best_match."""

    def test_no_matches(self):
        assert select_best_match([]) is None

    def test_single_match(self, product_factory):
        product = product_factory("A495")
        assert select_best_match([("a495", product)]) is product

    def test_longest_key_wins(self, product_factory):
        """Of key lengths {3, 5, 5, 8} the 8-character key is chosen."""
        short = product_factory("ABC")
        mid_a = product_factory("ABCDE")
        mid_b = product_factory("VWXYZ")
        longest = product_factory("ABCDEFGH")

        matches = [("abc", short), ("abcde", mid_a), ("vwxyz", mid_b), ("abcdefgh", longest)]

        assert select_best_match(matches) is longest
        assert select_best_match(list(reversed(matches))) is longest

    def test_tie_goes_to_smallest_key(self, product_factory):
        first = product_factory("ZS7")
        second = product_factory("ZS5")

        assert select_best_match([("zs7", first), ("zs5", second)]) is second
        assert select_best_match([("zs5", second), ("zs7", first)]) is second


class TestHeuristicsMatcher:
    """Tests for HeuristicsMatcher."""

    @pytest.fixture
    def matcher(self, sample_catalog):
        return HeuristicsMatcher(sample_catalog)

    def test_plain_model(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Canon PowerShot A495 10.1 MP Digital Camera", manufacturer="Canon")
        assert matcher.find_match(listing) is sample_catalog[0]

    def test_plain_model_without_family(self, product_factory, listing_factory):
        product = product_factory("A495", manufacturer="Canon", family=None)
        matcher = HeuristicsMatcher([product])
        listing = listing_factory("Canon PowerShot A495 10.1 MP Digital Camera", manufacturer="Canon")

        result = matcher.resolve(listing)

        assert result.product is product
        assert result.matched_key == "a495"

    def test_compound_family(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Canon Digital IXUS 130 IS Silver", manufacturer="Canon")

        result = matcher.resolve(listing)

        assert result.product is sample_catalog[1]
        assert "ixus130is" in candidate_keys(listing.title)
        assert matcher.index["ixus130is"] is sample_catalog[1]
        # the stripped family key outranks the shorter suffixed one
        assert result.matched_key == "digitalixus130"

    def test_longest_key_is_reported(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Sony Cyber-shot DSC-W310 12.1MP Camera", manufacturer="Sony")

        result = matcher.resolve(listing)

        assert result.product is sample_catalog[2]
        assert result.matched_key == "cybershotdscw310"

    def test_product_name_key(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Casio Exilim EX-ZR100 Black", manufacturer="Casio")
        assert matcher.find_match(listing) is sample_catalog[3]

    def test_country_and_color_variant(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Panasonic Lumix DMC-FH20EG-K", manufacturer="Panasonic")
        assert matcher.find_match(listing) is sample_catalog[4]

    def test_accessory_tail_is_ignored(self, matcher, listing_factory):
        listing = listing_factory("Panasonic Lumix DMW-BCG10 for Lumix DMC-FH20", manufacturer="Panasonic")
        assert matcher.find_match(listing) is None

    def test_manufacturer_guessed_from_title(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Nikon D3100 14.2MP Digital SLR", manufacturer="Camera World")
        assert matcher.find_match(listing) is sample_catalog[5]

    def test_other_manufacturer_is_rejected(self, matcher, listing_factory):
        """A Nikon key in a Canon listing is a false positive."""
        listing = listing_factory("Canon lens hood compatible D3100", manufacturer="Canon")
        assert matcher.find_match(listing) is None

    def test_all_digit_model_prefers_family_key(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Samsung Digimax 1000", manufacturer="Samsung")

        result = matcher.resolve(listing)

        assert result.product is sample_catalog[6]
        assert result.matched_key == "digimax1000"

    def test_no_match(self, matcher, listing_factory):
        listing = listing_factory("Generic Tripod Stand", manufacturer="NoName")

        result = matcher.resolve(listing)

        assert result.product is None
        assert result.matched_key is None
        assert not result.is_matched

    def test_empty_catalog(self, listing_factory):
        matcher = HeuristicsMatcher([])
        assert matcher.find_match(listing_factory("Canon A495")) is None

    @pytest.mark.parametrize("title", ["", "   ", "!!!"])
    def test_degenerate_titles(self, matcher, listing_factory, title):
        assert matcher.find_match(listing_factory(title)) is None

    def test_index_is_built_once(self, matcher, listing_factory):
        index = matcher.index
        matcher.find_match(listing_factory("Canon A495"))
        assert matcher.index is index
        assert len(matcher.index) == len(index)

    def test_find_all_possible_matches(self, matcher, sample_catalog, listing_factory):
        listing = listing_factory("Sony DSC-W310", manufacturer="Sony")

        matches = matcher.find_all_possible_matches(listing, {"dscw310", "w310", "a495", "tripod"})

        assert matches == [("dscw310", sample_catalog[2]), ("w310", sample_catalog[2])]


class TestMatchAll:
    """Tests for batch matching."""

    def test_partitions_in_input_order(self, sample_catalog, listing_factory):
        matcher = HeuristicsMatcher(sample_catalog)
        listings = [
            listing_factory("Canon PowerShot A495", manufacturer="Canon"),
            listing_factory("Generic Tripod Stand", manufacturer="NoName"),
            listing_factory("Nikon D3100", manufacturer="Nikon"),
        ]

        report = matcher.match_all(listings)

        assert report.matched == [
            (sample_catalog[0], listings[0]),
            (sample_catalog[5], listings[2]),
        ]
        assert report.unmatched == [listings[1]]
        assert report.total == 3

    def test_each_listing_matches_at_most_once(self, sample_catalog, listing_factory):
        matcher = HeuristicsMatcher(sample_catalog)
        listings = [listing_factory("Canon A495 and Canon IXUS 130 IS bundle")]

        report = matcher.match_all(listings)

        assert len(report.matched) + len(report.unmatched) == 1
