"""Ordered pattern rules for stripping model prefixes, suffixes and title tails.

Each table is evaluated top to bottom and the first matching rule wins. A
rule's pattern must match the whole input and capture the part to keep in
group 1.

Catalog and listing vocabulary:
    dsc  -> digital still camera
    dmc  -> digital media camera
    dslr -> digital single-lens reflex

    hd -> high definition, is -> image stabilization, hs -> high sensitivity,
    c -> compact, fd -> face detection, exr -> Fujifilm EXR sensor

    Color letters: k/b black, r red, s silver, l/a blue, p pink, v violet,
    d orange, t chocolate, w white, n champagne gold, g green

    Country codes (Panasonic): s Japan, p/pc/pl North America, eb UK,
    ef France, eg/keg Germany, ee Russia, gd Korea, gt/gk China
"""
import re
from dataclasses import dataclass
from typing import Optional, Sequence

CAMERA_PREFIX = "(?:dsc|dmc|dslr)"
QUALIFIER_SUFFIX = "(?:hd|is|hs|c|fd|exr)"
COLOR_CODE = "(?:k|b|r|s|l|a|p|v|d|t|w|n|g)"
COUNTRY_CODE = "(?:s|p|pc|pl|eb|ef|keg|eg|ee|gd|gt|gk)"


@dataclass(frozen=True)
class StripRule:
    """A named full-match pattern whose first group is the part to keep."""
    name: str
    pattern: "re.Pattern[str]"

    def apply(self, value: str) -> Optional[str]:
        match = self.pattern.fullmatch(value)
        if match is None:
            return None
        return match.group(1)


def first_match(rules: Sequence[StripRule], value: str) -> Optional[str]:
    """Apply rules in order and return the capture of the first that matches."""
    for rule in rules:
        kept = rule.apply(value)
        if kept is not None:
            return kept
    return None


# Applied to the lower-cased raw catalog model, e.g. "dsc-w310", "sd980 is".
MODEL_STRIP_RULES: Sequence[StripRule] = (
    StripRule("prefix_and_suffix", re.compile(rf"{CAMERA_PREFIX}-(.+) {QUALIFIER_SUFFIX}")),
    StripRule("suffix", re.compile(rf"(.+) {QUALIFIER_SUFFIX}")),
    StripRule("prefix", re.compile(rf"{CAMERA_PREFIX}-(.+)")),
)

# Applied to normalized candidate keys from listing titles, e.g. "dmcfh20egk".
LISTING_KEY_RULES: Sequence[StripRule] = (
    StripRule("country_and_color", re.compile(rf"{CAMERA_PREFIX}?(.+){COUNTRY_CODE}{COLOR_CODE}")),
    StripRule("qualifier_suffix", re.compile(rf"{CAMERA_PREFIX}?(.+\d){QUALIFIER_SUFFIX}")),
    StripRule("color", re.compile(rf"{CAMERA_PREFIX}?(.+){COLOR_CODE}")),
    StripRule("camera_prefix", re.compile(rf"{CAMERA_PREFIX}(.+)")),
)

# Applied to raw listing titles. Accessory and bundle listings append the
# compatible products after these words, which must not produce keys.
TITLE_TRIM_RULES: Sequence[StripRule] = (
    StripRule("for_clause", re.compile(r"(.+?) (?:for|For|für|pour|para) .+", re.DOTALL)),
    StripRule("with_clause", re.compile(r"(.+?) with .+", re.DOTALL)),
    StripRule("w_slash_clause", re.compile(r"(.+?) w/ .+", re.DOTALL)),
)


def strip_model(model: str) -> Optional[str]:
    """Drop a camera-type prefix and/or qualifier suffix from a lower-cased model."""
    return first_match(MODEL_STRIP_RULES, model)


def strip_listing_key(key: str) -> Optional[str]:
    """Drop country, color, qualifier or camera-type markers from a candidate key."""
    return first_match(LISTING_KEY_RULES, key)


def trim_title(title: str) -> str:
    """Keep only the part of a title before a for / with / w/ clause."""
    head = first_match(TITLE_TRIM_RULES, title)
    return title if head is None else head
