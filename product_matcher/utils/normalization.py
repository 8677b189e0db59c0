"""String normalization used to make catalog fields and listing titles comparable.

Examples:
    normalize("Cyber-shot DSC-W310")  -> "cybershotdscw310"
    normalize_tokens(["Digital", "IXUS"]) -> "digitalixus"
    normalized_manufacturer("Canon Canada") -> "canon"

Word characters are the ASCII ones, [A-Za-z0-9_]; everything else is a
separator. All functions are total: any string, including "", is accepted.
"""
import re
from typing import Iterable

NON_WORD = re.compile(r"\W+", re.ASCII)


def normalize(text: str) -> str:
    """Lower-case text and drop every run of non-word characters."""
    return "".join(NON_WORD.split(text.lower()))


def normalize_tokens(tokens: Iterable[str], sep: str = "") -> str:
    """Normalize each token and join the results with sep."""
    return sep.join(normalize(token) for token in tokens)


def first_word(text: str) -> str:
    """Return the first run of word characters in text, or "" if there is none."""
    for part in NON_WORD.split(text):
        if part:
            return part
    return ""


def normalized_manufacturer(raw: str) -> str:
    """Reduce a raw manufacturer string to its lower-cased first word.

    "Canon Canada" and "Canon" both become "canon", so catalog and listing
    manufacturers compare equal despite regional suffixes.
    """
    return first_word(raw).lower()
