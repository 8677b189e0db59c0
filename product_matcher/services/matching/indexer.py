"""Product index: every lookup key a catalog product can be found under.

Each product is indexed under several keys, starting with its normalized
model and adding variants built from the family name, the product name and
the model without its camera-type prefix or qualifier suffix:

    Product(model="130 IS", family="Digital IXUS", manufacturer="Canon",
            product_name="Canon_IXUS_130_IS", ...)
        -> 130is, digitalixus130is, ixus130is, digitalixus130, ixus130, 130

Keys are unique across the catalog. When two products produce the same key
the later product in catalog order wins; such collisions are recorded so they
can be reviewed, but never change the lookup result.
"""
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import structlog

from product_matcher.models.catalog import Product
from product_matcher.services.matching.rules import strip_model
from product_matcher.utils.normalization import normalize, normalize_tokens

logger = structlog.get_logger(__name__)


def family_keys(family: Optional[str], base_model: str) -> List[str]:
    """Keys combining the family name with a base model.

    A simple family such as "FinePix" gives one key. A compound family such
    as "Digital IXUS" also gives a key without its leading word, since
    listings often say just "IXUS".
    """
    if not family:
        return []

    family_tokens = family.lower().split()
    keys = [normalize_tokens(family_tokens) + base_model]
    if len(family_tokens) > 1:
        keys.append(normalize_tokens(family_tokens[1:]) + base_model)
    return keys


def product_name_key(product: Product) -> str:
    """Key built from the product name minus its manufacturer and family words.

    "Casio-EX-ZR100" with family "Exilim" gives "exzr100", a form of the
    model that only the product name carries.
    """
    name_tokens = product.product_name.lower().replace("_", "-").split("-")
    family_tokens = set((product.family or "").lower().replace("_", " ").replace("-", " ").split())
    manufacturer = product.normalized_manufacturer
    kept = [t for t in name_tokens if t != manufacturer and t not in family_tokens]
    return normalize_tokens(kept)


def stripped_model_keys(product: Product) -> List[str]:
    """Keys for the model without a dsc/dmc/dslr prefix or hd/is/... suffix."""
    stripped = strip_model(product.model.lower())
    if stripped is None:
        return []

    base_model = normalize(stripped)
    return family_keys(product.family, base_model) + [base_model]


def indexing_keys(product: Product) -> List[str]:
    """All distinct, non-empty keys for a product, most specific source first."""
    candidates = (
        [product.normalized_model]
        + family_keys(product.family, product.normalized_model)
        + [product_name_key(product)]
        + stripped_model_keys(product)
    )

    keys: List[str] = []
    for key in candidates:
        if key and key not in keys:
            keys.append(key)
    return keys


class ProductIndex(Mapping[str, Product]):
    """Read-only mapping of lookup key to catalog product.

    Attributes:
        collisions: (key, replaced product, winning product) for every key
            that a later product took over from an earlier, different one
    """

    def __init__(self, entries: Dict[str, Product], collisions: List[Tuple[str, Product, Product]]):
        self._entries = entries
        self.collisions = tuple(collisions)

    def __getitem__(self, key: str) -> Product:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def build_index(products: Iterable[Product]) -> ProductIndex:
    """Index every product of the catalog under all of its keys.

    Args:
        products: Catalog products in catalog order

    Returns:
        ProductIndex where later products win key collisions
    """
    entries: Dict[str, Product] = {}
    collisions: List[Tuple[str, Product, Product]] = []
    product_count = 0

    for product in products:
        product_count += 1
        for key in indexing_keys(product):
            previous = entries.get(key)
            if previous is not None and previous is not product:
                collisions.append((key, previous, product))
                logger.debug(
                    "index_key_collision",
                    key=key,
                    replaced=previous.product_name,
                    winner=product.product_name,
                )
            entries[key] = product

    logger.info(
        "index_built",
        products=product_count,
        keys=len(entries),
        collisions=len(collisions),
    )
    return ProductIndex(entries, collisions)
