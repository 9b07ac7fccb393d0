"""Product catalog loading.

A catalog is a TOML, YAML or JSON document with a ``products`` list:

    [[products]]
    name = "Red Shirt"
    color = "red"
"""

import logging
from typing import Any, List

from pydantic import ValidationError

from ...api.exceptions import CatalogError, ConfigurationError
from ...core.config import read_structured_file
from ..models.product import Product

logger = logging.getLogger(__name__)


def parse_products(entries: Any, source: str = "<catalog>") -> List[Product]:
    """Build products from a list of ``{name, color}`` mappings."""
    if not isinstance(entries, list):
        raise CatalogError(f"{source}: 'products' must be a list")
    products = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CatalogError(f"{source}: product #{index} is not a table")
        missing = [key for key in ("name", "color") if key not in entry]
        if missing:
            raise CatalogError(f"{source}: product #{index} is missing {', '.join(missing)}")
        try:
            products.append(Product.from_dict(entry))
        except (ValueError, ValidationError) as e:
            raise CatalogError(f"{source}: product #{index} is invalid: {e}") from e
    return products


def load_catalog(path: str) -> List[Product]:
    """Read the products stored in ``path``, preserving file order."""
    try:
        data = read_structured_file(path)
    except ConfigurationError as e:
        raise CatalogError(str(e)) from e
    if "products" not in data:
        raise CatalogError(f"{path}: no 'products' list found")
    products = parse_products(data["products"], source=path)
    logger.info("Loaded %d products from %s", len(products), path)
    return products
