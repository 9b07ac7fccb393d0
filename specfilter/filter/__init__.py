"""
specfilter Filter Module

Filters apply a specification to a collection and return the matching items
in their original order.

Example usage:

    from specfilter.filter import SpecificationFilter
    from specfilter.specifications import by_color, by_name

    product_filter = SpecificationFilter(item_type=Product)
    product_filter.filter(products, by_color("red") & by_name("Shirt"))
"""

from .base_filter import Filter, SpecificationFilter, filter_items
from .product_filter import ProductFilter

__all__ = [
    "Filter",
    "SpecificationFilter",
    "ProductFilter",
    "filter_items",
]
