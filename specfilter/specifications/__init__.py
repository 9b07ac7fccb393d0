"""
specfilter Specifications Module

Leaf specifications that test a single attribute of an item. Every class is
registered in ``specification_registry`` under a short name.

Example usage:

    from specfilter.specifications import by_color, by_name
    red_shirts = by_color("red") & by_name("Shirt")

    from specfilter.api import create_specification
    red = create_specification("color", color="red")
"""

from .product import ColorSpecification, NameSpecification, by_color, by_name
from .registry import specification_registry

__all__ = [
    "specification_registry",
    "ColorSpecification",
    "NameSpecification",
    "by_color",
    "by_name",
]
