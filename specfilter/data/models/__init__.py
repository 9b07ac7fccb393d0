from .product import Color, Product
from .specification import (
    AndSpecification,
    CompositeSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    and_,
    not_,
    or_,
)

__all__ = [
    "Color",
    "Product",
    "Specification",
    "CompositeSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "and_",
    "or_",
    "not_",
]
