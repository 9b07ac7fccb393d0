"""
specfilter - composable specifications and filters

Build predicates from small, immutable specifications, combine them with
AND / OR / NOT, and apply them to collections without touching the filter.
"""

from .api.specfilter import (
    specification_registry,
    get_specification,
    list_specifications,
    create_specification,
    build_specification,
)
from .api.exceptions import (
    SpecFilterError,
    SpecificationTypeError,
    SpecificationNotFoundError,
    InvalidCriterionError,
)
from .data.models import (
    Color,
    Product,
    Specification,
    AndSpecification,
    OrSpecification,
    NotSpecification,
    and_,
    or_,
    not_,
)
from .filter import Filter, SpecificationFilter, ProductFilter, filter_items
from .specifications import ColorSpecification, NameSpecification, by_color, by_name

__version__ = "0.1.0"
__all__ = [
    "specification_registry",
    "get_specification",
    "list_specifications",
    "create_specification",
    "build_specification",
    "SpecFilterError",
    "SpecificationTypeError",
    "SpecificationNotFoundError",
    "InvalidCriterionError",
    "Color",
    "Product",
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "and_",
    "or_",
    "not_",
    "Filter",
    "SpecificationFilter",
    "ProductFilter",
    "filter_items",
    "ColorSpecification",
    "NameSpecification",
    "by_color",
    "by_name",
]
