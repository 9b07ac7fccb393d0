"""API module for specfilter"""

from .specfilter import (
    specification_registry,
    get_specification,
    list_specifications,
    create_specification,
    build_specification,
    and_,
    or_,
    not_,
    filter_items,
    SpecificationFilter,
)

__all__ = [
    "specification_registry",
    "get_specification",
    "list_specifications",
    "create_specification",
    "build_specification",
    "and_",
    "or_",
    "not_",
    "filter_items",
    "SpecificationFilter",
]
