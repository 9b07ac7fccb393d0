"""Main specfilter API

Builds specifications by name from the specification registry and exposes
the composition and filtering helpers from one place.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from .exceptions import InvalidCriterionError, SpecificationNotFoundError
from ..data.models.specification import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    and_,
    not_,
    or_,
)
from ..filter.base_filter import SpecificationFilter, filter_items
from ..specifications import specification_registry

logger = logging.getLogger(__name__)

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


def get_specification(spec_name: str, /):
    """Get a specification class by name from the specification registry.

    Args:
        spec_name: The specification name (e.g., "color", "name")

    Returns:
        The specification class

    Raises:
        SpecificationNotFoundError: If the name is not registered
    """
    if spec_name not in specification_registry:
        raise SpecificationNotFoundError(
            f"Specification '{spec_name}' not found; available: {', '.join(list_specifications())}"
        )
    return specification_registry.require(spec_name)


def list_specifications() -> List[str]:
    return specification_registry.names()


def create_specification(spec_name: str, /, **kwargs) -> Specification:
    """Create a specification instance by name.

    Args:
        spec_name: The specification name
        **kwargs: Arguments to pass to the specification constructor

    Returns:
        Specification instance
    """
    spec_class = get_specification(spec_name)
    try:
        return spec_class(**kwargs)
    except TypeError as e:
        raise InvalidCriterionError(f"Bad arguments for '{spec_name}': {e}") from e


def build_specification(
    criteria: Mapping[str, Any],
    match: str = "all",
    negate: bool = False,
) -> Optional[Specification]:
    """Build one specification from ``{name: value}`` criteria.

    Each criterion becomes ``create_specification(name, **{name: value})``;
    the results are combined with AND (``match="all"``) or OR
    (``match="any"``). Returns None when ``criteria`` is empty.
    """
    if match not in ("all", "any"):
        raise InvalidCriterionError(f"match must be 'all' or 'any', got {match!r}")
    leaves = [create_specification(name, **{name: value}) for name, value in criteria.items()]
    if not leaves:
        return None
    spec: Specification = AndSpecification(*leaves) if match == "all" else OrSpecification(*leaves)
    if negate:
        spec = NotSpecification(spec)
    logger.debug("Built %r from %d criteria", spec, len(leaves))
    return spec
