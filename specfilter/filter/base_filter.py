"""Filters: apply a specification to an ordered collection.

A filter holds no data and keeps nothing between calls, so one instance can
be shared freely. The filtering mechanism never changes when new criteria are
introduced; callers pass a different specification instead.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

from ..api.exceptions import SpecificationTypeError
from ..data.models.specification import Specification

logger = logging.getLogger(__name__)

T = TypeVar("T")


def accepts_item_type(served: Optional[type], required: Optional[type]) -> bool:
    """True when items of type ``served`` can be handed to a spec over ``required``."""
    if served is None or required is None:
        return True
    return issubclass(served, required)


class Filter(ABC, Generic[T]):
    """Abstract filter over items of one type."""

    @abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> List[T]:
        """Return the items satisfying ``spec``, in their original order."""
        pass


class SpecificationFilter(Filter[T]):
    """Order-preserving, non-mutating filter driven by a specification.

    Args:
        item_type: Optional item class this filter serves. Specifications over
            an unrelated item type are rejected before any item is evaluated.
    """

    def __init__(self, item_type: Optional[type] = None) -> None:
        self._item_type = item_type

    @property
    def item_type(self) -> Optional[type]:
        return self._item_type

    def check_specification(self, spec: Specification[T]) -> None:
        """Raise SpecificationTypeError if ``spec`` cannot be used here."""
        if not isinstance(spec, Specification):
            raise SpecificationTypeError(
                f"Expected a Specification, got {type(spec).__name__}"
            )
        # every item this filter serves must be an item the spec understands
        if not accepts_item_type(self._item_type, spec.item_type):
            raise SpecificationTypeError(
                f"{type(spec).__name__} applies to {spec.item_type.__name__}, "
                f"but this filter serves {self._item_type.__name__}"
            )

    def filter(self, items: Iterable[T], spec: Specification[T]) -> List[T]:
        self.check_specification(spec)
        candidates = list(items)
        matched = [item for item in candidates if spec.is_satisfied(item)]
        logger.debug("%r kept %d of %d items", spec, len(matched), len(candidates))
        return matched

    def count(self, items: Iterable[T], spec: Specification[T]) -> int:
        """Number of items satisfying ``spec``."""
        self.check_specification(spec)
        return sum(1 for item in items if spec.is_satisfied(item))

    def __repr__(self) -> str:
        name = "any" if self._item_type is None else self._item_type.__name__
        return f"SpecificationFilter(item_type={name})"


_default_filter: SpecificationFilter = SpecificationFilter()


def filter_items(items: Iterable[T], spec: Specification[T]) -> List[T]:
    """Filter ``items`` with a shared, type-agnostic SpecificationFilter."""
    return _default_filter.filter(items, spec)
