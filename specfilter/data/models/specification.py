"""Specification primitives used by the filters.

A specification is an immutable predicate over one kind of item. Leaf
specifications test a single attribute; composites (AND / OR / NOT) combine
existing specifications without modifying them, so new criteria are added as
new classes instead of new filter methods.

Every specification advertises the ``item_type`` it applies to (``None``
means any item). Composites check that their children agree on it when they
are built:

    red_shirts = ColorSpecification(Color.RED) & NameSpecification("Shirt")
    red_shirts.item_type  # Product

    ColorSpecification(Color.RED) & SomeOrderSpecification()
    # SpecificationTypeError: cannot combine Product with Order
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Generic, Iterable, Optional, Tuple, TypeVar

from ...api.exceptions import SpecificationTypeError

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Composable predicate over an item."""

    item_type: ClassVar[Optional[type]] = None

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:  # pragma: no cover - interface
        raise NotImplementedError

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)


def _type_name(item_type: Optional[type]) -> str:
    return "any" if item_type is None else item_type.__name__


def item_types_compatible(first: Optional[type], second: Optional[type]) -> bool:
    """True when both types are None/unbounded or one derives from the other."""
    if first is None or second is None:
        return True
    return issubclass(first, second) or issubclass(second, first)


def resolve_item_type(specs: Iterable[object]) -> Optional[type]:
    """Return the most derived item type shared by ``specs``.

    Raises:
        SpecificationTypeError: if an element is not a Specification or two
            item types are not on the same inheritance chain.
    """
    resolved: Optional[type] = None
    for spec in specs:
        if not isinstance(spec, Specification):
            raise SpecificationTypeError(
                f"Cannot compose {type(spec).__name__!r}; expected a Specification"
            )
        candidate = spec.item_type
        if not item_types_compatible(resolved, candidate):
            raise SpecificationTypeError(
                f"Cannot combine specifications over {_type_name(resolved)} "
                f"and {_type_name(candidate)}"
            )
        if candidate is not None and (resolved is None or issubclass(candidate, resolved)):
            resolved = candidate
    return resolved


class CompositeSpecification(Specification[T]):
    """Base for specifications built from other specifications."""

    specs: Tuple[Specification[T], ...]

    def __init__(self, *specs: Specification[T]) -> None:
        # frozen dataclass subclasses: bypass __setattr__
        object.__setattr__(self, "_item_type", resolve_item_type(specs))
        object.__setattr__(self, "specs", tuple(specs))

    @property
    def item_type(self) -> Optional[type]:  # type: ignore[override]
        return self._item_type


@dataclass(frozen=True, init=False)
class AndSpecification(CompositeSpecification[T]):
    """Satisfied when every child is satisfied (vacuously true when empty)."""

    specs: Tuple[Specification[T], ...]

    def is_satisfied(self, item: T) -> bool:
        return all(spec.is_satisfied(item) for spec in self.specs)

    def __and__(self, other: Specification[T]) -> Specification[T]:
        return AndSpecification(*self.specs, other)


@dataclass(frozen=True, init=False)
class OrSpecification(CompositeSpecification[T]):
    """Satisfied when any child is satisfied (never when empty)."""

    specs: Tuple[Specification[T], ...]

    def is_satisfied(self, item: T) -> bool:
        return any(spec.is_satisfied(item) for spec in self.specs)

    def __or__(self, other: Specification[T]) -> Specification[T]:
        return OrSpecification(*self.specs, other)


@dataclass(frozen=True, init=False)
class NotSpecification(CompositeSpecification[T]):
    specs: Tuple[Specification[T], ...]

    def __init__(self, spec: Specification[T]) -> None:
        super().__init__(spec)

    @property
    def spec(self) -> Specification[T]:
        return self.specs[0]

    def is_satisfied(self, item: T) -> bool:
        return not self.spec.is_satisfied(item)

    def __invert__(self) -> Specification[T]:
        return self.spec


def and_(*specs: Specification[T]) -> AndSpecification[T]:
    return AndSpecification(*specs)


def or_(*specs: Specification[T]) -> OrSpecification[T]:
    return OrSpecification(*specs)


def not_(spec: Specification[T]) -> NotSpecification[T]:
    return NotSpecification(spec)


__all__ = [
    "Specification",
    "CompositeSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "and_",
    "or_",
    "not_",
    "item_types_compatible",
    "resolve_item_type",
]
