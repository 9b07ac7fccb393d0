"""Leaf specifications over :class:`~specfilter.data.models.product.Product`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..api.exceptions import InvalidCriterionError
from ..data.models.product import Color, Product
from ..data.models.specification import Specification
from .registry import specification_registry


@specification_registry.register("color")
@dataclass(frozen=True)
class ColorSpecification(Specification[Product]):
    """Satisfied when the product has exactly ``color``."""

    item_type: ClassVar[Optional[type]] = Product

    color: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", Color.parse(self.color))

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color


@specification_registry.register("name")
@dataclass(frozen=True)
class NameSpecification(Specification[Product]):
    """Satisfied when ``name`` occurs in the product name (case-sensitive)."""

    item_type: ClassVar[Optional[type]] = Product

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise InvalidCriterionError(
                f"Name criterion must be a string, got {type(self.name).__name__}"
            )

    def is_satisfied(self, item: Product) -> bool:
        return self.name in item.name


def by_color(color: Union[Color, str]) -> ColorSpecification:
    return ColorSpecification(color)


def by_name(substring: str) -> NameSpecification:
    return NameSpecification(substring)


__all__ = ["ColorSpecification", "NameSpecification", "by_color", "by_name"]
