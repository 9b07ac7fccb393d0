"""Per-criterion product filter.

Every new criterion (or combination of criteria) needs another method here,
so this class has to be edited whenever requirements grow. Prefer
:class:`~specfilter.filter.base_filter.SpecificationFilter` with composed
specifications; this class is kept for callers written against it.
"""

from typing import Iterable, List, Union

from ..data.models.product import Color, Product


class ProductFilter:

    def filter_by_color(self, products: Iterable[Product], color: Union[Color, str]) -> List[Product]:
        color = Color.parse(color)
        return [p for p in products if p.color == color]

    def filter_by_name(self, products: Iterable[Product], name: str) -> List[Product]:
        return [p for p in products if name in p.name]

    def filter_by_color_and_name(
        self, products: Iterable[Product], color: Union[Color, str], name: str
    ) -> List[Product]:
        color = Color.parse(color)
        return [p for p in products if p.color == color and name in p.name]
