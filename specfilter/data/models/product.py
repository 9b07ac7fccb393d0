"""Product data models"""

from enum import Enum
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict

from ...api.exceptions import InvalidCriterionError


class Color(str, Enum):
    """Opaque colour token. Only equality is meaningful."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    BLACK = "black"
    WHITE = "white"

    @classmethod
    def parse(cls, value: Union["Color", str]) -> "Color":
        """Accept a member or a case-insensitive colour name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            raise InvalidCriterionError(
                f"Unknown color {value!r}; expected one of: {choices}"
            ) from None


class Product(BaseModel):
    """A named, coloured item."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: Color

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        return cls(name=data["name"], color=Color.parse(data["color"]))

    def __str__(self) -> str:
        return f"{self.name} ({self.color.value})"
