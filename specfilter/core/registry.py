"""Named registry of specification factories.

Leaf specification classes register under a short criterion name so they can
be built from plain ``{name: value}`` criteria (the CLI does this):

    @specification_registry.register("color")
    class ColorSpecification(Specification[Product]):
        ...

    specification_registry.require("color")(color=Color.RED)

Names are case-sensitive and unique within one registry.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, TypeVar


T = TypeVar("T")


class Registry:
    """Criterion name -> factory mapping usable as a class decorator."""

    def __init__(self, name: str = "registry") -> None:
        self._name = name
        self._factories: Dict[str, Any] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: Optional[str] = None) -> Callable[[T], T]:
        """Decorator registering a factory under ``key``.

        Without ``key`` the lowercased class/function name is used.
        """

        def _decorator(factory: T) -> T:
            inferred = key or str(getattr(factory, "__name__", "")).lower()
            if not inferred:
                raise ValueError("Cannot infer name for registration; provide a name explicitly.")
            self.add(inferred, factory)
            return factory

        return _decorator

    def add(self, key: str, factory: Any, overwrite: bool = False) -> None:
        if not overwrite and key in self._factories:
            raise KeyError(f"{self._name}: '{key}' is already registered")
        self._factories[key] = factory

    def remove(self, key: str) -> Any:
        """Unregister ``key`` and return its factory."""
        factory = self.require(key)
        del self._factories[key]
        return factory

    def require(self, key: str) -> Any:
        """Factory for ``key``; KeyError if nothing is registered under it."""
        if key not in self._factories:
            raise KeyError(f"{self._name}: '{key}' is not registered")
        return self._factories[key]

    def names(self) -> List[str]:
        """Registered names, sorted."""
        return sorted(self._factories)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, items={len(self._factories)})"
