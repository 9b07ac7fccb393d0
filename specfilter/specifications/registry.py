"""Specification registry.

Leaf specification classes register themselves here so they can be built
from a name and keyword arguments (see ``specfilter.api``).
"""

from ..core.registry import Registry

specification_registry = Registry("specifications")

__all__ = ["specification_registry"]
