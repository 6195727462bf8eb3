"""Layout system for data-driven view hierarchies."""

from .anchors import Anchor, resolve_anchor
from .arrangement import LayoutArrangement
from .loader import LayoutLoader
from .node import VIEW_REGISTRY, LayoutNode

__all__ = [
    "Anchor",
    "resolve_anchor",
    "LayoutArrangement",
    "LayoutLoader",
    "LayoutNode",
    "VIEW_REGISTRY",
]
