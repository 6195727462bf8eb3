"""LayoutNode class describing the views a layout pass should produce."""

from __future__ import annotations

from dataclasses import MISSING, Field, dataclass, field, fields
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ..core.frame import Frame
from ..core.view import Button, ImageView, Label, View
from .anchors import Anchor, resolve_anchor


# Registry of view classes available to layouts
VIEW_REGISTRY: dict[str, type[View]] = {
    "view": View,
    "label": Label,
    "image": ImageView,
    "button": Button,
}

# Layout keys accepted per view type, mapped to the view attribute they set
VIEW_PROPERTIES: dict[str, dict[str, str]] = {
    "view": {},
    "label": {"text": "text"},
    "image": {"image": "image_name"},
    "button": {"title": "title"},
}


def _field_default(f: Field) -> Any:
    if f.default_factory is not MISSING:
        return f.default_factory()
    return f.default


@dataclass
class LayoutNode:
    """Description of one view in a layout.

    A node is positioned either by an explicit frame, or by a size placed at
    an anchor of its superview plus an offset in points.

    Attributes:
        view_type: Key into VIEW_REGISTRY
        tag: Recycling tag for the view (0 = always create a new view)
        frame: Explicit frame relative to the superview
        size: View size [width, height], used when frame is None
        anchor: Anchor in the superview the view is pinned to
        offset: Extra translation [dx, dy] applied after anchoring
        properties: View attributes to set, keyed by attribute name
        children: Subview descriptions, in front-to-back order
    """

    view_type: str = "view"
    tag: int = 0
    frame: Frame | None = None
    size: NDArray[np.float64] | None = None
    anchor: Anchor | str = Anchor.TOP_LEFT
    offset: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )
    properties: dict[str, Any] = field(default_factory=dict)
    children: list[LayoutNode] = field(default_factory=list)

    @property
    def view_class(self) -> type[View]:
        return VIEW_REGISTRY[self.view_type]

    def resolve_frame(self, container_size: NDArray[np.float64]) -> Frame:
        """Compute this node's frame inside a container of the given size."""
        if self.frame is not None:
            return self.frame.copy()

        size = np.zeros(2) if self.size is None else np.asarray(self.size, dtype=np.float64)
        origin = resolve_anchor(self.anchor, container_size, size) + self.offset
        return Frame(origin=origin, size=size)

    def configure(self, view: View, container_size: NDArray[np.float64]) -> None:
        """Apply this node's frame and properties to a view.

        Properties the node leaves out are reset to the view class defaults,
        so a recycled view ends up identical to a newly created one.
        """
        view.frame = self.resolve_frame(container_size)
        defaults = {f.name: f for f in fields(self.view_class)}
        for attribute in VIEW_PROPERTIES[self.view_type].values():
            if attribute not in self.properties:
                setattr(view, attribute, _field_default(defaults[attribute]))
        for name, value in self.properties.items():
            setattr(view, name, value)
