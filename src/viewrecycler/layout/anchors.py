"""Anchor point system for positioning views within their superview."""

from enum import Enum

import numpy as np


class Anchor(Enum):
    """Named anchor points within a superview's bounds.

    Anchors are defined in normalized coordinates (0-1) where:
    - X: 0 = left, 1 = right
    - Y: 0 = top, 1 = bottom
    """
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"

    CENTER_LEFT = "center_left"
    CENTER = "center"
    CENTER_RIGHT = "center_right"

    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


# Mapping from anchor to normalized coordinates (x, y)
ANCHOR_POSITIONS: dict[Anchor, tuple[float, float]] = {
    Anchor.TOP_LEFT: (0.0, 0.0),
    Anchor.TOP_CENTER: (0.5, 0.0),
    Anchor.TOP_RIGHT: (1.0, 0.0),

    Anchor.CENTER_LEFT: (0.0, 0.5),
    Anchor.CENTER: (0.5, 0.5),
    Anchor.CENTER_RIGHT: (1.0, 0.5),

    Anchor.BOTTOM_LEFT: (0.0, 1.0),
    Anchor.BOTTOM_CENTER: (0.5, 1.0),
    Anchor.BOTTOM_RIGHT: (1.0, 1.0),
}


def resolve_anchor(
    anchor: Anchor | str,
    container_size: np.ndarray,
    view_size: np.ndarray,
) -> np.ndarray:
    """Compute the origin that places a view at an anchor of its container.

    The same normalized point of the view and of the container coincide, so
    TOP_LEFT pins the view's top-left corner and BOTTOM_RIGHT its
    bottom-right corner.

    Args:
        anchor: The anchor point (enum or string name)
        container_size: The size of the container [width, height]
        view_size: The size of the view being placed [width, height]

    Returns:
        Origin [x, y] relative to the container's top-left corner

    Raises:
        ValueError: If anchor is not a known anchor name
    """
    if isinstance(anchor, str):
        anchor = Anchor(anchor)

    norm_pos = np.array(ANCHOR_POSITIONS[anchor])
    return norm_pos * (np.asarray(container_size) - np.asarray(view_size))
