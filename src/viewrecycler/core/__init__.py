"""Core view tree components."""

from .frame import Frame
from .protocols import Recyclable, ViewContainer, walk_subviews
from .view import Button, ImageView, Label, View

__all__ = [
    "Frame",
    "Recyclable",
    "ViewContainer",
    "walk_subviews",
    "View",
    "Label",
    "ImageView",
    "Button",
]
