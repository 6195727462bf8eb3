"""Capability protocols for view trees the recycler can work with."""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Recyclable(Protocol):
    """Protocol for views that can be recycled by tag.

    Any object with a mutable integer ``tag`` and a ``remove_from_superview()``
    method satisfies this protocol. Implementations must hash by identity
    so they can be tracked in sets. A tag of 0 means "not recyclable by tag".
    """

    tag: int

    def remove_from_superview(self) -> None:
        """Detach this view from its parent container."""
        ...


@runtime_checkable
class ViewContainer(Protocol):
    """Protocol for views that hold an ordered list of child views."""

    @property
    def subviews(self) -> Sequence[Recyclable]:
        """Direct children, in their natural order."""
        ...


def walk_subviews(view: ViewContainer, visitor: Callable[[Recyclable], None]) -> None:
    """Call visitor for each transitive subview of view, depth-first pre-order.

    The starting view itself is not visited. Children are copied before
    visiting, so a visitor may detach the view it is handed.

    Args:
        view: Container whose descendants are walked
        visitor: Callback invoked once per descendant
    """
    for subview in list(view.subviews):
        visitor(subview)
        if isinstance(subview, ViewContainer):
            walk_subviews(subview, visitor)
