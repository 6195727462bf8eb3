"""View classes for hierarchical layout trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from .frame import Frame
from .protocols import walk_subviews


@dataclass(eq=False, repr=False)
class View:
    """A rectangular node in the view hierarchy.

    Each view has a frame relative to its superview, an integer tag, and can
    have subviews. Views compare and hash by identity, so the same view can
    be tracked in sets while its attributes change.

    Tags identify views across layout passes. A tag of 0 means the view is
    not recycled by tag; any other value should be unique within a tree.

    Example:
        root = View()
        header = root.add_subview(View(tag=1, frame=Frame.from_list([0, 0, 320, 44])))
        header.add_subview(Label(tag=2, text="Inbox"))
    """

    tag: int = 0
    frame: Frame = field(default_factory=Frame)
    subviews: list[View] = field(default_factory=list)
    superview: View | None = None

    def add_subview(self, view: View) -> View:
        """Add a subview on top of the existing subviews.

        The view is first removed from its current superview, so adding a
        view that is already a subview of this view moves it to the front.

        Args:
            view: The view to add

        Returns:
            The added view (for chaining)

        Raises:
            ValueError: If view is this view or one of its ancestors
        """
        ancestor: View | None = self
        while ancestor is not None:
            if ancestor is view:
                raise ValueError(f"Cannot add {view!r} inside its own subtree")
            ancestor = ancestor.superview

        view.remove_from_superview()
        view.superview = self
        self.subviews.append(view)
        return view

    def remove_from_superview(self) -> None:
        """Detach this view from its superview. Does nothing if already detached."""
        if self.superview is None:
            return
        siblings = self.superview.subviews
        for i, sibling in enumerate(siblings):
            if sibling is self:
                del siblings[i]
                break
        self.superview = None

    def walk_subviews(self, visitor: Callable[[View], None]) -> None:
        """Call visitor for each transitive subview (depth-first, pre-order)."""
        walk_subviews(self, visitor)

    def iter_views(self, include_self: bool = True) -> Iterator[View]:
        """Iterate over this view and all descendants (depth-first).

        Args:
            include_self: Whether to include this view in the iteration

        Yields:
            View instances
        """
        if include_self:
            yield self
        for subview in self.subviews:
            yield from subview.iter_views(include_self=True)

    def view_with_tag(self, tag: int) -> View | None:
        """Find this view or the first descendant with the given tag."""
        for view in self.iter_views():
            if view.tag == tag:
                return view
        return None

    def absolute_frame(self) -> Frame:
        """Compute the frame in the root view's coordinate space.

        Traverses up the superview chain and accumulates origins.
        """
        origin = self.frame.origin.copy()
        parent = self.superview
        while parent is not None:
            origin += parent.frame.origin
            parent = parent.superview
        return Frame(origin=origin, size=self.frame.size.copy())

    @property
    def depth(self) -> int:
        """Get the depth of this view in the hierarchy (root = 0)."""
        if self.superview is None:
            return 0
        return self.superview.depth + 1

    @property
    def root(self) -> View:
        """Get the root view of this hierarchy."""
        if self.superview is None:
            return self
        return self.superview.root

    def describe(self) -> str:
        """One-line description used by tree dumps."""
        return f"{type(self).__name__}(tag={self.tag}, frame={self.frame!r})"

    def __repr__(self) -> str:
        subviews_str = f", subviews={len(self.subviews)}" if self.subviews else ""
        return f"{type(self).__name__}(tag={self.tag}{subviews_str})"


@dataclass(eq=False, repr=False)
class Label(View):
    """A view that displays a single line of text."""

    text: str = ""

    def describe(self) -> str:
        return f"{super().describe()} {self.text!r}"


@dataclass(eq=False, repr=False)
class ImageView(View):
    """A view that displays a named image."""

    image_name: str | None = None

    def describe(self) -> str:
        suffix = f" <{self.image_name}>" if self.image_name else ""
        return f"{super().describe()}{suffix}"


@dataclass(eq=False, repr=False)
class Button(View):
    """A tappable view with a title."""

    title: str = ""

    def describe(self) -> str:
        return f"{super().describe()} [{self.title}]"

