"""Tag-based view recycling across layout passes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

from .core.protocols import Recyclable, ViewContainer, walk_subviews

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Recyclable)


@dataclass
class RecycleStats:
    """Counters for a single recycling cycle."""

    recycled: int = 0
    created: int = 0
    purged: int = 0

    def __str__(self) -> str:
        return f"recycled={self.recycled} created={self.created} purged={self.purged}"


class ViewRecycler:
    """Recycles the existing subviews of a root view by tag.

    Create a recycler with a root view whose subviews are eligible for
    recycling. Call make_view() to recycle or create a view of the desired
    type and tag, then purge_views() to remove every view that was not
    recycled from the hierarchy.

    A recycler covers one layout pass. Once purged it stays empty; build a
    new recycler from the tree's current state for the next pass. It is not
    thread-safe and two recyclers must not share a tree.

    Example:
        recycler = ViewRecycler(root)
        title = recycler.make_view(Label, tag=1)
        root.add_subview(title)
        recycler.purge_views()
    """

    def __init__(self, root_view: ViewContainer | None = None) -> None:
        """Retain all subviews of root_view for recycling.

        Args:
            root_view: View whose transitive subviews can be recycled. The
                root itself is never recycled or purged. None gives an
                empty recycler.
        """
        self._views_by_tag: dict[int, Recyclable] = {}
        self._untagged_views: set[Recyclable] = set()
        # Earlier views whose nonzero tag was taken by a later duplicate
        self._shadowed_views: list[Recyclable] = []
        self._purged = False
        self.stats = RecycleStats()

        if root_view is not None:
            walk_subviews(root_view, self._retain)

        logger.debug(
            "Retained %d tagged, %d untagged and %d shadowed views",
            len(self._views_by_tag),
            len(self._untagged_views),
            len(self._shadowed_views),
        )

    def _retain(self, view: Recyclable) -> None:
        if view.tag != 0:
            # Duplicate tags: the last view visited wins, earlier ones get purged.
            shadowed = self._views_by_tag.get(view.tag)
            if shadowed is not None and shadowed is not view:
                self._shadowed_views.append(shadowed)
            self._views_by_tag[view.tag] = view
        else:
            self._untagged_views.add(view)

    def mark_view_as_recycled(self, view: Recyclable) -> None:
        """Mark a view as recycled so purge_views() leaves it in the hierarchy.

        Only needed when a view is reused without going through make_view().
        Views that are not pending purge are ignored.
        """
        if view.tag == 0:
            self._untagged_views.discard(view)
        elif self._views_by_tag.get(view.tag) is view:
            del self._views_by_tag[view.tag]
        else:
            self._shadowed_views = [v for v in self._shadowed_views if v is not view]

    def make_view(self, view_type: type[V], tag: int, exact_type: bool = False) -> V:
        """Recycle or create a view of the desired type and tag.

        A retained view is recycled when its tag matches and it is an
        instance of view_type (of exactly view_type when exact_type is
        set). Otherwise a new view_type() is created and given the
        tag; a retained view with the wrong type stays pending
        purge. Views with tag 0 are never recycled.

        Args:
            view_type: Class to instantiate, callable with no arguments
            tag: Tag the returned view carries
            exact_type: Reject retained instances of view_type's subclasses

        Returns:
            A view of view_type whose tag equals tag
        """
        view = self._views_by_tag.get(tag)
        matches = type(view) is view_type if exact_type else isinstance(view, view_type)
        if not matches:
            new_view = view_type()
            new_view.tag = tag
            self.stats.created += 1
            logger.debug("Created %s for tag %d", view_type.__name__, tag)
            return new_view

        del self._views_by_tag[tag]
        self.stats.recycled += 1
        logger.debug("Recycled %s for tag %d", type(view).__name__, tag)
        return view

    def purge_views(self) -> None:
        """Remove all unrecycled views from the view hierarchy."""
        pending = [
            *self._views_by_tag.values(),
            *self._untagged_views,
            *self._shadowed_views,
        ]
        for view in pending:
            view.remove_from_superview()
        self._views_by_tag.clear()
        self._untagged_views.clear()
        self._shadowed_views.clear()

        logger.debug("Purged %d views", len(pending))
        self.stats.purged += len(pending)
        self._purged = True

    @property
    def purged(self) -> bool:
        """True once purge_views() has run."""
        return self._purged

    def __len__(self) -> int:
        """Number of views that would be removed by purge_views()."""
        return (
            len(self._views_by_tag)
            + len(self._untagged_views)
            + len(self._shadowed_views)
        )

    def __contains__(self, view: object) -> bool:
        tag = getattr(view, "tag", None)
        if not isinstance(tag, int):
            return False
        if tag == 0:
            try:
                return view in self._untagged_views
            except TypeError:
                # Unhashable objects can never have been retained
                return False
        if self._views_by_tag.get(tag) is view:
            return True
        return any(v is view for v in self._shadowed_views)
