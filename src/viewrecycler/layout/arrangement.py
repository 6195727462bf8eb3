"""Applies layouts to view hierarchies, recycling views between passes."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from ..core.view import View
from ..recycler import RecycleStats, ViewRecycler
from .node import LayoutNode

logger = logging.getLogger(__name__)


class LayoutArrangement:
    """A list of top-level layout nodes that can be turned into views.

    Calling make_views() repeatedly on the same root view is a sequence of
    layout passes: views whose tag and type still match are reused and
    reconfigured, everything else under the root is rebuilt or removed.
    """

    def __init__(self, nodes: list[LayoutNode], name: str | None = None) -> None:
        self.nodes = nodes
        self.name = name or "layout"
        self.last_stats: RecycleStats | None = None

    def make_views(self, root_view: View | None = None) -> list[View]:
        """Create or recycle the views for this layout.

        With a root view, the existing subviews of root_view are recycled by
        tag, the resulting views become root_view's only subviews, and views
        that were not reused are removed from the hierarchy.

        Args:
            root_view: View to install the layout in, or None to only build views

        Returns:
            The top-level views, in layout order
        """
        recycler = ViewRecycler(root_view)
        container_size = (
            root_view.frame.size if root_view is not None else np.zeros(2, dtype=np.float64)
        )

        views = [self._make_view(node, recycler, container_size) for node in self.nodes]

        if root_view is not None:
            for view in views:
                root_view.add_subview(view)

        recycler.purge_views()
        self.last_stats = recycler.stats
        logger.info("Applied layout '%s': %s", self.name, recycler.stats)
        return views

    def _make_view(
        self,
        node: LayoutNode,
        recycler: ViewRecycler,
        container_size: NDArray[np.float64],
    ) -> View:
        # Layouts name concrete classes, so a pooled subclass is not a match
        view = recycler.make_view(node.view_class, node.tag, exact_type=True)
        node.configure(view, container_size)

        for child in node.children:
            subview = self._make_view(child, recycler, view.frame.size)
            view.add_subview(subview)
        return view

    def __repr__(self) -> str:
        return f"LayoutArrangement({self.name!r}, views={len(self.nodes)})"
