"""Viewer module for inspecting view hierarchies."""

from .snapshot import render_snapshot, save_snapshot

__all__ = ["render_snapshot", "save_snapshot"]
