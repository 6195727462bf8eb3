"""YAML loader for layout definitions."""

from pathlib import Path
from typing import Any

import numpy as np
import yaml

from ..core.frame import Frame
from .anchors import Anchor
from .arrangement import LayoutArrangement
from .node import VIEW_PROPERTIES, VIEW_REGISTRY, LayoutNode


# Keys every view definition may use, regardless of type
COMMON_KEYS = {"type", "tag", "frame", "size", "anchor", "offset", "children"}


class LayoutLoader:
    """Loads layout definitions from YAML files.

    YAML format:
        name: profile_card
        views:
          - type: view              # view | label | image | button (default: view)
            tag: 1                  # recycling tag (default: 0, never recycled)
            frame: [x, y, w, h]     # explicit frame in the superview
            children:
              - type: image
                tag: 2
                size: [48, 48]      # size + anchor instead of a frame
                anchor: center_left
                offset: [8, 0]
                image: avatar.png
              - type: label
                tag: 3
                frame: [64, 8, 200, 20]
                text: Jane Doe

    Tags must be unique within a layout; tag 0 views are rebuilt on every pass.
    """

    def load(self, path: str | Path) -> LayoutArrangement:
        """Load a layout from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            LayoutArrangement for the layout

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the layout is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Layout file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)

        return self.parse(data, default_name=path.stem)

    def load_string(self, yaml_string: str) -> LayoutArrangement:
        """Load a layout from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            LayoutArrangement for the layout
        """
        data = yaml.safe_load(yaml_string)
        return self.parse(data)

    def parse(self, data: Any, default_name: str = "layout") -> LayoutArrangement:
        """Build a LayoutArrangement from parsed YAML data."""
        if not isinstance(data, dict) or "views" not in data:
            raise ValueError("Layout must be a mapping with a 'views' list")

        views = data["views"]
        if not isinstance(views, list):
            raise ValueError(f"'views' must be a list, got {type(views).__name__}")

        name = data.get("name", default_name)
        nodes = [self._parse_node(view_def, path=f"views[{i}]") for i, view_def in enumerate(views)]
        return LayoutArrangement(nodes, name=name)

    def _parse_node(self, view_def: Any, path: str) -> LayoutNode:
        """Parse a single view definition and its children."""
        if not isinstance(view_def, dict):
            raise ValueError(f"{path}: view definition must be a mapping")

        view_type = view_def.get("type", "view")
        if view_type not in VIEW_REGISTRY:
            raise ValueError(f"{path}: unknown view type: {view_type}")

        allowed_properties = VIEW_PROPERTIES[view_type]
        unknown = set(view_def) - COMMON_KEYS - set(allowed_properties)
        if unknown:
            raise ValueError(f"{path}: unknown keys for '{view_type}': {sorted(unknown)}")

        tag = view_def.get("tag", 0)
        if isinstance(tag, bool) or not isinstance(tag, int):
            raise ValueError(f"{path}: tag must be an integer, got {tag!r}")

        node = LayoutNode(view_type=view_type, tag=tag)

        if "frame" in view_def:
            try:
                node.frame = Frame.from_list(view_def["frame"])
            except (TypeError, ValueError) as e:
                raise ValueError(f"{path}: invalid frame: {e}") from e
        else:
            node.size = self._parse_vec2(view_def.get("size", [0, 0]), f"{path}.size")
            node.offset = self._parse_vec2(view_def.get("offset", [0, 0]), f"{path}.offset")
            anchor_name = view_def.get("anchor", Anchor.TOP_LEFT.value)
            try:
                node.anchor = Anchor(anchor_name)
            except ValueError as e:
                raise ValueError(f"{path}: unknown anchor: {anchor_name}") from e

        for key, attribute in allowed_properties.items():
            if key in view_def:
                value = view_def[key]
                if not isinstance(value, str):
                    raise ValueError(f"{path}: {key} must be a string, got {value!r}")
                node.properties[attribute] = value

        children = view_def.get("children", [])
        if not isinstance(children, list):
            raise ValueError(f"{path}.children must be a list")
        node.children = [
            self._parse_node(child, path=f"{path}.children[{i}]")
            for i, child in enumerate(children)
        ]
        return node

    @staticmethod
    def _parse_vec2(value: Any, path: str) -> np.ndarray:
        try:
            arr = np.asarray(value, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{path}: expected [x, y], got {value!r}") from e
        if arr.shape != (2,):
            raise ValueError(f"{path}: expected [x, y], got {value!r}")
        return arr
