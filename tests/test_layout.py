"""Tests for layout loading and applying layouts through the recycler."""

from pathlib import Path

import numpy as np
import pytest

from viewrecycler.core.frame import Frame
from viewrecycler.core.view import Button, ImageView, Label, View
from viewrecycler.layout import Anchor, LayoutLoader, resolve_anchor

ASSETS_DIR = Path(__file__).parent.parent / "assets"

CARD = """
name: card
views:
  - type: view
    tag: 1
    frame: [0, 0, 200, 100]
    children:
      - type: label
        tag: 2
        frame: [10, 10, 100, 20]
        text: Title
      - type: label
        frame: [10, 40, 100, 20]
        text: Subtitle
      - type: button
        tag: 3
        size: [50, 20]
        anchor: bottom_right
        offset: [-5, -5]
        title: Go
"""

CARD_UPDATED = """
name: card_updated
views:
  - type: view
    tag: 1
    frame: [0, 0, 200, 60]
    children:
      - type: label
        tag: 2
        frame: [10, 10, 150, 20]
        text: New title
      - type: image
        tag: 3
        frame: [160, 10, 30, 30]
        image: icon.png
"""


@pytest.fixture
def loader() -> LayoutLoader:
    return LayoutLoader()


@pytest.fixture
def root() -> View:
    return View(frame=Frame.from_list([0, 0, 320, 480]))


def test_load_string_builds_nodes(loader):
    arrangement = loader.load_string(CARD)

    assert arrangement.name == "card"
    assert len(arrangement.nodes) == 1
    card = arrangement.nodes[0]
    assert card.tag == 1
    assert [child.view_type for child in card.children] == ["label", "label", "button"]
    assert card.children[0].properties == {"text": "Title"}
    assert card.children[2].properties == {"title": "Go"}
    assert card.children[2].anchor is Anchor.BOTTOM_RIGHT


def test_make_views_without_root_builds_fresh_tree(loader):
    views = loader.load_string(CARD).make_views()

    (card,) = views
    assert card.superview is None
    assert [type(v) for v in card.subviews] == [Label, Label, Button]
    assert card.subviews[0].text == "Title"
    # Anchored bottom-right inside a 200x100 card, inset by 5
    assert card.subviews[2].frame == Frame.from_list([145, 75, 50, 20])


def test_second_pass_recycles_tagged_views(loader, root):
    card_layout = loader.load_string(CARD)
    (card,) = card_layout.make_views(root)
    title, subtitle, button = card.subviews

    (card_again,) = loader.load_string(CARD).make_views(root)

    assert card_again is card
    assert card.subviews[0] is title
    assert card.subviews[1] is not subtitle
    assert card.subviews[2] is button
    assert subtitle.superview is None
    assert root.subviews == [card]


def test_pass_with_changed_types_replaces_views(loader, root):
    (card,) = loader.load_string(CARD).make_views(root)
    title, subtitle, button = card.subviews

    updated = loader.load_string(CARD_UPDATED)
    (card_again,) = updated.make_views(root)

    assert card_again is card
    assert card.frame == Frame.from_list([0, 0, 200, 60])
    assert card.subviews[0] is title
    assert title.text == "New title"
    # Tag 3 was a button, the updated layout asks for an image view
    assert isinstance(card.subviews[1], ImageView)
    assert card.subviews[1].image_name == "icon.png"
    assert button.superview is None
    assert subtitle.superview is None
    assert updated.last_stats.recycled == 2
    assert updated.last_stats.created == 1
    assert updated.last_stats.purged == 2


def test_views_outside_layout_are_purged(loader, root):
    stray = root.add_subview(View(tag=99))

    loader.load_string(CARD).make_views(root)

    assert stray.superview is None
    assert len(root.subviews) == 1


def test_top_level_anchor_uses_root_size(loader, root):
    layout = """
views:
  - type: label
    tag: 1
    size: [100, 40]
    anchor: center
    text: Centered
"""
    (label,) = loader.load_string(layout).make_views(root)

    assert label.frame == Frame.from_list([110, 220, 100, 40])


def test_load_asset_files(loader, root):
    first = loader.load(ASSETS_DIR / "profile.yaml")
    second = loader.load(ASSETS_DIR / "profile_compact.yaml")

    first.make_views(root)
    second.make_views(root)

    assert second.name == "profile_compact"
    assert second.last_stats.created == 0
    assert second.last_stats.recycled == 4
    assert root.view_with_tag(5) is None
    assert root.view_with_tag(4).title == "Following"


def test_load_missing_file_raises(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "missing.yaml")


def test_load_uses_file_stem_as_default_name(loader, tmp_path):
    path = tmp_path / "settings_screen.yaml"
    path.write_text("views: []\n")

    assert loader.load(path).name == "settings_screen"


@pytest.mark.parametrize(
    "yaml_text,message",
    [
        ("name: nothing\n", "views"),
        ("views: {}\n", "must be a list"),
        ("views:\n  - type: slider\n", "unknown view type"),
        ("views:\n  - tag: one\n", "tag must be an integer"),
        ("views:\n  - tag: true\n", "tag must be an integer"),
        ("views:\n  - frame: [0, 0, 10]\n", "invalid frame"),
        ("views:\n  - size: [1, 2, 3]\n", "expected [x, y]"),
        ("views:\n  - anchor: middle\n", "unknown anchor"),
        ("views:\n  - type: view\n    text: hi\n", "unknown keys"),
        ("views:\n  - children: 3\n", "children must be a list"),
        ("views:\n  - 5\n", "must be a mapping"),
        ("views:\n  - type: label\n    text: 2024\n", "text must be a string"),
        ("views:\n  - type: button\n    title: [OK]\n", "title must be a string"),
        ("views:\n  - type: image\n    image: null\n", "image must be a string"),
    ],
)
def test_malformed_layouts_raise_value_error(loader, yaml_text, message):
    with pytest.raises(ValueError) as exc_info:
        loader.load_string(yaml_text)
    assert message in str(exc_info.value)


@pytest.mark.parametrize(
    "anchor,expected",
    [
        ("top_left", [0, 0]),
        ("center", [40, 45]),
        (Anchor.BOTTOM_RIGHT, [80, 90]),
        ("bottom_center", [40, 90]),
    ],
)
def test_resolve_anchor(anchor, expected):
    origin = resolve_anchor(anchor, np.array([100.0, 100.0]), np.array([20.0, 10.0]))
    assert np.allclose(origin, expected)


def test_resolve_unknown_anchor_raises():
    with pytest.raises(ValueError):
        resolve_anchor("nowhere", np.array([1.0, 1.0]), np.array([1.0, 1.0]))


def test_recycled_view_matches_newly_built_view(loader, root):
    first_pass = """
views:
  - type: label
    tag: 1
    frame: [0, 0, 100, 20]
    text: Old
"""
    second_pass = """
views:
  - type: label
    tag: 1
    frame: [0, 0, 100, 20]
"""
    (label,) = loader.load_string(first_pass).make_views(root)
    (recycled,) = loader.load_string(second_pass).make_views(root)
    (fresh,) = loader.load_string(second_pass).make_views()

    assert recycled is label
    assert recycled.text == fresh.text == ""


def test_pass_changing_label_to_view_builds_plain_view(loader, root):
    (label,) = loader.load_string("views:\n  - type: label\n    tag: 1\n    text: Hi\n").make_views(root)

    updated = loader.load_string("views:\n  - type: view\n    tag: 1\n")
    (view,) = updated.make_views(root)

    assert type(view) is View
    assert view.tag == 1
    assert label.superview is None
    assert root.subviews == [view]
    assert updated.last_stats.created == 1
    assert updated.last_stats.purged == 1
