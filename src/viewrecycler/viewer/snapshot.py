"""Debug snapshots of view hierarchies drawn with Pillow."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw

from ..core.view import Button, ImageView, Label, View

# Outline colors per view class, RGB
OUTLINE_COLORS: dict[type[View], tuple[int, int, int]] = {
    View: (90, 90, 90),
    Label: (31, 119, 180),
    ImageView: (44, 160, 44),
    Button: (214, 39, 40),
}

TAGGED_FILL = (255, 247, 214)


def _caption(view: View) -> str | None:
    if isinstance(view, Label):
        return view.text
    if isinstance(view, Button):
        return view.title
    if isinstance(view, ImageView):
        return view.image_name
    return None


def render_snapshot(
    root: View,
    size: tuple[int, int] = (640, 480),
    background: tuple[int, int, int] = (255, 255, 255),
) -> Image.Image:
    """Draw every view under root as an outlined rectangle.

    Views are drawn back to front in absolute coordinates. Tagged views get
    a light fill so recycled regions stand out; labels, buttons and image
    views are captioned with their text, title or image name.

    Args:
        root: Root of the hierarchy (drawn too)
        size: Image size (width, height)
        background: Background RGB color

    Returns:
        PIL Image in RGB mode
    """
    image = Image.new("RGB", size, background)
    draw = ImageDraw.Draw(image)

    for view in root.iter_views():
        frame = view.absolute_frame()
        x0, y0 = frame.origin
        x1, y1 = frame.origin + frame.size
        if x1 <= x0 or y1 <= y0:
            continue

        outline = OUTLINE_COLORS.get(type(view), OUTLINE_COLORS[View])
        fill = TAGGED_FILL if view.tag != 0 else None
        draw.rectangle([x0, y0, x1, y1], outline=outline, fill=fill)

        caption = _caption(view)
        if caption:
            draw.text((x0 + 2, y0 + 2), str(caption), fill=outline)

    return image


def save_snapshot(root: View, path: str | Path, size: tuple[int, int] = (640, 480)) -> Path:
    """Render a snapshot and save it to path.

    Returns:
        The path the image was written to
    """
    path = Path(path)
    render_snapshot(root, size=size).save(str(path))
    return path
