"""Main entry point for viewrecycler."""

import argparse
import logging
from pathlib import Path

from .core.frame import Frame
from .core.view import View
from .layout import LayoutLoader
from .viewer import save_snapshot


def parse_size(value: str) -> tuple[int, int]:
    """Parse a WxH string into (width, height)."""
    try:
        width, height = map(int, value.lower().split("x"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}") from e
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return width, height


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Viewrecycler - apply layouts to a view tree, recycling views by tag",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Each layout is applied in turn to the same root view, so later\n"
            "layouts reuse the tagged views created by earlier ones."
        ),
    )
    parser.add_argument(
        "layouts",
        nargs="+",
        metavar="LAYOUT",
        help="Layout YAML files, applied in order",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Save a snapshot of the final view tree to an image file",
    )
    parser.add_argument(
        "--size",
        metavar="WxH",
        type=parse_size,
        default=(640, 480),
        help="Root view and snapshot size (default: 640x480)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every recycled and created view",
    )
    return parser.parse_args(argv)


def print_tree(root: View) -> None:
    """Print a view tree, one view per line indented by depth."""
    for view in root.iter_views(include_self=False):
        indent = "  " * (view.depth - 1)
        print(f"{indent}- {view.describe()}")


def main(argv: list[str] | None = None) -> int:
    """Apply each layout to one root view and report what was recycled."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    width, height = args.size
    root = View(frame=Frame.from_list([0, 0, width, height]))
    loader = LayoutLoader()

    print("Viewrecycler - Layout Passes")
    print("=" * 40)
    for i, layout_path in enumerate(args.layouts, start=1):
        arrangement = loader.load(layout_path)
        arrangement.make_views(root)

        print(f"\nPass {i}: {arrangement.name} ({layout_path})")
        print(f"  {arrangement.last_stats}")
        print_tree(root)

    if args.render:
        output_path = save_snapshot(root, Path(args.render), size=args.size)
        print(f"\nSaved snapshot to {output_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
