"""Frame class for 2D view geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self, Sequence

import numpy as np
from numpy.typing import NDArray


@dataclass(eq=False)
class Frame:
    """A rectangle in the coordinate space of a view's superview.

    Origin is the top-left corner; size is (width, height).
    """

    origin: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )
    size: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        self.origin = np.asarray(self.origin, dtype=np.float64).reshape(2)
        self.size = np.asarray(self.size, dtype=np.float64).reshape(2)

    @classmethod
    def from_list(cls, values: Sequence[float]) -> Self:
        """Create a Frame from [x, y, width, height].

        Raises:
            ValueError: If values does not hold four numbers or the size is negative
        """
        if len(values) != 4:
            raise ValueError(f"Frame needs [x, y, width, height], got {list(values)}")
        arr = np.asarray(values, dtype=np.float64)
        if np.any(arr[2:] < 0):
            raise ValueError(f"Frame size must be non-negative, got {arr[2:].tolist()}")
        return cls(origin=arr[:2], size=arr[2:])

    @staticmethod
    def zero() -> Frame:
        """Create an empty frame at the origin."""
        return Frame()

    @property
    def width(self) -> float:
        return float(self.size[0])

    @property
    def height(self) -> float:
        return float(self.size[1])

    def offset(self, dx: float, dy: float) -> Frame:
        """Return a copy of this frame moved by (dx, dy)."""
        return Frame(origin=self.origin + np.array([dx, dy]), size=self.size.copy())

    def contains(self, point: Sequence[float]) -> bool:
        """Check whether a point lies inside the frame (edges inclusive)."""
        p = np.asarray(point, dtype=np.float64)
        return bool(np.all(p >= self.origin) and np.all(p <= self.origin + self.size))

    def to_list(self) -> list[float]:
        """Convert to [x, y, width, height]."""
        return [*self.origin.tolist(), *self.size.tolist()]

    def copy(self) -> Self:
        """Create a deep copy of this frame."""
        return Frame(origin=self.origin.copy(), size=self.size.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return bool(
            np.array_equal(self.origin, other.origin)
            and np.array_equal(self.size, other.size)
        )

    def __repr__(self) -> str:
        x, y, w, h = (f"{v:g}" for v in self.to_list())
        return f"Frame({x}, {y}, {w}x{h})"
