import warnings
from numbers import Integral
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .config import Config, check_bounds_policy, default_config
from .layout import LayoutItem, LayoutLike, MalformedItem, as_layout, validate_layout


def check_columns(number_of_columns: object) -> int:
    if isinstance(number_of_columns, bool) or not isinstance(number_of_columns, Integral):
        raise ValueError(
            f"number_of_columns must be an integer, got {number_of_columns!r}"
        )
    if number_of_columns < 1:
        raise ValueError(
            f"number_of_columns must be positive, got {number_of_columns}"
        )
    return int(number_of_columns)


def row_count(layout: LayoutLike) -> int:
    """
    Number of rows spanned by a layout.

    The extent is taken from the last starting row plus the tallest item
    anchored there. Items starting higher up are assumed not to reach past
    it, which holds for non-overlapping layouts.
    """
    layout = as_layout(layout)
    last_row = max((item.y for item in layout), default=0)
    tallest = max((item.h for item in layout if item.y == last_row), default=0)
    return last_row + tallest


class Occupancy:
    """
    Boolean occupancy mask of a `rows x columns` layout grid, `True` where a
    non-placeholder item covers the cell.
    """

    def __init__(self, rows: int, columns: int):
        if rows < 0 or columns < 0:
            raise ValueError(
                f"Occupancy size must be non-negative, got {rows}x{columns}"
            )
        self.rows = rows
        self.columns = columns
        self._mask: NDArray[np.bool_] = np.zeros((rows, columns), dtype=bool)

    @staticmethod
    def from_layout(
        layout: LayoutLike,
        columns: int,
        rows: Optional[int] = None,
        config: Optional[Config] = None,
    ) -> "Occupancy":
        check_columns(columns)
        config = config if config is not None else default_config()
        check_bounds_policy(config.bounds_policy)
        layout = as_layout(layout)
        if config.validate:
            validate_layout(layout)
        if rows is None:
            rows = row_count(layout)

        occupancy = Occupancy(rows, columns)
        for item in layout:
            if not item.placeholder:
                occupancy.mark(item, bounds=config.bounds_policy)
        return occupancy

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    @property
    def mask(self) -> NDArray[np.bool_]:
        view = self._mask.view()
        view.flags.writeable = False
        return view

    def mark(self, item: LayoutItem, bounds: str = "raise") -> None:
        """
        Flag every cell covered by `item` as occupied.

        Cells outside the grid either raise `MalformedItem` (`bounds="raise"`)
        or are dropped with a `RuntimeWarning` (`bounds="clip"`).
        """
        policy = check_bounds_policy(bounds)

        inside = (
            item.x >= 0
            and item.y >= 0
            and item.right <= self.columns
            and item.bottom <= self.rows
        )
        if not inside:
            extent = (
                f"Item {item.i!r} at x={item.x}, y={item.y}, w={item.w}, h={item.h} "
                f"extends past the {self.rows}x{self.columns} grid"
            )
            if policy == "raise":
                raise MalformedItem(extent, item.i)
            warnings.warn(f"{extent}; dropping cells outside", RuntimeWarning)

        row0, row1 = max(item.y, 0), min(item.bottom, self.rows)
        col0, col1 = max(item.x, 0), min(item.right, self.columns)
        if row0 < row1 and col0 < col1:
            self._mask[row0:row1, col0:col1] = True

    def is_occupied(self, row: int, col: int) -> bool:
        return bool(self._mask[row, col])

    def free_cells(self) -> list[tuple[int, int]]:
        """Unoccupied (row, col) cells, row-major ascending."""
        return [(int(row), int(col)) for row, col in np.argwhere(~self._mask)]

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._mask))

    def free_count(self) -> int:
        return self._mask.size - self.occupied_count()

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if cell else "." for cell in row) for row in self._mask
        )

    def __repr__(self) -> str:
        return f"Occupancy(rows={self.rows}, columns={self.columns})"


def build_occupancy(
    layout: LayoutLike,
    number_of_columns: int,
    config: Optional[Config] = None,
) -> NDArray[np.bool_]:
    """
    Dense `row_count(layout) x number_of_columns` boolean matrix, `True` on
    cells covered by a non-placeholder item.

    Example: with three columns and the items
    `[{i: "1", x: 0, y: 0, w: 1, h: 1}, {i: "2", x: 1, y: 1, w: 2, h: 1}]`
    the grid is

        [1, *, *]
        [*, 2, 2]

    and the result is `[[True, False, False], [False, True, True]]`.
    """
    return Occupancy.from_layout(layout, number_of_columns, config=config).mask.copy()
