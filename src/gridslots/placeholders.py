"""
Placeholder generation for empty layout cells.

A layout engine renders one placeholder per empty grid cell so that free
slots can act as drop targets. `get_empty_placeholders` computes them from
the occupancy of the current layout; `pad_layout` merges them back into the
layout for callers that keep a single item list.

Example
-------
    from gridslots import get_empty_placeholders

    layout = [
        {"i": "1", "x": 0, "y": 0, "w": 1, "h": 1},
        {"i": "2", "x": 1, "y": 0, "w": 2, "h": 1},
    ]
    get_empty_placeholders(layout, 4)
    # [LayoutItem(i='placeholder-0-3', x=3, y=0, w=1, h=1, placeholder=True)]
"""

from dataclasses import replace
from typing import Optional

from .config import Config, default_config
from .layout import (
    DuplicateIdentifier,
    Layout,
    LayoutItem,
    LayoutLike,
    as_layout,
    validate_layout,
)
from .occupancy import Occupancy, check_columns, row_count


def placeholder_id(row: int, col: int) -> str:
    return f"placeholder-{row}-{col}"


def get_empty_placeholders(
    layout: LayoutLike,
    number_of_columns: int,
    config: Optional[Config] = None,
) -> Layout:
    """
    One 1x1 placeholder item for every empty cell of the layout grid.

    Args:
        layout: Current layout, as `LayoutItem`s or mappings with keys
            `i`, `x`, `y`, `w`, `h` and optionally `placeholder`.
        number_of_columns: Number of columns of the current breakpoint.
        config: Validation settings, `default_config()` when omitted.

    Returns:
        A new list of placeholder items in row-major order, with ids
        `placeholder-{row}-{col}`. Input placeholders do not occupy cells,
        so the slots they mark are reported again.
    """
    number_of_columns = check_columns(number_of_columns)
    config = config if config is not None else default_config()
    layout = as_layout(layout)
    if config.validate:
        validate_layout(layout)
    rows = row_count(layout)
    occupancy = Occupancy.from_layout(
        layout, number_of_columns, rows=rows, config=replace(config, validate=False)
    )

    return [
        LayoutItem(i=placeholder_id(row, col), x=col, y=row, w=1, h=1, placeholder=True)
        for row, col in occupancy.free_cells()
    ]


def strip_placeholders(layout: LayoutLike) -> Layout:
    """Non-placeholder items of `layout`, in order."""
    return [item for item in as_layout(layout) if not item.placeholder]


def pad_layout(
    layout: LayoutLike,
    number_of_columns: int,
    config: Optional[Config] = None,
) -> Layout:
    """
    The non-placeholder items of the layout followed by its empty
    placeholders. Placeholders already in the layout are regenerated, so
    padding a padded layout returns it unchanged.

    Raises `DuplicateIdentifier` if a generated placeholder id is already
    used by a content item of the layout.
    """
    layout = as_layout(layout)
    placeholders = get_empty_placeholders(layout, number_of_columns, config=config)
    content = strip_placeholders(layout)

    existing = {item.i for item in content}
    collisions = {item.i for item in placeholders if item.i in existing}
    if collisions:
        raise DuplicateIdentifier(collisions)

    return content + placeholders
