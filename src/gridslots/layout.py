from dataclasses import dataclass
from collections.abc import Iterable, Iterator, Mapping, Sequence
from numbers import Integral
from typing import Union


class MalformedItem(ValueError):
    """Exception raised when a layout item has invalid geometry."""

    def __init__(self, message: str, item_id: object = None):
        super().__init__(message)
        self.item_id = item_id


class DuplicateIdentifier(ValueError):
    """Exception raised when merged layouts share item identifiers."""

    def __init__(self, ids: Iterable[str]):
        self.ids = sorted(ids)
        super().__init__(f"Duplicate layout item ids: {', '.join(self.ids)}")


_REQUIRED_KEYS = ("i", "x", "y", "w", "h")


@dataclass(frozen=True)
class LayoutItem:
    """
    A rectangle on the integer layout grid.

    `x` and `y` give the top-left column and row, `w` and `h` the size in
    cells. Items flagged as `placeholder` mark an empty slot and never
    occupy the grid.
    """

    i: str
    x: int
    y: int
    w: int
    h: int
    placeholder: bool = False

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    def cells(self) -> Iterator[tuple[int, int]]:
        """Covered (row, col) cells in row-major order."""
        for row in range(self.y, self.bottom):
            for col in range(self.x, self.right):
                yield row, col

    def validate(self) -> "LayoutItem":
        if not isinstance(self.i, str):
            raise MalformedItem(
                f"Item id must be a string, got {self.i!r}", self.i
            )
        for name in ("x", "y", "w", "h"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise MalformedItem(
                    f"Item {self.i!r}: {name} must be an integer, got {value!r}",
                    self.i,
                )
        if self.x < 0 or self.y < 0:
            raise MalformedItem(
                f"Item {self.i!r}: coordinates must be non-negative, "
                f"got x={self.x}, y={self.y}",
                self.i,
            )
        if self.w < 1 or self.h < 1:
            raise MalformedItem(
                f"Item {self.i!r}: size must be at least 1x1, got w={self.w}, h={self.h}",
                self.i,
            )
        return self

    @staticmethod
    def from_dict(data: Mapping[str, object]) -> "LayoutItem":
        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise MalformedItem(
                f"Item {data.get('i')!r} is missing keys: {', '.join(missing)}",
                data.get("i"),
            )
        if not isinstance(data["i"], str):
            raise MalformedItem(
                f"Item id must be a string, got {data['i']!r}", data["i"]
            )
        return LayoutItem(
            i=data["i"],
            x=data["x"],
            y=data["y"],
            w=data["w"],
            h=data["h"],
            placeholder=bool(data.get("placeholder", False)),
        )

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "i": self.i,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
        }
        if self.placeholder:
            data["placeholder"] = True
        return data


Layout = list[LayoutItem]
LayoutLike = Sequence[Union[LayoutItem, Mapping[str, object]]]


def validate_layout(layout: Layout) -> Layout:
    """Raise `MalformedItem` for the first item with invalid geometry."""
    for item in layout:
        item.validate()
    return layout


def as_layout(items: LayoutLike) -> Layout:
    """
    Coerce a sequence of `LayoutItem`s or JSON-like mappings into a layout,
    preserving order.
    """
    layout: Layout = []
    for item in items:
        if isinstance(item, LayoutItem):
            layout.append(item)
        elif isinstance(item, Mapping):
            layout.append(LayoutItem.from_dict(item))
        else:
            raise TypeError(f"Unsupported type for layout item: {type(item)}")
    return layout
