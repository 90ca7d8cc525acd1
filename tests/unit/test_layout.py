import numpy as np
import pytest

from gridslots.layout import (
    DuplicateIdentifier,
    LayoutItem,
    MalformedItem,
    as_layout,
)


def test_from_dict_defaults_placeholder_to_false():
    item = LayoutItem.from_dict({"i": "a", "x": 1, "y": 2, "w": 3, "h": 4})

    assert item == LayoutItem("a", 1, 2, 3, 4)
    assert item.placeholder is False


def test_from_dict_ignores_unknown_keys():
    item = LayoutItem.from_dict(
        {"i": "a", "x": 0, "y": 0, "w": 1, "h": 1, "static": True, "minW": 2}
    )
    assert item == LayoutItem("a", 0, 0, 1, 1)


@pytest.mark.parametrize("item_id", [None, 7, b"a"])
def test_from_dict_rejects_non_string_ids(item_id):
    with pytest.raises(MalformedItem, match="id must be a string"):
        LayoutItem.from_dict({"i": item_id, "x": 0, "y": 0, "w": 1, "h": 1})


def test_validate_rejects_non_string_ids():
    with pytest.raises(MalformedItem, match="id must be a string") as excinfo:
        LayoutItem(3, 0, 0, 1, 1).validate()
    assert excinfo.value.item_id == 3


def test_from_dict_missing_keys():
    with pytest.raises(MalformedItem, match="missing keys: w, h") as excinfo:
        LayoutItem.from_dict({"i": "a", "x": 0, "y": 0})
    assert excinfo.value.item_id == "a"


def test_to_dict_only_flags_placeholders():
    assert LayoutItem("a", 0, 1, 2, 3).to_dict() == {
        "i": "a", "x": 0, "y": 1, "w": 2, "h": 3,
    }
    assert LayoutItem("p", 3, 0, 1, 1, placeholder=True).to_dict() == {
        "i": "p", "x": 3, "y": 0, "w": 1, "h": 1, "placeholder": True,
    }


def test_cells_row_major():
    item = LayoutItem("a", x=1, y=2, w=2, h=2)
    assert list(item.cells()) == [(2, 1), (2, 2), (3, 1), (3, 2)]
    assert item.right == 3
    assert item.bottom == 4


class TestValidate:
    def test_accepts_numpy_integers(self):
        item = LayoutItem("a", np.int64(0), np.int32(1), np.int8(2), 1)
        assert item.validate() is item

    @pytest.mark.parametrize(
        "x, y, w, h",
        [(-1, 0, 1, 1), (0, -1, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_rejects_bad_geometry(self, x, y, w, h):
        with pytest.raises(MalformedItem) as excinfo:
            LayoutItem("bad", x, y, w, h).validate()
        assert excinfo.value.item_id == "bad"
        assert "'bad'" in str(excinfo.value)

    @pytest.mark.parametrize("value", [1.5, "1", True, None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(MalformedItem, match="must be an integer"):
            LayoutItem("a", value, 0, 1, 1).validate()


def test_as_layout_mixes_items_and_mappings():
    item = LayoutItem("a", 0, 0, 1, 1)
    layout = as_layout([item, {"i": "b", "x": 1, "y": 0, "w": 1, "h": 1, "placeholder": True}])

    assert layout[0] is item
    assert layout[1] == LayoutItem("b", 1, 0, 1, 1, placeholder=True)


def test_as_layout_rejects_other_types():
    with pytest.raises(TypeError):
        as_layout([(0, 0, 1, 1)])


def test_duplicate_identifier_lists_sorted_ids():
    err = DuplicateIdentifier({"placeholder-1-0", "placeholder-0-2"})
    assert err.ids == ["placeholder-0-2", "placeholder-1-0"]
    assert str(err) == "Duplicate layout item ids: placeholder-0-2, placeholder-1-0"
