import pytest

from taskrun.orderedmap import OrderedMap


def _three():
    om = OrderedMap()
    om.set(3, "three")
    om.set(1, "one")
    om.set(2, "two")
    return om


def test_from_map():
    m = {3: "three", 1: "one", 2: "two"}
    om = OrderedMap.from_map(m)
    assert len(om) == 3
    assert sorted(om.keys()) == [1, 2, 3]
    for key, value in m.items():
        assert om.get(key) == value


def test_set_get_exists():
    om = OrderedMap()
    assert not om.exists(1)
    assert om.get(1, "") == ""
    om.set(1, "one")
    assert om.exists(1)
    assert om.get(1) == "one"


def test_sort():
    om = _three()
    om.sort()
    assert om.keys() == [1, 2, 3]


def test_sort_func_ascending():
    om = _three()
    om.sort_func(lambda i, j: (i > j) - (i < j))
    assert om.keys() == [1, 2, 3]


def test_sort_func_descending():
    om = _three()
    om.sort_func(lambda i, j: (j > i) - (j < i))
    assert om.keys() == [3, 2, 1]
    assert om.values() == ["three", "two", "one"]


def test_keys_values():
    om = _three()
    assert om.keys() == [3, 1, 2]
    assert om.values() == ["three", "one", "two"]


def test_range_items():
    om = _three()
    pairs = list(om.items())
    assert [k for k, _ in pairs] == [3, 1, 2]
    assert [v for _, v in pairs] == ["three", "one", "two"]


def test_merge():
    om1 = OrderedMap()
    om1.set("a", 1)
    om1.set("b", 2)
    om2 = OrderedMap()
    om2.set("b", 3)
    om2.set("c", 4)

    om1.merge(om2)

    assert om1.keys() == ["a", "b", "c"]
    assert len(om1) == 3
    for key, value in zip(["a", "b", "c"], [1, 3, 4]):
        assert om1.exists(key)
        assert om1.get(key) == value


def test_unmarshal_yaml():
    om = OrderedMap.from_yaml("\n3: three\n1: one\n2: two\n")
    assert om.keys() == [3, 1, 2]
    assert om.values() == ["three", "one", "two"]


def test_unmarshal_yaml_rejects_non_mapping():
    with pytest.raises(ValueError, match="into variables"):
        OrderedMap.from_yaml("- a\n- b\n")


def test_from_map_with_order():
    om = OrderedMap.from_map_with_order({"FOO": 1, "BAR": 2}, ["BAR", "FOO"])
    assert om.keys() == ["BAR", "FOO"]
    assert om.values() == [2, 1]


def test_from_map_with_order_length_mismatch():
    with pytest.raises(ValueError, match="length of map and order must be equal"):
        OrderedMap.from_map_with_order({"a": 1}, ["a", "b"])


def test_from_map_with_order_key_mismatch():
    with pytest.raises(ValueError, match="order keys must match map keys"):
        OrderedMap.from_map_with_order({"a": 1}, ["b"])


def test_set_existing_key_keeps_position():
    om = _three()
    om.set(3, "THREE")
    assert om.keys() == [3, 1, 2]
    assert om.get(3) == "THREE"


def test_deep_copy_is_independent():
    inner = OrderedMap()
    inner.set("x", 1)
    om = OrderedMap()
    om.set("inner", inner)
    copied = om.deep_copy()
    assert copied.keys() == ["inner"]
    inner.set("y", 2)
    om.set("other", 5)
    assert copied.keys() == ["inner"]
    copied_inner = copied.get("inner")
    assert copied_inner.keys() == ["x"]