import pytest

from taskrun.args import Call, parse_v2, parse_v3
from taskrun.orderedmap import OrderedMap


def ordered(mapping, order):
    return OrderedMap.from_map_with_order(mapping, order)


V3_CASES = [
    (
        ["task-a", "task-b", "task-c"],
        [Call("task-a", direct=True), Call("task-b", direct=True), Call("task-c", direct=True)],
        None,
    ),
    (
        ["task-a", "FOO=bar", "task-b", "task-c", "BAR=baz", "BAZ=foo"],
        [Call("task-a", direct=True), Call("task-b", direct=True), Call("task-c", direct=True)],
        ordered({"FOO": "bar", "BAR": "baz", "BAZ": "foo"}, ["FOO", "BAR", "BAZ"]),
    ),
    (
        ["task-a", "CONTENT=with some spaces"],
        [Call("task-a", direct=True)],
        ordered({"CONTENT": "with some spaces"}, ["CONTENT"]),
    ),
    (
        ["FOO=bar", "task-a", "task-b"],
        [Call("task-a", direct=True), Call("task-b", direct=True)],
        ordered({"FOO": "bar"}, ["FOO"]),
    ),
    ([], [], None),
    (
        ["FOO=bar", "BAR=baz"],
        [],
        ordered({"FOO": "bar", "BAR": "baz"}, ["FOO", "BAR"]),
    ),
]


@pytest.mark.parametrize("args, expected_calls, expected_globals", V3_CASES)
def test_args_v3(args, expected_calls, expected_globals):
    calls, globals_ = parse_v3(*args)
    assert calls == expected_calls
    if expected_globals is None:
        assert len(globals_) == 0
    else:
        assert globals_.keys() == expected_globals.keys()
        assert globals_.values() == expected_globals.values()


V2_CASES = [
    (
        ["task-a", "task-b", "task-c"],
        [Call("task-a", direct=True), Call("task-b", direct=True), Call("task-c", direct=True)],
        None,
    ),
    (
        ["task-a", "FOO=bar", "task-b", "task-c", "BAR=baz", "BAZ=foo"],
        [
            Call("task-a", vars=ordered({"FOO": "bar"}, ["FOO"]), direct=True),
            Call("task-b", direct=True),
            Call(
                "task-c",
                vars=ordered({"BAR": "baz", "BAZ": "foo"}, ["BAR", "BAZ"]),
                direct=True,
            ),
        ],
        None,
    ),
    (
        ["task-a", "CONTENT=with some spaces"],
        [
            Call(
                "task-a",
                vars=ordered({"CONTENT": "with some spaces"}, ["CONTENT"]),
                direct=True,
            )
        ],
        None,
    ),
    (
        ["FOO=bar", "task-a", "task-b"],
        [Call("task-a", direct=True), Call("task-b", direct=True)],
        ordered({"FOO": "bar"}, ["FOO"]),
    ),
    ([], [], None),
    (
        ["FOO=bar", "BAR=baz"],
        [],
        ordered({"FOO": "bar", "BAR": "baz"}, ["FOO", "BAR"]),
    ),
]


@pytest.mark.parametrize("args, expected_calls, expected_globals", V2_CASES)
def test_args_v2(args, expected_calls, expected_globals):
    calls, globals_ = parse_v2(*args)
    assert calls == expected_calls
    if expected_globals is None:
        assert len(globals_) == 0
    else:
        assert globals_ == expected_globals


def test_value_keeps_later_equal_signs():
    _, globals_ = parse_v3("URL=a=b")
    assert globals_.get("URL") == "a=b"