import datetime

import pytest

from consulcfg.business_logic.kv_pathmap import encode_leaf, flatten_to_kv, join_key
from consulcfg.pipeline.kv_record import KVRecord
from consulcfg.utils.errors import EncodingError, InternalConsistencyError, InvalidRootError


def as_pairs(records):
    return [(r.key, r.value) for r in records]


def test_nested_keys_join_every_level():
    tree = {"a": {"b": {"c": {"d": "leaf"}}}}

    records = flatten_to_kv("", tree)

    assert as_pairs(records) == [("a/b/c/d", "leaf")]
    assert records[0].key.split("/") == ["a", "b", "c", "d"]


def test_string_leaves_are_not_quoted():
    tree = {"msg": 'say "hi"\n', "empty": "", "path": "/var/lib/app"}

    records = flatten_to_kv("", tree)

    assert dict(as_pairs(records)) == tree


@pytest.mark.parametrize("value, expected", [
    (5432, "5432"),
    (1.5, "1.5"),
    (True, "true"),
    (False, "false"),
    (None, "null"),
    ([1, 2], "[1,2]"),
    (["a", "b"], '["a","b"]'),
    ([{"name": "x", "id": 1}], '[{"id":1,"name":"x"}]'),
    ([], "[]"),
])
def test_non_string_leaves_are_compact_json(value, expected):
    assert encode_leaf("k", value) == expected


def test_non_ascii_is_kept():
    assert encode_leaf("k", ["żółw"]) == '["żółw"]'


def test_dates_encode_as_iso_strings():
    assert encode_leaf("k", datetime.date(1979, 5, 27)) == '"1979-05-27"'
    assert encode_leaf("k", datetime.datetime(1979, 5, 27, 7, 32)) == '"1979-05-27T07:32:00"'


@pytest.mark.parametrize("value", [float("nan"), float("inf"), {1, 2}, object()])
def test_unencodable_leaf_raises(value):
    with pytest.raises(EncodingError) as exc:
        flatten_to_kv("", {"bad": value})

    assert exc.value.key == "bad"


def test_prefix_injection():
    tree = {"a": {"b": "x"}}

    assert as_pairs(flatten_to_kv("myconfig/app", tree)) == [("myconfig/app/a/b", "x")]
    assert as_pairs(flatten_to_kv("", tree)) == [("a/b", "x")]


def test_prefix_is_used_verbatim():
    assert as_pairs(flatten_to_kv("app/", {"a": "x"})) == [("app//a", "x")]


def test_db_example():
    records = flatten_to_kv("", {"db": {"host": "localhost", "port": 5432}})

    assert records == [
        KVRecord(key="db/host", flags=0, value="localhost"),
        KVRecord(key="db/port", flags=0, value="5432"),
    ]


def test_list_leaf_with_prefix():
    records = flatten_to_kv("app", {"tags": ["a", "b"]})

    assert [r.to_dict() for r in records] == [{"key": "app/tags", "flags": 0, "value": '["a","b"]'}]


def test_empty_mapping_yields_nothing():
    assert flatten_to_kv("app", {}) == []


def test_empty_nested_mapping_yields_nothing():
    assert flatten_to_kv("", {"a": {}, "b": "x"}) == [KVRecord(key="b", value="x")]


def test_each_entry_is_fully_expanded_before_the_next():
    tree = {
        "a": {"b": 1, "c": {"d": 2}},
        "e": 3,
        "f": {"g": 4},
    }

    keys = [r.key for r in flatten_to_kv("", tree)]

    assert keys == ["a/b", "a/c/d", "e", "f/g"]


def test_sort_keys_orders_every_level():
    tree = {"z": 1, "a": {"y": 2, "b": 3}}

    keys = [r.key for r in flatten_to_kv("", tree, sort_keys=True)]

    assert keys == ["a/b", "a/y", "z"]


def test_output_accumulates_across_documents():
    first = {"a": "1", "b": {"c": 2}}
    second = {"d": [True]}

    combined = flatten_to_kv("p", first)
    returned = flatten_to_kv("p", second, combined)

    assert returned is combined
    assert combined == flatten_to_kv("p", first) + flatten_to_kv("p", second)


def test_flatten_does_not_touch_the_tree():
    tree = {"a": {"b": [1, 2]}}

    flatten_to_kv("x", tree)

    assert tree == {"a": {"b": [1, 2]}}


@pytest.mark.parametrize("root", ["scalar", 42, None, [{"a": 1}]])
def test_non_mapping_root_is_rejected(root):
    with pytest.raises(InvalidRootError):
        flatten_to_kv("", root)


def test_non_string_mapping_keys_abort():
    with pytest.raises(InternalConsistencyError) as exc:
        flatten_to_kv("", {"ports": {80: "http"}})

    assert exc.value.key == "ports"


def test_deep_trees_do_not_hit_recursion_limit():
    tree = node = {}
    for _ in range(2000):
        node["n"] = {}
        node = node["n"]
    node["leaf"] = "x"

    records = flatten_to_kv("", tree)

    assert len(records) == 1
    assert records[0].key.count("/") == 2000


def test_join_key():
    assert join_key("", "a") == "a"
    assert join_key("a", "b") == "a/b"
