from __future__ import annotations

import copy
import io
from dataclasses import dataclass

import pytest

from datashape import ScalarRef, Skeletonizer, UnsupportedInputError, deflesh


class TestMe:
    __test__ = False

    def __init__(self) -> None:
        self.code = lambda: "I am code"


@dataclass
class Page:
    title: str
    sections: list


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int) -> None:
        self.x = x


def test_deflesh_blanks_leaves_and_keeps_keys() -> None:
    data = {"id": 4, "name": "pie", "meta": {"author": "mateu", "draft": False, "score": 1.5}}
    assert deflesh(data) == {"id": "", "name": "", "meta": {"author": "", "draft": "", "score": ""}}


def test_scalar_only_array_collapses_to_marker() -> None:
    assert deflesh({"tags": ["a", "b", 3]}) == {"tags": ""}
    assert deflesh(["a", "b", 3]) == ""
    assert deflesh({"empty": []}) == {"empty": ""}


def test_mixed_array_keeps_length_and_blanks_scalars() -> None:
    data = {"rows": [{"a": 1}, 2, [{"b": 2}], [1, 2], None]}
    assert deflesh(data) == {"rows": [{"a": ""}, "", [{"b": ""}], "", ""]}


def test_custom_value_marker() -> None:
    data = {"a": 1, "b": [{"c": "x"}, "y"], "d": ["only", "scalars"]}
    assert deflesh(data, "X") == {"a": "X", "b": [{"c": "X"}, "X"], "d": "X"}
    assert Skeletonizer(value_marker=None).deflesh({"a": 1}) == {"a": None}


def test_marker_is_used_as_given() -> None:
    class Blank(str):
        pass

    marker = Blank("")
    result = deflesh({"a": 1, "b": [{"c": 2}]}, marker)
    assert result["a"] is marker
    assert result["b"][0]["c"] is marker


def test_record_is_tagged_with_its_class_name() -> None:
    assert deflesh(TestMe()) == {"code": "", "BLESSED_AS": "TestMe"}
    assert deflesh({"obj": TestMe()}) == {"obj": {"code": "", "BLESSED_AS": "TestMe"}}


def test_dataclass_and_slots_records_are_walked() -> None:
    page = Page(title="Ice Cream", sections=[{"content": "h1"}, "raw"])
    assert deflesh({"page": page}) == {
        "page": {"title": "", "sections": [{"content": ""}, ""], "BLESSED_AS": "Page"},
    }
    assert deflesh({"point": Point(3)}) == {"point": {"x": "", "BLESSED_AS": "Point"}}


def test_records_inside_arrays_are_blanked_as_scalars() -> None:
    assert deflesh([{"a": 1}, TestMe()]) == [{"a": ""}, ""]


def test_opaque_values_become_descriptive_strings() -> None:
    handle = io.StringIO("data")
    assert deflesh({"handle": handle, "thing": object()}) == {
        "handle": "StringIO object",
        "thing": "object object",
    }


def test_scalar_refs_are_blanked_without_unwrapping() -> None:
    assert deflesh({"ref": ScalarRef({"nested": 1})}) == {"ref": ""}


def test_unrecognized_values_pass_through() -> None:
    tags = {"a", "b"}
    result = deflesh({"tags": tags})
    assert result["tags"] is tags


def test_tuples_are_sequences() -> None:
    assert deflesh({"pair": ({"a": 1}, "b")}) == {"pair": [{"a": ""}, ""]}


def test_deflesh_does_not_mutate_input() -> None:
    data = {"a": [{"b": 1, "c": [1, 2]}], "d": {"e": None}}
    snapshot = copy.deepcopy(data)
    result = deflesh(data)
    assert data == snapshot
    assert result["d"] is not data["d"]


def test_deflesh_is_stable_on_blanked_output() -> None:
    once = deflesh({"a": {"b": 1}, "c": [{"d": 2}]})
    assert deflesh(once) == once


@pytest.mark.parametrize("value", ["string", 42, None, ScalarRef(1), io.StringIO(), {"a"}])
def test_top_level_rejects_non_containers(value: object) -> None:
    with pytest.raises(UnsupportedInputError, match="either a hash or an array reference"):
        deflesh(value)
