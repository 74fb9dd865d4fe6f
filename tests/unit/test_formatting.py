"""Unit tests for message rendering helpers."""

from __future__ import annotations

import dataclasses
import datetime
import json

from simplelog.formatting import dump_json, render_args, render_format


@dataclasses.dataclass
class Order:
    id: str
    total: float


class TestRenderArgs:
    def test_joins_with_single_spaces(self) -> None:
        assert render_args(["a", 1, 2.5, None]) == "a 1 2.5 None"

    def test_empty(self) -> None:
        assert render_args([]) == ""

    def test_dataclass_uses_verbose_repr(self) -> None:
        assert render_args([Order("o-1", 9.5)]) == "Order(id='o-1', total=9.5)"

    def test_custom_formatter(self) -> None:
        assert render_args(["a", "b"], str.upper) == "A B"


class TestRenderFormat:
    def test_positional(self) -> None:
        assert render_format("%s has %d items", ("cart", 3)) == "cart has 3 items"

    def test_no_args_keeps_percent(self) -> None:
        assert render_format("100%", ()) == "100%"

    def test_single_mapping_argument(self) -> None:
        assert render_format("%(user)s logged in", ({"user": "bob"},)) == "bob logged in"

    def test_mapping_with_positional_directive(self) -> None:
        assert render_format("payload=%s", ({"a": 1},)) == "payload={'a': 1}"

    def test_too_few_args(self) -> None:
        assert render_format("%s %s", ("x",)) == "%s %s 'x'"

    def test_too_many_args(self) -> None:
        assert render_format("only %s", ("a", "b")) == "only %s 'a' 'b'"

    def test_bad_directive(self) -> None:
        assert render_format("%d", ("nan",)) == "%d 'nan'"


class TestDumpJson:
    def test_indent_four(self) -> None:
        assert dump_json({"a": 1}) == json.dumps({"a": 1}, indent=4)

    def test_preserves_key_order(self) -> None:
        assert list(json.loads(dump_json({"b": 1, "a": 2}))) == ["b", "a"]

    def test_dataclass(self) -> None:
        assert json.loads(dump_json(Order("o-1", 9.5))) == {"id": "o-1", "total": 9.5}

    def test_datetime(self) -> None:
        ts = datetime.datetime(2024, 1, 2, 3, 4, 5)
        assert json.loads(dump_json({"at": ts})) == {"at": "2024-01-02T03:04:05"}

    def test_set(self) -> None:
        assert json.loads(dump_json({"tags": {"b", "a"}})) == {"tags": ["a", "b"]}

    def test_non_ascii_kept(self) -> None:
        assert "日本" in dump_json({"name": "日本"})

    def test_unserialisable_is_empty(self) -> None:
        assert dump_json(object()) == ""

    def test_nan_is_allowed(self) -> None:
        assert dump_json(float("nan")) == "NaN"


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("str broke")

    def __repr__(self) -> str:
        raise RuntimeError("repr broke")


class TestUnprintableArguments:
    def test_render_args_marks_argument(self) -> None:
        assert render_args(["a", Unprintable(), 1]) == "a <unprintable Unprintable> 1"

    def test_render_format_falls_back(self) -> None:
        assert render_format("x=%s", (Unprintable(),)) == "x=%s <unprintable Unprintable>"

    def test_render_format_mapping_falls_back(self) -> None:
        assert render_format("%(k)s", ({"k": Unprintable()},)) == "%(k)s <unprintable dict>"
