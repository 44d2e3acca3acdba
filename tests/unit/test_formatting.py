# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from ipaddress import ip_address
from typing import NamedTuple

import pytest
from pydantic import BaseModel

from iterwiz.config import StringifyConfig
from iterwiz.formatting import format_element, format_sequence, stringify
from tests.fixtures.records import FIXED_DOB, Person, Plain, Tagged, build_family

pytestmark = pytest.mark.unit


class Colour(Enum):
    RED = "red"


class Point(NamedTuple):
    x: int
    y: int


class Account(BaseModel):
    owner: str
    balance: Decimal
    active: bool = True


@dataclass
class Node:
    name: str
    child: Node | None = None


def test_stringify_none_returns_empty_string() -> None:
    assert stringify(None) == ""


def test_stringify_empty_sequence_returns_empty_string() -> None:
    assert stringify([]) == ""
    assert stringify(iter(())) == ""


def test_stringify_only_nulls_returns_empty_string() -> None:
    assert stringify([None, None, None]) == ""


def test_stringify_single_record_renders_scalars_in_declared_order() -> None:
    person = Person(Name="Ada", Age=36, Dob=FIXED_DOB)
    assert stringify([person]) == (
        '{ "Name": "Ada", "Age": 36, "Dob": 2024-01-02 03:04:05+00:00, "Classes": null }'
    )


def test_stringify_concrete_family_scenario_drops_trailing_null() -> None:
    expected = (
        '{ "Name": "My Name is 0", "Age": 0, "Dob": 2024-01-02 03:04:05+00:00, "Classes": ['
        '{ "Name": "child 1", "Age": 1, "Dob": null, "Classes": null }, '
        '{ "Name": "child 2", "Age": 2, "Dob": null, "Classes": null }'
        "] }"
    )
    assert stringify([build_family(0), None]) == expected


def test_stringify_separates_elements_and_ignores_interleaved_nulls() -> None:
    first = Person(Name="a", Age=1)
    second = Person(Name="b", Age=2)
    joined = format_element(first) + ", " + format_element(second)

    assert stringify([first, second]) == joined
    assert stringify([first, None, second]) == joined
    assert stringify([None, first, None, None, second, None]) == joined


def test_stringify_empty_nested_sequence_renders_brackets() -> None:
    assert stringify([Person(Name="x", Classes=[])]) == (
        '{ "Name": "x", "Age": 0, "Dob": null, "Classes": [] }'
    )


def test_stringify_null_nested_sequence_renders_null() -> None:
    rendered = stringify([Person(Name="x")])
    assert '"Classes": null' in rendered
    assert "[]" not in rendered


def test_stringify_nested_scalar_items_use_scalar_rules() -> None:
    assert stringify([Tagged(label="t", tags=["a", "b"])]) == '{ "label": "t", "tags": ["a", "b"] }'


def test_stringify_does_not_escape_embedded_quotes_by_default() -> None:
    assert stringify([Tagged(label='say "hi"')]) == '{ "label": "say "hi"", "tags": [] }'


def test_stringify_escape_strings_emits_valid_json_text() -> None:
    config = StringifyConfig(escape_strings=True)
    assert stringify([Tagged(label='say "hi"')], config=config) == (
        '{ "label": "say \\"hi\\"", "tags": [] }'
    )


def test_stringify_reads_generators_once() -> None:
    people = (Person(Name=str(index), Age=index) for index in range(3))
    rendered = stringify(people)
    assert rendered.count("{ ") == 3
    assert stringify(people) == ""


def test_stringify_does_not_mutate_input() -> None:
    family = build_family(3)
    items = [family, None]
    _ = stringify(items)
    assert items == [family, None]
    assert family.Classes is not None and len(family.Classes) == 2


def test_stringify_is_deterministic() -> None:
    items = [build_family(1), build_family(2)]
    assert stringify(items) == stringify(items)


def test_stringify_renders_mappings_in_key_order() -> None:
    payload = OrderedDict([("b", 1), ("a", None), ("c", {"inner": True})])
    assert stringify([payload]) == '{ "b": 1, "a": null, "c": { "inner": True } }'


def test_stringify_renders_pydantic_models_and_named_tuples() -> None:
    account = Account(owner="ops", balance=Decimal("1.50"))
    assert stringify([account]) == '{ "owner": "ops", "balance": 1.50, "active": True }'
    assert stringify([Point(1, 2)]) == '{ "x": 1, "y": 2 }'


def test_stringify_renders_plain_objects_without_private_attributes() -> None:
    assert stringify([Plain("one", 2)]) == '{ "first": "one", "second": 2 }'
    assert stringify([Plain("one", 2)], config=StringifyConfig(include_private=True)) == (
        '{ "first": "one", "second": 2, "_hidden": "secret" }'
    )


def test_stringify_renders_enums_unquoted() -> None:
    assert stringify([{"colour": Colour.RED}]) == '{ "colour": Colour.RED }'


def test_stringify_renders_underscore_mapping_keys() -> None:
    assert stringify([{"_id": 7, "name": "x"}]) == '{ "_id": 7, "name": "x" }'


def test_stringify_renders_opaque_values_with_default_text() -> None:
    payload = {"ip": ip_address("10.0.0.1"), "error": KeyError("k")}
    assert stringify([payload]) == "{ \"ip\": 10.0.0.1, \"error\": 'k' }"


def test_stringify_expands_nested_records() -> None:
    assert stringify([Node("root", Node("leaf"))]) == (
        '{ "name": "root", "child": { "name": "leaf", "child": null } }'
    )


def test_stringify_top_level_scalars_fall_back_to_default_text() -> None:
    assert stringify([1, "two", None, 3.5]) == '1, "two", 3.5'


def test_stringify_honours_custom_separator_and_null_token() -> None:
    config = StringifyConfig(separator="; ", null_token="NULL")
    first = Person(Name="a")
    second = Person(Name=None, Age=2)
    assert stringify([first, second], config=config) == (
        '{ "Name": "a"; "Age": 0; "Dob": NULL; "Classes": NULL }; '
        '{ "Name": NULL; "Age": 2; "Dob": NULL; "Classes": NULL }'
    )


def test_stringify_cyclic_graph_exhausts_recursion() -> None:
    node = Node("loop")
    node.child = node
    with pytest.raises(RecursionError):
        _ = stringify([node])


def test_stringify_logs_debug_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="iterwiz.formatting"):
        _ = stringify([Person(Name="a"), None])
    records = [record for record in caplog.records if record.name == "iterwiz.formatting"]
    assert records
    assert getattr(records[-1], "count", None) == 1
    assert getattr(records[-1], "component", None) == "formatting"


def test_format_element_without_attributes_renders_empty_braces() -> None:
    class Empty:
        pass

    assert format_element(Empty()) == "{  }"


def test_format_sequence_none_and_empty() -> None:
    assert format_sequence(None) == "null"
    assert format_sequence([]) == "[]"
    assert format_sequence([None, Point(0, 1)]) == '[null, { "x": 0, "y": 1 }]'
