from __future__ import annotations

import logging

import pytest

from clitc import ParamSchema, parse_tokens


@pytest.fixture(params=[True, False], ids=["sequential", "location"])
def schema(request, example_schema):
    example_schema.set_sequential_processing(request.param)
    return example_schema


def test_mixed_alias_and_name(schema):
    result = schema.parse_str_whitespace("-l 2 2.345 --example MyName")
    assert result == {
        "--lifetime": {"secs": 2, "expected_val": 2.345},
        "--example": {"0": "MyName"},
    }
    assert isinstance(result["--lifetime"]["secs"], int)
    assert isinstance(result["--lifetime"]["expected_val"], float)
    assert list(result) == ["--lifetime", "--example"]


def test_no_argument_command(commands_schema):
    commands_schema.set_sequential_processing(True)
    assert commands_schema.parse_vec(["start"]) == {"start": {}}


def test_nothing_matched(schema):
    assert schema.parse_vec(["hello", "world"]) == {}
    assert schema.parse_vec([]) == {}


def test_leading_unmatched_tokens_are_discarded(schema):
    result = schema.parse_vec(["noise", "more", "-e", "value"])
    assert result == {"--example": {"0": "value"}}


def test_partial_match_omits_trailing_keys(schema):
    assert schema.parse_vec(["-l", "2"]) == {"--lifetime": {"secs": 2}}


def test_failed_number_is_omitted(schema):
    result = schema.parse_vec(["-l", "two", "2.5", "-v"])
    assert result == {"--lifetime": {"expected_val": 2.5}, "--verbose": {}}


def test_later_match_overwrites_earlier(schema):
    result = schema.parse_vec(["-e", "first", "--example", "second"])
    assert result == {"--example": {"0": "second"}}


def test_caller_tokens_are_not_modified(schema):
    tokens = ["-l", "2", "3.5"]
    schema.parse_vec(tokens)
    assert tokens == ["-l", "2", "3.5"]


def test_parse_str_uses_given_splitter(schema):
    result = schema.parse_str("-e,Name", lambda text: text.split(","))
    assert result == {"--example": {"0": "Name"}}


def test_location_window_stops_at_next_command(example_schema):
    # sequential mode would let -l consume "-v" as a failed int
    result = example_schema.parse_vec(["-l", "-v"])
    assert result == {"--lifetime": {}, "--verbose": {}}


def test_sequential_consumes_command_tokens_as_values(example_schema):
    example_schema.set_sequential_processing(True)
    result = example_schema.parse_vec(["-e", "-v"])
    assert result == {"--example": {"0": "-v"}}


def test_location_trailing_tokens_go_to_last_command(example_schema):
    result = example_schema.parse_vec(["-v", "x", "-e", "a", "b"])
    assert result == {"--verbose": {}, "--example": {"0": "a"}}


def test_array_in_sequential_mode_leaves_tokens_for_next_command(commands_schema):
    commands_schema.set_sequential_processing(True)
    result = parse_tokens(commands_schema, ["echo", "a", "show", "3"])
    assert result == {"echo": {"words": ["a", "show", "3"]}, "show": {"index": 3}}


def test_array_in_location_mode_takes_its_window(commands_schema):
    result = parse_tokens(commands_schema, ["echo", "a", "b", "show", "3"])
    assert result == {"echo": {"words": ["a", "b"]}, "show": {"index": 3}}


def test_first_param_in_schema_order_wins_on_shared_token():
    schema = ParamSchema.from_dict(
        {"options": [{"short": "go", "name": "--go"}, {"name": "go"}]}
    )
    schema.set_sequential_processing(True)
    assert schema.parse_vec(["go"]) == {"--go": {}}


def test_discarded_tokens_are_logged(schema, caplog):
    with caplog.at_level(logging.DEBUG, logger="clitc.engine.parser"):
        schema.parse_vec(["noise", "-v"])
    assert "noise" in caplog.text
