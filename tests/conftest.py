"""
Pytest configuration and shared fixtures for jsonmend tests.

Provides immutable test data fixtures pairing malformed or valid input
documents with the value tree their repair must produce.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jsonmend


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for repair test case data.

    Holds test input and the value expected after repair.
    """

    description: str
    input_data: str
    expected_output: Any = None


@pytest.fixture(autouse=True)
def _strict_fast_path_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Runs every test with the strict fast path in its default state."""
    monkeypatch.setattr(jsonmend._config, "USE_STRICT_FAST_PATH", True)


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that strict parsers must reject.

    Each one is repairable; the expected value documents which repair rule
    applies.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail1.json
        (
            '"A JSON payload should be an object or array, not a string."',
            "A JSON payload should be an object or array, not a string.",
        ),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', ["Unclosed array"]),
        # https://json.org/JSON_checker/test/fail3.json
        (
            '{unquoted_key: "keys must be quoted"}',
            {"unquoted_key": "keys must be quoted"},
        ),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', ["extra comma"]),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', ["double extra comma"]),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', ["<-- missing value"]),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', ["Comma after the close"]),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', ["Extra close"]),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', {"Extra comma": True}),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            {"Extra value after close": True},
        ),
        # https://json.org/JSON_checker/test/fail11.json
        (
            '{"Illegal expression": 1 + 2}',
            {"Illegal expression": 1, "+ 2": None},
        ),
        # https://json.org/JSON_checker/test/fail12.json
        (
            '{"Illegal invocation": alert()}',
            {"Illegal invocation": "alert()"},
        ),
        # https://json.org/JSON_checker/test/fail13.json
        (
            '{"Numbers cannot have leading zeroes": 013}',
            {"Numbers cannot have leading zeroes": 13},
        ),
        # https://json.org/JSON_checker/test/fail14.json
        (
            '{"Numbers cannot be hex": 0x14}',
            {"Numbers cannot be hex": "0x14"},
        ),
        # https://json.org/JSON_checker/test/fail15.json
        (
            '["Illegal backslash escape: \\x15"]',
            ["Illegal backslash escape: x15"],
        ),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", ["\\naked"]),
        # https://json.org/JSON_checker/test/fail17.json
        (
            '["Illegal backslash escape: \\017"]',
            ["Illegal backslash escape: 017"],
        ),
        # https://json.org/JSON_checker/test/fail18.json
        (
            '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
            [[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]],
        ),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', {"Missing colon": None}),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', {"Double colon": None}),
        # https://json.org/JSON_checker/test/fail21.json
        (
            '{"Comma instead of colon", null}',
            {"Comma instead of colon": None, "null": None},
        ),
        # https://json.org/JSON_checker/test/fail22.json
        (
            '["Colon instead of comma": false]',
            ["Colon instead of comma", False],
        ),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', ["Bad value", "truth"]),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", ["single quote"]),
        # https://json.org/JSON_checker/test/fail25.json
        (
            '["\ttab\tcharacter\tin\tstring\t"]',
            ["\ttab\tcharacter\tin\tstring\t"],
        ),
        # https://json.org/JSON_checker/test/fail26.json
        (
            '["tab\\   character\\   in\\  string\\  "]',
            ["tab   character   in  string  "],
        ),
        # https://json.org/JSON_checker/test/fail27.json
        ('["line\nbreak"]', ["line\nbreak"]),
        # https://json.org/JSON_checker/test/fail28.json
        ('["line\\\nbreak"]', ["line\nbreak"]),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", ["0e"]),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", ["0e+"]),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", ["0e+-1"]),
        # https://json.org/JSON_checker/test/fail32.json
        (
            '{"Comma instead if closing brace": true,',
            {"Comma instead if closing brace": True},
        ),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', ["mismatch"]),
        # https://code.google.com/archive/p/simplejson/issues/3
        (
            '["A\u001fZ control characters in string"]',
            ["A\u001fZ control characters in string"],
        ),
    ]

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            expected_output=expected,
        )
        for idx, (doc, expected) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that strict parsers accept.

    Repairing them must not change their value.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\f\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", None),
        JsonTestCase("true boolean", "true", True),
        JsonTestCase("false boolean", "false", False),
        JsonTestCase("integer", "42", 42),
        JsonTestCase("negative integer", "-17", -17),
        JsonTestCase("float", "3.14", 3.14),
        JsonTestCase("empty string", '""', ""),
        JsonTestCase("simple string", '"hello"', "hello"),
        JsonTestCase("empty array", "[]", []),
        JsonTestCase("empty object", "{}", {}),
        JsonTestCase("simple array", "[1, 2, 3]", [1, 2, 3]),
        JsonTestCase("simple object", '{"key": "value"}', {"key": "value"}),
    ]


@pytest.fixture
def repair_scenarios() -> list[JsonTestCase]:
    """
    Provides typical LLM-output defects and their repaired values.
    """
    return [
        JsonTestCase("single quotes", "{'key': 'value'}", {"key": "value"}),
        JsonTestCase("unquoted keys", "{key: 'value'}", {"key": "value"}),
        JsonTestCase(
            "python literals",
            "{a: True, b: False, c: None}",
            {"a": True, "b": False, "c": None},
        ),
        JsonTestCase(
            "trailing comma", '{"a": 1, "b": 2,}', {"a": 1, "b": 2}
        ),
        JsonTestCase("unterminated", '{"a": [1, 2', {"a": [1, 2]}),
        JsonTestCase("repeated commas", "[1,,,2,,,3]", [1, 2, 3]),
        JsonTestCase(
            "repeated commas in object",
            '{"a": 1,,,,"b": 2}',
            {"a": 1, "b": 2},
        ),
        JsonTestCase(
            "missing commas in object",
            '{"a": 1 "b": 2 "c": 3}',
            {"a": 1, "b": 2, "c": 3},
        ),
        JsonTestCase("missing commas in array", "[1 2 3]", [1, 2, 3]),
        JsonTestCase(
            "markdown fence",
            '```json\n{"answer": 42}\n```',
            {"answer": 42},
        ),
        JsonTestCase(
            "leading prose",
            "Here's the result: {'status': 'ok'}",
            {"status": "ok"},
        ),
        JsonTestCase(
            "unquoted string values",
            "{name: John Smith, city: New York}",
            {"name": "John Smith", "city": "New York"},
        ),
        JsonTestCase(
            "newline separated members",
            "{\n  name: Alice\n  age: 30\n}",
            {"name": "Alice", "age": 30},
        ),
        JsonTestCase(
            "nested unterminated",
            "{'users': [{'id': 1, 'tags': ['a', 'b'",
            {"users": [{"id": 1, "tags": ["a", "b"]}]},
        ),
    ]
