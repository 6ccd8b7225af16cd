"""
Pytest configuration and shared fixtures for ldjson tests.

Provides immutable test case fixtures shared by the pass, fail and
round-trip suites.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import ldjson


@dataclass(frozen=True)
class LdTestCase:
    """
    Immutable container for LD test case data.

    Holds the LD input together with either the decoded value or the error
    type and line number the decoder must report.
    """

    description: str
    input_data: str
    expected_output: Any = None
    error: type[ldjson.LDDecodeError] | None = None
    lineno: int = 0


@pytest.fixture
def ld_pass_cases() -> list[LdTestCase]:
    """
    Provides LD documents that must decode to a known value.
    """
    return [
        LdTestCase(
            "object with nested array",
            "~~:{\n"
            "    ~~:#a\n"
            "    1\n"
            "    ~~:[b\n"
            "        ~~:?\n"
            "        true\n"
            "        ~~:!\n"
            "        null\n"
            "    ~~:]\n"
            "~~:}\n",
            {"a": 1, "b": [True, None]},
        ),
        LdTestCase("empty object", "~~:{\n~~:}\n", {}),
        LdTestCase("empty array", "~~:[\n~~:]\n", []),
        LdTestCase(
            "scalar elements",
            "~~:[\n"
            "    ~~:$\n"
            "    hello\n"
            "    ~~:#\n"
            "    -12\n"
            "    ~~:#\n"
            "    0.25\n"
            "    ~~:#\n"
            "    1e3\n"
            "~~:]\n",
            ["hello", -12, 0.25, 1000.0],
        ),
        LdTestCase(
            "boolean and null are case-insensitive",
            "~~:[\n    ~~:?\n    FALSE\n    ~~:!\n      Null  \n~~:]\n",
            [False, None],
        ),
        LdTestCase(
            "blank lines inside string data are filler",
            "~~:{\n    ~~:$a\n    hello\n            \n\n    world\n~~:}\n",
            {"a": "helloworld"},
        ),
        LdTestCase(
            "scalars inside a top-level comment are ignored",
            "~~:*disabled\n~~:$\nold\n~~:}\n~~:[\n    ~~:#\n    1\n~~:]\n",
            [1],
        ),
        LdTestCase(
            "string split over several lines",
            "~~:{\n    ~~:$text\n    hello \n    world\n~~:}\n",
            {"text": "hello world"},
        ),
        LdTestCase(
            "escaped prefix in data",
            "~~:[\n    ~~:$\n    ~~:\\$not a key\n~~:]\n",
            ["~~:$not a key"],
        ),
        LdTestCase(
            "duplicate keys keep the last value",
            "~~:{\n    ~~:#a\n    1\n    ~~:#a\n    2\n~~:}\n",
            {"a": 2},
        ),
        LdTestCase(
            "key text with spaces",
            "~~:{\n    ~~:$full name  \n    Ada Lovelace\n~~:}\n",
            {"full name": "Ada Lovelace"},
        ),
        LdTestCase(
            "indentation is not significant",
            "~~:{\n~~:#a\n1\n        ~~:[b\n  ~~:#\n  2\n~~:]\n~~:}\n",
            {"a": 1, "b": [2]},
        ),
        LdTestCase(
            "comment lines are skipped",
            "~~:{\n    ~~:*note\n    anything at all\n    ~~:#a\n    1\n~~:}\n",
            {"a": 1},
        ),
    ]


@pytest.fixture
def ld_fail_cases() -> list[LdTestCase]:
    """
    Provides malformed LD documents with the error and line they must report.
    """
    return [
        LdTestCase(
            "invalid boolean",
            "~~:{\n    ~~:?flag\n    maybe\n~~:}\n",
            error=ldjson.InvalidBoolean,
            lineno=3,
        ),
        LdTestCase(
            "unclosed object",
            "~~:{\n    ~~:#a\n    1\n",
            error=ldjson.UnexpectedEOF,
            lineno=3,
        ),
        LdTestCase(
            "unknown tag",
            "~~:{\n    ~~:&x\n~~:}\n",
            error=ldjson.InvalidKeyType,
            lineno=2,
        ),
        LdTestCase(
            "anonymous object member",
            "~~:{\n    ~~:#\n    1\n~~:}\n",
            error=ldjson.AnonymousValue,
            lineno=2,
        ),
        LdTestCase(
            "invalid null",
            "~~:[\n    ~~:!\n    nil\n~~:]\n",
            error=ldjson.InvalidNull,
            lineno=3,
        ),
        LdTestCase(
            "invalid number",
            "~~:[\n    ~~:#\n    12a\n~~:]\n",
            error=ldjson.InvalidNumber,
            lineno=3,
        ),
        LdTestCase(
            "number that passes the grammar but does not convert",
            "~~:[\n    ~~:#\n    1-2\n~~:]\n",
            error=ldjson.InvalidNumber,
            lineno=3,
        ),
        LdTestCase(
            "empty number reports the sentinel line",
            "~~:[\n    ~~:#\n~~:]\n",
            error=ldjson.InvalidNumber,
            lineno=2,
        ),
        LdTestCase(
            "mismatched closer",
            "~~:{\n    ~~:#a\n    1\n~~:]\n",
            error=ldjson.InvalidKeyType,
            lineno=4,
        ),
        LdTestCase(
            "stray closer at top level",
            "~~:}\n",
            error=ldjson.InvalidKeyType,
            lineno=1,
        ),
        LdTestCase(
            "data before any sentinel",
            "orphan\n~~:#\n1\n",
            error=ldjson.UnexpectedData,
            lineno=1,
        ),
        LdTestCase(
            "data after a closed structure",
            "~~:[\n~~:]\nleftover\n",
            error=ldjson.UnexpectedData,
            lineno=3,
        ),
        LdTestCase(
            "unclosed nested array",
            "~~:{\n    ~~:[a\n        ~~:#\n        1\n~~:}\n",
            error=ldjson.InvalidKeyType,
            lineno=5,
        ),
        LdTestCase(
            "scalar outside any structure",
            "~~:#count\n1\n",
            error=ldjson.InvalidKeyType,
            lineno=1,
        ),
        LdTestCase(
            "string after a closed structure",
            "~~:[\n~~:]\n~~:$\ntext\n",
            error=ldjson.InvalidKeyType,
            lineno=3,
        ),
        LdTestCase(
            "anonymous member is reported before its data",
            "~~:{\n~~:#\nabc\n~~:}\n",
            error=ldjson.AnonymousValue,
            lineno=2,
        ),
        LdTestCase(
            "anonymous nested object",
            "~~:{\n    ~~:{\n    ~~:}\n~~:}\n",
            error=ldjson.AnonymousValue,
            lineno=2,
        ),
    ]


@pytest.fixture
def round_trip_values() -> list[Any]:
    """
    Provides values exercising every variant and the awkward string cases.
    """
    return [
        None,
        True,
        False,
        0,
        -7,
        2**70,
        0.1,
        -0.0,
        1e-7,
        1.5e300,
        "",
        " ",
        "plain",
        "  leading and trailing  ",
        "line one\nline two\r\nline three",
        "tab\tseparated\tvalues",
        "back\\slash and \\n literal",
        "~~:{looks like a sentinel",
        "    ~~:$indented sentinel lookalike",
        "~~:\\already marked",
        "x" * 500,
        "word " * 60,
        "unicode é中文 \U0001f600",
        [],
        {},
        [[[]]],
        {"nested": {"deeper": {"deepest": [1, 2.5, "three", None, True]}}},
        {"key with spaces": 1, " leading": 2, "~~:odd": 3},
        ["mixed", 1, 2.0, None, False, {"a": []}],
    ]
