"""
Line-delimited (LD) text encoding for JSON value trees.

Provides an encoder that renders JSON-compatible values as indented,
sentinel-tagged LD text and a recursive descent decoder that parses LD text
back into equivalent values. The API follows the standard library json module.
"""

import logging
import math
import os
import time
from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from enum import Enum
from io import StringIO
from typing import IO
from typing import Any
from typing import TypeAlias

from ._text import ESCAPE_MARKER
from ._text import KEY_PREFIX
from ._text import is_blank
from ._text import unescape_string
from ._text import unmark_prefix
from ._text import wrap_lines

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
LineNumber: TypeAlias = int

# Union type for values that might be transformed by hooks
JsonValueOrTransformed = JsonValue | Any
# More permissive type for internal/test use
JsonValueLoose = Any

# Hook type definitions - hooks can return custom types
ObjectHook = Callable[[dict[str, JsonValue]], Any] | None
ObjectPairsHook = (
    Callable[[list[tuple[str, JsonValueOrTransformed]]], Any] | None
)
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "LDJSON_PROFILE" in os.environ

INDENT_STEP = 4
WRAP_WIDTH = 80
TAG_POSITION = len(KEY_PREFIX)
DIGITS = "0123456789"


@dataclass
class HotPathStats:
    """
    Timing totals for one instrumented step of the codec.

    ``units`` counts what the step consumed: characters for scalar coercion
    and wrapping, members for object and array bodies.
    """

    name: str
    calls: int = 0
    total_ns: int = 0
    units: int = 0

    def record(self, duration_ns: int, units: int) -> None:
        self.calls += 1
        self.total_ns += duration_ns
        self.units += units

    @property
    def mean_ns(self) -> float:
        return self.total_ns / self.calls if self.calls else 0.0


class Tag(Enum):
    """
    Type tags carried by sentinel lines.

    The tag is the character immediately following the key prefix.
    """

    START_OBJECT = "{"
    END_OBJECT = "}"
    START_ARRAY = "["
    END_ARRAY = "]"
    STRING = "$"
    NUMBER = "#"
    BOOLEAN = "?"
    NULL = "!"
    COMMENT = "*"


_TAGS = {tag.value: tag for tag in Tag}
_CLOSERS = (Tag.END_OBJECT, Tag.END_ARRAY)
_TOP_LEVEL_TAGS = (Tag.START_OBJECT, Tag.START_ARRAY, Tag.COMMENT)
# Tags whose sentinel carries no member key inside an object
_KEYLESS_TAGS = (Tag.END_OBJECT, Tag.END_ARRAY, Tag.COMMENT)


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """
        Times the enclosed block under ``name``.

        ``units`` may be raised inside the block once the amount of work is
        known, as the structure parsers do after counting their members.
        """

        def __init__(self, name: str, units: int = 0) -> None:
            self.name = name
            self.units = units
            self._started = 0

        def __enter__(self) -> "ProfileContext":
            self._started = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            elapsed = time.perf_counter_ns() - self._started
            stats = _hot_path_stats.setdefault(self.name, HotPathStats(self.name))
            stats.record(elapsed, self.units)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of the collected statistics."""
        return dict(_hot_path_stats)

    def clear_hot_path_stats() -> None:
        _hot_path_stats.clear()

else:
    # Nothing is timed unless LDJSON_PROFILE is set at import
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, name: str, units: int = 0) -> None:
            self.units = units

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class LDDecodeError(ValueError):
    """
    Handles LD parsing failures with the offending input line number.

    Every decode failure is fatal to the current document; the message names
    the problem and ``lineno`` is the 1-based line it was detected on.
    """

    def __init__(self, msg: str, lineno: LineNumber = 0, line: str = "") -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(lineno, int) or lineno < 0:
            raise ValueError("lineno must be a non-negative integer")

        self.msg = msg
        self.lineno = lineno
        self.line = line

        super().__init__(f"{msg} on line {lineno}")


class InvalidKeyType(LDDecodeError):
    """Sentinel tag is unknown, or a closer does not match its opener."""

    def __init__(self, line: str, lineno: LineNumber, reason: str = "") -> None:
        msg = f'Invalid key type: "{line}"'
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg, lineno, line)


class AnonymousValue(LDDecodeError):
    """Object member sentinel without key text."""

    def __init__(self, lineno: LineNumber, line: str = "") -> None:
        super().__init__("Anonymous value is not allowed", lineno, line)


class InvalidBoolean(LDDecodeError):
    def __init__(self, data: str, lineno: LineNumber) -> None:
        super().__init__(f'Invalid boolean value "{data}"', lineno, data)


class InvalidNull(LDDecodeError):
    def __init__(self, data: str, lineno: LineNumber) -> None:
        super().__init__(f'Invalid null value "{data}"', lineno, data)


class InvalidNumber(LDDecodeError):
    def __init__(self, data: str, lineno: LineNumber) -> None:
        super().__init__(f'Invalid number value "{data}"', lineno, data)


class UnexpectedEOF(LDDecodeError):
    """Input ended while an object or array was still open."""

    def __init__(self, lineno: LineNumber) -> None:
        super().__init__("Unexpected EOF", lineno)


class UnexpectedData(LDDecodeError):
    """Data line that does not belong to any scalar value."""

    def __init__(self, line: str, lineno: LineNumber) -> None:
        super().__init__(f'Unexpected data "{line}"', lineno, line)


class NestingTooDeep(LDDecodeError):
    """Structures nest deeper than the interpreter recursion limit allows."""

    def __init__(self, lineno: LineNumber) -> None:
        super().__init__("Maximum nesting depth exceeded", lineno)


class LDEncodeError(ValueError):
    """Value or key that cannot be represented in LD text."""


@dataclass(frozen=True)
class Sentinel:
    """
    A structural marker line: prefix, type tag and key text.

    ``tag`` is None when the tag character is not a recognized type tag;
    ``raw_tag`` always holds the character found (empty at end of line).
    """

    tag: Tag | None
    raw_tag: str
    key: str
    indent: int
    lineno: LineNumber
    text: str


class LineReader:
    """
    Reads LD input one line at a time, tracking the line number.

    Trailing newline and carriage return characters are stripped; end of
    input is reported as None.
    """

    def __init__(self, fp: IO[str]) -> None:
        self._fp = fp
        self.lineno: LineNumber = 0

    def next_line(self) -> str | None:
        """Returns the next line without its terminator, or None at end."""
        line = self._fp.readline()
        if not line:
            return None
        self.lineno += 1
        if self.lineno == 1:
            line = line.removeprefix("\ufeff")
        return line.rstrip("\r\n")


def classify_line(line: str, lineno: LineNumber) -> Sentinel | None:
    """
    Recognizes sentinel lines; returns None for data lines.

    Leading spaces are skipped before looking for the key prefix. A prefix
    followed by the escape marker is literal data written by the encoder.
    """
    content = line.lstrip(" ")
    if not content.startswith(KEY_PREFIX):
        return None

    raw_tag = content[TAG_POSITION : TAG_POSITION + 1]
    if raw_tag == ESCAPE_MARKER:
        return None

    return Sentinel(
        tag=_TAGS.get(raw_tag),
        raw_tag=raw_tag,
        key=content[TAG_POSITION + 1 :].rstrip(),
        indent=len(line) - len(content),
        lineno=lineno,
        text=content,
    )


def strip_data_line(line: str, indent: int) -> str:
    """Removes up to ``indent`` leading spaces and the prefix escape marker."""
    head = line[:indent]
    spaces = len(head) - len(head.lstrip(" "))
    return unmark_prefix(line[spaces:])


def valid_number(text: str) -> bool:
    """
    Checks text against the permissive LD number grammar.

    Surrounding spaces are ignored. Digits, '.', '+', '-' and 'e' are the
    only characters allowed, at most one '.' or 'e' marker may appear, a '.'
    must be followed by a digit and an 'e' must follow a digit.
    """
    s = text.strip(" ")
    if not s:
        return False
    if len(s) == 1:
        return s in DIGITS
    if s[0] not in DIGITS and s[0] not in "+-.":
        return False

    seen_marker = False
    for i, char in enumerate(s):
        if char not in DIGITS and char not in ".+-e":
            return False
        if char in ".e":
            if seen_marker:
                return False
            seen_marker = True
        if char == "." and (i + 1 >= len(s) or s[i + 1] not in DIGITS):
            return False
        if char == "e" and (i == 0 or s[i - 1] not in DIGITS):
            return False
    return True


@dataclass(frozen=True)
class DecodeConfig:
    """
    Configures LD decoding behavior with immutable settings.

    ``strict`` rejects data lines that belong to no value; the hooks follow
    the json module conventions.
    """

    strict: bool = True
    parse_float: ParseFloatHook = None
    parse_int: ParseIntHook = None
    object_pairs_hook: ObjectPairsHook = None
    object_hook: ObjectHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures LD encoding behavior with immutable settings.

    ``width`` bounds string data lines including indentation, ``indent`` is
    the number of spaces added per nesting level.
    """

    skipkeys: bool = False
    sort_keys: bool = False
    width: int = WRAP_WIDTH
    indent: int = INDENT_STEP
    default: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if not isinstance(self.width, int) or isinstance(self.width, bool):
            raise TypeError("width must be an integer")
        if not isinstance(self.indent, int) or isinstance(self.indent, bool):
            raise TypeError("indent must be an integer")
        if self.width < 1:
            raise ValueError("width must be positive")
        if self.indent < 0:
            raise ValueError("indent must not be negative")


def coerce_scalar(
    tag: Tag, data: str, lineno: LineNumber, config: DecodeConfig
) -> JsonValueOrTransformed:
    """Converts accumulated data text into a value according to its tag."""
    with ProfileContext("coerce_scalar", len(data)):
        if tag is Tag.BOOLEAN:
            word = data.strip().lower()
            if word not in ("true", "false"):
                raise InvalidBoolean(data, lineno)
            return word == "true"
        elif tag is Tag.NULL:
            if data.strip().lower() != "null":
                raise InvalidNull(data, lineno)
            return None
        elif tag is Tag.NUMBER:
            return _parse_number(data, lineno, config)
        else:
            return unescape_string(data)


def _parse_number(
    data: str, lineno: LineNumber, config: DecodeConfig
) -> JsonValueOrTransformed:
    if not valid_number(data):
        raise InvalidNumber(data, lineno)

    stripped = data.strip(" ")
    try:
        if "." in stripped or "e" in stripped:
            if config.parse_float:
                return config.parse_float(stripped)
            return float(stripped)
        if config.parse_int:
            return config.parse_int(stripped)
        return int(stripped)
    except ValueError as e:
        # The grammar admits forms such as "1-2" or "1e" that do not convert
        raise InvalidNumber(data, lineno) from e


def _misplaced(sentinel: Sentinel) -> InvalidKeyType:
    """Builds the error for a known or unknown tag where it cannot appear."""
    tag = sentinel.tag
    if tag is None:
        reason = ""
    elif tag in _CLOSERS:
        reason = f"unexpected closing '{tag.value}'"
    else:
        reason = "value outside any structure"
    return InvalidKeyType(sentinel.text, sentinel.lineno, reason)


@dataclass
class _Member:
    """A scalar sentinel whose data lines are still being collected."""

    sentinel: Sentinel
    chunks: list[str] = field(default_factory=list)
    data_lineno: LineNumber = 0
    ignored: bool = False


class LdParser:
    """
    Recursive descent parser over sentinel-tagged lines.

    ``parse_object`` and ``parse_array`` recurse into each other for nested
    structures; both run the same member loop and differ only in how the
    finished members are collected.
    """

    def __init__(self, reader: LineReader, config: DecodeConfig):
        self.reader = reader
        self.config = config

    def parse_document(self) -> Iterator[tuple[Sentinel, JsonValueOrTransformed]]:
        """
        Yields each top-level structure with the sentinel that opened it.

        Only objects, arrays and comments may appear outside a structure.
        After a top-level comment, other sentinels are part of the comment
        until the next object or array opens.
        """
        try:
            yield from self._members(None, discard=False)
        except RecursionError:
            raise NestingTooDeep(self.reader.lineno) from None

    def parse_object(self, discard: bool = False) -> JsonValueOrTransformed:
        """Parses object members up to the closing sentinel."""
        with ProfileContext("parse_object") as profile:
            pairs = [
                (sentinel.key, value)
                for sentinel, value in self._members(Tag.END_OBJECT, discard)
            ]
            profile.units = len(pairs)

            if discard:
                return None
            return self._apply_object_hooks(pairs)

    def parse_array(self, discard: bool = False) -> JsonValueOrTransformed:
        """Parses array elements up to the closing sentinel."""
        with ProfileContext("parse_array") as profile:
            values = [
                value for _, value in self._members(Tag.END_ARRAY, discard)
            ]
            profile.units = len(values)

            if discard:
                return None
            return values

    def _apply_object_hooks(
        self, pairs: list[tuple[str, JsonValueOrTransformed]]
    ) -> JsonValueOrTransformed:
        """Applies object hooks to parsed pairs."""
        if self.config.object_pairs_hook:
            return self.config.object_pairs_hook(pairs)
        else:
            obj = dict(pairs)
            if self.config.object_hook:
                return self.config.object_hook(obj)
            return obj

    def _members(
        self, closing: Tag | None, discard: bool
    ) -> Iterator[tuple[Sentinel, JsonValueOrTransformed]]:
        """
        Runs the member loop of one structure body.

        ``closing`` is None for the top level, where end of input is the
        normal way out. With ``discard`` set the body is consumed without
        producing members, validating scalars or rejecting unknown tags.
        """
        pending: _Member | None = None
        in_comment = False

        while (line := self.reader.next_line()) is not None:
            lineno = self.reader.lineno
            sentinel = classify_line(line, lineno)

            if sentinel is None:
                self._accumulate(pending, line, lineno, discard)
                continue

            logger.debug("line %d: sentinel %r", lineno, sentinel.text)

            if pending is not None:
                member = self._finalize(pending, discard)
                pending = None
                if member is not None:
                    yield member

            tag = sentinel.tag
            if closing is None and tag not in _TOP_LEVEL_TAGS:
                if not in_comment:
                    raise _misplaced(sentinel)
                pending = _Member(sentinel, ignored=True)
                continue

            if (
                closing is Tag.END_OBJECT
                and not discard
                and not sentinel.key
                and tag is not None
                and tag not in _KEYLESS_TAGS
            ):
                raise AnonymousValue(lineno, sentinel.text)

            if tag is None:
                if not discard:
                    raise InvalidKeyType(sentinel.text, lineno)
                pending = _Member(sentinel, ignored=True)
            elif tag is closing:
                return
            elif tag in _CLOSERS:
                if discard:
                    return
                raise _misplaced(sentinel)
            elif tag is Tag.START_OBJECT:
                in_comment = False
                value = self.parse_object(discard)
                if not discard:
                    yield sentinel, value
            elif tag is Tag.START_ARRAY:
                in_comment = False
                value = self.parse_array(discard)
                if not discard:
                    yield sentinel, value
            elif tag is Tag.COMMENT:
                in_comment = True
                self._skip_commented_structure(sentinel)
                pending = _Member(sentinel, ignored=True)
            else:
                pending = _Member(sentinel, ignored=discard)

        if closing is not None:
            raise UnexpectedEOF(self.reader.lineno)

    def _skip_commented_structure(self, sentinel: Sentinel) -> None:
        """Consumes a commented-out subtree such as ``~~:*{name``."""
        if sentinel.key.startswith(Tag.START_OBJECT.value):
            logger.debug("line %d: skipping commented object", sentinel.lineno)
            self.parse_object(discard=True)
        elif sentinel.key.startswith(Tag.START_ARRAY.value):
            logger.debug("line %d: skipping commented array", sentinel.lineno)
            self.parse_array(discard=True)

    def _accumulate(
        self,
        pending: _Member | None,
        line: str,
        lineno: LineNumber,
        discard: bool,
    ) -> None:
        """Appends a data line to the pending scalar; blank lines are filler."""
        if is_blank(line):
            return
        if pending is None:
            if self.config.strict and not discard:
                raise UnexpectedData(line, lineno)
            return
        if pending.ignored:
            return

        if not pending.data_lineno:
            pending.data_lineno = lineno
        pending.chunks.append(strip_data_line(line, pending.sentinel.indent))

    def _finalize(
        self, pending: _Member, discard: bool
    ) -> tuple[Sentinel, JsonValueOrTransformed] | None:
        """Coerces the collected data of a scalar member."""
        sentinel = pending.sentinel
        if discard or pending.ignored or sentinel.tag is None:
            logger.debug("line %d: discarded %r", sentinel.lineno, sentinel.text)
            return None

        data = "".join(pending.chunks).rstrip(" \t")
        lineno = pending.data_lineno or sentinel.lineno
        value = coerce_scalar(sentinel.tag, data, lineno, self.config)
        logger.debug("line %d: %r = %r", sentinel.lineno, sentinel.key, value)
        return sentinel, value


_MISSING = object()


def iter_load(fp: IO[str], **kwargs: Any) -> Iterator[JsonValueOrTransformed]:
    """
    Yields each top-level object or array of an LD stream once complete.
    """
    if not hasattr(fp, "readline"):
        raise TypeError("fp must have a readline() method")

    config = DecodeConfig(**kwargs)
    parser = LdParser(LineReader(fp), config)
    for _, value in parser.parse_document():
        yield value


def iter_loads(s: str, **kwargs: Any) -> Iterator[JsonValueOrTransformed]:
    """Yields each top-level object or array of an LD document string."""
    if not isinstance(s, str):
        raise TypeError("the LD document must be str, not bytes")

    return iter_load(StringIO(s), **kwargs)


def load(fp: IO[str], **kwargs: Any) -> JsonValueOrTransformed:
    """
    Parses a single top-level LD structure from a file-like object.
    """
    if not hasattr(fp, "readline"):
        raise TypeError("fp must have a readline() method")

    config = DecodeConfig(**kwargs)
    reader = LineReader(fp)
    documents = LdParser(reader, config).parse_document()

    first = next(documents, _MISSING)
    if first is _MISSING:
        raise LDDecodeError("Expecting value", reader.lineno)

    extra = next(documents, _MISSING)
    if extra is not _MISSING:
        sentinel, _ = extra  # type: ignore[misc]
        raise LDDecodeError("Extra data", sentinel.lineno, sentinel.text)

    _, value = first  # type: ignore[misc]
    return value


def loads(s: str, **kwargs: Any) -> JsonValueOrTransformed:
    """
    Parses an LD document holding exactly one top-level object or array.

    Validates input type and delegates to the parser with immutable
    configuration.
    """
    if not isinstance(s, str):
        raise TypeError("the LD document must be str, not bytes")

    return load(StringIO(s), **kwargs)


def _encode_float(n: float) -> str:
    """Formats a float in fixed notation that parses back to the same value."""
    if math.isnan(n) or math.isinf(n):
        raise LDEncodeError("Out of range float values are not LD compliant")

    text = float.__repr__(n)
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def _encode_key(key: Any, config: EncodeConfig) -> str | None:
    """Converts a dict key to sentinel key text, None to skip it."""
    if isinstance(key, str):
        str_key = key
    elif isinstance(key, bool):
        str_key = "true" if key else "false"
    elif isinstance(key, int | float):
        str_key = str(key)
    elif config.skipkeys:
        return None
    else:
        msg = f"keys must be strings, not {type(key).__name__}"
        raise TypeError(msg)

    if not str_key:
        raise LDEncodeError("keys must not be empty")
    if "\n" in str_key or "\r" in str_key:
        raise LDEncodeError(f"key {str_key!r} contains a line break")
    if str_key != str_key.rstrip():
        raise LDEncodeError(f"key {str_key!r} ends with whitespace")
    return str_key


def _dict_items(
    d: dict[Any, Any], config: EncodeConfig
) -> list[tuple[str, Any]]:
    """Collects encodable members in output order."""
    items = []
    for key, value in d.items():
        str_key = _encode_key(key, config)
        if str_key is not None:
            items.append((str_key, value))

    if config.sort_keys:
        items.sort(key=lambda x: x[0])
    return items


def _sentinel(pad: str, tag: Tag, key: str = "") -> str:
    return f"{pad}{KEY_PREFIX}{tag.value}{key}\n"


def _iter_encode(
    obj: JsonValueLoose, key: str, level: int, config: EncodeConfig
) -> Iterator[str]:
    """Yields the LD lines of a value, depth-first."""
    pad = " " * (level * config.indent)

    if obj is None:
        yield _sentinel(pad, Tag.NULL, key)
        yield f"{pad}null\n"
    elif obj is True or obj is False:
        yield _sentinel(pad, Tag.BOOLEAN, key)
        yield f"{pad}{'true' if obj else 'false'}\n"
    elif isinstance(obj, str):
        if len(pad) >= config.width:
            msg = f"indent {len(pad)} must be less than width {config.width}"
            raise LDEncodeError(msg)
        with ProfileContext("wrap", len(obj)):
            lines = list(wrap_lines(obj, config.width, len(pad)))
        yield _sentinel(pad, Tag.STRING, key)
        for line in lines:
            yield f"{line}\n"
    elif isinstance(obj, int):
        yield _sentinel(pad, Tag.NUMBER, key)
        yield f"{pad}{int.__repr__(obj)}\n"
    elif isinstance(obj, float):
        yield _sentinel(pad, Tag.NUMBER, key)
        yield f"{pad}{_encode_float(obj)}\n"
    elif isinstance(obj, dict):
        yield _sentinel(pad, Tag.START_OBJECT, key)
        for member_key, value in _dict_items(obj, config):
            yield from _iter_encode(value, member_key, level + 1, config)
        yield _sentinel(pad, Tag.END_OBJECT)
    elif isinstance(obj, list | tuple):
        yield _sentinel(pad, Tag.START_ARRAY, key)
        for item in obj:
            yield from _iter_encode(item, "", level + 1, config)
        yield _sentinel(pad, Tag.END_ARRAY)
    elif config.default is not None:
        yield from _iter_encode(config.default(obj), key, level, config)
    else:
        msg = f"Object of type {type(obj).__name__} is not LD serializable"
        raise TypeError(msg)


def dumps(obj: JsonValueLoose, **kwargs: Any) -> str:
    """
    Serializes Python objects to LD text with configurable wrapping.

    Every line of the result, including the last, ends with a newline.
    Scalars are encoded too, but only objects and arrays decode at top level.
    """
    config = EncodeConfig(**kwargs)
    return "".join(_iter_encode(obj, "", 0, config))


def dump(obj: JsonValueLoose, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes Python objects to an LD file line by line.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    config = EncodeConfig(**kwargs)
    for chunk in _iter_encode(obj, "", 0, config):
        fp.write(chunk)


__all__ = [
    "AnonymousValue",
    "DecodeConfig",
    "EncodeConfig",
    "HotPathStats",
    "InvalidBoolean",
    "InvalidKeyType",
    "InvalidNull",
    "InvalidNumber",
    "LDDecodeError",
    "LDEncodeError",
    "LdParser",
    "LineReader",
    "NestingTooDeep",
    "Sentinel",
    "Tag",
    "UnexpectedData",
    "UnexpectedEOF",
    "classify_line",
    "clear_hot_path_stats",
    "coerce_scalar",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "iter_load",
    "iter_loads",
    "load",
    "loads",
    "valid_number",
]
