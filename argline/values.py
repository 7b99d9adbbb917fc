"""
argline values: the read-only result of a lookup.

A Value is a tagged container with exactly one of three shapes (see Kind):
- ABSENT: nothing was parsed under that name (falsy).
- SINGLE: one string, the value of a plain positional argument
  (truthy only when the string is non-empty).
- MULTI: an ordered tuple of strings, the values of a matched option or of the
  pack argument (always truthy, even when empty: a matched option with arity 0
  still reports its presence).

Typed extraction is explicit: to_int(), to_float(), to_double() and to_string()
read the sole string of a SINGLE value or the first string of a MULTI value.
Numeric conversions raise ConversionError on non-numeric text, unless a
`default` is given, in which case the default is returned instead.

Numbers are read the way C's strtol/strtod read them: leading whitespace and a
sign are accepted, trailing garbage after the number is ignored ("12px" is 12).
Integers must fit in a signed 32-bit int; to_float() rounds to single precision.

Quick example:
    >>> value = Value(("5", "7"))
    >>> value.to_int(), value[1].to_int(), bool(value[2])
    (5, 7, False)
"""
import math
import re
import struct
from enum import IntEnum

from .faults import ConversionError, FaultCode
from .utils import Unset

_INT_MIN, _INT_MAX = -2 ** 31, 2 ** 31 - 1

_INTEGER = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_DECIMAL = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE
)


def parse_integer(token, /):
    """
    Read a leading signed 32-bit integer from `token`.

    Returns None when the token does not start with an integer (after optional
    whitespace) or when the integer is out of range.
    """
    if not (match := _INTEGER.match(token)):
        return None
    if not _INT_MIN <= (number := int(match[1])) <= _INT_MAX:
        return None
    return number


def parse_decimal(token, /):
    """
    Read a leading decimal float from `token`.

    Returns None when there is none, or when a finite literal overflows to
    infinity ("1e999"). Spelled-out "inf"/"nan" are accepted.
    """
    if not (match := _DECIMAL.match(token)):
        return None
    if math.isinf(number := float(match[1])) and "inf" not in match[1].lower():
        return None
    return number


class Kind(IntEnum):
    ABSENT = 0
    SINGLE = 1
    MULTI = 2


class Value:
    """
    Immutable tri-state result container (absent / single / multi).

    Construction
    - Value()             → absent
    - Value("text")       → single
    - Value(["a", "b"])   → multi (any iterable of strings, copied into a tuple)
    """

    __slots__ = ("_kind", "_items")

    def __init__(self, source=Unset, /):
        if source is Unset:
            self._kind, self._items = Kind.ABSENT, ()
        elif isinstance(source, str):
            self._kind, self._items = Kind.SINGLE, (source,)
        else:
            items = tuple(source)
            if not all(isinstance(item, str) for item in items):
                raise TypeError("Value() items must be strings")
            self._kind, self._items = Kind.MULTI, items

    @property
    def kind(self):
        return self._kind

    @property
    def items(self):
        """The sub-values of a MULTI value as a tuple of strings (empty otherwise)."""
        return self._items if self._kind is Kind.MULTI else ()

    def __bool__(self):
        match self._kind:
            case Kind.SINGLE:
                return bool(self._items[0])
            case Kind.MULTI:
                return True
            case _:
                return False

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index, /):
        if not isinstance(index, int):
            raise TypeError("Value indices must be integers")
        if 0 <= index < len(self.items):
            return Value(self._items[index])
        return Value()

    def __iter__(self):
        return map(Value, self.items)

    def __eq__(self, other, /):
        if not isinstance(other, Value):
            return NotImplemented
        return self._kind is other._kind and self._items == other._items

    def __hash__(self):
        return hash((self._kind, self._items))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        match self._kind:
            case Kind.SINGLE:
                return f"Value({self._items[0]!r})"
            case Kind.MULTI:
                return f"Value({list(self._items)!r})"
            case _:
                return "Value()"

    def __rich_repr__(self):
        yield "kind", self._kind.name.lower()
        if self._kind is not Kind.ABSENT:
            yield "items", self._items

    def to_string(self):
        return self._items[0] if self._items else ""

    def to_int(self, default=Unset, /):
        if (number := parse_integer(self.to_string())) is not None:
            return number
        return self._fail("int", default)

    def to_double(self, default=Unset, /):
        if (number := parse_decimal(self.to_string())) is not None:
            return number
        return self._fail("double", default)

    def to_float(self, default=Unset, /):
        if (number := parse_decimal(self.to_string())) is not None:
            try:
                return struct.unpack("f", struct.pack("f", number))[0]
            except OverflowError:
                pass
        return self._fail("float", default)

    def _fail(self, typename, default, /):
        if default is not Unset:
            return default
        raise ConversionError(
            "cannot convert %r to %s" % (self.to_string(), typename),
            title="unconvertible value",
            code=FaultCode.UNCONVERTIBLE_VALUE,
            hint="declare the argument or option as numeric to have it checked while parsing",
            value=self.to_string(),
            type=typename
        )


__all__ = (
    "Kind",
    "Value",
    "parse_integer",
    "parse_decimal",
)
