from __future__ import annotations

from enum import Enum
import math
import re
from typing import List, Optional, Union

from .errors import WrongFormatError

TypedValue = Union[List[str], int, float, str]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class ValueType(str, Enum):
    """Type tag of a positional sub-parameter."""

    ARRAY = "array"
    INT = "int"
    STRING = "string"
    NUM = "num"

    @classmethod
    def from_tag(cls, tag: str) -> "ValueType":
        try:
            return cls(tag)
        except ValueError:
            raise WrongFormatError(f"Wrong subparam type: {tag!r}") from None

    def info(self) -> str:
        return self.value


def parse_int(token: str) -> Optional[int]:
    if not _INT_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_num(token: str) -> Optional[float]:
    # float() also accepts surrounding whitespace, digit separators and non-ASCII digits
    if not token or not token.isascii() or "_" in token or token != token.strip():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def coerce(value_type: ValueType, tokens: List[str]) -> Optional[TypedValue]:
    """
    Produce one typed value from the front of ``tokens``.

    Scalar types pop exactly one token, even when it fails to convert.
    Arrays copy every remaining token and leave the buffer untouched.
    Returns None when the token could not be converted.
    """
    if value_type is ValueType.ARRAY:
        return list(tokens)
    token = tokens.pop(0)
    if value_type is ValueType.INT:
        return parse_int(token)
    if value_type is ValueType.NUM:
        return parse_num(token)
    return token


def format_value(value: TypedValue) -> str:
    if isinstance(value, list):
        return ", ".join(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def type_name(value: TypedValue) -> str:
    if isinstance(value, list):
        return ValueType.ARRAY.value
    if isinstance(value, int):
        return ValueType.INT.value
    if isinstance(value, float):
        return ValueType.NUM.value
    return ValueType.STRING.value
