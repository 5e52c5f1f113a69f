#!/usr/bin/env python3
"""
Text to value conversion for the primitive parameter types.

Each ValueType has a conversion, dispatched by matching on the tag.
Integer types are range checked against their C width,
and 32-bit floats are rounded through a float32 round trip.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import math
import re
import struct
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, assert_never

if TYPE_CHECKING:
    from typing import Final, Any

##--|

# isort: on
# ##-- end types

# ##-- 1st party imports
from progparams import _interface as API
from progparams._interface import ValueType
from progparams._errors.parse import ConversionError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

INT_PATTERN : Final[re.Pattern] = re.compile(r"\s*([+-]?)(\d+)\s*")

INT_RANGES  : Final[dict[ValueType, tuple[int, int]]] = {
    ValueType.int   : API.INT32_RANGE,
    ValueType.uint  : API.UINT32_RANGE,
    ValueType.long  : API.INT64_RANGE,
    ValueType.ulong : API.UINT64_RANGE,
}

def convert(text:str, type_:ValueType|str|type) -> Any:
    """ convert a token's text into a value of the given type """
    type_ = ValueType.build(type_)
    match type_:
        case ValueType.bool:
            return _to_bool(text)
        case ValueType.str:
            return text
        case x if x.is_integer:
            return _to_int(text, type_, INT_RANGES[type_])
        case ValueType.float:
            return _to_float32(text)
        case ValueType.double:
            return _to_float(text, type_)
        case x:
            assert_never(x)

def coerce(value:Any, type_:ValueType|str|type) -> Any:
    """ Check an existing python value against a type tag, as for a default.
      Integers widen to the real types. A bool is never taken as an integer.
      Raises ValueError when the tag can't hold the value.
    """
    type_ = ValueType.build(type_)
    match value:
        case bool() if type_.is_flag:
            return value
        case str() if type_ is ValueType.str:
            return value
        case bool():
            pass
        case int() if type_.is_integer:
            bounds = INT_RANGES[type_]
            if bounds[0] <= value <= bounds[1]:
                return value
        case int() | float() if type_ is ValueType.float:
            if not (math.isfinite(value) and API.FLOAT32_MAX < abs(value)):
                return _round_float32(float(value))
        case int() | float() if type_.is_real:
            return float(value)

    raise ValueError("Value doesn't fit the type", value, type_.value)

def infer_type(value:Any) -> None|ValueType:
    """ Get the type tag of an existing python value, if it has one """
    match value:
        case bool():
            return ValueType.bool
        case int():
            return ValueType.long
        case float():
            return ValueType.double
        case str():
            return ValueType.str
        case _:
            return None

def default_for(type_:ValueType) -> Any:
    match ValueType.build(type_):
        case ValueType.bool:
            return False
        case ValueType.str:
            return ""
        case x if x.is_integer:
            return 0
        case x if x.is_real:
            return 0.0
        case x:
            assert_never(x)

def _to_bool(text:str) -> bool:
    try:
        return API.BOOLEAN_STATES[text.strip().lower()]
    except KeyError:
        raise ConversionError("Not a boolean: %s", text) from None

def _to_int(text:str, type_:ValueType, bounds:tuple[int, int]) -> int:
    match INT_PATTERN.fullmatch(text):
        case None:
            raise ConversionError("Not an integer: %s (%s)", text, type_.value)
        case re.Match() as m if m[1] == "-" and bounds[0] == 0:
            raise ConversionError("Unsigned value can't be negative: %s (%s)", text, type_.value)
        case re.Match() as m:
            val = int(f"{m[1]}{m[2]}")

    if not (bounds[0] <= val <= bounds[1]):
        raise ConversionError("Value out of range: %s (%s)", text, type_.value)

    return val

def _to_float(text:str, type_:ValueType) -> float:
    try:
        return float(text)
    except ValueError:
        raise ConversionError("Not a number: %s (%s)", text, type_.value) from None

def _to_float32(text:str) -> float:
    val = _to_float(text, ValueType.float)
    if math.isfinite(val) and API.FLOAT32_MAX < abs(val):
        raise ConversionError("Value out of range: %s (%s)", text, ValueType.float.value)

    return _round_float32(val)

def _round_float32(val:float) -> float:
    return struct.unpack("f", struct.pack("f", val))[0]
