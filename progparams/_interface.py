#!/usr/bin/env python3
"""
Constants and type tags shared across progparams.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import version, PackageNotFoundError
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Final, Any

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
try:
    __version__ = version("progparams")
except PackageNotFoundError:
    __version__ = "0.0.0"

PREFIX             : Final[str]   = "-"
SEPARATOR          : Final[str]   = "="
TERMINATOR         : Final[str]   = "--"
ANON_KEY           : Final[str]   = "positional_{}"
DEFAULT_DESC       : Final[str]   = "An undescribed parameter"

INT32_RANGE        : Final[tuple[int, int]] = (-(2**31), 2**31 - 1)
UINT32_RANGE       : Final[tuple[int, int]] = (0, 2**32 - 1)
INT64_RANGE        : Final[tuple[int, int]] = (-(2**63), 2**63 - 1)
UINT64_RANGE       : Final[tuple[int, int]] = (0, 2**64 - 1)
FLOAT32_MAX        : Final[float]           = 3.4028234663852886e38

BOOLEAN_STATES     : Final[dict[str, bool]] = {
    '1': True, 'yes': True, 'true': True, 'on': True,
    '0': False, 'no': False, 'false': False, 'off': False,
}

##--|

class ValueType(enum.Enum):
    """ The closed set of primitive types a parameter can hold """
    bool    = "bool"
    str     = "str"
    int     = "int"
    uint    = "uint"
    long    = "long"
    ulong   = "ulong"
    float   = "float"
    double  = "double"

    @classmethod
    def build(cls, val:Any) -> ValueType:
        """ Normalise a type tag given as a ValueType, its name, or a python type """
        match val:
            case ValueType():
                return val
            case str() if val in cls.__members__:
                return cls(val)
            case type() if val in PYTHON_TYPES:
                return PYTHON_TYPES[val]
            case _:
                raise ValueError("Unknown value type", val)

    @property
    def is_flag(self) -> bool:
        return self is ValueType.bool

    @property
    def is_integer(self) -> bool:
        return self in (ValueType.int, ValueType.uint, ValueType.long, ValueType.ulong)

    @property
    def is_real(self) -> bool:
        return self in (ValueType.float, ValueType.double)

# Python types accepted in place of a tag
PYTHON_TYPES : Final[dict[type, ValueType]] = {
    bool  : ValueType.bool,
    int   : ValueType.long,
    float : ValueType.double,
    str   : ValueType.str,
}
