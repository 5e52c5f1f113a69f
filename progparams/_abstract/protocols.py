#!/usr/bin/env python3
"""
The structural protocols the matcher engine relies on.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING
# Protocols:
from typing import Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any
    from collections.abc import Sequence
    from progparams._structs.parser_config import ParserConfig

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@runtime_checkable
class Binding_p(Protocol):
    """ A single storage slot a parameter writes its value into """

    def read(self) -> Any: ...

    def write(self, val:Any) -> None: ...

@runtime_checkable
class ParamStruct_p(Protocol):
    """ A declared parameter, able to consume args from the head of a window """

    names    : list[str]
    required : bool

    @property
    def is_option(self) -> bool: ...

    @property
    def found(self) -> bool: ...

    def consume(self, window:Sequence[str], attached:None|str=None) -> int: ...

    def check(self) -> None: ...

@runtime_checkable
class ParamRegistry_p(Protocol):
    """ What a matcher needs from a registry of declared parameters """

    @property
    def config(self) -> ParserConfig: ...

    @property
    def strict(self) -> bool: ...

    def lookup(self, name:str) -> None|ParamStruct_p: ...

    def positionals(self) -> list[ParamStruct_p]: ...

    def check(self) -> None: ...
