#!/usr/bin/env python3
"""
Storage slots for parsed values.

A parameter writes into exactly one binding.
ExternalBinding writes into a caller-owned object or mapping,
OwnedBinding holds the value itself, owned by the registry.
Both are read and written the same way by the matcher.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass
class OwnedBinding:
    """ A value slot owned by the registry """
    value : Any = None

    def read(self) -> Any:
        return self.value

    def write(self, val:Any) -> None:
        self.value = val

@dataclass
class ExternalBinding:
    """
      A non-owning reference to caller storage.
      Writes to target[key] if target is a mutable mapping,
      otherwise to target.key
    """
    target : Any
    key    : str

    def read(self) -> Any:
        match self.target:
            case Mapping():
                return self.target[self.key]
            case _:
                return getattr(self.target, self.key)

    def write(self, val:Any) -> None:
        match self.target:
            case MutableMapping():
                self.target[self.key] = val
            case _:
                setattr(self.target, self.key, val)

    def __repr__(self):
        return f"<ExternalBinding: {type(self.target).__name__}.{self.key}>"
