#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import Mapping
# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ValidationError, field_validator, model_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from progparams import _interface as API
from progparams._errors.base import ConfigError

# ##-- end 1st party imports

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

class ParserConfig(BaseModel, frozen=True):
    """ The fixed tokens the matcher recognises, and whether unknown args are errors.
      The long option marker is always the doubled prefix.
    """

    prefix      : str  = API.PREFIX
    separator   : str  = API.SEPARATOR
    terminator  : str  = API.TERMINATOR
    strict      : bool = True

    @classmethod
    def build(cls, data:None|dict|TomlGuard|ParserConfig=None) -> ParserConfig:
        match data:
            case None:
                return cls()
            case ParserConfig():
                return data
            case TomlGuard() | Mapping():
                pass
            case _:
                raise ConfigError("Unrecognised parser config: %s", data)

        try:
            return cls.model_validate(dict(data.items()))
        except ValidationError as err:
            raise ConfigError("Bad parser config: %s", err) from err

    @field_validator("prefix", "separator")
    def validate_single_char(cls, val):
        if len(val) != 1:
            raise ValueError("Must be a single character", val)
        return val

    @field_validator("terminator")
    def validate_terminator(cls, val):
        if not bool(val):
            raise ValueError("The terminator can't be empty")
        return val

    @model_validator(mode="after")
    def validate_distinct(self):
        if self.separator == self.prefix:
            raise ValueError("The separator can't be the prefix", self.separator)
        return self

    @property
    def long_prefix(self) -> str:
        return self.prefix * 2

    def is_option(self, name:str) -> bool:
        return name.startswith(self.prefix)

    def with_strict(self, strict:None|bool) -> ParserConfig:
        if strict is None or strict == self.strict:
            return self
        return self.model_copy(update={"strict": strict})
