#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
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

# Body:
class ProgParamsError(Exception):
    """
      The base class for all progparams Errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg = "Non-Specific Program Parameters Error:"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

class ConfigError(ProgParamsError):
    """ The parser configuration is invalid """
    general_msg = "Parser Configuration Failure:"
    pass
