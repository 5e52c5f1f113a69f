#!/usr/bin/env python3
"""
Errors raised when retrieving parsed values.
"""
# Imports:
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

from .base import ProgParamsError

class AccessError(ProgParamsError):
    general_msg = "Parameter Access Failure:"
    pass

class ParameterNotFound(AccessError):
    pass

class TypeMismatch(AccessError):
    """ The requested type does not match the declared type of the parameter """
    pass
