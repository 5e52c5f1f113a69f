#!/usr/bin/env python3
"""
Errors raised while declaring parameters.
These are programmer errors, and surface before any args are parsed.
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

class DeclarationError(ProgParamsError):
    """ A parameter declaration is invalid or conflicts with an existing one """
    general_msg = "Parameter Declaration Failure:"
    pass
