#!/usr/bin/env python3
"""
Errors raised while parsing CLI input against the declared parameters.
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

class ParseError(ProgParamsError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "CLI Parsing Failure:"
    pass

class UnknownOption(ParseError):
    """ A strict parse hit an option that was never declared """
    pass

class UnknownPositional(ParseError):
    """ A strict parse hit a positional arg after every positional was filled """
    pass

class MissingValue(ParseError):
    """ An option needed a value, but neither an attached value nor a following arg exists """
    pass

class ConversionError(ParseError):
    """ Text could not be converted to the declared type, or is out of its range """
    pass

class RequiredParameterMissing(ParseError):
    pass
