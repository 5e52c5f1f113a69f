#!/usr/bin/env python3
"""
These are the progparams specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from progparams._errors.base import ProgParamsError, ConfigError
from progparams._errors.declare import DeclarationError
from progparams._errors.parse import (ParseError, UnknownOption, UnknownPositional,
                                      MissingValue, ConversionError,
                                      RequiredParameterMissing)
from progparams._errors.access import AccessError, ParameterNotFound, TypeMismatch

# ##-- end 1st party imports
