#!/usr/bin/env python3
"""
Public Access point for progparams Structures
"""
from __future__ import annotations

from progparams._structs.binding import ExternalBinding, OwnedBinding
from progparams._structs.param_spec import ParamSpec
from progparams._structs.parser_config import ParserConfig
