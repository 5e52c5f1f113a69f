#!/usr/bin/env python3
"""
progparams : POSIX/GNU style command line parameters, declared then parsed.

params = Params()
params.declare_internal("-a", bool)
params.declare_internal(["-c", "--count"], "uint")
params.declare_internal("destination", str, required=True)
params.parse(sys.argv[1:])

"""
# Imports:
from __future__ import annotations

from ._interface import __version__, ValueType
from .conversion import convert
from .params import Params
from .structs import ParamSpec, ParserConfig, ExternalBinding, OwnedBinding
from . import errors
