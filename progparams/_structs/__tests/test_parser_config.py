#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pytest
##-- end imports
logging = logmod.root

from tomlguard import TomlGuard
from progparams.errors import ConfigError
from progparams.structs import ParserConfig

class TestParserConfig:

    def test_defaults(self):
        obj = ParserConfig.build()
        assert(obj.prefix == "-")
        assert(obj.long_prefix == "--")
        assert(obj.separator == "=")
        assert(obj.terminator == "--")
        assert(obj.strict)

    def test_build_dict(self):
        obj = ParserConfig.build({"prefix": "+", "terminator": "++", "strict": False})
        assert(obj.long_prefix == "++")
        assert(not obj.strict)

    def test_build_tomlguard(self):
        obj = ParserConfig.build(TomlGuard({"separator": ":"}))
        assert(obj.separator == ":")

    def test_build_passthrough(self):
        obj = ParserConfig()
        assert(ParserConfig.build(obj) is obj)

    @pytest.mark.parametrize("data", [{"prefix": "--"},
                                      {"prefix": ""},
                                      {"separator": "-"},
                                      {"terminator": ""},
                                      ])
    def test_build_fail(self, data):
        with pytest.raises(ConfigError):
            ParserConfig.build(data)

    def test_build_unknown_fail(self):
        with pytest.raises(ConfigError):
            ParserConfig.build(["-"])

    def test_with_strict(self):
        obj = ParserConfig.build()
        assert(obj.with_strict(None) is obj)
        assert(obj.with_strict(True) is obj)
        lax = obj.with_strict(False)
        assert(not lax.strict)
        assert(obj.strict)

    def test_is_option(self):
        obj = ParserConfig.build()
        assert(obj.is_option("-a"))
        assert(not obj.is_option("a"))
