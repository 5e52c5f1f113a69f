#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
from types import SimpleNamespace
import pytest
##-- end imports
logging = logmod.root

from progparams.structs import ExternalBinding, OwnedBinding
from progparams._abstract import Binding_p

class TestOwnedBinding:

    def test_initial(self):
        obj = OwnedBinding(5)
        assert(isinstance(obj, Binding_p))
        assert(obj.read() == 5)

    def test_write(self):
        obj = OwnedBinding()
        obj.write("blah")
        assert(obj.read() == "blah")

class TestExternalBinding:

    def test_attribute(self):
        target = SimpleNamespace(count=0)
        obj    = ExternalBinding(target, "count")
        assert(isinstance(obj, Binding_p))
        obj.write(5)
        assert(target.count == 5)
        assert(obj.read() == 5)

    def test_mapping(self):
        target = {"count": 0}
        obj    = ExternalBinding(target, "count")
        obj.write(5)
        assert(target['count'] == 5)
        assert(obj.read() == 5)

    def test_missing_attribute(self):
        obj = ExternalBinding(SimpleNamespace(), "count")
        with pytest.raises(AttributeError):
            obj.read()

    def test_repr(self):
        obj = ExternalBinding({}, "count")
        assert(repr(obj) == "<ExternalBinding: dict.count>")
