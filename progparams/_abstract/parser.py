#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from abc import abstractmethod
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgMatcher_i:
    """
    A single standard process point for walking a list of passed in args,
    matching each against declared parameters,
    and writing the converted values into their bound storage.
    """

    @abstractmethod
    def parse(self, args:Sequence[str]) -> None:
        pass
