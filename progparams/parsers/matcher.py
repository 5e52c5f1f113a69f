#!/usr/bin/env python3
"""
The argv walker.

Short options may be combined, and a short option may carry its value
in the same arg, so "-fbar" could be four flags, or -f with the value "bar".
That ambiguity is resolved only by what has been declared:
each char of a cluster is looked up left to right,
and the first that takes a value claims the rest of the arg as its value.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
# ##-- end stdlib imports

# ##-- 1st party imports
from progparams._abstract.parser import ArgMatcher_i
from progparams._errors.parse import UnknownOption, UnknownPositional

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from progparams._abstract.protocols import ParamRegistry_p, ParamStruct_p
    from progparams._structs.parser_config import ParserConfig

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ArgMatcher(ArgMatcher_i):
    """
    Walk a list of args once, left to right,
    matching each arg against a registry of declared parameters.

    # {options and positionals, in any order} [-- {positionals}]
    """

    class _ParseState(enum.Enum):
        OPTIONS    = enum.auto()
        POSITIONAL = enum.auto()

    class _ArgKind(enum.Enum):
        POSITIONAL = enum.auto()
        TERMINATOR = enum.auto()
        SHORT      = enum.auto()
        LONG       = enum.auto()

    def __init__(self, registry:ParamRegistry_p):
        self.PS                               = ArgMatcher._ParseState
        self.AK                               = ArgMatcher._ArgKind
        self.registry                         = registry
        self.config      : ParserConfig       = registry.config
        self.focus                            = self.PS.OPTIONS
        self._positional : list[ParamStruct_p] = registry.positionals()
        self._next_pos   : int                = 0

    def parse(self, args:Sequence[str]) -> None:
        """
          Parses the list of arguments against the registry's declared params,
          then checks every required param was found.
        """
        args   = tuple(args)
        cursor = 0
        logging.debug("Parsing args: %s", args)
        while cursor < len(args):
            arg = args[cursor]
            match self._classify(arg):
                case self.AK.POSITIONAL:
                    cursor += self.process_positional(args, cursor)
                case self.AK.TERMINATOR:
                    logging.debug("Terminator, remaining args are positional")
                    self.focus  = self.PS.POSITIONAL
                    cursor     += 1
                case self.AK.SHORT:
                    cursor += self.process_short(args, cursor)
                case self.AK.LONG:
                    cursor += self.process_long(args, cursor)

        self.registry.check()

    def _classify(self, arg:str) -> ArgMatcher._ArgKind:
        prefix = self.config.prefix
        match arg:
            case _ if self.focus is self.PS.POSITIONAL:
                return self.AK.POSITIONAL
            case _ if arg == self.config.terminator:
                return self.AK.TERMINATOR
            case "":
                return self.AK.POSITIONAL
            case _ if arg == prefix or not self.config.is_option(arg):
                return self.AK.POSITIONAL
            case _ if arg.startswith(self.config.long_prefix):
                return self.AK.LONG
            case _:
                return self.AK.SHORT

    def process_positional(self, args:tuple[str, ...], cursor:int) -> int:
        """ Give the arg to the next positional param, in declaration order """
        if self._next_pos < len(self._positional):
            param           = self._positional[self._next_pos]
            self._next_pos += 1
            logging.debug("Positional %s : %s", param.name, args[cursor])
            return param.consume(args[cursor:])

        if self.registry.strict:
            raise UnknownPositional("Unknown positional parameter: %s", args[cursor])

        logging.debug("Skipping positional: %s", args[cursor])
        return 1

    def process_short(self, args:tuple[str, ...], cursor:int) -> int:
        """ Handle a cluster of short options: -a, -asdf, -c5, -c=5, -ac 5 """
        arg      = args[cursor]
        prefix   = self.config.prefix
        consumed = 0
        for i, char in enumerate(arg[1:], start=1):
            name = f"{prefix}{char}"
            match self.registry.lookup(name):
                case None if self.registry.strict:
                    raise UnknownOption("Unknown short option: %s (%s)", name, arg)
                case None:
                    logging.debug("Skipping short option: %s", name)
                    continue
                case param:
                    pass

            consumed = param.consume(args[cursor:], attached=self._attached(arg[i+1:]))
            if 0 < consumed:
                # The rest of the arg was the value for this option
                break

        return consumed or 1

    def _attached(self, rest:str) -> None|str:
        """ The value attached to a short option. None when there isn't one """
        match rest:
            case "":
                return None
            case _ if rest.startswith(self.config.separator):
                return rest[1:]
            case _:
                return rest

    def process_long(self, args:tuple[str, ...], cursor:int) -> int:
        """ Handle --name and --name=value """
        arg                 = args[cursor]
        name, sep, value    = arg.partition(self.config.separator)
        match self.registry.lookup(name):
            case None if self.registry.strict:
                raise UnknownOption("Unknown long option: %s", name)
            case None:
                logging.debug("Skipping long option: %s", name)
                return 1
            case param:
                attached = value if bool(sep) else None
                return param.consume(args[cursor:], attached=attached) or 1
