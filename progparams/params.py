#!/usr/bin/env python3
"""
The registry of declared parameters, and access to their parsed values.

Params owns a dense list of ParamSpecs in declaration order.
Names map to indices into that list, as does the positional order.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from progparams import _interface as API
from progparams._interface import ValueType
from progparams._errors.access import ParameterNotFound, TypeMismatch
from progparams._errors.declare import DeclarationError
from progparams._errors.parse import ParseError, RequiredParameterMissing
from progparams._structs.binding import ExternalBinding, OwnedBinding
from progparams._structs.param_spec import ParamSpec
from progparams._structs.parser_config import ParserConfig
from progparams.conversion import coerce, default_for, infer_type
from progparams.parsers.matcher import ArgMatcher

# ##-- end 1st party imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any
    from collections.abc import Iterable, Iterator, Sequence
    from progparams._abstract.protocols import Binding_p

##--|

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Params:
    """
    Declare parameters, parse an argv against them, then read the values.

    params = Params()
    params.declare_internal(["-c", "--count"], "uint")
    params.declare_external(opts, "dest", [], required=True)
    params.parse(sys.argv[1:])
    params.get("--count")
    """

    def __init__(self, strict:None|bool=None, *, config:None|dict|TomlGuard|ParserConfig=None):
        self._config     : ParserConfig    = ParserConfig.build(config).with_strict(strict)
        self._specs      : list[ParamSpec] = []
        self._aliases    : dict[str, int]  = {}
        self._positional : list[int]       = []
        self._parsed     : bool            = False

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def strict(self) -> bool:
        return self._config.strict

    @property
    def specs(self) -> list[ParamSpec]:
        return self._specs[:]

    def positionals(self) -> list[ParamSpec]:
        return [self._specs[x] for x in self._positional]

    ##--| declaration

    def declare(self, binding:None|Binding_p, names:str|Iterable[str], *, required:bool=False, type_:None|ValueType|str|type=None, desc:None|str=None) -> ParamSpec:
        """ Register a parameter under all of its names.
          With no binding, the registry owns the storage.
        """
        if type_ is None:
            raise DeclarationError("Parameter needs a type: %s", names)

        data = {"names": names, "type": type_, "required": required, "prefix": self._config.prefix}
        if desc is not None:
            data['desc'] = desc

        spec = ParamSpec.build(data, binding=binding)
        if self._config.terminator in spec.names:
            raise DeclarationError("The terminator can't be a parameter name: %s", self._config.terminator)

        match [x for x in spec.names if x in self._aliases]:
            case []:
                pass
            case [*xs]:
                raise DeclarationError("Parameter names already declared: %s", xs)

        index = len(self._specs)
        self._specs.append(spec)
        for name in spec.names:
            self._aliases[name] = index

        if not spec.is_option:
            self._positional.append(index)

        logging.debug("Declared: %s (%s)", spec.names or spec.name, spec.type_.value)
        return spec

    def declare_external(self, target:Any, key:str, names:str|Iterable[str], *, required:bool=False, type_:None|ValueType|str|type=None, desc:None|str=None) -> ParamSpec:
        """ Bind a parameter to caller storage, target.key or target[key].
          The type comes from the current value unless given.
          A given type has to hold the current value, unless that is None.
        """
        binding = ExternalBinding(target, key)
        try:
            current = binding.read()
        except (AttributeError, KeyError) as err:
            raise DeclarationError("Can't read external storage: %s", binding) from err

        match type_:
            case None:
                type_ = infer_type(current)
            case _ if current is None:
                pass
            case _:
                self._check_value(current, type_, binding)

        if type_ is None:
            raise DeclarationError("Can't infer a type for external storage: %s", binding)

        return self.declare(binding, names, required=required, type_=type_, desc=desc)

    def declare_internal(self, names:str|Iterable[str], type_:ValueType|str|type, *, required:bool=False, default:Any=None, desc:None|str=None) -> ParamSpec:
        """ Declare a parameter whose value is held by the registry, retrieved with get """
        try:
            initial = default_for(type_)
        except ValueError as err:
            raise DeclarationError("Unknown value type: %s", type_) from err

        if default is not None:
            initial = self._check_value(default, type_, names)

        return self.declare(OwnedBinding(initial), names, required=required, type_=type_, desc=desc)

    def _check_value(self, value:Any, type_:ValueType|str|type, owner:Any) -> Any:
        try:
            return coerce(value, type_)
        except ValueError as err:
            raise DeclarationError("Value %r doesn't fit type %s: %s", value, type_, owner) from err

    ##--| parsing

    def parse(self, args:Sequence[str]) -> None:
        """ Parse an argv (without the program name) into the declared parameters """
        if self._parsed:
            raise ParseError("Params have already been parsed")

        self._parsed = True
        ArgMatcher(self).parse(args)

    def check(self) -> None:
        """ Raise RequiredParameterMissing, naming every required parameter that wasn't found """
        missing = [x.name for x in self._specs if x.required and not x.found]
        match missing:
            case []:
                pass
            case [x]:
                raise RequiredParameterMissing("Required parameter not found: %s", x)
            case [*xs]:
                raise RequiredParameterMissing("Required parameters not found: %s", ", ".join(xs))

    ##--| access

    def lookup(self, name:str) -> None|ParamSpec:
        match self._aliases.get(name, None):
            case None:
                return None
            case int() as x:
                return self._specs[x]

    def get(self, name:str, type_:None|ValueType|str|type=None) -> Any:
        """ Get the value of a parameter by any of its names,
          checking its declared type if one is requested
        """
        match self.lookup(name):
            case None:
                raise ParameterNotFound("Parameter not found: %s", name)
            case ParamSpec() as spec if type_ is None:
                return spec.read()
            case ParamSpec() as spec:
                pass

        try:
            requested = ValueType.build(type_)
        except ValueError as err:
            raise TypeMismatch("Unknown requested type for %s: %s", name, type_) from err

        if requested is not spec.type_:
            raise TypeMismatch("Parameter %s is %s, not %s", name, spec.type_.value, requested.value)

        return spec.read()

    def found(self, name:str) -> bool:
        match self.lookup(name):
            case None:
                raise ParameterNotFound("Parameter not found: %s", name)
            case spec:
                return spec.found

    def results(self) -> TomlGuard:
        """ Every parameter's current value, keyed by its longest name without a prefix """
        data = {}
        for i, spec in enumerate(self._specs):
            data[spec.key or API.ANON_KEY.format(i)] = spec.read()

        return TomlGuard(data)

    def __contains__(self, name:str) -> bool:
        return name in self._aliases

    def __iter__(self) -> Iterator[ParamSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __str__(self):
        return "\n".join(str(x) for x in self._specs)
