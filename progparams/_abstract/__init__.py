"""
Interfaces and Protocols for progparams.

Definitions:

Protocols  - Functional specifications an object needs to implement to be used
Interfaces - Combined Functional and Structural specifications

Protocols have names: {}_p
Interfaces have names {}_i

Interfaces need to be inherited from.
"""

from .protocols import Binding_p, ParamStruct_p, ParamRegistry_p
from .parser import ArgMatcher_i
