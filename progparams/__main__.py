#!/usr/bin/env python3
"""
An example program using progparams:

python -m progparams -a -c 10 -i 2.5 192.168.0.1
"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

USAGE   = "Usage:   progparams [-v] [-a] [-c <count>] [-i <interval>] <destination>"
EXAMPLE = "Example: progparams -a -c 10 -i 2.5 192.168.0.1"

def build_params():
    from progparams import Params
    params = Params()
    params.declare_internal("-v", bool, desc="Log at debug level")
    params.declare_internal("-a", bool, desc="Audible")
    params.declare_internal(["-c", "--count"], "ulong", default=10, desc="Number of repetitions")
    params.declare_internal(["-i", "--interval"], "float", default=1.0, desc="Seconds between repetitions")
    params.declare_internal("destination", str, required=True, desc="Where to send to")
    return params

def is_verbose(argv:list[str]) -> bool:
    """ Look for -v ahead of the real parse, so the parse itself can be logged """
    from progparams import Params
    params = Params(False)
    params.declare_internal("-v", bool)
    params.parse(argv)
    return params.get("-v", bool)

def main(argv:None|list[str]=None) -> int:
    from progparams.errors import ParseError
    argv   = sys.argv[1:] if argv is None else argv
    params = build_params()
    if is_verbose(argv):
        logmod.basicConfig()
        logging.setLevel(logmod.DEBUG)

    try:
        params.parse(argv)
    except ParseError as err:
        print(err)
        print(USAGE)
        print(EXAMPLE)
        print(params)
        return 1

    logging.debug("Results: %s", dict(params.results().items()))
    print(f"Audible: {params.get('-a', bool)}")
    print(f"Count: {params.get('--count', 'ulong')}")
    print(f"Interval: {params.get('--interval', 'float'):g}")
    print(f"Destination: {params.get('destination', str)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
