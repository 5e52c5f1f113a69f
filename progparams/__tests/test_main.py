#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
import pytest
##-- end imports
logging = logmod.root

from progparams.__main__ import main, build_params, is_verbose

class TestMain:

    def test_build_params(self):
        params = build_params()
        assert("--count" in params)
        assert("destination" in params)

    def test_values(self, capsys):
        assert(main(["-a", "-c", "3", "-i", "2.5", "192.168.0.1"]) == 0)
        out = capsys.readouterr().out
        assert("Audible: True" in out)
        assert("Count: 3" in out)
        assert("Interval: 2.5" in out)
        assert("Destination: 192.168.0.1" in out)

    def test_defaults(self, capsys):
        assert(main(["host"]) == 0)
        out = capsys.readouterr().out
        assert("Audible: False" in out)
        assert("Count: 10" in out)
        assert("Interval: 1\n" in out)

    def test_combined(self, capsys):
        assert(main(["-ai0.5", "--count=2", "host"]) == 0)
        out = capsys.readouterr().out
        assert("Audible: True" in out)
        assert("Count: 2" in out)
        assert("Interval: 0.5" in out)

    def test_missing_destination(self, capsys):
        assert(main([]) == 1)
        out = capsys.readouterr().out
        assert("Required parameter not found: destination" in out)
        assert("Usage:" in out)

    def test_unknown_option(self, capsys):
        assert(main(["-z", "host"]) == 1)
        out = capsys.readouterr().out
        assert("Unknown short option" in out)

    def test_verbose(self, capsys, mocker):
        mocker.patch("logging.basicConfig")
        assert(main(["-v", "host"]) == 0)
        assert("Destination: host" in capsys.readouterr().out)
        logmod.root.setLevel(logmod.WARNING)

    def test_verbose_logs_parse(self, caplog, mocker):
        mocker.patch("logging.basicConfig")
        assert(main(["-av", "host"]) == 0)
        logmod.root.setLevel(logmod.WARNING)
        messages = [x.getMessage() for x in caplog.records if x.name == "progparams.parsers.matcher"]
        assert(any(x.startswith("Parsing args") for x in messages))

    def test_quiet_by_default(self, caplog):
        assert(main(["host"]) == 0)
        assert(not any(x.name == "progparams.parsers.matcher" for x in caplog.records))

    def test_is_verbose(self):
        assert(is_verbose(["-v", "host"]))
        assert(is_verbose(["-c", "3", "-av", "host"]))
        assert(not is_verbose(["-a", "--count=2", "host"]))

    def test_interval_formatting(self, capsys):
        assert(main(["-i", "0.1", "host"]) == 0)
        assert("Interval: 0.1\n" in capsys.readouterr().out)
