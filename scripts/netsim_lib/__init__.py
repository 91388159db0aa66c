"""
netsim_lib - Shared library for the netsim device CLI simulator

This package contains the components of a text-mode simulator of a
router/switch command line: the configuration store, the command registry,
the mode state machine and the dispatcher that ties them together.
"""

__version__ = "1.0.0"
