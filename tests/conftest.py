"""
Shared test fixtures for netsim.
"""

import pytest
import sys
import os

# Add scripts to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'scripts'))

from netsim_lib.config import ConfigurationStore, CliConfig
from netsim_lib.repl import Mode, Clock, CliContext, build_registry, resolve_and_execute


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def store():
    """Store seeded from the built-in default profile."""
    return ConfigurationStore()


@pytest.fixture
def ctx(store, registry, tmp_path):
    """Session context in user mode, saving to a temporary startup-config."""
    return CliContext(
        store=store,
        config=CliConfig(),
        commands=registry,
        config_file=tmp_path / "startup-config.json",
    )


@pytest.fixture
def clock():
    return Clock(time="12:00:00", date="1 January 2024")


@pytest.fixture
def run(ctx, clock):
    """Dispatch one or more lines of input and return the last result."""
    def _run(*lines):
        result = None
        for line in lines:
            result = resolve_and_execute(line, ctx.commands, ctx, clock)
        return result
    return _run


@pytest.fixture
def privileged(ctx):
    ctx.mode = Mode.PRIVILEGED
    return ctx


@pytest.fixture
def configuring(ctx):
    ctx.mode = Mode.CONFIG
    return ctx
