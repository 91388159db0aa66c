"""
Tests for the mode state machine and session commands.
"""

import re

import pytest

from netsim_lib.repl import Mode, Clock, CommandError, get_prompt_text, legal_commands_for
from netsim_lib.repl.modes import MODE_COMMANDS, exit_mode, end_mode, enter_interface
from netsim_lib.config import hash_secret


class TestAllowlists:

    def test_every_mode_has_an_allowlist(self):
        assert set(MODE_COMMANDS) == set(Mode)

    def test_allowlisted_names_are_registered(self, registry):
        for exact, _ in MODE_COMMANDS.values():
            for name in exact:
                assert name in registry, name

    def test_prefixes(self):
        is_legal = legal_commands_for(Mode.PRIVILEGED)
        assert is_legal("show ip route")
        assert is_legal("ifconfig")
        assert not is_legal("hostname")

    def test_config_allows_ntp_family(self):
        is_legal = legal_commands_for(Mode.CONFIG)
        assert is_legal("ntp server")
        assert is_legal("ntp trusted-key")
        assert is_legal("no ntp server")
        assert not is_legal("show running-config")

    def test_user_mode(self):
        is_legal = legal_commands_for(Mode.USER)
        assert is_legal("show version")
        assert not is_legal("show running-config")
        assert not is_legal("configure terminal")


class TestTransitions:

    def test_exit_pops_to_parent(self, ctx):
        enter_interface(ctx, "Gi0/0")
        assert exit_mode(ctx) == Mode.CONFIG
        assert ctx.selected_interface is None
        assert exit_mode(ctx) == Mode.PRIVILEGED
        assert exit_mode(ctx) == Mode.USER

    def test_exit_from_user_mode_fails(self, ctx):
        with pytest.raises(CommandError):
            exit_mode(ctx)

    def test_end_requires_config_mode(self, privileged):
        with pytest.raises(CommandError):
            end_mode(privileged)

    def test_prompts(self, ctx):
        expected = {
            Mode.USER: "Router> ",
            Mode.PRIVILEGED: "Router# ",
            Mode.CONFIG: "Router(config)# ",
            Mode.INTERFACE: "Router(config-if)# ",
            Mode.VLAN: "Router(config-vlan)# ",
            Mode.ROUTER: "Router(config-router)# ",
        }
        for mode, prompt in expected.items():
            ctx.mode = mode
            assert get_prompt_text(ctx) == prompt


class TestSessionCommands:

    def test_full_walk(self, run, ctx):
        run("enable")
        run("configure terminal")
        assert ctx.mode == Mode.CONFIG
        run("interface GigabitEthernet0/1")
        assert ctx.mode == Mode.INTERFACE
        assert ctx.selected_interface == "GigabitEthernet0/1"
        run("exit")
        assert ctx.mode == Mode.CONFIG
        run("vlan 10")
        assert ctx.mode == Mode.VLAN
        assert ctx.selected_vlan == 10
        run("end")
        assert ctx.mode == Mode.PRIVILEGED
        assert ctx.selected_vlan is None
        run("disable")
        assert ctx.mode == Mode.USER

    def test_enable_with_password(self, run, ctx, monkeypatch):
        ctx.store.set_enable_password("letmein")
        monkeypatch.setattr("netsim_lib.repl.commands.session.prompt_secret", lambda label: "wrong")
        result = run("enable")
        assert result.status == "error"
        assert ctx.mode == Mode.USER

        monkeypatch.setattr("netsim_lib.repl.commands.session.prompt_secret", lambda label: "letmein")
        assert run("enable").status == "ok"
        assert ctx.mode == Mode.PRIVILEGED

    def test_enable_secret_takes_precedence(self, run, ctx, monkeypatch):
        ctx.store.set_enable_password("plain")
        ctx.store.set_enable_secret(hash_secret("s3cret"))
        monkeypatch.setattr("netsim_lib.repl.commands.session.prompt_secret", lambda label: "plain")
        assert run("enable").status == "error"
        monkeypatch.setattr("netsim_lib.repl.commands.session.prompt_secret", lambda label: "s3cret")
        assert run("enable").status == "ok"

    def test_enable_cancelled(self, run, ctx, monkeypatch):
        ctx.store.set_enable_password("letmein")
        monkeypatch.setattr("netsim_lib.repl.commands.session.prompt_secret", lambda label: None)
        result = run("enable")
        assert result.status == "error"
        assert "cancelled" in result.message

    def test_help_lists_mode_commands(self, run, capsys):
        run("help")
        out = capsys.readouterr().out
        assert "enable" in out
        assert "show version" in out
        assert "configure terminal" not in out

    def test_do_runs_exec_command(self, run, configuring, capsys):
        result = run("do show clock")
        assert result.status == "ok"
        assert "12:00:00 UTC 1 January 2024" in capsys.readouterr().out
        assert configuring.mode == Mode.CONFIG

    def test_do_keeps_interface_selection(self, run, configuring):
        run("interface Gi0/0")
        run("do show ip interface brief")
        assert configuring.mode == Mode.INTERFACE
        assert configuring.selected_interface == "Gi0/0"

    def test_do_restores_mode_on_error(self, run, configuring):
        result = run("do clock set 25:00:00 1 March 2024")
        assert result.status == "error"
        assert configuring.mode == Mode.CONFIG

    def test_do_rejects_unknown(self, run, configuring):
        assert run("do frobnicate").status == "error"
        assert run("do configure terminal").status == "error"


def test_default_clock_reads_wall_time():
    clock = Clock()
    assert re.match(r"^\d{2}:\d{2}:\d{2}$", clock.time)
    day, month, year = clock.date.split()
    assert month.isalpha()
    assert len(year) == 4
    assert 0 <= clock.uptime_seconds() < 60
