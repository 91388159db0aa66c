"""
Tests for hostname, clock, password, NTP and save commands.
"""

import json

import pytest

from netsim_lib.config import hash_secret
from netsim_lib.repl import Mode, CommandError
from netsim_lib.repl.commands import parse_clock_args


class TestClockSet:

    def test_success(self, run, privileged, clock):
        result = run("clock set 10:30:00 15 March 2024")
        assert result.status == "ok"
        assert clock.time == "10:30:00"
        assert clock.date == "15 March 2024"

    def test_month_is_case_insensitive(self, run, privileged, clock):
        run("clock set 23:59:59 1 december 2035")
        assert clock.date == "1 December 2035"

    def test_day_out_of_range_leaves_clock_untouched(self, run, privileged, clock):
        result = run("clock set 10:30:00 32 March 2024")
        assert result.status == "error"
        assert "between 1 and 31" in result.message
        assert clock.time == "12:00:00"
        assert clock.date == "1 January 2024"

    @pytest.mark.parametrize("args,fragment", [
        (["24:00:00", "1", "March", "2024"], "23:59:59"),
        (["10:60:00", "1", "March", "2024"], "23:59:59"),
        (["10-30-00", "1", "March", "2024"], "hh:mm:ss"),
        (["10:30:00", "0", "March", "2024"], "between 1 and 31"),
        (["10:30:00", "1", "Smarch", "2024"], "January to December"),
        (["10:30:00", "1", "March", "1992"], "between 1993 and 2035"),
        (["10:30:00", "1", "March", "2036"], "between 1993 and 2035"),
    ])
    def test_invalid_fields(self, args, fragment):
        with pytest.raises(CommandError, match=fragment):
            parse_clock_args(args)

    def test_wrong_token_count(self, run, privileged, clock):
        assert run("clock set 10:30:00 15 March").status == "error"
        assert run("clock set 10:30:00 15 March 2024 extra").status == "error"
        assert clock.date == "1 January 2024"

    def test_not_available_in_user_mode(self, run, clock):
        assert run("clock set 10:30:00 15 March 2024").status == "invalid"


class TestHostname:

    def test_sets_hostname_and_prompt(self, run, configuring):
        run("hostname Core-1")
        assert configuring.config.hostname == "Core-1"

    def test_rejects_bad_name(self, run, configuring):
        assert run("hostname 9lives").status == "error"
        assert run("hostname a b").status == "error"
        assert configuring.config.hostname == "Router"


class TestPasswords:

    def test_enable_secret_stored_as_digest(self, run, configuring):
        run("enable secret s3cret")
        stored = configuring.store.passwords().enable_secret
        assert stored == hash_secret("s3cret")
        assert stored != "s3cret"

    def test_enable_password_plaintext(self, run, configuring):
        run("enable password letmein")
        assert configuring.store.passwords().enable_password == "letmein"

    def test_service_password_encryption(self, run, configuring, capsys):
        run("enable password letmein", "service password-encryption")
        assert configuring.config.password_encryption
        capsys.readouterr()
        run("do show running-config")
        out = capsys.readouterr().out
        assert "enable password 7 " in out
        assert "letmein" not in out


class TestWriteMemory:

    def test_saves_startup_config(self, run, configuring):
        run("hostname Edge", "write memory")
        data = json.loads(configuring.config_file.read_text())
        assert data["hostname"] == "Edge"
        assert "hostname Edge" in data["startup_config"]
        assert data["last_written"]
        assert configuring.config.startup_config == data["startup_config"]

    def test_rejects_arguments(self, run, privileged):
        assert run("write memory now").status == "error"
        assert not privileged.config_file.exists()

    def test_unwritable_path(self, run, privileged, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        privileged.config_file = blocker / "startup-config.json"
        result = run("write memory")
        assert result.status == "error"
        assert "Could not write" in result.message


class TestCopyRunningConfig:

    def test_to_startup_config(self, run, privileged):
        assert run("copy running-config startup-config").status == "ok"
        assert privileged.config_file.exists()

    def test_to_file(self, run, privileged, tmp_path):
        target = tmp_path / "backup.cfg"
        assert run(f"copy running-config {target}").status == "ok"
        text = target.read_text()
        assert "hostname Router" in text
        assert text.rstrip().endswith("end")

    def test_requires_destination(self, run, privileged):
        assert run("copy running-config").status == "error"

    def test_bad_file_name_is_an_error(self, run, privileged):
        result = run("copy running-config bad\x00name.cfg")
        assert result.status == "error"
        assert "Could not write" in result.message


class TestNtp:

    def test_server_and_removal(self, run, configuring):
        run("ntp server 10.0.0.1")
        assert configuring.store.ntp_snapshot().servers == ["10.0.0.1"]
        assert run("ntp server 10.0.0.1").status == "error"
        run("no ntp server 10.0.0.1")
        assert configuring.store.ntp_snapshot().servers == []

    def test_invalid_server(self, run, configuring):
        assert run("ntp server time.example.com").status == "error"

    def test_authentication(self, run, configuring):
        assert run("ntp trusted-key 1").status == "error"
        run("ntp authenticate", "ntp authentication-key 1 md5 abc123", "ntp trusted-key 1")
        ntp = configuring.store.ntp_snapshot()
        assert ntp.authenticate
        assert ntp.authentication_keys == {1: "abc123"}
        assert ntp.trusted_keys == {1}

    def test_master_and_source(self, run, configuring):
        run("ntp master", "ntp source GigabitEthernet0/0")
        ntp = configuring.store.ntp_snapshot()
        assert ntp.master
        assert ntp.source_interface == "GigabitEthernet0/0"

    def test_key_must_be_md5(self, run, configuring):
        assert run("ntp authentication-key 1 sha1 abc").status == "error"

    def test_not_in_privileged_mode(self, run, privileged):
        assert run("ntp master").status == "invalid"

    def test_clear_associations(self, run, configuring, capsys):
        run("ntp server 10.0.0.1")
        configuring.mode = Mode.PRIVILEGED
        assert run("clear ntp associations").status == "ok"
        assert "cleared and reinitialized" in capsys.readouterr().out
        assert [a.address for a in configuring.store.ntp_snapshot().associations] == ["10.0.0.1"]

    def test_clear_associations_needs_privileged(self, run, configuring):
        assert run("clear ntp associations").status == "invalid"


def answer_with(monkeypatch, *answers):
    """Feed yes/no answers to the confirmation prompts in order."""
    replies = iter(answers)
    monkeypatch.setattr(
        "netsim_lib.repl.commands.system.prompt_confirm",
        lambda question, default: next(replies),
    )


class TestReload:

    def test_save_and_reload(self, run, privileged, clock, monkeypatch, capsys):
        answer_with(monkeypatch, True, True)
        clock.started_at -= 1000
        assert run("reload").status == "ok"
        out = capsys.readouterr().out
        assert "[OK]" in out
        assert "System Bootstrap" in out
        assert "Press RETURN to get started!" in out
        assert privileged.mode == Mode.USER
        assert privileged.config_file.exists()
        assert clock.uptime_seconds() < 1000

    def test_reload_without_saving(self, run, privileged, monkeypatch, capsys):
        answer_with(monkeypatch, False, True)
        assert run("reload").status == "ok"
        assert "Configuration not saved." in capsys.readouterr().out
        assert not privileged.config_file.exists()
        assert privileged.mode == Mode.USER

    def test_reload_aborted(self, run, privileged, monkeypatch, capsys):
        answer_with(monkeypatch, False, False)
        assert run("reload").status == "ok"
        assert "Reload aborted." in capsys.readouterr().out
        assert privileged.mode == Mode.PRIVILEGED

    def test_invalid_answer(self, run, privileged, monkeypatch):
        answer_with(monkeypatch, None)
        result = run("reload")
        assert result.status == "error"
        assert "yes" in result.message
        assert privileged.mode == Mode.PRIVILEGED

    def test_needs_privileged(self, run):
        assert run("reload").status == "invalid"


class TestDebug:

    def test_debug_all_confirmed(self, run, privileged, monkeypatch, capsys):
        answer_with(monkeypatch, True)
        assert run("debug all").status == "ok"
        assert "debugging has been turned on" in capsys.readouterr().out
        assert privileged.debug_all

    def test_debug_all_declined(self, run, privileged, monkeypatch, capsys):
        answer_with(monkeypatch, False)
        run("debug all")
        assert "Returned" in capsys.readouterr().out
        assert not privileged.debug_all

    def test_undebug_all(self, run, privileged, capsys):
        privileged.debug_all = True
        assert run("undebug all").status == "ok"
        assert "debugging has been turned off" in capsys.readouterr().out
        assert not privileged.debug_all

    def test_rejects_arguments(self, run, privileged):
        assert run("undebug all now").status == "error"


class TestNonAsciiDigits:
    """Superscript and other Unicode digits are rejected as ordinary bad input."""

    def test_clock_day(self, run, privileged, clock):
        result = run("clock set 12:30:45 ² January 2025")
        assert result.status == "error"
        assert clock.date == "1 January 2024"

    def test_clock_time(self, run, privileged):
        assert run("clock set 1²:30:45 1 January 2025").status == "error"

    def test_ntp_key_number(self, run, configuring):
        assert run("ntp authentication-key ² md5 abc").status == "error"
        assert run("ntp trusted-key ²").status == "error"
