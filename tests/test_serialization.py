"""
Tests for saving and loading startup-config.json.
"""

import json

from netsim_lib.config import CliConfig, save_config, load_config, to_dict


def test_to_dict():
    config = CliConfig(hostname="R1", startup_config=["hostname R1"])
    assert to_dict(config) == {
        "hostname": "R1",
        "startup_config": ["hostname R1"],
        "last_written": None,
        "password_encryption": False,
    }


def test_save_and_load(tmp_path, capsys):
    path = tmp_path / "nested" / "startup-config.json"
    config = CliConfig(hostname="Edge", startup_config=["!", "hostname Edge", "end"], password_encryption=True)
    save_config(config, path)
    assert "Configuration saved to" in capsys.readouterr().out

    loaded = load_config(path)
    assert loaded == config


def test_save_quiet(tmp_path, capsys):
    save_config(CliConfig(), tmp_path / "startup-config.json", quiet=True)
    assert capsys.readouterr().out == ""


def test_missing_file_gives_defaults(tmp_path, capsys):
    config = load_config(tmp_path / "absent.json")
    assert config == CliConfig()
    assert "not found" in capsys.readouterr().out


def test_invalid_json_gives_defaults(tmp_path, capsys):
    path = tmp_path / "startup-config.json"
    path.write_text("{not json")
    assert load_config(path) == CliConfig()
    assert "Could not read" in capsys.readouterr().out


def test_non_object_gives_defaults(tmp_path, capsys):
    path = tmp_path / "startup-config.json"
    path.write_text(json.dumps(["hostname R1"]))
    assert load_config(path) == CliConfig()


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "startup-config.json"
    path.write_text(json.dumps({"hostname": "R2", "extra": 1, "startup_config": None}))
    config = load_config(path)
    assert config.hostname == "R2"
    assert config.startup_config == []


class TestLoadFieldTypes:

    def write(self, tmp_path, data):
        path = tmp_path / "startup-config.json"
        path.write_text(json.dumps(data))
        return path

    def test_startup_config_not_a_list(self, tmp_path, capsys):
        config = load_config(self.write(tmp_path, {"hostname": "R3", "startup_config": 5}))
        assert config.hostname == "R3"
        assert config.startup_config == []
        assert "Ignoring invalid 'startup_config'" in capsys.readouterr().out

    def test_startup_config_with_non_string_lines(self, tmp_path):
        config = load_config(self.write(tmp_path, {"startup_config": ["hostname R3", 7]}))
        assert config.startup_config == []

    def test_null_hostname(self, tmp_path, capsys):
        config = load_config(self.write(tmp_path, {"hostname": None}))
        assert config.hostname == "Router"
        assert "Ignoring invalid 'hostname'" in capsys.readouterr().out

    def test_hostname_must_be_valid(self, tmp_path):
        assert load_config(self.write(tmp_path, {"hostname": "1bad host"})).hostname == "Router"

    def test_password_encryption_must_be_bool(self, tmp_path):
        config = load_config(self.write(tmp_path, {"password_encryption": "yes"}))
        assert config.password_encryption is False

    def test_last_written_must_be_string(self, tmp_path):
        config = load_config(self.write(tmp_path, {"last_written": 20240101, "hostname": "R4"}))
        assert config.last_written is None
        assert config.hostname == "R4"
