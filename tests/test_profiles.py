"""
Tests for device profile loading and validation.
"""

from pathlib import Path

import pytest

from netsim_lib.config import ConfigurationStore
from netsim_lib.profiles import (
    ProfileValidationError,
    load_device_profile,
    validate_device_profile,
    default_profile,
)


PROFILES_DIR = Path(__file__).parent.parent / "profiles"


class TestLoadProfile:

    def test_lab_router(self):
        profile = load_device_profile(PROFILES_DIR / "lab-router.yaml")
        assert profile.name == "lab-router"
        assert profile.hostname == "BranchR1"
        assert [i.name for i in profile.ifconfig] == ["ens33", "ens34"]
        assert not profile.ifconfig[1].enabled
        assert profile.interfaces[1].address is None
        assert profile.interfaces[1].prefix_len is None
        assert profile.vlans[2].state == "suspend"

    def test_seeds_store(self):
        store = ConfigurationStore(load_device_profile(PROFILES_DIR / "lab-router.yaml"))
        assert store.ifconfig_get("ens34").broadcast == "10.10.0.3"
        assert store.interface_get("GigabitEthernet0/0").is_up
        assert not store.interface_get("GigabitEthernet0/1").is_up
        assert store.vlan_get(10).name == "users"

    def test_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_device_profile(tmp_path / "nope.yaml")

    def test_yaml_syntax_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unterminated\n")
        with pytest.raises(ProfileValidationError, match="YAML syntax error"):
            load_device_profile(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ProfileValidationError, match="must be a dict"):
            load_device_profile(path)

    def test_validation_failure(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("name: broken\nhostname: 1bad\n")
        with pytest.raises(ProfileValidationError, match="validation failed"):
            load_device_profile(path)

    def test_defaults(self, tmp_path):
        path = tmp_path / "min.yaml"
        path.write_text("name: minimal\nvlans:\n  - id: 5\n")
        profile = load_device_profile(path)
        assert profile.hostname == "Router"
        assert profile.vlans[0].name == "VLAN0005"


class TestValidateProfile:

    def test_valid(self):
        data = {
            "name": "ok",
            "ifconfig": [{"name": "eth0", "address": "10.0.0.1", "prefix_len": 8}],
            "interfaces": [{"name": "Gi0/0"}],
            "vlans": [{"id": 1, "name": "default"}],
        }
        assert validate_device_profile(data) == []

    def test_collects_errors(self):
        data = {
            "ifconfig": [
                {"name": "eth0"},
                {"name": "eth0", "address": "10.0.0.300"},
                {"name": "eth1", "address": "10.0.0.1", "prefix_len": 33, "enabled": "yes"},
            ],
            "vlans": [{"id": 0}, {"id": 10, "state": "down"}, {"id": 10}],
        }
        errors = validate_device_profile(data)
        assert "Missing required field: name" in errors
        assert "ifconfig[0]: missing 'address' field" in errors
        assert "Duplicate interface name in ifconfig: eth0" in errors
        assert "ifconfig[1]: invalid IPv4 address '10.0.0.300'" in errors
        assert "ifconfig[2]: prefix_len must be an integer between 0 and 32" in errors
        assert "ifconfig[2]: enabled must be true or false" in errors
        assert "vlans[0]: id must be an integer between 1 and 4094" in errors
        assert "vlans[1]: state must be 'active' or 'suspend'" in errors
        assert "Duplicate VLAN id: 10" in errors

    def test_sections_must_be_lists(self):
        errors = validate_device_profile({"name": "x", "interfaces": {}, "vlans": "1"})
        assert "interfaces must be a list" in errors
        assert "vlans must be a list" in errors


def test_default_profile():
    profile = default_profile()
    assert profile.ifconfig[0].name == "ens33"
    assert profile.vlans[0].name == "default"
    assert profile.interfaces == []


def test_booleans_are_not_integers():
    data = {
        "name": "bools",
        "ifconfig": [{"name": "eth0", "address": "10.0.0.1", "prefix_len": True}],
        "vlans": [{"id": True}],
    }
    errors = validate_device_profile(data)
    assert "ifconfig[0]: prefix_len must be an integer between 0 and 32" in errors
    assert "vlans[0]: id must be an integer between 1 and 4094" in errors
