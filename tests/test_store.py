"""
Tests for the configuration store.
"""

import threading

import pytest

from netsim_lib.config import (
    AclEntry,
    ConfigurationStore,
    StoreBusyError,
)
from netsim_lib.profiles import DeviceProfile, ProfileInterface, ProfileVlan


class TestSeeding:
    """Test the initial state built from a profile."""

    def test_default_profile_seeds_ens33(self, store):
        iface = store.ifconfig_get("ens33")
        assert iface.ip_address == "192.168.253.135"
        assert iface.prefix_len == 24
        assert iface.broadcast == "192.168.253.255"
        assert iface.is_up

    def test_default_vlan_exists(self, store):
        vlans = store.vlan_all()
        assert [v.vlan_id for v in vlans] == [1]
        assert vlans[0].name == "default"

    def test_router_interfaces_start_empty(self, store):
        assert store.interface_all() == []

    def test_custom_profile(self):
        profile = DeviceProfile(
            name="lab",
            ifconfig=[ProfileInterface(name="eth0", address="10.0.0.5", prefix_len=30)],
            interfaces=[
                ProfileInterface(name="Gi0/0", address="203.0.113.2", prefix_len=30, enabled=True),
                ProfileInterface(name="Gi0/1", enabled=False),
            ],
            vlans=[ProfileVlan(vlan_id=10, name="users")],
        )
        store = ConfigurationStore(profile)
        assert store.ifconfig_get("eth0").broadcast == "10.0.0.7"
        assert store.ifconfig_get("ens33") is None
        assert store.interface_get("Gi0/0").ip_address == "203.0.113.2"
        assert store.interface_get("Gi0/1").ip_address is None
        # VLAN 1 is always present
        assert [v.vlan_id for v in store.vlan_all()] == [1, 10]


class TestInterfaces:

    def test_ifconfig_set_address_comes_up(self, store):
        iface = store.ifconfig_set_address("ens34", "10.0.0.5", 30)
        assert iface.broadcast == "10.0.0.7"
        assert iface.is_up

    def test_ifconfig_set_state_unknown(self, store):
        assert not store.ifconfig_set_state("nope0", True)

    def test_ip_address_keeps_admin_state(self, store):
        store.interface_ensure("Gi0/0")
        store.interface_set_state("Gi0/0", True)
        iface = store.interface_set_address("Gi0/0", "192.168.1.1", 24)
        assert iface.is_up
        assert iface.broadcast == "192.168.1.255"

    def test_stores_are_independent(self, store):
        store.interface_set_address("ens33", "10.9.9.9", 8)
        assert store.ifconfig_get("ens33").ip_address == "192.168.253.135"
        assert store.interface_get("ens33").ip_address == "10.9.9.9"

    def test_clear_address(self, store):
        store.interface_set_address("Gi0/0", "192.168.1.1", 24)
        assert store.interface_clear_address("Gi0/0")
        iface = store.interface_get("Gi0/0")
        assert iface.ip_address is None
        assert iface.broadcast is None
        assert not store.interface_clear_address("Gi0/0")

    def test_reads_are_copies(self, store):
        iface = store.ifconfig_get("ens33")
        iface.ip_address = "1.1.1.1"
        assert store.ifconfig_get("ens33").ip_address == "192.168.253.135"


class TestRoutes:

    def test_add_and_delete(self, store):
        store.route_add("10.0.0.0", "255.0.0.0", "192.168.1.254")
        store.route_add("10.0.0.0", "255.0.0.0", "192.168.1.253")
        routes = store.route_all()
        assert len(routes) == 1
        assert routes[0].next_hop == "192.168.1.253"
        assert store.route_delete("10.0.0.0")
        assert not store.route_delete("10.0.0.0")


class TestOspf:

    def test_accumulates(self, store):
        store.ospf_set_process(1)
        store.ospf_add_network("10.0.0.0", 8, "0")
        store.ospf_set_router_id("1.1.1.1")
        store.ospf_add_passive("Gi0/1")
        store.ospf_configure_area("0", stub=True)
        store.ospf_configure_area("0", default_cost=10)
        ospf = store.ospf_snapshot()
        assert ospf.process_id == 1
        assert ospf.networks == {"10.0.0.0": 8}
        assert ospf.router_id == "1.1.1.1"
        assert ospf.passive_interfaces == {"Gi0/1"}
        assert ospf.areas["0"].stub
        assert ospf.areas["0"].default_cost == 10
        assert not ospf.areas["0"].authentication

    def test_network_creates_area(self, store):
        store.ospf_add_network("192.168.0.0", 16, "5")
        assert "5" in store.ospf_snapshot().areas


class TestAcls:

    def test_append_preserves_order(self, store):
        store.acl_append("10", AclEntry(action="allow", source="any"))
        count = store.acl_append("10", AclEntry(action="deny", source="host 10.0.0.1"))
        assert count == 2
        acl = store.acl_get("10")
        assert [e.action for e in acl.entries] == ["allow", "deny"]

    def test_delete(self, store):
        store.acl_append("10", AclEntry(action="allow", source="any"))
        assert store.acl_delete("10")
        assert store.acl_get("10") is None
        assert not store.acl_delete("10")


class TestVlans:

    def test_ensure_uses_default_name(self, store):
        vlan = store.vlan_ensure(20)
        assert vlan.name == "VLAN0020"
        assert vlan.state == "active"

    def test_ensure_keeps_existing(self, store):
        store.vlan_ensure(20)
        store.vlan_set_name(20, "voice")
        assert store.vlan_ensure(20).name == "voice"

    def test_default_vlan_cannot_be_deleted(self, store):
        assert not store.vlan_delete(1)
        assert store.vlan_get(1) is not None


class TestNtp:

    def test_server_adds_association(self, store):
        assert store.ntp_add_server("10.0.0.1")
        assert not store.ntp_add_server("10.0.0.1")
        ntp = store.ntp_snapshot()
        assert ntp.servers == ["10.0.0.1"]
        assert ntp.associations[0].address == "10.0.0.1"
        assert ntp.associations[0].stratum == 16

    def test_remove_server_drops_association(self, store):
        store.ntp_add_server("10.0.0.1")
        assert store.ntp_remove_server("10.0.0.1")
        assert store.ntp_snapshot().associations == []

    def test_trusted_key_requires_key(self, store):
        assert not store.ntp_add_trusted_key(1)
        store.ntp_add_authentication_key(1, "secret")
        assert store.ntp_add_trusted_key(1)

    def test_clear_associations_resets_state(self, store):
        store.ntp_add_server("10.0.0.1")
        store.ntp_add_server("10.0.0.2")
        store._ntp.associations[0].reach = 377
        store._ntp.associations.pop()
        assert store.ntp_clear_associations() == 2
        ntp = store.ntp_snapshot()
        assert [a.address for a in ntp.associations] == ["10.0.0.1", "10.0.0.2"]
        assert ntp.associations[0].reach == 0


class TestLocking:
    """A held lock makes store calls fail with StoreBusyError."""

    def test_busy_lock_times_out(self):
        store = ConfigurationStore(lock_timeout=0.05)
        store._route_lock.acquire()
        try:
            with pytest.raises(StoreBusyError):
                store.route_all()
        finally:
            store._route_lock.release()
        assert store.route_all() == []

    def test_other_families_unaffected(self):
        store = ConfigurationStore(lock_timeout=0.05)
        store._route_lock.acquire()
        try:
            assert store.vlan_get(1) is not None
        finally:
            store._route_lock.release()

    def test_concurrent_appends(self, store):
        def worker(n):
            for i in range(50):
                store.acl_append("ACL", AclEntry(action="allow", source=f"host 10.0.{n}.{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store.acl_get("ACL").entries) == 200
