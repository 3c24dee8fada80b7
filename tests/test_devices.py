import pytest

from netroute.core.devices import (
    Host,
    NetworkDevice,
    Router,
    Switch,
    device_from_dict,
    device_to_dict,
)


class TestDeviceHierarchy:
    def test_kinds(self):
        assert Router(1, "R1", "mgmt0").kind == "Router"
        assert Switch(2, "S1", "mgmt1").kind == "Switch"
        assert Host(3, "H1", "10.0.0.1").kind == "Host"

    def test_network_devices(self):
        router = Router(1, "R1", "mgmt0")
        assert isinstance(router, NetworkDevice)
        assert router.mgmt_interface == "mgmt0"
        assert not isinstance(Host(3, "H1", "10.0.0.1"), NetworkDevice)

    def test_repr(self):
        assert repr(Switch(2, "S1")) == "Switch(2, 'S1')"


class TestDeviceDicts:
    def test_host_fields(self):
        data = device_to_dict(Host(3, "H1", "10.0.0.1"))
        assert data == {"kind": "Host", "id": 3, "name": "H1", "ip_address": "10.0.0.1"}
        host = device_from_dict(data)
        assert isinstance(host, Host)
        assert host.ip_address == "10.0.0.1"

    def test_switch_fields(self):
        switch = device_from_dict(device_to_dict(Switch(2, "S1", "mgmt1")))
        assert isinstance(switch, Switch)
        assert (switch.id, switch.name, switch.mgmt_interface) == (2, "S1", "mgmt1")

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown device kind"):
            device_from_dict({"kind": "Firewall", "id": 1, "name": "F1"})
