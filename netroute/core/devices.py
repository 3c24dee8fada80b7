"""Device classes for network simulation.

This module defines the devices (routers, switches, hosts) that can be
registered with the simulator. The simulator only uses a device's name as
the graph node and its kind for reporting.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class Device(ABC):
    """Base class for every network device.

    Attributes:
        id: Numeric identifier.
        name: Unique name, used as the node in the topology graph.
    """

    def __init__(self, device_id: int, name: str) -> None:
        self.id = device_id
        self.name = name

    @property
    @abstractmethod
    def kind(self) -> str:
        """Label identifying the device type, e.g. "Router"."""
        pass

    def __repr__(self) -> str:
        return f"{self.kind}({self.id}, {self.name!r})"


class NetworkDevice(Device):
    """A device that forwards traffic and has a management interface."""

    def __init__(self, device_id: int, name: str, mgmt_interface: str = "") -> None:
        super().__init__(device_id, name)
        self.mgmt_interface = mgmt_interface


class Router(NetworkDevice):
    @property
    def kind(self) -> str:
        return "Router"


class Switch(NetworkDevice):
    @property
    def kind(self) -> str:
        return "Switch"


class Host(Device):
    """An end host. Not a NetworkDevice.

    Attributes:
        ip_address: Address of the host.
    """

    def __init__(self, device_id: int, name: str, ip_address: str = "") -> None:
        super().__init__(device_id, name)
        self.ip_address = ip_address

    @property
    def kind(self) -> str:
        return "Host"


DEVICE_KINDS = {"Router": Router, "Switch": Switch, "Host": Host}


def device_to_dict(device: Device) -> Dict[str, Any]:
    """Convert a device into a JSON-serializable dictionary.

    Args:
        device: The device to convert.

    Returns:
        Dictionary with the device's kind, id, name and kind-specific fields.
    """
    data: Dict[str, Any] = {"kind": device.kind, "id": device.id, "name": device.name}
    if isinstance(device, NetworkDevice):
        data["mgmt_interface"] = device.mgmt_interface
    elif isinstance(device, Host):
        data["ip_address"] = device.ip_address
    return data


def device_from_dict(data: Dict[str, Any]) -> Device:
    """Build a device from a dictionary produced by device_to_dict.

    Args:
        data: Dictionary describing the device.

    Returns:
        The reconstructed device.

    Raises:
        ValueError: If the kind is not a known device type.
    """
    kind = data.get("kind")
    if kind not in DEVICE_KINDS:
        raise ValueError(f"Unknown device kind: {kind}")
    if kind == "Host":
        return Host(data["id"], data["name"], data.get("ip_address", ""))
    return DEVICE_KINDS[kind](data["id"], data["name"], data.get("mgmt_interface", ""))
