import pytest

from netroute.core.devices import Host, Router, Switch
from netroute.core.link import Link
from netroute.core.simulator import NetworkSimulator


@pytest.fixture
def demo_sim() -> NetworkSimulator:
    """R1-S1-H1 chain plus R1-H2, all links bidirectional."""

    sim = NetworkSimulator()
    sim.add_device(Router(1, "R1"))
    sim.add_device(Switch(2, "S1"))
    sim.add_device(Host(3, "H1", "10.0.0.1"))
    sim.add_device(Host(4, "H2", "10.0.0.2"))

    sim.connect("R1", "S1", Link(0.5, 100.0, 0.999))
    sim.connect("S1", "H1", Link(1.0, 100.0, 0.999))
    sim.connect("R1", "H2", Link(3.0, 20.0, 0.98))
    return sim


@pytest.fixture
def dual_path_sim(demo_sim: NetworkSimulator) -> NetworkSimulator:
    """Demo topology plus a low-latency, low-bandwidth H1-H2 shortcut."""

    demo_sim.connect("H1", "H2", Link(0.2, 1.0, 0.95))
    return demo_sim
