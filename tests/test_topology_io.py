import json

import pytest

from netroute.core.devices import Host
from netroute.core.exceptions import UnknownNodeError
from netroute.core.link import Link
from netroute.core.routing_algorithms import DijkstraRouting
from netroute.utils.topology_io import load_topology, save_topology


class TestTopologyIO:
    def test_save_and_load(self, dual_path_sim, tmp_path):
        filename = tmp_path / "nested" / "topology.json"
        save_topology(dual_path_sim, str(filename))

        loaded = load_topology(str(filename))
        assert loaded.describe_devices() == dual_path_sim.describe_devices()
        assert list(loaded.graph.edges()) == list(dual_path_sim.graph.edges())
        assert loaded.get_device("H1").ip_address == "10.0.0.1"

        algo = DijkstraRouting()
        for size in (64, 9000):
            assert loaded.find_route(algo, "H1", "H2", size) == dual_path_sim.find_route(
                algo, "H1", "H2", size
            )

    def test_one_way_links_stay_one_way(self, demo_sim, tmp_path):
        demo_sim.add_device(Host(5, "H5"))
        demo_sim.connect("H2", "H5", Link(2.0, 10.0), bidir=False)
        filename = tmp_path / "topology.json"
        save_topology(demo_sim, str(filename))

        loaded = load_topology(str(filename))
        assert "H5" in loaded.graph.get_neighbors("H2")
        assert loaded.graph.get_neighbors("H5") == []

    def test_file_format(self, demo_sim, tmp_path):
        filename = tmp_path / "topology.json"
        save_topology(demo_sim, str(filename))
        data = json.loads(filename.read_text())

        assert len(data["devices"]) == 4
        assert len(data["links"]) == 6
        assert data["links"][0] == {
            "source": "R1",
            "target": "S1",
            "latency_ms": 0.5,
            "bandwidth_mbps": 100.0,
            "reliability": 0.999,
        }

    def test_link_to_missing_device(self, tmp_path):
        filename = tmp_path / "broken.json"
        filename.write_text(
            json.dumps(
                {
                    "devices": [{"kind": "Router", "id": 1, "name": "R1"}],
                    "links": [
                        {
                            "source": "R1",
                            "target": "R2",
                            "latency_ms": 1.0,
                            "bandwidth_mbps": 10.0,
                            "reliability": 1.0,
                        }
                    ],
                }
            )
        )
        with pytest.raises(UnknownNodeError):
            load_topology(str(filename))
