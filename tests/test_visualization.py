import matplotlib

matplotlib.use("Agg")

from netroute.utils.metrics import route_cost_curve
from netroute.utils.visualization import plot_route_costs, save_network_visualization


class TestVisualization:
    def test_save_network_visualization(self, dual_path_sim, tmp_path):
        filename = tmp_path / "figs" / "topology.png"
        save_network_visualization(
            dual_path_sim, str(filename), path=["H1", "S1", "R1", "H2"]
        )
        assert filename.exists()

    def test_plot_route_costs(self, demo_sim, tmp_path):
        sizes = [64, 1500, 9000]
        costs = route_cost_curve(demo_sim, ["H1", "S1", "R1", "H2"], sizes)
        filename = tmp_path / "costs.png"
        plot_route_costs(sizes, costs, str(filename))
        assert filename.exists()
