import logging

import pytest

from netroute.config import SimulationConfig


class TestSimulationConfig:
    def test_default_config_valid(self):
        config = SimulationConfig()
        assert config.default_ttl == 64
        assert config.default_packet_size == 1500
        assert config.routing == "dijkstra"
        assert config.log_level_value == logging.INFO

    def test_invalid_ttl(self):
        with pytest.raises(ValueError, match="default_ttl must be positive"):
            SimulationConfig(default_ttl=0)

    def test_invalid_packet_size(self):
        with pytest.raises(ValueError, match="default_packet_size must be positive"):
            SimulationConfig(default_packet_size=-1)

    def test_invalid_routing(self):
        with pytest.raises(ValueError, match="routing must be one of"):
            SimulationConfig(routing="rip")

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="Unknown log_level"):
            SimulationConfig(log_level="chatty")

    def test_lowercase_log_level(self):
        assert SimulationConfig(log_level="debug").log_level_value == logging.DEBUG
