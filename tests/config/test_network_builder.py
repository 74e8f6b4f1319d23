import pytest

from process_flow.components.mixer import Mixer
from process_flow.components.reactor import Reactor
from process_flow.config.network_builder import NetworkBuilder
from process_flow.config.network_config import NetworkConfig, StreamConfig
from process_flow.core.constants import POSSIBLE_ERROR
from process_flow.core.enums import DeviceState
from process_flow.core.exceptions import ConfigurationError, InputLimitExceeded


def test_build_from_file(tmp_path, demo_yaml):
    config_file = tmp_path / "network.yaml"
    config_file.write_text(demo_yaml)

    network = NetworkBuilder.from_file(config_file).network

    assert len(network.streams) == 5
    assert isinstance(network.get("mixer_1"), Mixer)
    assert isinstance(network.get("reactor_1"), Reactor)
    assert network.get("mixer_1").state == DeviceState.FULLY_WIRED


def test_builder_does_not_run_updates(tmp_path, demo_yaml):
    config_file = tmp_path / "network.yaml"
    config_file.write_text(demo_yaml)

    network = NetworkBuilder.from_file(config_file).network

    assert network.streams.get_mass_flow(network.streams.find("s3")) == 0.0


@pytest.mark.scenario
def test_caller_driven_updates(tmp_path, demo_yaml):
    config_file = tmp_path / "network.yaml"
    config_file.write_text(demo_yaml)
    network = NetworkBuilder.from_file(config_file).network
    streams = network.streams

    network.get("mixer_1").update_outputs()
    network.get("reactor_1").update_outputs()

    assert streams.get_mass_flow(streams.find("s3")) == pytest.approx(15.0, abs=POSSIBLE_ERROR)
    assert streams.get_mass_flow(streams.find("product_a")) == pytest.approx(7.5, abs=POSSIBLE_ERROR)
    assert streams.get_mass_flow(streams.find("product_b")) == pytest.approx(7.5, abs=POSSIBLE_ERROR)


def test_wiring_beyond_capacity_propagates():
    config = {
        "streams": [{"index": 1}, {"index": 2}, {"index": 3}],
        "devices": [
            {"id": "m", "type": "mixer", "inputs_count": 1, "inputs": ["s1", "s2"], "outputs": ["s3"]},
        ],
    }

    with pytest.raises(InputLimitExceeded, match="Too much inputs"):
        NetworkBuilder.from_dict(config)


def test_from_config_validates():
    config = NetworkConfig(streams=[StreamConfig(index=1), StreamConfig(index=1)])

    with pytest.raises(ConfigurationError, match="Duplicate stream names"):
        NetworkBuilder.from_config(config)


def test_from_dict_applies_initial_flows():
    network = NetworkBuilder.from_dict({
        "streams": [{"name": "feed", "mass_flow": 3.5}, {"name": "out"}],
        "devices": [{"id": "r", "type": "reactor", "inputs": ["feed"], "outputs": ["out"]}],
    }).network

    reactor = network.get("r")
    reactor.update_outputs()

    assert reactor.output_capacity == 1
    assert network.streams.get_mass_flow(network.streams.find("out")) == 3.5


def test_reactor_without_double_builds_single_outlet():
    network = NetworkBuilder.from_dict({
        "streams": [{"index": 1}],
        "devices": [{"id": "r", "type": "reactor"}],
    }).network

    assert network.get_device("r").output_capacity == 1
