"""
Basic flow network example.

Mixes two feed streams (10 and 5 kg/h) into one, splits the result in a
double reactor and prints every stream. The same network is then rebuilt
from examples/configs/demo_network.yaml.
"""

import logging
from pathlib import Path

from process_flow.components.mixer import Mixer
from process_flow.components.reactor import Reactor
from process_flow.config.network_builder import NetworkBuilder
from process_flow.core.stream_registry import StreamRegistry

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger("BasicNetwork")

CONFIG_PATH = Path(__file__).parent / "configs" / "demo_network.yaml"


def build_by_hand() -> StreamRegistry:
    registry = StreamRegistry()

    s1 = registry.create(index=registry.next_index(), mass_flow=10.0)
    s2 = registry.create(index=registry.next_index(), mass_flow=5.0)
    s3 = registry.create(index=registry.next_index())
    s4 = registry.create(index=registry.next_index())
    s5 = registry.create(index=registry.next_index())

    mixer = Mixer(registry, inputs_count=2, device_id="mixer_1")
    mixer.add_input(s1)
    mixer.add_input(s2)
    mixer.add_output(s3)

    reactor = Reactor(registry, is_double=True, device_id="reactor_1")
    reactor.add_input(s3)
    reactor.add_output(s4)
    reactor.add_output(s5)

    mixer.update_outputs()
    reactor.update_outputs()

    logger.info(f"Mixer balance: {mixer.mass_balance():g}, reactor balance: {reactor.mass_balance():g}")
    return registry


def main():
    """Run both variants of the demo network."""
    logger.info("Building network by hand...")
    build_by_hand().print_all()

    logger.info(f"Building network from {CONFIG_PATH.name}...")
    network = NetworkBuilder.from_file(CONFIG_PATH).network
    for device_id in network.get_all_ids():
        network.get(device_id).update_outputs()
    network.streams.print_all()


if __name__ == "__main__":
    main()
