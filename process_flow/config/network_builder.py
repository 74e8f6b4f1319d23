"""
NetworkBuilder: Factory for configuration-driven network assembly.

Constructs a FlowNetwork from NetworkConfig, creating all streams and
devices and attaching ports in file order.
"""

import logging
from pathlib import Path

from process_flow.components.mixer import Mixer
from process_flow.components.reactor import Reactor
from process_flow.config.loaders import ConfigLoader, load_network_config
from process_flow.config.network_config import DeviceConfig, NetworkConfig
from process_flow.core.device import Device
from process_flow.core.enums import DeviceType
from process_flow.core.exceptions import ConfigurationError
from process_flow.core.flow_network import FlowNetwork

logger = logging.getLogger(__name__)


class NetworkBuilder:
    """
    Factory for building flow networks from configuration.

    Example:
        # From configuration file
        network = NetworkBuilder.from_file("examples/configs/demo_network.yaml").network
        network.get("mixer_1").update_outputs()

        # From NetworkConfig object
        network = NetworkBuilder.from_config(config).network
    """

    def __init__(self, config: NetworkConfig):
        """
        Initialize NetworkBuilder.

        Args:
            config: Validated NetworkConfig instance
        """
        self.config = config
        self.network = FlowNetwork()

    @classmethod
    def from_file(cls, config_path: Path | str) -> 'NetworkBuilder':
        """Build network from a YAML/JSON configuration file."""
        config = load_network_config(config_path)
        builder = cls(config)
        builder.build()
        return builder

    @classmethod
    def from_config(cls, config: NetworkConfig) -> 'NetworkBuilder':
        """
        Build network from NetworkConfig object.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e
        builder = cls(config)
        builder.build()
        return builder

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'NetworkBuilder':
        """Build network from configuration dictionary."""
        config = ConfigLoader().from_dict(config_dict)
        builder = cls(config)
        builder.build()
        return builder

    def build(self) -> FlowNetwork:
        """
        Create streams and devices and wire them.

        Capacity errors raised while attaching ports propagate unchanged.

        Returns:
            The populated FlowNetwork
        """
        logger.info(f"Building network: {self.config.name}")

        self._build_streams()
        for device_cfg in self.config.devices:
            self._build_device(device_cfg)

        logger.info(
            f"Network built: {len(self.network.streams)} streams, "
            f"{len(self.network)} devices"
        )
        return self.network

    def _build_streams(self) -> None:
        for stream_cfg in self.config.streams:
            self.network.streams.create(
                index=stream_cfg.index,
                name=stream_cfg.name,
                mass_flow=stream_cfg.mass_flow,
            )

    def _build_device(self, cfg: DeviceConfig) -> Device:
        streams = self.network.streams

        if cfg.type == DeviceType.MIXER:
            device: Device = Mixer(streams, inputs_count=cfg.inputs_count)
        elif cfg.type == DeviceType.REACTOR:
            device = Reactor(streams, is_double=bool(cfg.double))
        else:
            raise ConfigurationError(f"Unknown device type for '{cfg.id}': {cfg.type}")

        self.network.register(cfg.id, device)

        for name in cfg.inputs:
            device.add_input(streams.find(name))
        for name in cfg.outputs:
            device.add_output(streams.find(name))

        logger.debug(f"Wired {cfg.type.value} '{cfg.id}': {cfg.inputs} -> {cfg.outputs}")
        return device
