"""
Process Flow Network - Main Package

This package models a minimal chemical-process flow network:
- Named streams carrying a scalar mass flow
- Devices with bounded input/output ports (Mixer, Reactor)
- A StreamRegistry owning all streams, shared by the devices
- Configuration-driven network assembly (YAML/JSON)
"""

__version__ = "1.0.0"

from process_flow.core.constants import MIXER_OUTPUTS, POSSIBLE_ERROR
from process_flow.core.enums import DeviceState, DeviceType, ErrorKind
from process_flow.core.exceptions import (
    ConfigurationError,
    DeviceError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    DuplicateStreamError,
    InputLimitExceeded,
    MissingElement,
    NoOutputsConfigured,
    OutputLimitExceeded,
    ProcessFlowError,
    RegistryError,
    StreamNotFoundError,
)
from process_flow.core.stream import Stream
from process_flow.core.stream_registry import StreamRegistry
from process_flow.core.device import BoundedPorts, Device
from process_flow.core.flow_network import FlowNetwork
from process_flow.components import Mixer, Reactor
from process_flow.config.loaders import ConfigLoader, load_network_config
from process_flow.config.network_builder import NetworkBuilder

__all__ = [
    # Core
    'Stream',
    'StreamRegistry',
    'Device',
    'BoundedPorts',
    'FlowNetwork',

    # Devices
    'Mixer',
    'Reactor',

    # Enums
    'DeviceState',
    'DeviceType',
    'ErrorKind',

    # Exceptions
    'ProcessFlowError',
    'DeviceError',
    'InputLimitExceeded',
    'OutputLimitExceeded',
    'NoOutputsConfigured',
    'MissingElement',
    'RegistryError',
    'StreamNotFoundError',
    'DuplicateStreamError',
    'DeviceNotFoundError',
    'DuplicateDeviceError',
    'ConfigurationError',

    # Constants
    'MIXER_OUTPUTS',
    'POSSIBLE_ERROR',

    # Configuration
    'ConfigLoader',
    'load_network_config',
    'NetworkBuilder',
]
