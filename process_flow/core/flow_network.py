"""
Device catalog for a flow network.

FlowNetwork pairs the StreamRegistry owning the streams with the devices
wired to them, providing:
- Device registration and lookup by ID or type
- State aggregation for monitoring

It never updates devices itself; callers invoke update_outputs() on each
device in whatever order their process requires.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from process_flow.core.device import Device
from process_flow.core.enums import DeviceType
from process_flow.core.exceptions import DeviceNotFoundError, DuplicateDeviceError
from process_flow.core.stream_registry import StreamRegistry

logger = logging.getLogger(__name__)


class FlowNetwork:
    """
    Central catalog of devices sharing one StreamRegistry.

    Example:
        network = FlowNetwork()
        feed = network.streams.create(mass_flow=10.0)
        product = network.streams.create()

        reactor = Reactor(network.streams, is_double=False)
        network.register("reactor_1", reactor)
        reactor.add_input(feed)
        reactor.add_output(product)

        network.get("reactor_1").update_outputs()
    """

    def __init__(self, streams: Optional[StreamRegistry] = None) -> None:
        self.streams = streams if streams is not None else StreamRegistry()
        self._devices: Dict[str, Device] = {}
        self._devices_by_type: Dict[DeviceType, List[Device]] = defaultdict(list)

    def register(self, device_id: str, device: Device) -> None:
        """
        Register a device under a unique ID.

        Raises:
            DuplicateDeviceError: If device_id already registered
            TypeError: If device doesn't inherit from Device
            ValueError: If device uses a different StreamRegistry
        """
        if device_id in self._devices:
            raise DuplicateDeviceError(f"Device ID '{device_id}' already registered")

        if not isinstance(device, Device):
            raise TypeError(f"Device must inherit from Device ABC, got {type(device)}")

        if device.registry is not self.streams:
            raise ValueError(f"Device '{device_id}' is bound to a different StreamRegistry")

        device.device_id = device_id
        self._devices[device_id] = device
        if device.device_type is not None:
            self._devices_by_type[device.device_type].append(device)

        logger.debug(f"Registered device '{device_id}' (type: {device.device_type})")

    def get(self, device_id: str) -> Device:
        """
        Retrieve device by ID.

        Raises:
            DeviceNotFoundError: If device_id not found
        """
        if device_id not in self._devices:
            raise DeviceNotFoundError(
                f"Device '{device_id}' not found in network. "
                f"Available: {list(self._devices.keys())}"
            )
        return self._devices[device_id]

    def get_device(self, device_id: str) -> Device:
        """Alias of get() for callers naming the device catalog explicitly."""
        return self.get(device_id)

    @property
    def devices(self) -> Dict[str, Device]:
        """Return a new dict of devices keyed by ID, in registration order."""
        return dict(self._devices)

    def get_by_type(self, device_type: DeviceType) -> List[Device]:
        """Retrieve all devices of a type (empty list if none)."""
        return list(self._devices_by_type.get(device_type, []))

    def has(self, device_id: str) -> bool:
        return device_id in self._devices

    def get_all_ids(self) -> List[str]:
        """Return list of all registered device IDs."""
        return list(self._devices.keys())

    def get_all_states(self) -> Dict[str, Any]:
        """
        Aggregate state from all devices and streams.

        Returns:
            {"devices": {device_id: state}, "streams": {name: state}}
        """
        return {
            "devices": {
                device_id: device.get_state()
                for device_id, device in self._devices.items()
            },
            "streams": self.streams.get_all_states(),
        }

    def __len__(self) -> int:
        return len(self._devices)
