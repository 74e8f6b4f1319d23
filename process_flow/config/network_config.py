"""
Configuration dataclasses for flow networks.

Provides type-safe, validated configuration structures using Python
dataclasses with JSON Schema validation support.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from process_flow.core.constants import DEFAULT_STREAM_PREFIX
from process_flow.core.enums import DeviceType


@dataclass
class StreamConfig:
    """Configuration for a single stream."""
    index: Optional[int] = None
    name: Optional[str] = None
    mass_flow: Optional[float] = None

    @property
    def resolved_name(self) -> str:
        """Explicit name, otherwise "s<index>"."""
        if self.name is not None:
            return self.name
        return f"{DEFAULT_STREAM_PREFIX}{self.index}"

    def validate(self) -> None:
        """Validate stream configuration."""
        if self.name is None and self.index is None:
            raise ValueError("Stream needs either a name or an index")
        if self.index is not None and self.index < 0:
            raise ValueError(f"Stream index must be non-negative, got {self.index}")


@dataclass
class DeviceConfig:
    """
    Configuration for one device.

    Attributes:
        id: Unique device identifier
        type: "mixer" or "reactor"
        inputs_count: Mixer inlet limit (mixers only)
        double: Two outlets instead of one (reactors only)
        inputs: Stream names attached as inputs, in order
        outputs: Stream names attached as outputs, in order
    """
    id: str
    type: DeviceType
    inputs_count: Optional[int] = None
    double: Optional[bool] = None
    inputs: List[str] = field(default_factory=list)
    outputs: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """Validate configuration parameters."""
        if not self.id:
            raise ValueError("Device ID must be specified")
        if self.type == DeviceType.MIXER:
            if self.inputs_count is None:
                raise ValueError(f"Mixer '{self.id}' requires inputs_count")
            if self.inputs_count < 0:
                raise ValueError(f"Mixer '{self.id}': inputs_count must be non-negative, got {self.inputs_count}")
            if self.double is not None:
                raise ValueError(f"Mixer '{self.id}': double only applies to reactors")
        elif self.inputs_count is not None:
            raise ValueError(f"Device '{self.id}': inputs_count only applies to mixers")


@dataclass
class NetworkConfig:
    """Top-level flow network configuration."""
    name: str = "Flow Network"
    version: str = "1.0"
    streams: List[StreamConfig] = field(default_factory=list)
    devices: List[DeviceConfig] = field(default_factory=list)

    def validate(self) -> None:
        """
        Validate the whole network.

        Checks stream and device entries, name/ID uniqueness and that every
        port references a declared stream.
        """
        stream_names = []
        for stream in self.streams:
            stream.validate()
            stream_names.append(stream.resolved_name)

        duplicates = sorted({n for n in stream_names if stream_names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate stream names: {duplicates}")

        device_ids = []
        known = set(stream_names)
        for device in self.devices:
            device.validate()
            device_ids.append(device.id)
            for ref in device.inputs + device.outputs:
                if ref not in known:
                    raise ValueError(f"Device '{device.id}' references unknown stream '{ref}'")

        duplicates = sorted({d for d in device_ids if device_ids.count(d) > 1})
        if duplicates:
            raise ValueError(f"Duplicate device IDs: {duplicates}")
