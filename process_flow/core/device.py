"""
Core device abstractions for the process flow network.

This module defines the Device abstract base class shared by all processing
units and the BoundedPorts helper that enforces port capacities, so every
variant applies the same capacity semantics.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Type, Union

from process_flow.core.constants import DeviceMessages
from process_flow.core.enums import DeviceState, DeviceType
from process_flow.core.exceptions import (
    DeviceError,
    InputLimitExceeded,
    OutputLimitExceeded,
)
from process_flow.core.stream import Stream
from process_flow.core.stream_registry import StreamRegistry
from process_flow.core.types import DeviceStateDict, MassFlow, StreamHandle

logger = logging.getLogger(__name__)

StreamRef = Union[StreamHandle, Stream]


class BoundedPorts:
    """
    Ordered collection of stream handles with a fixed capacity.

    Insertion order is preserved (index 0 is the first stream attached).
    A rejected append leaves the collection unchanged.

    Attributes:
        capacity: Maximum number of handles
        error_cls: DeviceError subclass raised when full
        message: Text carried by the raised error
    """

    def __init__(self, capacity: int, error_cls: Type[DeviceError], message: str) -> None:
        if capacity < 0:
            raise ValueError(f"Port capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.error_cls = error_cls
        self.message = message
        self._handles: List[StreamHandle] = []

    def append(self, handle: StreamHandle, device_id: Optional[str] = None) -> None:
        """
        Attach a handle if a slot is free.

        Raises:
            DeviceError: ``error_cls`` when all slots are used
        """
        if self.is_full():
            raise self.error_cls(self.message, device_id=device_id)
        self._handles.append(handle)

    def snapshot(self) -> List[StreamHandle]:
        """Return a new list of the attached handles."""
        return list(self._handles)

    def is_full(self) -> bool:
        return len(self._handles) >= self.capacity

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[StreamHandle]:
        return iter(self._handles)

    def __getitem__(self, i: int) -> StreamHandle:
        return self._handles[i]


class Device(ABC):
    """
    Abstract base class for all processing devices.

    A device holds bounded, ordered collections of input and output stream
    handles into a shared StreamRegistry and recomputes its outputs from
    its inputs when update_outputs() is called. Attaching streams never
    triggers an update.

    Subclasses set ``device_type`` and may override the error texts via
    ``input_limit_message`` / ``output_limit_message``.

    Attributes:
        device_id: Optional identifier used in logs, errors and state
        registry: StreamRegistry owning the attached streams
    """

    device_type: Optional[DeviceType] = None
    input_limit_message: str = DeviceMessages.INPUT_LIMIT
    output_limit_message: str = DeviceMessages.OUTPUT_LIMIT

    def __init__(
        self,
        registry: StreamRegistry,
        input_capacity: int,
        output_capacity: int,
        device_id: Optional[str] = None
    ) -> None:
        """
        Initialize device with empty ports.

        Args:
            registry: StreamRegistry that owns every stream attached later
            input_capacity: Maximum number of input streams
            output_capacity: Maximum number of output streams
            device_id: Optional explicit identifier

        Raises:
            ValueError: If a capacity is negative
        """
        self.registry = registry
        self.device_id = device_id
        self._inputs = BoundedPorts(input_capacity, InputLimitExceeded, self.input_limit_message)
        self._outputs = BoundedPorts(output_capacity, OutputLimitExceeded, self.output_limit_message)
        self._updated: bool = False

    @property
    def input_capacity(self) -> int:
        return self._inputs.capacity

    @property
    def output_capacity(self) -> int:
        return self._outputs.capacity

    def add_input(self, stream: StreamRef) -> StreamHandle:
        """
        Attach a stream to the next free input slot.

        Args:
            stream: Handle, or Stream object owned by this device's registry

        Returns:
            Handle of the attached stream

        Raises:
            InputLimitExceeded: If all input slots are used
            StreamNotFoundError: If the stream is not owned by the registry
        """
        return self._attach(self._inputs, stream, "input")

    def add_output(self, stream: StreamRef) -> StreamHandle:
        """
        Attach a stream to the next free output slot.

        Raises:
            OutputLimitExceeded: If all output slots are used
            StreamNotFoundError: If the stream is not owned by the registry
        """
        return self._attach(self._outputs, stream, "output")

    def _attach(self, ports: BoundedPorts, stream: StreamRef, role: str) -> StreamHandle:
        handle = self.registry.resolve(stream)
        try:
            ports.append(handle, device_id=self.device_id)
        except DeviceError as e:
            logger.warning(
                f"{self._label()}: rejected {role} '{self.registry.get_name(handle)}' "
                f"({len(ports)}/{ports.capacity} used): {e.message}"
            )
            raise
        self._updated = False
        logger.debug(
            f"{self._label()}: attached {role} '{self.registry.get_name(handle)}' "
            f"({len(ports)}/{ports.capacity})"
        )
        return handle

    def get_inputs(self) -> List[Stream]:
        """Return a new list of the input streams in attachment order."""
        return [self.registry.get(h) for h in self._inputs]

    def get_outputs(self) -> List[Stream]:
        """Return a new list of the output streams in attachment order."""
        return [self.registry.get(h) for h in self._outputs]

    def get_input_handles(self) -> List[StreamHandle]:
        return self._inputs.snapshot()

    def get_output_handles(self) -> List[StreamHandle]:
        return self._outputs.snapshot()

    @abstractmethod
    def update_outputs(self) -> None:
        """
        Recompute output mass flows from the current input mass flows.

        Implementations must validate their wiring before writing any
        output, so a failed update leaves every stream untouched, and must
        call _mark_updated() on success.

        Raises:
            DeviceError: If the wiring is insufficient for an update
        """
        pass

    def _mark_updated(self) -> None:
        self._updated = True
        logger.debug(
            f"{self._label()}: updated outputs "
            f"(in={self.total_inflow():g}, out={self.total_outflow():g})"
        )

    @property
    def state(self) -> DeviceState:
        """Current lifecycle state derived from wiring and last update."""
        if self._updated:
            return DeviceState.UPDATED
        if len(self._inputs) == 0 and len(self._outputs) == 0:
            return DeviceState.UNCONFIGURED
        if self._inputs.is_full() and self._outputs.is_full():
            return DeviceState.FULLY_WIRED
        return DeviceState.PARTIALLY_WIRED

    def total_inflow(self) -> MassFlow:
        return float(self.registry.mass_flows(self._inputs).sum())

    def total_outflow(self) -> MassFlow:
        return float(self.registry.mass_flows(self._outputs).sum())

    def mass_balance(self) -> MassFlow:
        """
        Return total inflow minus total outflow.

        Zero (within POSSIBLE_ERROR) after a conserving update.
        """
        return self.total_inflow() - self.total_outflow()

    def get_state(self) -> DeviceStateDict:
        """
        Return current device state for monitoring.

        Example:
            {
                "device_id": "mixer_1",
                "device_type": "mixer",
                "state": "UPDATED",
                "inputs": {"s1": 10.0, "s2": 5.0},
                "outputs": {"s3": 15.0},
                ...
            }
        """
        return {
            "device_id": self.device_id,
            "device_type": self.device_type.value if self.device_type else None,
            "state": self.state.name,
            "input_capacity": self.input_capacity,
            "output_capacity": self.output_capacity,
            "inputs": {s.name: s.mass_flow for s in self.get_inputs()},
            "outputs": {s.name: s.mass_flow for s in self.get_outputs()},
        }

    def _label(self) -> str:
        return self.device_id or type(self).__name__

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(device_id={self.device_id!r}, "
            f"inputs={len(self._inputs)}/{self.input_capacity}, "
            f"outputs={len(self._outputs)}/{self.output_capacity})"
        )
