"""
Stream registry for shared stream ownership.

The StreamRegistry is the single owner of every stream in a network:
- Creation of streams with explicit or sequential "s<index>" names
- Stable integer handles for devices to hold instead of references
- Reads and writes of mass flow by handle
- Vectorised flow lookup for device balances
"""

import logging
from typing import Dict, Iterable, List, Optional, TextIO, Union

import numpy as np

from process_flow.core.constants import DEFAULT_STREAM_PREFIX
from process_flow.core.exceptions import DuplicateStreamError, StreamNotFoundError
from process_flow.core.stream import Stream
from process_flow.core.types import MassFlow, MassFlowArray, StreamHandle, StreamState

logger = logging.getLogger(__name__)


class StreamRegistry:
    """
    Central arena owning all streams of a flow network.

    Devices store the handles returned by create()/add(); every read and
    write of a stream goes through the registry, so a stream shared by two
    devices is always seen with the same value by both.

    Example:
        registry = StreamRegistry()

        feed_a = registry.create(mass_flow=10.0)   # "s1"
        feed_b = registry.create(mass_flow=5.0)    # "s2"
        product = registry.create()                # "s3"

        mixer = Mixer(registry, inputs_count=2)
        mixer.add_input(feed_a)
        mixer.add_input(feed_b)
        mixer.add_output(product)
        mixer.update_outputs()

        registry.get_mass_flow(product)  # 15.0
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._streams: List[Stream] = []
        self._handles_by_name: Dict[str, StreamHandle] = {}
        self._index_counter: int = 0

    def next_index(self) -> int:
        """
        Return the next sequential naming index (1, 2, 3, ...).

        The counter belongs to this registry only.
        """
        self._index_counter += 1
        return self._index_counter

    def _next_free_index(self) -> int:
        # Skip indices whose "s<index>" name was taken by an explicit create/add
        self._refresh_names()
        index = self.next_index()
        while f"{DEFAULT_STREAM_PREFIX}{index}" in self._handles_by_name:
            index = self.next_index()
        return index

    def create(
        self,
        index: Optional[int] = None,
        name: Optional[str] = None,
        mass_flow: Optional[MassFlow] = None
    ) -> StreamHandle:
        """
        Create and register a new stream.

        Args:
            index: Naming index; the stream is called "s<index>"
            name: Explicit name, takes precedence over index
            mass_flow: Optional initial mass flow

        Returns:
            Handle of the new stream

        Raises:
            DuplicateStreamError: If the resulting name is already registered
        """
        if name is None:
            if index is None:
                index = self._next_free_index()
            stream = Stream.from_index(index)
        else:
            stream = Stream(name=name)

        if mass_flow is not None:
            stream.set_mass_flow(mass_flow)

        return self.add(stream)

    def add(self, stream: Stream) -> StreamHandle:
        """
        Register an existing stream object.

        Args:
            stream: Stream to take ownership of

        Returns:
            Handle of the registered stream

        Raises:
            DuplicateStreamError: If a stream with the same name is registered
        """
        self._refresh_names()
        if stream.name in self._handles_by_name:
            raise DuplicateStreamError(f"Stream '{stream.name}' already registered")

        handle = StreamHandle(len(self._streams))
        self._streams.append(stream)
        self._handles_by_name[stream.name] = handle

        logger.debug(f"Registered stream '{stream.name}' as handle {handle}")
        return handle

    def get(self, handle: StreamHandle) -> Stream:
        """
        Retrieve stream by handle.

        Raises:
            StreamNotFoundError: If handle not held by this registry
        """
        if not self.has(handle):
            raise StreamNotFoundError(
                f"Stream handle {handle!r} not found in registry "
                f"({len(self._streams)} streams registered)"
            )
        return self._streams[handle]

    def has(self, handle: StreamHandle) -> bool:
        return isinstance(handle, (int, np.integer)) and 0 <= handle < len(self._streams)

    def find(self, name: str) -> StreamHandle:
        """
        Look up a stream handle by current name.

        Raises:
            StreamNotFoundError: If no stream has this name
        """
        self._refresh_names()
        if name not in self._handles_by_name:
            raise StreamNotFoundError(
                f"Stream '{name}' not found in registry. "
                f"Available: {list(self._handles_by_name.keys())}"
            )
        return self._handles_by_name[name]

    def resolve(self, ref: Union[StreamHandle, Stream]) -> StreamHandle:
        """
        Turn a handle or a registered Stream object into a handle.

        Raises:
            StreamNotFoundError: If the stream is not owned by this registry
        """
        if isinstance(ref, Stream):
            for handle, stream in enumerate(self._streams):
                if stream is ref:
                    return StreamHandle(handle)
            raise StreamNotFoundError(f"Stream '{ref.name}' is not owned by this registry")

        self.get(ref)
        return StreamHandle(int(ref))

    def get_name(self, handle: StreamHandle) -> str:
        return self.get(handle).get_name()

    def get_mass_flow(self, handle: StreamHandle) -> MassFlow:
        return self.get(handle).get_mass_flow()

    def set_mass_flow(self, handle: StreamHandle, mass_flow: MassFlow) -> None:
        self.get(handle).set_mass_flow(mass_flow)

    def mass_flows(self, handles: Iterable[StreamHandle]) -> MassFlowArray:
        """
        Return the mass flows of the given streams as a float64 array.

        Order follows ``handles``; an empty iterable yields an empty array.
        """
        return np.array(
            [self.get(handle).get_mass_flow() for handle in handles],
            dtype=np.float64
        )

    def set_mass_flows(self, handles: Iterable[StreamHandle], mass_flow: MassFlow) -> None:
        """Set the same mass flow on every given stream."""
        streams = [self.get(handle) for handle in handles]
        for stream in streams:
            stream.set_mass_flow(mass_flow)

    def handles(self) -> List[StreamHandle]:
        """Return list of all handles in creation order."""
        return [StreamHandle(i) for i in range(len(self._streams))]

    def get_all_states(self) -> Dict[str, StreamState]:
        """
        Aggregate state from all streams, keyed by name.

        Example:
            registry.get_all_states()
            # {"s1": {"name": "s1", "mass_flow": 10.0}, ...}
        """
        return {stream.name: stream.get_state() for stream in self._streams}

    def print_all(self, file: Optional[TextIO] = None) -> None:
        """Print every stream in creation order."""
        for stream in self._streams:
            stream.print(file=file)

    def _refresh_names(self) -> None:
        # Stream.set_name() may have renamed streams since registration
        self._handles_by_name = {
            stream.name: StreamHandle(i) for i, stream in enumerate(self._streams)
        }

    def __len__(self) -> int:
        return len(self._streams)

    def __contains__(self, name: object) -> bool:
        self._refresh_names()
        return name in self._handles_by_name
