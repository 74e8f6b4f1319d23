"""
Stream class for mass-flow tracking.

A Stream is a named carrier of a single scalar mass flow (kg/h). Streams
are owned by a StreamRegistry; devices refer to them by handle so the same
stream can be one device's output and another device's input.
"""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from process_flow.core.constants import DEFAULT_MASS_FLOW, DEFAULT_STREAM_PREFIX
from process_flow.core.types import MassFlow, StreamState


@dataclass
class Stream:
    """
    Represents a named material flow.

    No physical-plausibility check is applied: zero and negative flows are
    accepted, and an empty name is allowed.

    Example:
        s = Stream.from_index(1)   # name -> "s1"
        s.set_mass_flow(10.0)
        s.print()                  # Stream s1 flow = 10
    """
    name: str
    mass_flow: MassFlow = DEFAULT_MASS_FLOW

    @classmethod
    def from_index(cls, index: int, mass_flow: Optional[MassFlow] = None) -> 'Stream':
        """
        Create a stream named "s<index>".

        Args:
            index: Sequential index supplied by the caller
            mass_flow: Optional initial mass flow

        Returns:
            New Stream instance
        """
        stream = cls(name=f"{DEFAULT_STREAM_PREFIX}{index}")
        if mass_flow is not None:
            stream.set_mass_flow(mass_flow)
        return stream

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name

    def set_mass_flow(self, mass_flow: MassFlow) -> None:
        self.mass_flow = float(mass_flow)

    def get_mass_flow(self) -> MassFlow:
        return self.mass_flow

    def print(self, file: Optional[TextIO] = None) -> None:
        """
        Write a one-line summary to the diagnostic sink.

        Format: "Stream <name> flow = <value>" followed by a line break.

        Args:
            file: Output sink (defaults to sys.stdout)
        """
        print(str(self), file=file if file is not None else sys.stdout)

    def copy(self) -> 'Stream':
        """Return an independent stream with the same name and flow."""
        return Stream(name=self.name, mass_flow=self.mass_flow)

    def get_state(self) -> StreamState:
        return {"name": self.name, "mass_flow": self.mass_flow}

    def __str__(self) -> str:
        return f"Stream {self.name} flow = {self.mass_flow:g}"
