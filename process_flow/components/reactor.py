"""
Reactor Component.

This module implements a process component that takes a single feed stream
and divides it evenly into one or two product streams.

Physics:
    - Mass Balance: ṁ_in = Σ ṁ_out
    - Even split: ṁ_out,i = ṁ_in / n_out,  n_out ∈ {1, 2}
"""

import logging
from typing import Optional

from process_flow.core.constants import (
    REACTOR_INPUTS,
    REACTOR_OUTPUTS_DOUBLE,
    REACTOR_OUTPUTS_SINGLE,
    ReactorMessages,
)
from process_flow.core.device import Device
from process_flow.core.enums import DeviceType
from process_flow.core.exceptions import MissingElement
from process_flow.core.stream_registry import StreamRegistry
from process_flow.core.types import DeviceStateDict

logger = logging.getLogger(__name__)


class Reactor(Device):
    """
    Splits one feed stream evenly across one or two product streams.

    Every declared output slot must be populated before update_outputs()
    is called.

    Configuration:
        is_double (bool): True for two outlets, False for one.
    """

    device_type = DeviceType.REACTOR
    input_limit_message = ReactorMessages.INPUT_LIMIT
    output_limit_message = ReactorMessages.OUTPUT_LIMIT

    def __init__(
        self,
        registry: StreamRegistry,
        is_double: bool,
        device_id: Optional[str] = None
    ) -> None:
        """
        Initialize the Reactor.

        Args:
            registry: StreamRegistry owning the connected streams.
            is_double: Select two outlets instead of one.
            device_id: Optional identifier.

        Raises:
            ValueError: If is_double is not a bool.
        """
        if not isinstance(is_double, bool):
            raise ValueError(f"Reactor {device_id}: is_double must be a bool, got {is_double!r}")

        output_capacity = REACTOR_OUTPUTS_DOUBLE if is_double else REACTOR_OUTPUTS_SINGLE
        super().__init__(registry, REACTOR_INPUTS, output_capacity, device_id=device_id)
        self.is_double = is_double

    def update_outputs(self) -> None:
        """
        Set every outlet to the feed flow divided by the outlet count.

        Raises:
            MissingElement: If the feed or any outlet slot is not attached.
        """
        if len(self._inputs) == 0:
            logger.warning(f"{self._label()}: update requested with no input attached")
            raise MissingElement(ReactorMessages.MISSING_INPUT, device_id=self.device_id)

        if len(self._outputs) < self.output_capacity:
            logger.warning(
                f"{self._label()}: update requested with "
                f"{len(self._outputs)}/{self.output_capacity} outputs attached"
            )
            raise MissingElement(ReactorMessages.MISSING_OUTPUT, device_id=self.device_id)

        input_mass = self.registry.get_mass_flow(self._inputs[0])
        output_mass = input_mass / self.output_capacity

        self.registry.set_mass_flows(self._outputs, output_mass)
        self._mark_updated()

    def get_state(self) -> DeviceStateDict:
        return {
            **super().get_state(),
            "is_double": self.is_double,
        }
