"""
Stream Mixer Component.

Combines any number of inlet streams, up to a configured limit, into the
outlet stream.

Mass Balance:
    ṁ_out,j = (Σ ṁ_in,i) / n_out   for every outlet j

With the single outlet slot a mixer provides this reduces to
ṁ_out = Σ ṁ_in.
"""

import logging
from typing import Optional

from process_flow.core.constants import MIXER_OUTPUTS, MixerMessages
from process_flow.core.device import Device
from process_flow.core.enums import DeviceType
from process_flow.core.exceptions import NoOutputsConfigured
from process_flow.core.stream_registry import StreamRegistry
from process_flow.core.types import DeviceStateDict

logger = logging.getLogger(__name__)


class Mixer(Device):
    """
    Sums all inlet flows and divides the sum evenly across the outlets.

    Attributes:
        inputs_count (int): Maximum number of inlet streams.
    """

    device_type = DeviceType.MIXER
    input_limit_message = MixerMessages.INPUT_LIMIT
    output_limit_message = MixerMessages.OUTPUT_LIMIT

    def __init__(
        self,
        registry: StreamRegistry,
        inputs_count: int,
        device_id: Optional[str] = None
    ) -> None:
        """
        Initialize the mixer.

        Args:
            registry: StreamRegistry owning the connected streams.
            inputs_count: Maximum number of inlet streams (>= 0).
            device_id: Optional identifier.

        Raises:
            ValueError: If inputs_count is negative.
        """
        if inputs_count < 0:
            raise ValueError(f"Mixer {device_id}: inputs_count must be non-negative, got {inputs_count}")

        super().__init__(registry, inputs_count, MIXER_OUTPUTS, device_id=device_id)
        self.inputs_count = inputs_count

    def update_outputs(self) -> None:
        """
        Write the combined inlet flow, evenly split, to every outlet.

        An inlet-less mixer writes 0.0.

        Raises:
            NoOutputsConfigured: If no outlet is attached.
        """
        if len(self._outputs) == 0:
            logger.warning(f"{self._label()}: update requested with no outputs attached")
            raise NoOutputsConfigured(MixerMessages.NO_OUTPUTS, device_id=self.device_id)

        total_flow = self.total_inflow()
        output_flow = total_flow / len(self._outputs)

        self.registry.set_mass_flows(self._outputs, output_flow)
        self._mark_updated()

    def get_state(self) -> DeviceStateDict:
        return {
            **super().get_state(),
            "inputs_count": self.inputs_count,
        }
