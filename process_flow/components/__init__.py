"""Device variants operating on shared streams."""

from process_flow.components.mixer import Mixer
from process_flow.components.reactor import Reactor

__all__ = ['Mixer', 'Reactor']
