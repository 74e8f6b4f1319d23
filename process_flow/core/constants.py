"""
Network-wide constants.

Capacities and error texts are collected here so devices and tests refer
to one definition.
"""

# Port capacities
MIXER_OUTPUTS = 1
REACTOR_INPUTS = 1
REACTOR_OUTPUTS_SINGLE = 1
REACTOR_OUTPUTS_DOUBLE = 2

# Absolute tolerance used when comparing mass flows
POSSIBLE_ERROR = 0.01

# Auto-generated stream names are DEFAULT_STREAM_PREFIX + index
DEFAULT_STREAM_PREFIX = "s"
DEFAULT_MASS_FLOW = 0.0


class DeviceMessages:
    """Default error texts for devices that do not configure their own."""
    INPUT_LIMIT = "Input stream limit reached"
    OUTPUT_LIMIT = "Output stream limit reached"


class MixerMessages:
    """Error texts raised by Mixer."""
    INPUT_LIMIT = "Too much inputs"
    OUTPUT_LIMIT = "Too much outputs"
    NO_OUTPUTS = "Should set outputs before update"


class ReactorMessages:
    """Error texts raised by Reactor."""
    INPUT_LIMIT = "INPUT STREAM LIMIT!"
    OUTPUT_LIMIT = "OUTPUT STREAM LIMIT!"
    MISSING_INPUT = "Reactor input stream is not set"
    MISSING_OUTPUT = "Reactor output streams are not set"
