"""
Enumerations shared by streams, devices and configuration.

ErrorKind and DeviceState are IntEnums so they compare cheaply and can be
stored in NumPy arrays alongside flow values; DeviceType is keyed by the
strings used in network configuration files.
"""

from enum import Enum, IntEnum


class ErrorKind(IntEnum):
    """
    Closed set of device error categories.

    Examples:
        try:
            mixer.add_input(handle)
        except DeviceError as e:
            if e.kind == ErrorKind.INPUT_LIMIT_EXCEEDED:
                ...
    """
    INPUT_LIMIT_EXCEEDED = 0   # add_input() with all input slots used
    OUTPUT_LIMIT_EXCEEDED = 1  # add_output() with all output slots used
    NO_OUTPUTS_CONFIGURED = 2  # Mixer update with no output attached
    MISSING_ELEMENT = 3        # Reactor update with an empty input/output slot


class DeviceState(IntEnum):
    """
    Wiring lifecycle of a device.

    UNCONFIGURED -> PARTIALLY_WIRED -> FULLY_WIRED -> UPDATED. Attaching a
    stream after an update moves the device back into the wiring states.
    """
    UNCONFIGURED = 0
    PARTIALLY_WIRED = 1
    FULLY_WIRED = 2
    UPDATED = 3


class DeviceType(Enum):
    """Device variants, valued by their configuration-file names."""
    MIXER = "mixer"
    REACTOR = "reactor"
