"""Custom exception hierarchy for the process flow network."""

from typing import Optional

from process_flow.core.enums import ErrorKind


class ProcessFlowError(Exception):
    """Base exception for all process_flow errors."""
    pass


class DeviceError(ProcessFlowError):
    """
    Base exception for device wiring and update errors.

    Callers match on ``kind`` rather than on the message text; the message
    differs between device variants.

    Attributes:
        kind: Error category from the closed ErrorKind enumeration
        message: Human-readable text configured by the raising device
        device_id: Identifier of the raising device, if it has one
    """

    kind: ErrorKind

    def __init__(self, message: str, device_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.device_id = device_id


class InputLimitExceeded(DeviceError):
    """Raised when add_input() is called on a device with all input slots used."""
    kind = ErrorKind.INPUT_LIMIT_EXCEEDED


class OutputLimitExceeded(DeviceError):
    """Raised when add_output() is called on a device with all output slots used."""
    kind = ErrorKind.OUTPUT_LIMIT_EXCEEDED


class NoOutputsConfigured(DeviceError):
    """Raised when a mixer is updated with no output attached."""
    kind = ErrorKind.NO_OUTPUTS_CONFIGURED


class MissingElement(DeviceError):
    """Raised when a reactor is updated before its input/output slots are populated."""
    kind = ErrorKind.MISSING_ELEMENT


class RegistryError(ProcessFlowError):
    """Base exception for registry errors."""
    pass


class StreamNotFoundError(RegistryError):
    """Raised when a stream handle or name is not held by the registry."""
    pass


class DuplicateStreamError(RegistryError):
    """Raised when attempting to register a duplicate stream name."""
    pass


class DeviceNotFoundError(RegistryError):
    """Raised when device ID not found in a network."""
    pass


class DuplicateDeviceError(RegistryError):
    """Raised when attempting to register duplicate device ID."""
    pass


class ConfigurationError(ProcessFlowError):
    """Raised for configuration loading/validation errors."""
    pass
