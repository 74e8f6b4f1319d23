"""
Type aliases for static type checking.
"""

from typing import Any, Dict, NewType, TypeAlias

import numpy as np
import numpy.typing as npt

# Scalar types
MassFlow: TypeAlias = float      # kg/h, sign not restricted

# Stable index of a stream inside a StreamRegistry
StreamHandle = NewType("StreamHandle", int)

# Array types
MassFlowArray: TypeAlias = npt.NDArray[np.float64]

# State dictionary types
StreamState: TypeAlias = Dict[str, Any]
DeviceStateDict: TypeAlias = Dict[str, Any]
