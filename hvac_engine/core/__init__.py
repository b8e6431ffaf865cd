"""Core types, enumerations, constants and errors."""

from hvac_engine.core.enums import (
    ConduitShape,
    CoolingMode,
    HeatingMode,
    MixingMode,
    PressureMode,
    ProcessType,
)
from hvac_engine.core.exceptions import (
    ConfigurationError,
    ConnectorDataMissingError,
    HvacEngineError,
    InfeasibleConstraintError,
    MissingArgumentError,
    NumericalDivergenceError,
    OutOfBoundsError,
)

__all__ = [
    'ConduitShape',
    'CoolingMode',
    'HeatingMode',
    'MixingMode',
    'PressureMode',
    'ProcessType',
    'ConfigurationError',
    'ConnectorDataMissingError',
    'HvacEngineError',
    'InfeasibleConstraintError',
    'MissingArgumentError',
    'NumericalDivergenceError',
    'OutOfBoundsError',
]
