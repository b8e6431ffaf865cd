"""
Integer-based enumerations tagging process results.

All enums use IntEnum so that a result can be filtered or grouped by a plain
integer comparison. A mode is fixed when its result is created and never
changes afterwards.
"""

from enum import IntEnum


class ProcessType(IntEnum):
    """
    Kind of transformation a process block applies to the air stream.

    Examples:
        heating_results = engine.get_results(ProcessType.HEATING)
    """
    HEATING = 0
    COOLING = 1
    MIXING = 2
    PRESSURE_CHANGE = 3
    CONDUIT_FLOW = 4


class HeatingMode(IntEnum):
    """
    Which heating driver was given and which was solved for.

    Examples:
        block = HeatingBlock(HeatingMode.FROM_HUMIDITY, driver=30.0)
    """
    FROM_POWER = 0        # Power given, outlet state computed directly
    FROM_TEMPERATURE = 1  # Outlet temperature given, power solved in closed form
    FROM_HUMIDITY = 2     # Outlet RH given, outlet temperature root-found


class CoolingMode(IntEnum):
    """
    Which cooling driver was given and which was solved for.

    Examples:
        block = CoolingBlock(CoolingMode.FROM_TEMPERATURE, coolant, driver=25.0)
    """
    FROM_POWER = 0
    FROM_TEMPERATURE = 1  # Coil power root-found against outlet temperature
    FROM_HUMIDITY = 2     # Coil power root-found against outlet RH


class MixingMode(IntEnum):
    """Number of streams folded into the primary flow."""
    SIMPLE_MIXING = 0    # Zero or one secondary stream
    MULTIPLE_MIXING = 1  # Two or more secondary streams


class PressureMode(IntEnum):
    """Pressure change origin."""
    PRESSURE_DROP = 0


class ConduitShape(IntEnum):
    """Cross-section shape of a duct."""
    CIRCULAR = 0
    RECTANGULAR = 1
    ELLIPTIC = 2
