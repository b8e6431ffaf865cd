"""Cooling coil coolant conditions."""

from dataclasses import dataclass

from hvac_engine.core.constants import Limits
from hvac_engine.core.validators import require_in_range


@dataclass(frozen=True)
class CoolantData:
    """
    Coolant supply and return temperatures of a cooling coil.

    The arithmetic mean of both is used as the coil surface temperature
    proxy in condensation calculations.

    Raises:
        OutOfBoundsError: If either temperature is outside 0-90 degC.
    """
    supply_temperature_c: float
    return_temperature_c: float

    def __post_init__(self):
        for name in ('supply_temperature_c', 'return_temperature_c'):
            require_in_range(
                getattr(self, name),
                Limits.COOLANT_MIN_TEMPERATURE_C,
                Limits.COOLANT_MAX_TEMPERATURE_C,
                name
            )

    @property
    def average_temperature_c(self) -> float:
        return (self.supply_temperature_c + self.return_temperature_c) / 2.0
