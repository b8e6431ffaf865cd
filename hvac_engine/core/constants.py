"""
Physical constants and validity limits for humid air process calculations.
"""

from typing import Final


class StandardConditions:
    """Reference atmosphere."""
    PRESSURE_PA: Final[float] = 101325.0
    TEMPERATURE_C: Final[float] = 20.0
    KELVIN_OFFSET: Final[float] = 273.15


class HumidAirConstants:
    """Gas constants and latent heats used by the psychrometric equations."""
    R_DRY_AIR: Final[float] = 287.055        # J/(kg.K)
    R_WATER_VAPOUR: Final[float] = 461.52    # J/(kg.K)
    MOLAR_MASS_RATIO: Final[float] = 0.621945  # M_w / M_da
    MOLAR_MASS_DRY_AIR: Final[float] = 28.96546  # g/mol
    MOLAR_MASS_WATER: Final[float] = 18.01528    # g/mol
    HEAT_OF_VAPORIZATION: Final[float] = 2500.898292e3  # J/kg at 0 degC
    HEAT_OF_FUSION: Final[float] = 333.5e3         # J/kg at 0 degC
    ICE_SPECIFIC_HEAT: Final[float] = 2090.0       # J/(kg.K)


class Limits:
    """Validity ranges enforced on flows and process inputs."""
    HUMID_AIR_MIN_TEMPERATURE_C: Final[float] = -100.0
    HUMID_AIR_MAX_TEMPERATURE_C: Final[float] = 200.0
    HUMID_AIR_MIN_PRESSURE_PA: Final[float] = 50_000.0
    HUMID_AIR_MAX_PRESSURE_PA: Final[float] = 5_000_000.0
    COOLANT_MIN_TEMPERATURE_C: Final[float] = 0.0
    COOLANT_MAX_TEMPERATURE_C: Final[float] = 90.0
    WATER_MIN_TEMPERATURE_C: Final[float] = 0.0
    WATER_MAX_TEMPERATURE_C: Final[float] = 150.0
    LAMINAR_REYNOLDS_LIMIT: Final[float] = 2300.0
