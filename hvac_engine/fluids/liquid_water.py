"""
Liquid water properties for condensate and mist calculations.

Density follows the Jones-Harris ITS-90 formulation, specific heat a
piecewise polynomial fit of tabulated data. Enthalpy is referenced to liquid
water at 0 degC, matching the humid air enthalpy reference.
"""

from numba import njit

from hvac_engine.core.constants import HumidAirConstants, Limits
from hvac_engine.core.validators import require_in_range

HEAT_OF_FUSION = HumidAirConstants.HEAT_OF_FUSION
CP_ICE = HumidAirConstants.ICE_SPECIFIC_HEAT


@njit(cache=True)
def density_kernel(t_c: float) -> float:
    return ((999.83952 + 16.945176 * t_c
             - 7.9870401e-3 * t_c ** 2
             - 46.170461e-6 * t_c ** 3
             + 105.56302e-9 * t_c ** 4
             - 280.54253e-12 * t_c ** 5)
            / (1.0 + 16.89785e-3 * t_c))


@njit(cache=True)
def specific_heat_kernel(t_c: float) -> float:
    """Isobaric specific heat in J/(kg.K)."""
    if 0.0 <= t_c <= 100.0:
        cp = (3.93240161e-13 * t_c ** 6
              - 1.525847751e-10 * t_c ** 5
              + 2.479227180e-8 * t_c ** 4
              - 2.166932275e-6 * t_c ** 3
              + 1.156152199e-4 * t_c ** 2
              - 3.400567477e-3 * t_c + 4.219924305)
    else:
        cp = (2.588246403e-15 * t_c ** 7
              - 3.604612987e-12 * t_c ** 6
              + 2.112059173e-9 * t_c ** 5
              - 6.727469888e-7 * t_c ** 4
              + 1.255841880e-4 * t_c ** 3
              - 1.370455849e-2 * t_c ** 2
              + 8.093157187e-1 * t_c - 15.75651097)
    return cp * 1000.0


@njit(cache=True)
def specific_enthalpy_kernel(t_c: float) -> float:
    # Liquid below the freezing point is not modelled
    if t_c < 0.0:
        return 0.0
    return t_c * specific_heat_kernel(t_c)


def density(t_c: float) -> float:
    """Water density in kg/m3 at atmospheric pressure."""
    return density_kernel(_check_temperature(t_c))


def specific_heat(t_c: float) -> float:
    return specific_heat_kernel(_check_temperature(t_c))


def specific_enthalpy(t_c: float) -> float:
    """Enthalpy in J/kg; zero for negative temperatures."""
    return specific_enthalpy_kernel(_check_temperature(t_c))


def ice_specific_enthalpy(t_c: float) -> float:
    """Enthalpy of ice in J/kg, negative by the heat of fusion at 0 degC."""
    require_in_range(t_c, Limits.HUMID_AIR_MIN_TEMPERATURE_C, 0.0, "temperature_c")
    return -HEAT_OF_FUSION + CP_ICE * t_c


def _check_temperature(t_c: float) -> float:
    return require_in_range(
        t_c, Limits.WATER_MIN_TEMPERATURE_C, Limits.WATER_MAX_TEMPERATURE_C, "temperature_c"
    )
