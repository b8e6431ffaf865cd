"""
Psychrometric property equations for humid air.

Closed-form correlations are compiled with Numba so that the inverse solvers,
which evaluate them hundreds of times per process step, stay cheap. The public
wrappers below the kernels validate their arguments and convert units; the
kernels themselves take plain floats (temperatures in degC, pressures in Pa)
and never raise.

Correlations:
    - Saturation pressure: Hyland-Wexler (ASHRAE Fundamentals), over ice
      below 0 degC and over liquid water from 0 degC.
    - Dry air specific heat: fourth order polynomial in absolute temperature.
    - Water vapour specific heat: ideal-gas cubic polynomial in absolute
      temperature.
    - Enthalpy: sensible dry air + vapour (latent + sensible); water in excess
      of saturation is counted as mist (liquid) above 0 degC and as ice fog
      below 0 degC.
    - Density: dry air partial density p / ((R_da + x * R_wv) * T). Flows
      built from a volumetric flow take V * rho as the humid mass flow.
    - Dynamic viscosity: fourth order polynomial for dry air, linear fit for
      vapour, combined with the Wilke mixing rule.

Enthalpy and specific heat are both expressed per kg of dry air.
"""

import math

from numba import njit

from hvac_engine.core.constants import HumidAirConstants, Limits, StandardConditions
from hvac_engine.core.exceptions import OutOfBoundsError
from hvac_engine.core.validators import require_in_range, require_non_negative, require_positive
from hvac_engine.fluids.liquid_water import specific_enthalpy_kernel as water_enthalpy_kernel
from hvac_engine.solvers.root_finder import BrentSolver

# =============================================================================
# Kernel constants (frozen into the compiled kernels)
T0 = StandardConditions.KELVIN_OFFSET
EPS = HumidAirConstants.MOLAR_MASS_RATIO
R_DA = HumidAirConstants.R_DRY_AIR
R_WV = HumidAirConstants.R_WATER_VAPOUR
HEAT_OF_VAPORIZATION = HumidAirConstants.HEAT_OF_VAPORIZATION
HEAT_OF_FUSION = HumidAirConstants.HEAT_OF_FUSION
CP_ICE = HumidAirConstants.ICE_SPECIFIC_HEAT
MOLAR_MASS_DA = HumidAirConstants.MOLAR_MASS_DRY_AIR
MOLAR_MASS_WV = HumidAirConstants.MOLAR_MASS_WATER

T_MIN = Limits.HUMID_AIR_MIN_TEMPERATURE_C
T_MAX = Limits.HUMID_AIR_MAX_TEMPERATURE_C

# Hyland-Wexler, over ice (-100..0 degC)
C1, C2, C3 = -5.6745359e3, 6.3925247, -9.677843e-3
C4, C5, C6, C7 = 6.2215701e-7, 2.0747825e-9, -9.484024e-13, 4.1635019
# Hyland-Wexler, over water (0..200 degC)
C8, C9, C10 = -5.8002206e3, 1.3914993, -4.8640239e-2
C11, C12, C13 = 4.1764768e-5, -1.4452093e-8, 6.5459673

# Saturation pressure at the triple point, used to pick the dew point branch
P_TRIPLE = 611.2


@njit(cache=True)
def _ln_saturation_pressure(t_c: float) -> float:
    tk = t_c + T0
    if t_c < 0.0:
        return (C1 / tk + C2 + C3 * tk + C4 * tk ** 2 + C5 * tk ** 3
                + C6 * tk ** 4 + C7 * math.log(tk))
    return C8 / tk + C9 + C10 * tk + C11 * tk ** 2 + C12 * tk ** 3 + C13 * math.log(tk)


@njit(cache=True)
def _d_ln_saturation_pressure(t_c: float) -> float:
    tk = t_c + T0
    if t_c < 0.0:
        return (-C1 / tk ** 2 + C3 + 2.0 * C4 * tk + 3.0 * C5 * tk ** 2
                + 4.0 * C6 * tk ** 3 + C7 / tk)
    return -C8 / tk ** 2 + C10 + 2.0 * C11 * tk + 3.0 * C12 * tk ** 2 + C13 / tk


@njit(cache=True)
def saturation_pressure_kernel(t_c: float) -> float:
    return math.exp(_ln_saturation_pressure(t_c))


@njit(cache=True)
def max_humidity_ratio_kernel(t_c: float, p_pa: float) -> float:
    """Humidity ratio at saturation; infinite once ps reaches the total pressure."""
    ps = saturation_pressure_kernel(t_c)
    if ps >= p_pa:
        return math.inf
    return EPS * ps / (p_pa - ps)


@njit(cache=True)
def vapour_pressure_kernel(x: float, p_pa: float) -> float:
    return x * p_pa / (EPS + x)


@njit(cache=True)
def relative_humidity_kernel(t_c: float, x: float, p_pa: float) -> float:
    rh = vapour_pressure_kernel(x, p_pa) / saturation_pressure_kernel(t_c) * 100.0
    return min(rh, 100.0)


@njit(cache=True)
def dew_point_kernel(x: float, p_pa: float) -> float:
    """
    Invert the saturation curve with Newton-Raphson.

    Starts from the ASHRAE closed-form approximation and refines on
    ln(ps(td)) = ln(pv). Returns T_MIN for dry air.
    """
    pv = vapour_pressure_kernel(x, p_pa)
    if pv <= saturation_pressure_kernel(T_MIN):
        return T_MIN

    alpha = math.log(pv / 1000.0)
    if pv >= P_TRIPLE:
        td = (6.54 + 14.526 * alpha + 0.7389 * alpha ** 2 + 0.09486 * alpha ** 3
              + 0.4569 * (pv / 1000.0) ** 0.1984)
    else:
        td = 6.09 + 12.608 * alpha + 0.4959 * alpha ** 2

    ln_pv = math.log(pv)
    for _ in range(50):
        step = (_ln_saturation_pressure(td) - ln_pv) / _d_ln_saturation_pressure(td)
        td -= step
        if abs(step) < 1e-12:
            break
    return td


@njit(cache=True)
def dry_air_specific_heat_kernel(t_c: float) -> float:
    tk = t_c + T0
    return (1.9327e-10 * tk ** 4 - 7.9999e-7 * tk ** 3 + 1.1407e-3 * tk ** 2
            - 0.4489 * tk + 1057.5)


@njit(cache=True)
def water_vapour_specific_heat_kernel(t_c: float) -> float:
    tk = t_c + T0
    return (32.24 + 1.923e-3 * tk + 1.055e-5 * tk ** 2 - 3.595e-9 * tk ** 3) / MOLAR_MASS_WV * 1000.0


@njit(cache=True)
def specific_heat_kernel(t_c: float, x: float) -> float:
    return dry_air_specific_heat_kernel(t_c) + x * water_vapour_specific_heat_kernel(t_c)


@njit(cache=True)
def density_kernel(t_c: float, x: float, p_pa: float) -> float:
    return p_pa / ((R_DA + x * R_WV) * (t_c + T0))


@njit(cache=True)
def specific_enthalpy_kernel(t_c: float, x: float, p_pa: float) -> float:
    i_da = dry_air_specific_heat_kernel(t_c) * t_c
    i_wv_unit = HEAT_OF_VAPORIZATION + water_vapour_specific_heat_kernel(t_c) * t_c
    xs = max_humidity_ratio_kernel(t_c, p_pa)
    if x <= xs:
        return i_da + x * i_wv_unit

    # Water above saturation stays in the stream as mist or ice fog
    x_condensed = x - xs
    if t_c >= 0.0:
        i_condensed = water_enthalpy_kernel(t_c)
    else:
        i_condensed = -HEAT_OF_FUSION + CP_ICE * t_c
    return i_da + xs * i_wv_unit + x_condensed * i_condensed


@njit(cache=True)
def dry_air_dynamic_viscosity_kernel(t_c: float) -> float:
    tk = t_c + T0
    return (0.40401 + 0.074582 * tk - 5.7171e-5 * tk ** 2 + 2.9928e-8 * tk ** 3
            - 6.2524e-12 * tk ** 4) * 1e-6


@njit(cache=True)
def dynamic_viscosity_kernel(t_c: float, x: float) -> float:
    mu_da = dry_air_dynamic_viscosity_kernel(t_c)
    if x <= 0.0:
        return mu_da
    mu_wv = 8.058131868e-6 + 4.000549451e-8 * t_c

    y_wv = x / (EPS + x)
    y_da = 1.0 - y_wv
    phi_av = ((1.0 + (mu_da / mu_wv) ** 0.5 * (MOLAR_MASS_WV / MOLAR_MASS_DA) ** 0.25) ** 2
              / (8.0 * (1.0 + MOLAR_MASS_DA / MOLAR_MASS_WV)) ** 0.5)
    phi_va = phi_av * (mu_wv / mu_da) * (MOLAR_MASS_DA / MOLAR_MASS_WV)
    return y_da * mu_da / (y_da + y_wv * phi_av) + y_wv * mu_wv / (y_wv + y_da * phi_va)


# =============================================================================
# Validated wrappers

def _check_temperature(t_c: float) -> float:
    return require_in_range(t_c, T_MIN, T_MAX, "temperature_c")


def _check_pressure(p_pa: float) -> float:
    return require_in_range(
        p_pa, Limits.HUMID_AIR_MIN_PRESSURE_PA, Limits.HUMID_AIR_MAX_PRESSURE_PA, "pressure_pa"
    )


def saturation_pressure(t_c: float) -> float:
    """Water vapour saturation pressure in Pa at t_c (degC)."""
    return saturation_pressure_kernel(_check_temperature(t_c))


def humidity_ratio(relative_humidity_pct: float, saturation_pressure_pa: float, p_pa: float) -> float:
    """
    Humidity ratio from relative humidity and saturation pressure.

    Args:
        relative_humidity_pct: Relative humidity (0-100 %).
        saturation_pressure_pa: Saturation pressure at the dry bulb temperature.
        p_pa: Total pressure.

    Returns:
        float: Humidity ratio in kg water / kg dry air.
    """
    require_in_range(relative_humidity_pct, 0.0, 100.0, "relative_humidity_pct")
    require_positive(saturation_pressure_pa, "saturation_pressure_pa")
    _check_pressure(p_pa)
    pv = relative_humidity_pct / 100.0 * saturation_pressure_pa
    if pv >= p_pa:
        raise OutOfBoundsError(
            f"Vapour pressure {pv:.1f} Pa reaches the total pressure {p_pa:.1f} Pa"
        )
    return EPS * pv / (p_pa - pv)


def max_humidity_ratio(t_c: float, p_pa: float) -> float:
    return max_humidity_ratio_kernel(_check_temperature(t_c), _check_pressure(p_pa))


def vapour_pressure(x: float, p_pa: float) -> float:
    return vapour_pressure_kernel(require_non_negative(x, "humidity_ratio"), _check_pressure(p_pa))


def relative_humidity(t_c: float, x: float, p_pa: float) -> float:
    """Relative humidity in %, capped at 100 for mist and ice fog states."""
    return relative_humidity_kernel(
        _check_temperature(t_c), require_non_negative(x, "humidity_ratio"), _check_pressure(p_pa)
    )


def dew_point_temperature(x: float, p_pa: float) -> float:
    return dew_point_kernel(require_non_negative(x, "humidity_ratio"), _check_pressure(p_pa))


def dry_air_specific_heat(t_c: float) -> float:
    return dry_air_specific_heat_kernel(_check_temperature(t_c))


def water_vapour_specific_heat(t_c: float) -> float:
    return water_vapour_specific_heat_kernel(_check_temperature(t_c))


def specific_heat(t_c: float, x: float) -> float:
    return specific_heat_kernel(_check_temperature(t_c), require_non_negative(x, "humidity_ratio"))


def density(t_c: float, x: float, p_pa: float) -> float:
    return density_kernel(
        _check_temperature(t_c), require_non_negative(x, "humidity_ratio"), _check_pressure(p_pa)
    )


def specific_enthalpy(t_c: float, x: float, p_pa: float) -> float:
    """Specific enthalpy in J per kg of dry air."""
    return specific_enthalpy_kernel(
        _check_temperature(t_c), require_non_negative(x, "humidity_ratio"), _check_pressure(p_pa)
    )


def dynamic_viscosity(t_c: float, x: float) -> float:
    return dynamic_viscosity_kernel(_check_temperature(t_c), require_non_negative(x, "humidity_ratio"))


def dry_bulb_temperature(specific_enthalpy_j_kg: float, x: float, p_pa: float) -> float:
    """
    Dry bulb temperature for a given enthalpy and humidity ratio.

    Enthalpy is monotonic in temperature for a fixed humidity ratio but
    piecewise (mist and ice fog branches), so the inversion is root-found. The
    bracket is a +/-10 % window around the unsaturated closed-form estimate,
    expandable up to the validity range.

    Raises:
        OutOfBoundsError: If the enthalpy lies outside the values reachable
            within the valid temperature range.
    """
    require_non_negative(x, "humidity_ratio")
    _check_pressure(p_pa)
    i_min = specific_enthalpy_kernel(T_MIN, x, p_pa)
    i_max = specific_enthalpy_kernel(T_MAX, x, p_pa)
    require_in_range(specific_enthalpy_j_kg, i_min, i_max, "specific_enthalpy_j_kg")

    estimate = (specific_enthalpy_j_kg - x * HEAT_OF_VAPORIZATION) / (1005.0 + x * 1860.0)
    estimate = min(max(estimate, T_MIN), T_MAX)
    margin = 0.1 * abs(estimate) + 1.0
    lower = max(T_MIN, estimate - margin)
    upper = min(T_MAX, estimate + margin)

    solver = BrentSolver("DryBulbTemperature-Solver")
    return solver.find_root(
        lambda t: specific_enthalpy_kernel(t, x, p_pa) - specific_enthalpy_j_kg,
        lower,
        upper,
        limits=(T_MIN, T_MAX)
    )
