"""
Sensible heating of a humid air stream.

Heating adds no moisture: dry air mass flow and humidity ratio pass through
unchanged and only enthalpy rises, i2 = i1 + Q / m_da. Three drivers are
supported:

    - FROM_POWER: heat power given, outlet temperature from the enthalpy
      inversion.
    - FROM_TEMPERATURE: outlet temperature given; the power follows in
      closed form and the result is re-evaluated through FROM_POWER so that
      the returned state is self-consistent.
    - FROM_HUMIDITY: outlet relative humidity given; the outlet temperature
      is root-found between the inlet temperature and the configured upper
      heating limit, then handled as FROM_TEMPERATURE.
"""

import logging

from hvac_engine.config.loader import get_engine_config
from hvac_engine.core.enums import HeatingMode
from hvac_engine.core.exceptions import InfeasibleConstraintError
from hvac_engine.core.validators import require_in_range, require_non_negative, require_not_none
from hvac_engine.fluids import humid_air
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.results import HeatingResult
from hvac_engine.solvers.root_finder import BrentSolver

logger = logging.getLogger(__name__)


def heating_from_power(
    inlet: HumidAirFlow,
    power_w: float,
    mode: HeatingMode = HeatingMode.FROM_POWER
) -> HeatingResult:
    """
    Heat a flow with a given power.

    Args:
        inlet: Inlet humid air flow.
        power_w: Heat added to the stream, W (>= 0).
        mode: Mode tag recorded on the result.

    Returns:
        HeatingResult with the outlet state.

    Raises:
        OutOfBoundsError: If power is negative or the outlet would exceed the
            humid air temperature limit.
    """
    require_not_none(inlet, "inlet")
    require_non_negative(power_w, "power_w")

    m_da = inlet.dry_air_mass_flow_kg_s
    if power_w == 0.0 or m_da == 0.0:
        return HeatingResult(mode=mode, inlet_flow=inlet, outlet_flow=inlet, heat_of_process_w=0.0)

    i_out = inlet.specific_enthalpy_j_kg + power_w / m_da
    t_out = humid_air.dry_bulb_temperature(i_out, inlet.humidity_ratio, inlet.pressure_pa)
    outlet = inlet.with_temperature(t_out)

    logger.debug(f"Heating {power_w:.1f} W: {inlet.temperature_c:.3f} -> {t_out:.3f} degC")
    return HeatingResult(mode=mode, inlet_flow=inlet, outlet_flow=outlet, heat_of_process_w=power_w)


def heating_from_temperature(
    inlet: HumidAirFlow,
    target_temperature_c: float,
    mode: HeatingMode = HeatingMode.FROM_TEMPERATURE
) -> HeatingResult:
    """
    Heat a flow up to a target temperature.

    Raises:
        InfeasibleConstraintError: If the target is below the inlet temperature.
    """
    require_not_none(inlet, "inlet")
    require_not_none(target_temperature_c, "target_temperature_c")

    if target_temperature_c < inlet.temperature_c:
        raise InfeasibleConstraintError(
            f"Heating cannot lower temperature: target {target_temperature_c} degC "
            f"is below inlet {inlet.temperature_c} degC"
        )
    if target_temperature_c == inlet.temperature_c:
        return HeatingResult(mode=mode, inlet_flow=inlet, outlet_flow=inlet, heat_of_process_w=0.0)

    i_target = humid_air.specific_enthalpy(target_temperature_c, inlet.humidity_ratio, inlet.pressure_pa)
    power_w = inlet.dry_air_mass_flow_kg_s * (i_target - inlet.specific_enthalpy_j_kg)
    return heating_from_power(inlet, power_w, mode=mode)


def heating_from_humidity(inlet: HumidAirFlow, target_rh_pct: float) -> HeatingResult:
    """
    Heat a flow until its relative humidity falls to a target value.

    Args:
        inlet: Inlet humid air flow.
        target_rh_pct: Outlet relative humidity in (0, 100] %.

    Raises:
        OutOfBoundsError: If the target is outside (0, 100].
        InfeasibleConstraintError: If the target is above the inlet RH or
            below the RH reachable at the heating temperature limit.
    """
    require_not_none(inlet, "inlet")
    require_in_range(target_rh_pct, 0.0, 100.0, "target_rh_pct")
    if target_rh_pct == 0.0 and inlet.humidity_ratio > 0.0:
        raise InfeasibleConstraintError("Heating cannot dry a humid stream to 0 % RH")

    x, p = inlet.humidity_ratio, inlet.pressure_pa
    t_in = inlet.temperature_c
    rh_in = inlet.relative_humidity_pct
    if target_rh_pct > rh_in:
        raise InfeasibleConstraintError(
            f"Heating cannot raise RH: target {target_rh_pct} % is above inlet {rh_in:.4f} %"
        )
    if target_rh_pct == rh_in:
        return HeatingResult(
            mode=HeatingMode.FROM_HUMIDITY, inlet_flow=inlet, outlet_flow=inlet, heat_of_process_w=0.0
        )

    t_limit = get_engine_config().processes.heating_temperature_limit_c
    rh_at_limit = humid_air.relative_humidity(t_limit, x, p)
    if target_rh_pct < rh_at_limit:
        raise InfeasibleConstraintError(
            f"Target RH {target_rh_pct} % needs heating above {t_limit} degC "
            f"(RH at limit: {rh_at_limit:.4f} %)"
        )

    solver = BrentSolver("HeatingFromHumidity-Solver")
    t_out = solver.find_root(
        lambda t: humid_air.relative_humidity_kernel(t, x, p) - target_rh_pct,
        t_in,
        t_limit
    )
    return heating_from_temperature(inlet, t_out, mode=HeatingMode.FROM_HUMIDITY)
