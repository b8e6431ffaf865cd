"""
Cooling of a humid air stream with optional condensation.

Coil Model:
    The coil surface temperature is approximated by the coolant average
    temperature tm.

    - Dry coil (tm >= inlet dew point): only sensible heat is removed, the
      humidity ratio is unchanged and no condensate forms.
    - Wet coil (tm < inlet dew point): bypass factor model. The outlet state
      lies on the straight line between the inlet state and saturated air at
      tm:

          BF = (t2 - tm) / (t1 - tm)
          x2 = xs(tm) + BF * (x1 - xs(tm))
          m_cond = m_da * (x1 - x2), leaving at tm

      For a given power the outlet temperature is root-found so that the
      energy balance Q = m_da * (i1 - i2) - m_cond * iw(tm) holds.

The maximum coil capacity is reached when the outlet equals tm (BF = 0).
Asking for more raises InfeasibleConstraintError.

Inverse Solvers:
    FROM_TEMPERATURE and FROM_HUMIDITY root-find the coil power in
    [0, Q_max] against the full forward model, each evaluation re-running
    the wet coil solve.

Sign convention: heat_of_process_w is negative (heat removed from the air).
"""

import logging
from typing import Tuple

from hvac_engine.config.loader import get_engine_config
from hvac_engine.core.enums import CoolingMode
from hvac_engine.core.exceptions import InfeasibleConstraintError
from hvac_engine.core.validators import require_finite, require_in_range, require_not_none
from hvac_engine.fluids import humid_air, liquid_water
from hvac_engine.fluids.flows import CondensateFlow, HumidAirFlow
from hvac_engine.processes.coolant import CoolantData
from hvac_engine.processes.results import CoolingResult
from hvac_engine.solvers.root_finder import BrentSolver

logger = logging.getLogger(__name__)


def _is_wet_coil(inlet: HumidAirFlow, coolant: CoolantData) -> bool:
    return coolant.average_temperature_c < inlet.dew_point_c and inlet.temperature_c > coolant.average_temperature_c


def _wet_coil_state(inlet: HumidAirFlow, t_wall: float, t_out: float) -> Tuple[float, float, float]:
    """
    Outlet humidity ratio, enthalpy and condensate mass flow for an outlet
    temperature on the bypass factor line.
    """
    p = inlet.pressure_pa
    x_wall = humid_air.max_humidity_ratio_kernel(t_wall, p)
    bypass_factor = (t_out - t_wall) / (inlet.temperature_c - t_wall)
    x_out = x_wall + bypass_factor * (inlet.humidity_ratio - x_wall)
    i_out = humid_air.specific_enthalpy_kernel(t_out, x_out, p)
    m_cond = inlet.dry_air_mass_flow_kg_s * (inlet.humidity_ratio - x_out)
    return x_out, i_out, m_cond


def max_cooling_power(inlet: HumidAirFlow, coolant: CoolantData) -> float:
    """
    Largest heat (W, positive) the coil can remove: cooling down to tm.

    Used as the upper bracket limit of the inverse cooling solvers.
    """
    require_not_none(inlet, "inlet")
    require_not_none(coolant, "coolant")
    t_wall = coolant.average_temperature_c
    m_da = inlet.dry_air_mass_flow_kg_s
    if inlet.temperature_c <= t_wall or m_da == 0.0:
        return 0.0

    if not _is_wet_coil(inlet, coolant):
        i_wall = humid_air.specific_enthalpy_kernel(t_wall, inlet.humidity_ratio, inlet.pressure_pa)
        return m_da * (inlet.specific_enthalpy_j_kg - i_wall)

    _, i_wall, m_cond = _wet_coil_state(inlet, t_wall, t_wall)
    i_cond = liquid_water.specific_enthalpy_kernel(t_wall)
    return m_da * (inlet.specific_enthalpy_j_kg - i_wall) - m_cond * i_cond


def cooling_from_power(
    inlet: HumidAirFlow,
    coolant: CoolantData,
    power_w: float,
    mode: CoolingMode = CoolingMode.FROM_POWER
) -> CoolingResult:
    """
    Cool a flow by removing a given heat power.

    Args:
        inlet: Inlet humid air flow.
        coolant: Coil coolant conditions.
        power_w: Heat to remove, W. The sign is ignored; cooling always
            removes heat.
        mode: Mode tag recorded on the result.

    Returns:
        CoolingResult with outlet flow and condensate.

    Raises:
        InfeasibleConstraintError: If the power exceeds the coil capacity.
    """
    require_not_none(inlet, "inlet")
    require_not_none(coolant, "coolant")
    q_removed = abs(require_finite(power_w, "power_w"))
    t_wall = coolant.average_temperature_c
    m_da = inlet.dry_air_mass_flow_kg_s

    if q_removed == 0.0 or m_da == 0.0:
        return CoolingResult(
            mode=mode,
            inlet_flow=inlet,
            outlet_flow=inlet,
            heat_of_process_w=0.0,
            condensate_flow=CondensateFlow.zero(t_wall),
            coolant=coolant
        )

    q_max = max_cooling_power(inlet, coolant)
    if q_removed > q_max * (1.0 + 1e-12):
        raise InfeasibleConstraintError(
            f"Cooling power {q_removed:.2f} W exceeds coil capacity {q_max:.2f} W "
            f"for coolant average {t_wall} degC"
        )

    i_in = inlet.specific_enthalpy_j_kg
    p = inlet.pressure_pa
    if not _is_wet_coil(inlet, coolant):
        i_out = i_in - q_removed / m_da
        t_out = humid_air.dry_bulb_temperature(i_out, inlet.humidity_ratio, p)
        outlet = inlet.with_temperature(max(t_out, t_wall))
        condensate = CondensateFlow.zero(t_wall)
    else:
        i_cond = liquid_water.specific_enthalpy_kernel(t_wall)

        def energy_balance(t_out: float) -> float:
            _, i_out, m_cond = _wet_coil_state(inlet, t_wall, t_out)
            return m_da * (i_in - i_out) - m_cond * i_cond - q_removed

        solver = BrentSolver("WetCoil-Solver")
        t_out = solver.find_root(energy_balance, t_wall, inlet.temperature_c)
        x_out, _, m_cond = _wet_coil_state(inlet, t_wall, t_out)
        outlet = HumidAirFlow(m_da, x_out, t_out, p)
        condensate = CondensateFlow(max(m_cond, 0.0), t_wall)

    logger.debug(
        f"Cooling {q_removed:.1f} W: {inlet.temperature_c:.3f} -> {outlet.temperature_c:.3f} degC, "
        f"condensate {condensate.mass_flow_kg_s:.6f} kg/s"
    )
    return CoolingResult(
        mode=mode,
        inlet_flow=inlet,
        outlet_flow=outlet,
        heat_of_process_w=-q_removed,
        condensate_flow=condensate,
        coolant=coolant
    )


def _estimate_power_for_temperature(inlet: HumidAirFlow, coolant: CoolantData, target_temperature_c: float) -> float:
    """Closed-form coil power for an outlet temperature on the bypass factor line."""
    t_wall = coolant.average_temperature_c
    m_da = inlet.dry_air_mass_flow_kg_s
    if not _is_wet_coil(inlet, coolant):
        i_out = humid_air.specific_enthalpy_kernel(target_temperature_c, inlet.humidity_ratio, inlet.pressure_pa)
        return m_da * (inlet.specific_enthalpy_j_kg - i_out)
    _, i_out, m_cond = _wet_coil_state(inlet, t_wall, target_temperature_c)
    return m_da * (inlet.specific_enthalpy_j_kg - i_out) - m_cond * liquid_water.specific_enthalpy_kernel(t_wall)


def _solve_power(residual, estimate: float, q_max: float, name: str) -> float:
    """Root-find coil power in [0, q_max], starting around the estimate."""
    margin = get_engine_config().processes.cooling_bracket_margin
    lower = max(0.0, estimate * (1.0 - margin))
    upper = min(q_max, estimate * (1.0 + margin))
    solver = BrentSolver(name)
    return solver.find_root(residual, lower, upper, limits=(0.0, q_max))


def cooling_from_temperature(
    inlet: HumidAirFlow,
    coolant: CoolantData,
    target_temperature_c: float
) -> CoolingResult:
    """
    Cool a flow to a target outlet temperature.

    Raises:
        InfeasibleConstraintError: If the target is above the inlet
            temperature or below the coolant average temperature.
    """
    require_not_none(inlet, "inlet")
    require_not_none(coolant, "coolant")
    require_finite(target_temperature_c, "target_temperature_c")
    t_wall = coolant.average_temperature_c

    if target_temperature_c > inlet.temperature_c:
        raise InfeasibleConstraintError(
            f"Cooling cannot raise temperature: target {target_temperature_c} degC "
            f"is above inlet {inlet.temperature_c} degC"
        )
    if target_temperature_c == inlet.temperature_c:
        return cooling_from_power(inlet, coolant, 0.0, mode=CoolingMode.FROM_TEMPERATURE)
    if target_temperature_c < t_wall:
        raise InfeasibleConstraintError(
            f"Target {target_temperature_c} degC is below coolant average temperature {t_wall} degC"
        )

    q_max = max_cooling_power(inlet, coolant)
    estimate = _estimate_power_for_temperature(inlet, coolant, target_temperature_c)

    def residual(q: float) -> float:
        return cooling_from_power(inlet, coolant, q).outlet_flow.temperature_c - target_temperature_c

    q = _solve_power(residual, estimate, q_max, "CoolingFromTemperature-Solver")
    return cooling_from_power(inlet, coolant, q, mode=CoolingMode.FROM_TEMPERATURE)


def cooling_from_humidity(
    inlet: HumidAirFlow,
    coolant: CoolantData,
    target_rh_pct: float
) -> CoolingResult:
    """
    Cool a flow until its relative humidity rises to a target value.

    Raises:
        OutOfBoundsError: If the target is outside (0, 100].
        InfeasibleConstraintError: If the target is below the inlet RH or
            beyond what the coil can reach.
    """
    require_not_none(inlet, "inlet")
    require_not_none(coolant, "coolant")
    require_in_range(target_rh_pct, 0.0, 100.0, "target_rh_pct")

    rh_in = inlet.relative_humidity_pct
    if target_rh_pct < rh_in:
        raise InfeasibleConstraintError(
            f"Cooling cannot lower RH: target {target_rh_pct} % is below inlet {rh_in:.4f} %"
        )
    if target_rh_pct == rh_in:
        return cooling_from_power(inlet, coolant, 0.0, mode=CoolingMode.FROM_HUMIDITY)

    q_max = max_cooling_power(inlet, coolant)
    rh_max = cooling_from_power(inlet, coolant, q_max).outlet_flow.relative_humidity_pct if q_max > 0.0 else rh_in
    if target_rh_pct > rh_max:
        raise InfeasibleConstraintError(
            f"Target RH {target_rh_pct} % is beyond coil reach (max {rh_max:.4f} % "
            f"at coolant average {coolant.average_temperature_c} degC)"
        )

    def residual(q: float) -> float:
        return cooling_from_power(inlet, coolant, q).outlet_flow.relative_humidity_pct - target_rh_pct

    solver = BrentSolver("CoolingFromHumidity-Solver")
    q = solver.find_root(residual, 0.0, q_max)
    return cooling_from_power(inlet, coolant, q, mode=CoolingMode.FROM_HUMIDITY)
