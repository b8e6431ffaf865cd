"""
Adiabatic mixing of humid air streams.

Conservation equations (dry air mass basis):
    m_mix = m_a + m_b
    x_mix = (m_a * x_a + m_b * x_b) / m_mix
    i_mix = (m_a * i_a + m_b * i_b) / m_mix

The mixed temperature follows from inverting i_mix at x_mix, which is a
root-find because enthalpy switches branch when the mixture lands in the mist
or ice fog region. The outlet keeps the pressure of the primary (first) flow.
"""

import logging
from typing import Sequence

from hvac_engine.core.enums import MixingMode
from hvac_engine.core.exceptions import InfeasibleConstraintError
from hvac_engine.core.validators import (
    require_finite,
    require_non_negative,
    require_not_none,
    require_positive,
)
from hvac_engine.fluids import humid_air
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.results import MixingResult
from hvac_engine.solvers.root_finder import BrentSolver

logger = logging.getLogger(__name__)


def _mix(flow_a: HumidAirFlow, flow_b: HumidAirFlow) -> HumidAirFlow:
    m_a = flow_a.dry_air_mass_flow_kg_s
    m_b = flow_b.dry_air_mass_flow_kg_s
    m_mix = m_a + m_b
    if m_mix == 0.0:
        return flow_a

    x_mix = (m_a * flow_a.humidity_ratio + m_b * flow_b.humidity_ratio) / m_mix
    i_mix = (m_a * flow_a.specific_enthalpy_j_kg + m_b * flow_b.specific_enthalpy_j_kg) / m_mix
    p_mix = flow_a.pressure_pa
    t_mix = humid_air.dry_bulb_temperature(i_mix, x_mix, p_mix)
    return HumidAirFlow(m_mix, x_mix, t_mix, p_mix)


def mixing_of_two_flows(flow_a: HumidAirFlow, flow_b: HumidAirFlow) -> MixingResult:
    """
    Mix a secondary flow into a primary flow.

    Args:
        flow_a: Primary flow; the outlet keeps its pressure.
        flow_b: Secondary (e.g. recirculation) flow.

    Returns:
        MixingResult in SIMPLE_MIXING mode with flow_b as the only
        recirculation flow.
    """
    require_not_none(flow_a, "flow_a")
    require_not_none(flow_b, "flow_b")
    outlet = _mix(flow_a, flow_b)
    return MixingResult(
        mode=MixingMode.SIMPLE_MIXING,
        inlet_flow=flow_a,
        outlet_flow=outlet,
        heat_of_process_w=0.0,
        recirculation_flows=(flow_b,)
    )


def mixing_of_multiple_flows(primary: HumidAirFlow, secondaries: Sequence[HumidAirFlow]) -> MixingResult:
    """
    Fold any number of secondary flows into the primary flow.

    No secondary flows gives a pass-through result. One gives SIMPLE_MIXING,
    two or more MULTIPLE_MIXING.
    """
    require_not_none(primary, "primary")
    require_not_none(secondaries, "secondaries")
    secondaries = tuple(secondaries)

    if not secondaries:
        return MixingResult(
            mode=MixingMode.SIMPLE_MIXING,
            inlet_flow=primary,
            outlet_flow=primary,
            heat_of_process_w=0.0
        )
    if len(secondaries) == 1:
        return mixing_of_two_flows(primary, secondaries[0])

    outlet = primary
    for flow in secondaries:
        require_not_none(flow, "secondary flow")
        outlet = _mix(outlet, flow)

    return MixingResult(
        mode=MixingMode.MULTIPLE_MIXING,
        inlet_flow=primary,
        outlet_flow=outlet,
        heat_of_process_w=0.0,
        recirculation_flows=secondaries
    )


def mix_two_flows_for_target_temperature(
    inlet: HumidAirFlow,
    recirculation: HumidAirFlow,
    min_inlet_flow_kg_s: float,
    min_recirculation_flow_kg_s: float,
    target_total_dry_mass_flow_kg_s: float,
    target_temperature_c: float
) -> MixingResult:
    """
    Split a total dry air mass flow between two streams to hit a mixed temperature.

    The two branch flows must sum to the target total, so the problem reduces
    to one unknown m (inlet branch dry air flow, recirculation = total - m),
    root-found over [min_inlet, total - min_recirculation]. The states of
    both streams are kept; only their dry air mass flows are rescaled.

    Args:
        inlet: Inlet (e.g. fresh air) stream state.
        recirculation: Recirculation stream state.
        min_inlet_flow_kg_s: Lower bound for the inlet branch dry air flow.
        min_recirculation_flow_kg_s: Lower bound for the recirculation branch.
        target_total_dry_mass_flow_kg_s: Required outlet dry air flow.
        target_temperature_c: Required mixed temperature.

    Returns:
        MixingResult whose inlet and recirculation flows carry the solved split.

    Raises:
        InfeasibleConstraintError: If the bounds leave no interval or the
            target temperature is not reachable inside it. Never clamps.
    """
    require_not_none(inlet, "inlet")
    require_not_none(recirculation, "recirculation")
    require_non_negative(min_inlet_flow_kg_s, "min_inlet_flow_kg_s")
    require_non_negative(min_recirculation_flow_kg_s, "min_recirculation_flow_kg_s")
    require_positive(target_total_dry_mass_flow_kg_s, "target_total_dry_mass_flow_kg_s")
    require_finite(target_temperature_c, "target_temperature_c")

    total = target_total_dry_mass_flow_kg_s
    lower = min_inlet_flow_kg_s
    upper = total - min_recirculation_flow_kg_s
    if lower > upper:
        raise InfeasibleConstraintError(
            f"Minimum flows {min_inlet_flow_kg_s} + {min_recirculation_flow_kg_s} kg/s "
            f"exceed target total {total} kg/s"
        )

    def mixed(m_inlet: float) -> HumidAirFlow:
        return _mix(inlet.with_dry_air_mass_flow(m_inlet), recirculation.with_dry_air_mass_flow(total - m_inlet))

    t_lower = mixed(lower).temperature_c
    t_upper = mixed(upper).temperature_c
    t_min, t_max = min(t_lower, t_upper), max(t_lower, t_upper)
    if not t_min <= target_temperature_c <= t_max:
        raise InfeasibleConstraintError(
            f"Target mixed temperature {target_temperature_c} degC is outside the reachable "
            f"range [{t_min:.4f}, {t_max:.4f}] degC for the given flow bounds"
        )

    solver = BrentSolver("MixingForTargetTemperature-Solver")
    m_inlet = solver.find_root(lambda m: mixed(m).temperature_c - target_temperature_c, lower, upper)

    adjusted_inlet = inlet.with_dry_air_mass_flow(m_inlet)
    adjusted_recirculation = recirculation.with_dry_air_mass_flow(total - m_inlet)
    logger.debug(
        f"Mixing split for {target_temperature_c} degC: inlet {m_inlet:.6f} kg/s, "
        f"recirculation {total - m_inlet:.6f} kg/s"
    )
    return mixing_of_two_flows(adjusted_inlet, adjusted_recirculation)
