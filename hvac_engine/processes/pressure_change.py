"""
Pressure drop due to friction.

The flow work dissipated by friction, Q = V * dp, ends up as sensible heat in
the stream. Dry air mass flow and humidity ratio are unchanged; the outlet
pressure is reduced by dp and the temperature rises by Q / (m * cp), using
the humid air mass flow and the specific heat per kg of dry air.
"""

import logging

from hvac_engine.config.loader import get_engine_config
from hvac_engine.core.enums import PressureMode
from hvac_engine.core.validators import require_non_negative, require_not_none
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.results import PressureChangeResult

logger = logging.getLogger(__name__)


def pressure_drop_due_to_friction(flow: HumidAirFlow, pressure_drop_pa: float) -> PressureChangeResult:
    """
    Convert a frictional pressure drop into a temperature rise.

    Args:
        flow: Inlet humid air flow.
        pressure_drop_pa: Pressure drop, must be >= 0.

    Returns:
        PressureChangeResult with the heat of friction in W. A drop within
        the configured pressure accuracy, or a zero flow, returns the inlet
        unchanged with zero heat; the requested drop is still reported.

    Raises:
        MissingArgumentError: If flow or pressure drop is missing.
        OutOfBoundsError: If the pressure drop is negative or the outlet
            pressure leaves the valid range.
    """
    require_not_none(flow, "flow")
    require_non_negative(pressure_drop_pa, "pressure_drop_pa")

    accuracy = get_engine_config().processes.pressure_accuracy_pa
    if pressure_drop_pa <= accuracy or flow.dry_air_mass_flow_kg_s == 0.0:
        return PressureChangeResult(
            mode=PressureMode.PRESSURE_DROP,
            inlet_flow=flow,
            outlet_flow=flow,
            heat_of_process_w=0.0,
            pressure_drop_pa=pressure_drop_pa
        )

    heat_w = flow.volumetric_flow_m3_s * pressure_drop_pa
    delta_t = heat_w / (flow.mass_flow_kg_s * flow.specific_heat_j_kgk)

    outlet = HumidAirFlow(
        dry_air_mass_flow_kg_s=flow.dry_air_mass_flow_kg_s,
        humidity_ratio=flow.humidity_ratio,
        temperature_c=flow.temperature_c + delta_t,
        pressure_pa=flow.pressure_pa - pressure_drop_pa
    )
    logger.debug(f"Friction drop {pressure_drop_pa:.2f} Pa: +{delta_t:.5f} K, {heat_w:.2f} W")

    return PressureChangeResult(
        mode=PressureMode.PRESSURE_DROP,
        inlet_flow=flow,
        outlet_flow=outlet,
        heat_of_process_w=heat_w,
        pressure_drop_pa=pressure_drop_pa
    )
