import pytest

from hvac_engine.core.enums import CoolingMode, ProcessType
from hvac_engine.core.exceptions import InfeasibleConstraintError, OutOfBoundsError
from hvac_engine.fluids import humid_air, liquid_water
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.coolant import CoolantData
from hvac_engine.processes.cooling import (
    cooling_from_humidity,
    cooling_from_power,
    cooling_from_temperature,
    max_cooling_power,
)


def test_coolant_data():
    coolant = CoolantData(7.0, 14.0)
    assert coolant.average_temperature_c == 10.5
    with pytest.raises(OutOfBoundsError):
        CoolantData(-5.0, 14.0)


def test_wet_coil_cooling_to_temperature(summer_air, chilled_water):
    """Humid air below its dew point condenses water on the coil."""
    result = cooling_from_temperature(summer_air, chilled_water, 20.0)
    outlet = result.outlet_flow

    assert result.process_type == ProcessType.COOLING
    assert result.mode == CoolingMode.FROM_TEMPERATURE
    assert outlet.temperature_c == pytest.approx(20.0, abs=1e-6)
    assert outlet.humidity_ratio < summer_air.humidity_ratio
    assert outlet.dry_air_mass_flow_kg_s == summer_air.dry_air_mass_flow_kg_s
    assert result.heat_of_process_w < 0.0
    assert result.condensate_flow.temperature_c == chilled_water.average_temperature_c
    assert result.condensate_flow.mass_flow_kg_s == pytest.approx(
        summer_air.dry_air_mass_flow_kg_s * (summer_air.humidity_ratio - outlet.humidity_ratio), rel=1e-9
    )


def test_wet_coil_follows_bypass_line(summer_air, chilled_water):
    """Outlet lies on the line between inlet and saturated air at the coil temperature."""
    outlet = cooling_from_temperature(summer_air, chilled_water, 18.0).outlet_flow
    tm = chilled_water.average_temperature_c
    xs = humid_air.max_humidity_ratio(tm, summer_air.pressure_pa)

    bypass_t = (outlet.temperature_c - tm) / (summer_air.temperature_c - tm)
    bypass_x = (outlet.humidity_ratio - xs) / (summer_air.humidity_ratio - xs)
    assert bypass_x == pytest.approx(bypass_t, rel=1e-9)


def test_energy_balance(summer_air, chilled_water):
    result = cooling_from_power(summer_air, chilled_water, 30000.0)
    m_da = summer_air.dry_air_mass_flow_kg_s
    condensate = result.condensate_flow

    removed = (m_da * (summer_air.specific_enthalpy_j_kg - result.outlet_flow.specific_enthalpy_j_kg)
               - condensate.mass_flow_kg_s * liquid_water.specific_enthalpy(condensate.temperature_c))
    assert result.heat_of_process_w == -30000.0
    assert removed == pytest.approx(30000.0, rel=1e-6)


def test_power_sign_is_ignored(summer_air, chilled_water):
    positive = cooling_from_power(summer_air, chilled_water, 20000.0)
    negative = cooling_from_power(summer_air, chilled_water, -20000.0)
    assert positive.outlet_flow == negative.outlet_flow


def test_dry_coil_keeps_humidity_ratio(chilled_water):
    dry_air = HumidAirFlow.from_dry_air_mass_flow(1.0, 30.0, humidity_ratio=0.004)
    result = cooling_from_temperature(dry_air, chilled_water, 20.0)

    assert result.outlet_flow.temperature_c == pytest.approx(20.0, abs=1e-6)
    assert result.outlet_flow.humidity_ratio == dry_air.humidity_ratio
    assert result.condensate_flow.is_empty


def test_zero_power_is_identity(summer_air, chilled_water):
    result = cooling_from_power(summer_air, chilled_water, 0.0)
    assert result.outlet_flow == summer_air
    assert result.heat_of_process_w == 0.0
    assert result.condensate_flow.is_empty


def test_power_above_capacity_is_infeasible(summer_air, chilled_water):
    q_max = max_cooling_power(summer_air, chilled_water)
    with pytest.raises(InfeasibleConstraintError, match="exceeds coil capacity"):
        cooling_from_power(summer_air, chilled_water, 1.5 * q_max)


def test_full_capacity_reaches_coil_temperature(summer_air, chilled_water):
    q_max = max_cooling_power(summer_air, chilled_water)
    outlet = cooling_from_power(summer_air, chilled_water, q_max).outlet_flow
    assert outlet.temperature_c == pytest.approx(chilled_water.average_temperature_c, abs=1e-6)
    assert outlet.relative_humidity_pct == pytest.approx(100.0, abs=1e-3)


def test_target_temperature_limits(summer_air, chilled_water):
    with pytest.raises(InfeasibleConstraintError, match="cannot raise temperature"):
        cooling_from_temperature(summer_air, chilled_water, 35.0)
    with pytest.raises(InfeasibleConstraintError, match="below coolant average"):
        cooling_from_temperature(summer_air, chilled_water, 8.0)


def test_cooling_from_humidity(summer_air, chilled_water):
    result = cooling_from_humidity(summer_air, chilled_water, 85.0)

    assert result.mode == CoolingMode.FROM_HUMIDITY
    assert result.outlet_flow.relative_humidity_pct == pytest.approx(85.0, abs=1e-6)
    assert result.outlet_flow.temperature_c < summer_air.temperature_c


def test_cooling_cannot_lower_rh(summer_air, chilled_water):
    with pytest.raises(InfeasibleConstraintError, match="cannot lower RH"):
        cooling_from_humidity(summer_air, chilled_water, 40.0)


def test_dry_coil_cannot_reach_saturation(chilled_water):
    """Without condensation the coil stops at its own temperature, short of 100 % RH."""
    dry_air = HumidAirFlow.from_dry_air_mass_flow(1.0, 30.0, humidity_ratio=0.004)
    with pytest.raises(InfeasibleConstraintError, match="beyond coil reach"):
        cooling_from_humidity(dry_air, chilled_water, 95.0)
