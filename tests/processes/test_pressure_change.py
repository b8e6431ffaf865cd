import pytest

from hvac_engine.core.enums import PressureMode, ProcessType
from hvac_engine.core.exceptions import OutOfBoundsError
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.pressure_change import pressure_drop_due_to_friction


@pytest.fixture
def supply_air():
    return HumidAirFlow.from_volumetric_flow(1.5, 25.0, humidity_ratio=0.01)


def test_pressure_drop_turns_into_heat(supply_air):
    """300 Pa lost on 1.5 m3/s dissipates 450 W into the stream."""
    result = pressure_drop_due_to_friction(supply_air, 300.0)

    assert result.process_type == ProcessType.PRESSURE_CHANGE
    assert result.mode == PressureMode.PRESSURE_DROP
    assert result.heat_of_process_w == pytest.approx(450.0, rel=1e-12)
    assert result.pressure_drop_pa == 300.0
    assert result.outlet_flow.pressure_pa == supply_air.pressure_pa - 300.0
    assert result.outlet_flow.temperature_c == pytest.approx(25.2515, abs=1e-4)
    assert result.outlet_flow.dry_air_mass_flow_kg_s == supply_air.dry_air_mass_flow_kg_s
    assert result.outlet_flow.humidity_ratio == supply_air.humidity_ratio


def test_zero_pressure_drop_is_identity(supply_air):
    result = pressure_drop_due_to_friction(supply_air, 0.0)
    assert result.outlet_flow == supply_air
    assert result.heat_of_process_w == 0.0


def test_negligible_pressure_drop_is_still_reported(supply_air):
    """Drops within the pressure accuracy leave the flow alone but keep their value."""
    result = pressure_drop_due_to_friction(supply_air, 5e-7)
    assert result.outlet_flow == supply_air
    assert result.heat_of_process_w == 0.0
    assert result.pressure_drop_pa == 5e-7

    idle = pressure_drop_due_to_friction(supply_air.with_dry_air_mass_flow(0.0), 300.0)
    assert idle.heat_of_process_w == 0.0
    assert idle.pressure_drop_pa == 300.0


def test_negative_pressure_drop_rejected(supply_air):
    with pytest.raises(OutOfBoundsError, match="pressure_drop_pa"):
        pressure_drop_due_to_friction(supply_air, -10.0)
