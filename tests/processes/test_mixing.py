import pytest

from hvac_engine.core.enums import MixingMode, ProcessType
from hvac_engine.core.exceptions import InfeasibleConstraintError
from hvac_engine.fluids import humid_air
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.mixing import (
    mix_two_flows_for_target_temperature,
    mixing_of_multiple_flows,
    mixing_of_two_flows,
)

P_1BAR = 100000.0


def test_mixing_of_two_flows():
    """Winter fresh air mixed with room air at equal dry air flow."""
    m_da = 5000.0 / 3600.0
    fresh = HumidAirFlow.from_dry_air_mass_flow(m_da, -20.0, relative_humidity_pct=100.0, pressure_pa=P_1BAR)
    room = HumidAirFlow.from_dry_air_mass_flow(m_da, 18.0, relative_humidity_pct=55.0, pressure_pa=P_1BAR)

    result = mixing_of_two_flows(fresh, room)
    outlet = result.outlet_flow

    x_expected = (fresh.humidity_ratio + room.humidity_ratio) / 2.0
    i_expected = (fresh.specific_enthalpy_j_kg + room.specific_enthalpy_j_kg) / 2.0
    assert result.process_type == ProcessType.MIXING
    assert result.mode == MixingMode.SIMPLE_MIXING
    assert result.heat_of_process_w == 0.0
    assert result.recirculation_flows == (room,)
    assert outlet.dry_air_mass_flow_kg_s == pytest.approx(2.0 * m_da, rel=1e-12)
    assert outlet.humidity_ratio == pytest.approx(x_expected, rel=1e-12)
    assert outlet.temperature_c == pytest.approx(
        humid_air.dry_bulb_temperature(i_expected, x_expected, P_1BAR), abs=1e-9
    )
    assert outlet.pressure_pa == P_1BAR


def test_mixing_of_three_flows():
    """Three equal volume streams mix to just below freezing, close to saturation."""
    flows = [
        HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, -20.0, relative_humidity_pct=99.0),
        HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, 0.0, relative_humidity_pct=80.0),
        HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, 20.0, relative_humidity_pct=50.0),
    ]

    result = mixing_of_multiple_flows(flows[0], flows[1:])

    assert result.mode == MixingMode.MULTIPLE_MIXING
    assert result.recirculation_flows == tuple(flows[1:])
    outlet = result.outlet_flow
    assert outlet.temperature_c == pytest.approx(-1.0000413789265845, abs=1e-2)
    # Mixed vapour content seen at the published outlet temperature
    assert humid_air.relative_humidity(-1.0000413789265845, outlet.humidity_ratio, outlet.pressure_pa) == \
        pytest.approx(99.48335594756662, abs=5e-3)
    assert outlet.relative_humidity_pct == pytest.approx(
        humid_air.relative_humidity(outlet.temperature_c, outlet.humidity_ratio, outlet.pressure_pa), abs=1e-11
    )
    assert outlet.dry_air_mass_flow_kg_s == pytest.approx(
        sum(flow.dry_air_mass_flow_kg_s for flow in flows), rel=1e-12
    )


def test_mixing_without_secondary_flows_is_pass_through(room_air):
    result = mixing_of_multiple_flows(room_air, [])
    assert result.mode == MixingMode.SIMPLE_MIXING
    assert result.outlet_flow == room_air
    assert result.recirculation_flows == ()


def test_mixing_with_one_secondary_flow_is_simple(room_air, summer_air):
    result = mixing_of_multiple_flows(room_air, [summer_air])
    assert result.mode == MixingMode.SIMPLE_MIXING
    assert result.outlet_flow == mixing_of_two_flows(room_air, summer_air).outlet_flow


def test_mixing_with_empty_stream(room_air):
    empty = room_air.with_dry_air_mass_flow(0.0).with_temperature(35.0)
    result = mixing_of_two_flows(room_air, empty)
    assert result.outlet_flow.temperature_c == pytest.approx(room_air.temperature_c, abs=1e-9)


@pytest.fixture
def split_case():
    inlet = HumidAirFlow.from_volumetric_flow(2000.0 / 3600.0, -20.0, relative_humidity_pct=99.0)
    recirculation = HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, 20.0, relative_humidity_pct=30.0)
    target = HumidAirFlow.from_volumetric_flow(1500.0 / 3600.0, 15.0, relative_humidity_pct=40.0)
    return inlet, recirculation, target.dry_air_mass_flow_kg_s


def test_mixing_for_target_temperature(split_case):
    inlet, recirculation, total = split_case

    result = mix_two_flows_for_target_temperature(inlet, recirculation, 0.0, 0.0, total, 15.0)
    solved_inlet = result.inlet_flow
    solved_recirculation = result.recirculation_flows[0]

    assert result.outlet_flow.temperature_c == pytest.approx(15.0, abs=1e-3)
    assert result.outlet_flow.dry_air_mass_flow_kg_s == pytest.approx(total, rel=1e-12)
    assert solved_inlet.dry_air_mass_flow_kg_s < inlet.dry_air_mass_flow_kg_s
    assert solved_recirculation.dry_air_mass_flow_kg_s > recirculation.dry_air_mass_flow_kg_s
    assert solved_inlet.temperature_c == inlet.temperature_c
    assert solved_recirculation.humidity_ratio == recirculation.humidity_ratio


def test_unreachable_target_temperature(split_case):
    inlet, recirculation, total = split_case
    with pytest.raises(InfeasibleConstraintError, match="outside the reachable range"):
        mix_two_flows_for_target_temperature(inlet, recirculation, 0.0, 0.0, total, 25.0)


def test_minimum_flows_exceed_total(split_case):
    inlet, recirculation, total = split_case
    with pytest.raises(InfeasibleConstraintError, match="exceed target total"):
        mix_two_flows_for_target_temperature(inlet, recirculation, total, total, total, 15.0)


def test_minimum_flows_narrow_the_reachable_range(split_case):
    """A forced minimum of fresh air caps the reachable mixed temperature."""
    inlet, recirculation, total = split_case
    with pytest.raises(InfeasibleConstraintError):
        mix_two_flows_for_target_temperature(inlet, recirculation, 0.5 * total, 0.0, total, 15.0)
