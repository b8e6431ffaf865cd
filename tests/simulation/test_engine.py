import pytest

from hvac_engine.blocks.cooling import CoolingBlock
from hvac_engine.blocks.duct import AirFlowDuctBlock
from hvac_engine.blocks.heating import HeatingBlock
from hvac_engine.blocks.mixing import MixingBlock
from hvac_engine.blocks.source import SimpleDataSource
from hvac_engine.core.enums import CoolingMode, HeatingMode, ProcessType
from hvac_engine.core.exceptions import InfeasibleConstraintError, MissingArgumentError
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.hydraulic.materials import MaterialLayer, Materials
from hvac_engine.hydraulic.structures import CircularStructure
from hvac_engine.simulation.engine import SequentialProcessingEngine


@pytest.fixture
def outdoor_air():
    return HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, 35.0, relative_humidity_pct=55.0)


@pytest.fixture
def return_air():
    return HumidAirFlow.from_volumetric_flow(1000.0 / 3600.0, 25.0, relative_humidity_pct=70.0)


@pytest.fixture
def air_handling_line(outdoor_air, return_air, chilled_water):
    """Mixing, cooling, supply duct and reheat to 30 % RH."""
    mixing = MixingBlock([SimpleDataSource(return_air)], air_flow=SimpleDataSource(outdoor_air))
    cooling = CoolingBlock(CoolingMode.FROM_TEMPERATURE, chilled_water, driver=25.0)
    duct = AirFlowDuctBlock(
        CircularStructure(MaterialLayer(Materials.INDUSTRIAL_STEEL, 0.001), inner_diameter_m=0.2),
        10.0
    )
    heating = HeatingBlock(HeatingMode.FROM_HUMIDITY, driver=30.0)

    engine = SequentialProcessingEngine()
    engine.add_process_nodes(mixing, cooling, duct, heating)
    return engine


@pytest.mark.scenario
def test_air_handling_line(air_handling_line, outdoor_air, return_air):
    last = air_handling_line.run_calculations_for_all_nodes()
    results = air_handling_line.get_process_results()

    assert len(results) == 4
    assert last is results[-1]
    assert [r.process_type for r in results] == [
        ProcessType.MIXING, ProcessType.COOLING, ProcessType.CONDUIT_FLOW, ProcessType.HEATING
    ]
    assert last.outlet_flow.relative_humidity_pct == pytest.approx(30.0, abs=1e-6)
    assert last.outlet_flow.temperature_c == pytest.approx(40.7, abs=0.1)
    assert last.heat_of_process_w == pytest.approx(10000.0, abs=100.0)
    assert last.outlet_flow.dry_air_mass_flow_kg_s == pytest.approx(
        outdoor_air.dry_air_mass_flow_kg_s + return_air.dry_air_mass_flow_kg_s, rel=1e-12
    )


def test_blocks_are_chained(air_handling_line):
    air_handling_line.run_calculations_for_all_nodes()
    results = air_handling_line.get_process_results()

    for upstream, downstream in zip(results, results[1:]):
        assert downstream.inlet_flow == upstream.outlet_flow


def test_engine_is_idempotent(air_handling_line):
    air_handling_line.run_calculations_for_all_nodes()
    first_results = air_handling_line.get_process_results()
    air_handling_line.run_calculations_for_all_nodes()

    assert air_handling_line.get_process_results() == first_results


def test_add_process_node_returns_index(room_air):
    engine = SequentialProcessingEngine()
    assert engine.add_process_node(HeatingBlock.of_power(100.0, air_flow=room_air)) == 0
    assert engine.add_process_nodes(HeatingBlock.of_power(100.0), HeatingBlock.of_power(100.0)) == [1, 2]
    assert len(engine.get_all_process_blocks()) == 3


def test_get_results_by_type(air_handling_line):
    air_handling_line.run_calculations_for_all_nodes()

    heating = air_handling_line.get_results(ProcessType.HEATING)
    assert len(heating) == 1
    assert heating[0] is air_handling_line.get_last_result()
    assert air_handling_line.get_results(ProcessType.PRESSURE_CHANGE) == []


def test_empty_engine_raises():
    with pytest.raises(MissingArgumentError, match="no process blocks"):
        SequentialProcessingEngine().run_calculations_for_all_nodes()


def test_failed_run_discards_results(room_air):
    target = SimpleDataSource(30.0)
    engine = SequentialProcessingEngine([
        HeatingBlock.of_power(500.0, air_flow=room_air),
        HeatingBlock.of_temperature(target),
    ])
    engine.run_calculations_for_all_nodes()
    assert len(engine.get_process_results()) == 2

    target.set_data(10.0)
    with pytest.raises(InfeasibleConstraintError):
        engine.run_calculations_for_all_nodes()
    assert engine.get_process_results() == []
    assert engine.get_last_result() is None
