import math

import pytest

from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.hydraulic.conduit import (
    HydraulicConduit,
    LocalLossFactorData,
    LocalLossInputData,
    LocalLossPressureData,
)
from hvac_engine.hydraulic.materials import MaterialLayer, Materials
from hvac_engine.hydraulic.structures import CircularStructure


@pytest.fixture
def steel_duct():
    return CircularStructure(MaterialLayer(Materials.INDUSTRIAL_STEEL, 0.001), inner_diameter_m=0.2)


def test_local_loss_input_data_sums():
    losses = LocalLossInputData(
        loss_factors=(LocalLossFactorData("Elbow", 0.2), None, LocalLossFactorData("Tee", 0.3)),
        loss_pressures=(LocalLossPressureData("Filter", 50.0),)
    )
    assert len(losses.loss_factors) == 2
    assert losses.sum_of_loss_factors == pytest.approx(0.5)
    assert losses.total_pressure_loss_pa == 50.0


def test_empty_local_losses():
    losses = LocalLossInputData()
    assert losses.sum_of_loss_factors == 0.0
    assert losses.total_pressure_loss_pa == 0.0


def test_turbulent_conduit(steel_duct):
    flow = HumidAirFlow.from_volumetric_flow(500.0 / 3600.0, 20.0, relative_humidity_pct=50.0)
    conduit = HydraulicConduit(steel_duct, flow, 100.0)

    assert conduit.velocity_m_s == pytest.approx(4.42097, rel=1e-5)
    assert conduit.reynolds_number > 2300.0
    assert conduit.friction_factor == pytest.approx(0.0232, rel=3e-2)
    assert conduit.linear_resistance_pa_m == pytest.approx(conduit.linear_pressure_loss_pa / 100.0)
    assert conduit.inner_volume_m3 == pytest.approx(math.pi * 0.01 * 100.0)


def test_conduit_at_ten_degrees(steel_duct):
    """500 m3/h at 10 degC / 50 % RH through 10 m of 200 mm steel duct."""
    flow = HumidAirFlow.from_volumetric_flow(500.0 / 3600.0, 10.0, relative_humidity_pct=50.0)
    conduit = HydraulicConduit(steel_duct, flow, 10.0)

    assert conduit.velocity_m_s == pytest.approx(4.42097, rel=1e-5)
    assert conduit.reynolds_number == pytest.approx(62503.6766, rel=2e-3)
    assert conduit.friction_factor == pytest.approx(0.0233350, abs=1e-5)
    assert conduit.linear_resistance_pa_m == pytest.approx(1.4125, abs=1e-3)
    assert conduit.linear_pressure_loss_pa == pytest.approx(14.125, abs=1e-2)


def test_laminar_conduit(steel_duct):
    flow = HumidAirFlow.from_volumetric_flow(1.0 / 3600.0, 20.0, relative_humidity_pct=50.0)
    conduit = HydraulicConduit(steel_duct, flow)

    assert conduit.length_m == 1.0
    assert conduit.reynolds_number < 2300.0
    assert conduit.friction_factor == pytest.approx(64.0 / conduit.reynolds_number)


def test_local_pressure_loss(steel_duct):
    flow = HumidAirFlow.from_volumetric_flow(500.0 / 3600.0, 20.0, relative_humidity_pct=50.0)
    conduit = HydraulicConduit(steel_duct, flow, 10.0)
    losses = LocalLossInputData(
        loss_factors=(LocalLossFactorData("Elbow", 0.4),),
        loss_pressures=(LocalLossPressureData("Damper", 20.0),)
    )

    assert conduit.local_pressure_loss_pa(losses) == pytest.approx(0.4 * conduit.dynamic_pressure_pa + 20.0)
    assert conduit.local_pressure_loss_pa(None) == 0.0


def test_with_length_recomputes(steel_duct):
    flow = HumidAirFlow.from_volumetric_flow(500.0 / 3600.0, 20.0, relative_humidity_pct=50.0)
    short = HydraulicConduit(steel_duct, flow, 10.0)
    long = short.with_length(20.0)

    assert long.linear_pressure_loss_pa == pytest.approx(2.0 * short.linear_pressure_loss_pa)
    assert long.friction_factor == short.friction_factor
