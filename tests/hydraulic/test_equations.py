import pytest

from hvac_engine.hydraulic import equations


def test_flow_velocity_and_reynolds():
    velocity = equations.flow_velocity(0.5, 0.25)
    assert velocity == 2.0
    assert equations.reynolds_number(1.2, velocity, 0.5, 1.8e-5) == pytest.approx(66666.67, rel=1e-6)


def test_laminar_friction_factor():
    assert equations.friction_factor_laminar(1000.0) == 0.064
    assert equations.darcy_friction_factor(1000.0, 0.0002, 0.2) == 0.064


def test_colebrook_solution_satisfies_equation():
    reynolds, relative_roughness = 1e5, 0.001
    friction = equations.friction_factor_colebrook(reynolds, relative_roughness)

    assert equations.colebrook_residual(friction, reynolds, relative_roughness) == pytest.approx(0.0, abs=1e-9)
    assert friction == pytest.approx(0.0222, rel=1e-2)


def test_vatankhah_approximates_colebrook():
    for reynolds, relative_roughness in ((5e3, 0.0), (1e5, 0.001), (1e6, 0.01)):
        explicit = equations.friction_factor_vatankhah(reynolds, relative_roughness)
        exact = equations.friction_factor_colebrook(reynolds, relative_roughness)
        assert explicit == pytest.approx(exact, rel=1e-2)


def test_fluid_at_rest_has_no_friction():
    assert equations.darcy_friction_factor(0.0, 0.0002, 0.2) == 0.0


def test_pressure_losses():
    assert equations.dynamic_pressure(1.2, 5.0) == pytest.approx(15.0)
    assert equations.linear_pressure_loss(0.02, 10.0, 0.2, 1.2, 5.0) == pytest.approx(15.0)
    assert equations.local_pressure_loss(0.5, 1.2, 5.0) == pytest.approx(7.5)


def test_linear_resistance():
    assert equations.linear_resistance(150.0, 100.0) == 1.5
    assert equations.linear_resistance(150.0, 0.0) == 0.0
