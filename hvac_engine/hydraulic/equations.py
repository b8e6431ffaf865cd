"""
Flow equations for air in ducts.

Friction Factor:
    - Laminar (Re <= 2300): lambda = 64 / Re
    - Turbulent: Colebrook-White, solved with BrentSolver on a narrow bracket
      around the explicit Vatankhah approximation

          1/sqrt(lambda) + 2 log10(eps / (3.7 D) + 2.51 / (Re sqrt(lambda))) = 0

Pressure Losses:
    - Linear (Darcy-Weisbach): dp = lambda * (L / D) * rho * v^2 / 2
    - Local: dp = zeta * rho * v^2 / 2
"""

import logging
import math


from hvac_engine.core.constants import Limits
from hvac_engine.core.validators import require_non_negative, require_positive
from hvac_engine.solvers.root_finder import BrentSolver

logger = logging.getLogger(__name__)

# Bracket around the explicit estimate for the Colebrook solve
COLEBROOK_BRACKET_LOWER = 0.905
COLEBROOK_BRACKET_UPPER = 1.105


def flow_velocity(volumetric_flow_m3_s: float, section_area_m2: float) -> float:
    require_non_negative(volumetric_flow_m3_s, "volumetric_flow_m3_s")
    require_positive(section_area_m2, "section_area_m2")
    return volumetric_flow_m3_s / section_area_m2


def reynolds_number(density_kg_m3: float, velocity_m_s: float, hydraulic_diameter_m: float,
                    dynamic_viscosity_pa_s: float) -> float:
    require_positive(dynamic_viscosity_pa_s, "dynamic_viscosity_pa_s")
    return density_kg_m3 * velocity_m_s * hydraulic_diameter_m / dynamic_viscosity_pa_s


def dynamic_pressure(density_kg_m3: float, velocity_m_s: float) -> float:
    return density_kg_m3 * velocity_m_s ** 2 / 2.0


def friction_factor_laminar(reynolds: float) -> float:
    require_positive(reynolds, "reynolds")
    return 64.0 / reynolds


def friction_factor_vatankhah(reynolds: float, relative_roughness: float) -> float:
    """Explicit approximation of the Colebrook-White equation (Vatankhah, 2018)."""
    require_positive(reynolds, "reynolds")
    require_non_negative(relative_roughness, "relative_roughness")
    eps_term = relative_roughness / 3.71
    delta = 6.0173 / (reynolds * (0.07 * relative_roughness + reynolds ** -0.885) ** 0.109) + eps_term
    numerator = 2.51 / reynolds + 1.1513 * delta
    denominator = delta - eps_term - 2.3026 * delta * math.log10(delta)
    return (numerator / denominator) ** 2


def colebrook_residual(friction_factor: float, reynolds: float, relative_roughness: float) -> float:
    root = math.sqrt(friction_factor)
    return 1.0 / root + 2.0 * math.log10(relative_roughness / 3.7 + 2.51 / (reynolds * root))


def friction_factor_colebrook(reynolds: float, relative_roughness: float) -> float:
    """Colebrook-White friction factor for turbulent flow."""
    estimate = friction_factor_vatankhah(reynolds, relative_roughness)
    solver = BrentSolver("Colebrook-Solver")
    return solver.find_root(
        lambda f: colebrook_residual(f, reynolds, relative_roughness),
        estimate * COLEBROOK_BRACKET_LOWER,
        estimate * COLEBROOK_BRACKET_UPPER,
        limits=(estimate * 0.5, estimate * 2.0)
    )


def darcy_friction_factor(reynolds: float, absolute_roughness_m: float, hydraulic_diameter_m: float) -> float:
    """
    Friction factor for any flow regime.

    Returns 0 for a fluid at rest.
    """
    require_non_negative(reynolds, "reynolds")
    require_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    if reynolds == 0.0:
        return 0.0
    if reynolds <= Limits.LAMINAR_REYNOLDS_LIMIT:
        return friction_factor_laminar(reynolds)
    return friction_factor_colebrook(reynolds, absolute_roughness_m / hydraulic_diameter_m)


def linear_pressure_loss(friction_factor: float, length_m: float, hydraulic_diameter_m: float,
                         density_kg_m3: float, velocity_m_s: float) -> float:
    require_non_negative(length_m, "length_m")
    require_positive(hydraulic_diameter_m, "hydraulic_diameter_m")
    return friction_factor * length_m / hydraulic_diameter_m * dynamic_pressure(density_kg_m3, velocity_m_s)


def local_pressure_loss(loss_factor: float, density_kg_m3: float, velocity_m_s: float) -> float:
    require_non_negative(loss_factor, "loss_factor")
    return loss_factor * dynamic_pressure(density_kg_m3, velocity_m_s)


def linear_resistance(pressure_loss_pa: float, length_m: float) -> float:
    """Pressure loss per unit length, 0 for a zero-length duct."""
    if length_m == 0.0:
        return 0.0
    return pressure_loss_pa / length_m
