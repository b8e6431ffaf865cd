"""
Hydraulic conduit: a duct section carrying a humid air flow.

The conduit evaluates everything on construction (velocity, Reynolds number,
friction factor, linear pressure loss) and stays immutable afterwards; use
the with_* helpers to get a conduit for another flow, length or structure.
Local losses are described separately by LocalLossInputData and priced by
whoever knows the flow (see AirFlowDuctBlock).
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple

from hvac_engine.core.validators import require_non_negative, require_not_none
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.hydraulic import equations
from hvac_engine.hydraulic.structures import ConduitStructure


@dataclass(frozen=True)
class LocalLossFactorData:
    """Named local loss coefficient (zeta) of a fitting."""
    name: str
    loss_factor: float

    def __post_init__(self):
        require_non_negative(self.loss_factor, "loss_factor")


@dataclass(frozen=True)
class LocalLossPressureData:
    """Named local loss given directly as a pressure drop, Pa."""
    name: str
    pressure_loss_pa: float

    def __post_init__(self):
        require_non_negative(self.pressure_loss_pa, "pressure_loss_pa")


@dataclass(frozen=True)
class LocalLossInputData:
    """
    Local losses of a duct section, as loss factors and direct pressure drops.

    None entries are ignored.

    Example:
        >>> losses = LocalLossInputData.of_factors([LocalLossFactorData("Elbow", 0.2)])
        >>> losses.sum_of_loss_factors
        0.2
    """
    loss_factors: Tuple[LocalLossFactorData, ...] = ()
    loss_pressures: Tuple[LocalLossPressureData, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'loss_factors', tuple(d for d in (self.loss_factors or ()) if d is not None))
        object.__setattr__(self, 'loss_pressures', tuple(d for d in (self.loss_pressures or ()) if d is not None))

    @classmethod
    def of_factors(cls, loss_factors: Iterable[LocalLossFactorData]) -> 'LocalLossInputData':
        return cls(loss_factors=tuple(loss_factors))

    @classmethod
    def of_pressures(cls, loss_pressures: Iterable[LocalLossPressureData]) -> 'LocalLossInputData':
        return cls(loss_pressures=tuple(loss_pressures))

    @property
    def sum_of_loss_factors(self) -> float:
        return sum(d.loss_factor for d in self.loss_factors)

    @property
    def total_pressure_loss_pa(self) -> float:
        return sum(d.pressure_loss_pa for d in self.loss_pressures)


@dataclass(frozen=True)
class HydraulicConduit:
    """
    Straight duct section with friction loss evaluated for a given flow.

    Attributes:
        structure: Cross-section and wall layers.
        flow: Humid air flowing through the section.
        length_m: Section length (default 1 m).
    """
    structure: ConduitStructure
    flow: HumidAirFlow
    length_m: float = 1.0

    velocity_m_s: float = field(init=False)
    hydraulic_diameter_m: float = field(init=False, repr=False)
    reynolds_number: float = field(init=False)
    friction_factor: float = field(init=False)
    linear_pressure_loss_pa: float = field(init=False)
    linear_resistance_pa_m: float = field(init=False, repr=False)

    def __post_init__(self):
        require_not_none(self.structure, "structure")
        require_not_none(self.flow, "flow")
        require_non_negative(self.length_m, "length_m")

        diameter = self.structure.equivalent_hydraulic_diameter_m
        velocity = equations.flow_velocity(self.flow.volumetric_flow_m3_s, self.structure.inner_section_area_m2)
        reynolds = equations.reynolds_number(
            self.flow.density_kg_m3, velocity, diameter, self.flow.dynamic_viscosity_pa_s
        )
        roughness = self.structure.base_layer.material.absolute_roughness_m
        friction = equations.darcy_friction_factor(reynolds, roughness, diameter)
        linear_loss = equations.linear_pressure_loss(
            friction, self.length_m, diameter, self.flow.density_kg_m3, velocity
        )

        object.__setattr__(self, 'velocity_m_s', velocity)
        object.__setattr__(self, 'hydraulic_diameter_m', diameter)
        object.__setattr__(self, 'reynolds_number', reynolds)
        object.__setattr__(self, 'friction_factor', friction)
        object.__setattr__(self, 'linear_pressure_loss_pa', linear_loss)
        object.__setattr__(self, 'linear_resistance_pa_m', equations.linear_resistance(linear_loss, self.length_m))

    @property
    def dynamic_pressure_pa(self) -> float:
        return equations.dynamic_pressure(self.flow.density_kg_m3, self.velocity_m_s)

    @property
    def inner_volume_m3(self) -> float:
        return self.structure.inner_section_area_m2 * self.length_m

    @property
    def mass_kg(self) -> float:
        """Mass of the duct wall including all layers."""
        return self.structure.total_linear_mass_density_kg_m * self.length_m

    def local_pressure_loss_pa(self, local_losses: Optional[LocalLossInputData]) -> float:
        """Pressure loss of the fittings: sum(zeta) * rho * v^2 / 2 plus direct pressure drops."""
        if local_losses is None:
            return 0.0
        return (equations.local_pressure_loss(local_losses.sum_of_loss_factors, self.flow.density_kg_m3, self.velocity_m_s)
                + local_losses.total_pressure_loss_pa)

    def with_flow(self, flow: HumidAirFlow) -> 'HydraulicConduit':
        return replace(self, flow=flow)

    def with_length(self, length_m: float) -> 'HydraulicConduit':
        return replace(self, length_m=length_m)

    def with_structure(self, structure: ConduitStructure) -> 'HydraulicConduit':
        return replace(self, structure=structure)
