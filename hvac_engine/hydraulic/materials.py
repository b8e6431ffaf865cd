"""
Duct construction materials.

Roughness drives the friction factor of the inner (base) layer, density the
linear mass of every layer.
"""

from dataclasses import dataclass

from hvac_engine.core.validators import require_non_negative, require_not_none, require_positive


@dataclass(frozen=True)
class MaterialData:
    name: str
    density_kg_m3: float
    thermal_conductivity_w_mk: float
    absolute_roughness_m: float

    def __post_init__(self):
        require_not_none(self.name, "name")
        require_positive(self.density_kg_m3, "density_kg_m3")
        require_positive(self.thermal_conductivity_w_mk, "thermal_conductivity_w_mk")
        require_non_negative(self.absolute_roughness_m, "absolute_roughness_m")


@dataclass(frozen=True)
class MaterialLayer:
    """One material shell of a duct wall."""
    material: MaterialData
    thickness_m: float

    def __post_init__(self):
        require_not_none(self.material, "material")
        require_positive(self.thickness_m, "thickness_m")


class Materials:
    """Catalogue of common duct and insulation materials."""
    INDUSTRIAL_STEEL = MaterialData("Industrial Steel", 7850.0, 54.0, 0.2e-3)
    ALUMINIUM = MaterialData("Aluminium", 2700.0, 205.0, 0.0015e-3)
    PVC = MaterialData("PVC", 1380.0, 0.19, 0.0015e-3)
    INSUL_MINERAL_WOOL = MaterialData("Insulating Mineral Wool", 80.0, 0.036, 1.0e-3)
    INSUL_RUBBER_FOAM = MaterialData("Insulating Rubber Foam", 100.0, 0.035, 0.5e-3)
