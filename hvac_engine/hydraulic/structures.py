"""
Duct cross-section geometry.

Section equations (area, perimeter, equivalent hydraulic diameter) are plain
functions; the structure classes combine them with the wall material layers
to expose the inner flow section and the linear mass of the duct wall.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

from hvac_engine.core.enums import ConduitShape
from hvac_engine.core.validators import require_not_none, require_positive
from hvac_engine.hydraulic.materials import MaterialLayer


# =============================================================================
# Section equations

def equivalent_diameter(area_m2: float, perimeter_m: float) -> float:
    """Hydraulic diameter 4A/P."""
    require_positive(perimeter_m, "perimeter_m")
    return 4.0 * area_m2 / perimeter_m


def circular_area(diameter_m: float) -> float:
    return math.pi * diameter_m ** 2 / 4.0


def circular_perimeter(diameter_m: float) -> float:
    return math.pi * diameter_m


def rectangular_area(width_m: float, height_m: float) -> float:
    return width_m * height_m


def rectangular_perimeter(width_m: float, height_m: float) -> float:
    return 2.0 * (width_m + height_m)


def elliptic_area(major_axis_m: float, minor_axis_m: float) -> float:
    return math.pi * (major_axis_m / 2.0) * (minor_axis_m / 2.0)


def elliptic_perimeter(major_axis_m: float, minor_axis_m: float) -> float:
    """Jacobsen approximation, exact for a circle."""
    a = major_axis_m / 2.0
    b = minor_axis_m / 2.0
    lam = (a - b) / (a + b)
    return math.pi * (a + b) * (256.0 - 48.0 * lam ** 2 - 21.0 * lam ** 4) / (256.0 - 112.0 * lam ** 2 - 3.0 * lam ** 4)


# =============================================================================
# Structures

@dataclass(frozen=True)
class ConduitStructure(ABC):
    """
    Duct wall built from a base layer and optional outer layers.

    Subclasses describe the inner section; the linear mass of each layer is
    the area of the shell it adds times the material density.
    """
    base_layer: MaterialLayer
    outer_layers: Tuple[MaterialLayer, ...] = field(default=(), kw_only=True)

    def __post_init__(self):
        require_not_none(self.base_layer, "base_layer")
        object.__setattr__(self, 'outer_layers', tuple(layer for layer in self.outer_layers if layer is not None))

    shape: ConduitShape = field(init=False, default=ConduitShape.CIRCULAR)

    @property
    @abstractmethod
    def inner_section_area_m2(self) -> float: ...

    @property
    @abstractmethod
    def inner_perimeter_m(self) -> float: ...

    @abstractmethod
    def _section_area_with_offset(self, offset_m: float) -> float:
        """Area enclosed when every inner dimension grows by 2 * offset_m."""

    @property
    def equivalent_hydraulic_diameter_m(self) -> float:
        return equivalent_diameter(self.inner_section_area_m2, self.inner_perimeter_m)

    @property
    def total_thickness_m(self) -> float:
        return self.base_layer.thickness_m + sum(layer.thickness_m for layer in self.outer_layers)

    @property
    def outer_section_area_m2(self) -> float:
        return self._section_area_with_offset(self.total_thickness_m)

    @property
    def base_linear_mass_density_kg_m(self) -> float:
        shell = self._section_area_with_offset(self.base_layer.thickness_m) - self.inner_section_area_m2
        return shell * self.base_layer.material.density_kg_m3

    @property
    def total_linear_mass_density_kg_m(self) -> float:
        total = self.base_linear_mass_density_kg_m
        offset = self.base_layer.thickness_m
        for layer in self.outer_layers:
            shell = self._section_area_with_offset(offset + layer.thickness_m) - self._section_area_with_offset(offset)
            total += shell * layer.material.density_kg_m3
            offset += layer.thickness_m
        return total


@dataclass(frozen=True)
class CircularStructure(ConduitStructure):
    inner_diameter_m: float = field(default=None, kw_only=True)
    shape: ConduitShape = field(init=False, default=ConduitShape.CIRCULAR)

    def __post_init__(self):
        super().__post_init__()
        require_positive(require_not_none(self.inner_diameter_m, "inner_diameter_m"), "inner_diameter_m")

    @property
    def inner_section_area_m2(self) -> float:
        return circular_area(self.inner_diameter_m)

    @property
    def inner_perimeter_m(self) -> float:
        return circular_perimeter(self.inner_diameter_m)

    @property
    def outer_diameter_m(self) -> float:
        return self.inner_diameter_m + 2.0 * self.total_thickness_m

    def _section_area_with_offset(self, offset_m: float) -> float:
        return circular_area(self.inner_diameter_m + 2.0 * offset_m)


@dataclass(frozen=True)
class RectangularStructure(ConduitStructure):
    inner_width_m: float = field(default=None, kw_only=True)
    inner_height_m: float = field(default=None, kw_only=True)
    shape: ConduitShape = field(init=False, default=ConduitShape.RECTANGULAR)

    def __post_init__(self):
        super().__post_init__()
        require_positive(require_not_none(self.inner_width_m, "inner_width_m"), "inner_width_m")
        require_positive(require_not_none(self.inner_height_m, "inner_height_m"), "inner_height_m")

    @property
    def inner_section_area_m2(self) -> float:
        return rectangular_area(self.inner_width_m, self.inner_height_m)

    @property
    def inner_perimeter_m(self) -> float:
        return rectangular_perimeter(self.inner_width_m, self.inner_height_m)

    def _section_area_with_offset(self, offset_m: float) -> float:
        return rectangular_area(self.inner_width_m + 2.0 * offset_m, self.inner_height_m + 2.0 * offset_m)


@dataclass(frozen=True)
class EllipticStructure(ConduitStructure):
    inner_major_axis_m: float = field(default=None, kw_only=True)
    inner_minor_axis_m: float = field(default=None, kw_only=True)
    shape: ConduitShape = field(init=False, default=ConduitShape.ELLIPTIC)

    def __post_init__(self):
        super().__post_init__()
        require_positive(require_not_none(self.inner_major_axis_m, "inner_major_axis_m"), "inner_major_axis_m")
        require_positive(require_not_none(self.inner_minor_axis_m, "inner_minor_axis_m"), "inner_minor_axis_m")

    @property
    def inner_section_area_m2(self) -> float:
        return elliptic_area(self.inner_major_axis_m, self.inner_minor_axis_m)

    @property
    def inner_perimeter_m(self) -> float:
        return elliptic_perimeter(self.inner_major_axis_m, self.inner_minor_axis_m)

    def _section_area_with_offset(self, offset_m: float) -> float:
        return elliptic_area(self.inner_major_axis_m + 2.0 * offset_m, self.inner_minor_axis_m + 2.0 * offset_m)
