"""
Flow classes for humid air streams and condensate.

Represents a steady-state flow with intrinsic properties:
- Dry air mass flow (kg/s), the conserved quantity of every process
- Humidity ratio (kg/kg), temperature (degC) and pressure (Pa)
- Derived state (enthalpy, relative humidity, specific heat, density)

Flows are immutable. Processes never modify a flow; they build a new one with
the with_* helpers or the factories.
"""

from dataclasses import dataclass, field, replace
from functools import cached_property
from typing import Optional

from hvac_engine.core.constants import Limits, StandardConditions
from hvac_engine.core.exceptions import MissingArgumentError
from hvac_engine.core.validators import require_in_range, require_non_negative
from hvac_engine.fluids import humid_air, liquid_water


@dataclass(frozen=True)
class HumidAirFlow:
    """
    Flow of humid air with cached thermodynamic properties.

    Example:
        >>> flow = HumidAirFlow.from_volumetric_flow(1000 / 3600, 20.0, relative_humidity_pct=50.0)
        >>> round(flow.relative_humidity_pct, 6)
        50.0
    """
    dry_air_mass_flow_kg_s: float
    humidity_ratio: float
    temperature_c: float
    pressure_pa: float = StandardConditions.PRESSURE_PA

    specific_enthalpy_j_kg: float = field(init=False, repr=False)
    relative_humidity_pct: float = field(init=False)
    specific_heat_j_kgk: float = field(init=False, repr=False)
    density_kg_m3: float = field(init=False, repr=False)
    saturation_pressure_pa: float = field(init=False, repr=False)

    def __post_init__(self):
        """Validate state and cache the properties every process reads."""
        require_non_negative(self.dry_air_mass_flow_kg_s, "dry_air_mass_flow_kg_s")
        require_non_negative(self.humidity_ratio, "humidity_ratio")
        require_in_range(
            self.temperature_c,
            Limits.HUMID_AIR_MIN_TEMPERATURE_C,
            Limits.HUMID_AIR_MAX_TEMPERATURE_C,
            "temperature_c"
        )
        require_in_range(
            self.pressure_pa,
            Limits.HUMID_AIR_MIN_PRESSURE_PA,
            Limits.HUMID_AIR_MAX_PRESSURE_PA,
            "pressure_pa"
        )

        t, x, p = self.temperature_c, self.humidity_ratio, self.pressure_pa
        object.__setattr__(self, 'specific_enthalpy_j_kg', humid_air.specific_enthalpy_kernel(t, x, p))
        object.__setattr__(self, 'relative_humidity_pct', humid_air.relative_humidity_kernel(t, x, p))
        object.__setattr__(self, 'specific_heat_j_kgk', humid_air.specific_heat_kernel(t, x))
        object.__setattr__(self, 'density_kg_m3', humid_air.density_kernel(t, x, p))
        object.__setattr__(self, 'saturation_pressure_pa', humid_air.saturation_pressure_kernel(t))

    # --- Factories ---

    @classmethod
    def from_dry_air_mass_flow(
        cls,
        dry_air_mass_flow_kg_s: float,
        temperature_c: float,
        relative_humidity_pct: Optional[float] = None,
        humidity_ratio: Optional[float] = None,
        pressure_pa: float = StandardConditions.PRESSURE_PA
    ) -> 'HumidAirFlow':
        """
        Build a flow from dry air mass flow and either RH or humidity ratio.

        Raises:
            MissingArgumentError: If neither RH nor humidity ratio is given.
        """
        x = cls._resolve_humidity_ratio(temperature_c, relative_humidity_pct, humidity_ratio, pressure_pa)
        return cls(dry_air_mass_flow_kg_s, x, temperature_c, pressure_pa)

    @classmethod
    def from_mass_flow(
        cls,
        mass_flow_kg_s: float,
        temperature_c: float,
        relative_humidity_pct: Optional[float] = None,
        humidity_ratio: Optional[float] = None,
        pressure_pa: float = StandardConditions.PRESSURE_PA
    ) -> 'HumidAirFlow':
        """Build a flow from the humid air (dry air + vapour) mass flow."""
        require_non_negative(mass_flow_kg_s, "mass_flow_kg_s")
        x = cls._resolve_humidity_ratio(temperature_c, relative_humidity_pct, humidity_ratio, pressure_pa)
        return cls(mass_flow_kg_s / (1.0 + x), x, temperature_c, pressure_pa)

    @classmethod
    def from_volumetric_flow(
        cls,
        volumetric_flow_m3_s: float,
        temperature_c: float,
        relative_humidity_pct: Optional[float] = None,
        humidity_ratio: Optional[float] = None,
        pressure_pa: float = StandardConditions.PRESSURE_PA
    ) -> 'HumidAirFlow':
        """Build a flow from the humid air volumetric flow at its own state."""
        require_non_negative(volumetric_flow_m3_s, "volumetric_flow_m3_s")
        x = cls._resolve_humidity_ratio(temperature_c, relative_humidity_pct, humidity_ratio, pressure_pa)
        rho = humid_air.density(temperature_c, x, pressure_pa)
        return cls(volumetric_flow_m3_s * rho / (1.0 + x), x, temperature_c, pressure_pa)

    @staticmethod
    def _resolve_humidity_ratio(temperature_c, relative_humidity_pct, humidity_ratio, pressure_pa) -> float:
        if humidity_ratio is not None:
            if relative_humidity_pct is not None:
                raise MissingArgumentError(
                    "Give either relative_humidity_pct or humidity_ratio, not both"
                )
            return humidity_ratio
        if relative_humidity_pct is None:
            raise MissingArgumentError("Either relative_humidity_pct or humidity_ratio is required")
        ps = humid_air.saturation_pressure(temperature_c)
        return humid_air.humidity_ratio(relative_humidity_pct, ps, pressure_pa)

    # --- Copies ---

    def with_temperature(self, temperature_c: float) -> 'HumidAirFlow':
        """Same dry air mass flow and humidity ratio at another temperature."""
        return replace(self, temperature_c=temperature_c)

    def with_pressure(self, pressure_pa: float) -> 'HumidAirFlow':
        return replace(self, pressure_pa=pressure_pa)

    def with_humidity_ratio(self, humidity_ratio: float) -> 'HumidAirFlow':
        return replace(self, humidity_ratio=humidity_ratio)

    def with_relative_humidity(self, relative_humidity_pct: float) -> 'HumidAirFlow':
        x = humid_air.humidity_ratio(relative_humidity_pct, self.saturation_pressure_pa, self.pressure_pa)
        return replace(self, humidity_ratio=x)

    def with_dry_air_mass_flow(self, dry_air_mass_flow_kg_s: float) -> 'HumidAirFlow':
        return replace(self, dry_air_mass_flow_kg_s=dry_air_mass_flow_kg_s)

    # --- Derived quantities ---

    @property
    def mass_flow_kg_s(self) -> float:
        """Humid air mass flow (dry air + water)."""
        return self.dry_air_mass_flow_kg_s * (1.0 + self.humidity_ratio)

    @property
    def volumetric_flow_m3_s(self) -> float:
        return self.mass_flow_kg_s / self.density_kg_m3

    @property
    def vapour_pressure_pa(self) -> float:
        return humid_air.vapour_pressure_kernel(self.humidity_ratio, self.pressure_pa)

    @property
    def max_humidity_ratio(self) -> float:
        return humid_air.max_humidity_ratio_kernel(self.temperature_c, self.pressure_pa)

    @cached_property
    def dew_point_c(self) -> float:
        return humid_air.dew_point_kernel(self.humidity_ratio, self.pressure_pa)

    @cached_property
    def dynamic_viscosity_pa_s(self) -> float:
        return humid_air.dynamic_viscosity_kernel(self.temperature_c, self.humidity_ratio)


@dataclass(frozen=True)
class CondensateFlow:
    """Liquid water removed from an air stream by a cooling coil."""
    mass_flow_kg_s: float
    temperature_c: float

    def __post_init__(self):
        require_non_negative(self.mass_flow_kg_s, "mass_flow_kg_s")
        require_in_range(
            self.temperature_c,
            Limits.WATER_MIN_TEMPERATURE_C,
            Limits.WATER_MAX_TEMPERATURE_C,
            "temperature_c"
        )

    @classmethod
    def zero(cls, temperature_c: float) -> 'CondensateFlow':
        """No-condensation sentinel."""
        return cls(0.0, temperature_c)

    @property
    def is_empty(self) -> bool:
        return self.mass_flow_kg_s == 0.0

    @property
    def specific_enthalpy_j_kg(self) -> float:
        return liquid_water.specific_enthalpy_kernel(self.temperature_c)

    @property
    def density_kg_m3(self) -> float:
        return liquid_water.density_kernel(self.temperature_c)

    @property
    def volumetric_flow_m3_s(self) -> float:
        return self.mass_flow_kg_s / self.density_kg_m3
