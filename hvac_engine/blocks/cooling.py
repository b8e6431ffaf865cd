"""
Cooling coil block.

Besides the cooled air flow the block publishes the heat of process (W,
negative) and the condensate flow leaving the coil.
"""

from typing import Any, List, Optional

from hvac_engine.blocks.base import ProcessBlock
from hvac_engine.blocks.connector import Connector
from hvac_engine.core.enums import CoolingMode, ProcessType
from hvac_engine.core.validators import require_not_none
from hvac_engine.fluids.flows import CondensateFlow, HumidAirFlow
from hvac_engine.processes.coolant import CoolantData
from hvac_engine.processes.cooling import (
    cooling_from_humidity,
    cooling_from_power,
    cooling_from_temperature,
)
from hvac_engine.processes.results import CoolingResult


class CoolingBlock(ProcessBlock):
    """
    Cooling coil driven by power, outlet temperature or outlet RH.

    Args:
        mode: Which driver the block receives.
        coolant: CoolantData value or producer of one.
        driver: Power (W), outlet temperature (degC) or outlet RH (%),
            as a value or producer.
        air_flow: Inlet HumidAirFlow value or producer.
        coil_pressure_loss_pa: Air side pressure loss of the coil.
    """

    process_type = ProcessType.COOLING

    def __init__(
        self,
        mode: CoolingMode,
        coolant: Any,
        driver: Any,
        air_flow: Any = None,
        coil_pressure_loss_pa: Any = 0.0,
        name: Optional[str] = None
    ):
        super().__init__(air_flow, coil_pressure_loss_pa, name)
        self.mode = CoolingMode(require_not_none(mode, "mode"))
        self._coolant_in: Connector[CoolantData] = Connector(CoolantData, name=f"{self.name}.coolant")
        self._driver_in: Connector[float] = Connector(float, name=f"{self.name}.{self.mode.name.lower()}")
        self._heat_out: Connector[float] = Connector(float, name=f"{self.name}.heat_out")
        self._condensate_out: Connector[CondensateFlow] = Connector(CondensateFlow, name=f"{self.name}.condensate_out")
        self._wire(self._coolant_in, require_not_none(coolant, "coolant"))
        self._wire(self._driver_in, require_not_none(driver, "driver"))

    @classmethod
    def of_power(cls, coolant: Any, power_w: Any, air_flow: Any = None, **kwargs) -> 'CoolingBlock':
        return cls(CoolingMode.FROM_POWER, coolant, power_w, air_flow, **kwargs)

    @classmethod
    def of_temperature(cls, coolant: Any, temperature_c: Any, air_flow: Any = None, **kwargs) -> 'CoolingBlock':
        return cls(CoolingMode.FROM_TEMPERATURE, coolant, temperature_c, air_flow, **kwargs)

    @classmethod
    def of_humidity(cls, coolant: Any, relative_humidity_pct: Any, air_flow: Any = None, **kwargs) -> 'CoolingBlock':
        return cls(CoolingMode.FROM_HUMIDITY, coolant, relative_humidity_pct, air_flow, **kwargs)

    def get_coolant_connector(self) -> Connector[CoolantData]:
        return self._coolant_in

    def get_driver_connector(self) -> Connector[float]:
        return self._driver_in

    def get_heat_output_connector(self) -> Connector[float]:
        return self._heat_out

    def get_condensate_output_connector(self) -> Connector[CondensateFlow]:
        return self._condensate_out

    def set_coolant(self, source: Any) -> None:
        self._wire(self._coolant_in, source)

    def set_driver(self, source: Any) -> None:
        self._wire(self._driver_in, source)

    def _input_connectors(self) -> List[Connector]:
        return super()._input_connectors() + [self._coolant_in, self._driver_in]

    def _output_connectors(self) -> List[Connector]:
        return super()._output_connectors() + [self._heat_out, self._condensate_out]

    def _process(self, inlet: HumidAirFlow) -> CoolingResult:
        coolant = self._coolant_in.get_data()
        driver = self._driver_in.get_data()
        if self.mode is CoolingMode.FROM_POWER:
            return cooling_from_power(inlet, coolant, driver)
        if self.mode is CoolingMode.FROM_TEMPERATURE:
            return cooling_from_temperature(inlet, coolant, driver)
        return cooling_from_humidity(inlet, coolant, driver)

    def _publish(self, result: CoolingResult) -> None:
        self._heat_out.set_data(result.heat_of_process_w)
        self._condensate_out.set_data(result.condensate_flow)
