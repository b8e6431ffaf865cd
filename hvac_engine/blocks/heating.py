"""
Heating block.

The driver connector carries the value the mode expects: power in W for
FROM_POWER, outlet temperature in degC for FROM_TEMPERATURE, outlet RH in %
for FROM_HUMIDITY. The heat of process is also pushed to a separate output
connector for downstream consumers.
"""

from typing import Any, List, Optional

from hvac_engine.blocks.base import ProcessBlock
from hvac_engine.blocks.connector import Connector
from hvac_engine.core.enums import HeatingMode, ProcessType
from hvac_engine.core.validators import require_not_none
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.heating import (
    heating_from_humidity,
    heating_from_power,
    heating_from_temperature,
)
from hvac_engine.processes.results import HeatingResult


class HeatingBlock(ProcessBlock):
    """
    Sensible heater driven by power, outlet temperature or outlet RH.

    Example:
        >>> heater = HeatingBlock(HeatingMode.FROM_TEMPERATURE, driver=30.0, air_flow=inlet)
        >>> round(heater.run_process_calculations().outlet_flow.temperature_c, 6)
        30.0
    """

    process_type = ProcessType.HEATING

    def __init__(
        self,
        mode: HeatingMode,
        driver: Any,
        air_flow: Any = None,
        coil_pressure_loss_pa: Any = 0.0,
        name: Optional[str] = None
    ):
        super().__init__(air_flow, coil_pressure_loss_pa, name)
        self.mode = HeatingMode(require_not_none(mode, "mode"))
        self._driver_in: Connector[float] = Connector(float, name=f"{self.name}.{self.mode.name.lower()}")
        self._heat_out: Connector[float] = Connector(float, name=f"{self.name}.heat_out")
        self._wire(self._driver_in, require_not_none(driver, "driver"))

    @classmethod
    def of_power(cls, power_w: Any, air_flow: Any = None, **kwargs) -> 'HeatingBlock':
        return cls(HeatingMode.FROM_POWER, power_w, air_flow, **kwargs)

    @classmethod
    def of_temperature(cls, temperature_c: Any, air_flow: Any = None, **kwargs) -> 'HeatingBlock':
        return cls(HeatingMode.FROM_TEMPERATURE, temperature_c, air_flow, **kwargs)

    @classmethod
    def of_humidity(cls, relative_humidity_pct: Any, air_flow: Any = None, **kwargs) -> 'HeatingBlock':
        return cls(HeatingMode.FROM_HUMIDITY, relative_humidity_pct, air_flow, **kwargs)

    def get_driver_connector(self) -> Connector[float]:
        return self._driver_in

    def get_heat_output_connector(self) -> Connector[float]:
        return self._heat_out

    def set_driver(self, source: Any) -> None:
        self._wire(self._driver_in, source)

    def _input_connectors(self) -> List[Connector]:
        return super()._input_connectors() + [self._driver_in]

    def _output_connectors(self) -> List[Connector]:
        return super()._output_connectors() + [self._heat_out]

    def _process(self, inlet: HumidAirFlow) -> HeatingResult:
        driver = self._driver_in.get_data()
        if self.mode is HeatingMode.FROM_POWER:
            return heating_from_power(inlet, driver)
        if self.mode is HeatingMode.FROM_TEMPERATURE:
            return heating_from_temperature(inlet, driver)
        return heating_from_humidity(inlet, driver)

    def _publish(self, result: HeatingResult) -> None:
        self._heat_out.set_data(result.heat_of_process_w)
