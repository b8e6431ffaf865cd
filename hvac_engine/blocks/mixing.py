"""
Mixing blocks.

MixingBlock folds any number of secondary (recirculation) flows into the
primary air flow input. TargetTemperatureMixingBlock splits a required total
dry air flow between the primary input and one recirculation stream so that
the mixture reaches a target temperature.

In both blocks the coil pressure loss acts after mixing: it is applied only to
the flow pushed downstream, while the stored result keeps the mixed state.
"""

from typing import Any, Iterable, List, Optional

from hvac_engine.blocks.base import ProcessBlock
from hvac_engine.blocks.connector import Connector
from hvac_engine.core.enums import ProcessType
from hvac_engine.core.validators import require_not_none
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.mixing import mix_two_flows_for_target_temperature, mixing_of_multiple_flows
from hvac_engine.processes.pressure_change import pressure_drop_due_to_friction
from hvac_engine.processes.results import MixingResult, ProcessResult


class _PostMixingLossBlock(ProcessBlock):
    """Applies the coil pressure loss to the mixed outlet instead of the inlet."""

    process_type = ProcessType.MIXING

    def _adjust_inlet(self, inlet: HumidAirFlow) -> HumidAirFlow:
        return inlet

    def _outgoing_flow(self, result: ProcessResult) -> HumidAirFlow:
        return pressure_drop_due_to_friction(result.outlet_flow, self._pressure_loss_in.get_data()).outlet_flow


class MixingBlock(_PostMixingLossBlock):
    """
    Mix the primary air flow with zero or more secondary flows.

    Each entry of mixing_flows is a HumidAirFlow or a producer of one.

    Example:
        >>> mixer = MixingBlock([recirculation_source], air_flow=fresh_air_source)
        >>> mixer.run_process_calculations().mode
        <MixingMode.SIMPLE_MIXING: 0>
    """

    def __init__(
        self,
        mixing_flows: Optional[Iterable[Any]] = None,
        air_flow: Any = None,
        coil_pressure_loss_pa: Any = 0.0,
        name: Optional[str] = None
    ):
        super().__init__(air_flow, coil_pressure_loss_pa, name)
        self._mixing_flows_in: List[Connector[HumidAirFlow]] = []
        for flow in mixing_flows or ():
            self.add_mixing_flow(flow)

    def add_mixing_flow(self, source: Any) -> Connector[HumidAirFlow]:
        """Add a secondary flow input and return its connector."""
        require_not_none(source, "source")
        connector = Connector(HumidAirFlow, name=f"{self.name}.mixing_flow_{len(self._mixing_flows_in)}")
        self._wire(connector, source)
        self._mixing_flows_in.append(connector)
        return connector

    def connect_mixing_flows(self, sources: Iterable[Any]) -> None:
        """Replace all secondary inputs."""
        self.reset_mixing_flows()
        for source in sources:
            self.add_mixing_flow(source)

    def reset_mixing_flows(self) -> None:
        self._mixing_flows_in = []

    def get_mixing_flow_connectors(self) -> List[Connector[HumidAirFlow]]:
        return list(self._mixing_flows_in)

    def _input_connectors(self) -> List[Connector]:
        return super()._input_connectors() + self._mixing_flows_in

    def _process(self, inlet: HumidAirFlow) -> MixingResult:
        return mixing_of_multiple_flows(inlet, [c.get_data() for c in self._mixing_flows_in])


class TargetTemperatureMixingBlock(_PostMixingLossBlock):
    """
    Mix the primary flow with a recirculation flow at the split that gives a
    target outlet temperature.

    The states (temperature, humidity) of both streams come from the inputs;
    only their dry air mass flows are adjusted. The result reports the
    adjusted branches, so its inlet flow differs from the block input.

    Args:
        recirculation_flow: HumidAirFlow or producer.
        target_temperature_c: Required mixed temperature.
        target_total_dry_mass_flow_kg_s: Required outlet dry air flow.
        min_inlet_flow_kg_s: Lower bound of the primary branch.
        min_recirculation_flow_kg_s: Lower bound of the recirculation branch.
    """

    def __init__(
        self,
        recirculation_flow: Any,
        target_temperature_c: Any,
        target_total_dry_mass_flow_kg_s: Any,
        min_inlet_flow_kg_s: Any = 0.0,
        min_recirculation_flow_kg_s: Any = 0.0,
        air_flow: Any = None,
        coil_pressure_loss_pa: Any = 0.0,
        name: Optional[str] = None
    ):
        super().__init__(air_flow, coil_pressure_loss_pa, name)
        self._recirculation_in: Connector[HumidAirFlow] = Connector(HumidAirFlow, name=f"{self.name}.recirculation")
        self._target_temperature_in: Connector[float] = Connector(float, name=f"{self.name}.target_temperature")
        self._target_total_flow_in: Connector[float] = Connector(float, name=f"{self.name}.target_total_flow")
        self._min_inlet_flow_in: Connector[float] = Connector(float, name=f"{self.name}.min_inlet_flow")
        self._min_recirculation_flow_in: Connector[float] = Connector(float, name=f"{self.name}.min_recirculation_flow")

        self._wire(self._recirculation_in, require_not_none(recirculation_flow, "recirculation_flow"))
        self._wire(self._target_temperature_in, require_not_none(target_temperature_c, "target_temperature_c"))
        self._wire(
            self._target_total_flow_in,
            require_not_none(target_total_dry_mass_flow_kg_s, "target_total_dry_mass_flow_kg_s")
        )
        self._wire(self._min_inlet_flow_in, require_not_none(min_inlet_flow_kg_s, "min_inlet_flow_kg_s"))
        self._wire(
            self._min_recirculation_flow_in,
            require_not_none(min_recirculation_flow_kg_s, "min_recirculation_flow_kg_s")
        )

    def get_recirculation_connector(self) -> Connector[HumidAirFlow]:
        return self._recirculation_in

    def get_target_temperature_connector(self) -> Connector[float]:
        return self._target_temperature_in

    def _input_connectors(self) -> List[Connector]:
        return super()._input_connectors() + [
            self._recirculation_in,
            self._target_temperature_in,
            self._target_total_flow_in,
            self._min_inlet_flow_in,
            self._min_recirculation_flow_in,
        ]

    def _report_inlet(self, result: ProcessResult, inlet: HumidAirFlow) -> ProcessResult:
        return result

    def _process(self, inlet: HumidAirFlow) -> MixingResult:
        return mix_two_flows_for_target_temperature(
            inlet,
            self._recirculation_in.get_data(),
            min_inlet_flow_kg_s=self._min_inlet_flow_in.get_data(),
            min_recirculation_flow_kg_s=self._min_recirculation_flow_in.get_data(),
            target_total_dry_mass_flow_kg_s=self._target_total_flow_in.get_data(),
            target_temperature_c=self._target_temperature_in.get_data()
        )
