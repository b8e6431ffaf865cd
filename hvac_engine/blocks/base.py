"""
Process block abstraction.

A ProcessBlock wraps one process equation behind connectors so that blocks can
be chained by the simulation engine. Every block owns:

    - an air flow input connector and an air flow output connector
    - a coil pressure loss input connector (Pa, default 0)
    - its last process result

Run Sequence (run_process_calculations):
    1. Drop the previous result and empty every output connector.
    2. Refresh every input connector (pull from upstream when bound).
    3. Apply the coil pressure loss to the inlet as frictional heating.
    4. Run the block's own computation on the adjusted inlet.
    5. Report the unadjusted inlet on the result.
    6. Push the outlet (and any auxiliary outputs) downstream.
    7. Store the result.

Runs are independent; nothing is memoised between them. A run that raises
leaves the block without a result and its outputs empty.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, List, Optional, TypeGuard

from hvac_engine.blocks.connector import Connector
from hvac_engine.core.enums import ProcessType
from hvac_engine.core.types import OutputConnection
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.processes.pressure_change import pressure_drop_due_to_friction
from hvac_engine.processes.results import ProcessResult

logger = logging.getLogger(__name__)


def is_producer(candidate: Any) -> TypeGuard[OutputConnection]:
    """True for anything exposing an output connector to bind to."""
    return callable(getattr(candidate, 'get_output_connector', None))


class ProcessBlock(ABC):
    """
    Abstract base class for all process blocks.

    Subclasses implement _process() and, when they expose extra inputs or
    outputs, extend _input_connectors(), _output_connectors() and _publish().

    Attributes:
        name: Label used in logs and connector names.
        process_type: Kind of result the block produces.
    """

    process_type: ProcessType

    def __init__(
        self,
        air_flow: Any = None,
        coil_pressure_loss_pa: Any = 0.0,
        name: Optional[str] = None
    ):
        self.name = name or type(self).__name__
        self._air_flow_in: Connector[HumidAirFlow] = Connector(HumidAirFlow, name=f"{self.name}.air_flow_in")
        self._air_flow_out: Connector[HumidAirFlow] = Connector(HumidAirFlow, name=f"{self.name}.air_flow_out")
        self._pressure_loss_in: Connector[float] = Connector(float, name=f"{self.name}.coil_pressure_loss")
        self._process_result: Optional[ProcessResult] = None

        self._wire(self._air_flow_in, air_flow)
        self._wire(self._pressure_loss_in, coil_pressure_loss_pa)

    @staticmethod
    def _wire(connector: Connector, source_or_value: Any) -> None:
        """Bind to a producer, or assign a plain value. None leaves the connector untouched."""
        if source_or_value is None:
            return
        if is_producer(source_or_value):
            connector.bind(source_or_value.get_output_connector())
        else:
            connector.unbind()
            connector.set_data(source_or_value)

    # --- Connectors ---

    def get_input_connector(self) -> Connector[HumidAirFlow]:
        return self._air_flow_in

    def get_output_connector(self) -> Connector[HumidAirFlow]:
        return self._air_flow_out

    def get_coil_pressure_loss_connector(self) -> Connector[float]:
        return self._pressure_loss_in

    def connect_air_flow_data_source(self, source: Any) -> None:
        """Feed the air flow input from a producer or a HumidAirFlow value."""
        self._wire(self._air_flow_in, source)

    def set_coil_pressure_loss(self, source: Any) -> None:
        self._wire(self._pressure_loss_in, source)

    def _input_connectors(self) -> List[Connector]:
        return [self._air_flow_in, self._pressure_loss_in]

    def _output_connectors(self) -> List[Connector]:
        return [self._air_flow_out]

    def _update_inputs(self) -> None:
        for connector in self._input_connectors():
            connector.update_connector_data()

    # --- Run ---

    def run_process_calculations(self) -> ProcessResult:
        """
        Run the block once on its current inputs.

        Returns:
            The process result, also stored for get_process_result().

        Raises:
            MissingArgumentError: If an input connector has no data.
            HvacEngineError: Any error of the underlying process equation.
        """
        self._process_result = None
        for connector in self._output_connectors():
            connector.set_data(None)

        self._update_inputs()
        inlet = self._air_flow_in.get_data()
        result = self._report_inlet(self._process(self._adjust_inlet(inlet)), inlet)
        self._air_flow_out.set_data(self._outgoing_flow(result))
        self._publish(result)
        self._process_result = result

        logger.debug(
            f"{self.name}: {result.process_type.name} {result.mode.name}, "
            f"{inlet.temperature_c:.3f} -> {result.outlet_flow.temperature_c:.3f} degC, "
            f"Q = {result.heat_of_process_w:.2f} W"
        )
        return result

    def _adjust_inlet(self, inlet: HumidAirFlow) -> HumidAirFlow:
        """Apply the coil pressure loss as frictional heating before the process."""
        return pressure_drop_due_to_friction(inlet, self._pressure_loss_in.get_data()).outlet_flow

    def _report_inlet(self, result: ProcessResult, inlet: HumidAirFlow) -> ProcessResult:
        """Show the inlet as received, before the coil pressure loss."""
        return replace(result, inlet_flow=inlet)

    def _outgoing_flow(self, result: ProcessResult) -> HumidAirFlow:
        return result.outlet_flow

    @abstractmethod
    def _process(self, inlet: HumidAirFlow) -> ProcessResult:
        """Compute the result for an inlet already adjusted for coil pressure loss."""

    def _publish(self, result: ProcessResult) -> None:
        """Push auxiliary outputs. The air flow output is handled by the caller."""

    def get_process_result(self) -> Optional[ProcessResult]:
        """Result of the last run, None before the first run or after a failed one."""
        return self._process_result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
