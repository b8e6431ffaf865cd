"""
Air flow duct block.

The duct computes its own hydraulic losses instead of taking a coil pressure
loss: linear friction over its length plus local losses of its fittings,

    dp_total = lambda * (L / D) * rho * v^2 / 2 + sum(zeta) * rho * v^2 / 2 + sum(dp_direct)

The outlet keeps the inlet temperature and dry air mass flow at the reduced
pressure; no heat is exchanged.
"""

from typing import Any, Optional

from hvac_engine.blocks.base import ProcessBlock
from hvac_engine.core.enums import PressureMode, ProcessType
from hvac_engine.core.validators import require_non_negative, require_not_none
from hvac_engine.fluids.flows import HumidAirFlow
from hvac_engine.hydraulic.conduit import HydraulicConduit, LocalLossInputData
from hvac_engine.hydraulic.structures import ConduitStructure
from hvac_engine.processes.results import ConduitFlowResult


class AirFlowDuctBlock(ProcessBlock):
    """
    Straight duct section with fittings.

    Args:
        structure: Cross-section and wall layers.
        length_m: Duct length.
        local_losses: Fittings as loss factors and direct pressure drops.
        air_flow: Inlet HumidAirFlow value or producer.
    """

    process_type = ProcessType.CONDUIT_FLOW

    def __init__(
        self,
        structure: ConduitStructure,
        length_m: float,
        local_losses: Optional[LocalLossInputData] = None,
        air_flow: Any = None,
        name: Optional[str] = None
    ):
        super().__init__(air_flow, 0.0, name)
        self.structure = require_not_none(structure, "structure")
        self.length_m = require_non_negative(length_m, "length_m")
        self.local_losses = local_losses if local_losses is not None else LocalLossInputData()
        self._conduit: Optional[HydraulicConduit] = None

    def get_conduit(self) -> Optional[HydraulicConduit]:
        """Conduit evaluated for the last run's inlet flow."""
        return self._conduit

    def _adjust_inlet(self, inlet: HumidAirFlow) -> HumidAirFlow:
        return inlet

    def _process(self, inlet: HumidAirFlow) -> ConduitFlowResult:
        conduit = HydraulicConduit(self.structure, inlet, self.length_m)
        linear_loss = conduit.linear_pressure_loss_pa
        local_loss = conduit.local_pressure_loss_pa(self.local_losses)
        total_loss = linear_loss + local_loss
        self._conduit = conduit

        return ConduitFlowResult(
            mode=PressureMode.PRESSURE_DROP,
            inlet_flow=inlet,
            outlet_flow=inlet.with_pressure(inlet.pressure_pa - total_loss),
            heat_of_process_w=0.0,
            velocity_m_s=conduit.velocity_m_s,
            reynolds_number=conduit.reynolds_number,
            friction_factor=conduit.friction_factor,
            linear_pressure_loss_pa=linear_loss,
            local_pressure_loss_pa=local_loss,
            total_pressure_loss_pa=total_loss,
            length_m=self.length_m,
            volume_m3=conduit.inner_volume_m3
        )
