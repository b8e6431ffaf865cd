"""
Tagged process result records.

Every result carries its process_type tag, the mode that says which driver
was solved for, the inlet and outlet flows and the heat of the process.
Kind-specific data (condensate, recirculation flows, pressure losses) is
carried as extra payload fields. Consumers select results by process_type;
no result defines behaviour of its own.

Sign convention for heat_of_process_w: positive when heat is added to the
air stream, negative when it is removed.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from hvac_engine.core.enums import (
    CoolingMode,
    HeatingMode,
    MixingMode,
    PressureMode,
    ProcessType,
)
from hvac_engine.fluids.flows import CondensateFlow, HumidAirFlow
from hvac_engine.processes.coolant import CoolantData


@dataclass(frozen=True)
class ProcessResult:
    """Fields shared by all process results."""
    mode: object
    inlet_flow: HumidAirFlow
    outlet_flow: HumidAirFlow
    heat_of_process_w: float
    process_type: Optional[ProcessType] = field(default=None, init=False)


@dataclass(frozen=True)
class HeatingResult(ProcessResult):
    mode: HeatingMode
    process_type: ProcessType = field(default=ProcessType.HEATING, init=False)


@dataclass(frozen=True)
class CoolingResult(ProcessResult):
    mode: CoolingMode
    condensate_flow: CondensateFlow
    coolant: CoolantData
    process_type: ProcessType = field(default=ProcessType.COOLING, init=False)


@dataclass(frozen=True)
class MixingResult(ProcessResult):
    mode: MixingMode
    recirculation_flows: Tuple[HumidAirFlow, ...] = ()
    process_type: ProcessType = field(default=ProcessType.MIXING, init=False)


@dataclass(frozen=True)
class PressureChangeResult(ProcessResult):
    mode: PressureMode
    pressure_drop_pa: float = 0.0
    process_type: ProcessType = field(default=ProcessType.PRESSURE_CHANGE, init=False)


@dataclass(frozen=True)
class ConduitFlowResult(ProcessResult):
    """Duct flow with its hydraulic losses; heat is always zero."""
    mode: PressureMode
    velocity_m_s: float = 0.0
    reynolds_number: float = 0.0
    friction_factor: float = 0.0
    linear_pressure_loss_pa: float = 0.0
    local_pressure_loss_pa: float = 0.0
    total_pressure_loss_pa: float = 0.0
    length_m: float = 0.0
    volume_m3: float = 0.0
    process_type: ProcessType = field(default=ProcessType.CONDUIT_FLOW, init=False)
