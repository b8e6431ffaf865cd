"""Forward process equations and inverse solvers."""

from hvac_engine.processes.coolant import CoolantData
from hvac_engine.processes.cooling import (
    cooling_from_humidity,
    cooling_from_power,
    cooling_from_temperature,
    max_cooling_power,
)
from hvac_engine.processes.heating import (
    heating_from_humidity,
    heating_from_power,
    heating_from_temperature,
)
from hvac_engine.processes.mixing import (
    mix_two_flows_for_target_temperature,
    mixing_of_multiple_flows,
    mixing_of_two_flows,
)
from hvac_engine.processes.pressure_change import pressure_drop_due_to_friction
from hvac_engine.processes.results import (
    ConduitFlowResult,
    CoolingResult,
    HeatingResult,
    MixingResult,
    PressureChangeResult,
    ProcessResult,
)

__all__ = [
    'CoolantData',
    'cooling_from_humidity',
    'cooling_from_power',
    'cooling_from_temperature',
    'max_cooling_power',
    'heating_from_humidity',
    'heating_from_power',
    'heating_from_temperature',
    'mix_two_flows_for_target_temperature',
    'mixing_of_multiple_flows',
    'mixing_of_two_flows',
    'pressure_drop_due_to_friction',
    'ConduitFlowResult',
    'CoolingResult',
    'HeatingResult',
    'MixingResult',
    'PressureChangeResult',
    'ProcessResult',
]
