from hvac_engine.config.loader import (
    config_from_dict,
    get_engine_config,
    load_engine_config,
    reset_engine_config,
    set_engine_config,
)
from hvac_engine.config.models import EngineConfig, ProcessSettings, SolverSettings

__all__ = [
    'EngineConfig',
    'ProcessSettings',
    'SolverSettings',
    'config_from_dict',
    'get_engine_config',
    'load_engine_config',
    'reset_engine_config',
    'set_engine_config',
]
