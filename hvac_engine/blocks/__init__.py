"""Process blocks and the connectors that chain them."""

from hvac_engine.blocks.base import ProcessBlock
from hvac_engine.blocks.connector import Connector
from hvac_engine.blocks.cooling import CoolingBlock
from hvac_engine.blocks.duct import AirFlowDuctBlock
from hvac_engine.blocks.heating import HeatingBlock
from hvac_engine.blocks.mixing import MixingBlock, TargetTemperatureMixingBlock
from hvac_engine.blocks.source import SimpleDataSource

__all__ = [
    'ProcessBlock',
    'Connector',
    'CoolingBlock',
    'AirFlowDuctBlock',
    'HeatingBlock',
    'MixingBlock',
    'TargetTemperatureMixingBlock',
    'SimpleDataSource',
]
