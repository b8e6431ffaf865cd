"""
HVAC Engine - humid air process calculations

This package models air handling lines as chains of process blocks:
- Humid air and liquid water properties
- Heating, cooling (with condensation), mixing and friction processes
- Inverse solvers for temperature, humidity and flow split targets
- Duct hydraulics
- Sequential engine running the blocks in order
"""

__version__ = "1.0.0"

from .core import *
from .config import *
from .fluids import *
from .processes import *
from .hydraulic import *
from .blocks import *
from .simulation import *
from .solvers import *
from .core import __all__ as _core_all
from .config import __all__ as _config_all
from .fluids import __all__ as _fluids_all
from .processes import __all__ as _processes_all
from .hydraulic import __all__ as _hydraulic_all
from .blocks import __all__ as _blocks_all
from .simulation import __all__ as _simulation_all
from .solvers import __all__ as _solvers_all

__all__ = [
    *_core_all,
    *_config_all,
    *_fluids_all,
    *_processes_all,
    *_hydraulic_all,
    *_blocks_all,
    *_simulation_all,
    *_solvers_all,
]
