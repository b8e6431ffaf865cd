"""Duct geometry, materials and friction losses."""

from hvac_engine.hydraulic.conduit import (
    HydraulicConduit,
    LocalLossFactorData,
    LocalLossInputData,
    LocalLossPressureData,
)
from hvac_engine.hydraulic.materials import MaterialData, MaterialLayer, Materials
from hvac_engine.hydraulic.structures import (
    CircularStructure,
    ConduitStructure,
    EllipticStructure,
    RectangularStructure,
)

__all__ = [
    'HydraulicConduit',
    'LocalLossFactorData',
    'LocalLossInputData',
    'LocalLossPressureData',
    'MaterialData',
    'MaterialLayer',
    'Materials',
    'CircularStructure',
    'ConduitStructure',
    'EllipticStructure',
    'RectangularStructure',
]
