"""Fluid properties and flow state classes."""

from hvac_engine.fluids.flows import CondensateFlow, HumidAirFlow

__all__ = ['CondensateFlow', 'HumidAirFlow']
