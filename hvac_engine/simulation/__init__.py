"""Sequential engine chaining process blocks."""

from hvac_engine.simulation.engine import SequentialProcessingEngine

__all__ = ['SequentialProcessingEngine']
