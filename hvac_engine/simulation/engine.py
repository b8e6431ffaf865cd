"""
Sequential processing engine.

Chains process blocks into a single air handling line and runs them in the
order they were added.

Execution Architecture:
    1. **Wiring**: add_process_node() binds each block's air flow input to the
       output of the previously added block, so the line is fed by the first
       block's own input.
    2. **Run**: run_calculations_for_all_nodes() calls every block exactly once
       in insertion order. There are no retries and no iteration.
    3. **Results**: the results of the last complete run are kept in block
       order; a failed run leaves no results behind.
"""

import logging
import time
from typing import Iterable, List, Optional

from hvac_engine.blocks.base import ProcessBlock
from hvac_engine.core.enums import ProcessType
from hvac_engine.core.exceptions import MissingArgumentError
from hvac_engine.core.validators import require_not_none
from hvac_engine.processes.results import ProcessResult

logger = logging.getLogger(__name__)


class SequentialProcessingEngine:
    """
    Ordered list of process blocks run in one pass.

    Example:
        >>> engine = SequentialProcessingEngine()
        >>> engine.add_process_nodes(mixer, cooler, heater)
        >>> engine.run_calculations_for_all_nodes().outlet_flow.temperature_c
    """

    def __init__(self, blocks: Optional[Iterable[ProcessBlock]] = None):
        self._blocks: List[ProcessBlock] = []
        self._results: List[ProcessResult] = []
        for block in blocks or ():
            self.add_process_node(block)

    def add_process_node(self, block: ProcessBlock) -> int:
        """
        Append a block and bind its air flow input to the previous block.

        Returns:
            Index of the block in the line.
        """
        require_not_none(block, "block")
        if self._blocks:
            block.connect_air_flow_data_source(self._blocks[-1])
        self._blocks.append(block)
        logger.debug(f"Added node {len(self._blocks) - 1}: {block!r}")
        return len(self._blocks) - 1

    def add_process_nodes(self, *blocks: ProcessBlock) -> List[int]:
        return [self.add_process_node(block) for block in blocks]

    def run_calculations_for_all_nodes(self) -> ProcessResult:
        """
        Run every block once, in order.

        Returns:
            Result of the last block.

        Raises:
            MissingArgumentError: If the engine has no blocks.
            HvacEngineError: The first error raised by a block, unchanged.
        """
        if not self._blocks:
            raise MissingArgumentError("Engine has no process blocks to run")

        logger.info(f"Running {len(self._blocks)} process blocks")
        start = time.perf_counter()
        results: List[ProcessResult] = []
        for index, block in enumerate(self._blocks):
            try:
                results.append(block.run_process_calculations())
            except Exception as e:
                self._results = []
                logger.error(f"Block {index} ({block.name}) failed: {e}")
                raise

        self._results = results
        logger.info(f"Engine run completed in {time.perf_counter() - start:.3f} s")
        return results[-1]

    def get_process_results(self) -> List[ProcessResult]:
        return list(self._results)

    def get_results(self, process_type: ProcessType) -> List[ProcessResult]:
        """Results of the last run with the given process type, in block order."""
        return [result for result in self._results if result.process_type == process_type]

    def get_last_result(self) -> Optional[ProcessResult]:
        return self._results[-1] if self._results else None

    def get_all_process_blocks(self) -> List[ProcessBlock]:
        return list(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)
