"""
Type aliases for static type checking.
"""

from typing import Callable, Protocol, TypeAlias

# Function passed to the root finder
ScalarFunction: TypeAlias = Callable[[float], float]


class OutputConnection(Protocol):
    """Anything exposing an output connector a block input can bind to."""
    def get_output_connector(self) -> "object": ...
