"""Fixed-value producer exposing only an output connector."""

from typing import Generic, Optional, Type, TypeVar

from hvac_engine.blocks.connector import Connector
from hvac_engine.core.validators import require_not_none

T = TypeVar('T')


class SimpleDataSource(Generic[T]):
    """
    Holds one value for downstream blocks to bind to.

    Example:
        >>> source = SimpleDataSource(2500.0)
        >>> heater = HeatingBlock(HeatingMode.FROM_POWER, driver=source)
    """

    def __init__(self, data: T, data_type: Optional[Type[T]] = None, name: Optional[str] = None):
        require_not_none(data, "data")
        data_type = data_type or (float if isinstance(data, (int, float)) else type(data))
        self._output = Connector(data_type, data, name=name or f"{data_type.__name__}-source")

    def get_output_connector(self) -> Connector[T]:
        return self._output

    def set_data(self, data: T) -> None:
        self._output.set_data(data)

    def get_data(self) -> T:
        return self._output.get_data()
