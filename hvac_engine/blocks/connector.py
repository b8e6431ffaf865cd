"""
Typed data slots linking process blocks.

A Connector holds one value of a declared type. An input connector may be
bound to one upstream (output) connector; binding stores a reference to the
upstream connector only, never to the block that owns it, so blocks can be
built and dropped independently of their consumers.

Lifecycle:
    1. Created empty (or with an initial value) when the block is built.
    2. Optionally bound to an upstream connector.
    3. update_connector_data() pulls the upstream value on each run.
    4. While unbound, set_data() overwrites the value directly.
"""

import numbers
from typing import Any, Generic, Optional, Type, TypeVar

from hvac_engine.core.exceptions import ConnectorDataMissingError
from hvac_engine.core.validators import require_not_none

T = TypeVar('T')


class Connector(Generic[T]):
    """
    Single-slot typed data holder.

    Attributes:
        data_type: Accepted value type. float accepts any real number.
        name: Label used in error messages.

    Example:
        >>> power = Connector(float, 1000.0, name="power")
        >>> power.get_data()
        1000.0
    """

    def __init__(self, data_type: Type[T], data: Optional[T] = None, name: Optional[str] = None):
        self.data_type = require_not_none(data_type, "data_type")
        self.name = name or f"{data_type.__name__}-connector"
        self._data: Optional[T] = None
        self._upstream: Optional['Connector[T]'] = None
        if data is not None:
            self.set_data(data)

    def _accepts(self, value: Any) -> bool:
        if self.data_type is float:
            return isinstance(value, numbers.Real) and not isinstance(value, bool)
        return isinstance(value, self.data_type)

    def set_data(self, data: T) -> None:
        """
        Assign a value directly.

        Raises:
            TypeError: If the value is not of the declared type.
        """
        if data is not None and not self._accepts(data):
            raise TypeError(
                f"Connector '{self.name}' accepts {self.data_type.__name__}, got {type(data).__name__}"
            )
        if data is not None and self.data_type is float:
            data = float(data)
        self._data = data

    def get_data(self) -> T:
        """
        Raises:
            ConnectorDataMissingError: If the connector holds no value.
        """
        if self._data is None:
            raise ConnectorDataMissingError(f"Connector '{self.name}' holds no data")
        return self._data

    def has_data(self) -> bool:
        return self._data is not None

    def bind(self, upstream: 'Connector[T]') -> None:
        """Bind to an upstream connector; the next update pulls its value."""
        require_not_none(upstream, "upstream")
        if upstream is self:
            raise ValueError(f"Connector '{self.name}' cannot be bound to itself")
        self._upstream = upstream

    def unbind(self) -> None:
        self._upstream = None

    def is_bound(self) -> bool:
        return self._upstream is not None

    def update_connector_data(self) -> None:
        """
        Pull the upstream value when bound, otherwise keep the current one.

        Raises:
            ConnectorDataMissingError: If the upstream connector is empty, or
                the connector is unbound and holds nothing.
        """
        if self._upstream is not None:
            self.set_data(self._upstream.get_data())
        elif self._data is None:
            raise ConnectorDataMissingError(
                f"Connector '{self.name}' is neither bound nor set"
            )

    def __repr__(self) -> str:
        return f"Connector(name={self.name!r}, data={self._data!r}, bound={self.is_bound()})"
