"""Custom exception hierarchy for the HVAC process engine."""


class HvacEngineError(Exception):
    """Base exception for all hvac_engine errors."""
    pass


class MissingArgumentError(HvacEngineError):
    """Raised when a required input is absent at construction or run time."""
    pass


class ConnectorDataMissingError(MissingArgumentError):
    """Raised when a connector is read before it was ever assigned or refreshed."""
    pass


class OutOfBoundsError(HvacEngineError):
    """Raised when a physical quantity violates its documented validity range."""
    pass


class NumericalDivergenceError(HvacEngineError):
    """Raised when the root finder cannot bracket or converge within its iteration ceiling."""
    pass


class InfeasibleConstraintError(HvacEngineError):
    """
    Raised when a target-outcome solve has no solution within the supplied bounds.

    Distinct from NumericalDivergenceError: the function is well-behaved but the
    requested outcome lies outside the achievable range.
    """
    pass


class ConfigurationError(HvacEngineError):
    """Raised for configuration loading/validation errors."""
    pass
