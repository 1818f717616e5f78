"""
Custom exceptions for the network module.

Errors raised by graph construction, route searches and input checks.

Unreachable airports and disconnected networks are NOT errors: they are
reported as ``None`` routes or partial trees.
"""


class NetworkError(Exception):
    """Base exception for all network module errors."""

    pass


class UnknownAirportError(NetworkError):
    """Raised when an operation references an airport code not in the graph."""

    def __init__(self, code: str, context: str = "graph") -> None:
        self.code = code
        self.context = context
        message = f"Airport '{code}' not found in {context}"
        super().__init__(message)


# Graph-theory name for the same failure
UnknownVertex = UnknownAirportError


class ValidationError(NetworkError):
    """Base exception for rejected inputs."""

    pass


class EmptyFlightsError(ValidationError):
    """The flight table has no rows."""

    def __init__(self, message: str = "Flight table has no rows") -> None:
        super().__init__(message)


class MissingColumnsError(ValidationError):
    """The flight table lacks columns needed to build the graph."""

    def __init__(self, missing: set[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required columns: {', '.join(sorted(missing))}")


class InvalidStopsError(ValidationError):
    """Raised when a stop count for a constrained search is negative."""

    def __init__(self, stops: int) -> None:
        self.stops = stops
        message = f"Invalid number of stops: {stops} (must be >= 0)"
        super().__init__(message)
