"""Exception hierarchy for Vectorgeom."""


class VectorGeomError(Exception):
    """Base exception for all Vectorgeom errors."""

    pass


class PathDataError(VectorGeomError):
    """Errors related to SVG path-data import or export."""

    pass


class ParseError(PathDataError):
    """Malformed or unsupported SVG path data."""

    def __init__(self, offending_token: str, position: int, reason: str) -> None:
        self.offending_token = offending_token
        self.position = position
        self.reason = reason
        super().__init__(
            f"Cannot parse path data at offset {position} ({offending_token!r}): {reason}"
        )


class GeometryError(VectorGeomError):
    """Errors in geometric construction or calculations."""

    pass


class InvalidParameterError(GeometryError):
    """A shape or sampling parameter is out of its valid range."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for '{name}' ({value!r}): {reason}")


class InvalidPathError(GeometryError):
    """Path segments violate the path model invariants."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SamplingBudgetError(GeometryError):
    """Flattening a path would exceed the configured sample budget."""

    def __init__(self, limit: int, required: int) -> None:
        self.limit = limit
        self.required = required
        super().__init__(
            f"Sampling needs at least {required} points, budget is {limit}; "
            "increase the resolution value"
        )
