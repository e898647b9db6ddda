"""Exception hierarchy for Curvebool."""


class CurveboolError(Exception):
    """Base exception for all Curvebool errors."""

    pass


class CurveError(CurveboolError):
    """Errors related to curve construction or manipulation."""

    pass


class InvalidCurveError(CurveError):
    """Curve definition is inconsistent."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid curve: {reason}")


class TrimError(CurveError):
    """Trim parameter lies outside the open curve domain."""

    def __init__(self, parameter: float, domain: tuple[float, float]) -> None:
        self.parameter = parameter
        self.domain = domain
        super().__init__(
            f"Cannot trim at {parameter!r}: parameter must lie strictly inside "
            f"domain [{domain[0]!r}, {domain[1]!r}]"
        )


class IntersectionError(CurveboolError):
    """Errors raised while locating curve-curve crossings."""

    pass


class SolverError(IntersectionError):
    """Numerical refinement of a crossing did not converge."""

    def __init__(self, iterations: int, residual: float) -> None:
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f"Intersection solver did not converge after {iterations} iterations "
            f"(residual {residual:.3e})"
        )


class TopologyError(CurveboolError):
    """The crossing configuration cannot form a valid node graph."""

    pass


class NoIntersectionError(TopologyError):
    """Fewer than two transversal crossings were found."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"No intersection: found {count} transversal crossing(s); "
            "disjoint and nested curves are not supported"
        )


class OddIntersectionCountError(TopologyError):
    """Two closed curves returned an odd number of crossings."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Odd number of intersections found: {count}")


class InconsistentGraphError(TopologyError):
    """Adjacent traversal nodes do not form an Enter/Exit pair."""

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Inconsistent traversal pair: {first} -> {second}")


class CurveIOError(CurveboolError):
    """Errors related to reading or writing curve documents."""

    pass


class CurveLoadError(CurveIOError):
    """Error loading a curve document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load curves '{path}': {reason}")


class CurveFormatError(CurveIOError):
    """Curve document does not match the expected schema."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid curve document '{path}': {details}")


class RegionSaveError(CurveIOError):
    """Error writing a region document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save regions '{path}': {reason}")
