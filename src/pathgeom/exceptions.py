"""Exception hierarchy for pathgeom."""


class PathGeomError(Exception):
    """Base exception for all pathgeom errors."""

    pass


class GeometryError(PathGeomError):
    """Errors in geometric calculations."""

    pass


class ParameterError(GeometryError, ValueError):
    """Curve parameter outside the [0, 1] domain."""

    def __init__(self, t: float) -> None:
        self.t = t
        super().__init__(f"Curve parameter t={t!r} is outside [0, 1]")


class NonFiniteCoefficientError(GeometryError, ValueError):
    """Polynomial built from a NaN or infinite coefficient.

    This always means an upstream geometry bug; the library never recovers
    from it.
    """

    def __init__(self, coefficients: list[float]) -> None:
        self.coefficients = coefficients
        super().__init__(f"Polynomial coefficients must be finite, got {coefficients!r}")


class ShapeError(PathGeomError):
    """Errors related to shape editing."""

    pass


class CurveIndexError(ShapeError, IndexError):
    """Requested curve does not exist in the shape."""

    def __init__(self, index: int, curve_count: int) -> None:
        self.index = index
        self.curve_count = curve_count
        super().__init__(f"Curve index {index} out of range for shape with {curve_count} curves")


class ShapeFileError(PathGeomError):
    """Errors related to shape file loading or saving."""

    pass


class ShapeLoadError(ShapeFileError):
    """Error loading a shape file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load shape '{path}': {reason}")


class ShapeSaveError(ShapeFileError):
    """Error saving a shape file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save shape '{path}': {reason}")
