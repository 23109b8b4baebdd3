"""Internal helpers shared by the parametric curve primitives.

Not intended for public use.
"""

from pathgeom.exceptions import ParameterError


def check_parameter(t: float) -> None:
    """Reject curve parameters outside [0, 1].

    Raises:
        ParameterError: If t is outside [0, 1] (or NaN)
    """
    if not 0.0 <= t <= 1.0:
        raise ParameterError(t)
