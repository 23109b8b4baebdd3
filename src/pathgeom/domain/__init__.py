"""Domain models for pathgeom.

This module contains the value types shared by the geometry core:

- Point: 2D point/vector value type
- CornerPoint, SmoothPoint: the two kinds of curve endpoint
- CurvePoint: closed union of the two endpoint kinds
- Nearest: result of a nearest-point query
"""

from pathgeom.domain.curve_point import (
    CornerPoint,
    CurvePoint,
    SmoothPoint,
    curve_point_from_dict,
)
from pathgeom.domain.nearest import Nearest
from pathgeom.domain.point import Point

__all__: list[str] = [
    # Core types
    "Point",
    "CornerPoint",
    "SmoothPoint",
    "CurvePoint",
    "Nearest",
    # Serialization
    "curve_point_from_dict",
]
