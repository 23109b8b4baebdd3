"""Core geometry for pathgeom.

This module contains the numeric and geometric machinery:

- Poly: real polynomial algebra
- SturmSeq: Sturm sequence root isolation, with Newton refinement
- Segment, Bezier: curve primitives with nearest-point queries
- Shape: editable chain of curve points
- ShapeEditor: interactive edits (snap, click, point actions)
"""

from pathgeom.core.bezier import Bezier, quad_to_cubic
from pathgeom.core.curve import (
    Curve,
    curve_at,
    curve_between,
    curve_kind,
    curve_nearest_to,
    curve_to_dict,
)
from pathgeom.core.editing import (
    PointAction,
    ShapeEditor,
    convert_to_corner,
    convert_to_smooth,
)
from pathgeom.core.poly import Poly, RealRoots, RootKind
from pathgeom.core.segment import Segment
from pathgeom.core.shape import Shape
from pathgeom.core.sturm import (
    Sign,
    SturmSeq,
    find_real_roots,
    newton_find_root_in,
    refine_root,
)

__all__ = [
    # Polynomials and roots
    "Poly",
    "RealRoots",
    "RootKind",
    "Sign",
    "SturmSeq",
    "find_real_roots",
    "newton_find_root_in",
    "refine_root",
    # Curves
    "Bezier",
    "Curve",
    "Segment",
    "curve_at",
    "curve_between",
    "curve_kind",
    "curve_nearest_to",
    "curve_to_dict",
    "quad_to_cubic",
    # Shapes and editing
    "PointAction",
    "Shape",
    "ShapeEditor",
    "convert_to_corner",
    "convert_to_smooth",
]
