"""Polynomial algebra over real coefficients.

Polynomials are stored as a coefficient tuple, highest degree first:

    Poly([2.0, -6.0, 2.0, -1.0])  ==  2x^3 - 6x^2 + 2x - 1

The canonical zero polynomial is (0.0,). Any other polynomial has a
non-zero leading coefficient, so degree is always len(coefficients) - 1.
All operations return new Poly instances.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from pathgeom.exceptions import NonFiniteCoefficientError

if TYPE_CHECKING:
    from pathgeom.config import SolverConfig
    from pathgeom.core.sturm import SturmSeq


class RootKind(Enum):
    """Shape of a polynomial's real solution set."""

    NONE = auto()
    ANY = auto()
    FINITE = auto()


@dataclass(frozen=True)
class RealRoots:
    """Real roots of a polynomial within a search interval.

    Attributes:
        kind: NONE (no root), ANY (zero polynomial, every x is a root) or
            FINITE (roots are listed in values)
        values: Roots in ascending order, only for FINITE
    """

    kind: RootKind
    values: list[float] = field(default_factory=list)

    @classmethod
    def none(cls) -> "RealRoots":
        return cls(RootKind.NONE)

    @classmethod
    def any(cls) -> "RealRoots":
        return cls(RootKind.ANY)

    @classmethod
    def finite(cls, values: Iterable[float]) -> "RealRoots":
        values = sorted(values)
        if not values:
            return cls.none()
        return cls(RootKind.FINITE, values)

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


class Poly:
    """Real polynomial with finite coefficients, highest degree first."""

    __slots__ = ("_c",)

    def __init__(self, coefficients: Iterable[float] = ()) -> None:
        """Build a polynomial, stripping leading zero terms.

        Args:
            coefficients: Coefficients from the highest degree down to the constant

        Raises:
            NonFiniteCoefficientError: If any coefficient is NaN or infinite
        """
        c = [float(v) for v in coefficients]
        if not all(math.isfinite(v) for v in c):
            raise NonFiniteCoefficientError(c)

        start = 0
        while start < len(c) and c[start] == 0.0:
            start += 1

        self._c: tuple[float, ...] = tuple(c[start:]) or (0.0,)

    @classmethod
    def zero(cls) -> "Poly":
        return cls()

    @property
    def coefficients(self) -> tuple[float, ...]:
        return self._c

    def degree(self) -> int:
        return len(self._c) - 1

    def is_zero(self) -> bool:
        return self._c[0] == 0.0

    def leading(self) -> float:
        return self._c[0]

    def derivative(self) -> "Poly":
        """Term-wise derivative; the derivative of a constant is zero."""
        degree = self.degree()
        if degree == 0:
            return Poly.zero()
        return Poly((degree - i) * c for i, c in enumerate(self._c[:-1]))

    def div(self, divisor: "Poly") -> tuple["Poly", "Poly"]:
        """Polynomial long division.

        Dividing by a higher-degree divisor is not an error: the quotient is
        zero and the remainder is the dividend itself. Sturm sequence
        construction relies on this.

        Args:
            divisor: Non-zero polynomial to divide by

        Returns:
            Tuple of (quotient, remainder) with deg(remainder) < deg(divisor)

        Raises:
            ZeroDivisionError: If divisor is the zero polynomial
        """
        if divisor.is_zero():
            raise ZeroDivisionError("Polynomial division by the zero polynomial")

        if self.degree() < divisor.degree():
            return Poly.zero(), Poly(self._c)

        d = divisor._c
        remainder = list(self._c)
        quotient: list[float] = []

        # Each step eliminates the current leading term of the remainder.
        for _ in range(self.degree() - divisor.degree() + 1):
            q = remainder[0] / d[0]
            quotient.append(q)
            for j in range(1, len(d)):
                remainder[j] -= d[j] * q
            remainder.pop(0)

        return Poly(quotient), Poly(remainder)

    def eval(self, x: float) -> float:
        """Evaluate with Horner's method.

        For infinite x the limit is returned analytically, since Horner's
        method would produce NaN from inf - inf.
        """
        degree = self.degree()
        if degree > 0 and math.isinf(x):
            sign = math.copysign(1.0, self._c[0])
            if x < 0.0 and degree % 2 == 1:
                sign = -sign
            return sign * math.inf

        acc = self._c[0]
        for c in self._c[1:]:
            acc = acc * x + c
        return acc

    __call__ = eval

    def sturm_seq(self) -> "SturmSeq":
        from pathgeom.core.sturm import SturmSeq

        return SturmSeq(self)

    def cauchy_bound(self) -> float:
        """Upper bound on the absolute value of every real root."""
        if self.degree() == 0:
            return 0.0
        lead = abs(self._c[0])
        return 1.0 + max(abs(c) / lead for c in self._c[1:])

    def real_roots(self, config: "SolverConfig | None" = None) -> RealRoots:
        """Find every real root, searching within the Cauchy bound."""
        bound = self.cauchy_bound()
        return self.real_roots_in(-bound, bound, config)

    def real_roots_in(
        self, start: float, end: float, config: "SolverConfig | None" = None
    ) -> RealRoots:
        """Find the real roots within the half-open interval (start, end].

        Linear polynomials are solved directly. Higher degrees go through
        Sturm sequence isolation followed by Newton refinement.

        Args:
            start: Exclusive lower bound (finite)
            end: Inclusive upper bound (finite)
            config: Solver settings (defaults when None)

        Returns:
            RealRoots describing the solution set
        """
        if self.degree() == 0:
            return RealRoots.any() if self.is_zero() else RealRoots.none()

        if self.degree() == 1:
            a, b = self._c
            root = -b / a
            if start < root <= end:
                return RealRoots.finite([root])
            return RealRoots.none()

        from pathgeom.core.sturm import find_real_roots

        return RealRoots.finite(find_real_roots(self, start, end, config))

    def __neg__(self) -> "Poly":
        return Poly(-c for c in self._c)

    def __add__(self, other: "Poly") -> "Poly":
        a, b = self._c, other._c
        size = max(len(a), len(b))
        a = (0.0,) * (size - len(a)) + a
        b = (0.0,) * (size - len(b)) + b
        return Poly(x + y for x, y in zip(a, b, strict=True))

    def __sub__(self, other: "Poly") -> "Poly":
        return self + (-other)

    def __mul__(self, other: "Poly") -> "Poly":
        product = [0.0] * (len(self._c) + len(other._c) - 1)
        for i, x in enumerate(self._c):
            for j, y in enumerate(other._c):
                product[i + j] += x * y
        return Poly(product)

    def __divmod__(self, other: "Poly") -> tuple["Poly", "Poly"]:
        return self.div(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self._c == other._c

    def __hash__(self) -> int:
        return hash(self._c)

    def __repr__(self) -> str:
        return f"Poly({list(self._c)!r})"
