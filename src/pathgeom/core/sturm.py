"""Sturm sequences, real root isolation and Newton refinement.

Sturm's theorem: for the sequence p0 = p, p1 = p', p(i+1) = -rem(p(i-1), p(i)),
the number of distinct real roots of p in (a, b] equals V(a) - V(b), where
V(x) counts sign changes along the sequence evaluated at x (zeros skipped).

Root isolation bisects (start, end] with an explicit LIFO work queue until
every emitted interval holds exactly one root and is at most eps wide. Each
interval is then refined to a single root with Newton-Raphson.

When p has repeated roots the sequence ends in gcd(p, p') instead of a
constant. Sign changes at points that are not roots of p are unchanged by
dividing the whole sequence through by that gcd, so the counts above still
give the number of distinct roots. Rounding near a multiple root can still
make p evaluate to exactly zero away from the root, so find_real_roots
divides the gcd out and isolates on the square-free part instead.
"""

import logging
import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from pathgeom.config import SolverConfig
from pathgeom.core.poly import Poly

logger = logging.getLogger(__name__)

MACHINE_EPSILON = sys.float_info.epsilon

_DEFAULT_SOLVER = SolverConfig()


class Sign(Enum):
    """Sign of a polynomial value."""

    ZERO = auto()
    POSITIVE = auto()
    NEGATIVE = auto()

    @classmethod
    def of(cls, value: float) -> "Sign":
        if value == 0.0:
            return cls.ZERO
        if value < 0.0:
            return cls.NEGATIVE
        return cls.POSITIVE


@dataclass(frozen=True, slots=True)
class _Check:
    """Interval whose endpoint counts may still be unknown."""

    start: float
    end: float
    start_changes: int | None = None
    end_changes: int | None = None


@dataclass(frozen=True, slots=True)
class _Split:
    """Interval known to hold more than one root, or one root but too wide."""

    start: float
    end: float
    start_changes: int
    end_changes: int


class _Outcome(Enum):
    DISCARD = auto()
    EMIT = auto()
    SPLIT = auto()


class SturmSeq:
    """Sturm sequence of a polynomial.

    Example:
        >>> seq = SturmSeq(Poly([1.0, -6.0, 11.0, -6.0]))  # (x-1)(x-2)(x-3)
        >>> seq.count_roots(0.0, 4.0)
        3
    """

    def __init__(self, poly: Poly) -> None:
        sequence = [poly]

        if poly.degree() > 0:
            divided = poly
            last = poly.derivative()
            while True:
                _, remainder = divided.div(last)
                if remainder.is_zero():
                    break
                sequence.append(last)
                divided = last
                last = -remainder
            sequence.append(last)

        self._seq: tuple[Poly, ...] = tuple(sequence)

    @property
    def source(self) -> Poly:
        return self._seq[0]

    def __len__(self) -> int:
        return len(self._seq)

    def __getitem__(self, index: int) -> Poly:
        return self._seq[index]

    def __iter__(self) -> Iterator[Poly]:
        return iter(self._seq)

    def eval(self, x: float) -> list[float]:
        return [p.eval(x) for p in self._seq]

    def signs_at(self, x: float) -> list[Sign]:
        return [Sign.of(v) for v in self.eval(x)]

    def sign_changes_at(self, x: float) -> int:
        """Count sign changes along the sequence at x.

        Zero values are dropped before counting, so passing through zero
        between two opposite signs counts as a single change.
        """
        changes = 0
        last: Sign | None = None
        for sign in self.signs_at(x):
            if sign is Sign.ZERO:
                continue
            if last is not None and sign is not last:
                changes += 1
            last = sign
        return changes

    def count_roots(self, start: float, end: float) -> int:
        """Number of distinct real roots within (start, end]."""
        return self.sign_changes_at(start) - self.sign_changes_at(end)

    def _check(
        self,
        start: float,
        end: float,
        start_changes: int | None,
        end_changes: int | None,
        eps: float,
    ) -> tuple[_Outcome, int, int]:
        s = start_changes if start_changes is not None else self.sign_changes_at(start)
        e = end_changes if end_changes is not None else self.sign_changes_at(end)

        if s <= e:
            return _Outcome.DISCARD, s, e

        if s - e == 1 and end - start <= eps:
            return _Outcome.EMIT, s, e

        return _Outcome.SPLIT, s, e

    def isolate_real_roots_iter(
        self,
        start: float,
        end: float,
        eps: float,
        max_iterations: int = _DEFAULT_SOLVER.isolation_max_iterations,
    ) -> Iterator[tuple[float, float]]:
        """Isolate the real roots within (start, end].

        Yields left-open right-closed intervals in ascending order. Each
        interval holds exactly one distinct root and is at most eps wide.
        Passing eps >= end - start accepts the first interval that isolates
        a root without narrowing it further.

        Two safeguards keep the loop finite on pathological input: at most
        max_iterations tasks are processed, and an interval too narrow to be
        bisected in floating point is yielded as it is.

        Args:
            start: Exclusive lower bound
            end: Inclusive upper bound
            eps: Maximum width of an emitted interval
            max_iterations: Cap on processed work-queue tasks

        Raises:
            ValueError: If start or end is not finite, or start > end
        """
        if not (math.isfinite(start) and math.isfinite(end)):
            raise ValueError(f"Isolation bounds must be finite, got ({start}, {end}]")
        if start > end:
            raise ValueError(f"Isolation start {start} is greater than end {end}")

        queue: list[_Check | _Split] = [_Check(start, end)]
        iterations = 0

        while queue:
            iterations += 1
            if iterations > max_iterations:
                logger.warning(
                    "Root isolation stopped after %d tasks with %d pending",
                    max_iterations,
                    len(queue),
                )
                return

            task = queue.pop()

            if isinstance(task, _Check):
                outcome, s, e = self._check(
                    task.start, task.end, task.start_changes, task.end_changes, eps
                )
                if outcome is _Outcome.EMIT:
                    yield (task.start, task.end)
                elif outcome is _Outcome.SPLIT:
                    queue.append(_Split(task.start, task.end, s, e))
                continue

            s, e = task.start_changes, task.end_changes
            mid = (task.start + task.end) / 2.0
            if not task.start < mid < task.end:
                logger.debug(
                    "Interval (%r, %r] cannot be bisected further, %d roots",
                    task.start,
                    task.end,
                    s - e,
                )
                yield (task.start, task.end)
                continue

            roots = s - e
            outcome, _, m = self._check(task.start, mid, s, None, eps)

            # The right half is pushed first so the left half is handled
            # first and intervals come out in ascending order.
            if outcome is _Outcome.DISCARD:
                queue.append(_Check(mid, task.end, m, e))
            elif outcome is _Outcome.EMIT:
                if roots > 1:
                    queue.append(_Check(mid, task.end, m, e))
                yield (task.start, mid)
            else:
                if roots > s - m:
                    queue.append(_Check(mid, task.end, m, e))
                queue.append(_Split(task.start, mid, s, m))

    def isolate_real_roots(
        self,
        start: float,
        end: float,
        eps: float,
        max_iterations: int = _DEFAULT_SOLVER.isolation_max_iterations,
    ) -> list[tuple[float, float]]:
        return list(self.isolate_real_roots_iter(start, end, eps, max_iterations))


def dyadic_seeds(start: float, end: float, depth: int) -> Iterator[float]:
    """Yield Newton seeds for an interval, coarsest first.

    Both endpoints come first, then the midpoint, then the quarter points,
    then the eighth points, and so on for depth levels.
    """
    yield start
    yield end
    width = end - start
    for level in range(1, depth + 1):
        n = 2**level
        for k in range(1, n, 2):
            yield start + width * k / n


def _evaluation_scale(poly: Poly, x: float) -> float:
    """Magnitude of the terms of poly at x, the rounding error bound of Horner's method."""
    ax = abs(x)
    acc = 0.0
    for c in poly.coefficients:
        acc = acc * ax + abs(c)
    return acc


def _newton(poly: Poly, derivative: Poly, seed: float, max_iterations: int) -> float | None:
    x = seed
    for _ in range(max_iterations):
        fx = poly.eval(x)
        if abs(fx) <= MACHINE_EPSILON * _evaluation_scale(poly, x):
            return x

        dfx = derivative.eval(x)
        if dfx == 0.0:
            # Local extremum of poly, not a root.
            return None

        step = fx / dfx
        x -= step
        if not math.isfinite(x):
            return None
        if abs(step) <= MACHINE_EPSILON * max(1.0, abs(x)):
            return x
    return None


def newton_find_root_in(
    poly: Poly,
    start: float,
    end: float,
    max_iterations: int = _DEFAULT_SOLVER.newton_max_iterations,
    seed_depth: int = _DEFAULT_SOLVER.newton_seed_depth,
    derivative: Poly | None = None,
) -> float | None:
    """Refine the root inside (start, end] with Newton-Raphson.

    Seeds are tried in dyadic_seeds order. A seed fails when the derivative
    vanishes, the iterate diverges, the iteration cap is hit, or the result
    converges outside the interval.

    Args:
        poly: Polynomial whose root is sought
        start: Lower interval bound
        end: Upper interval bound
        max_iterations: Newton iterations per seed
        seed_depth: Dyadic levels of interior seeds
        derivative: Precomputed derivative of poly

    Returns:
        The root, or None if every seed failed
    """
    if derivative is None:
        derivative = poly.derivative()

    for seed in dyadic_seeds(start, end, seed_depth):
        root = _newton(poly, derivative, seed, max_iterations)
        if root is not None and start < root <= end:
            return root
    return None


def _bisect(poly: Poly, start: float, end: float, max_iterations: int) -> float:
    lo, hi = start, end
    f_lo = poly.eval(lo)
    for _ in range(max_iterations):
        mid = (lo + hi) / 2.0
        if not lo < mid < hi:
            break
        f_mid = poly.eval(mid)
        if f_mid == 0.0:
            return mid
        if (f_mid < 0.0) == (f_lo < 0.0):
            lo, f_lo = mid, f_mid
        else:
            hi = mid
    return (lo + hi) / 2.0


def refine_root(
    poly: Poly,
    start: float,
    end: float,
    config: SolverConfig | None = None,
    derivative: Poly | None = None,
) -> float:
    """Turn a root-isolating interval into a single root.

    Newton-Raphson is tried first. If every seed fails, the interval still
    provably holds a root, so it falls back to sign bisection when the
    endpoint values bracket a sign change (odd multiplicity) and to the
    interval midpoint otherwise (even multiplicity, at most eps/2 away).
    """
    config = config or _DEFAULT_SOLVER
    root = newton_find_root_in(
        poly,
        start,
        end,
        max_iterations=config.newton_max_iterations,
        seed_depth=config.newton_seed_depth,
        derivative=derivative,
    )
    if root is not None:
        return root

    f_start, f_end = poly.eval(start), poly.eval(end)
    if f_start * f_end < 0.0:
        logger.debug("Newton failed in (%r, %r], bisecting", start, end)
        return _bisect(poly, start, end, config.newton_max_iterations)

    logger.debug("Newton failed in (%r, %r], using midpoint", start, end)
    return (start + end) / 2.0


def find_real_roots(
    poly: Poly, start: float, end: float, config: SolverConfig | None = None
) -> list[float]:
    """Find the distinct real roots of poly within (start, end].

    Args:
        poly: Non-constant polynomial
        start: Exclusive lower bound (finite)
        end: Inclusive upper bound (finite)
        config: Solver settings (defaults when None)

    Returns:
        Roots in ascending order
    """
    config = config or _DEFAULT_SOLVER
    sturm = SturmSeq(poly)

    common = sturm[-1]
    if common.degree() > 0:
        poly, _ = poly.div(common)
        logger.debug("Repeated roots, isolating on square-free part %r", poly)
        sturm = SturmSeq(poly)

    derivative = poly.derivative()

    roots = [
        refine_root(poly, a, b, config, derivative)
        for a, b in sturm.isolate_real_roots_iter(
            start, end, config.isolation_eps, config.isolation_max_iterations
        )
    ]
    return sorted(roots)
