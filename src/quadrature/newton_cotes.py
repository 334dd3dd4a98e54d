"""
Fixed-point quadrature rules of the Newton-Cotes family.

A rule is an immutable value holding everything its formula needs; calling
``rule.evaluate(f, a, b)`` (or simply ``rule(f, a, b)``) approximates the
integral of ``f`` over a single interval.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple, Union

import numpy as np

from .tools.errors import ConfigError, DomainError

DTYPE = np.float64

Integrand = Callable[[float], float]

logger = logging.getLogger(__name__)


def _check_bounds(a: float, b: float) -> None:
    if not (math.isfinite(a) and math.isfinite(b)):
        raise DomainError(f"interval bounds must be finite, got a={a} b={b}")


def _sample(f: Callable, pts: np.ndarray, vectorized: bool) -> np.ndarray:
    """
    Evaluate the integrand at ``pts``, one call per point unless vectorized.

    Values that are not real numbers are rejected rather than coerced.
    """
    if not vectorized:
        vals = [f(pt) for pt in pts]
        for pt, val in zip(pts, vals):
            if not isinstance(val, numbers.Real):
                raise DomainError(
                    f"integrand returned {val!r} at x={pt}; expected a real number"
                )
        return np.array(vals, dtype=DTYPE)

    vals = np.asarray(f(pts))
    if not np.issubdtype(vals.dtype, np.number) or np.iscomplexobj(vals):
        raise DomainError(
            f"vectorized integrand returned dtype {vals.dtype}; expected real numbers"
        )
    if vals.shape != pts.shape:
        raise DomainError(
            f"vectorized integrand returned shape {vals.shape} for {len(pts)} points"
        )
    return vals.astype(DTYPE)


@dataclass(frozen=True)
class MidpointRule:
    """
    One-point rule ``(b - a) * f((a + b) / 2)``.

    Kept as its own variant instead of a coefficient table.

    Parameters
    ----------
    name : str, optional
        Label used by catalogs and reports. Default: "midpoint"
    vectorized : bool, optional
        If True, the integrand is called with a numpy array of points.
        Default: False
    """
    name: str = "midpoint"
    vectorized: bool = False

    kind = "direct"

    @property
    def points(self) -> int:
        return 1

    def evaluate(self, f: Integrand, a: float, b: float) -> float:
        _check_bounds(a, b)
        mid = (a + b) / 2
        val = _sample(f, np.array([mid], dtype=DTYPE), self.vectorized)[0]
        return float((b - a) * val)

    def __call__(self, f: Integrand, a: float, b: float) -> float:
        return self.evaluate(f, a, b)


@dataclass(frozen=True)
class NewtonCotesRule:
    """
    Newton-Cotes rule over equally spaced points.

    The interval ``[a, b]`` is cut into ``degree`` equal segments and the
    rule samples the integrand at the segment boundaries with indices
    ``open, open + 1, ..., degree - open``:

        estimate = (b - a) / sum(c) * sum_j c_j f(a + i_j (b - a) / degree)

    Open rules skip both endpoints, so ``degree = len(c) - 1 + 2 * open``.
    Build instances with :func:`newton_cotes`, which validates the table.

    Parameters
    ----------
    coefficients : tuple of float
        Weights ``c_0 .. c_{k-1}``, one per evaluation point.
    open : bool, optional
        Exclude the interval endpoints. Default: False
    vectorized : bool, optional
        If True, the integrand is called once with a numpy array of all
        ``k`` points and must return ``k`` values in the same order.
        Default: False
    name : str, optional
        Label used by catalogs and reports.

    Attributes
    ----------
    degree : int
        Number of equal segments the interval is divided into.
    """
    coefficients: Tuple[float, ...]
    open: bool = False
    vectorized: bool = False
    name: Optional[str] = None
    degree: int = field(init=False)

    kind = "newton-cotes"

    def __post_init__(self):
        object.__setattr__(self, "coefficients",
                           tuple(float(c) for c in self.coefficients))
        object.__setattr__(self, "open", bool(self.open))
        object.__setattr__(self, "degree",
                           len(self.coefficients) - 1 + 2 * int(self.open))

    @property
    def points(self) -> int:
        """Number of integrand evaluations per interval."""
        return len(self.coefficients)

    @property
    def weight_sum(self) -> float:
        return float(np.sum(np.asarray(self.coefficients, dtype=DTYPE)))

    @property
    def indices(self) -> np.ndarray:
        first = int(self.open)
        return np.arange(first, self.degree - first + 1)

    def positions(self, a: float, b: float) -> np.ndarray:
        """Evaluation points of the rule on ``[a, b]``."""
        idx = self.indices
        if self.degree == 0:
            # single closed point: the left endpoint
            return np.full(idx.shape, a, dtype=DTYPE)
        return a + idx * (b - a) / self.degree

    def evaluate(self, f: Integrand, a: float, b: float) -> float:
        """
        Approximate the integral of ``f`` over ``[a, b]``.

        Parameters
        ----------
        f : Callable
            Integrand, evaluable at every point the rule requests.
        a : float
            Lower bound.
        b : float
            Upper bound. ``b < a`` flips the sign of the result.

        Returns
        -------
        float
            Area estimate.

        Raises
        ------
        DomainError
            If a bound is not finite, the weights sum to zero or the
            integrand returns something other than real numbers.
        """
        _check_bounds(a, b)
        weight_sum = self.weight_sum
        if weight_sum == 0:
            raise DomainError(
                f"coefficients {self.coefficients} sum to zero; the rule is undefined"
            )

        vals = _sample(f, self.positions(a, b), self.vectorized)
        weights = np.asarray(self.coefficients, dtype=DTYPE)
        return float((b - a) / weight_sum * np.dot(weights, vals))

    def __call__(self, f: Integrand, a: float, b: float) -> float:
        return self.evaluate(f, a, b)


QuadratureRule = Union[MidpointRule, NewtonCotesRule]


def newton_cotes(coefficients: Sequence[float],
                 open: bool = False,
                 vectorized: bool = False,
                 name: Optional[str] = None) -> NewtonCotesRule:
    """
    Build a Newton-Cotes rule from a coefficient table.

    Parameters
    ----------
    coefficients : sequence of float
        Weights, one per evaluation point. Must be non-empty, finite and
        must not sum to zero.
    open : bool, optional
        Build an open rule (endpoints excluded). Default: False
    vectorized : bool, optional
        Call the integrand once per interval with an array of points.
        Default: False
    name : str, optional
        Label for the rule.

    Returns
    -------
    NewtonCotesRule
        Immutable rule closed over the table, the open flag and the degree.

    Raises
    ------
    ConfigError
        If the table is empty, not one-dimensional, non-finite or sums to zero.

    Examples
    --------
    >>> boole = newton_cotes([7, 32, 12, 32, 7])
    >>> boole.degree
    4
    """
    try:
        table = np.asarray(coefficients, dtype=DTYPE)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"coefficients must be real numbers, got {coefficients!r}") from exc

    if table.ndim != 1:
        raise ConfigError(f"coefficients must be a flat sequence, got shape {table.shape}")
    if table.size == 0:
        raise ConfigError("coefficient table must not be empty")
    if not np.all(np.isfinite(table)):
        raise ConfigError(f"coefficients must be finite, got {table.tolist()}")
    if np.sum(table) == 0:
        raise ConfigError(f"coefficients {table.tolist()} sum to zero")

    rule = NewtonCotesRule(tuple(table.tolist()), open=open,
                           vectorized=vectorized, name=name)
    logger.debug("built %s rule %s: degree=%d points=%d",
                 "open" if rule.open else "closed", name or "<anonymous>",
                 rule.degree, rule.points)
    return rule
