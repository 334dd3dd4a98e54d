"""
Convergence studies: how the composite estimate approaches the true integral
as the number of sub-intervals grows, and what each step costs in integrand
evaluations.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from scipy.integrate import quad as scipy_quad

from .composite_integrator import CompositeIntegrator
from .newton_cotes import DTYPE, QuadratureRule
from .tools.catalog import RuleCatalog
from .tools.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ConvergenceTable:
    """
    Results of a convergence study for one rule.

    Attributes
    ----------
    rule_name : str
        Label of the rule.
    reference : float
        Value the estimates are compared with.
    n : np.ndarray
        Subdivision counts, in the order they were run.
    estimates : np.ndarray
        Composite estimates.
    errors : np.ndarray
        Absolute errors ``|estimate - reference|``.
    evaluations : np.ndarray
        Integrand evaluations spent on each estimate.
    """
    rule_name: str
    reference: float
    n: np.ndarray
    estimates: np.ndarray
    errors: np.ndarray
    evaluations: np.ndarray

    def observed_order(self) -> float:
        """
        Least-squares slope of ``-log(error)`` against ``log(n)``.

        Zero errors carry no slope information and are skipped; returns
        ``nan`` when fewer than two points remain.
        """
        keep = self.errors > 0
        if np.count_nonzero(keep) < 2:
            return float("nan")
        slope, _ = np.polyfit(np.log(self.n[keep]), np.log(self.errors[keep]), 1)
        return float(-slope)

    def is_monotone(self) -> bool:
        """True if the error never grows from one run to the next."""
        return bool(np.all(np.diff(self.errors) <= 0))

    def as_rows(self) -> List[Tuple[int, float, float, int]]:
        return [(int(n), float(est), float(err), int(ev))
                for n, est, err, ev in zip(self.n, self.estimates,
                                           self.errors, self.evaluations)]


class ConvergenceStudy:
    """
    Run a composite rule for a sequence of subdivision counts.

    Parameters
    ----------
    fun : Callable
        Function to integrate.
    a, b : float
        Interval bounds.
    exact : float, optional
        Known value of the integral. If None, ``scipy.integrate.quad`` supplies
        the reference. Default: None
    integrator : CompositeIntegrator, optional
        Integrator to drive. Default: a fresh ``CompositeIntegrator()``
    verbose : bool, optional
        If True, logs each estimate at INFO level. Default: False
    """
    def __init__(self, fun: Callable, a: float, b: float,
                 exact: Optional[float] = None,
                 integrator: Optional[CompositeIntegrator] = None,
                 verbose: bool = False):
        self.fun = fun
        self.a = a
        self.b = b
        self.integrator = integrator if integrator is not None else CompositeIntegrator()
        self.verbose = verbose
        if exact is None:
            exact, abserr = scipy_quad(fun, a, b)
            if verbose:
                logger.info("reference from quad: %r (abserr %.3e)", exact, abserr)
        self.reference = float(exact)

    @staticmethod
    def _check_counts(ns: Iterable[int]) -> np.ndarray:
        counts = list(ns)
        if not counts:
            raise ConfigError("at least one subdivision count is required")
        for n in counts:
            if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
                raise ConfigError(f"subdivision counts must be positive integers, got {n!r}")
        return np.asarray(counts, dtype=int)

    def run(self, rule: Union[str, QuadratureRule], ns: Sequence[int]) -> ConvergenceTable:
        """
        Estimate the integral once per entry of ``ns``.

        Returns
        -------
        ConvergenceTable
        """
        counts = self._check_counts(ns)
        resolved = self.integrator.resolve(rule)
        points = getattr(resolved, "points", 1)
        name = getattr(resolved, "name", None) or (rule if isinstance(rule, str) else repr(resolved))

        estimates = np.empty(len(counts), dtype=DTYPE)
        for k, n in enumerate(counts):
            estimates[k] = self.integrator.integrate(self.fun, self.a, self.b, int(n), resolved)
            if self.verbose:
                logger.info("%s n=%d  est=%r  err=%.3e", name, n, estimates[k],
                            abs(estimates[k] - self.reference))

        return ConvergenceTable(
            rule_name=name,
            reference=self.reference,
            n=counts,
            estimates=estimates,
            errors=np.abs(estimates - self.reference),
            evaluations=counts * points,
        )

    def compare(self, catalog: RuleCatalog, ns: Sequence[int],
                names: Optional[Sequence[str]] = None) -> Dict[str, ConvergenceTable]:
        """Run the same study for several rules of ``catalog``."""
        selected = catalog.names() if names is None else tuple(names)
        return {name: self.run(catalog.get(name), ns) for name in selected}
