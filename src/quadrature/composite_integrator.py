import logging
import math
from typing import Callable, Optional, Union

import numpy as np

from .newton_cotes import DTYPE, QuadratureRule
from .tools.catalog import RuleCatalog
from .tools.errors import ConfigError, DomainError

logger = logging.getLogger(__name__)


class CompositeIntegrator:
    """
    Composite integration: apply one rule on each of ``n`` equal pieces of
    ``[a, b]`` and add the pieces up.

    Parameters
    ----------
    catalog : RuleCatalog, optional
        Used to resolve rules passed by name. Default: None
    verbose : bool, optional
        If True, logs every result at INFO level. Default: False
    """
    def __init__(self, catalog: Optional[RuleCatalog] = None, verbose: bool = False):
        self.catalog = catalog
        self.verbose = verbose

    @staticmethod
    def break_points(a: float, b: float, n: int) -> np.ndarray:
        """
        ``n + 1`` equally spaced points from ``a`` to ``b``.

        The outer points are exactly ``a`` and ``b``.
        """
        pts = a + np.arange(n + 1, dtype=DTYPE) * (b - a) / n
        pts[0], pts[-1] = a, b
        return pts

    def resolve(self, rule: Union[str, QuadratureRule]) -> QuadratureRule:
        if not isinstance(rule, str):
            if not callable(getattr(rule, "evaluate", rule)):
                raise ConfigError(f"rule must be a rule object, a callable or a name, got {rule!r}")
            return rule
        if self.catalog is None:
            raise ConfigError(f"rule '{rule}' given by name but no catalog was provided")
        return self.catalog.get(rule)

    def integrate(self, fun: Callable, a: float, b: float, n: int,
                  rule: Union[str, QuadratureRule]) -> float:
        """
        Integrate ``fun`` over ``[a, b]`` with ``n`` applications of ``rule``.

        Parameters
        ----------
        fun : Callable
            Function to integrate.
        a : float
            Lower bound.
        b : float
            Upper bound.
        n : int
            Number of sub-intervals, at least 1.
        rule : QuadratureRule, Callable or str
            Any object with ``evaluate(f, a, b)``, a plain callable
            ``rule(f, a, b)``, or a name known to the catalog.

        Returns
        -------
        float
            Sum of the rule's estimates, accumulated in ascending order of
            the sub-intervals.
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
            raise ConfigError(f"subdivision count must be a positive integer, got {n!r}")
        if not (math.isfinite(a) and math.isfinite(b)):
            raise DomainError(f"interval bounds must be finite, got a={a} b={b}")

        rule = self.resolve(rule)
        evaluate = getattr(rule, "evaluate", rule)
        pts = self.break_points(a, b, int(n))

        # plain left-to-right accumulation keeps results reproducible
        total = 0.0
        for lo, hi in zip(pts[:-1], pts[1:]):
            total += evaluate(fun, lo, hi)

        if self.verbose:
            logger.info("composite %s: a=%s b=%s n=%d  res=%r",
                        getattr(rule, "name", None) or repr(rule), a, b, n, total)
        return total
