"""
Named, read-only collections of quadrature rules.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from ..newton_cotes import MidpointRule, QuadratureRule, newton_cotes
from .errors import ConfigError, NotFoundError

# name -> (coefficients, open)
STANDARD_TABLES: Mapping[str, Tuple[Tuple[int, ...], bool]] = MappingProxyType({
    "trapezoid": ((1, 1), False),
    "simpson": ((1, 4, 1), False),
    "boole": ((7, 32, 12, 32, 7), False),
    "milne": ((2, -1, 2), True),
})


class RuleCatalog:
    """
    Immutable mapping from rule name to rule.

    Catalogs are plain values: build one at startup and pass it to the
    components that resolve rules by name.

    Parameters
    ----------
    rules : Mapping[str, QuadratureRule]
        Rules keyed by name. The mapping is copied.
    """
    def __init__(self, rules: Mapping[str, QuadratureRule]):
        for name in rules:
            if not isinstance(name, str) or not name:
                raise ConfigError(f"rule names must be non-empty strings, got {name!r}")
        self._rules = MappingProxyType(dict(rules))

    def get(self, name: str) -> QuadratureRule:
        try:
            return self._rules[name]
        except KeyError:
            raise NotFoundError(
                f"unknown rule '{name}'; available: {', '.join(self.names())}"
            ) from None

    def names(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def with_rule(self, name: str, rule: QuadratureRule) -> "RuleCatalog":
        """Return a new catalog that also holds ``rule`` under ``name``."""
        rules: Dict[str, QuadratureRule] = dict(self._rules)
        rules[name] = rule
        return RuleCatalog(rules)

    def __getitem__(self, name: str) -> QuadratureRule:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleCatalog({list(self._rules)})"


def build_standard_catalog(vectorized: bool = False) -> RuleCatalog:
    """
    Build the catalog of standard rules: midpoint, trapezoid, simpson,
    boole and milne.

    Parameters
    ----------
    vectorized : bool, optional
        Build rules that call the integrand with arrays of points.
        Default: False
    """
    rules: Dict[str, QuadratureRule] = {
        "midpoint": MidpointRule(vectorized=vectorized),
    }
    for name, (coefficients, open_) in STANDARD_TABLES.items():
        rules[name] = newton_cotes(coefficients, open=open_,
                                   vectorized=vectorized, name=name)
    return RuleCatalog(rules)
