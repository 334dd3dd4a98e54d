"""
Exceptions raised by the quadrature package.

Integrand failures are never wrapped: whatever the caller's function raises
reaches the caller unchanged.
"""


class QuadratureError(Exception):
    """Base class for errors raised by the quadrature package itself."""


class ConfigError(QuadratureError, ValueError):
    """Invalid construction-time parameter (coefficient table, subdivision count)."""


class DomainError(QuadratureError, ArithmeticError):
    """Invalid numeric argument discovered while evaluating a rule."""


class NotFoundError(QuadratureError, LookupError):
    """Unknown rule name requested from a catalog."""
