import logging

from .newton_cotes import MidpointRule, NewtonCotesRule, QuadratureRule, newton_cotes
from .composite_integrator import CompositeIntegrator
from .convergence import ConvergenceStudy, ConvergenceTable
from .tools.catalog import RuleCatalog, build_standard_catalog
from .tools.errors import ConfigError, DomainError, NotFoundError, QuadratureError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['MidpointRule', 'NewtonCotesRule', 'QuadratureRule', 'newton_cotes',
           'CompositeIntegrator', 'ConvergenceStudy', 'ConvergenceTable',
           'RuleCatalog', 'build_standard_catalog',
           'ConfigError', 'DomainError', 'NotFoundError', 'QuadratureError']
