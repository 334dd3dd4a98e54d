"""
Shared pytest fixtures for the quadrature tests.
"""

import logging
import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from quadrature import CompositeIntegrator, build_standard_catalog


@pytest.fixture(scope="session")
def catalog():
    """Standard rules, built once for the whole session."""
    return build_standard_catalog()


@pytest.fixture
def integrator(catalog):
    return CompositeIntegrator(catalog=catalog)


@pytest.fixture
def sin():
    return math.sin


@pytest.fixture(autouse=True)
def reset_quadrature_logging():
    """Start every test with only the NullHandler on the package logger."""
    logger = logging.getLogger("quadrature")
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    yield
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
